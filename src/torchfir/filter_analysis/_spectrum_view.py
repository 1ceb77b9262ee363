import math
from typing import Sequence, Union

import torch
import torch.nn.functional as F
from torch import Tensor

from torchfir._constants import DFT_LENGTH

from ._curve import Curve, as_coefficients


def spectrum_view(
    coefficients: Union[Tensor, Sequence[float]],
    sampling_rate: float,
    dft_length: int = DFT_LENGTH,
) -> Curve:
    r"""
    Magnitude spectrum of a coefficient vector in dB.

    Evaluates the DFT of the coefficients directly at the positive
    frequency bins of an ``M``-point transform. The coefficients are zero
    padded to ``M``; longer vectors are summed over their full length.

    Mathematical Definition
    -----------------------
    For m = 0, 1, ..., M/2 - 1:

    .. math::

        X_m = \sum_n h[n] \left(\cos(2\pi m n / M) - j \sin(2\pi m n / M)\right)

        f_m = m f_s / M, \quad |X_m|_{dB} = 20 \log_{10} |X_m|

    Parameters
    ----------
    coefficients : Tensor or sequence of float
        Non-empty 1-D coefficient vector.
    sampling_rate : float
        Sampling rate in Hz.
    dft_length : int, optional
        Transform length ``M``. Must be a positive even integer.
        Default is 256.

    Returns
    -------
    Curve
        ``M / 2`` frequencies in Hz and magnitudes in dB. Bins where the
        magnitude is exactly zero are ``-inf``.

    Notes
    -----
    The direct evaluation costs O(N M), which is negligible for the small
    fixed transform lengths used to inspect a design.

    References
    ----------
    - Smith, S.W. *The Scientist and Engineer's Guide to Digital Signal
      Processing*, ch. 8. California Technical Publishing, 1997.
    """
    coefficients = as_coefficients(coefficients)

    if dft_length <= 0 or dft_length % 2 != 0:
        raise ValueError(
            f"dft_length must be a positive even integer, got {dft_length}"
        )

    padded = F.pad(
        coefficients, (0, max(dft_length - coefficients.numel(), 0))
    )

    n = torch.arange(padded.numel(), dtype=padded.dtype, device=padded.device)
    m = torch.arange(
        dft_length // 2, dtype=padded.dtype, device=padded.device
    )
    theta = 2.0 * math.pi * torch.outer(m, n) / dft_length

    re = (padded * torch.cos(theta)).sum(dim=-1)
    im = -(padded * torch.sin(theta)).sum(dim=-1)
    magnitude = 20.0 * torch.log10(torch.sqrt(re**2 + im**2))

    return Curve(m * (sampling_rate / dft_length), magnitude)
