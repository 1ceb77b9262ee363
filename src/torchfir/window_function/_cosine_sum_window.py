import math
from typing import Optional, Sequence

import torch
from torch import Tensor

from ._window_sampling import sample_window


def cosine_sum(n: Tensor, length: float, coeffs: Sequence[float]) -> Tensor:
    """Pointwise cosine-sum window ``sum_k (-1)^k a_k cos(2 pi k n / L)``."""
    result = torch.full_like(n, coeffs[0])

    for k, a in enumerate(coeffs[1:], start=1):
        term = a * torch.cos(2.0 * math.pi * k * n / length)
        result = result - term if k % 2 else result + term

    return result


def cosine_sum_window(
    tap_count: int,
    coeffs: Sequence[float],
    *,
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> Tensor:
    """
    General cosine-sum window function (symmetric).

    Mathematical Definition
    -----------------------
    With L = tap_count - 1:

        w[n] = sum_{k=0}^{K-1} (-1)^k * coeffs[k] * cos(2 * pi * k * n / L)

    for n = 0, 1, ..., tap_count - 1.

    Special Cases
    -------------
    - coeffs = [0.5, 0.5]: Hann window
    - coeffs = [25/46, 21/46]: Hamming window
    - coeffs = [0.42, 0.5, 0.08]: Blackman window

    Parameters
    ----------
    tap_count : int
        Number of points in the output window. Must be non-negative.
    coeffs : sequence of float
        Magnitudes of the cosine terms. Signs alternate starting with +.
    dtype : torch.dtype, optional
        The desired data type of the returned tensor. Defaults to float64.
    device : torch.device, optional
        The desired device of the returned tensor.

    Returns
    -------
    Tensor
        A 1-D tensor of size (tap_count,) containing the window values.
    """
    if len(coeffs) == 0:
        raise ValueError("coeffs must contain at least one term")

    return sample_window(
        lambda n, length: cosine_sum(n, length, coeffs),
        tap_count,
        dtype=dtype,
        device=device,
    )
