import math
from typing import Optional

import torch
from torch import Tensor

from ._window_sampling import sample_window


def hann(n: Tensor, length: float) -> Tensor:
    return 0.5 * (1.0 - torch.cos(2.0 * math.pi * n / length))


def hann_window(
    tap_count: int,
    *,
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> Tensor:
    """
    Hann window function (symmetric).

    Computes a symmetric Hann window of length tap_count. The Hann window is
    a raised cosine window that tapers smoothly to zero at the endpoints,
    reducing spectral leakage of the truncated sinc kernel.

    Mathematical Definition
    -----------------------
    The symmetric Hann window is defined as:

        w[n] = 0.5 * (1 - cos(2 * pi * n / L)),  L = tap_count - 1

    for n = 0, 1, ..., tap_count - 1.

    Properties
    ----------
    - Main lobe width: 8*pi/N
    - Side lobe level: -31.5 dB
    - The window is exactly zero at the endpoints

    Parameters
    ----------
    tap_count : int
        Number of points in the output window. Must be non-negative.
    dtype : torch.dtype, optional
        The desired data type of the returned tensor. Defaults to float64.
    device : torch.device, optional
        The desired device of the returned tensor.

    Returns
    -------
    Tensor
        A 1-D tensor of size (tap_count,) containing the window values.

    See Also
    --------
    hamming_window : Raised cosine that does not reach zero.
    """
    return sample_window(hann, tap_count, dtype=dtype, device=device)
