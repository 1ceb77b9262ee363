from typing import Optional

import torch
from torch import Tensor

from ._cosine_sum_window import cosine_sum
from ._window_sampling import sample_window

BLACKMAN_HARRIS_COEFFICIENTS = (0.35875, 0.48829, 0.14128, 0.01168)


def blackman_harris(n: Tensor, length: float) -> Tensor:
    return cosine_sum(n, length, BLACKMAN_HARRIS_COEFFICIENTS)


def blackman_harris_window(
    tap_count: int,
    *,
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> Tensor:
    """
    Blackman-Harris window function (symmetric).

    Mathematical Definition
    -----------------------
        w[n] = a0 - a1*cos(2*pi*n/L) + a2*cos(4*pi*n/L) - a3*cos(6*pi*n/L)

    where a0 = 0.35875, a1 = 0.48829, a2 = 0.14128, a3 = 0.01168 and
    L = tap_count - 1.

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
    """
    return sample_window(
        blackman_harris, tap_count, dtype=dtype, device=device
    )
