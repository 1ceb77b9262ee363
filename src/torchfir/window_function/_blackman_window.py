from typing import Optional

import torch
from torch import Tensor

from ._cosine_sum_window import cosine_sum
from ._window_sampling import sample_window

BLACKMAN_COEFFICIENTS = (0.42, 0.5, 0.08)


def blackman(n: Tensor, length: float) -> Tensor:
    return cosine_sum(n, length, BLACKMAN_COEFFICIENTS)


def blackman_window(
    tap_count: int,
    *,
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> Tensor:
    """
    Blackman window function (symmetric).

    Mathematical Definition
    -----------------------
        w[n] = 0.42 - 0.5*cos(2*pi*n/L) + 0.08*cos(4*pi*n/L)

    with L = tap_count - 1.

    Properties
    ----------
    - Side lobe level: -58 dB
    - Endpoints are zero up to rounding

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
    return sample_window(blackman, tap_count, dtype=dtype, device=device)
