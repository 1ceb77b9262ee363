from typing import Optional

import torch
from torch import Tensor

from ._window_sampling import sample_window


def welch(n: Tensor, length: float) -> Tensor:
    half = 0.5 * length
    return 1.0 - ((n - half) / half) ** 2


def welch_window(
    tap_count: int,
    *,
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> Tensor:
    """
    Welch window function (symmetric).

    A single parabolic section, zero at both endpoints:

        w[n] = 1 - ((n - L/2) / (L/2))^2,  L = tap_count - 1

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
    return sample_window(welch, tap_count, dtype=dtype, device=device)
