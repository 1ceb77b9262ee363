import math
from typing import Optional

import torch
from torch import Tensor

from ._window_sampling import sample_window


def sine(n: Tensor, length: float) -> Tensor:
    return torch.sin(math.pi * n / length)


def sine_window(
    tap_count: int,
    *,
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> Tensor:
    """
    Sine window function.

    Computes ``w[n] = sin(pi * n / L)`` with ``L = tap_count - 1``, a half
    period of a sine spanning the filter.

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
    return sample_window(sine, tap_count, dtype=dtype, device=device)
