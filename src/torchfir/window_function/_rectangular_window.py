from typing import Optional

import torch
from torch import Tensor

from ._window_sampling import sample_window


def rectangular(n: Tensor, length: float) -> Tensor:
    return torch.ones_like(n)


def rectangular_window(
    tap_count: int,
    *,
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> Tensor:
    """
    Rectangular (boxcar) window function.

    Every weight is exactly 1, so the windowed kernel equals the truncated
    ideal kernel.

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
        A 1-D tensor of size (tap_count,) filled with ones.
    """
    return sample_window(rectangular, tap_count, dtype=dtype, device=device)
