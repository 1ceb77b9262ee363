from typing import Optional

import torch
from torch import Tensor

from ._window_sampling import sample_window


def triangular(n: Tensor, length: float) -> Tensor:
    half = 0.5 * length
    return 1.0 - torch.abs((n - half) / half)


def triangular_window(
    tap_count: int,
    *,
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> Tensor:
    """
    Triangular window function (symmetric).

    Mathematical Definition
    -----------------------
    With L = tap_count - 1:

        w[n] = 1 - |(n - L/2) / (L/2)|

    The endpoints are exactly zero and the peak of an odd-length window is
    exactly one.

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
    welch_window : Parabolic counterpart of this window.
    """
    return sample_window(triangular, tap_count, dtype=dtype, device=device)
