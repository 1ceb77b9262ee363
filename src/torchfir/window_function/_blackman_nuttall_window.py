from typing import Optional

import torch
from torch import Tensor

from ._cosine_sum_window import cosine_sum
from ._window_sampling import sample_window

BLACKMAN_NUTTALL_COEFFICIENTS = (0.3635819, 0.4891775, 0.1365995, 0.0106411)


def blackman_nuttall(n: Tensor, length: float) -> Tensor:
    return cosine_sum(n, length, BLACKMAN_NUTTALL_COEFFICIENTS)


def blackman_nuttall_window(
    tap_count: int,
    *,
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> Tensor:
    """
    Blackman-Nuttall window function (symmetric).

    4-term cosine sum with coefficients
    (0.3635819, 0.4891775, 0.1365995, 0.0106411). The endpoints are not
    zero (about 3.6e-4).

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
        blackman_nuttall, tap_count, dtype=dtype, device=device
    )
