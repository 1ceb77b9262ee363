from typing import Optional

import torch
from torch import Tensor

from ._cosine_sum_window import cosine_sum
from ._window_sampling import sample_window

NUTTALL_COEFFICIENTS = (0.355768, 0.487396, 0.144232, 0.012604)


def nuttall(n: Tensor, length: float) -> Tensor:
    return cosine_sum(n, length, NUTTALL_COEFFICIENTS)


def nuttall_window(
    tap_count: int,
    *,
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> Tensor:
    """
    Nuttall window function (symmetric).

    Computes the 4-term Nuttall window with continuous first derivative.

    Mathematical Definition
    -----------------------
        w[n] = a0 - a1*cos(2*pi*n/L) + a2*cos(4*pi*n/L) - a3*cos(6*pi*n/L)

    for n = 0, 1, ..., tap_count - 1 and L = tap_count - 1, where:
        a0 = 0.355768, a1 = 0.487396, a2 = 0.144232, a3 = 0.012604

    Properties
    ----------
    - Side lobe level: -93.3 dB
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

    See Also
    --------
    blackman_nuttall_window : Minimum side lobe 4-term variant.
    blackman_harris_window : 4-term window with slightly different weights.
    """
    return sample_window(nuttall, tap_count, dtype=dtype, device=device)
