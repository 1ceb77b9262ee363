from typing import Optional

import torch
from torch import Tensor

from ._cosine_sum_window import cosine_sum
from ._window_sampling import sample_window

FLAT_TOP_COEFFICIENTS = (
    0.21557895,
    0.41663158,
    0.277263158,
    0.083578947,
    0.006947368,
)


def flat_top(n: Tensor, length: float) -> Tensor:
    return cosine_sum(n, length, FLAT_TOP_COEFFICIENTS)


def flat_top_window(
    tap_count: int,
    *,
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> Tensor:
    """
    Flat top window function (symmetric).

    5-term cosine sum with a very flat main lobe. The weights dip slightly
    below zero away from the center and the peak exceeds one by about 3e-9.

    Mathematical Definition
    -----------------------
        w[n] = a0 - a1*cos(2*pi*n/L) + a2*cos(4*pi*n/L)
               - a3*cos(6*pi*n/L) + a4*cos(8*pi*n/L)

    where:
        a0 = 0.21557895, a1 = 0.41663158, a2 = 0.277263158,
        a3 = 0.083578947, a4 = 0.006947368

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
    return sample_window(flat_top, tap_count, dtype=dtype, device=device)
