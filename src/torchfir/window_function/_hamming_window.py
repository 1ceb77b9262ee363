from typing import Optional

import torch
from torch import Tensor

from ._cosine_sum_window import cosine_sum
from ._window_sampling import sample_window

# Optimal Hamming coefficients a0 = 25/46, a1 = 21/46
HAMMING_COEFFICIENTS = (25.0 / 46.0, 21.0 / 46.0)


def hamming(n: Tensor, length: float) -> Tensor:
    return cosine_sum(n, length, HAMMING_COEFFICIENTS)


def hamming_window(
    tap_count: int,
    *,
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> Tensor:
    """
    Hamming window function (symmetric).

    Mathematical Definition
    -----------------------
        w[n] = 25/46 - 21/46 * cos(2 * pi * n / L),  L = tap_count - 1

    The exact 25/46 ratio cancels the first side lobe; the endpoints are
    4/46 rather than zero.

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
    return sample_window(hamming, tap_count, dtype=dtype, device=device)
