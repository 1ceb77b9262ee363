"""Shared evaluation helpers for window functions."""

from typing import Callable, Optional, Union

import torch
from torch import Tensor

WindowFormula = Callable[[Tensor, float], Tensor]


def as_sample_indices(
    n: Union[int, float, Tensor],
    *,
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> Tensor:
    """Convert sample indices to a floating point tensor."""
    if isinstance(n, Tensor):
        if dtype is None:
            dtype = n.dtype if n.is_floating_point() else torch.float64
        return n.to(dtype=dtype, device=device)

    return torch.as_tensor(
        n, dtype=dtype or torch.float64, device=device
    )


def evaluate_window(
    formula: WindowFormula,
    n: Union[int, float, Tensor],
    length: int,
    *,
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> Tensor:
    """Evaluate a pointwise window formula at indices ``n``.

    A window of length zero (a single tap) is constant 1 for every kind.
    """
    n = as_sample_indices(n, dtype=dtype, device=device)

    if length == 0:
        return torch.ones_like(n)

    return formula(n, float(length))


def sample_window(
    formula: WindowFormula,
    tap_count: int,
    *,
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> Tensor:
    """Evaluate a pointwise window formula at ``n = 0, ..., tap_count - 1``."""
    if tap_count < 0:
        raise ValueError(
            f"tap_count must be non-negative, got {tap_count}"
        )

    n = torch.arange(
        tap_count, dtype=dtype or torch.float64, device=device
    )

    return evaluate_window(formula, n, max(tap_count - 1, 0))
