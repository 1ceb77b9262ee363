"""Shared pieces of the windowed-sinc kernel formulas."""

import math
from typing import Optional, Union

import torch
from torch import Tensor


def shifted_time(
    n: Union[int, Tensor],
    shift: int,
    *,
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> Tensor:
    """Return ``tau = n - shift`` as a floating point tensor."""
    if isinstance(n, Tensor):
        if dtype is None:
            dtype = n.dtype if n.is_floating_point() else torch.float64
        n = n.to(dtype=dtype, device=device)
    else:
        n = torch.as_tensor(n, dtype=dtype or torch.float64, device=device)

    return n - shift


def sine_term(frequency: float, dt: float, tau: Tensor) -> Tensor:
    """``sin(2 pi f dt tau)``."""
    return torch.sin(2.0 * math.pi * frequency * dt * tau)


def divide_with_limit(
    numerator: Tensor,
    dt: float,
    tau: Tensor,
    limit: float,
) -> Tensor:
    """``numerator / (pi dt tau)``, replaced by ``limit`` where ``tau == 0``.

    ``numerator`` must already have been evaluated at a nonzero stand-in for
    ``tau == 0`` (see ``nonzero_time``) so that no 0/0 is formed.
    """
    at_shift = tau == 0
    safe_tau = nonzero_time(tau)
    value = numerator / (math.pi * dt * safe_tau)

    return torch.where(at_shift, torch.full_like(value, limit), value)


def nonzero_time(tau: Tensor) -> Tensor:
    return torch.where(tau == 0, torch.ones_like(tau), tau)
