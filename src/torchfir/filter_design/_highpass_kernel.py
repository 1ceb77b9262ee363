import math
from typing import Optional, Union

import torch
from torch import Tensor

from ._sinc import divide_with_limit, nonzero_time, shifted_time, sine_term


def highpass_kernel(
    n: Union[int, Tensor],
    shift: int,
    dt: float,
    low_cut: float,
    *,
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> Tensor:
    """
    Ideal high-pass kernel tap(s).

    Spectral inversion of the low-pass kernel: an all-pass impulse minus a
    low-pass with edge ``low_cut``.

        h[n] = (sin(pi * tau) - sin(2 * pi * low_cut * dt * tau))
               / (pi * dt * tau)

    with tau = n - shift and the limit h[shift] = 1/dt - 2 * low_cut.
    ``sin(pi * tau)`` vanishes up to rounding for integer shifts.
    """
    tau = shifted_time(n, shift, dtype=dtype, device=device)
    safe_tau = nonzero_time(tau)
    numerator = torch.sin(math.pi * safe_tau) - sine_term(
        low_cut, dt, safe_tau
    )

    return divide_with_limit(numerator, dt, tau, 1.0 / dt - 2.0 * low_cut)
