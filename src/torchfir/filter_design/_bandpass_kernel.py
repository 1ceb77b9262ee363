from typing import Optional, Union

import torch
from torch import Tensor

from ._sinc import divide_with_limit, nonzero_time, shifted_time, sine_term


def bandpass_kernel(
    n: Union[int, Tensor],
    shift: int,
    dt: float,
    low_cut: float,
    high_cut: float,
    *,
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> Tensor:
    """
    Ideal band-pass kernel tap(s).

    Difference of two low-pass kernels:

        h[n] = (sin(2*pi*high_cut*dt*tau) - sin(2*pi*low_cut*dt*tau))
               / (pi * dt * tau)

    with tau = n - shift and the limit h[shift] = 2*high_cut - 2*low_cut.
    """
    tau = shifted_time(n, shift, dtype=dtype, device=device)
    safe_tau = nonzero_time(tau)
    numerator = sine_term(high_cut, dt, safe_tau) - sine_term(
        low_cut, dt, safe_tau
    )

    return divide_with_limit(
        numerator, dt, tau, 2.0 * high_cut - 2.0 * low_cut
    )
