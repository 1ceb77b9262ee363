from typing import Optional, Union

import torch
from torch import Tensor

from ._sinc import divide_with_limit, nonzero_time, shifted_time, sine_term


def lowpass_kernel(
    n: Union[int, Tensor],
    shift: int,
    dt: float,
    high_cut: float,
    *,
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> Tensor:
    """
    Ideal low-pass kernel tap(s).

    Mathematical Definition
    -----------------------
    With tau = n - shift:

        h[n] = sin(2 * pi * high_cut * dt * tau) / (pi * dt * tau)

    and the limit value h[shift] = 2 * high_cut.

    Parameters
    ----------
    n : int or Tensor
        Tap index or tensor of tap indices.
    shift : int
        Index of the kernel's time-zero sample.
    dt : float
        Sample period in seconds.
    high_cut : float
        Passband edge in Hz.
    dtype : torch.dtype, optional
        Output dtype. Defaults to float64.
    device : torch.device, optional
        Output device.

    Returns
    -------
    Tensor
        Unnormalized taps with the shape of ``n``.
    """
    tau = shifted_time(n, shift, dtype=dtype, device=device)
    safe_tau = nonzero_time(tau)

    return divide_with_limit(
        sine_term(high_cut, dt, safe_tau), dt, tau, 2.0 * high_cut
    )
