from typing import Sequence, Union

import torch
from torch import Tensor

from ._curve import Curve, as_coefficients, sample_times


def step_view(
    coefficients: Union[Tensor, Sequence[float]],
    sampling_rate: float,
) -> Curve:
    """
    Step response of a coefficient vector by running trapezoidal sum.

    Mathematical Definition
    -----------------------
    With h[-1] = 0 and y[-1] = 0:

        y[n] = y[n-1] + h[n-1] + dt * 0.5 * (h[n] + h[n-1])

    The bare ``h[n-1]`` term makes this differ from a plain cumulative
    trapezoid; ``y`` grows by roughly one tap per sample.

    Parameters
    ----------
    coefficients : Tensor or sequence of float
        Non-empty 1-D coefficient vector.
    sampling_rate : float
        Sampling rate in Hz.

    Returns
    -------
    Curve
        Time in seconds and accumulated response.
    """
    coefficients = as_coefficients(coefficients)
    dt = 1.0 / sampling_rate

    previous = torch.cat([coefficients.new_zeros(1), coefficients[:-1]])
    increment = previous + dt * 0.5 * (coefficients + previous)

    return Curve(
        sample_times(coefficients, sampling_rate),
        torch.cumsum(increment, dim=0),
    )
