from typing import Sequence, Union

from torch import Tensor

from ._curve import Curve, as_coefficients, sample_times


def impulse_view(
    coefficients: Union[Tensor, Sequence[float]],
    sampling_rate: float,
) -> Curve:
    """
    Impulse response of a coefficient vector.

    Each tap is scaled by the sample period so that the curve approximates
    a continuous-time impulse response with the same area:

        (x[n], y[n]) = (n * dt, h[n] * dt)

    Parameters
    ----------
    coefficients : Tensor or sequence of float
        Non-empty 1-D coefficient vector.
    sampling_rate : float
        Sampling rate in Hz.

    Returns
    -------
    Curve
        Time in seconds and scaled response.
    """
    coefficients = as_coefficients(coefficients)
    dt = 1.0 / sampling_rate

    return Curve(
        sample_times(coefficients, sampling_rate), coefficients * dt
    )
