from typing import Sequence, Union

from torch import Tensor

from ._curve import Curve, as_coefficients, sample_times


def window_view(
    window: Union[Tensor, Sequence[float]],
    sampling_rate: float,
) -> Curve:
    """Window weights against time, ``(n * dt, w[n])``."""
    window = as_coefficients(window)

    return Curve(sample_times(window, sampling_rate), window)
