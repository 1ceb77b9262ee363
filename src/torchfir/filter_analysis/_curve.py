from typing import NamedTuple, Sequence, Union

import torch
from torch import Tensor


class Curve(NamedTuple):
    """Sampled ``(x, y)`` curve.

    Parameters
    ----------
    x : Tensor
        Abscissa, seconds for time views and Hz for spectra.
    y : Tensor
        Ordinate, same shape as ``x``.
    """

    x: Tensor
    y: Tensor

    def stacked(self) -> Tensor:
        """Points as a ``(len, 2)`` tensor of ``[x, y]`` rows."""
        return torch.stack([self.x, self.y], dim=-1)


def as_coefficients(coefficients: Union[Tensor, Sequence[float]]) -> Tensor:
    """Validate a coefficient vector for analysis.

    Non-floating inputs are converted to float64.
    """
    if not isinstance(coefficients, Tensor):
        coefficients = torch.tensor(coefficients, dtype=torch.float64)
    elif not coefficients.is_floating_point():
        coefficients = coefficients.to(torch.float64)

    if coefficients.dim() != 1:
        raise ValueError(
            f"coefficients must be 1-D, got shape "
            f"{tuple(coefficients.shape)}"
        )

    if coefficients.numel() == 0:
        raise ValueError("coefficients must not be empty")

    return coefficients


def sample_times(coefficients: Tensor, sampling_rate: float) -> Tensor:
    """``n * dt`` for every tap."""
    dt = 1.0 / sampling_rate
    n = torch.arange(
        coefficients.numel(),
        dtype=coefficients.dtype,
        device=coefficients.device,
    )

    return n * dt
