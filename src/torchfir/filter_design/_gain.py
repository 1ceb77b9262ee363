"""Gain of a coefficient vector at a reference frequency."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

import torch
from torch import Tensor

if TYPE_CHECKING:
    from ._filter_spec import FilterSpec


def dc_gain(coefficients: Tensor) -> Tensor:
    """Gain at 0 Hz, the sum of all taps."""
    return coefficients.sum()


def point_gain(coefficients: Tensor, omega: float) -> Tensor:
    """
    Magnitude response at a single frequency.

    Evaluates one bin of the discrete-time Fourier transform:

        re = sum_n h[n] cos(omega n)
        im = -sum_n h[n] sin(omega n)
        gain = sqrt(re^2 + im^2)

    Parameters
    ----------
    coefficients : Tensor
        1-D coefficient vector.
    omega : float
        Frequency in radians per sample (pi is Nyquist).

    Returns
    -------
    Tensor
        Scalar gain.
    """
    n = torch.arange(
        coefficients.numel(),
        dtype=coefficients.dtype,
        device=coefficients.device,
    )
    phase = omega * n

    re = (coefficients * torch.cos(phase)).sum()
    im = -(coefficients * torch.sin(phase)).sum()

    return torch.sqrt(re**2 + im**2)


def filter_gain(spec: FilterSpec, coefficients: Tensor) -> Tensor:
    """
    Passband gain of ``coefficients`` designed from ``spec``.

    Low-pass and band-stop filters are referenced to DC. High-pass filters
    are referenced to Nyquist and band-pass filters to the band center
    ``low_cut + (high_cut - low_cut) / 2``.
    """
    if spec.filter_class in ("lowpass", "bandstop"):
        return dc_gain(coefficients)

    if spec.filter_class == "highpass":
        frequency = spec.nyquist
    else:
        frequency = spec.low_cut + (spec.high_cut - spec.low_cut) / 2.0

    omega = 2.0 * math.pi * frequency / spec.sampling_rate

    return point_gain(coefficients, omega)
