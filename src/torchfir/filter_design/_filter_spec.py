"""Design parameters of a windowed-sinc FIR filter."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass

from torchfir._constants import (
    DEFAULT_FILTER_CLASS,
    DEFAULT_HIGH_CUT,
    DEFAULT_LOW_CUT,
    DEFAULT_SAMPLING_RATE,
    DEFAULT_SHIFT,
    DEFAULT_TAP_COUNT,
    DEFAULT_WINDOW_KIND,
)
from torchfir.window_function import WINDOW_KINDS

from ._exceptions import InvalidNumTapsError, InvalidShiftError
from ._kernel import FILTER_CLASSES


@dataclass(frozen=True)
class FilterSpec:
    """Complete description of a design request.

    Parameters
    ----------
    filter_class : str
        One of ``"lowpass"``, ``"highpass"``, ``"bandpass"``, ``"bandstop"``.
    window_kind : str
        One of ``torchfir.window_function.WINDOW_KINDS``.
    tap_count : int
        Number of coefficients. Must be at least 1.
    shift : int
        Index of the kernel's time-zero sample, ``0 <= shift < tap_count``.
    sampling_rate : float
        Sampling rate in Hz.
    low_cut : float
        Lower cutoff in Hz (high-pass, band-pass, band-stop).
    high_cut : float
        Upper cutoff in Hz (low-pass, band-pass, band-stop).

    Notes
    -----
    Only the structural fields are validated. Physically meaningless
    combinations such as ``low_cut > high_cut`` or cutoffs above Nyquist
    are computed as given.

    Examples
    --------
    >>> spec = FilterSpec(window_kind="hann", high_cut=300.0)
    >>> spec.sample_period
    0.001
    """

    filter_class: str = DEFAULT_FILTER_CLASS
    window_kind: str = DEFAULT_WINDOW_KIND
    tap_count: int = DEFAULT_TAP_COUNT
    shift: int = DEFAULT_SHIFT
    sampling_rate: float = DEFAULT_SAMPLING_RATE
    low_cut: float = DEFAULT_LOW_CUT
    high_cut: float = DEFAULT_HIGH_CUT

    def __post_init__(self) -> None:
        if self.filter_class not in FILTER_CLASSES:
            raise ValueError(
                f"Unknown filter class: {self.filter_class!r}. "
                f"Expected one of {', '.join(FILTER_CLASSES)}"
            )

        if self.window_kind not in WINDOW_KINDS:
            raise ValueError(
                f"Unknown window kind: {self.window_kind!r}. "
                f"Expected one of {', '.join(WINDOW_KINDS)}"
            )

        if (
            isinstance(self.tap_count, bool)
            or not isinstance(self.tap_count, int)
            or self.tap_count < 1
        ):
            raise InvalidNumTapsError(
                f"tap_count must be a positive integer, got {self.tap_count!r}"
            )

        if (
            isinstance(self.shift, bool)
            or not isinstance(self.shift, int)
            or not 0 <= self.shift < self.tap_count
        ):
            raise InvalidShiftError(
                f"shift must be an integer in [0, {self.tap_count}), "
                f"got {self.shift!r}"
            )

    @property
    def sample_period(self) -> float:
        """Sample period ``dt = 1 / sampling_rate`` in seconds."""
        return 1.0 / self.sampling_rate

    @property
    def nyquist(self) -> float:
        return self.sampling_rate / 2.0

    def replace(self, **changes) -> FilterSpec:
        """Return a copy of this spec with ``changes`` applied."""
        return dataclasses.replace(self, **changes)
