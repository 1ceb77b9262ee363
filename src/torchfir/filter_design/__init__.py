"""Windowed-sinc FIR filter design."""

from ._apply_window import apply_window
from ._bandpass_kernel import bandpass_kernel
from ._bandstop_kernel import bandstop_kernel
from ._design import FilterDesign, design
from ._exceptions import (
    FilterDesignError,
    InvalidNumTapsError,
    InvalidShiftError,
    LengthMismatchError,
)
from ._filter_spec import FilterSpec
from ._gain import dc_gain, filter_gain, point_gain
from ._highpass_kernel import highpass_kernel
from ._kernel import FILTER_CLASSES, FilterClass, filter_kernel, kernel
from ._lowpass_kernel import lowpass_kernel
from ._normalize_filter import normalize_filter

__all__ = [
    # Design
    "FilterDesign",
    "FilterSpec",
    "design",
    # Kernels
    "FILTER_CLASSES",
    "FilterClass",
    "bandpass_kernel",
    "bandstop_kernel",
    "filter_kernel",
    "highpass_kernel",
    "kernel",
    "lowpass_kernel",
    # Gain
    "apply_window",
    "dc_gain",
    "filter_gain",
    "normalize_filter",
    "point_gain",
    # Exceptions
    "FilterDesignError",
    "InvalidNumTapsError",
    "InvalidShiftError",
    "LengthMismatchError",
]
