"""Impulse, step and spectrum analysis of FIR coefficient vectors."""

from ._analyze import DesignAnalysis, FilterAnalysis, analyze, analyze_design
from ._curve import Curve
from ._impulse_view import impulse_view
from ._spectrum_view import spectrum_view
from ._step_view import step_view
from ._window_view import window_view

__all__ = [
    "Curve",
    "DesignAnalysis",
    "FilterAnalysis",
    "analyze",
    "analyze_design",
    "impulse_view",
    "spectrum_view",
    "step_view",
    "window_view",
]
