"""torchfir: windowed-sinc FIR filter design and analysis for PyTorch."""

from . import filter_analysis, filter_design, window_function
from .filter_analysis import analyze, analyze_design
from .filter_design import FilterDesign, FilterSpec, design

__all__ = [
    "FilterDesign",
    "FilterSpec",
    "analyze",
    "analyze_design",
    "design",
    "filter_analysis",
    "filter_design",
    "window_function",
]

__version__ = "0.1.0"
