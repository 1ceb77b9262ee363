"""Hypothesis strategies for FIR design testing."""

from ._filter_specs import filter_specs
from ._sampling_rates import sampling_rates
from ._tap_counts import tap_counts

__all__ = [
    "filter_specs",
    "sampling_rates",
    "tap_counts",
]
