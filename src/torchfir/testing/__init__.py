"""Testing utilities for torchfir."""

from . import strategies

__all__ = ["strategies"]
