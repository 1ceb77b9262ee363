"""Exceptions for filter design module."""


class FilterDesignError(Exception):
    """Base exception for filter design errors."""

    pass


class InvalidNumTapsError(FilterDesignError):
    """Raised when the FIR tap count is invalid.

    A design needs at least one tap; zero-length filters are rejected.
    """

    pass


class InvalidShiftError(FilterDesignError):
    """Raised when the kernel shift does not index a tap.

    The shift is the kernel's time-zero sample and must satisfy
    ``0 <= shift < tap_count``.
    """

    pass


class LengthMismatchError(FilterDesignError):
    """Raised when two coefficient vectors combined elementwise differ in shape.

    This is a caller error; vectors are never truncated or padded to fit.
    """

    pass
