"""Error hierarchy for mycadlib curves and curve collections."""

from __future__ import annotations


class CurveError(Exception):
    """Base exception for curve-related errors."""

    def __init__(self, message: str, curve_type: str = ""):
        self.curve_type = curve_type
        super().__init__(message)


class InvalidCurveError(CurveError, ValueError):
    """Raised when a curve is constructed with invalid shape parameters.

    Subclasses ``ValueError`` so callers validating user input can catch
    either.
    """

    pass


class CollectionInvariantError(CurveError):
    """Raised when a caller-level collection check fails.

    Examples are a populated collection missing one of the required curve
    types, or a filtered collection holding copies instead of the source's
    own curve objects.
    """

    pass


__all__ = [
    "CurveError",
    "InvalidCurveError",
    "CollectionInvariantError",
]
