"""Exceptions raised by polycut geometry operations."""


class PolycutError(Exception):
    """Base class for all polycut errors."""
    pass


class InvalidPolygonError(PolycutError, ValueError):
    """Raised when a polygon has fewer than 3 vertices or only zero-length edges."""
    pass


class InvalidCutError(PolycutError, ValueError):
    """Raised when a cut path has fewer than 2 points."""
    pass


class DegenerateSegmentError(PolycutError, ValueError):
    """Raised when projecting onto a zero-length segment."""
    pass


__all__ = [
    'PolycutError',
    'InvalidPolygonError',
    'InvalidCutError',
    'DegenerateSegmentError',
]
