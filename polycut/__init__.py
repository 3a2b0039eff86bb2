"""polycut: split polygons along a drawn cut path."""

__version__ = "0.1.0"

from .cutting import split_polygon, choose_piece
from .geometry import (
    Point,
    Projection,
    SplitResult,
    closest_point_on_segment,
    closest_point_on_polygon,
    PolycutError,
    InvalidPolygonError,
    InvalidCutError,
    DegenerateSegmentError,
)

__all__ = [
    "split_polygon",
    "choose_piece",
    "closest_point_on_segment",
    "closest_point_on_polygon",
    "Point",
    "Projection",
    "SplitResult",
    "PolycutError",
    "InvalidPolygonError",
    "InvalidCutError",
    "DegenerateSegmentError",
]
