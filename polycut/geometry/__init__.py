"""Geometry utilities for polycut."""

from .types import Point, Segment, Projection, SplitResult
from .errors import (
    PolycutError,
    InvalidPolygonError,
    InvalidCutError,
    DegenerateSegmentError,
)
from .polygon import (
    polygon_edges,
    polygon_signed_area,
    is_clockwise,
    point_in_polygon,
    open_ring,
    translate_polygon,
    validate_polygon,
)
from .projection import (
    closest_point_on_segment,
    closest_point_on_polygon,
    project_cut_endpoints,
)

__all__ = [
    "Point",
    "Segment",
    "Projection",
    "SplitResult",
    "PolycutError",
    "InvalidPolygonError",
    "InvalidCutError",
    "DegenerateSegmentError",
    "polygon_edges",
    "polygon_signed_area",
    "is_clockwise",
    "point_in_polygon",
    "open_ring",
    "translate_polygon",
    "validate_polygon",
    "closest_point_on_segment",
    "closest_point_on_polygon",
    "project_cut_endpoints",
]
