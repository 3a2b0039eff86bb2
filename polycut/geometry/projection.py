"""Snapping points onto segments and polygon boundaries."""

import logging
import math
from typing import List, Tuple
from .errors import DegenerateSegmentError, InvalidCutError
from .polygon import polygon_edges, validate_polygon
from .types import Point, Projection

logger = logging.getLogger(__name__)


def closest_point_on_segment(a: Point, b: Point, c: Point) -> Tuple[Point, float]:
    """Find the closest point on segment a-b to the test point c.

    Args:
        a: Segment start point
        b: Segment end point
        c: Test point

    Returns:
        Tuple of (point on segment, distance from c)

    Raises:
        DegenerateSegmentError: if a and b coincide
    """
    seg_x = b.x - a.x
    seg_y = b.y - a.y
    len_sq = seg_x * seg_x + seg_y * seg_y
    if len_sq == 0:
        raise DegenerateSegmentError(f"segment ({a.x}, {a.y}) -> ({b.x}, {b.y}) has zero length")

    t = ((c.x - a.x) * seg_x + (c.y - a.y) * seg_y) / len_sq

    # Endpoints are returned as-is so a vertex snap compares equal to the vertex
    if t <= 0:
        closest = Point(a.x, a.y)
    elif t >= 1:
        closest = Point(b.x, b.y)
    else:
        closest = Point(a.x + t * seg_x, a.y + t * seg_y)

    return closest, math.hypot(c.x - closest.x, c.y - closest.y)


def closest_point_on_polygon(polygon: List[Point], point: Point) -> Projection:
    """Find the closest point on a polygon boundary.

    Edges are visited in vertex order and an edge at equal or shorter
    distance replaces the best so far, so the last of several equally close
    edges wins. A point sitting on a vertex therefore reports the later of
    the two edges meeting there: edge ``j`` for vertex ``j``, except the last
    vertex, whose edges are visited first and last, so it reports ``n - 2``.

    Args:
        polygon: Polygon vertices, in the same coordinate space as point
        point: Test point

    Returns:
        Projection with the boundary point, its edge index and distance

    Raises:
        InvalidPolygonError: fewer than 3 vertices, or no non-degenerate edge
    """
    validate_polygon(polygon)

    best = None
    for index, segment in polygon_edges(polygon):
        if segment.is_degenerate:
            continue
        candidate, distance = closest_point_on_segment(segment.start, segment.end, point)
        if best is None or distance <= best.distance:
            best = Projection(candidate, index, distance)

    return best


def project_cut_endpoints(polygon: List[Point], cut: List[Point]) -> Tuple[Projection, Projection]:
    """Snap the first and last point of a cut path onto the polygon boundary."""
    if len(cut) < 2:
        raise InvalidCutError(f"cut path needs at least 2 points, got {len(cut)}")

    start = closest_point_on_polygon(polygon, cut[0])
    end = closest_point_on_polygon(polygon, cut[-1])
    logger.debug(
        "cut snapped: start (%s, %s) on edge %d, end (%s, %s) on edge %d",
        start.point.x, start.point.y, start.edge_index,
        end.point.x, end.point.y, end.edge_index,
    )
    return start, end
