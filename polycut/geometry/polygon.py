"""Polygon helpers for polycut.

Polygons are plain ``List[Point]`` rings without a repeated closing point.
"""

from typing import Iterator, List, Tuple
from .errors import InvalidPolygonError
from .types import Point, Segment


def polygon_edges(polygon: List[Point]) -> Iterator[Tuple[int, Segment]]:
    """Walk the edges of a polygon in vertex order.

    Visiting vertex ``i`` yields the edge running back from it to vertex
    ``i - 1`` (wrapping to the last vertex for ``i == 0``). The index yielded
    with it is ``i - 1``, the vertex the edge points toward, which is the
    vertex a point on that edge gets inserted after.
    """
    n = len(polygon)
    for i in range(n):
        prev = (i - 1 + n) % n
        yield prev, Segment(polygon[i], polygon[prev])


def validate_polygon(polygon: List[Point]) -> None:
    """Raise InvalidPolygonError unless the polygon has a usable boundary."""
    if len(polygon) < 3:
        raise InvalidPolygonError(
            f"polygon needs at least 3 vertices, got {len(polygon)}"
        )
    if all(segment.is_degenerate for _, segment in polygon_edges(polygon)):
        raise InvalidPolygonError("every polygon edge has zero length")


def polygon_signed_area(polygon: List[Point]) -> float:
    """Calculate the signed area of a polygon.

    Positive = counter-clockwise, negative = clockwise (y axis pointing up).
    """
    if len(polygon) < 3:
        return 0.0

    area = 0.0
    n = len(polygon)
    for i in range(n):
        j = (i + 1) % n
        area += polygon[i].x * polygon[j].y
        area -= polygon[j].x * polygon[i].y

    return area / 2.0


def is_clockwise(polygon: List[Point]) -> bool:
    return polygon_signed_area(polygon) < 0


def point_in_polygon(point: Point, polygon: List[Point]) -> bool:
    """Check if a point is inside a polygon using ray casting."""
    if len(polygon) < 3:
        return False

    inside = False
    j = len(polygon) - 1
    for i, current in enumerate(polygon):
        previous = polygon[j]
        crosses = (current.y > point.y) != (previous.y > point.y)
        if crosses:
            x_at_y = (previous.x - current.x) * (point.y - current.y) / (previous.y - current.y) + current.x
            if point.x < x_at_y:
                inside = not inside
        j = i

    return inside


def open_ring(points: List[Point]) -> List[Point]:
    """Drop a repeated closing point, if any.

    SVG paths closed with ``Z`` and vpype closed lines both end on their
    first point.
    """
    if len(points) > 1 and points[0] == points[-1]:
        return list(points[:-1])
    return list(points)


def translate_polygon(polygon: List[Point], dx: float, dy: float) -> List[Point]:
    """Shift every vertex by (dx, dy)."""
    return [Point(p.x + dx, p.y + dy) for p in polygon]
