"""Splitting a polygon in two along a cut path."""

import logging
from typing import List, Sequence
from ..geometry import Point, SplitResult
from ..geometry.polygon import point_in_polygon, polygon_signed_area
from ..geometry.projection import project_cut_endpoints

logger = logging.getLogger(__name__)


def _manhattan(a: Point, b: Point) -> float:
    return abs(a.x - b.x) + abs(a.y - b.y)


def _augmented_vertices(
    polygon: List[Point],
    start: Point,
    start_index: int,
    end: Point,
    end_index: int,
) -> List[Point]:
    """Polygon vertices with the snapped cut endpoints inserted in ring order.

    A snapped point is inserted after vertex ``i`` when its edge index is
    ``i``, unless it lands exactly on either end of that edge.
    """
    n = len(polygon)
    vertices: List[Point] = []
    for i, vertex in enumerate(polygon):
        vertices.append(vertex)
        following = polygon[(i + 1) % n]
        start_here = start_index == i and start != vertex and start != following
        end_here = end_index == i and end != vertex and end != following

        if start_here and end_here:
            # Cut starts and ends on the same edge. All three points are
            # collinear, so manhattan distance orders them along the edge.
            if _manhattan(start, vertex) < _manhattan(end, vertex):
                vertices.extend([start, end])
            else:
                vertices.extend([end, start])
        elif start_here:
            vertices.append(start)
        elif end_here:
            vertices.append(end)

    return vertices


def split_polygon(polygon: List[Point], cut: List[Point]) -> SplitResult:
    """Split a polygon into two along a cut path.

    The first and last points of the cut are snapped onto the polygon
    boundary; the points between them become shared vertices of both
    pieces. The first piece walks the boundary from the cut start to the
    cut end and returns along the reversed cut, the second walks on from
    the cut end back around to the start and follows the cut forward.

    Args:
        polygon: Simple polygon, at least 3 vertices, no repeated closing point
        cut: Cut path of at least 2 points

    Returns:
        SplitResult with both pieces as open vertex loops

    Raises:
        InvalidCutError: cut has fewer than 2 points
        InvalidPolygonError: polygon has no usable boundary
    """
    start, end = project_cut_endpoints(polygon, cut)

    vertices = _augmented_vertices(
        polygon, start.point, start.edge_index, end.point, end.edge_index
    )
    start_pos = vertices.index(start.point)
    end_pos = vertices.index(end.point)

    if start_pos < end_pos:
        first = vertices[start_pos:end_pos + 1]
        second = vertices[end_pos:] + vertices[:start_pos + 1]
    else:
        first = vertices[start_pos:] + vertices[:end_pos + 1]
        second = vertices[end_pos:start_pos + 1]

    interior = list(cut[1:-1])
    first.extend(reversed(interior))
    second.extend(interior)

    logger.debug(
        "split %d vertices (%d after snapping) into pieces of %d and %d",
        len(polygon), len(vertices), len(first), len(second),
    )
    return SplitResult(first, second)


def choose_piece(result: SplitResult, point: Sequence[float]) -> List[Point]:
    """Pick the piece of a split that contains a point.

    Falls back to the larger piece when the point is inside neither.
    """
    target = Point.of(point)
    for piece in result:
        if point_in_polygon(target, piece):
            return piece
    return max(result, key=lambda piece: abs(polygon_signed_area(piece)))
