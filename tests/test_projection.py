"""Tests for snapping points onto segments and polygons."""

import math

import pytest
from polycut.geometry import (
    Point,
    DegenerateSegmentError,
    InvalidPolygonError,
    InvalidCutError,
    closest_point_on_segment,
    closest_point_on_polygon,
    project_cut_endpoints,
)


SQUARE = [Point(0, 0), Point(300, 0), Point(300, 300), Point(0, 300)]


class TestClosestPointOnSegment:
    """Tests for closest_point_on_segment()."""

    def test_interior_projection(self):
        point, distance = closest_point_on_segment(Point(0, 0), Point(10, 0), Point(5, 5))
        assert point == Point(5, 0)
        assert distance == pytest.approx(5.0)

    def test_clamps_before_start(self):
        point, distance = closest_point_on_segment(Point(0, 0), Point(10, 0), Point(-3, 4))
        assert point == Point(0, 0)
        assert distance == pytest.approx(5.0)

    def test_clamps_after_end(self):
        point, distance = closest_point_on_segment(Point(0, 0), Point(10, 0), Point(13, 4))
        assert point == Point(10, 0)
        assert distance == pytest.approx(5.0)

    def test_endpoint_returned_exactly(self):
        """A query on an endpoint gives back that endpoint's exact coordinates."""
        a, b = Point(0.1, 0.2), Point(0.7, 0.3)
        point, distance = closest_point_on_segment(a, b, Point(0.7, 0.3))
        assert point == b
        assert distance == 0

    @pytest.mark.parametrize("c", [
        Point(0, 0), Point(4, 1), Point(-20, 3), Point(30, -30), Point(4, -1), Point(1, 2),
    ])
    def test_result_on_segment_with_true_distance(self, c):
        a, b = Point(1, 2), Point(7, -4)
        point, distance = closest_point_on_segment(a, b, c)

        assert min(a.x, b.x) <= point.x <= max(a.x, b.x)
        assert min(a.y, b.y) <= point.y <= max(a.y, b.y)
        cross = (b.x - a.x) * (point.y - a.y) - (b.y - a.y) * (point.x - a.x)
        assert cross == pytest.approx(0.0, abs=1e-9)
        assert distance == pytest.approx(math.hypot(c.x - point.x, c.y - point.y))

    def test_degenerate_segment_raises(self):
        with pytest.raises(DegenerateSegmentError):
            closest_point_on_segment(Point(2, 2), Point(2, 2), Point(0, 0))


class TestClosestPointOnPolygon:
    """Tests for closest_point_on_polygon()."""

    @pytest.mark.parametrize("query, expected, edge", [
        (Point(150, -10), Point(150, 0), 0),
        (Point(310, 150), Point(300, 150), 1),
        (Point(150, 310), Point(150, 300), 2),
        (Point(-10, 150), Point(0, 150), 3),
    ])
    def test_each_side(self, query, expected, edge):
        projection = closest_point_on_polygon(SQUARE, query)
        assert projection.point == expected
        assert projection.edge_index == edge
        assert projection.distance == pytest.approx(10.0)

    def test_point_inside_snaps_to_nearest_side(self):
        projection = closest_point_on_polygon(SQUARE, Point(280, 100))
        assert projection.point.x == pytest.approx(300.0)
        assert projection.point.y == pytest.approx(100.0)
        assert projection.edge_index == 1
        assert projection.distance == pytest.approx(20.0)

    @pytest.mark.parametrize("on_boundary", [
        Point(0, 75), Point(150, 0), Point(300, 225), Point(75, 300),
        Point(0, 0), Point(300, 0), Point(300, 300), Point(0, 300),
    ])
    def test_point_on_boundary_is_unchanged(self, on_boundary):
        projection = closest_point_on_polygon(SQUARE, on_boundary)
        assert projection.point == on_boundary
        assert projection.distance == 0

    @pytest.mark.parametrize("vertex, edge", [
        (Point(0, 0), 0),
        (Point(300, 0), 1),
        (Point(300, 300), 2),
        (Point(0, 300), 2),
    ])
    def test_vertex_tie_goes_to_last_visited_edge(self, vertex, edge):
        """Both edges meeting at a vertex are at distance 0; the later one wins."""
        projection = closest_point_on_polygon(SQUARE, vertex)
        assert projection.edge_index == edge

    def test_equidistant_edges_last_wins(self):
        """Outside a corner diagonally, both sides are equally close."""
        projection = closest_point_on_polygon(SQUARE, Point(310, -10))
        assert projection.point == Point(300, 0)
        assert projection.edge_index == 1

    def test_unpacks_as_pair(self):
        point, edge = closest_point_on_polygon(SQUARE, Point(150, -10))
        assert point == Point(150, 0)
        assert edge == 0

    def test_skips_zero_length_edges(self):
        polygon = [Point(0, 0), Point(0, 0), Point(10, 0), Point(10, 10)]
        projection = closest_point_on_polygon(polygon, Point(5, -1))
        assert projection.point == Point(5, 0)
        assert projection.edge_index == 1

    def test_two_vertices_raise(self):
        with pytest.raises(InvalidPolygonError):
            closest_point_on_polygon([Point(0, 0), Point(10, 0)], Point(5, 5))

    def test_all_degenerate_edges_raise(self):
        with pytest.raises(InvalidPolygonError, match="zero length"):
            closest_point_on_polygon([Point(1, 1)] * 3, Point(5, 5))

    def test_input_not_mutated(self):
        polygon = [Point(p.x, p.y) for p in SQUARE]
        closest_point_on_polygon(polygon, Point(150, 150))
        assert polygon == SQUARE


def test_project_cut_endpoints():
    start, end = project_cut_endpoints(SQUARE, [Point(150, -5), Point(150, 150), Point(150, 305)])
    assert (start.point, start.edge_index) == (Point(150, 0), 0)
    assert (end.point, end.edge_index) == (Point(150, 300), 2)


def test_project_cut_endpoints_short_cut():
    with pytest.raises(InvalidCutError):
        project_cut_endpoints(SQUARE, [Point(150, 0)])
