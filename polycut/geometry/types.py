"""Type definitions for polycut geometry."""

from dataclasses import dataclass
from typing import List, Sequence, Union


@dataclass
class Point:
    """2D point."""
    x: float
    y: float

    def __iter__(self):
        yield self.x
        yield self.y

    @classmethod
    def of(cls, value: Union["Point", Sequence[float]]) -> "Point":
        """Build a Point from a Point or an (x, y) pair."""
        if isinstance(value, Point):
            return value
        x, y = value
        return cls(float(x), float(y))


@dataclass
class Segment:
    """A line segment defined by two endpoints."""
    start: Point
    end: Point

    @property
    def length_squared(self) -> float:
        dx = self.end.x - self.start.x
        dy = self.end.y - self.start.y
        return dx * dx + dy * dy

    @property
    def is_degenerate(self) -> bool:
        return self.length_squared == 0


@dataclass
class Projection:
    """Closest point on a polygon boundary.

    ``edge_index`` names the edge the point lies on: edge ``j`` joins
    vertex ``j`` and vertex ``j + 1`` (wrapping), so a snapped point is
    inserted directly after vertex ``j`` when the polygon is split.

    Unpacks as ``(point, edge_index)``.
    """
    point: Point
    edge_index: int
    distance: float

    def __iter__(self):
        yield self.point
        yield self.edge_index


@dataclass
class SplitResult:
    """The two open vertex loops produced by a cut. Unpacks as ``(first, second)``."""
    first: List[Point]
    second: List[Point]

    def __iter__(self):
        yield self.first
        yield self.second
