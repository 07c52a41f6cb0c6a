"""Axis-aligned rectangles."""
from typing import NamedTuple

from .point import Point
from .edge import Edge


class Rect(NamedTuple):
    """Rectangle with origin (x, y) at its minimum corner."""
    x: float
    y: float
    width: float
    height: float

    @classmethod
    def from_points(cls, points: list[Point]) -> "Rect":
        """Bounding rect of one or more points."""
        xs = [p.x for p in points]; ys = [p.y for p in points]
        return cls(min(xs), min(ys), max(xs) - min(xs), max(ys) - min(ys))

    @classmethod
    def from_edge(cls, edge: Edge) -> "Rect":
        return cls.from_points([edge.p0, edge.p1])

    @property
    def min_x(self) -> float: return self.x
    @property
    def min_y(self) -> float: return self.y
    @property
    def max_x(self) -> float: return self.x + self.width
    @property
    def max_y(self) -> float: return self.y + self.height
    @property
    def mid_x(self) -> float: return self.x + self.width / 2
    @property
    def mid_y(self) -> float: return self.y + self.height / 2

    @property
    def left_edge(self) -> Edge:
        return Edge(Point(self.min_x, self.max_y), Point(self.min_x, self.min_y))

    @property
    def right_edge(self) -> Edge:
        return Edge(Point(self.max_x, self.min_y), Point(self.max_x, self.max_y))

    @property
    def top_edge(self) -> Edge:
        return Edge(Point(self.max_x, self.max_y), Point(self.min_x, self.max_y))

    @property
    def bottom_edge(self) -> Edge:
        return Edge(Point(self.min_x, self.min_y), Point(self.max_x, self.min_y))

    @property
    def edges(self) -> list[Edge]:
        """Boundary, counter-clockwise from the bottom edge."""
        return [self.bottom_edge, self.right_edge, self.top_edge, self.left_edge]

    def contains(self, p: Point) -> bool:
        """Half-open: min edges inside, max edges outside."""
        return (self.x <= p.x < self.x + self.width
                and self.y <= p.y < self.y + self.height)

    def intersects(self, other: "Rect") -> bool:
        """Overlap with positive area; touching rects do not intersect."""
        return (abs(self.mid_x - other.mid_x) < (self.width + other.width) / 2
                and abs(self.mid_y - other.mid_y) < (self.height + other.height) / 2)

    def intersects_edge(self, edge: Edge) -> bool:
        if self.contains(edge.p0) or self.contains(edge.p1):
            return True
        return any(e.intersects(edge) for e in self.edges)

    def union(self, other: "Rect") -> "Rect":
        min_x = min(self.min_x, other.min_x); max_x = max(self.max_x, other.max_x)
        min_y = min(self.min_y, other.min_y); max_y = max(self.max_y, other.max_y)
        return Rect(min_x, min_y, max_x - min_x, max_y - min_y)
