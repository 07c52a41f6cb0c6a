"""Line segments (Edge) and infinite lines (LinearLine).

A zero-length edge is valid and every query has a branch for it.
"""
from typing import NamedTuple, Optional

from shared.constants import T_TOLERANCE, ULP
from shared.types import CrossDirection
from .point import Point, is_approximately_equal


class RayCrossing(NamedTuple):
    """Crossing of an edge with the leftward horizontal ray from a query point."""
    t: float                 # parameter along the edge
    direction: CrossDirection
    point: Point


class Edge(NamedTuple):
    """Finite segment from p0 to p1."""
    p0: Point
    p1: Point

    @property
    def vector(self) -> Point:
        return self.p1 - self.p0

    @property
    def mid_point(self) -> Point:
        return self.p0.mid(self.p1)

    @property
    def is_empty(self) -> bool:
        return self.p0 == self.p1

    @property
    def length(self) -> float:
        return self.p0.distance(self.p1)

    @property
    def length_squared(self) -> float:
        return self.p0.distance_squared(self.p1)

    def reversed(self) -> "Edge":
        return Edge(self.p1, self.p0)

    def extended_first(self, d: float) -> "Edge":
        return Edge(self.p0.moved_with(d, self.reversed().angle()), self.p1)

    def extended_last(self, d: float) -> "Edge":
        return Edge(self.p0, self.p1.moved_with(d, self.angle()))

    def angle(self) -> float:
        return self.vector.angle()

    def angle_between(self, other: "Edge") -> float:
        """Signed angle from this edge's direction to other's."""
        return Point.difference_angle(self.vector, other.vector)

    def position_at(self, t: float) -> Point:
        return Point.linear(self.p0, self.p1, t)

    # ============================================================
    # Point queries
    # ============================================================
    def _projection(self, p: Point) -> float:
        """Unclamped parameter of p projected onto the supporting line."""
        v = self.vector
        return v.dot(p - self.p0) / v.dot(v)

    def distance(self, p: Point) -> float:
        if self.p0 == self.p1:
            return self.p0.distance(p)
        r = self._projection(p)
        if r <= 0:
            return self.p0.distance(p)
        elif r > 1:
            return self.p1.distance(p)
        return abs(self.vector.cross(p - self.p0)) / self.length

    def distance_squared(self, p: Point) -> float:
        if self.p0 == self.p1:
            return self.p0.distance_squared(p)
        r = self._projection(p)
        if r <= 0:
            return self.p0.distance_squared(p)
        elif r > 1:
            return self.p1.distance_squared(p)
        cv = self.vector.cross(p - self.p0)
        return cv * cv / self.length_squared

    def nearest_t(self, p: Point) -> float:
        """Parameter of the nearest point, clamped to [0, 1]; 0.5 for a point edge."""
        if self.p0 == self.p1:
            return 0.5
        return min(max(self._projection(p), 0.0), 1.0)

    def nearest_point(self, p: Point) -> Point:
        if self.p0 == self.p1:
            return self.p0
        r = self._projection(p)
        if r <= 0:
            return self.p0
        elif r >= 1:
            return self.p1
        return self.p0 + self.vector * r

    def t_from(self, p: Point) -> Optional[float]:
        """Parameter of p on the segment, or None if p is not on it."""
        if self.p0 == self.p1:
            return 0.5 if p == self.p0 else None
        r = self._projection(p)
        if not 0 <= r <= 1:
            return None
        q = self.p0 + self.vector * r
        return r if q.is_approximately_equal(p, tolerance=T_TOLERANCE) else None

    # ============================================================
    # Edge-edge
    # ============================================================
    def _sides(self, other: "Edge") -> tuple[float, float, float, float]:
        """Signed areas (a, b) of self's endpoints against other, (c, d) of other's against self."""
        v0, v1 = self.vector, other.vector
        a = v1.cross(self.p0 - other.p0); b = v1.cross(self.p1 - other.p0)
        c = v0.cross(other.p0 - self.p0); d = v0.cross(other.p1 - self.p0)
        return a, b, c, d

    def intersects(self, other: "Edge") -> bool:
        """True if the segments cross or touch (endpoint contact counts)."""
        a, b, c, d = self._sides(other)
        return c * d <= 0 and a * b <= 0

    def intersects_none0(self, other: "Edge") -> bool:
        """True only for a proper crossing; touching does not count."""
        a, b, c, d = self._sides(other)
        return c * d < 0 and a * b < 0

    def intersection(self, other: "Edge") -> Optional[Point]:
        """Crossing point of two segments, None unless they properly cross."""
        result = self.intersection_point_and_t(other)
        return None if result is None else result[0]

    def intersection_point_and_t(self, other: "Edge") -> Optional[tuple[Point, float, float]]:
        """(point, t on self, t on other) of a proper crossing, else None."""
        a, b, c, d = self._sides(other)
        if not (a * b < 0 and c * d < 0):
            return None
        t0 = abs(a) / (abs(a) + abs(b))
        t1 = abs(c) / (abs(c) + abs(d))
        return self.p0 + self.vector * t0, t0, t1

    def nearest(self, other: "Edge") -> "Edge":
        """Shortest edge joining the two segments (zero-length if they cross)."""
        p = self.intersection(other)
        if p is not None:
            return Edge(p, p)
        d00 = self.distance_squared(other.p0)
        d01 = self.distance_squared(other.p1)
        d10 = other.distance_squared(self.p0)
        d11 = other.distance_squared(self.p1)
        nd = min(d00, d01, d10, d11)
        if nd == d00:
            return Edge(self.nearest_point(other.p0), other.p0)
        elif nd == d01:
            return Edge(self.nearest_point(other.p1), other.p1)
        elif nd == d10:
            return Edge(self.p0, other.nearest_point(self.p0))
        return Edge(self.p1, other.nearest_point(self.p1))

    # ============================================================
    # Ray casting (even-odd rule)
    # ============================================================
    def _spans(self, p: Point) -> bool:
        """Half-open y test, so a shared vertex is counted once."""
        p0, p1 = self.p0, self.p1
        return (p0.y <= p.y < p1.y) or (p1.y <= p.y < p0.y)

    def ray_casting(self, p: Point) -> int:
        """1 if the leftward horizontal ray from p crosses this edge, else 0."""
        if not self._spans(p):
            return 0
        p0, p1 = self.p0, self.p1
        if is_approximately_equal(p1.x, p0.x):
            return 1 if p0.x < p.x else 0
        lhs = p.y * p1.x + p0.x * p1.y + p.x * p0.y
        rhs = p.x * p1.y + p0.y * p1.x + p.y * p0.x
        if p1.y < p0.y:
            return 1 if lhs > rhs else 0
        return 1 if lhs < rhs else 0

    def ray_casting_point_tuples(self, p: Point) -> list[RayCrossing]:
        """Crossing of the leftward horizontal ray from p, with the side it enters from."""
        if not self._spans(p):
            return []
        p0, p1 = self.p0, self.p1
        t = (p.y - p0.y) / (p1.y - p0.y)
        npx = p0.x + (p1.x - p0.x) * t
        if npx < p.x:
            return [RayCrossing(t, CrossDirection.from_value(-self.vector.y), Point(npx, p.y))]
        return []


class LinearLine(NamedTuple):
    """Infinite line through p0 and p1."""
    p0: Point
    p1: Point

    @classmethod
    def from_edge(cls, edge: Edge) -> "LinearLine":
        return cls(edge.p0, edge.p1)

    def distance(self, p: Point) -> float:
        if self.p0 == self.p1:
            return self.p0.distance(p)
        return abs((self.p1 - self.p0).cross(p - self.p0)) / self.p0.distance(self.p1)

    def distance_squared(self, p: Point) -> float:
        if self.p0 == self.p1:
            return self.p0.distance_squared(p)
        cv = (self.p1 - self.p0).cross(p - self.p0)
        return cv * cv / self.p0.distance_squared(self.p1)

    def t_from(self, p: Point) -> float:
        """Unclamped parameter of the projection of p; 0.5 for a point line."""
        if self.p0 == self.p1:
            return 0.5
        v = self.p1 - self.p0
        return v.dot(p - self.p0) / v.dot(v)

    def nearest_point(self, p: Point) -> Point:
        if self.p0 == self.p1:
            return self.p0
        return self.p0 + (self.p1 - self.p0) * self.t_from(p)

    def contains(self, p: Point, is_upper: bool) -> bool:
        """Half-plane test against the perpendicular through p0.

        is_upper selects the side behind p0 (against the p0 -> p1 direction),
        boundary included; otherwise the open side ahead of p0.
        """
        p0, p1 = self.p0, self.p1
        vy = p1.y - p0.y
        if vy == 0:
            if is_upper:
                return p.x <= p0.x if p1.x > p0.x else p.x >= p0.x
            return p.x > p0.x if p1.x > p0.x else p.x < p0.x
        n = -(p1.x - p0.x) / vy
        ny = n * (p.x - p0.x) + p0.y
        if is_upper:
            return p.y <= ny if p1.y > p0.y else p.y >= ny
        return p.y > ny if p1.y > p0.y else p.y < ny

    def intersects(self, other: "LinearLine") -> bool:
        """Lines meet unless they are parallel."""
        return abs((self.p1 - self.p0).cross(other.p1 - other.p0)) >= ULP

    def intersection(self, other: "LinearLine | Edge") -> Optional[Point]:
        """Meeting point with another line, or with a segment (strict crossing)."""
        v0 = self.p1 - self.p0
        if isinstance(other, Edge):
            c = v0.cross(other.p0 - self.p0)
            d = v0.cross(other.p1 - self.p0)
            if not c * d < 0:
                return None
            t = abs(c) / (abs(c) + abs(d))
            return other.p0 + other.vector * t
        v1 = other.p1 - other.p0
        d = v1.cross(v0)
        if abs(d) < ULP:
            return None
        return self.p0 + v0 * (v1.cross(other.p0 - self.p0) / d)
