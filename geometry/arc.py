"""Circular arcs: angular containment, intersection and ray casting."""
import math
from typing import Iterator, NamedTuple

import numpy as np

from shared.constants import ARC_SAMPLE_COUNT, TANGENT_TOLERANCE, TAU
from shared.types import CircularOrientation
from .point import Point, difference_rotation
from .edge import Edge, LinearLine
from .rect import Rect


class Arc(NamedTuple):
    """Arc of the circle (center, radius) from start_angle to end_angle (radians).

    Immutable: start_position and end_position are derived from the fields on
    every access, and the with_* methods build a new arc.
    """
    center: Point = Point(0.0, 0.0)
    radius: float = 0.0
    start_angle: float = 0.0
    end_angle: float = TAU

    @property
    def start_position(self) -> Point:
        return self.center.moved_with(self.radius, self.start_angle)

    @property
    def end_position(self) -> Point:
        return self.center.moved_with(self.radius, self.end_angle)

    def with_center(self, center: Point) -> "Arc":
        return self._replace(center=center)

    def with_radius(self, radius: float) -> "Arc":
        return self._replace(radius=radius)

    def with_angles(self, start_angle: float, end_angle: float) -> "Arc":
        return self._replace(start_angle=start_angle, end_angle=end_angle)

    def to_vertical(self) -> "Arc":
        """Arc with the center's x and y swapped."""
        return self._replace(center=self.center.inverted())

    @property
    def arc_length(self) -> float:
        return self.radius * abs(self.end_angle - self.start_angle)

    @property
    def orientation(self) -> CircularOrientation:
        if self.start_angle > self.end_angle:
            return CircularOrientation.CLOCKWISE
        return CircularOrientation.COUNTER_CLOCKWISE

    @property
    def bounds(self) -> Rect:
        """Bounds of the full circle."""
        r = self.radius
        return Rect(self.center.x - r, self.center.y - r, r * 2, r * 2)

    # ============================================================
    # Angular containment
    # ============================================================
    def contains(self, angle: float, include_lower: bool = True, include_upper: bool = True) -> bool:
        """True if angle lies in the arc's span, modulo 2*pi.

        The span runs from min(start, end) to max(start, end); each bound is
        open or closed independently.
        """
        sa = min(self.start_angle, self.end_angle)
        wa = max(self.start_angle, self.end_angle) - sa
        da = difference_rotation(angle, sa)
        # A full or wider sweep leaves no angle outside
        if wa >= TAU:
            return da != 0 or include_lower or include_upper
        if da < 0:
            da += TAU
        lower_ok = da >= 0 if include_lower else da > 0
        upper_ok = da <= wa if include_upper else da < wa
        return lower_ok and upper_ok

    def _contains_point_angle(self, p: Point, include_lower: bool = True,
                              include_upper: bool = True) -> bool:
        return self.contains(self.center.angle_to(p), include_lower, include_upper)

    def distance_squared(self, p: Point) -> float:
        """Squared distance from p to the nearest point of the arc."""
        if not self._contains_point_angle(p):
            return min(self.start_position.distance_squared(p),
                       self.end_position.distance_squared(p))
        return (self.center.distance(p) - self.radius) ** 2

    # ============================================================
    # Intersection
    # ============================================================
    def intersects(self, other: "Rect | Edge | Arc") -> bool:
        if isinstance(other, Rect):
            return self.intersects_rect(other)
        if isinstance(other, Edge):
            return self.intersects_edge(other)
        if isinstance(other, Arc):
            return self.intersects_arc(other)
        raise TypeError(f"Cannot intersect Arc with {type(other).__name__}")

    def intersects_rect(self, rect: Rect) -> bool:
        """True if the arc crosses the rect's boundary."""
        if not self.bounds.intersects(rect):
            return False
        return any(self.intersects_edge(e) for e in rect.edges)

    def edge_intersections(self, edge: Edge) -> list[Point]:
        """Points where edge meets the arc.

        Each circle-line solution must lie within the segment's [0, 1]
        parameter range and within the arc's angular span.
        """
        if edge.p0 == edge.p1:
            d = self.center.distance_squared(edge.p0)
            if d == self.radius * self.radius and self._contains_point_angle(edge.p0):
                return [edge.p0]
            return []
        p = LinearLine.from_edge(edge).nearest_point(self.center)
        d_squared = self.center.distance_squared(p)
        r_squared = self.radius * self.radius
        if d_squared > r_squared * (1 + TANGENT_TOLERANCE):
            return []
        ev = edge.vector
        if d_squared >= r_squared * (1 - TANGENT_TOLERANCE):
            candidates = [p]
        else:
            dp = Point.from_polar(math.sqrt(r_squared - d_squared), ev.angle())
            candidates = [p + dp, p - dp]
        rv = 1 / ev.length_squared()
        result = []
        for q in candidates:
            t = ev.dot(q - edge.p0) * rv
            if 0 <= t <= 1 and self._contains_point_angle(q):
                result.append(q)
        return result

    def intersects_edge(self, edge: Edge) -> bool:
        return bool(self.edge_intersections(edge))

    def edges(self, count: int = ARC_SAMPLE_COUNT) -> Iterator[Edge]:
        """Polyline through count evenly spaced points from start to end angle."""
        angles = np.linspace(self.start_angle, self.end_angle, count).tolist()
        old_p = self.start_position
        for a in angles[1:]:
            p = self.center.moved_with(self.radius, a)
            yield Edge(old_p, p)
            old_p = p

    def intersects_arc(self, arc: "Arc", count: int = ARC_SAMPLE_COUNT) -> bool:
        """Approximate test against arc sampled as a count-point polyline.

        Sampling stops at the first intersecting sub-edge. Chords cut inside
        a curved arc, so near-tangent contacts can be missed.
        """
        return any(self.intersects_edge(e) for e in arc.edges(count))

    # ============================================================
    # Ray casting (even-odd rule)
    # ============================================================
    def ray_casting(self, p: Point) -> int:
        """Number of times the leftward horizontal ray from p crosses the arc.

        Endpoint inclusivity follows which side of the center each endpoint
        is on, so arcs chained with edges count a shared vertex once.
        """
        cp = self.center
        sp, ep = self.start_position, self.end_position
        if sp.x == cp.x:
            is_up0 = is_up1 = sp.x < cp.x
        elif ep.x == cp.x:
            is_up0 = is_up1 = ep.x < cp.x
        else:
            is_up0 = sp.x < cp.x
            is_up1 = ep.x < cp.x
        # x^2 + b*x + c = 0 on the line y = p.y
        b = -2 * cp.x
        dpy = p.y - cp.y
        c = cp.x * cp.x - (self.radius + dpy) * (self.radius - dpy)
        d = b * b - 4 * c
        if d <= 0:
            return 0
        s = math.sqrt(d)
        count = 0
        for qx in ((-b - s) / 2, (-b + s) / 2):
            if qx < p.x and self._contains_point_angle(Point(qx, p.y), is_up0, not is_up1):
                count += 1
        return count
