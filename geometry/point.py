"""2D points/vectors and angle helpers."""
import math
from typing import NamedTuple

from shared.constants import TAU, ULP
from numeric.interpolation import Scalar


def difference_rotation(a: float, b: float) -> float:
    """a - b wrapped into (-pi, pi]."""
    d = a - b
    d -= math.floor(d / TAU) * TAU
    return d - TAU if d > math.pi else d

def clipped_rotation(a: float) -> float:
    """Angle folded back into [-pi, pi]."""
    if a < -math.pi:
        return math.fmod(a + math.pi, TAU) + math.pi
    elif a > math.pi:
        return math.fmod(a - math.pi, TAU) - math.pi
    return a

def is_approximately_equal(a: float, b: float, tolerance: float = ULP) -> bool:
    return abs(a - b) < tolerance


class Point(NamedTuple):
    """Position or vector in the plane. Also the interpolator for points."""
    x: float
    y: float

    @classmethod
    def from_polar(cls, r: float, theta: float) -> "Point":
        return cls(r * math.cos(theta), r * math.sin(theta))

    @classmethod
    def unit(cls, angle: float) -> "Point":
        return cls(math.cos(angle), math.sin(angle))

    # --- vector algebra ---

    def __add__(self, other: "Point") -> "Point":
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Point") -> "Point":
        return Point(self.x - other.x, self.y - other.y)

    def __mul__(self, s: float) -> "Point":
        return Point(self.x * s, self.y * s)

    __rmul__ = __mul__

    def __truediv__(self, s: float) -> "Point":
        return Point(self.x / s, self.y / s)

    def __neg__(self) -> "Point":
        return Point(-self.x, -self.y)

    def dot(self, other: "Point") -> float:
        return self.x * other.x + self.y * other.y

    def cross(self, other: "Point") -> float:
        return self.x * other.y - self.y * other.x

    def length(self) -> float:
        return math.hypot(self.x, self.y)

    def length_squared(self) -> float:
        return self.x * self.x + self.y * self.y

    def distance(self, other: "Point") -> float:
        return (other - self).length()

    def distance_squared(self, other: "Point") -> float:
        return (other - self).length_squared()

    def angle(self) -> float:
        """Direction of this vector, atan2(y, x)."""
        return math.atan2(self.y, self.x)

    def angle_to(self, other: "Point") -> float:
        """Direction from this point to other."""
        return (other - self).angle()

    @property
    def polar(self) -> tuple[float, float]:
        return self.length(), self.angle()

    @property
    def is_empty(self) -> bool:
        return self.x == 0 and self.y == 0

    def mid(self, other: "Point") -> "Point":
        return (self + other) / 2

    def inverted(self) -> "Point":
        """Swap x and y."""
        return Point(self.y, self.x)

    def is_approximately_equal(self, other: "Point", tolerance: float = ULP) -> bool:
        return (is_approximately_equal(self.x, other.x, tolerance)
                and is_approximately_equal(self.y, other.y, tolerance))

    def perpendicular_delta_point(self, distance: float) -> "Point":
        """Vector of the given length, 90 degrees counter-clockwise from self."""
        if self.is_empty:
            return Point(distance, 0.0)
        r = distance / self.length()
        return Point(-self.y * r, self.x * r)

    def moved_with(self, distance: float, angle: float) -> "Point":
        return self + Point.from_polar(distance, angle)

    def moved_rounded_with(self, distance: float, angle: float) -> "Point":
        """moved_with, but axis-aligned angles move along the axis exactly."""
        eq = is_approximately_equal
        pi = math.pi
        if eq(angle, pi) or eq(angle, -pi):
            return Point(self.x - distance, self.y)
        elif eq(angle, pi / 2) or eq(angle, -pi * 3 / 2):
            return Point(self.x, self.y + distance)
        elif eq(angle, -pi / 2) or eq(angle, pi * 3 / 2):
            return Point(self.x, self.y - distance)
        elif eq(angle, 0) or eq(angle, TAU) or eq(angle, -TAU):
            return Point(self.x + distance, self.y)
        return self.moved_with(distance, angle)

    def is_below(self, other: "Point") -> bool:
        return self.y < other.y or (self.y == other.y and self.x < other.x)

    # --- three-point predicates ---

    @staticmethod
    def ccw(p0: "Point", p1: "Point", p2: "Point") -> float:
        return (p1 - p0).cross(p2 - p1)

    @staticmethod
    def difference_angle(a: "Point", b: "Point") -> float:
        """Signed angle from vector a to vector b, in (-pi, pi]."""
        return math.atan2(a.cross(b), a.dot(b))

    @staticmethod
    def turn_angle(p0: "Point", p1: "Point", p2: "Point") -> float:
        """Turn at p1 walking p0 -> p1 -> p2."""
        return Point.difference_angle(p1 - p0, p2 - p1)

    @staticmethod
    def is_convex(p0: "Point", p1: "Point", p2: "Point") -> bool:
        return (p2.y - p0.y) * (p1.x - p0.x) - (p2.x - p0.x) * (p1.y - p0.y) > 0

    @staticmethod
    def is_up_left(p0: "Point", p1: "Point") -> bool:
        return p0.x < p1.x if p0.y == p1.y else p0.y > p1.y

    # --- interpolation ---

    @staticmethod
    def linear(f0: "Point", f1: "Point", t: float) -> "Point":
        return Point(Scalar.linear(f0.x, f1.x, t), Scalar.linear(f0.y, f1.y, t))

    @staticmethod
    def first_spline(f1: "Point", f2: "Point", f3: "Point", t: float) -> "Point":
        return Point(Scalar.first_spline(f1.x, f2.x, f3.x, t),
                     Scalar.first_spline(f1.y, f2.y, f3.y, t))

    @staticmethod
    def spline(f0: "Point", f1: "Point", f2: "Point", f3: "Point", t: float) -> "Point":
        return Point(Scalar.spline(f0.x, f1.x, f2.x, f3.x, t),
                     Scalar.spline(f0.y, f1.y, f2.y, f3.y, t))

    @staticmethod
    def last_spline(f0: "Point", f1: "Point", f2: "Point", t: float) -> "Point":
        return Point(Scalar.last_spline(f0.x, f1.x, f2.x, t),
                     Scalar.last_spline(f0.y, f1.y, f2.y, t))


def circle_points(center: Point = Point(0.0, 0.0), radius: float = 50.0,
                  first_angle: float = math.pi / 2, count: int = 8) -> list[Point]:
    """count points evenly spaced counter-clockwise on a circle."""
    theta = TAU / count
    return [center.moved_with(radius, first_angle + i * theta) for i in range(count)]
