"""Shared type definitions for the kernel."""
from enum import Enum, IntEnum
from typing import Generic, NamedTuple, TypeVar

T = TypeVar("T")


class Exact(NamedTuple, Generic[T]):
    """Overflow-aware result that stayed exact."""
    value: T


class Approximate(NamedTuple):
    """Overflow-aware result that fell back to a double."""
    value: float


OverResult = Exact | Approximate


class RoundingRule(Enum):
    TOWARD_ZERO = "towardZero"
    AWAY_FROM_ZERO = "awayFromZero"
    DOWN = "down"
    UP = "up"
    TO_NEAREST_OR_AWAY_FROM_ZERO = "toNearestOrAwayFromZero"
    TO_NEAREST_OR_EVEN = "toNearestOrEven"


class KeyframeType(IntEnum):
    STEP = 0
    LINEAR = 1
    SPLINE = 2


class CircularOrientation(Enum):
    CLOCKWISE = "clockwise"
    COUNTER_CLOCKWISE = "counterClockwise"


class CrossDirection(IntEnum):
    """Side of a direction vector: sign of a cross product."""
    LEFT = 0
    STRAIGHT = 1
    RIGHT = 2

    @classmethod
    def from_value(cls, v: float) -> "CrossDirection":
        if v > 0:
            return cls.LEFT
        elif v < 0:
            return cls.RIGHT
        return cls.STRAIGHT
