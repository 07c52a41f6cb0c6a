"""Shared test fixtures for kernel tests."""
import math
import pytest
from animation import Animation, Keyframe
from geometry import Arc, Edge, Point
from numeric import Rational
from shared.types import KeyframeType


@pytest.fixture(scope="session")
def square():
    """Closed counter-clockwise square (0,0)-(2,2) as edges."""
    pts = [Point(0.0, 0.0), Point(2.0, 0.0), Point(2.0, 2.0), Point(0.0, 2.0)]
    return [Edge(pts[i], pts[(i + 1) % 4]) for i in range(4)]


@pytest.fixture(scope="session")
def unit_circle():
    """Full unit circle at the origin."""
    return Arc(Point(0.0, 0.0), 1.0, 0.0, 2 * math.pi)


@pytest.fixture(scope="session")
def upper_half():
    """Upper unit half circle, 0 to pi."""
    return Arc(Point(0.0, 0.0), 1.0, 0.0, math.pi)


@pytest.fixture
def linear_track():
    """Linear keyframes 0 @ t=0, 1 @ t=1, 2 @ t=2."""
    return Animation([Keyframe(float(i), KeyframeType.LINEAR, Rational(i)) for i in range(3)])


@pytest.fixture
def spline_track():
    """Spline keyframes on y = t: 0, 1, 2, 3 at t = 0..3."""
    return Animation([Keyframe(float(i), KeyframeType.SPLINE, Rational(i)) for i in range(4)])
