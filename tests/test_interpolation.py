"""Tests for numeric/interpolation.py blends."""
import pytest
from geometry.point import Point
from numeric.interpolation import Scalar, Integer, SequenceOf, OptionalOf


# --- Scalar ---

def test_linear():
    assert Scalar.linear(0.0, 10.0, 0.25) == pytest.approx(2.5)
    assert Scalar.linear(4.0, 8.0, 0.0) == 4.0
    assert Scalar.linear(4.0, 8.0, 1.0) == 8.0


def test_integral_linear():
    # Area under 0 -> 2 over [0, 1]
    assert Scalar.integral_linear(0.0, 2.0, 0.0, 1.0) == pytest.approx(1.0)
    assert Scalar.integral_linear(1.0, 1.0, 0.25, 0.75) == pytest.approx(0.5)


@pytest.mark.parametrize("t", [0.0, 0.25, 0.5, 0.9, 1.0])
def test_splines_reproduce_lines(t):
    assert Scalar.spline(0.0, 1.0, 2.0, 3.0, t) == pytest.approx(1.0 + t)
    assert Scalar.first_spline(1.0, 2.0, 3.0, t) == pytest.approx(1.0 + t)
    assert Scalar.last_spline(0.0, 1.0, 2.0, t) == pytest.approx(1.0 + t)


@pytest.mark.parametrize("f0,f1,f2,f3", [(0, 5, -2, 7), (3, 3, 3, 3), (-1, 4, 4, 10)])
def test_spline_passes_through_keys(f0, f1, f2, f3):
    assert Scalar.spline(f0, f1, f2, f3, 0.0) == pytest.approx(f1)
    assert Scalar.spline(f0, f1, f2, f3, 1.0) == pytest.approx(f2)
    assert Scalar.first_spline(f1, f2, f3, 0.0) == pytest.approx(f1)
    assert Scalar.first_spline(f1, f2, f3, 1.0) == pytest.approx(f2)
    assert Scalar.last_spline(f0, f1, f2, 0.0) == pytest.approx(f1)
    assert Scalar.last_spline(f0, f1, f2, 1.0) == pytest.approx(f2)


def test_integer_truncates():
    assert Integer.linear(0, 3, 0.5) == 1
    assert Integer.linear(0, -3, 0.5) == -1
    assert Integer.spline(0, 1, 2, 3, 0.5) == 1


def test_point_blends():
    assert Point.linear(Point(0.0, 0.0), Point(2.0, 4.0), 0.5) == Point(1.0, 2.0)
    p = Point.spline(Point(0.0, 0.0), Point(1.0, 1.0), Point(2.0, 2.0), Point(3.0, 3.0), 0.5)
    assert p.is_approximately_equal(Point(1.5, 1.5), 1e-12)


# --- SequenceOf ---

def test_sequence_linear():
    s = SequenceOf(Scalar)
    assert s.linear([0.0, 10.0], [10.0, 20.0], 0.5) == [5.0, 15.0]


def test_sequence_keeps_tuple():
    s = SequenceOf(Scalar)
    assert s.linear((0.0,), (2.0,), 0.5) == (1.0,)


def test_sequence_trailing_elements_pass_through():
    s = SequenceOf(Scalar)
    assert s.linear([0.0, 10.0, 5.0], [10.0, 20.0], 0.5) == [5.0, 15.0, 5.0]
    assert s.last_spline([0.0], [1.0, 7.0], [2.0], 0.5) == pytest.approx([1.5, 7.0])


def test_sequence_missing_outer_neighbour_uses_nearest():
    s = SequenceOf(Scalar)
    r = s.spline([0.0], [1.0, 1.0], [2.0, 2.0], [3.0], 0.5)
    assert r[0] == pytest.approx(1.5)
    assert r[1] == pytest.approx(Scalar.spline(1.0, 1.0, 2.0, 2.0, 0.5))


def test_sequence_empty_anchor():
    s = SequenceOf(Scalar)
    assert s.spline([1.0], [], [2.0], [3.0], 0.5) == []
    assert s.first_spline((), (1.0,), (2.0,), 0.5) == ()


def test_sequence_nested():
    s = SequenceOf(SequenceOf(Scalar))
    assert s.linear([[0.0, 2.0]], [[2.0, 4.0]], 0.5) == [[1.0, 3.0]]


# --- OptionalOf ---

class TestOptionalOf:
    o = OptionalOf(Scalar)

    def test_none_anchor_gives_none(self):
        assert self.o.linear(None, 1.0, 0.5) is None
        assert self.o.first_spline(None, 1.0, 2.0, 0.5) is None
        assert self.o.spline(0.0, None, 2.0, 3.0, 0.5) is None
        assert self.o.last_spline(0.0, None, 2.0, 0.5) is None

    def test_missing_partner_passes_anchor(self):
        assert self.o.linear(1.0, None, 0.5) == 1.0
        assert self.o.spline(0.0, 1.0, None, 3.0, 0.5) == 1.0
        assert self.o.first_spline(1.0, None, 3.0, 0.5) == 1.0
        assert self.o.last_spline(0.0, 1.0, None, 0.5) == 1.0

    def test_spline_degrades(self):
        # Curved data so each degraded blend is distinguishable
        f0, f1, f2, f3 = 0.0, 1.0, 4.0, 9.0
        t = 0.5
        assert self.o.spline(f0, f1, f2, f3, t) == Scalar.spline(f0, f1, f2, f3, t)
        assert self.o.spline(None, f1, f2, f3, t) == Scalar.first_spline(f1, f2, f3, t)
        assert self.o.spline(f0, f1, f2, None, t) == Scalar.last_spline(f0, f1, f2, t)
        assert self.o.spline(None, f1, f2, None, t) == Scalar.linear(f1, f2, t)

    def test_end_splines_degrade_to_linear(self):
        assert self.o.first_spline(1.0, 4.0, None, 0.5) == Scalar.linear(1.0, 4.0, 0.5)
        assert self.o.last_spline(None, 1.0, 4.0, 0.5) == Scalar.linear(1.0, 4.0, 0.5)
