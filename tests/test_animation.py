"""Tests for animation/keyframe.py track evaluation."""
import pytest
from animation import Animation, Keyframe, TimeResult, as_time
from geometry import Point
from numeric import Rational, OptionalOf, Scalar, SequenceOf
from shared.types import KeyframeType


# --- as_time ---

def test_as_time():
    assert as_time(3) == Rational(3)
    assert as_time(0.25) == Rational(1, 4)
    r = Rational(2, 3)
    assert as_time(r) is r


# --- ordering ---

def test_insert_keeps_order_and_is_stable():
    a = Animation()
    a.insert(Keyframe("a", time=Rational(1)))
    a.insert(Keyframe("b", time=Rational(0)))
    a.insert(Keyframe("c", time=Rational(1)))
    a.insert(Keyframe("d", time=Rational(1, 2)))
    assert [k.value for k in a.keyframes] == ["b", "d", "a", "c"]
    assert len(a) == 4


def test_keyframes_is_read_only_view():
    a = Animation([Keyframe(1.0)])
    assert isinstance(a.keyframes, tuple)


def test_keyframe_defaults():
    k = Keyframe(5.0)
    assert k.type == KeyframeType.SPLINE
    assert k.time == 0


# --- time_result ---

def test_time_result_inside(linear_track):
    assert linear_track.time_result(Rational(3, 2)) == TimeResult(1, Rational(1, 2), Rational(1), Rational(3, 2))


def test_time_result_on_keyframe(linear_track):
    r = linear_track.time_result(1)
    assert r.index == 1 and r.internal_time == 0


def test_time_result_after_last(linear_track):
    assert linear_track.time_result(5) == TimeResult(2, Rational(3), None, Rational(5))


def test_time_result_before_first():
    a = Animation([Keyframe(0.0, time=Rational(1)), Keyframe(1.0, time=Rational(3))])
    assert a.time_result(0) == TimeResult(0, Rational(-1), Rational(2), Rational(0))


def test_time_result_before_single_keyframe():
    a = Animation([Keyframe(0.0, time=Rational(1))])
    assert a.time_result(0).section_time is None


def test_empty_animation():
    a = Animation()
    assert a.time_result(1) is None
    assert a.value_at(1) is None


# --- value ---

@pytest.mark.parametrize("t,expected", [
    (0, 0.0), (0.5, 0.5), (1, 1.0), (Rational(3, 2), 1.5), (2, 2.0),
])
def test_linear_values(linear_track, t, expected):
    assert linear_track.value_at(t) == pytest.approx(expected)


@pytest.mark.parametrize("t,expected", [(-1, 0.0), (-0.5, 0.0), (2.5, 2.0), (100, 2.0)])
def test_clamps_outside_track(linear_track, t, expected):
    assert linear_track.value_at(t) == expected


@pytest.mark.parametrize("t", [-10, 0, 3, Rational(7, 2), 10])
def test_single_keyframe_is_constant(t):
    a = Animation([Keyframe(7.0, KeyframeType.SPLINE, Rational(3))])
    assert a.value_at(t) == 7.0


def test_step_holds_value():
    a = Animation([Keyframe(0.0, KeyframeType.STEP, Rational(0)),
                   Keyframe(1.0, KeyframeType.STEP, Rational(1))])
    assert a.value_at(0.9) == 0.0
    assert a.value_at(1) == 1.0


def test_two_spline_keyframes_blend_linearly():
    a = Animation([Keyframe(0.0, KeyframeType.SPLINE, Rational(0)),
                   Keyframe(4.0, KeyframeType.SPLINE, Rational(1))])
    assert a.value_at(0.25) == pytest.approx(1.0)


@pytest.mark.parametrize("t", [0.5, 1.5, 2.5])
def test_spline_segments_follow_line(spline_track, t):
    # first_spline, spline and last_spline segments respectively
    assert spline_track.value_at(t) == pytest.approx(t)


def test_spline_uses_neighbours():
    a = Animation([Keyframe(float(v), KeyframeType.SPLINE, Rational(i)) for i, v in enumerate([0, 1, 4, 9])])
    assert a.value_at(1.5) == pytest.approx(Scalar.spline(0.0, 1.0, 4.0, 9.0, 0.5))
    assert a.value_at(0.5) == pytest.approx(Scalar.first_spline(0.0, 1.0, 4.0, 0.5))
    assert a.value_at(2.5) == pytest.approx(Scalar.last_spline(1.0, 4.0, 9.0, 0.5))


def test_linear_keyframe_in_spline_track():
    a = Animation([Keyframe(0.0, KeyframeType.SPLINE, Rational(0)),
                   Keyframe(1.0, KeyframeType.LINEAR, Rational(1)),
                   Keyframe(4.0, KeyframeType.SPLINE, Rational(2)),
                   Keyframe(9.0, KeyframeType.SPLINE, Rational(3))])
    assert a.value_at(1.5) == pytest.approx(2.5)


def test_zero_length_section_clamps(linear_track):
    r = TimeResult(0, Rational(1, 2), Rational(0), Rational(1, 2))
    assert linear_track.value(r) == 0.0


def test_equal_times_take_later_keyframe():
    a = Animation([Keyframe(0.0, KeyframeType.LINEAR, Rational(0)),
                   Keyframe(5.0, KeyframeType.LINEAR, Rational(1)),
                   Keyframe(10.0, KeyframeType.LINEAR, Rational(1))])
    assert a.value_at(1) == 10.0
    assert a.value_at(0.5) == pytest.approx(2.5)


# --- other value types ---

def test_point_track():
    a = Animation([Keyframe(Point(0.0, 0.0), KeyframeType.LINEAR, Rational(0)),
                   Keyframe(Point(2.0, 4.0), KeyframeType.LINEAR, Rational(2))], interpolator=Point)
    assert a.value_at(1) == Point(1.0, 2.0)


def test_sequence_track():
    a = Animation([Keyframe([0.0, 0.0], KeyframeType.LINEAR, Rational(0)),
                   Keyframe([2.0, 4.0], KeyframeType.LINEAR, Rational(1))], interpolator=SequenceOf(Scalar))
    assert a.value_at(0.5) == [1.0, 2.0]


def test_optional_track():
    a = Animation([Keyframe(0.0, KeyframeType.LINEAR, Rational(0)),
                   Keyframe(None, KeyframeType.LINEAR, Rational(1))], interpolator=OptionalOf(Scalar))
    assert a.value_at(0.5) == 0.0
    assert a.value_at(1) is None


def test_insert_converts_plain_times():
    a = Animation([Keyframe(0.0, KeyframeType.LINEAR, Rational(0))])
    a.insert(Keyframe(2.0, KeyframeType.LINEAR, 0.5))
    a.insert(Keyframe(1.0, KeyframeType.LINEAR, 1))
    assert [k.time for k in a.keyframes] == [Rational(0), Rational(1, 2), Rational(1)]
    assert all(isinstance(k.time, Rational) for k in a.keyframes)
    assert a.value_at(0.25) == pytest.approx(1.0)
