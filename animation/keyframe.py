"""Keyframe tracks evaluated at arbitrary times.

Evaluation is two-phase: time_result() locates the segment containing a
query time, value() blends the keyframes around it with the track's
interpolator.
"""
from typing import Generic, Iterable, NamedTuple, Optional, TypeVar

from numeric.interpolation import Interpolator, Scalar
from numeric.rational import Rational
from shared.types import KeyframeType

V = TypeVar("V")

TimeLike = Rational | int | float


def as_time(t: TimeLike) -> Rational:
    """Rational time from a Rational, int or float (floats via continued fractions)."""
    if isinstance(t, Rational):
        return t
    if isinstance(t, int):
        return Rational(t)
    return Rational.from_float(t)


class Keyframe(NamedTuple, Generic[V]):
    value: V
    type: KeyframeType = KeyframeType.SPLINE
    time: Rational = Rational(0)


class TimeResult(NamedTuple):
    index: int                          # keyframe the segment starts at
    internal_time: Rational             # query time minus that keyframe's time
    section_time: Optional[Rational]    # length of the segment, None after the last keyframe
    time: Rational                      # the query time


class Animation(Generic[V]):
    """Keyframes kept in non-decreasing time order.

    Equal times keep insertion order. The animation owns its keyframes; the
    keyframes property hands out a tuple so the order cannot be broken from
    outside.
    """

    def __init__(self, keyframes: Iterable[Keyframe] = (),
                 interpolator: Interpolator = Scalar):
        self.interpolator = interpolator
        self._keyframes: list[Keyframe] = []
        for k in keyframes:
            self.insert(k)

    @property
    def keyframes(self) -> tuple[Keyframe, ...]:
        return tuple(self._keyframes)

    def __len__(self) -> int:
        return len(self._keyframes)

    def __repr__(self) -> str:
        return f"Animation({self._keyframes!r})"

    def insert(self, keyframe: Keyframe) -> None:
        """Insert before the first keyframe with a strictly later time.

        An int or float time is converted to Rational first.
        """
        keyframe = keyframe._replace(time=as_time(keyframe.time))
        for i, k in enumerate(self._keyframes):
            if keyframe.time < k.time:
                self._keyframes.insert(i, keyframe)
                return
        self._keyframes.append(keyframe)

    def time_result(self, t: TimeLike) -> Optional[TimeResult]:
        """Locate the segment for time t; None for an empty animation.

        Before the first keyframe the result anchors at index 0 with a
        negative internal time.
        """
        if not self._keyframes:
            return None
        t = as_time(t)
        next_t: Optional[Rational] = None
        for i in range(len(self._keyframes) - 1, -1, -1):
            kt = self._keyframes[i].time
            if t >= kt:
                section = None if next_t is None else next_t - kt
                return TimeResult(i, t - kt, section, t)
            next_t = kt
        first_t = self._keyframes[0].time
        section = self._keyframes[1].time - first_t if len(self._keyframes) > 1 else None
        return TimeResult(0, t - first_t, section, t)

    def value(self, result: TimeResult) -> Optional[V]:
        """Blend the keyframes around a located segment."""
        keyframes = self._keyframes
        if not keyframes:
            return None
        i1, it, st = result.index, result.internal_time, result.section_time
        k1 = keyframes[i1]
        if k1.type == KeyframeType.STEP:
            return k1.value
        # Clamp outside the track and on zero-length sections
        if it <= 0 or i1 + 1 >= len(keyframes) or st is None or st <= 0:
            return k1.value
        k2 = keyframes[i1 + 1]
        t = float(it / st)
        f = self.interpolator
        if len(keyframes) <= 2 or k1.type == KeyframeType.LINEAR:
            return f.linear(k1.value, k2.value, t)
        has_previous = i1 - 1 >= 0
        has_after_next = i1 + 2 < len(keyframes)
        if has_previous and has_after_next:
            return f.spline(keyframes[i1 - 1].value, k1.value, k2.value, keyframes[i1 + 2].value, t)
        elif has_previous:
            return f.last_spline(keyframes[i1 - 1].value, k1.value, k2.value, t)
        elif has_after_next:
            return f.first_spline(k1.value, k2.value, keyframes[i1 + 2].value, t)
        return f.linear(k1.value, k2.value, t)

    def value_at(self, t: TimeLike) -> Optional[V]:
        result = self.time_result(t)
        return None if result is None else self.value(result)
