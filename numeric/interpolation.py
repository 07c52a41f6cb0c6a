"""Interpolation contract for keyframe values, with scalar and composite implementations.

An interpolator supplies four blends, each taking a normalized position t in [0, 1]:

    linear(f0, f1, t)                straight blend from f0 to f1
    first_spline(f1, f2, f3, t)      first segment of a track, no point before f1
    spline(f0, f1, f2, f3, t)        Catmull-Rom between f1 and f2
    last_spline(f0, f1, f2, t)       last segment of a track, no point after f2

Value types that can hold methods (geometry.Point) implement the protocol as
static methods on the class. Built-in values go through Scalar/Integer, and
composites wrap an element interpolator with SequenceOf/OptionalOf.
"""
from typing import Optional, Protocol, Sequence, TypeVar

V = TypeVar("V")


class Interpolator(Protocol[V]):
    def linear(self, f0: V, f1: V, t: float) -> V: ...
    def first_spline(self, f1: V, f2: V, f3: V, t: float) -> V: ...
    def spline(self, f0: V, f1: V, f2: V, f3: V, t: float) -> V: ...
    def last_spline(self, f0: V, f1: V, f2: V, t: float) -> V: ...


# ============================================================
# Scalars
# ============================================================
class Scalar:
    """Catmull-Rom blends over floats."""

    @staticmethod
    def linear(f0: float, f1: float, t: float) -> float:
        return f0 * (1 - t) + f1 * t

    @staticmethod
    def integral_linear(f0: float, f1: float, a: float, b: float) -> float:
        """Integral of the linear blend over t in [a, b]."""
        f01 = f1 - f0
        fa = a * (f01 * a / 2 + f0)
        fb = b * (f01 * b / 2 + f0)
        return fb - fa

    @staticmethod
    def first_spline(f1: float, f2: float, f3: float, t: float) -> float:
        a = f1 - 2 * f2 + f3
        b = -3 * f1 + 4 * f2 - f3
        c = 2 * f1
        return (a * t * t + b * t + c) / 2

    @staticmethod
    def spline(f0: float, f1: float, f2: float, f3: float, t: float) -> float:
        a = -f0 + 3 * f1 - 3 * f2 + f3
        b = 2 * f0 - 5 * f1 + 4 * f2 - f3
        c = -f0 + f2
        d = 2 * f1
        return (a * t * t * t + b * t * t + c * t + d) / 2

    @staticmethod
    def last_spline(f0: float, f1: float, f2: float, t: float) -> float:
        a = f0 - 2 * f1 + f2
        b = -f0 + f2
        c = 2 * f1
        return (a * t * t + b * t + c) / 2


class Integer:
    """Scalar blends evaluated in doubles, truncated back to int."""

    @staticmethod
    def linear(f0: int, f1: int, t: float) -> int:
        return int(Scalar.linear(f0, f1, t))

    @staticmethod
    def first_spline(f1: int, f2: int, f3: int, t: float) -> int:
        return int(Scalar.first_spline(f1, f2, f3, t))

    @staticmethod
    def spline(f0: int, f1: int, f2: int, f3: int, t: float) -> int:
        return int(Scalar.spline(f0, f1, f2, f3, t))

    @staticmethod
    def last_spline(f0: int, f1: int, f2: int, t: float) -> int:
        return int(Scalar.last_spline(f0, f1, f2, t))


# ============================================================
# Composites
# ============================================================
def _like(anchor: Sequence, items: list) -> Sequence:
    return tuple(items) if isinstance(anchor, tuple) else items


class SequenceOf:
    """Index-aligned blends of homogeneous sequences.

    The anchor (f0 for linear, f1 otherwise) decides the length; its
    elements without a partner pass through unchanged, and a missing outer
    neighbour is replaced by the nearest present one.
    """

    def __init__(self, element: Interpolator):
        self.element = element

    def linear(self, f0: Sequence, f1: Sequence, t: float) -> Sequence:
        if not f0:
            return f0
        return _like(f0, [e0 if i >= len(f1) else self.element.linear(e0, f1[i], t)
                          for i, e0 in enumerate(f0)])

    def first_spline(self, f1: Sequence, f2: Sequence, f3: Sequence, t: float) -> Sequence:
        if not f1:
            return f1
        items = []
        for i, e1 in enumerate(f1):
            if i >= len(f2):
                items.append(e1)
                continue
            e2 = f2[i]
            e3 = e2 if i >= len(f3) else f3[i]
            items.append(self.element.first_spline(e1, e2, e3, t))
        return _like(f1, items)

    def spline(self, f0: Sequence, f1: Sequence, f2: Sequence, f3: Sequence, t: float) -> Sequence:
        if not f1:
            return f1
        items = []
        for i, e1 in enumerate(f1):
            if i >= len(f2):
                items.append(e1)
                continue
            e0 = e1 if i >= len(f0) else f0[i]
            e2 = f2[i]
            e3 = e2 if i >= len(f3) else f3[i]
            items.append(self.element.spline(e0, e1, e2, e3, t))
        return _like(f1, items)

    def last_spline(self, f0: Sequence, f1: Sequence, f2: Sequence, t: float) -> Sequence:
        if not f1:
            return f1
        items = []
        for i, e1 in enumerate(f1):
            if i >= len(f2):
                items.append(e1)
                continue
            e0 = e1 if i >= len(f0) else f0[i]
            items.append(self.element.last_spline(e0, e1, f2[i], t))
        return _like(f1, items)


class OptionalOf:
    """Blends of values that may be None.

    A None anchor gives None. A None neighbour degrades the blend
    (spline -> first/last spline -> linear -> the anchor itself); no value
    is ever made up for a missing one.
    """

    def __init__(self, wrapped: Interpolator):
        self.wrapped = wrapped

    def linear(self, f0: Optional[V], f1: Optional[V], t: float) -> Optional[V]:
        if f0 is None:
            return None
        if f1 is None:
            return f0
        return self.wrapped.linear(f0, f1, t)

    def first_spline(self, f1, f2, f3, t: float):
        if f1 is None:
            return None
        if f2 is None:
            return f1
        if f3 is None:
            return self.wrapped.linear(f1, f2, t)
        return self.wrapped.first_spline(f1, f2, f3, t)

    def spline(self, f0, f1, f2, f3, t: float):
        if f1 is None:
            return None
        if f2 is None:
            return f1
        if f0 is not None:
            if f3 is not None:
                return self.wrapped.spline(f0, f1, f2, f3, t)
            return self.wrapped.last_spline(f0, f1, f2, t)
        if f3 is not None:
            return self.wrapped.first_spline(f1, f2, f3, t)
        return self.wrapped.linear(f1, f2, t)

    def last_spline(self, f0, f1, f2, t: float):
        if f1 is None:
            return None
        if f2 is None:
            return f1
        if f0 is None:
            return self.wrapped.linear(f1, f2, t)
        return self.wrapped.last_spline(f0, f1, f2, t)
