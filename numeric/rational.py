"""Exact rational numbers in canonical p/q form with overflow-aware variants."""
import functools
import logging
import math
import operator
from typing import Optional

import numpy as np

from shared.constants import CF_MAX_COUNT, CF_MAX_DENOMINATOR, CF_TOLERANCE, OVER_POW_LIMIT
from shared.errors import CorruptData, DivisionByZero, KernelError
from shared.types import Approximate, Exact, OverResult, RoundingRule
from .integer import fits, float_pow

logger = logging.getLogger(__name__)


def _ratio(p: int, q: int) -> float:
    """p/q as a double, saturating to +/-inf."""
    try:
        return p / q
    except OverflowError:
        return math.inf if (p > 0) == (q > 0) else -math.inf


@functools.total_ordering
class Rational:
    """Immutable fraction p/q with q > 0 and gcd(|p|, q) == 1.

    Ints mix freely with Rationals in arithmetic and comparisons.
    """
    __slots__ = ("_p", "_q")

    def __init__(self, p: int = 0, q: int = 1):
        p = operator.index(p); q = operator.index(q)
        if q == 0:
            raise DivisionByZero(f"Division by zero: {p}/0")
        d = math.gcd(p, q)
        if q < 0:
            d = -d
        self._p = p // d
        self._q = q // d

    @property
    def p(self) -> int:
        return self._p

    @property
    def q(self) -> int:
        return self._q

    # ============================================================
    # Alternate constructors
    # ============================================================
    @classmethod
    def from_float(cls, x: float, max_denominator: int = CF_MAX_DENOMINATOR,
                   tolerance: float = CF_TOLERANCE) -> "Rational":
        """Best continued-fraction convergent of x with denominator <= max_denominator.

        Stops once the remainder is within tolerance of an integer.
        """
        if not math.isfinite(x):
            raise KernelError(f"Cannot approximate non-finite value {x}")
        a = math.floor(x)
        p0, q0, p1, q1 = 1, 0, a, 1
        while abs(x - a) >= tolerance:
            x = 1 / (x - a)
            a = math.floor(x)
            p2 = a * p1 + p0; q2 = a * q1 + q0
            if q2 > max_denominator:
                break
            p0, q0, p1, q1 = p1, q1, p2, q2
        return cls(p1, q1)

    @staticmethod
    def continued_fractions(x: float, max_count: int = CF_MAX_COUNT) -> list[int]:
        """Leading continued-fraction terms [a0; a1, a2, ...] of x."""
        cfs = []
        a = math.floor(x)
        for _ in range(max_count):
            cfs.append(a)
            if abs(x - a) < CF_TOLERANCE:
                break
            x = 1 / (x - a)
            a = math.floor(x)
        return cfs

    @classmethod
    def from_bool(cls, o: bool) -> "Rational":
        return cls(1 if o else 0)

    @classmethod
    def random(cls, lower: "Rational | int", upper: "Rational | int",
               rng: Optional[np.random.Generator] = None) -> "Rational":
        """Rational approximation of a uniform sample in [lower, upper]."""
        rng = rng if rng is not None else np.random.default_rng()
        return cls.from_float(float(rng.uniform(float(lower), float(upper))))

    @classmethod
    def parse(cls, text: str) -> "Rational":
        """Parse "p/q" or a bare integer. Raises CorruptData otherwise."""
        values = text.split("/")
        if len(values) > 2:
            raise CorruptData(f"Not a rational: {text!r}")
        try:
            nums = [int(v) for v in values]
        except ValueError as e:
            raise CorruptData(f"Not a rational: {text!r}") from e
        if len(nums) == 1:
            return cls(nums[0])
        if nums[1] == 0:
            raise CorruptData(f"Zero denominator in {text!r}")
        return cls(nums[0], nums[1])

    # ============================================================
    # Parts
    # ============================================================
    @property
    def integral_part(self) -> int:
        """Integer part, truncated toward zero."""
        i = abs(self._p) // self._q
        return -i if self._p < 0 else i

    @property
    def decimal_part(self) -> "Rational":
        """Fractional part; carries the sign of self."""
        return self - self.integral_part

    @property
    def is_integer(self) -> bool:
        return self._q == 1

    @property
    def integer_and_proper_fraction(self) -> tuple[int, "Rational"]:
        i = self.integral_part
        return (i, Rational(0)) if self.is_integer else (i, self - i)

    @property
    def inversed(self) -> Optional["Rational"]:
        return None if self._p == 0 else Rational(self._q, self._p)

    @property
    def magnitude(self) -> "Rational":
        return Rational(abs(self._p), self._q)

    @property
    def sign(self) -> int:
        return -1 if self._p < 0 else 1

    def interval(self, scale: "Rational | int") -> "Rational":
        """Snap to the nearest multiple of scale (ties go down)."""
        scale = Rational._coerce(scale)
        if scale == 0:
            return self
        t = (self / scale).rounded(RoundingRule.DOWN) * scale
        return t + scale if self - t > scale / 2 else t

    def with_denominator(self, q: int) -> Optional[str]:
        """Text "n/q" of self over denominator q, or None if q is not a multiple of self.q."""
        if q % self._q != 0:
            return None
        return f"{self._p * (q // self._q)}/{q}"

    # ============================================================
    # Rounding
    # ============================================================
    def rounded(self, rule: RoundingRule = RoundingRule.TO_NEAREST_OR_AWAY_FROM_ZERO) -> "Rational":
        """Round to an integral Rational according to rule."""
        if self._q == 1:
            return self
        i = self.integral_part
        s = self.sign
        away = i + s
        if rule is RoundingRule.TOWARD_ZERO:
            return Rational(i)
        if rule is RoundingRule.AWAY_FROM_ZERO:
            return Rational(away)
        if rule is RoundingRule.DOWN:
            return Rational(i if s > 0 else away)
        if rule is RoundingRule.UP:
            return Rational(away if s > 0 else i)
        d = (self - i).magnitude
        half = Rational(1, 2)
        if rule is RoundingRule.TO_NEAREST_OR_AWAY_FROM_ZERO:
            return Rational(i if d < half else away)
        if rule is RoundingRule.TO_NEAREST_OR_EVEN:
            if d < half:
                return Rational(i)
            elif d > half:
                return Rational(away)
            return Rational(i if i % 2 == 0 else away)
        raise ValueError(f"Unknown rounding rule: {rule!r}")

    def __trunc__(self) -> int:
        return self.integral_part

    def __floor__(self) -> int:
        return self._p // self._q

    def __ceil__(self) -> int:
        return -(-self._p // self._q)

    def __round__(self, ndigits: Optional[int] = None):
        if ndigits is None:
            return int(self.rounded(RoundingRule.TO_NEAREST_OR_EVEN))
        shift = Rational(10) ** ndigits
        return (self * shift).rounded(RoundingRule.TO_NEAREST_OR_EVEN) / shift

    # ============================================================
    # Arithmetic
    # ============================================================
    @staticmethod
    def _coerce(other) -> Optional["Rational"]:
        if isinstance(other, Rational):
            return other
        if isinstance(other, int):
            return Rational(other)
        return None

    def __add__(self, other):
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return Rational(self._p * o._q + self._q * o._p, self._q * o._q)

    __radd__ = __add__

    def __sub__(self, other):
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return self + (-o)

    def __rsub__(self, other):
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return o - self

    def __mul__(self, other):
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return Rational(self._p * o._p, self._q * o._q)

    __rmul__ = __mul__

    def __truediv__(self, other):
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return Rational(self._p * o._q, self._q * o._p)

    def __rtruediv__(self, other):
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return o / self

    def __mod__(self, other):
        """Floored modulo: a - b*floor(a/b)."""
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return self - o * (self / o).rounded(RoundingRule.DOWN)

    def __rmod__(self, other):
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return o % self

    def __pow__(self, n: int) -> "Rational":
        n = operator.index(n)
        if n >= 0:
            return Rational(self._p ** n, self._q ** n)
        return Rational(self._q ** -n, self._p ** -n)

    def __neg__(self) -> "Rational":
        return Rational(-self._p, self._q)

    def __pos__(self) -> "Rational":
        return self

    def __abs__(self) -> "Rational":
        return self.magnitude

    # ============================================================
    # Comparison and conversion
    # ============================================================
    def __eq__(self, other) -> bool:
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return self._p * o._q == o._p * self._q

    def __lt__(self, other) -> bool:
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return self._p * o._q < o._p * self._q

    def __hash__(self) -> int:
        return hash(self._p) if self._q == 1 else hash((self._p, self._q))

    def __bool__(self) -> bool:
        return self._p != 0

    def __float__(self) -> float:
        return _ratio(self._p, self._q)

    def __int__(self) -> int:
        return self.integral_part

    def __repr__(self) -> str:
        return f"Rational({self._p}, {self._q})"

    def __str__(self) -> str:
        return str(self._p) if self._q == 1 else f"{self._p}/{self._q}"

    def __reduce__(self):
        return (Rational, (self._p, self._q))

    # ============================================================
    # Overflow-aware arithmetic
    # ============================================================
    @staticmethod
    def _result(p: int, q: int, op: str) -> OverResult:
        """Exact when the unreduced p and q both fit native range."""
        if fits(p) and fits(q):
            return Exact(Rational(p, q))
        logger.debug("rational %s left native integer range, using double", op)
        return Approximate(_ratio(p, q))

    @staticmethod
    def over_add(lhs: "Rational | int", rhs: "Rational | int") -> OverResult:
        l, r = Rational._coerce(lhs), Rational._coerce(rhs)
        return Rational._result(l.p * r.q + l.q * r.p, l.q * r.q, "add")

    @staticmethod
    def over_diff(lhs: "Rational | int", rhs: "Rational | int") -> OverResult:
        return Rational.over_add(lhs, -Rational._coerce(rhs))

    @staticmethod
    def over_multi(lhs: "Rational | int", rhs: "Rational | int") -> OverResult:
        l, r = Rational._coerce(lhs), Rational._coerce(rhs)
        return Rational._result(l.p * r.p, l.q * r.q, "multi")

    @staticmethod
    def over_div(lhs: "Rational | int", rhs: "Rational | int") -> OverResult:
        l, r = Rational._coerce(lhs), Rational._coerce(rhs)
        if r.p == 0:
            raise DivisionByZero(f"Division by zero: {l} / 0")
        return Rational._result(l.p * r.q, l.q * r.p, "div")

    @staticmethod
    def over_mod(lhs: "Rational | int", rhs: "Rational | int") -> OverResult:
        """Floored modulo, exact while every intermediate fits."""
        l, r = Rational._coerce(lhs), Rational._coerce(rhs)
        r0 = Rational.over_div(l, r)
        if isinstance(r0, Exact):
            r1 = Rational.over_multi(r, r0.value.rounded(RoundingRule.DOWN))
            if isinstance(r1, Exact):
                nr = Rational.over_diff(l, r1.value)
                if isinstance(nr, Exact):
                    return nr
        a, b = float(l), float(r)
        q = a / b
        if not math.isfinite(q):
            return Approximate(math.nan)
        return Approximate(a - b * math.floor(q))

    @staticmethod
    def over_pow(lhs: "Rational | int", n: int) -> OverResult:
        """lhs**n by repeated over_multi; exponents beyond OVER_POW_LIMIT go straight to doubles."""
        l = Rational._coerce(lhs)
        if abs(n) >= OVER_POW_LIMIT:
            return Approximate(float_pow(float(l), n))
        acc = Rational(1)
        for _ in range(abs(n)):
            r = Rational.over_multi(acc, l)
            if isinstance(r, Approximate):
                return Approximate(float_pow(float(l), n))
            acc = r.value
        if n < 0:
            return Exact(acc.inversed) if acc != 0 else Approximate(math.inf)
        return Exact(acc)
