"""Integer helpers with overflow-aware variants.

Python integers never overflow, so "overflow" here means leaving the native
signed 64-bit range [INT_MIN, INT_MAX]. Every over_* function returns
Exact(int) when the exact result stays in range, else Approximate(float).
"""
import logging
import math

from scipy.special import gamma

from shared.constants import INT_MAX, INT_MIN
from shared.errors import DivisionByZero
from shared.types import Exact, Approximate, OverResult

logger = logging.getLogger(__name__)


# ============================================================
# Float conversion
# ============================================================
def to_float(v: int) -> float:
    """Nearest double to an integer, saturating to +/-inf."""
    try:
        return float(v)
    except OverflowError:
        return math.inf if v > 0 else -math.inf

def float_pow(x: float, n: int) -> float:
    """x**n in doubles, saturating to +/-inf instead of raising."""
    try:
        return float(x) ** n
    except OverflowError:
        return -math.inf if x < 0 and n % 2 else math.inf
    except ZeroDivisionError:
        return math.inf

def fits(v: int) -> bool:
    return INT_MIN <= v <= INT_MAX

def _checked(v: int, op: str) -> OverResult:
    if fits(v):
        return Exact(v)
    logger.debug("%s left native integer range, using double", op)
    return Approximate(to_float(v))


# ============================================================
# Plain integer utilities
# ============================================================
def lcd(m: int, n: int) -> int:
    """Least common multiple; 0 for a zero operand, INT_MAX when m*n leaves native range."""
    if m == 0 or n == 0:
        return 0
    v = m * n
    if not fits(v):
        return INT_MAX
    return v // math.gcd(m, n)

def lcd_all(values: list[int]) -> int:
    """Least common multiple of every value, folded pairwise."""
    if len(values) == 1:
        return values[0]
    n = lcd(values[0], values[1])
    for v in values[2:]:
        n = lcd(n, v)
    return n

def interval(value: int, scale: int) -> int:
    """Snap value to a multiple of scale (ties go down)."""
    if scale == 0:
        return value
    q = abs(value) // abs(scale)
    if (value < 0) != (scale < 0):
        q = -q
    t = q * scale
    return t + scale if value - t > scale // 2 else t


# ============================================================
# Overflow-aware arithmetic
# ============================================================
def over_add(lhs: int, rhs: int) -> OverResult:
    return _checked(lhs + rhs, "add")

def over_diff(lhs: int, rhs: int) -> OverResult:
    return _checked(lhs - rhs, "diff")

def over_multi(lhs: int, rhs: int) -> OverResult:
    return _checked(lhs * rhs, "multi")

def over_div(lhs: int, rhs: int) -> OverResult:
    """Exact quotient when rhs divides lhs, else the double quotient."""
    if rhs == 0:
        raise DivisionByZero(f"Division by zero: {lhs} / 0")
    if lhs % rhs == 0:
        return _checked(lhs // rhs, "div")
    return Approximate(lhs / rhs)

def over_mod(lhs: int, rhs: int) -> OverResult:
    """Floored modulo; always exact."""
    if rhs == 0:
        raise DivisionByZero(f"Division by zero: {lhs} % 0")
    return Exact(lhs % rhs)

def over_pow(lhs: int, rhs: int) -> OverResult:
    """lhs**rhs; negative exponents are exact only for bases +/-1."""
    if rhs < 0:
        if lhs in (1, -1):
            return Exact(lhs ** -rhs)
        return Approximate(float_pow(lhs, rhs))
    if lhs in (-1, 0, 1):
        return Exact(lhs ** rhs)
    n = 1
    for _ in range(rhs):
        n *= lhs
        if not fits(n):
            logger.debug("pow %d**%d left native integer range, using double", lhs, rhs)
            return Approximate(float_pow(lhs, rhs))
    return Exact(n)

def over_factorial(n: int) -> OverResult:
    """n! exactly while it fits, else gamma(n + 1)."""
    if n < 0:
        return Approximate(math.nan)
    i = 1
    for j in range(2, n + 1):
        r = over_multi(i, j)
        if isinstance(r, Approximate):
            return Approximate(float(gamma(n + 1)))
        i = r.value
    return Exact(i)

def over_gamma(n: int) -> OverResult:
    """Gamma function at a positive integer: (n - 1)!."""
    if n < 1:
        return Approximate(math.nan)
    i = 1
    for j in range(2, n):
        r = over_multi(i, j)
        if isinstance(r, Approximate):
            return Approximate(float(gamma(n)))
        i = r.value
    return Exact(i)


# ============================================================
# Binomial coefficients (explicit stack, no recursion)
# ============================================================
def _binom_stack(n, k) -> list | None:
    """Push (n, k), (n-1, k-1), ... until k reaches 0. None when k is out of [0, n]."""
    if k < 0 or k > n:
        return None
    stack = []
    while True:
        k = min(k, n - k)
        if k == 0:
            break
        stack.append((n, k))
        n = n - 1; k = k - 1
    return stack

def binom(n: int, k: int) -> int:
    """Binomial coefficient C(n, k); 0 when k is out of range."""
    stack = _binom_stack(n, k)
    if stack is None:
        return 0
    y = 1
    while stack:
        sn, sk = stack.pop()
        # y == C(sn - 1, sk - 1) here, so the division is exact
        y = y * sn // sk
    return y

def binom_float(n: float, k: float) -> float:
    """Binomial coefficient evaluated in doubles."""
    stack = _binom_stack(n, k)
    if stack is None:
        return 0.0
    y = 1.0
    while stack:
        sn, sk = stack.pop()
        y *= sn / sk
    return y

def over_binom(n: int, k: int) -> OverResult:
    """C(n, k) exactly while every partial product fits, else binom_float."""
    stack = _binom_stack(n, k)
    if stack is None:
        return Exact(0)
    y = 1
    while stack:
        sn, sk = stack.pop()
        r = over_multi(y, sn)
        if isinstance(r, Approximate):
            logger.debug("binom(%d, %d) left native integer range, using double", n, k)
            return Approximate(binom_float(n, k))
        y = r.value // sk
    return Exact(y)
