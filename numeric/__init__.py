"""Exact and overflow-aware numbers, and the interpolation contract.

numeric.codec is not re-exported here: it depends on geometry and animation,
which themselves import this package.
"""

from .integer import (
    lcd, lcd_all, interval,
    over_add, over_diff, over_multi, over_div, over_mod, over_pow,
    over_factorial, over_gamma, binom, binom_float, over_binom,
)
from .rational import Rational
from .interpolation import Interpolator, Scalar, Integer, SequenceOf, OptionalOf
