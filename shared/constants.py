"""Named numeric constants and tolerances for the kernel.

Integer bounds model a signed 64-bit machine word; tolerances are absolute.
"""
import math
import sys

# Native integer range (signed 64-bit)
INT_MAX = 2**63 - 1
INT_MIN = -2**63

# Floating tolerances
ULP = sys.float_info.epsilon       # distance from 1.0 to the next double
T_TOLERANCE = 1e-10                # point-on-segment test for Edge.t_from
TANGENT_TOLERANCE = 1e-12          # relative; line-circle distance counted as tangent
TAU = 2 * math.pi

# Continued-fraction approximation (Rational.from_float)
CF_TOLERANCE = 1e-6                # stop when remainder is this close to an integer
CF_MAX_DENOMINATOR = 10_000_000    # stop before a convergent exceeds this
CF_MAX_COUNT = 32                  # max terms in Rational.continued_fractions

# Overflow-aware power
OVER_POW_LIMIT = 10_000            # exponent magnitude above which the exact path is skipped

# Arc-arc intersection sampling
ARC_SAMPLE_COUNT = 10              # sample points along the other arc
