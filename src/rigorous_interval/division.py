"""
Division Specialization

Handlers for x / y selected by where zero sits in the divisor y:

- ``non_zero``:        0 not in y
- ``zero``:            y.lo < 0 < y.hi
- ``negative``:        y.lo < 0 == y.hi
- ``positive``:        y.lo == 0 < y.hi
- ``singleton_zero``:  y == [0, 0]

The exact quotient set for a divisor that touches or contains zero is
unbounded, and for an interior zero it is two disjoint rays. Only a
single interval is returned, so those cases yield a half-line or the
hull WHOLE. This matches the Boost interval library behaviour.

All handlers assume x is non-empty.
"""

import logging
from typing import Callable, Dict, Tuple

from .interval import Interval, EMPTY, WHOLE, INF
from .rounding import DirectedRounding, OUTWARD
from .sign import SignClass, classify


logger = logging.getLogger(__name__)

Bounds = Tuple[float, float]


# (x class, y class) -> (lo, hi); y never contains zero here
_DIV_TABLE: Dict[Tuple[SignClass, SignClass], Callable[..., Bounds]] = {
    (SignClass.NEGATIVE, SignClass.NEGATIVE): lambda xl, xh, yl, yh, r: (
        r.div_lo(xh, yl), r.div_hi(xl, yh),
    ),
    (SignClass.NEGATIVE, SignClass.POSITIVE): lambda xl, xh, yl, yh, r: (
        r.div_lo(xl, yl), r.div_hi(xh, yh),
    ),
    (SignClass.MIXED, SignClass.NEGATIVE): lambda xl, xh, yl, yh, r: (
        r.div_lo(xh, yh), r.div_hi(xl, yh),
    ),
    (SignClass.MIXED, SignClass.POSITIVE): lambda xl, xh, yl, yh, r: (
        r.div_lo(xl, yl), r.div_hi(xh, yl),
    ),
    (SignClass.POSITIVE, SignClass.NEGATIVE): lambda xl, xh, yl, yh, r: (
        r.div_lo(xh, yh), r.div_hi(xl, yl),
    ),
    (SignClass.POSITIVE, SignClass.POSITIVE): lambda xl, xh, yl, yh, r: (
        r.div_lo(xl, yh), r.div_hi(xh, yl),
    ),
}


def _is_zero(x: Interval) -> bool:
    return x.lo == 0 and x.hi == 0


def non_zero(x: Interval, y: Interval, rounding: DirectedRounding = OUTWARD) -> Interval:
    """
    Divide by an interval that does not contain zero.

    Quotient corners are rounded directly; going through 1/y and a
    multiplication would round twice.
    """
    x_sign = classify(x)
    if x_sign is SignClass.ZERO:
        return Interval(0.0, 0.0)
    lo, hi = _DIV_TABLE[(x_sign, classify(y))](x.lo, x.hi, y.lo, y.hi, rounding)
    return Interval(lo, hi)


def positive(x: Interval, yh: float, rounding: DirectedRounding = OUTWARD) -> Interval:
    """Divide by [0, yh] with yh > 0."""
    if _is_zero(x):
        return Interval(0.0, 0.0)
    if x.zero_in():
        logger.debug("dividend %r contains zero, divisor [0, %r]: returning WHOLE", x, yh)
        return WHOLE
    if x.hi < 0:
        return Interval(-INF, rounding.div_hi(x.hi, yh))
    return Interval(rounding.div_lo(x.lo, yh), INF)


def negative(x: Interval, yl: float, rounding: DirectedRounding = OUTWARD) -> Interval:
    """Divide by [yl, 0] with yl < 0."""
    if _is_zero(x):
        return Interval(0.0, 0.0)
    if x.zero_in():
        logger.debug("dividend %r contains zero, divisor [%r, 0]: returning WHOLE", x, yl)
        return WHOLE
    if x.hi < 0:
        return Interval(rounding.div_lo(x.hi, yl), INF)
    return Interval(-INF, rounding.div_hi(x.lo, yl))


def zero(x: Interval) -> Interval:
    """Divide by an interval with zero strictly inside: hull of both rays."""
    if _is_zero(x):
        return Interval(0.0, 0.0)
    logger.debug("divisor straddles zero, returning hull WHOLE for dividend %r", x)
    return WHOLE


def singleton_zero(x: Interval) -> Interval:
    """Divide by [0, 0]: undefined for every element."""
    logger.debug("division of %r by [0, 0] is EMPTY", x)
    return EMPTY
