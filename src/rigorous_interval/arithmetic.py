"""
Interval Arithmetic Engine

Outward-rounded add, subtract, multiply and divide on intervals. For
every a in x and b in y the exact result of ``a op b`` lies in
``op(x, y)``; the low bound is always rounded toward -inf and the high
bound toward +inf.

Multiplication follows the sign case analysis of Hickey, Ju & van Emden,
"Interval Arithmetic: from Principles to Implementation". For each pair
of sign classes the minimum and maximum of {a*b} are reached at a known
pair of corners, so only those corners are evaluated, each with its own
rounding direction.

Any operation with an EMPTY operand returns EMPTY.
"""

from typing import Callable, Dict, Tuple

from .interval import Interval, EMPTY
from .rounding import DirectedRounding, OUTWARD
from .sign import SignClass, classify
from . import division


Bounds = Tuple[float, float]


def add(x: Interval, y: Interval, rounding: DirectedRounding = OUTWARD) -> Interval:
    """
    Compute x + y.

    Example:
        add(Interval(0, 1), Interval(1, 2))  # [prev(1), next(3)]
    """
    if x.is_empty or y.is_empty:
        return EMPTY
    return Interval(rounding.add_lo(x.lo, y.lo), rounding.add_hi(x.hi, y.hi))


def subtract(x: Interval, y: Interval, rounding: DirectedRounding = OUTWARD) -> Interval:
    """
    Compute x - y.

    Uses the cross endpoints directly rather than ``add(x, negative(y))``.

    Example:
        subtract(Interval(0, 1), Interval(1, 2))  # [prev(-2), next(0)]
    """
    if x.is_empty or y.is_empty:
        return EMPTY
    return Interval(rounding.sub_lo(x.lo, y.hi), rounding.sub_hi(x.hi, y.lo))


sub = subtract


# (x class, y class) -> (lo, hi) from the corners xl, xh, yl, yh
_MUL_TABLE: Dict[Tuple[SignClass, SignClass], Callable[..., Bounds]] = {
    (SignClass.MIXED, SignClass.MIXED): lambda xl, xh, yl, yh, r: (
        min(r.mul_lo(xl, yh), r.mul_lo(xh, yl)),
        max(r.mul_hi(xl, yl), r.mul_hi(xh, yh)),
    ),
    (SignClass.MIXED, SignClass.NEGATIVE): lambda xl, xh, yl, yh, r: (
        r.mul_lo(xh, yl), r.mul_hi(xl, yl),
    ),
    (SignClass.MIXED, SignClass.POSITIVE): lambda xl, xh, yl, yh, r: (
        r.mul_lo(xl, yh), r.mul_hi(xh, yh),
    ),
    (SignClass.NEGATIVE, SignClass.MIXED): lambda xl, xh, yl, yh, r: (
        r.mul_lo(xl, yh), r.mul_hi(xl, yl),
    ),
    (SignClass.NEGATIVE, SignClass.NEGATIVE): lambda xl, xh, yl, yh, r: (
        r.mul_lo(xh, yh), r.mul_hi(xl, yl),
    ),
    (SignClass.NEGATIVE, SignClass.POSITIVE): lambda xl, xh, yl, yh, r: (
        r.mul_lo(xl, yh), r.mul_hi(xh, yl),
    ),
    (SignClass.POSITIVE, SignClass.MIXED): lambda xl, xh, yl, yh, r: (
        r.mul_lo(xh, yl), r.mul_hi(xh, yh),
    ),
    (SignClass.POSITIVE, SignClass.NEGATIVE): lambda xl, xh, yl, yh, r: (
        r.mul_lo(xh, yl), r.mul_hi(xl, yh),
    ),
    (SignClass.POSITIVE, SignClass.POSITIVE): lambda xl, xh, yl, yh, r: (
        r.mul_lo(xl, yl), r.mul_hi(xh, yh),
    ),
}


def multiply(x: Interval, y: Interval, rounding: DirectedRounding = OUTWARD) -> Interval:
    """
    Compute x * y.

    Examples:
        multiply(Interval(1, 2), Interval(2, 3))         # [prev(2), next(6)]
        multiply(Interval(1, inf), Interval(4, 6))       # [prev(4), inf]
        multiply(Interval(1, 2), Interval(-3, -2))       # [prev(-6), next(-2)]
        multiply(Interval(1, 2), Interval(-2, 3))        # [prev(-4), next(6)]
        multiply(Interval(-2, -1), Interval(-3, -2))     # [prev(2), next(6)]
        multiply(Interval(0, 0), Interval(-5, 5))        # [0, 0] exactly
    """
    if x.is_empty or y.is_empty:
        return EMPTY

    x_sign = classify(x)
    y_sign = classify(y)
    if x_sign is SignClass.ZERO or y_sign is SignClass.ZERO:
        return Interval(0.0, 0.0)

    lo, hi = _MUL_TABLE[(x_sign, y_sign)](x.lo, x.hi, y.lo, y.hi, rounding)
    return Interval(lo, hi)


mul = multiply


def divide(x: Interval, y: Interval, rounding: DirectedRounding = OUTWARD) -> Interval:
    """
    Compute x / y.

    When zero is strictly inside y the exact result is two disjoint rays;
    only single intervals are supported, so their hull is returned.

    Examples:
        divide(Interval(1, 2), Interval(3, 4))      # [prev(1/4), next(2/3)]
        divide(Interval(-2, 1), Interval(-4, -3))   # [prev(-1/3), next(2/3)]
        divide(Interval(1, 2), Interval(-1, 1))     # WHOLE
        divide(Interval(1, 2), Interval(0, 0))      # EMPTY
    """
    if x.is_empty or y.is_empty:
        return EMPTY

    if not y.zero_in():
        return division.non_zero(x, y, rounding)

    if y.lo != 0:
        if y.hi != 0:
            return division.zero(x)
        return division.negative(x, y.lo, rounding)
    if y.hi != 0:
        return division.positive(x, y.hi, rounding)
    return division.singleton_zero(x)


div = divide


def positive(x: Interval) -> Interval:
    """Compute +x (a copy of x)."""
    return Interval(x.lo, x.hi)


def negative(x: Interval) -> Interval:
    """
    Compute -x. Negation is exact, so no rounding is applied.

    Example:
        negative(Interval(1, 2))  # [-2, -1]
        negative(WHOLE)           # WHOLE
    """
    if x.is_empty:
        return EMPTY
    return Interval(-x.hi, -x.lo)
