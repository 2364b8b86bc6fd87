"""
Sign classification of intervals.

Multiplication and division pick their bound formulas by the sign of
each operand. The tests are on ``lo`` first, then ``hi``:

    lo <  0, hi >  0   -> MIXED
    lo <  0, hi <= 0   -> NEGATIVE
    lo >= 0, hi >  0   -> POSITIVE
    lo >= 0, hi <= 0   -> ZERO      (the singleton {0})
"""

from enum import Enum

from .interval import Interval


class SignClass(Enum):
    """Sign region of a non-empty interval."""
    NEGATIVE = "negative"   # hi <= 0, lo < 0
    MIXED = "mixed"         # lo < 0 < hi
    POSITIVE = "positive"   # lo >= 0, hi > 0
    ZERO = "zero"           # exactly [0, 0]


def classify(v: Interval) -> SignClass:
    """
    Classify a non-empty interval by sign.

    Raises:
        ValueError: if v is empty
    """
    if v.is_empty:
        raise ValueError("Cannot classify the sign of an empty interval")
    if v.lo < 0:
        if v.hi > 0:
            return SignClass.MIXED
        return SignClass.NEGATIVE
    if v.hi > 0:
        return SignClass.POSITIVE
    return SignClass.ZERO
