"""
rigorous_interval - Verified Interval Arithmetic

Outward-rounded interval arithmetic on IEEE doubles. Every operation
returns an interval guaranteed to contain the exact result for all
choices of operands from the input intervals:

- add / subtract (sub) / multiply (mul) / divide (div)
- positive / negative
- EMPTY is absorbing; division by an interval straddling zero
  returns the hull WHOLE instead of two disjoint rays
"""

from .interval import (
    Interval,
    EMPTY,
    WHOLE,
    is_empty,
    zero_in,
)
from .rounding import (
    DirectedRounding,
    OUTWARD,
    NEAREST,
)
from .sign import (
    SignClass,
    classify,
)
from .arithmetic import (
    add,
    subtract,
    sub,
    multiply,
    mul,
    divide,
    div,
    positive,
    negative,
)

__version__ = "0.1.0"

__all__ = [
    # Interval
    "Interval",
    "EMPTY",
    "WHOLE",
    "is_empty",
    "zero_in",
    # Rounding
    "DirectedRounding",
    "OUTWARD",
    "NEAREST",
    # Sign classes
    "SignClass",
    "classify",
    # Arithmetic
    "add",
    "subtract",
    "sub",
    "multiply",
    "mul",
    "divide",
    "div",
    "positive",
    "negative",
]
