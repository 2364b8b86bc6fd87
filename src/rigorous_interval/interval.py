"""
Interval Value Type

A closed interval [lo, hi] over the extended reals. Two sentinels are
ordinary Interval values so that they flow through the arithmetic code
paths unchanged:

- EMPTY  = [+inf, -inf], the empty set (absorbing for every operation)
- WHOLE  = [-inf, +inf], the whole real line

Intervals are immutable. Python operators delegate to
``rigorous_interval.arithmetic`` and always use outward rounding. Plain
numbers are promoted with ``Interval.enclosing``.
"""

from dataclasses import dataclass
from typing import Any, Dict, Union

from .rounding import OUTWARD, MAX_FLOAT


INF = float('inf')


@dataclass(frozen=True)
class Interval:
    """
    A closed interval [lo, hi] of extended-real bounds.

    Raises:
        ValueError: if a bound is NaN, or lo > hi for anything other than
            the canonical empty encoding (+inf, -inf).
    """
    lo: float
    hi: float

    def __post_init__(self):
        lo = float(self.lo)
        hi = float(self.hi)
        if lo != lo or hi != hi:
            raise ValueError(f"Invalid interval: [{self.lo}, {self.hi}] has a NaN bound")
        if lo > hi and not (lo == INF and hi == -INF):
            raise ValueError(f"Invalid interval: [{self.lo}, {self.hi}]")
        object.__setattr__(self, 'lo', lo)
        object.__setattr__(self, 'hi', hi)

    @classmethod
    def point(cls, x: float) -> 'Interval':
        """Create a point interval [x, x]."""
        return cls(x, x)

    @classmethod
    def enclosing(cls, x: Union[int, float]) -> 'Interval':
        """
        Smallest float interval containing the number x.

        Floats and exactly representable ints give [x, x]. Other ints lie
        between their nearest float and its neighbour; ints beyond the
        float range become a half-line.
        """
        try:
            f = float(x)
        except OverflowError:
            if x > 0:
                return cls(MAX_FLOAT, INF)
            return cls(-INF, -MAX_FLOAT)
        # int/float comparisons are exact
        if f == x:
            return cls(f, f)
        if f > x:
            return cls(OUTWARD.prev(f), f)
        return cls(f, OUTWARD.next(f))

    @classmethod
    def empty(cls) -> 'Interval':
        return cls(INF, -INF)

    @classmethod
    def whole(cls) -> 'Interval':
        return cls(-INF, INF)

    @property
    def is_empty(self) -> bool:
        return self.lo > self.hi

    @property
    def is_whole(self) -> bool:
        return self.lo == -INF and self.hi == INF

    @property
    def is_singleton(self) -> bool:
        return self.lo == self.hi

    @property
    def width(self) -> float:
        if self.is_empty:
            return 0.0
        return self.hi - self.lo

    @property
    def midpoint(self) -> float:
        if self.is_empty:
            return float('nan')
        if self.is_whole:
            return 0.0
        return (self.lo + self.hi) / 2.0

    def contains(self, x: float) -> bool:
        return self.lo <= x <= self.hi

    def zero_in(self) -> bool:
        return self.lo <= 0 <= self.hi

    def encloses(self, other: 'Interval') -> bool:
        """True if every point of ``other`` lies in this interval."""
        if other.is_empty:
            return True
        return self.lo <= other.lo and other.hi <= self.hi

    def to_canonical(self) -> Dict[str, Any]:
        return {"lo": self.lo, "hi": self.hi}

    def __repr__(self) -> str:
        if self.is_empty:
            return "Interval.EMPTY"
        return f"Interval({self.lo!r}, {self.hi!r})"

    # Operators

    @staticmethod
    def _coerce(other: Any) -> Union['Interval', None]:
        if isinstance(other, Interval):
            return other
        if isinstance(other, (int, float)) and not isinstance(other, bool):
            return Interval.enclosing(other)
        return None

    def __pos__(self) -> 'Interval':
        from .arithmetic import positive
        return positive(self)

    def __neg__(self) -> 'Interval':
        from .arithmetic import negative
        return negative(self)

    def __add__(self, other) -> 'Interval':
        from .arithmetic import add
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return add(self, other)

    def __radd__(self, other) -> 'Interval':
        from .arithmetic import add
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return add(other, self)

    def __sub__(self, other) -> 'Interval':
        from .arithmetic import subtract
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return subtract(self, other)

    def __rsub__(self, other) -> 'Interval':
        from .arithmetic import subtract
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return subtract(other, self)

    def __mul__(self, other) -> 'Interval':
        from .arithmetic import multiply
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return multiply(self, other)

    def __rmul__(self, other) -> 'Interval':
        from .arithmetic import multiply
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return multiply(other, self)

    def __truediv__(self, other) -> 'Interval':
        from .arithmetic import divide
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return divide(self, other)

    def __rtruediv__(self, other) -> 'Interval':
        from .arithmetic import divide
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return divide(other, self)


EMPTY = Interval.empty()
WHOLE = Interval.whole()


def is_empty(v: Interval) -> bool:
    return v.is_empty


def zero_in(v: Interval) -> bool:
    """True if 0 lies in the closed interval v (False for EMPTY)."""
    return v.zero_in()
