"""
Directed Rounding Primitives

Each elementary operation is evaluated in round-to-nearest and then moved
one unit in the last place toward -inf (``*_lo``) or +inf (``*_hi``).
Whatever the hardware rounding did, the exact result lies between the
two outputs:

    add_lo(a, b) <= a + b <= add_hi(a, b)

Indeterminate extended-real forms (inf - inf, inf / inf) produce NaN in
IEEE arithmetic; those widen to the matching infinity so that a bound is
never lost. A finite result that overflowed to +-inf is pulled back to
the largest finite float on the side where infinity would be too tight.
"""

from dataclasses import dataclass
import numpy as np


INF = float('inf')
MAX_FLOAT = float(np.finfo(np.float64).max)


@dataclass(frozen=True)
class DirectedRounding:
    """
    Rounding service used by the arithmetic engine.

    Attributes:
        outward: If True, every computed bound is moved one ulp outward.
            If False, results are left as round-to-nearest produced them,
            which is handy for displaying textbook values but is not a
            verified enclosure.
    """
    outward: bool = True

    def prev(self, v: float) -> float:
        """Round v down one ulp when outward (-inf for NaN, +inf unchanged)."""
        if v != v:
            return -INF
        if not self.outward or v == INF:
            return v
        return float(np.nextafter(v, -INF))

    def next(self, v: float) -> float:
        """Round v up one ulp when outward (+inf for NaN, -inf unchanged)."""
        if v != v:
            return INF
        if not self.outward or v == -INF:
            return v
        return float(np.nextafter(v, INF))

    def _down(self, r: float, a: float, b: float) -> float:
        if self.outward and r == INF and abs(a) != INF and abs(b) != INF:
            return MAX_FLOAT
        return self.prev(r)

    def _up(self, r: float, a: float, b: float) -> float:
        if self.outward and r == -INF and abs(a) != INF and abs(b) != INF:
            return -MAX_FLOAT
        return self.next(r)

    def add_lo(self, a: float, b: float) -> float:
        return self._down(a + b, a, b)

    def add_hi(self, a: float, b: float) -> float:
        return self._up(a + b, a, b)

    def sub_lo(self, a: float, b: float) -> float:
        return self._down(a - b, a, b)

    def sub_hi(self, a: float, b: float) -> float:
        return self._up(a - b, a, b)

    def mul_lo(self, a: float, b: float) -> float:
        # 0 * x is exactly 0, including x = +-inf
        if a == 0 or b == 0:
            return 0.0
        return self._down(a * b, a, b)

    def mul_hi(self, a: float, b: float) -> float:
        if a == 0 or b == 0:
            return 0.0
        return self._up(a * b, a, b)

    def div_lo(self, a: float, b: float) -> float:
        """Quotient rounded down. The divisor must be nonzero."""
        if a == 0:
            return 0.0
        return self._down(a / b, a, b)

    def div_hi(self, a: float, b: float) -> float:
        """Quotient rounded up. The divisor must be nonzero."""
        if a == 0:
            return 0.0
        return self._up(a / b, a, b)


OUTWARD = DirectedRounding(outward=True)
NEAREST = DirectedRounding(outward=False)
