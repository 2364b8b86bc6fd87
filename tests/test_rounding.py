"""
Tests for the directed rounding primitives
"""

import dataclasses
from fractions import Fraction

import numpy as np
import pytest
from rigorous_interval.rounding import DirectedRounding, OUTWARD, NEAREST, MAX_FLOAT

INF = float('inf')


class TestPrevNext:
    """Test one-ulp stepping."""

    def test_prev_is_below(self):
        """prev(v) is the float just below v."""
        assert OUTWARD.prev(1.0) < 1.0
        assert OUTWARD.prev(1.0) == np.nextafter(1.0, -np.inf)

    def test_next_is_above(self):
        """next(v) is the float just above v."""
        assert OUTWARD.next(1.0) > 1.0
        assert OUTWARD.next(1.0) == np.nextafter(1.0, np.inf)

    def test_infinities_are_fixed(self):
        """Stepping never brings an infinite bound back into range."""
        assert OUTWARD.prev(INF) == INF
        assert OUTWARD.next(-INF) == -INF
        assert OUTWARD.prev(-INF) == -INF
        assert OUTWARD.next(INF) == INF

    def test_zero_steps_to_subnormal(self):
        """Stepping away from zero gives the smallest subnormal."""
        assert OUTWARD.next(0.0) == 5e-324
        assert OUTWARD.prev(0.0) == -5e-324

    def test_nan_widens(self):
        """NaN turns into the widest bound in each direction."""
        nan = float('nan')
        assert OUTWARD.prev(nan) == -INF
        assert OUTWARD.next(nan) == INF
        assert NEAREST.prev(nan) == -INF
        assert NEAREST.next(nan) == INF

    def test_nearest_does_not_step(self):
        """NEAREST leaves finite values untouched."""
        assert NEAREST.prev(1.0) == 1.0
        assert NEAREST.next(1.0) == 1.0

    def test_returns_python_float(self):
        """Results are plain floats, not numpy scalars."""
        assert type(OUTWARD.prev(1.0)) is float
        assert type(OUTWARD.next(1.0)) is float

    def test_frozen(self):
        """The rounding configuration is immutable."""
        with pytest.raises(dataclasses.FrozenInstanceError):
            OUTWARD.outward = False

    def test_default_is_outward(self):
        assert DirectedRounding() == OUTWARD


class TestEnclosure:
    """The exact result lies between the low and high primitives."""

    def test_add(self):
        exact = Fraction(0.1) + Fraction(0.2)
        assert Fraction(OUTWARD.add_lo(0.1, 0.2)) <= exact <= Fraction(OUTWARD.add_hi(0.1, 0.2))

    def test_sub(self):
        exact = Fraction(0.3) - Fraction(0.1)
        assert Fraction(OUTWARD.sub_lo(0.3, 0.1)) <= exact <= Fraction(OUTWARD.sub_hi(0.3, 0.1))

    def test_mul(self):
        exact = Fraction(0.1) * Fraction(3.0)
        assert Fraction(OUTWARD.mul_lo(0.1, 3.0)) <= exact <= Fraction(OUTWARD.mul_hi(0.1, 3.0))

    def test_div(self):
        exact = Fraction(1) / Fraction(3)
        assert Fraction(OUTWARD.div_lo(1.0, 3.0)) <= exact <= Fraction(OUTWARD.div_hi(1.0, 3.0))

    def test_lo_strictly_below_hi(self):
        """Even exact results are widened by one ulp."""
        assert OUTWARD.add_lo(1.0, 2.0) < 3.0 < OUTWARD.add_hi(1.0, 2.0)


class TestExtendedReals:
    """Infinite operands and indeterminate forms."""

    def test_zero_times_infinity(self):
        """0 * inf is treated as exactly 0."""
        assert OUTWARD.mul_lo(0.0, INF) == 0.0
        assert OUTWARD.mul_hi(-INF, 0.0) == 0.0

    def test_zero_product_not_widened(self):
        assert OUTWARD.mul_lo(0.0, 5.0) == 0.0
        assert OUTWARD.mul_hi(5.0, 0.0) == 0.0

    def test_zero_dividend(self):
        assert OUTWARD.div_lo(0.0, 3.0) == 0.0
        assert OUTWARD.div_hi(0.0, -3.0) == 0.0

    def test_infinity_minus_infinity(self):
        """inf - inf widens to the full line."""
        assert OUTWARD.sub_lo(INF, INF) == -INF
        assert OUTWARD.sub_hi(INF, INF) == INF

    def test_infinite_sum(self):
        assert OUTWARD.add_hi(INF, 1.0) == INF
        assert OUTWARD.add_lo(-INF, 1.0) == -INF

    def test_overflow_rounds_to_infinity(self):
        """Round-to-nearest overflow is already an upper bound."""
        assert OUTWARD.mul_hi(1e308, 10.0) == INF

    def test_overflow_lower_bound_stays_finite(self):
        """An overflowed product still has a finite lower bound."""
        assert OUTWARD.mul_lo(1e308, 10.0) == MAX_FLOAT
        assert OUTWARD.add_lo(MAX_FLOAT, MAX_FLOAT) == MAX_FLOAT
        assert OUTWARD.mul_hi(-1e308, 10.0) == -MAX_FLOAT

    def test_infinite_operand_is_not_overflow(self):
        assert OUTWARD.mul_lo(INF, 2.0) == INF


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
