"""
test_rounding.py — Tests for RoundingMode and exact rescaling

The table below is the classic one for rounding a single digit away:
each row is an input, each column the result under one mode.
"""

from decimal import Decimal
from fractions import Fraction

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from exactmoney import RoundingMode, RoundingNecessary
from exactmoney.rounding import rescale, to_fraction


MODES = [
    RoundingMode.UP,
    RoundingMode.DOWN,
    RoundingMode.CEILING,
    RoundingMode.FLOOR,
    RoundingMode.HALF_UP,
    RoundingMode.HALF_DOWN,
    RoundingMode.HALF_EVEN,
]

TABLE = {
    "5.5": [6, 5, 6, 5, 6, 5, 6],
    "2.5": [3, 2, 3, 2, 3, 2, 2],
    "1.6": [2, 1, 2, 1, 2, 2, 2],
    "1.1": [2, 1, 2, 1, 1, 1, 1],
    "1.0": [1, 1, 1, 1, 1, 1, 1],
    "-1.0": [-1, -1, -1, -1, -1, -1, -1],
    "-1.1": [-2, -1, -1, -2, -1, -1, -1],
    "-1.6": [-2, -1, -1, -2, -2, -2, -2],
    "-2.5": [-3, -2, -2, -3, -3, -2, -2],
    "-5.5": [-6, -5, -5, -6, -6, -5, -6],
}


@pytest.mark.parametrize("value, expected", list(TABLE.items()))
def test_rounding_table(value, expected):
    fraction = Fraction(Decimal(value))
    for mode, result in zip(MODES, expected):
        assert rescale(fraction, 0, mode) == Decimal(result), f"{value} {mode.name}"


class TestRescale:

    def test_result_has_requested_scale(self):
        result = rescale(Fraction(1, 8), 2, RoundingMode.HALF_EVEN)
        assert result == Decimal("0.12")
        assert result.as_tuple().exponent == -2

    def test_zero_keeps_scale(self):
        assert str(rescale(Fraction(0), 3, RoundingMode.HALF_EVEN)) == "0.000"

    def test_negative_scale_rounds_to_hundreds(self):
        assert rescale(Fraction(1250), -2, RoundingMode.HALF_EVEN) == Decimal("1200")
        assert rescale(Fraction(1350), -2, RoundingMode.HALF_EVEN) == Decimal("1400")

    def test_unnecessary_accepts_exact_value(self):
        assert rescale(Fraction(3, 2), 1, RoundingMode.UNNECESSARY) == Decimal("1.5")

    def test_unnecessary_rejects_inexact_value(self):
        with pytest.raises(RoundingNecessary):
            rescale(Fraction(1, 3), 2, RoundingMode.UNNECESSARY)

    def test_to_fraction_rejects_non_finite(self):
        with pytest.raises(ValueError):
            to_fraction(Decimal("NaN"))
        with pytest.raises(ValueError):
            to_fraction(float("inf"))

    def test_to_fraction_reads_float_through_repr(self):
        assert to_fraction(0.1) == Fraction(1, 10)
        assert to_fraction(2.675) == Fraction(2675, 1000)

    def test_to_fraction_rejects_other_types(self):
        with pytest.raises(TypeError):
            to_fraction("1")
        with pytest.raises(TypeError):
            to_fraction(True)

    @pytest.mark.parametrize("value", [Fraction(1), Fraction(1, 3)])
    def test_unknown_mode_raises_even_without_rounding(self, value):
        with pytest.raises(ValueError):
            rescale(value, 2, "bogus")

    @given(
        units=st.integers(min_value=-10**30, max_value=10**30),
        scale=st.integers(min_value=0, max_value=12),
        mode=st.sampled_from(MODES + [RoundingMode.UNNECESSARY]),
    )
    @settings(max_examples=300)
    def test_values_already_at_scale_are_unchanged(self, units, scale, mode):
        value = Fraction(units, 10 ** scale)
        assert Fraction(rescale(value, scale, mode)) == value

    @given(
        numerator=st.integers(min_value=-10**9, max_value=10**9),
        denominator=st.integers(min_value=1, max_value=10**6),
        mode=st.sampled_from(MODES),
    )
    @settings(max_examples=300)
    def test_error_below_one_unit(self, numerator, denominator, mode):
        value = Fraction(numerator, denominator)
        assert abs(Fraction(rescale(value, 2, mode)) - value) < Fraction(1, 100)
