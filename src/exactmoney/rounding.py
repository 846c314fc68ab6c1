"""
rounding.py — Rounding strategies and exact rescaling

All rounding in the package funnels through rescale(): the value arrives
as an exact Fraction, is scaled by 10**scale, and the integer quotient is
rounded once according to the chosen RoundingMode. No intermediate step
ever uses binary floating point or a limited-precision decimal context.
"""

from __future__ import annotations
from decimal import Decimal
from enum import Enum
from fractions import Fraction
import math

from .errors import RoundingNecessary


class RoundingMode(Enum):
    """
    Rounding strategies for discarding excess precision.

    - UP: away from zero
    - DOWN: toward zero (truncation)
    - CEILING: toward positive infinity
    - FLOOR: toward negative infinity
    - HALF_UP: nearest, ties away from zero (commercial rounding)
    - HALF_DOWN: nearest, ties toward zero
    - HALF_EVEN: nearest, ties to the even neighbour (banker's rounding)
    - UNNECESSARY: assert that no rounding is needed

    Regulation often dictates the strategy. HALF_EVEN is the package default
    because it carries no statistical bias over many operations.
    """
    UP = "up"
    DOWN = "down"
    CEILING = "ceiling"
    FLOOR = "floor"
    HALF_UP = "half_up"
    HALF_DOWN = "half_down"
    HALF_EVEN = "half_even"
    UNNECESSARY = "unnecessary"


def _apply_rounding(value: Fraction, mode: RoundingMode) -> int:
    """Round an exact fraction to an integer with the given strategy."""
    floor, remainder = divmod(value.numerator, value.denominator)
    ceiling = floor + 1
    positive = value > 0
    # 2r against the denominator: <0 below half, 0 exactly half, >0 above
    half = 2 * remainder - value.denominator

    def _up() -> int:
        return ceiling if positive else floor

    def _down() -> int:
        return floor if positive else ceiling

    def _half_up() -> int:
        if half == 0:
            return _up()
        return ceiling if half > 0 else floor

    def _half_down() -> int:
        if half == 0:
            return _down()
        return ceiling if half > 0 else floor

    def _half_even() -> int:
        if half == 0:
            return floor if floor % 2 == 0 else ceiling
        return ceiling if half > 0 else floor

    def _unnecessary() -> int:
        raise RoundingNecessary(f"Rounding necessary for {value}")

    strategies = {
        RoundingMode.UP: _up,
        RoundingMode.DOWN: _down,
        RoundingMode.CEILING: lambda: ceiling,
        RoundingMode.FLOOR: lambda: floor,
        RoundingMode.HALF_UP: _half_up,
        RoundingMode.HALF_DOWN: _half_down,
        RoundingMode.HALF_EVEN: _half_even,
        RoundingMode.UNNECESSARY: _unnecessary,
    }

    strategy = strategies.get(mode)
    if strategy is None:
        raise ValueError(f"Unknown rounding mode: {mode}")

    if remainder == 0:
        return floor

    return strategy()


def rescale(value: Fraction, scale: int, mode: RoundingMode) -> Decimal:
    """
    Return value as a Decimal with exactly `scale` fractional digits.

    A negative scale rounds to tens, hundreds and so on, the way a
    decimal exponent above zero does.
    """
    units = _apply_rounding(value * Fraction(10) ** scale, mode)
    sign, digits, _ = Decimal(units).as_tuple()
    return Decimal((sign, digits, -scale))


def to_fraction(value: Decimal | int | float) -> Fraction:
    """
    Exact Fraction for a numeric operand.

    A float goes through its shortest repr, so 0.1 means Decimal("0.1")
    and not the binary approximation behind it.
    """
    if isinstance(value, bool):
        raise TypeError("bool is not a monetary quantity")
    if isinstance(value, float):
        if not math.isfinite(value):
            raise ValueError(f"Cannot use non-finite value {value}")
        return Fraction(Decimal(repr(value)))
    if isinstance(value, Decimal):
        if not value.is_finite():
            raise ValueError(f"Cannot use non-finite amount {value}")
        return Fraction(value)
    if isinstance(value, int):
        return Fraction(value)
    raise TypeError(
        f"Expected Decimal, int or float, got {type(value).__name__}"
    )
