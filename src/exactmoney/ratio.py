"""
ratio.py — Exact fraction with deferred rounding

A Ratio keeps numerator and denominator exact, so chained multiplications
accumulate no rounding error. Precision is only given up when the caller
asks for a Decimal with to_decimal(scale, rounding).
"""

from __future__ import annotations
from decimal import Decimal
from fractions import Fraction

from .rounding import RoundingMode, rescale, to_fraction


class Ratio:
    """
    Exact rational number.

    USAGE:
        share = Ratio.of(Decimal("1"), Decimal("3"))
        share.times(Decimal("100")).to_decimal(2, RoundingMode.HALF_EVEN)
        # Decimal('33.33')
    """

    __slots__ = ("_value",)

    def __init__(self, value: Fraction):
        if not isinstance(value, Fraction):
            raise TypeError(f"Ratio wraps a Fraction, not {type(value).__name__}")
        self._value = value

    @classmethod
    def of(cls, numerator: Decimal | int | float, denominator: Decimal | int | float = 1) -> Ratio:
        """
        Raises:
            ZeroDivisionError: if denominator is zero
        """
        denominator = to_fraction(denominator)
        if denominator == 0:
            raise ZeroDivisionError(f"Ratio denominator is zero: {numerator}/0")
        return cls(to_fraction(numerator) / denominator)

    def times(self, multiplier: Decimal | int | float | Ratio) -> Ratio:
        if isinstance(multiplier, Ratio):
            return Ratio(self._value * multiplier._value)
        return Ratio(self._value * to_fraction(multiplier))

    def to_decimal(
        self,
        scale: int,
        rounding: RoundingMode = RoundingMode.HALF_EVEN
    ) -> Decimal:
        """The ratio as a Decimal with `scale` fractional digits."""
        return rescale(self._value, scale, rounding)

    @property
    def numerator(self) -> int:
        return self._value.numerator

    @property
    def denominator(self) -> int:
        return self._value.denominator

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Ratio):
            return self._value == other._value
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._value)

    def __repr__(self) -> str:
        return f"Ratio({self._value.numerator}/{self._value.denominator})"

    def __str__(self) -> str:
        return f"{self._value.numerator}/{self._value.denominator}"
