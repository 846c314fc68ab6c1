"""
core.py — Money value type

================================================================================
DESIGN PRINCIPLES
================================================================================

1. INTERNAL REPRESENTATION
   decimal.Decimal amount, never binary floating point.
   The scale of the amount (digits after the point) always equals the
   currency's default fraction digits: 10.00 USD, 1000 JPY, 1.500 KWD.

2. INVARIANT AT CONSTRUCTION
   Money(amount, currency) rejects a mismatched scale with
   InvariantViolation. It never truncates silently. Factories that are
   allowed to round (adjust_by, times, divided_by, applying) say so and
   take an explicit RoundingMode.

3. IMMUTABILITY
   Frozen dataclass. Every operation returns a new instance, which goes
   through the same invariant check.

4. CURRENCY POLICY
   plus/minus demand the very same currency.
   Ordering (compare, <, >) and division into a Ratio also accept a pair
   where either amount is exactly zero: 0 USD and 0 JPY have the same
   magnitude even though they are not equal.

5. EXACT INTERMEDIATES
   Sums, products and quotients are computed on fractions.Fraction and
   rounded once, at the end, to the currency scale.

================================================================================
"""

from __future__ import annotations
from dataclasses import dataclass
from datetime import timedelta
from decimal import Decimal
from fractions import Fraction
from typing import Iterable, Optional, Sequence
import math

from .currency import Currency
from .errors import CurrencyMismatch, InvariantViolation
from .rate import MoneyTimeRate
from .ratio import Ratio
from .rounding import RoundingMode, rescale, to_fraction


Number = Decimal | int | float


def _is_number(value: object) -> bool:
    return isinstance(value, (Decimal, int, float)) and not isinstance(value, bool)


# ==============================================================================
# MONEY CLASS
# ==============================================================================

@dataclass(frozen=True, slots=True, order=False)
class Money:
    """
    An exact amount in one currency.

    INVARIANTS:
    1. _amount is a finite Decimal whose scale equals
       _currency.default_fraction_digits
    2. _currency is a registry member (Currency)
    3. distribute(n) and allocate(weights) sum exactly to self

    USAGE:
        price = Money.dollars(Decimal("19.99"))
        total = price.times(3)                   # USD 59.97
        share = total.applying(Ratio.of(1, 3))   # USD 19.99

    The amount and currency are not public attributes. Layers that must
    see them (persistence, UI) use the breach_encapsulation_of_* methods.
    """
    _amount: Decimal
    _currency: Currency

    DEFAULT_ROUNDING_MODE = RoundingMode.HALF_EVEN

    # Maximum parts for distribution (DoS protection)
    MAX_DISTRIBUTION_PARTS = 10_000

    def __post_init__(self):
        if not isinstance(self._amount, Decimal):
            raise TypeError(
                f"Money amount must be a Decimal, not {type(self._amount).__name__}. "
                f"Use Money.adjust_by() to convert."
            )
        currency = Currency.of(self._currency)
        object.__setattr__(self, "_currency", currency)

        if not self._amount.is_finite():
            raise InvariantViolation(f"Amount must be finite, got {self._amount}")
        scale = -self._amount.as_tuple().exponent
        if scale != currency.default_fraction_digits:
            raise InvariantViolation(
                f"Scale of amount {self._amount} is {scale}, "
                f"but {currency.code} requires {currency.default_fraction_digits}"
            )

    # -------------------------------------------------------------------------
    # Constructors
    # -------------------------------------------------------------------------

    @classmethod
    def adjust_by(
        cls,
        raw_amount: Number,
        currency: Currency | str,
        rounding: RoundingMode = DEFAULT_ROUNDING_MODE
    ) -> Money:
        """
        Build a Money from any amount, fixing the scale to the currency's.

        Safe for Decimal and int: an amount that already fits the scale is
        only padded (Decimal("5") -> 5.00 USD), never changed in value.
        Excess precision is discarded with `rounding`.

        WARNING: a float has no exact decimal value; it is read through its
        repr and may round off.
        """
        currency = Currency.of(currency)
        return cls._rounded(to_fraction(raw_amount), currency, rounding)

    @classmethod
    def adjust_round(
        cls,
        float_amount: float,
        currency: Currency | str,
        rounding: RoundingMode
    ) -> Money:
        """
        Float constructor with an explicit rounding mode.

        Because of the indefinite precision of float this always may round
        off the value; the caller picks how.
        """
        if not isinstance(float_amount, float):
            raise TypeError(f"adjust_round expects a float, got {type(float_amount).__name__}")
        return cls.adjust_by(float_amount, currency, rounding)

    @classmethod
    def of_minor(cls, minor_units: int, currency: Currency | str) -> Money:
        """From an integer count of the smallest unit (cents, yen, fils)."""
        if not isinstance(minor_units, int) or isinstance(minor_units, bool):
            raise TypeError(f"minor_units must be int, not {type(minor_units).__name__}")
        currency = Currency.of(currency)
        digits = currency.default_fraction_digits
        return cls(rescale(Fraction(minor_units, 10 ** digits), digits, RoundingMode.UNNECESSARY), currency)

    @classmethod
    def zero(cls, currency: Currency | str) -> Money:
        """Zero in the given currency. Starting value for sums."""
        return cls.adjust_by(0, currency)

    # Shorthand for common currencies
    @classmethod
    def dollars(cls, amount: Number) -> Money:
        return cls.adjust_by(amount, Currency.USD)

    @classmethod
    def euros(cls, amount: Number) -> Money:
        return cls.adjust_by(amount, Currency.EUR)

    @classmethod
    def yens(cls, amount: Number) -> Money:
        return cls.adjust_by(amount, Currency.JPY)

    @classmethod
    def _rounded(cls, value: Fraction, currency: Currency, rounding: RoundingMode) -> Money:
        return cls(rescale(value, currency.default_fraction_digits, rounding), currency)

    # -------------------------------------------------------------------------
    # Aggregation
    # -------------------------------------------------------------------------

    @classmethod
    def sum(cls, monies: Iterable[Money]) -> Money:
        """
        Total of all the monies.

        An empty input gives zero in the currency of the default locale.
        Otherwise the elements are folded left with `+`, which is strict
        about currency: any two different currencies raise CurrencyMismatch,
        a zero amount included. Which pair fails first depends on the
        iteration order and is not part of the contract.
        """
        iterator = iter(monies)
        try:
            total = next(iterator)
        except StopIteration:
            return cls.zero(Currency.for_locale())
        for each in iterator:
            total = total + each
        return total

    # -------------------------------------------------------------------------
    # Currency checks
    # -------------------------------------------------------------------------

    def has_same_currency_as(self, other: Money) -> bool:
        """
        True if the currencies match or either amount is exactly zero.

        Governs ordering and division into a Ratio. Addition and
        subtraction do not use it.

        Raises:
            TypeError: if other is not a Money
        """
        self._require_money(other, "has_same_currency_as")
        return (
            self._currency == other._currency
            or other._amount == 0
            or self._amount == 0
        )

    def _check_has_same_currency_as(self, other: Money) -> None:
        if not self.has_same_currency_as(other):
            raise CurrencyMismatch(self, other)

    def _check_exact_currency(self, other: Money) -> None:
        if self._currency != other._currency:
            raise CurrencyMismatch(self, other)

    @staticmethod
    def _require_money(other: object, operation: str) -> None:
        if not isinstance(other, Money):
            raise TypeError(
                f"Operation not allowed: Money {operation} {type(other).__name__}. "
                f"Use Money.adjust_by() to convert."
            )

    # -------------------------------------------------------------------------
    # Arithmetic
    # -------------------------------------------------------------------------

    def plus(self, other: Money) -> Money:
        """
        Raises:
            CurrencyMismatch: if the currencies differ, even for a zero amount
        """
        self._require_money(other, "+")
        self._check_exact_currency(other)
        return Money._rounded(
            to_fraction(self._amount) + to_fraction(other._amount),
            self._currency,
            self.DEFAULT_ROUNDING_MODE,
        )

    def minus(self, other: Money) -> Money:
        self._require_money(other, "-")
        return self.plus(other.negated())

    def negated(self) -> Money:
        # no negative zero
        if not self._amount:
            return self
        return Money(self._amount.copy_negate(), self._currency)

    def abs(self) -> Money:
        return Money(self._amount.copy_abs(), self._currency)

    def times(
        self,
        factor: Number,
        rounding: RoundingMode = DEFAULT_ROUNDING_MODE
    ) -> Money:
        """
        Multiply by `factor` and round to the currency scale.

        An int factor is exact but takes the same path. A float factor is
        read through its repr.
        """
        return Money._rounded(
            to_fraction(self._amount) * to_fraction(factor),
            self._currency,
            rounding,
        )

    def divided_by(
        self,
        divisor: Number | Money,
        rounding: RoundingMode = DEFAULT_ROUNDING_MODE
    ) -> Money | Ratio:
        """
        Divide by a number, or measure against another Money.

        With a number: the quotient rounded to the currency scale, as
        Money. With a Money: the exact Ratio of the two amounts, unrounded
        (`rounding` is ignored).

        Raises:
            ZeroDivisionError: if the divisor (or the divisor's amount) is zero
            CurrencyMismatch: if a Money divisor has another currency and
                neither amount is zero
        """
        if isinstance(divisor, Money):
            self._check_has_same_currency_as(divisor)
            if divisor._amount == 0:
                raise ZeroDivisionError(f"Cannot divide {self} by zero amount {divisor}")
            return Ratio.of(self._amount, divisor._amount)

        value = to_fraction(divisor)
        if value == 0:
            raise ZeroDivisionError(f"Cannot divide {self} by zero")
        return Money._rounded(to_fraction(self._amount) / value, self._currency, rounding)

    def applying(
        self,
        ratio: Ratio,
        scale: Optional[int] = None,
        rounding: RoundingMode = DEFAULT_ROUNDING_MODE
    ) -> Money:
        """
        The `ratio` share of this amount.

        The exact product is first rounded to `scale` digits (the currency
        scale by default) with `rounding`, then adjusted to the currency.
        Keeping the share as a Ratio until here avoids compounding rounding
        error across repeated multiplications.
        """
        if not isinstance(ratio, Ratio):
            raise TypeError(f"applying expects a Ratio, got {type(ratio).__name__}")
        if scale is None:
            scale = self._currency.default_fraction_digits
        new_amount = ratio.times(self._amount).to_decimal(scale, rounding)
        return Money.adjust_by(new_amount, self._currency)

    def minimum_increment(self) -> Money:
        """
        Smallest positive amount in this currency: 0.01 USD, 1 JPY, 0.001 KWD.
        """
        return Money.of_minor(1, self._currency)

    def incremented(self) -> Money:
        """One minimum increment above this amount."""
        return self.plus(self.minimum_increment())

    def per(self, duration: timedelta) -> MoneyTimeRate:
        """This amount over `duration`, e.g. Money.dollars(15).per(timedelta(hours=1))."""
        return MoneyTimeRate(self, duration)

    # -------------------------------------------------------------------------
    # Distribution
    # -------------------------------------------------------------------------

    def _minor_units(self) -> int:
        return int(to_fraction(self._amount) * 10 ** self._currency.default_fraction_digits)

    def distribute(self, n: int) -> list[Money]:
        """
        Split into n parts whose sum is EXACTLY self.

        Parts differ by at most one minimum increment; the larger ones come
        first.

        Raises:
            ValueError: if n <= 0 or n > MAX_DISTRIBUTION_PARTS
        """
        if n <= 0:
            raise ValueError(f"n must be > 0, got: {n}")
        if n > self.MAX_DISTRIBUTION_PARTS:
            raise ValueError(f"n exceeds the limit of {self.MAX_DISTRIBUTION_PARTS}")

        base, remainder = divmod(self._minor_units(), n)

        return [
            Money.of_minor(base + (1 if i < remainder else 0), self._currency)
            for i in range(n)
        ]

    def allocate(self, weights: Sequence[Number | Ratio]) -> list[Money]:
        """
        Split proportionally to `weights`, summing EXACTLY to self.

        ALGORITHM (largest remainder):
        1. Each part gets floor(units * weight / total) minor units
        2. The leftover units go, one each, to the parts with the largest
           discarded remainders (ties: earlier part first)

        A zero weight always gets zero.

        Raises:
            ValueError: on empty weights, negative weights or a zero total
        """
        if not weights:
            raise ValueError("weights must not be empty")
        if len(weights) > self.MAX_DISTRIBUTION_PARTS:
            raise ValueError(f"weights exceeds the limit of {self.MAX_DISTRIBUTION_PARTS}")

        exact = [
            Fraction(w.numerator, w.denominator) if isinstance(w, Ratio) else to_fraction(w)
            for w in weights
        ]
        if any(w < 0 for w in exact):
            raise ValueError("weights must not be negative")
        total_weight = sum(exact)
        if total_weight == 0:
            raise ValueError("sum of weights must not be 0")

        units = self._minor_units()
        raw = [units * w / total_weight for w in exact]
        parts = [math.floor(r) for r in raw]

        leftover = units - sum(parts)
        by_remainder = sorted(range(len(raw)), key=lambda i: raw[i] - parts[i], reverse=True)
        for i in by_remainder[:leftover]:
            parts[i] += 1

        return [Money.of_minor(p, self._currency) for p in parts]

    # -------------------------------------------------------------------------
    # Comparison
    # -------------------------------------------------------------------------

    def compare(self, other: Money) -> int:
        """
        -1, 0 or 1 by amount.

        Raises:
            CurrencyMismatch: if the currencies differ and neither amount is zero
        """
        self._require_money(other, "compare")
        self._check_has_same_currency_as(other)
        if self._amount < other._amount:
            return -1
        if self._amount > other._amount:
            return 1
        return 0

    def is_greater_than(self, other: Money) -> bool:
        return self.compare(other) > 0

    def is_less_than(self, other: Money) -> bool:
        return self.compare(other) < 0

    def is_positive(self) -> bool:
        return self._amount > 0

    def is_negative(self) -> bool:
        return self._amount < 0

    def is_zero(self) -> bool:
        return self == Money.zero(self._currency)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Money):
            return self._amount == other._amount and self._currency == other._currency
        return NotImplemented

    def __hash__(self) -> int:
        return hash((self._amount, self._currency))

    def __lt__(self, other: Money) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self, other: Money) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self.compare(other) <= 0

    def __gt__(self, other: Money) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self.compare(other) > 0

    def __ge__(self, other: Money) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self.compare(other) >= 0

    # -------------------------------------------------------------------------
    # Operators
    # -------------------------------------------------------------------------

    def __add__(self, other: Money) -> Money:
        return self.plus(other)

    def __sub__(self, other: Money) -> Money:
        return self.minus(other)

    def __neg__(self) -> Money:
        return self.negated()

    def __abs__(self) -> Money:
        return self.abs()

    def __mul__(self, factor: Number) -> Money:
        if not _is_number(factor):
            return NotImplemented
        return self.times(factor)

    def __rmul__(self, factor: Number) -> Money:
        return self.__mul__(factor)

    def __truediv__(self, divisor: Number | Money) -> Money | Ratio:
        if not isinstance(divisor, Money) and not _is_number(divisor):
            return NotImplemented
        return self.divided_by(divisor)

    # -------------------------------------------------------------------------
    # Encapsulation breach
    # -------------------------------------------------------------------------

    def breach_encapsulation_of_amount(self) -> Decimal:
        """
        CAUTION: exposes the internal amount.

        Needed for database mapping and UI presentation. Doing the actual
        money work outside this class is what it is NOT for.
        """
        return self._amount

    def breach_encapsulation_of_currency(self) -> Currency:
        """CAUTION: exposes the internal currency. See breach_encapsulation_of_amount()."""
        return self._currency

    # -------------------------------------------------------------------------
    # Output
    # -------------------------------------------------------------------------

    def to_string(self, locale: Optional[str] = None) -> str:
        """Symbol in `locale` (default locale if None), a space, the amount."""
        return f"{self._currency.symbol(locale)} {self._amount}"

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"Money('{self._amount}', '{self._currency.code}')"
