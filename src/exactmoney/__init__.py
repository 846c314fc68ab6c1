"""
exactmoney — Currency-aware exact monetary values

An immutable amount paired with a currency. The amount's scale always
matches the currency (2 digits for USD, 0 for JPY, 3 for KWD), and every
operation that may have to round takes an explicit RoundingMode.

================================================================================
QUICK START
================================================================================

Basic usage:

    from decimal import Decimal
    from exactmoney import Money, Currency, RoundingMode

    price = Money.dollars(Decimal("19.99"))
    total = price.times(3)                        # USD 59.97
    tax = total.times(Decimal("0.0825"), RoundingMode.HALF_UP)

    # Strict currency for arithmetic
    Money.dollars(10) + Money.yens(0)             # CurrencyMismatch

    # Zero is currency-agnostic for ordering only
    Money.dollars(10) > Money.yens(0)             # True

Proportional allocation:

    share = Money.dollars(30).divided_by(Money.dollars(90))   # Ratio 1/3
    Money.dollars(100).applying(share)                        # USD 33.33
    Money.dollars(100).allocate([1, 1, 1])                    # 33.34, 33.33, 33.33

================================================================================
"""

from .currency import (
    Currency,
    get_default_locale,
    set_default_locale,
)
from .errors import (
    CurrencyMismatch,
    InvariantViolation,
    RoundingNecessary,
    UnknownCurrency,
)
from .rounding import RoundingMode
from .ratio import Ratio
from .rate import MoneyTimeRate
from .core import Money

__version__ = "1.0.0"
__license__ = "MIT"

__all__ = [
    # Core
    "Money",
    "Currency",
    "RoundingMode",
    "Ratio",
    "MoneyTimeRate",
    # Errors
    "InvariantViolation",
    "CurrencyMismatch",
    "UnknownCurrency",
    "RoundingNecessary",
    # Configuration
    "get_default_locale",
    "set_default_locale",
]
