"""
currency.py — Currency registry (ISO 4217) and locale lookup

================================================================================
DESIGN
================================================================================

The registry is an Enum: members are built once at import time, interned,
and never change. Money holds a reference to a member, never a copy.

Each member carries:
- ISO code
- default fraction digits (EUR=2, JPY=0, KWD=3)
- display sign ($, €, ¥, ...)
- home territories, the ISO 3166 countries where the sign is the local
  rendering of the currency

symbol(locale) renders the sign for a locale whose territory is a home
territory of the currency, and the ISO code everywhere else, so that
"$" never becomes ambiguous outside the United States.

The default locale comes from the process locale, falling back to en_US.
It can be pinned at startup with set_default_locale().
================================================================================
"""

from __future__ import annotations
from enum import Enum
from typing import Optional
import locale as _locale

from .errors import UnknownCurrency


FALLBACK_LOCALE = "en_US"

_EUROZONE = (
    "AT", "BE", "CY", "DE", "EE", "ES", "FI", "FR", "GR", "HR",
    "IE", "IT", "LT", "LU", "LV", "MT", "NL", "PT", "SI", "SK",
)


class Currency(Enum):
    """
    Supported currencies with their fraction digits and display sign.

    Look up by code with Currency.of("USD"), or by locale with
    Currency.for_locale("ja_JP").
    """
    USD = ("USD", 2, "$", ("US", "EC", "SV", "PR"))
    EUR = ("EUR", 2, "€", _EUROZONE)
    GBP = ("GBP", 2, "£", ("GB",))
    JPY = ("JPY", 0, "¥", ("JP",))
    CHF = ("CHF", 2, "CHF", ("CH", "LI"))
    CAD = ("CAD", 2, "$", ("CA",))
    AUD = ("AUD", 2, "$", ("AU",))
    CNY = ("CNY", 2, "¥", ("CN",))
    KRW = ("KRW", 0, "₩", ("KR",))
    INR = ("INR", 2, "₹", ("IN",))
    BRL = ("BRL", 2, "R$", ("BR",))
    SEK = ("SEK", 2, "kr", ("SE",))
    KWD = ("KWD", 3, "KD", ("KW",))
    BHD = ("BHD", 3, "BD", ("BH",))

    def __init__(self, code: str, digits: int, sign: str, territories: tuple):
        self._code = code
        self._digits = digits
        self._sign = sign
        self._territories = frozenset(territories)

    @property
    def code(self) -> str:
        return self._code

    @property
    def default_fraction_digits(self) -> int:
        """Canonical scale of every amount in this currency."""
        return self._digits

    def symbol(self, locale: Optional[str] = None) -> str:
        """
        Sign of this currency as rendered in `locale`.

        Falls back to the default locale when `locale` is None. Returns the
        ISO code when the locale's territory does not use this currency.
        """
        territory = _territory_of(locale or get_default_locale())
        if territory in self._territories:
            return self._sign
        return self._code

    @classmethod
    def of(cls, code: Currency | str) -> Currency:
        """Registry lookup. Accepts a member or an ISO code in any case."""
        if isinstance(code, Currency):
            return code
        if not isinstance(code, str):
            raise UnknownCurrency(code)
        try:
            return cls[code.strip().upper()]
        except KeyError:
            raise UnknownCurrency(code) from None

    @classmethod
    def for_locale(cls, locale: Optional[str] = None) -> Currency:
        """Currency in use in the locale's territory (default locale if None)."""
        name = locale or get_default_locale()
        territory = _territory_of(name)
        for currency in cls:
            if territory in currency._territories:
                return currency
        raise UnknownCurrency(name)

    def __str__(self) -> str:
        return self._code


# ==============================================================================
# LOCALE CONFIGURATION
# ==============================================================================

_default_locale: Optional[str] = None


def _territory_of(name: str) -> Optional[str]:
    """'en_US.UTF-8' -> 'US', 'ja-JP' -> 'JP', 'C' -> None."""
    base = name.split(".")[0].split("@")[0].replace("-", "_")
    parts = base.split("_")
    if len(parts) < 2 or not parts[1]:
        return None
    return parts[1].upper()


def set_default_locale(name: Optional[str]) -> None:
    """Pin the default locale. None restores detection from the process locale."""
    global _default_locale
    if name is not None and _territory_of(name) is None:
        raise ValueError(f"Locale {name!r} has no territory")
    _default_locale = name


def get_default_locale() -> str:
    """The pinned locale, else the process locale, else en_US."""
    if _default_locale is not None:
        return _default_locale
    try:
        detected = _locale.getlocale()[0]
    except ValueError:
        detected = None
    if detected and _territory_of(detected):
        return detected
    return FALLBACK_LOCALE
