"""
test_currency.py — Tests for the currency registry and locale handling
"""

import pytest

from exactmoney import Currency, UnknownCurrency, get_default_locale, set_default_locale


class TestRegistry:

    def test_fraction_digits(self):
        assert Currency.USD.default_fraction_digits == 2
        assert Currency.JPY.default_fraction_digits == 0
        assert Currency.KWD.default_fraction_digits == 3

    def test_of_by_code(self):
        assert Currency.of("USD") is Currency.USD
        assert Currency.of(" jpy ") is Currency.JPY
        assert Currency.of(Currency.EUR) is Currency.EUR

    def test_of_unknown_code_raises(self):
        with pytest.raises(UnknownCurrency):
            Currency.of("XYZ")
        with pytest.raises(UnknownCurrency):
            Currency.of(840)

    def test_unknown_currency_is_value_error(self):
        with pytest.raises(ValueError):
            Currency.of("XYZ")

    def test_str_is_code(self):
        assert str(Currency.GBP) == "GBP"


class TestLocale:

    @pytest.mark.parametrize("name, currency", [
        ("en_US", Currency.USD),
        ("ja_JP", Currency.JPY),
        ("de-DE", Currency.EUR),
        ("fr_FR.UTF-8", Currency.EUR),
        ("en_GB", Currency.GBP),
        ("en_CA", Currency.CAD),
    ])
    def test_for_locale(self, name, currency):
        assert Currency.for_locale(name) is currency

    def test_for_locale_without_territory_raises(self):
        with pytest.raises(UnknownCurrency):
            Currency.for_locale("C")

    def test_for_locale_default(self, pinned_locale):
        assert Currency.for_locale() is Currency.USD
        pinned_locale("it_IT")
        assert Currency.for_locale() is Currency.EUR

    def test_symbol_in_home_territory(self):
        assert Currency.USD.symbol("en_US") == "$"
        assert Currency.CAD.symbol("en_CA") == "$"
        assert Currency.EUR.symbol("es_ES") == "€"

    def test_symbol_elsewhere_is_code(self):
        assert Currency.USD.symbol("en_CA") == "USD"
        assert Currency.JPY.symbol("en_US") == "JPY"

    def test_symbol_defaults_to_default_locale(self):
        assert Currency.USD.symbol() == "$"
        assert Currency.GBP.symbol() == "GBP"

    def test_set_default_locale_rejects_missing_territory(self, pinned_locale):
        with pytest.raises(ValueError):
            set_default_locale("C")
        assert get_default_locale() == "en_US"

    def test_unpinned_default_has_territory(self, pinned_locale):
        pinned_locale(None)
        name = get_default_locale()
        assert "_" in name.replace("-", "_")
