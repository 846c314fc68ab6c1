"""
conftest.py — Shared fixtures

Symbols and the empty-sum currency depend on the default locale, so the
whole session runs with the locale pinned to en_US. Tests that need
another locale use `pinned_locale`, which puts en_US back afterwards.
"""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from exactmoney import set_default_locale


@pytest.fixture(autouse=True, scope="session")
def en_us_locale():
    set_default_locale("en_US")
    yield
    set_default_locale(None)


@pytest.fixture
def pinned_locale():
    """Call with a locale name to make it the default for one test."""
    yield set_default_locale
    set_default_locale("en_US")
