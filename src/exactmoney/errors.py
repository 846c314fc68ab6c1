"""
errors.py — Failure taxonomy for Money operations

Every error is raised at the call that caused it. Nothing is caught,
retried or logged inside the package: a monetary result is either exact
or it does not exist.

Division by a zero divisor uses the builtin ZeroDivisionError, which is
already an ArithmeticError.
"""


class InvariantViolation(ValueError):
    """The amount's scale does not match the currency's fraction digits."""


class CurrencyMismatch(TypeError):
    """An operation needing one currency received two different ones."""

    def __init__(self, left: object, right: object):
        super().__init__(f"{right!s} is not same currency as {left!s}")
        self.left = left
        self.right = right


class UnknownCurrency(ValueError):
    """The currency code is not in the registry."""

    def __init__(self, code: object):
        super().__init__(f"Unknown currency code: {code!r}")
        self.code = code


class RoundingNecessary(ArithmeticError):
    """RoundingMode.UNNECESSARY was requested but the value is not exact."""
