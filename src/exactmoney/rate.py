"""
rate.py — Money over a span of time

Produced by Money.per(duration). Only the pairing is modelled here.
"""

from __future__ import annotations
from dataclasses import dataclass
from datetime import timedelta
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .core import Money


@dataclass(frozen=True)
class MoneyTimeRate:
    """An amount of money earned or spent per `duration` (e.g. 15 USD per hour)."""
    money: Money
    duration: timedelta

    def __post_init__(self):
        if not isinstance(self.duration, timedelta):
            raise TypeError(
                f"duration must be a timedelta, not {type(self.duration).__name__}"
            )
        if self.duration <= timedelta(0):
            raise ValueError(f"duration must be positive, got {self.duration}")

    def __str__(self) -> str:
        return f"{self.money} per {self.duration}"
