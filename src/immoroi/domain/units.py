"""Unit wrappers for money and rates.

The engine mixes conventions on purpose: the basic evaluator works in cents,
the advanced evaluator and the standalone ROI metrics work in whole currency
units, and interest rates are percents while every other rate is a fraction.
The ``NewType`` wrappers let a type checker catch a value passed in the wrong
unit.
"""
from __future__ import annotations

import math
from typing import NewType, Union

Cents = NewType("Cents", int)
Money = NewType("Money", float)
Fraction = NewType("Fraction", float)
Percent = NewType("Percent", float)

Number = Union[int, float]


def round_half_up(value: Number) -> int:
    """Round to the nearest integer, .5 always going up (not banker's rounding)."""
    return int(math.floor(value + 0.5))


def to_cents(amount: Number) -> Cents:
    return Cents(round_half_up(amount * 100))


def from_cents(amount_cents: Number) -> Money:
    return Money(amount_cents / 100)


def percent_to_fraction(value: Percent) -> Fraction:
    return Fraction(value / 100)


def fraction_to_percent(value: Fraction) -> Percent:
    return Percent(value * 100)


__all__ = [
    "Cents",
    "Money",
    "Fraction",
    "Percent",
    "Number",
    "round_half_up",
    "to_cents",
    "from_cents",
    "percent_to_fraction",
    "fraction_to_percent",
]
