"""
Adapter: Accumulator
Bieżąca wartość składanego wyrażenia; operacje stosowane w kolejności podania.
"""
from __future__ import annotations

from contracts import ZERO, Rational


class Accumulator:
    """Running value of one expression. Starts (and resets) at 0/1."""

    def __init__(self) -> None:
        self._value: Rational = ZERO

    def current(self) -> Rational:
        return self._value

    def reset(self) -> None:
        self._value = ZERO

    def add(self, value: Rational) -> None:
        self._value = self._value.add(value)

    def subtract(self, value: Rational) -> None:
        self._value = self._value.subtract(value)

    def multiply(self, value: Rational) -> None:
        self._value = self._value.multiply(value)

    def divide(self, value: Rational) -> None:
        # DivisionByZero leci dalej; wartość zostaje bez zmian
        self._value = self._value.divide(value)
