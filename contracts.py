"""
contracts.py — Single source of truth for every data type in RatCalc.
All modules import types and errors ONLY from here.
"""
from __future__ import annotations

import math
import re
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, StrictInt, model_validator


# ─────────────────────────── Errors ──────────────────────────────────────

class CalculatorError(Exception):
    """Base class for every failure raised by the calculator core."""


class DivisionByZero(CalculatorError, ZeroDivisionError):
    """Zero denominator at construction or zero divisor in divide()."""


class InvalidFormat(CalculatorError, ValueError):
    """Literal text does not match the numeric grammar."""


class InvalidRegister(CalculatorError, ValueError):
    """Register identifier outside 'a'..'z'."""


class InvalidExpression(CalculatorError, ValueError):
    """Structural problem with an expression line."""


# ─────────────────────────── Rational ────────────────────────────────────

# "N" albo "N/D"; znak dozwolony przy obu częściach
_RATIONAL_RE = re.compile(r"(-?[0-9]+)(?:/(-?[0-9]+))?")


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


class Rational(BaseModel):
    """
    Exact fraction over arbitrary-precision ints.

    Always reduced, denominator always positive, zero is 0/1.
    Frozen: arithmetic returns new instances.
    """
    model_config = ConfigDict(frozen=True)

    numerator: StrictInt
    denominator: StrictInt = 1

    def __init__(self, numerator: int, denominator: int = 1) -> None:
        super().__init__(numerator=numerator, denominator=denominator)

    @model_validator(mode="before")
    @classmethod
    def _normalize(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        num = data.get("numerator")
        den = data.get("denominator", 1)
        # non-int input is left to the strict field validation
        if not (_is_int(num) and _is_int(den)):
            return data
        if den == 0:
            raise DivisionByZero("Denominator cannot be zero")
        if den < 0:
            num, den = -num, -den
        g = math.gcd(num, den)
        return {"numerator": num // g, "denominator": den // g}

    @classmethod
    def parse(cls, text: str) -> Rational:
        """Parses "N", "N/D" or "-N/D". Raises InvalidFormat / DivisionByZero."""
        m = _RATIONAL_RE.fullmatch(text.strip())
        if m is None:
            raise InvalidFormat(f"Not a fraction: {text!r}")
        num_text, den_text = m.group(1), m.group(2)
        try:
            num = int(num_text)
            den = int(den_text) if den_text is not None else 1
        except ValueError as exc:
            # int() odrzuca zbyt długie ciągi cyfr (sys.get_int_max_str_digits)
            raise InvalidFormat(f"Not representable as an integer: {text!r}") from exc
        return cls(num, den)

    # -- arithmetic --------------------------------------------------------

    def add(self, other: Rational) -> Rational:
        return Rational(
            self.numerator * other.denominator + other.numerator * self.denominator,
            self.denominator * other.denominator,
        )

    def subtract(self, other: Rational) -> Rational:
        return Rational(
            self.numerator * other.denominator - other.numerator * self.denominator,
            self.denominator * other.denominator,
        )

    def multiply(self, other: Rational) -> Rational:
        return Rational(
            self.numerator * other.numerator,
            self.denominator * other.denominator,
        )

    def divide(self, other: Rational) -> Rational:
        if other.numerator == 0:
            raise DivisionByZero("Cannot divide by zero")
        return Rational(
            self.numerator * other.denominator,
            self.denominator * other.numerator,
        )

    # -- display -----------------------------------------------------------

    def to_display_string(self) -> str:
        if self.denominator == 1:
            return str(self.numerator)
        return f"{self.numerator}/{self.denominator}"

    def __str__(self) -> str:
        return self.to_display_string()


ZERO = Rational(0, 1)


# ─────────────────────────── Session ─────────────────────────────────────

class LineKind(str, Enum):
    EXPRESSION = "expression"   # np. "1/2 + a"
    STORE = "store"             # np. "STORE a"


class ErrorKind(str, Enum):
    # wartość = tekst pokazywany użytkownikowi
    INVALID_EXPRESSION = "Invalid expression"
    INVALID_REGISTER = "STORE command received invalid register"
    DIVISION_BY_ZERO = "Division by zero"


class LineResult(BaseModel):
    """Outcome of one input line, rendered differently by each front end."""
    line: str
    kind: LineKind
    value: Optional[Rational] = None     # wynik wyrażenia
    register_name: Optional[str] = None  # rejestr zapisany przez STORE
    error: Optional[ErrorKind] = None

    @property
    def ok(self) -> bool:
        return self.error is None
