"""
Adapter: LeftToRightEvaluator
Implementuje port Evaluator — składanie tokenów od lewej do prawej przez Accumulator.

Gramatyka linii (tokeny rozdzielone pojedynczą spacją):
  line    = operand (SP op SP operand)*
  op      = '+' | '-' | '*' | '/'
  operand = REGISTER | LITERAL
  REGISTER = [a-z]
  LITERAL  = -?[0-9]+(/[0-9]+)?

Brak priorytetów operatorów: "1 + 2 * 3" = (1 + 2) * 3 = 9.
Accumulator jest zerowany dopiero po poprawnym rozwiązaniu pierwszego operandu;
błąd w środku wyrażenia zostawia w nim wynik częściowy.
"""
from __future__ import annotations

import logging
import re
from typing import Callable

from adapters.evaluator.accumulator import Accumulator
from contracts import (
    InvalidExpression,
    InvalidFormat,
    InvalidRegister,
    Rational,
)
from ports.register_store import RegisterStore

logger = logging.getLogger("ratcalc.evaluator")

# Mapowanie symboli operatorów na operacje Accumulatora
_OP_METHODS: dict[str, Callable[[Accumulator, Rational], None]] = {
    "+": Accumulator.add,
    "-": Accumulator.subtract,
    "*": Accumulator.multiply,
    "/": Accumulator.divide,
}

_LITERAL_RE = re.compile(r"-?[0-9]+(?:/[0-9]+)?")

# Tani test wstępny, nie pełna walidacja gramatyki
_TRAILING_OP_RE = re.compile(r"[+\-*/]$")


def tokenize(line: str) -> list[str]:
    """Splits on single spaces; trailing empty tokens are dropped."""
    tokens = line.split(" ")
    while tokens and tokens[-1] == "":
        tokens.pop()
    return tokens


class LeftToRightEvaluator:
    """Evaluates expression lines against a register store and an accumulator."""

    def __init__(self, registers: RegisterStore, accumulator: Accumulator) -> None:
        self._registers = registers
        self._accumulator = accumulator

    # -- Evaluator protocol ------------------------------------------------

    def evaluate(self, line: str) -> Rational:
        if not line or _TRAILING_OP_RE.search(line):
            raise InvalidExpression(f"Empty or trailing operator: {line!r}")

        tokens = tokenize(line)
        if not tokens:
            raise InvalidExpression(f"No operands: {line!r}")

        first = self._resolve(tokens[0])
        self._accumulator.reset()
        self._accumulator.add(first)

        for i in range(1, len(tokens), 2):
            if i + 1 >= len(tokens):
                raise InvalidExpression(f"Operator {tokens[i]!r} without operand")
            op = tokens[i]
            value = self._resolve(tokens[i + 1])
            fn = _OP_METHODS.get(op)
            if fn is None:
                raise InvalidExpression(f"Unknown operator: {op!r}")
            fn(self._accumulator, value)

        result = self._accumulator.current()
        logger.debug("%r = %s", line, result)
        return result

    # -- Prywatne ----------------------------------------------------------

    def _resolve(self, token: str) -> Rational:
        """Turns one operand token into a value."""
        if len(token) == 1 and token.isalpha():
            if not "a" <= token <= "z":
                raise InvalidExpression(f"Invalid register: {token!r}")
            try:
                return self._registers.get(token)
            except InvalidRegister as exc:
                raise InvalidExpression(str(exc)) from exc

        if _LITERAL_RE.fullmatch(token):
            try:
                return Rational.parse(token)
            except InvalidFormat as exc:
                raise InvalidExpression(str(exc)) from exc

        raise InvalidExpression(f"Unrecognized operand: {token!r}")

