"""
Adapter: CalculatorSession
Wspólny rdzeń obu frontendów (REPL i tryb wsadowy).

Sesja posiada jeden RegisterBank, jeden Accumulator i jeden ewaluator.
Linia zaczynająca się od "STORE " to polecenie zapisu; każda inna to wyrażenie.
Żaden błąd rdzenia nie wychodzi poza handle() — wynik zawsze jest LineResult.
"""
from __future__ import annotations

import logging

from adapters.evaluator.accumulator import Accumulator
from adapters.evaluator.left_to_right_evaluator import LeftToRightEvaluator, tokenize
from adapters.register_store.register_bank import RegisterBank
from contracts import (
    DivisionByZero,
    ErrorKind,
    InvalidExpression,
    InvalidFormat,
    InvalidRegister,
    LineKind,
    LineResult,
)

logger = logging.getLogger("ratcalc.session")

STORE_PREFIX = "STORE "


class CalculatorSession:
    """Registers, accumulator and evaluator shared by every line of one run."""

    def __init__(
        self,
        registers: RegisterBank | None = None,
        accumulator: Accumulator | None = None,
    ) -> None:
        self.registers = registers if registers is not None else RegisterBank()
        self.accumulator = accumulator if accumulator is not None else Accumulator()
        self.evaluator = LeftToRightEvaluator(self.registers, self.accumulator)

    @staticmethod
    def is_store_command(line: str) -> bool:
        # wielkość liter ma znaczenie (w przeciwieństwie do QUIT)
        return line.startswith(STORE_PREFIX)

    def handle(self, line: str) -> LineResult:
        if self.is_store_command(line):
            return self.store(line)
        return self.evaluate(line)

    def store(self, line: str) -> LineResult:
        """
        Saves the accumulator's current value: "STORE x" with x in a..z.
        Anything else is reported as ErrorKind.INVALID_REGISTER.
        """
        parts = tokenize(line)
        if len(parts) != 2:
            logger.debug("Rejected STORE %r: expected one register", line)
            return LineResult(line=line, kind=LineKind.STORE, error=ErrorKind.INVALID_REGISTER)

        register = parts[1]
        try:
            self.registers.store(register, self.accumulator.current())
        except InvalidRegister as exc:
            logger.debug("Rejected STORE %r: %s", line, exc)
            return LineResult(line=line, kind=LineKind.STORE, error=ErrorKind.INVALID_REGISTER)

        logger.debug("Stored %s in register %s", self.accumulator.current(), register)
        return LineResult(line=line, kind=LineKind.STORE, register_name=register)

    def evaluate(self, line: str) -> LineResult:
        try:
            value = self.evaluator.evaluate(line)
        except DivisionByZero as exc:
            logger.debug("Rejected %r: %s", line, exc)
            return LineResult(line=line, kind=LineKind.EXPRESSION, error=ErrorKind.DIVISION_BY_ZERO)
        except (InvalidExpression, InvalidFormat, InvalidRegister) as exc:
            logger.debug("Rejected %r: %s", line, exc)
            return LineResult(line=line, kind=LineKind.EXPRESSION, error=ErrorKind.INVALID_EXPRESSION)
        return LineResult(line=line, kind=LineKind.EXPRESSION, value=value)
