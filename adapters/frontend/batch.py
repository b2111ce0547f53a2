"""
Adapter: tryb wsadowy.

Każdy argument to osobna linia; rejestry i Accumulator żyją przez cały przebieg.
Argumenty nie są przycinane.
"""
from __future__ import annotations

import logging
from typing import Iterable

from rich.console import Console

from adapters.session.calculator_session import CalculatorSession
from contracts import ErrorKind, LineKind, LineResult

logger = logging.getLogger("ratcalc.batch")


def _failure_reason(error: ErrorKind) -> str:
    # zły rejestr w STORE raportowany jak każde złe wyrażenie
    if error == ErrorKind.INVALID_REGISTER:
        return ErrorKind.INVALID_EXPRESSION.value
    return error.value


def render_batch(result: LineResult) -> str:
    if result.error is not None:
        return f"{result.line}: FAILED [{_failure_reason(result.error)}]"
    if result.kind == LineKind.STORE:
        return f"{result.line} -> STORED"
    return f"{result.line} -> {result.value.to_display_string()}"


def run_batch(session: CalculatorSession, args: Iterable[str], console: Console) -> None:
    """Handles every argument in order; failures never stop the run."""
    failures = 0
    for arg in args:
        result = session.handle(arg)
        if not result.ok:
            failures += 1
        console.print(render_batch(result))
    logger.info("Batch finished, %d failure(s)", failures)
