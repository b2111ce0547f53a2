"""
Adapter: tryb interaktywny (REPL).

Pętla: prompt → linia ze strumienia → CalculatorSession.handle → jedna linia wyniku.
QUIT (dowolna wielkość liter) albo koniec strumienia kończy pętlę.
"""
from __future__ import annotations

import logging
import sys
from typing import TextIO

from rich.console import Console

from adapters.session.calculator_session import CalculatorSession
from contracts import LineKind, LineResult

logger = logging.getLogger("ratcalc.interactive")


def render_interactive(result: LineResult) -> str:
    if result.error is not None:
        return f"*** ERROR [{result.error.value}] ***"
    if result.kind == LineKind.STORE:
        return "STORED"
    return result.value.to_display_string()


def run_interactive(
    session: CalculatorSession,
    console: Console,
    stream: TextIO | None = None,
    prompt: str = "> ",
    quit_command: str = "QUIT",
) -> None:
    """Runs the read-eval-print loop until QUIT or end of input."""
    stream = stream if stream is not None else sys.stdin
    handled = 0
    while True:
        raw = console.input(prompt, markup=False, stream=stream)
        if raw == "":
            # EOF
            break
        line = raw.strip()
        if line.lower() == quit_command.lower():
            break
        console.print(render_interactive(session.handle(line)))
        handled += 1
    logger.info("Interactive session finished after %d line(s)", handled)
