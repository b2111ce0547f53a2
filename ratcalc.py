#!/usr/bin/env python3
"""
ratcalc.py — CLI kalkulatora ułamków RatCalc.

Dokładna arytmetyka na ułamkach dowolnej precyzji, wyrażenia liczone
ściśle od lewej do prawej, rejestry 'a'..'z' na poprzednie wyniki.

Konfiguracja: zmienne środowiskowe z prefiksem RATCALC_
lub plik .env (np. RATCALC_LOG_LEVEL=DEBUG).

Podkomendy:
    interactive — REPL: czytaj linie ze stdin aż do QUIT
    quick       — policz każdy argument osobno, w kolejności

Użycie:
    python ratcalc.py interactive
    python ratcalc.py quick "1/2 + 1/3" "STORE a" "a * 6"
"""
from __future__ import annotations

import argparse
import logging
import sys

from rich.console import Console

from adapters.frontend.batch import run_batch
from adapters.frontend.interactive import run_interactive
from adapters.session.calculator_session import CalculatorSession
from config import Settings

logger = logging.getLogger("ratcalc.cli")


# -- helpers ---------------------------------------------------------------

def _console() -> Console:
    # wynik ma być dosłowny: bez markup, emoji, kolorowania i zawijania
    return Console(highlight=False, markup=False, emoji=False, soft_wrap=True)


def _apply_int_limit(settings: Settings) -> None:
    sys.set_int_max_str_digits(settings.int_max_str_digits)


# -- commands --------------------------------------------------------------

def _interactive(args: argparse.Namespace, settings: Settings) -> None:
    run_interactive(
        CalculatorSession(),
        _console(),
        stream=sys.stdin,
        prompt=settings.prompt,
        quit_command=settings.quit_command,
    )


def _quick(args: argparse.Namespace, settings: Settings) -> None:
    run_batch(CalculatorSession(), args.expressions, _console())


# -- main ------------------------------------------------------------------

def build_parser(settings: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ratcalc",
        description=f"{settings.app_title} — exact fraction calculator",
    )
    parser.add_argument("--version", action="version",
                        version=f"%(prog)s {settings.app_version}")
    sub = parser.add_subparsers(dest="command", required=True)

    # interactive
    sub.add_parser("interactive", help="REPL: czytaj wyrażenia ze stdin aż do QUIT")

    # quick
    p = sub.add_parser("quick", help="Policz każdy argument jako osobną linię")
    p.add_argument("expressions", nargs="*", metavar="EXPR",
                   help='Wyrażenie (np. "1/2 + a") albo "STORE x"')

    return parser


def main(argv: list[str] | None = None) -> None:
    settings = Settings()
    logging.basicConfig(level=settings.log_level.upper())
    _apply_int_limit(settings)

    args = build_parser(settings).parse_args(argv)

    commands = {
        "interactive": _interactive,
        "quick":       _quick,
    }
    logger.debug("Running %s", args.command)
    commands[args.command](args, settings)


if __name__ == "__main__":
    main()
