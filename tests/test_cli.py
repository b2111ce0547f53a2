from __future__ import annotations

import io
import subprocess
import sys
from pathlib import Path

import pytest
from pydantic import ValidationError

import ratcalc
from config import Settings


def test_quick_command_prints_one_line_per_argument(capsys):
    ratcalc.main(["quick", "1/2 + 1/3", "STORE x", "x - 1", "1 +"])

    out = capsys.readouterr().out
    assert out.splitlines() == [
        "1/2 + 1/3 -> 5/6",
        "STORE x -> STORED",
        "x - 1 -> -1/6",
        "1 +: FAILED [Invalid expression]",
    ]


def test_quick_command_accepts_negative_literal_after_separator(capsys):
    ratcalc.main(["quick", "--", "-1/2"])

    assert capsys.readouterr().out == "-1/2 -> -1/2\n"


def test_interactive_command_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("4 / 2\nSTORE r\nr * r\nQUIT\n"))

    ratcalc.main(["interactive"])

    assert capsys.readouterr().out == "> 2\n> STORED\n> 4\n> "


def test_prompt_comes_from_environment(monkeypatch, capsys):
    monkeypatch.setenv("RATCALC_PROMPT", "calc: ")
    monkeypatch.setattr("sys.stdin", io.StringIO("1 + 1\n"))

    ratcalc.main(["interactive"])

    assert capsys.readouterr().out == "calc: 2\ncalc: "


def test_settings_defaults():
    settings = Settings()

    assert settings.prompt == "> "
    assert settings.quit_command == "QUIT"
    assert settings.log_level == "WARNING"


def test_command_is_required(capsys):
    with pytest.raises(SystemExit) as exc_info:
        ratcalc.main([])

    assert exc_info.value.code == 2


@pytest.mark.parametrize("value", ["100", "-1"])
def test_settings_reject_unusable_int_digit_limit(monkeypatch, value):
    monkeypatch.setenv("RATCALC_INT_MAX_STR_DIGITS", value)

    with pytest.raises(ValidationError):
        Settings()


def test_settings_accept_int_digit_limit_at_threshold(monkeypatch):
    threshold = sys.int_info.str_digits_check_threshold
    monkeypatch.setenv("RATCALC_INT_MAX_STR_DIGITS", str(threshold))

    assert Settings().int_max_str_digits == threshold


def test_cli_run_writes_nothing_to_stderr():
    root = Path(__file__).resolve().parent.parent

    proc = subprocess.run(
        [sys.executable, "-W", "error::UserWarning", "ratcalc.py", "quick", "1 + 1"],
        cwd=root,
        capture_output=True,
        text=True,
    )

    assert proc.returncode == 0
    assert proc.stdout == "1 + 1 -> 2\n"
    assert proc.stderr == ""
