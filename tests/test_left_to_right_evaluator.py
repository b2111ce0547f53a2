from __future__ import annotations

import pytest

from adapters.evaluator.accumulator import Accumulator
from adapters.evaluator.left_to_right_evaluator import LeftToRightEvaluator
from adapters.register_store.register_bank import RegisterBank
from contracts import DivisionByZero, InvalidExpression, Rational
from ports.evaluator import Evaluator


def _evaluator(registers: RegisterBank | None = None) -> tuple[LeftToRightEvaluator, Accumulator]:
    acc = Accumulator()
    return LeftToRightEvaluator(registers or RegisterBank(), acc), acc


def test_evaluator_satisfies_port():
    ev, _ = _evaluator()

    assert isinstance(ev, Evaluator)


@pytest.mark.parametrize(
    "line, expected",
    [
        ("1/2 + 1/3", Rational(5, 6)),
        ("4 / 2", Rational(2)),
        ("7", Rational(7)),
        ("-3/6", Rational(-1, 2)),
        ("1 - 5", Rational(-4)),
        ("2/4 * 3/6", Rational(1, 4)),
        ("1 + 2 * 3", Rational(9)),          # no precedence
        ("10 - 4 - 3", Rational(3)),         # left-assoc
        ("1 / 3 / 3", Rational(1, 9)),
        ("1 + 1 ", Rational(2)),             # trailing space ignored
    ],
)
def test_evaluate(line, expected):
    ev, _ = _evaluator()

    assert ev.evaluate(line) == expected


def test_unset_register_reads_as_zero():
    ev, _ = _evaluator()

    assert ev.evaluate("a + 1") == Rational(1)


def test_registers_are_resolved():
    bank = RegisterBank()
    bank.store("q", Rational(3, 4))
    ev, _ = _evaluator(bank)

    assert ev.evaluate("q * q") == Rational(9, 16)


@pytest.mark.parametrize(
    "line",
    [
        "",
        "1 +",
        "1 -",
        "1 *",
        "1/",
        "1 % 2",
        "1 2",
        "1 + 2 3",
        "A + 1",
        "1 + B",
        "é",
        "ab + 1",
        "1.5 + 1",
        "1/-2",
        "1  + 2",
        " 1 + 2",
        "1+2",
    ],
)
def test_invalid_expressions(line):
    ev, _ = _evaluator()

    with pytest.raises(InvalidExpression):
        ev.evaluate(line)


def test_division_by_zero_is_distinct_from_invalid_expression():
    ev, _ = _evaluator()

    with pytest.raises(DivisionByZero):
        ev.evaluate("5 / 0")
    with pytest.raises(DivisionByZero):
        ev.evaluate("5 / 0/3")
    with pytest.raises(DivisionByZero):
        ev.evaluate("1/0 + 1")


def test_accumulator_holds_result():
    ev, acc = _evaluator()

    ev.evaluate("1/2 * 4")

    assert acc.current() == Rational(2)


def test_invalid_first_operand_leaves_accumulator_untouched():
    ev, acc = _evaluator()
    ev.evaluate("3")

    with pytest.raises(InvalidExpression):
        ev.evaluate("X + 1")

    assert acc.current() == Rational(3)


def test_failure_mid_expression_keeps_partial_value():
    ev, acc = _evaluator()

    with pytest.raises(InvalidExpression):
        ev.evaluate("2 + 3 % 4")

    assert acc.current() == Rational(5)
