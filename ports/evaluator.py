"""
Port: Evaluator
Odpowiedzialność: zamiana jednej linii wyrażenia na dokładny wynik Rational.
"""
from typing import Protocol, runtime_checkable

from contracts import Rational


@runtime_checkable
class Evaluator(Protocol):
    def evaluate(self, line: str) -> Rational:
        """
        Evaluates one whitespace-separated expression line strictly left to right
        (no operator precedence, no parentheses).
        Operands are fraction literals ("3", "-1/2") or register names ("a".."z").
        Raises InvalidExpression for any structural problem with the line.
        Raises DivisionByZero when a literal or a divisor is zero.
        """
        ...
