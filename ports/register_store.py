"""
Port: RegisterStore
Odpowiedzialność: nazwane sloty 'a'..'z' na wartości Rational w obrębie jednej sesji.
"""
from typing import Protocol, runtime_checkable

from contracts import Rational


@runtime_checkable
class RegisterStore(Protocol):
    def store(self, register: str, value: Rational) -> None:
        """
        Overwrites the slot for `register` unconditionally.
        Raises InvalidRegister unless register is a lowercase ASCII letter.
        """
        ...

    def get(self, register: str) -> Rational:
        """
        Returns the value held by `register`; 0/1 if never stored.
        Raises InvalidRegister unless register is a lowercase ASCII letter.
        """
        ...
