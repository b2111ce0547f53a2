"""
Adapter: RegisterBank
Implementuje port RegisterStore — 26 slotów 'a'..'z' trzymanych in-memory.

Każdy slot startuje jako 0/1, zapis nadpisuje wartość, nic nie jest usuwane.
"""
from __future__ import annotations

from contracts import ZERO, InvalidRegister, Rational

REGISTER_COUNT = 26


def _index(register: str) -> int:
    if not isinstance(register, str) or len(register) != 1 or not "a" <= register <= "z":
        raise InvalidRegister(f"Register must be a letter from 'a' to 'z', got {register!r}")
    return ord(register) - ord("a")


class RegisterBank:
    """Fixed-size register store, one per session."""

    def __init__(self) -> None:
        # indeks = ord(litera) - ord('a')
        self._slots: list[Rational] = [ZERO] * REGISTER_COUNT

    def store(self, register: str, value: Rational) -> None:
        self._slots[_index(register)] = value

    def get(self, register: str) -> Rational:
        return self._slots[_index(register)]
