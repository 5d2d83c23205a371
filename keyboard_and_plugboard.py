# keyboard_and_plugboard.py
from __future__ import annotations

import string
from typing import List, Tuple

from debug import Debug
from errors import ConfigurationError

debug = Debug()
debug.disable("keyboard", "plugboard")

ALPHABET = string.ascii_uppercase
SIZE = len(ALPHABET)


# ── letter <-> index codec ────────────────────────────────────────
def letter_to_index(letter: str, permissive: bool = False) -> int:
    """Map ``A``-``Z`` to 0-25.

    With *permissive* set, lowercase letters map to the same range and any
    other character gives ``-1`` instead of raising.
    """
    i = ord(letter) if len(letter) == 1 else -1
    if 65 <= i <= 90:
        return i - 65
    if permissive:
        if 97 <= i <= 122:
            return i - 97
        return -1
    raise ConfigurationError(f"Expected an uppercase letter A-Z, got {letter!r}")


def index_to_letter(signal: int) -> str:
    if not (0 <= signal < SIZE):
        raise ConfigurationError(f"Signal {signal} out of range 0–{SIZE - 1}")
    return ALPHABET[signal]


# ── Keyboard ──────────────────────────────────────────────────────
class Keyboard:
    # letter → integer signal (-1 for anything that is not a letter)
    def forward(self, letter: str) -> int:
        signal = letter_to_index(letter, permissive=True)
        debug.log("keyboard", f"{letter!r}->{signal}")
        return signal

    # integer signal → lamp letter
    def backward(self, signal: int) -> str:
        return index_to_letter(signal)


# ── Pair substitution ─────────────────────────────────────────────
class PairSubstitution:
    """Symmetric letter swaps; letters without a partner pass through."""

    def __init__(self, pairs: str, name: str = "PairSubstitution") -> None:
        self.name = name
        self._map: List[int] = list(range(SIZE))
        self._used: set[int] = set()

        for raw in pairs.split():
            if len(raw) != 2 or not all(ch in ALPHABET for ch in raw):
                raise ConfigurationError(
                    f"{name} must be a whitespace-separated list of uppercase letter pairs"
                )
            a, b = letter_to_index(raw[0]), letter_to_index(raw[1])

            if a == b:
                raise ConfigurationError(f"{name}: cannot connect {raw[0]} to itself")
            if a in self._used:
                raise ConfigurationError(f"{name} connects {raw[0]} more than once")
            if b in self._used:
                raise ConfigurationError(f"{name} connects {raw[1]} more than once")

            # passed validation → commit swap
            self._map[a], self._map[b] = b, a
            self._used.update((a, b))

    @property
    def pairs(self) -> List[Tuple[str, str]]:
        return [
            (ALPHABET[a], ALPHABET[b]) for a, b in enumerate(self._map) if a < b
        ]

    # one private helper does the job for both directions
    def _swap(self, signal: int) -> int:
        mapped = self._map[signal]
        debug.log(self.name.lower(), f"{signal}->{mapped}")
        return mapped

    forward = _swap       # alias: signal in
    backward = _swap      # alias: signal out

    # nicety for debugging
    def __repr__(self) -> str:
        swaps = [a + b for a, b in self.pairs]
        return f"<{self.name} {' '.join(swaps)}>"


# ── Plugboard ─────────────────────────────────────────────────────
class Plugboard(PairSubstitution):
    def __init__(self, pairs: str = "") -> None:
        super().__init__(pairs, "Plugboard")
