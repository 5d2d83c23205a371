# rotor_and_reflector.py
from __future__ import annotations

import re

from debug import Debug
from errors import ConfigurationError
from keyboard_and_plugboard import ALPHABET, SIZE, PairSubstitution, letter_to_index

debug = Debug()
debug.disable("rotor", "reflector")

_WIRING_RE = re.compile(r"^[A-Z]{26}$")
_STEPS_RE = re.compile(r"^[A-Z]{0,26}$")
_LETTER_RE = re.compile(r"^[A-Z]$")


class Rotor:
    def __init__(
        self,
        wiring: str,
        steps: str,
        ring_setting: str,
        initial_position: str,
    ) -> None:
        if not _WIRING_RE.match(wiring):
            raise ConfigurationError("Rotor wiring must be 26 unique uppercase letters")
        if not _STEPS_RE.match(steps):
            raise ConfigurationError("Rotor steps must be 0-26 unique uppercase letters")
        if not _LETTER_RE.match(ring_setting):
            raise ConfigurationError("Rotor ring setting must be exactly one uppercase letter")
        if not _LETTER_RE.match(initial_position):
            raise ConfigurationError("Rotor initial position must be exactly one uppercase letter")
        if sorted(wiring) != list(ALPHABET):
            raise ConfigurationError("Rotor wiring must have each letter exactly once")

        # integer lookup tables
        self._fwd = [letter_to_index(c) for c in wiring]
        self._rev = [0] * SIZE
        for i, j in enumerate(self._fwd):
            self._rev[j] = i

        # notches live in the physical frame so step checks need no ring maths
        self.ring_setting = letter_to_index(ring_setting)
        self.notches = {(letter_to_index(c) - self.ring_setting) % SIZE for c in steps}
        if len(self.notches) != len(steps):
            raise ConfigurationError("Rotor steps must be unique")

        self.position = (letter_to_index(initial_position) - self.ring_setting) % SIZE

    # ── stepping --------------------------------------------------
    def step(self) -> int:
        """Advance one position and return the new position."""
        self.position = (self.position + 1) % SIZE
        return self.position

    def at_notch(self, offset: int = 0) -> bool:
        """True if ``position + offset`` is one of this rotor's notches."""
        return (self.position + offset) % SIZE in self.notches

    # ── signal paths ---------------------------------------------
    def forward(self, sig: int) -> int:
        mapped = self._fwd[(sig + self.position) % SIZE]
        out = (mapped - self.position) % SIZE
        debug.log("rotor", f"fwd pos={self.position} {sig}->{out}")
        return out

    def backward(self, sig: int) -> int:
        mapped = self._rev[(sig + self.position) % SIZE]
        out = (mapped - self.position) % SIZE
        debug.log("rotor", f"bwd pos={self.position} {sig}->{out}")
        return out

    # ── niceties --------------------------------------------------
    def __repr__(self) -> str:
        return f"<Rotor pos={self.position} ring={self.ring_setting}>"


class Reflector(PairSubstitution):
    """A plugboard that must wire every letter: 13 pairs, no fixed points."""

    def __init__(self, pairs: str) -> None:
        super().__init__(pairs, "Reflector")
        if len(self._used) != SIZE:
            raise ConfigurationError(
                "Reflector must have exactly 13 pairs covering every letter"
            )

    reflect = PairSubstitution.forward
