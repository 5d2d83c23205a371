# enigma_machine.py  ─────────────────────────────────────────────
from __future__ import annotations

from typing import Iterable, Iterator, List, Sequence

from debug import Debug
from errors import ConfigurationError
from keyboard_and_plugboard import Keyboard, Plugboard
from rotor_and_reflector import Reflector, Rotor

debug = Debug()
debug.disable("stepping", "encipher")


class EnigmaMachine:
    """Three or four rotors, a reflector and a plugboard.

    ``rotors[0]`` is the rightmost (fastest) wheel. The machine is stateful:
    every letter it enciphers moves the rotors, so decrypting needs a freshly
    built machine with the same settings. Do not share one instance between
    threads.
    """

    def __init__(
        self,
        rotors: Sequence[Rotor],
        reflector: Reflector,
        plugboard: Plugboard,
    ) -> None:
        if len(rotors) not in (3, 4):
            raise ConfigurationError("Enigma must have 3 or 4 rotors")

        self.kb = Keyboard()
        self.rotors: List[Rotor] = list(rotors)
        self.rotors_rev: List[Rotor] = self.rotors[::-1]
        self.reflector = reflector
        self.plugboard = plugboard

    @property
    def positions(self) -> List[int]:
        return [r.position for r in self.rotors]

    # ── stepping logic  ─────────────────────────────────────────

    def step(self) -> None:
        """Advance the rotors for one key-press.

        The 4th rotor, if fitted, never moves. The middle rotor also steps
        when it is one short of its own notch, which is the double-step
        anomaly: it moves on two key-presses in a row and drags the left
        rotor along on the second.
        """
        right, middle, left = self.rotors[:3]

        right.step()
        if right.at_notch() or middle.at_notch(1):
            middle.step()
            if middle.at_notch():
                left.step()

        debug.log("stepping", f"Rotor pos {self.positions}")

    # ── encipher one symbol  ────────────────────────────────────

    def encipher(self, letter: str) -> str:
        signal = self.kb.forward(letter)
        if signal == -1:
            return letter

        self.step()
        signal = self.plugboard.forward(signal)

        for rotor in self.rotors:
            signal = rotor.forward(signal)

        signal = self.reflector.forward(signal)

        for rotor in self.rotors_rev:
            signal = rotor.backward(signal)

        signal = self.plugboard.backward(signal)
        out_ch = self.kb.backward(signal)
        debug.log("encipher", f"{letter}->{out_ch}")
        return out_ch

    def crypt_iter(self, text: Iterable[str]) -> Iterator[str]:
        for ch in text:
            yield self.encipher(ch)

    def crypt(self, text: str) -> str:
        """Run *text* through the machine from its current state.

        Encryption and decryption are the same operation. Characters that
        are not letters come back unchanged and do not move the rotors.
        """
        return "".join(self.crypt_iter(text))

    def __repr__(self) -> str:
        return (
            f"<EnigmaMachine rotors={len(self.rotors)} pos={self.positions} "
            f"{self.plugboard!r}>"
        )
