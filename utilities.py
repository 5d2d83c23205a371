# utilities.py
from __future__ import annotations

import re
from typing import Dict, List, Tuple

from errors import ConfigurationError

# ────────────────────────────────────────────────────────────────────────
#  0. Wheel database
# ────────────────────────────────────────────────────────────────────────

# wiring, optionally followed by "<" and the stepping letters
ROTORS: Dict[str, str] = {
    "I":     "EKMFLGDQVZNTOWYHXUSPAIBRCJ<R",
    "II":    "AJDKSIRUXBLHWTMCQGZNPYFVOE<F",
    "III":   "BDFHJLCPRTXVZNYEIWGAKMUSQO<W",
    "IV":    "ESOVPZJAYQUIRHXLNFTGKDCMWB<K",
    "V":     "VZBRGITYUPSDNHLXAWMJQOFECK<A",
    "VI":    "JPGVOUMFYQBENHZRDKASXLICTW<AN",
    "VII":   "NZJHGRCXMYSWBOUFAIVLPEKQDT<AN",
    "VIII":  "FKQHTLXOCBJSPDZRAMEWNIUYGV<AN",
    "Beta":  "LEYJVCNIXWPBQMDRTAKZGFUHOS",
    "Gamma": "FSOKANUERHMBTIYCWLQPZXVGJD",
}

REFLECTORS: Dict[str, str] = {
    "B":      "AY BR CU DH EQ FS GL IP JX KN MO TZ VW",
    "C":      "AF BV CP DJ EI GO HY KR LZ MX NW TQ SU",
    "B Thin": "AE BN CK DQ FU GY HW IJ LO MP RX SZ TV",
    "C Thin": "AR BD CO EJ FN GT HK IV LM PW QZ SX UY",
}

# historical defaults, rightmost rotor first
DEFAULT_ROTORS: List[str] = ["III", "II", "I"]
DEFAULT_REFLECTOR = "B"


# ────────────────────────────────────────────────────────────────────────
#  1. Rotor and reflector string helpers
# ────────────────────────────────────────────────────────────────────────


def parse_rotor_str(rotor: str, i: int) -> Tuple[str, str]:
    """Split ``WIRING<STEPS`` into ``(wiring, steps)``.

    *rotor* may also be a catalog name such as ``"IV"``; *i* is only used
    in the error message. Only the first ``<`` splits: anything after it is
    kept as step letters, so a second ``<`` is rejected by Rotor rather than
    silently dropped.
    """
    rotor = ROTORS.get(rotor, rotor)
    if rotor == "":
        raise ConfigurationError(f"Rotor {i} must be provided.")
    if "<" not in rotor:
        return rotor, ""
    wiring, steps = rotor.split("<", 1)
    return wiring, steps


def resolve_reflector(reflector: str) -> str:
    """Return the pair string for a named reflector, or *reflector* itself."""
    return REFLECTORS.get(reflector, reflector)


# ────────────────────────────────────────────────────────────────────────
#  2. Text pre/post-processing
# ────────────────────────────────────────────────────────────────────────

_non_alpha_re = re.compile(r"[^A-Za-z]")


def preprocess_message(msg: str) -> str:
    """Drop every character that is not an ASCII letter."""
    return _non_alpha_re.sub("", msg)


def group_blocks(text: str, block: int = 5) -> str:
    """``ABCDEFGHIJKL`` → ``ABCDE FGHIJ KL`` (no trailing space)."""
    if block <= 0:
        raise ConfigurationError(f"Block size must be positive, got {block}")
    return " ".join(text[i : i + block] for i in range(0, len(text), block))


__all__ = [
    "ROTORS",
    "REFLECTORS",
    "DEFAULT_ROTORS",
    "DEFAULT_REFLECTOR",
    "parse_rotor_str",
    "resolve_reflector",
    "preprocess_message",
    "group_blocks",
]
