# main.py
from __future__ import annotations

import argparse
import json
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Sequence

from debug import Debug
from enigma_machine import EnigmaMachine
from errors import ConfigurationError
from keyboard_and_plugboard import Plugboard
from rotor_and_reflector import Reflector, Rotor
from utilities import (
    DEFAULT_REFLECTOR,
    DEFAULT_ROTORS,
    REFLECTORS,
    ROTORS,
    group_blocks,
    parse_rotor_str,
    preprocess_message,
    resolve_reflector,
)

# ────────────────────────────────────────────────────────────────────────
#  0. Configuration & logging
# ────────────────────────────────────────────────────────────────────────


debug = Debug()


def _letters(value: str | Sequence[str]) -> List[str]:
    """``"ABC"``, ``"A B C"`` and ``["A", "B", "C"]`` all give ``["A", "B", "C"]``."""
    if isinstance(value, str):
        value = value.strip()
        value = value.split() if any(ch.isspace() for ch in value) else list(value)
    return [v.strip().upper() for v in value]


@dataclass(slots=True)
class Settings:
    """Everything needed to build one machine, rightmost rotor first."""

    rotors: List[str] = field(default_factory=lambda: list(DEFAULT_ROTORS))
    ring_set: List[str] = field(default_factory=list)     # blank → all "A"
    positions: List[str] = field(default_factory=list)    # blank → all "A"
    reflector: str = DEFAULT_REFLECTOR
    plugs: str = ""
    drop_other: bool = True         # strip non-letters and group output
    block: int = 5                  # output group size when drop_other

    def __post_init__(self) -> None:
        self.ring_set = _letters(self.ring_set)
        self.positions = _letters(self.positions)
        if not isinstance(self.plugs, str):
            self.plugs = " ".join(self.plugs)
        if isinstance(self.block, bool) or not isinstance(self.block, int) or self.block <= 0:
            raise ConfigurationError(f"Block size must be a positive integer, got {self.block!r}")

    @classmethod
    def from_config(cls, cfg: dict) -> "Settings":
        """Build Settings from a saved JSON dictionary."""
        try:
            block = int(cfg.get("block", 5))
        except (TypeError, ValueError):
            raise ConfigurationError(f"Block size must be a positive integer, got {cfg['block']!r}") from None
        return cls(
            rotors=list(cfg["rotors"]),
            ring_set=cfg.get("ring_set", []),
            positions=cfg.get("positions", []),
            reflector=cfg["reflector"],
            plugs=cfg.get("plugs", ""),
            drop_other=bool(cfg.get("drop_other", True)),
            block=block,
        )


# ────────────────────────────────────────────────────────────────────────
#  1. JSON loading helpers
# ────────────────────────────────────────────────────────────────────────


def load_config(path: str | Path) -> dict:
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ConfigurationError(f"Config {path} must hold a JSON object")
    required = {"rotors", "reflector"}
    missing = required - data.keys()
    if missing:
        raise ConfigurationError(f"Missing keys in config: {', '.join(sorted(missing))}")
    return data


# ────────────────────────────────────────────────────────────────────────
#  2. MachineContext – builds machines from Settings
# ────────────────────────────────────────────────────────────────────────


def build_rotors(settings: Settings) -> List[Rotor]:
    count = len(settings.rotors)
    if count not in (3, 4):
        raise ConfigurationError("Enigma must have 3 or 4 rotors")

    rings = settings.ring_set or ["A"] * 3
    positions = settings.positions or ["A"] * count
    if len(rings) not in (3, count):
        raise ConfigurationError(f"Need 3 ring settings, got {len(rings)}")
    if len(positions) != count:
        raise ConfigurationError(f"Need {count} initial positions, got {len(positions)}")
    # 4th rotor has no ring; "A" is the same as no setting
    if len(rings) == 4 and rings[3] != "A":
        raise ConfigurationError("The 4th rotor has no ring setting")

    rotors = []
    for i, spec in enumerate(settings.rotors):
        wiring, steps = parse_rotor_str(spec, i + 1)
        ring = rings[i] if i < 3 else "A"
        rotors.append(Rotor(wiring, steps, ring, positions[i]))
    return rotors


class MachineContext:
    """Owns one machine and can rewind it to the configured key."""

    def __init__(self, settings: Settings) -> None:
        self.settings = settings
        self.machine: EnigmaMachine = self.build()

    def build(self) -> EnigmaMachine:
        s = self.settings
        return EnigmaMachine(
            build_rotors(s),
            Reflector(resolve_reflector(s.reflector)),
            Plugboard(s.plugs),
        )

    # ––– helpers ––––––––––––––––––––––––––––––––––––––––––––––––

    def rewind(self) -> None:
        """Reset every rotor to its initial position."""
        self.machine = self.build()

    def run(self, text: str) -> str:
        """Encipher *text* from the configured key."""
        self.rewind()
        if self.settings.drop_other:
            text = preprocess_message(text)
        result = self.machine.crypt(text)
        if self.settings.drop_other:
            result = group_blocks(result, self.settings.block)
        return result


def run_enigma(text: str, settings: Settings | None = None) -> str:
    """Encrypt or decrypt *text* with a freshly built machine."""
    return MachineContext(settings or Settings()).run(text)


# ────────────────────────────────────────────────────────────────────────
#  3. CLI helpers
# ────────────────────────────────────────────────────────────────────────


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Encrypt or decrypt with an Enigma machine")
    p.add_argument("-m", "--message", metavar="TEXT", help="Text to encrypt/decrypt. If omitted, an interactive REPL starts.")
    p.add_argument("--config", metavar="FILE", help="Load machine settings from JSON.")
    p.add_argument(
        "--rotors", nargs="+", metavar="ROTOR",
        help=f"3 or 4 rotors, RIGHTMOST first. Names ({', '.join(ROTORS)}) or WIRING<STEPS. Default: {' '.join(DEFAULT_ROTORS)}",
    )
    p.add_argument("--rings", metavar="LETTERS", help="Ring settings, rightmost first, e.g. AAA")
    p.add_argument("--positions", metavar="LETTERS", help="Initial positions, rightmost first, e.g. AAA")
    p.add_argument("--reflector", metavar="REFL", help=f"Reflector name ({', '.join(REFLECTORS)}) or 13 pairs. Default: {DEFAULT_REFLECTOR}")
    p.add_argument("--plugboard", metavar="PAIRS", help='Plugboard pairs, e.g. "AB CD EF"')
    p.add_argument("--keep-other", action="store_true", help="Pass non-letters through instead of dropping them and grouping output.")
    p.add_argument("-v", "--verbose", action="store_true", help="Log every rotor step and substitution.")
    return p.parse_args(argv)


def settings_from_args(args: argparse.Namespace) -> Settings:
    settings = Settings.from_config(load_config(args.config)) if args.config else Settings()

    # command-line flags win over the file
    if args.rotors:
        settings.rotors = list(args.rotors)
    if args.rings:
        settings.ring_set = _letters(args.rings)
    if args.positions:
        settings.positions = _letters(args.positions)
    if args.reflector:
        settings.reflector = args.reflector
    if args.plugboard is not None:
        settings.plugs = args.plugboard.upper()
    if args.keep_other:
        settings.drop_other = False
    return settings


# ────────────────────────────────────────────────────────────────────────
#  4. Main entry point
# ────────────────────────────────────────────────────────────────────────


def main(argv: Sequence[str] | None = None) -> None:
    args = parse_args(argv)

    if args.verbose:
        debug.toggle_global(True)
        debug.enable(*debug.status())

    try:
        ctx = MachineContext(settings_from_args(args))
    except (ConfigurationError, OSError, json.JSONDecodeError) as e:
        print(f"❌  {e}", file=sys.stderr)
        raise SystemExit(2)

    if args.verbose:
        debug.log("encipher", repr(ctx.machine))

    # one‑shot mode ------------------------------------------------------
    if args.message is not None:
        print(ctx.run(args.message))
        return

    # interactive REPL ---------------------------------------------------
    print("Type blank line to quit.\n")
    while True:
        try:
            txt = input("Message: ")
        except EOFError:
            break
        if not txt.strip():
            break
        print(ctx.run(txt))


if __name__ == "__main__":
    main()
