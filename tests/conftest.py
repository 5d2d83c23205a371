import pytest

from debug import Debug
from enigma_machine import EnigmaMachine
from keyboard_and_plugboard import Plugboard
from rotor_and_reflector import Reflector, Rotor
from utilities import REFLECTORS, ROTORS, parse_rotor_str


@pytest.fixture(autouse=True)
def _restore_debug():
    """Debug toggles are shared across modules; undo whatever a test flips."""
    components = Debug._components.copy()
    enabled = Debug._enabled
    yield
    Debug._components.clear()
    Debug._components.update(components)
    Debug._enabled = enabled


def _rotor(name, ring="A", position="A"):
    wiring, steps = parse_rotor_str(ROTORS[name], 1)
    return Rotor(wiring, steps, ring, position)


@pytest.fixture
def make_rotor():
    return _rotor


@pytest.fixture
def build_machine():
    def _build(names=("III", "II", "I"), rings="AAA", positions=None,
               reflector="B", plugs=""):
        positions = positions or "A" * len(names)
        rings = rings + "A" * (len(names) - len(rings))
        rotors = [_rotor(n, r, p) for n, r, p in zip(names, rings, positions)]
        return EnigmaMachine(rotors, Reflector(REFLECTORS.get(reflector, reflector)), Plugboard(plugs))
    return _build
