import pytest

from errors import ConfigurationError
from rotor_and_reflector import Reflector, Rotor
from utilities import REFLECTORS

WIRING_I = "EKMFLGDQVZNTOWYHXUSPAIBRCJ"


def test_identity_wiring_at_rest():
    r = Rotor("ABCDEFGHIJKLMNOPQRSTUVWXYZ", "", "A", "A")
    assert [r.forward(c) for c in range(26)] == list(range(26))


def test_forward_uses_wiring():
    r = Rotor(WIRING_I, "R", "A", "A")
    assert r.forward(0) == 4           # A → E
    assert r.backward(4) == 0


def test_backward_inverts_forward_at_every_position():
    r = Rotor(WIRING_I, "R", "C", "K")
    for _ in range(26):
        r.step()
        for c in range(26):
            assert r.backward(r.forward(c)) == c


def test_ring_setting_shifts_notches_and_position():
    r = Rotor(WIRING_I, "R", "B", "A")
    assert r.ring_setting == 1
    assert r.notches == {16}
    assert r.position == 25


def test_step_wraps():
    r = Rotor(WIRING_I, "", "A", "Z")
    assert r.position == 25
    assert r.step() == 0
    assert r.step() == 1


def test_full_revolution():
    r = Rotor(WIRING_I, "", "A", "A")
    seen = [r.step() for _ in range(26)]
    assert seen == list(range(1, 26)) + [0]


def test_at_notch():
    r = Rotor(WIRING_I, "AN", "A", "M")
    assert not r.at_notch()
    assert r.at_notch(1)
    r.step()
    assert r.at_notch()


@pytest.mark.parametrize(
    "args, message",
    [
        ((WIRING_I[:-1], "", "A", "A"), "wiring must be 26"),
        ((WIRING_I.lower(), "", "A", "A"), "wiring must be 26"),
        (("AACDEFGHIJKLMNOPQRSTUVWXYZ", "", "A", "A"), "each letter exactly once"),
        ((WIRING_I, "a", "A", "A"), "steps must be 0-26"),
        ((WIRING_I, "A1", "A", "A"), "steps must be 0-26"),
        ((WIRING_I, "QQ", "A", "A"), "steps must be unique"),
        ((WIRING_I, "", "AB", "A"), "ring setting"),
        ((WIRING_I, "", "", "A"), "ring setting"),
        ((WIRING_I, "", "A", "a"), "initial position"),
        ((WIRING_I, "", "A", ""), "initial position"),
    ],
)
def test_rotor_rejects_bad_configuration(args, message):
    with pytest.raises(ConfigurationError, match=message):
        Rotor(*args)


@pytest.mark.parametrize("name", list(REFLECTORS))
def test_catalog_reflectors_are_fixed_point_free_involutions(name):
    refl = Reflector(REFLECTORS[name])
    for c in range(26):
        assert refl.forward(c) != c
        assert refl.forward(refl.forward(c)) == c
        assert refl.reflect(c) == refl.backward(c) == refl.forward(c)


def test_reflector_must_cover_every_letter():
    with pytest.raises(ConfigurationError, match="exactly 13 pairs"):
        Reflector("AY BR CU DH EQ FS GL IP JX KN MO TZ")
    with pytest.raises(ConfigurationError, match="exactly 13 pairs"):
        Reflector("")


def test_reflector_errors_name_the_reflector():
    with pytest.raises(ConfigurationError, match="Reflector connects A more than once"):
        Reflector("AY AR CU DH EQ FS GL IP JX KN MO TZ VW")
