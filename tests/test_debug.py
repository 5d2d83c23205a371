import logging

import pytest

from debug import Debug


def test_components_start_disabled():
    assert not any(Debug().status().values())


def test_toggles_are_shared_between_instances():
    a, b = Debug(), Debug()
    a.enable("stepping")
    assert b.status()["stepping"] is True
    b.toggle("stepping")
    assert a.status()["stepping"] is False


def test_unknown_component():
    with pytest.raises(ValueError, match="No such component"):
        Debug().enable("lampboard")


def test_log_respects_toggles(caplog):
    caplog.set_level(logging.DEBUG, logger="ENIGMA")
    dbg = Debug()
    dbg.log("rotor", "hidden")
    dbg.enable("rotor")
    dbg.log("rotor", "shown")
    dbg.toggle_global(False)
    dbg.log("rotor", "muted")
    messages = [r.getMessage() for r in caplog.records]
    assert messages == ["[ROTOR] shown"]


def test_stepping_is_logged(caplog, build_machine):
    caplog.set_level(logging.DEBUG, logger="ENIGMA")
    Debug().enable("stepping")
    build_machine().crypt("AA")
    assert [r.getMessage() for r in caplog.records] == [
        "[STEPPING] Rotor pos [1, 0, 0]",
        "[STEPPING] Rotor pos [2, 0, 0]",
    ]
