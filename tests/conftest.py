import os

import pytest

from keycalc.core.event_bus import EventBus
from keycalc.core.state_manager import StateManager
from keycalc.core.states import IDLE_STATE
from keycalc.core.transitions import reduce
from keycalc.input.key_mapper import key_to_event, tokenize


def run_keys(keys, state=IDLE_STATE):
    """Fold terminal-style *keys* (e.g. ``"2+3*4="``) through the reducer."""
    for key in tokenize(keys) if isinstance(keys, str) else keys:
        event = key_to_event(key)
        assert event is not None, f"unbound key {key!r}"
        state = reduce(state, event)
    return state


@pytest.fixture
def bus():
    return EventBus()


@pytest.fixture
def manager(bus):
    sm = StateManager(debug=True)
    sm.attach(bus)
    return sm


@pytest.fixture
def config_path(tmp_path):
    """Path to a not-yet-existing config file; keeps tests off ~/.config."""
    return str(tmp_path / "keycalc" / "config.json")


@pytest.fixture(scope="session")
def qapp():
    """Shared QApplication on the offscreen platform; skips without PyQt5."""
    os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
    QtWidgets = pytest.importorskip("PyQt5.QtWidgets")
    app = QtWidgets.QApplication.instance() or QtWidgets.QApplication([])
    yield app
