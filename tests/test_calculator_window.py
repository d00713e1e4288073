"""Tests for CalculatorWindow on Qt's offscreen platform."""

from __future__ import annotations

import pytest

pytest.importorskip("PyQt5.QtWidgets")

from PyQt5.QtCore import QEvent, Qt  # noqa: E402
from PyQt5.QtGui import QKeyEvent  # noqa: E402
from PyQt5.QtWidgets import QLabel  # noqa: E402

from keycalc.config import ConfigManager  # noqa: E402
from keycalc.core.events import EventType, simple_event  # noqa: E402
from keycalc.ui.calculator_window import HINT_TEXT, KEYPAD, CalculatorWindow  # noqa: E402
from keycalc.ui.theme import THEMES, TOGGLE_ICONS  # noqa: E402


@pytest.fixture
def window(qapp, bus, manager):
    w = CalculatorWindow(bus)
    yield w
    w.cleanup()
    w.deleteLater()


def _key(window, key, text=""):
    event = QKeyEvent(QEvent.KeyPress, key, Qt.NoModifier, text)
    window.keyPressEvent(event)
    return event


class TestLayout:

    def test_all_keypad_buttons_present(self, window):
        assert set(window.buttons) == {label for label, *_ in KEYPAD}
        assert len(window.buttons) == 18

    def test_buttons_never_take_focus(self, window):
        for button in window.buttons.values():
            assert button.focusPolicy() == Qt.NoFocus

    def test_initial_render(self, window):
        assert window.display_label.text() == "0"
        assert window.pending_label.isHidden()

    def test_hint_text_shown(self, window):
        texts = [label.text() for label in window.findChildren(QLabel)]
        assert HINT_TEXT in texts


class TestClicks:

    def test_button_clicks_drive_calculation(self, window, manager):
        for label in ("1", "2", "+", "8"):
            window.buttons[label].click()
        assert window.pending_label.text() == "12 +"
        assert not window.pending_label.isHidden()
        window.buttons["="].click()
        assert manager.display == "20"
        assert window.display_label.text() == "20"
        assert window.pending_label.isHidden()

    def test_clear_and_clear_entry_buttons(self, window, manager):
        for label in ("5", "×", "9"):
            window.buttons[label].click()
        window.buttons["CE"].click()
        assert window.display_label.text() == "0"
        assert window.pending_label.text() == "5 ×"
        window.buttons["Clear"].click()
        assert window.pending_label.isHidden()

    def test_minus_button(self, window):
        for label in ("9", "−", "4", "="):
            window.buttons[label].click()
        assert window.display_label.text() == "5"


class TestKeyboard:

    def test_typed_keys(self, window, manager):
        _key(window, Qt.Key_7, "7")
        _key(window, Qt.Key_Asterisk, "*")
        _key(window, Qt.Key_6, "6")
        event = _key(window, Qt.Key_Return, "\r")
        assert event.isAccepted()
        assert manager.display == "42"

    def test_escape_and_backspace(self, window, manager):
        _key(window, Qt.Key_3, "3")
        _key(window, Qt.Key_Plus, "+")
        _key(window, Qt.Key_4, "4")
        _key(window, Qt.Key_Backspace, "\b")
        assert manager.display == "0"
        assert manager.state.operation is not None
        _key(window, Qt.Key_Escape, "\x1b")
        assert manager.state.operation is None

    def test_keyboard_disabled_by_config(self, qapp, bus, manager, config_path):
        config = ConfigManager(config_path=config_path)
        config.set('keyboard_enabled', False)
        w = CalculatorWindow(bus, config=config)
        try:
            _key(w, Qt.Key_5, "5")
            assert manager.display == "0"
        finally:
            w.cleanup()


class TestTheme:

    def test_toggle_without_callback_flips_locally(self, window):
        assert window.theme == 'light'
        window.theme_button.click()
        assert window.theme == 'dark'
        assert window.theme_button.text() == TOGGLE_ICONS['dark']

    def test_toggle_calls_callback(self, qapp, bus, manager):
        calls = []
        w = CalculatorWindow(bus, on_toggle_theme=lambda: calls.append(1))
        try:
            w.theme_button.click()
            assert calls == [1]
            assert w.theme == 'light'
        finally:
            w.cleanup()

    def test_theme_changed_event_applies(self, window, bus):
        bus.publish(simple_event(EventType.THEME_CHANGED, 'dark'))
        assert window.theme == 'dark'
        assert THEMES["dark"].window in window.styleSheet()


def test_cleanup_unsubscribes(qapp, bus, manager):
    before = bus.handler_count(EventType.STATE_CHANGED)
    w = CalculatorWindow(bus)
    assert bus.handler_count(EventType.STATE_CHANGED) == before + 1
    w.cleanup()
    assert bus.handler_count(EventType.STATE_CHANGED) == before
