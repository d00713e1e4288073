"""CalculatorWindow — keypad, display and theme toggle."""

from __future__ import annotations

import logging
from typing import Callable

from PyQt5.QtCore import Qt
from PyQt5.QtWidgets import (
    QFrame, QGridLayout, QHBoxLayout, QLabel, QPushButton, QVBoxLayout, QWidget,
)

import keycalc.log  # registers TRACE level and logger.trace()
from keycalc.config import DEFAULT_CONFIG
from keycalc.core.event_bus import EventBus
from keycalc.core.events import Event, EventType
from keycalc.core.states import IDLE_STATE, CalculatorState
from keycalc.input.key_mapper import key_to_event, qt_key_name
from keycalc.ui.theme import TOGGLE_ICONS, stylesheet, toggle_theme

logger = logging.getLogger(__name__)

WINDOW_TITLE = "Calculator_MEDA"
HINT_TEXT = "Use the keyboard for faster typing"

# (label, key, row, column, column span, variant)
KEYPAD: tuple[tuple[str, str, int, int, int, str], ...] = (
    ("Clear", "Escape", 0, 0, 2, "clear"),
    ("CE", "Backspace", 0, 2, 1, "clear"),
    ("÷", "÷", 0, 3, 1, "operation"),
    ("7", "7", 1, 0, 1, "number"),
    ("8", "8", 1, 1, 1, "number"),
    ("9", "9", 1, 2, 1, "number"),
    ("×", "×", 1, 3, 1, "operation"),
    ("4", "4", 2, 0, 1, "number"),
    ("5", "5", 2, 1, 1, "number"),
    ("6", "6", 2, 2, 1, "number"),
    ("−", "−", 2, 3, 1, "operation"),
    ("1", "1", 3, 0, 1, "number"),
    ("2", "2", 3, 1, 1, "number"),
    ("3", "3", 3, 2, 1, "number"),
    ("+", "+", 3, 3, 1, "operation"),
    ("0", "0", 4, 0, 2, "number"),
    (".", ".", 4, 2, 1, "number"),
    ("=", "=", 4, 3, 1, "equals"),
)


class CalculatorWindow(QWidget):
    """Main window.  Publishes input events on the bus and re-renders on
    STATE_CHANGED; it never mutates calculator state itself.
    """

    def __init__(
        self,
        event_bus: EventBus,
        config=None,
        state: CalculatorState = IDLE_STATE,
        on_toggle_theme: Callable[[], None] | None = None,
        parent=None,
    ):
        super().__init__(parent)
        self.event_bus = event_bus
        self.config = config
        self._on_toggle_theme = on_toggle_theme
        self._theme = self._cfg('theme')
        self.buttons: dict[str, QPushButton] = {}

        self.setObjectName("calculator")
        self.setWindowTitle(WINDOW_TITLE)
        self.setMinimumWidth(340)
        self.setFocusPolicy(Qt.StrongFocus)
        self.setAttribute(Qt.WA_StyledBackground, True)

        self._build_ui()
        self.apply_theme(self._theme)
        self.render(state)

        self.event_bus.subscribe(EventType.STATE_CHANGED, self._on_state_changed)
        self.event_bus.subscribe(EventType.THEME_CHANGED, self._on_theme_changed)

    def _cfg(self, key: str):
        if self.config is None:
            return DEFAULT_CONFIG[key]
        return self.config.get(key, DEFAULT_CONFIG[key])

    # -- UI construction ---------------------------------------------------

    def _build_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(24, 24, 24, 24)
        layout.setSpacing(16)

        # Header: title + theme toggle
        header = QHBoxLayout()
        title = QLabel(WINDOW_TITLE)
        title.setObjectName("title")
        header.addWidget(title)
        header.addStretch()
        self.theme_button = QPushButton()
        self.theme_button.setObjectName("themeToggle")
        self.theme_button.setFocusPolicy(Qt.NoFocus)
        self.theme_button.clicked.connect(self._toggle_theme_clicked)
        header.addWidget(self.theme_button)
        layout.addLayout(header)

        # Display
        frame = QFrame()
        frame.setObjectName("displayFrame")
        display_layout = QVBoxLayout(frame)
        display_layout.setContentsMargins(20, 16, 20, 16)
        self.display_label = QLabel()
        self.display_label.setObjectName("display")
        self.display_label.setAlignment(Qt.AlignRight | Qt.AlignVCenter)
        self.display_label.setWordWrap(True)
        display_layout.addWidget(self.display_label)
        self.pending_label = QLabel()
        self.pending_label.setObjectName("pendingLine")
        self.pending_label.setAlignment(Qt.AlignRight | Qt.AlignVCenter)
        display_layout.addWidget(self.pending_label)
        layout.addWidget(frame)

        # Keypad
        grid = QGridLayout()
        grid.setSpacing(12)
        for label, key, row, col, span, variant in KEYPAD:
            button = QPushButton(label)
            button.setProperty("variant", variant)
            # Buttons never take focus so Enter always means "="
            button.setFocusPolicy(Qt.NoFocus)
            button.clicked.connect(lambda _checked=False, k=key: self.press(k))
            grid.addWidget(button, row, col, 1, span)
            self.buttons[label] = button
        layout.addLayout(grid)

        hint = QLabel(HINT_TEXT)
        hint.setObjectName("hint")
        hint.setAlignment(Qt.AlignCenter)
        layout.addWidget(hint)

    # -- public API --------------------------------------------------------

    def press(self, key: str) -> bool:
        """Publish the event bound to *key*.  Returns False for unbound keys."""
        event = key_to_event(key)
        if event is None:
            logger.trace("Unbound key %r", key)  # type: ignore[attr-defined]
            return False
        self.event_bus.publish(event)
        return True

    def render(self, state: CalculatorState) -> None:
        self.display_label.setText(state.display)
        line = state.pending_line() if self._cfg('show_pending_operation') else ""
        self.pending_label.setText(line)
        self.pending_label.setVisible(bool(line))

    def apply_theme(self, theme_name: str) -> None:
        self._theme = theme_name
        self.setStyleSheet(stylesheet(theme_name, int(self._cfg('font_size'))))
        self.theme_button.setText(TOGGLE_ICONS.get(theme_name, TOGGLE_ICONS['light']))

    @property
    def theme(self) -> str:
        return self._theme

    def cleanup(self) -> None:
        """Unsubscribe from EventBus to prevent stale callbacks."""
        self.event_bus.unsubscribe(EventType.STATE_CHANGED, self._on_state_changed)
        self.event_bus.unsubscribe(EventType.THEME_CHANGED, self._on_theme_changed)

    # -- Qt overrides ------------------------------------------------------

    def keyPressEvent(self, event) -> None:
        if self._cfg('keyboard_enabled'):
            name = qt_key_name(event.key(), event.text())
            logger.trace("Key: code=0x%x text=%r → %r", event.key(), event.text(), name)  # type: ignore[attr-defined]
            if self.press(name):
                event.accept()
                return
        super().keyPressEvent(event)

    def closeEvent(self, event) -> None:
        self.cleanup()
        super().closeEvent(event)

    # -- handlers ----------------------------------------------------------

    def _toggle_theme_clicked(self) -> None:
        if self._on_toggle_theme is not None:
            self._on_toggle_theme()
        else:
            self.apply_theme(toggle_theme(self._theme))

    def _on_state_changed(self, event: Event) -> None:
        self.render(event.data.current)

    def _on_theme_changed(self, event: Event) -> None:
        self.apply_theme(str(event.data))
