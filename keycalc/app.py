"""CalculatorApp — main application class, wires core, input and UI."""

from __future__ import annotations

import logging
import signal
import sys
from typing import Iterable, TextIO

import keycalc.log  # registers TRACE level and logger.trace()
from keycalc.config import THEME_NAMES, ConfigManager
from keycalc.core.event_bus import EventBus
from keycalc.core.events import Event, EventType, simple_event
from keycalc.core.state_manager import StateManager
from keycalc.core.states import CalculatorState
from keycalc.input.key_mapper import key_to_event, tokenize
from keycalc.ui.theme import toggle_theme

logger = logging.getLogger(__name__)

QUIT_COMMANDS = frozenset({'q', 'quit', 'exit'})


class CalculatorApp:
    """Single-process calculator.

    Modes:
        headless=True  — terminal loop reading keys from stdin
        headless=False — PyQt5 keypad window (default)

    The Qt window is created lazily in ``run()`` so the application can be
    driven through ``press()`` / ``feed()`` without a display server.
    """

    def __init__(
        self,
        headless: bool = False,
        debug: bool = False,
        config_path: str | None = None,
    ):
        self.headless = headless
        self._running = False

        # Configuration
        self.config = ConfigManager(config_path=config_path, debug=debug)
        self.debug = debug or bool(self.config.get('debug', False))

        # Core components
        self.event_bus = EventBus()
        self.state_manager = StateManager(debug=self.debug)
        self.state_manager.attach(self.event_bus)
        self.event_bus.subscribe(EventType.APP_QUIT, self._on_quit)

        # UI — created by run()
        self.qt_app = None
        self.window = None

    # ------------------------------------------------------------------
    # State access
    # ------------------------------------------------------------------

    @property
    def state(self) -> CalculatorState:
        return self.state_manager.state

    @property
    def display(self) -> str:
        return self.state_manager.display

    @property
    def theme(self) -> str:
        return self.config.get('theme', 'light')

    # ------------------------------------------------------------------
    # Input
    # ------------------------------------------------------------------

    def press(self, key: str) -> bool:
        """Publish the event bound to *key*.  Returns False for unbound keys."""
        event = key_to_event(key)
        if event is None:
            logger.trace("Unbound key %r", key)  # type: ignore[attr-defined]
            return False
        self.event_bus.publish(event)
        return True

    def feed(self, keys: Iterable[str] | str) -> str:
        """Press every key in *keys* (a sequence or a terminal-style line).

        Returns the display afterwards.
        """
        if isinstance(keys, str):
            keys = tokenize(keys)
        for key in keys:
            self.press(key)
        return self.display

    # ------------------------------------------------------------------
    # Theme
    # ------------------------------------------------------------------

    def set_theme(self, theme_name: str, persist: bool = True) -> None:
        if theme_name not in THEME_NAMES:
            raise ValueError(f"Unknown theme: {theme_name!r}")
        self.config.set('theme', theme_name)
        if persist and not self.config.save():
            logger.warning("Theme changed to %s but could not be saved", theme_name)
        logger.debug("Theme: %s", theme_name)
        self.event_bus.publish(simple_event(EventType.THEME_CHANGED, theme_name))

    def toggle_theme(self) -> str:
        """Switch between light and dark; returns the new theme name."""
        new_theme = toggle_theme(self.theme)
        self.set_theme(new_theme)
        return new_theme

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def run(self, stdin: TextIO | None = None, stdout: TextIO | None = None) -> int:
        """Run until quit.  Returns the process exit code."""
        self._running = True
        logger.info("KeyCalc running (%s)", "headless" if self.headless else "gui")
        try:
            if self.headless:
                return self._run_terminal(stdin or sys.stdin, stdout or sys.stdout)
            return self._run_gui()
        finally:
            self._running = False

    def stop(self) -> None:
        self.event_bus.publish(simple_event(EventType.APP_QUIT))

    def _on_quit(self, event: Event) -> None:
        logger.debug("Quit requested")
        self._running = False
        if self.qt_app is not None:
            self.qt_app.quit()

    def _run_gui(self) -> int:
        from PyQt5.QtWidgets import QApplication

        from keycalc.ui.calculator_window import CalculatorWindow

        # Python handlers never run while exec_() blocks in C++
        signal.signal(signal.SIGINT, signal.SIG_DFL)
        signal.signal(signal.SIGTERM, signal.SIG_DFL)

        self.qt_app = QApplication.instance() or QApplication(sys.argv)
        self.window = CalculatorWindow(
            self.event_bus,
            config=self.config,
            state=self.state,
            on_toggle_theme=self.toggle_theme,
        )
        self.window.show()
        try:
            return self.qt_app.exec_()
        finally:
            self.window.cleanup()

    def _run_terminal(self, stdin: TextIO, stdout: TextIO) -> int:
        """Read key lines from *stdin*; print the display after each line."""
        self._write_state(stdout)
        for line in stdin:
            if line.strip().lower() in QUIT_COMMANDS:
                self.stop()
            else:
                self.feed(line)
                self._write_state(stdout)
            if not self._running:
                break
        return 0

    def _write_state(self, stdout: TextIO) -> None:
        pending = self.state.pending_line()
        if pending and self.config.get('show_pending_operation', True):
            stdout.write(f"{pending}\n")
        stdout.write(f"{self.display}\n")
        stdout.flush()
