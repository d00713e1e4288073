"""Light and dark palettes for the keypad window, rendered as Qt stylesheets."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Palette:
    window: str
    border: str
    title: str
    display_bg: str
    display_border: str
    display_fg: str
    pending_fg: str
    number_bg: str
    number_hover: str
    number_fg: str
    operation_bg: str
    operation_hover: str
    equals_bg: str
    equals_hover: str
    clear_bg: str
    clear_hover: str
    accent_fg: str
    toggle_bg: str
    toggle_fg: str
    hint_fg: str


THEMES: dict[str, Palette] = {
    'light': Palette(
        window="#ffffff", border="#e5e7eb", title="#111827",
        display_bg="#f9fafb", display_border="#e5e7eb", display_fg="#111827",
        pending_fg="#6b7280",
        number_bg="#f3f4f6", number_hover="#e5e7eb", number_fg="#111827",
        operation_bg="#3b82f6", operation_hover="#2563eb",
        equals_bg="#22c55e", equals_hover="#16a34a",
        clear_bg="#ef4444", clear_hover="#dc2626",
        accent_fg="#ffffff",
        toggle_bg="#f3f4f6", toggle_fg="#374151",
        hint_fg="#b91c1c",
    ),
    'dark': Palette(
        window="#1f2937", border="#374151", title="#ffffff",
        display_bg="#111827", display_border="#4b5563", display_fg="#ffffff",
        pending_fg="#9ca3af",
        number_bg="#374151", number_hover="#4b5563", number_fg="#ffffff",
        operation_bg="#2563eb", operation_hover="#3b82f6",
        equals_bg="#16a34a", equals_hover="#22c55e",
        clear_bg="#dc2626", clear_hover="#ef4444",
        accent_fg="#ffffff",
        toggle_bg="#374151", toggle_fg="#facc15",
        hint_fg="#dc2626",
    ),
}

# Icon on the toggle shows the theme it switches *to*
TOGGLE_ICONS = {'light': "☾", 'dark': "☀"}

BUTTON_VARIANTS = ('number', 'operation', 'equals', 'clear')


def palette(theme_name: str) -> Palette:
    """Palette for *theme_name*; unknown names fall back to light."""
    return THEMES.get(theme_name, THEMES['light'])


def toggle_theme(theme_name: str) -> str:
    return 'light' if theme_name == 'dark' else 'dark'


def _button_rule(variant: str, bg: str, hover: str, fg: str) -> str:
    return (
        f'QPushButton[variant="{variant}"] {{ background: {bg}; color: {fg}; }}\n'
        f'QPushButton[variant="{variant}"]:hover {{ background: {hover}; }}\n'
    )


def stylesheet(theme_name: str, font_size: int = 28) -> str:
    """Qt stylesheet for the calculator window."""
    p = palette(theme_name)
    return (
        f"QWidget#calculator {{ background: {p.window}; }}\n"
        f"QLabel#title {{ color: {p.title}; font-size: 22px; font-weight: bold; }}\n"
        f"QFrame#displayFrame {{ background: {p.display_bg};"
        f" border: 1px solid {p.display_border}; border-radius: 16px; }}\n"
        f"QLabel#display {{ color: {p.display_fg}; font-family: monospace;"
        f" font-size: {font_size}px; }}\n"
        f"QLabel#pendingLine {{ color: {p.pending_fg}; font-size: 13px; }}\n"
        f"QLabel#hint {{ color: {p.hint_fg}; font-size: 12px; }}\n"
        f"QPushButton {{ border: none; border-radius: 14px; min-height: 56px;"
        f" font-size: 18px; font-weight: 600; }}\n"
        f"QPushButton#themeToggle {{ background: {p.toggle_bg}; color: {p.toggle_fg};"
        f" border-radius: 20px; min-height: 40px; min-width: 40px; }}\n"
        + _button_rule('number', p.number_bg, p.number_hover, p.number_fg)
        + _button_rule('operation', p.operation_bg, p.operation_hover, p.accent_fg)
        + _button_rule('equals', p.equals_bg, p.equals_hover, p.accent_fg)
        + _button_rule('clear', p.clear_bg, p.clear_hover, p.accent_fg)
    )
