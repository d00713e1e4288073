"""Configuration loader and validator for KeyCalc.

Provides ``load_config(path)`` which reads a JSON config (with
comment and trailing-comma tolerant sanitizer) and merges user
overrides from ``~/.config/keycalc/config.json``.

Also provides ``validate_config(conf)`` which normalizes and
validates config keys, raising ``ValueError`` on invalid values.
"""

from __future__ import annotations

import json
import logging
import os
import re

from keycalc.utils.persistence import save_json

logger = logging.getLogger(__name__)

USER_CONFIG_PATH = '~/.config/keycalc/config.json'

THEME_NAMES = ('light', 'dark')

# Single source of truth for default configuration
DEFAULT_CONFIG: dict = {
    'debug': False,
    'theme': 'light',
    'keyboard_enabled': True,
    'show_pending_operation': True,
    'font_size': 28,
}

FONT_SIZE_RANGE = (8, 96)


# ------------------------------------------------------------------
# Helpers
# ------------------------------------------------------------------

def _sanitize_json_text(s: str) -> str:
    """Remove ``#``/``//`` comments and trailing commas from JSON-like text."""
    s = re.sub(r"^[ \t]*#.*$", "", s, flags=re.MULTILINE)
    s = re.sub(r"//.*$", "", s, flags=re.MULTILINE)
    s = re.sub(r",[ \t\r\n]+(\}|\])", r"\1", s)
    return s


def _require_bool(conf: dict, key: str) -> bool:
    value = conf.get(key, DEFAULT_CONFIG[key])
    if not isinstance(value, bool):
        raise ValueError(f"Invalid '{key}': must be boolean")
    return value


# ------------------------------------------------------------------
# Validation
# ------------------------------------------------------------------

def validate_config(conf: dict | None) -> dict:
    """Validate and normalize configuration dictionary.

    Returns a normalized dict with all expected keys.
    Raises ``ValueError`` on invalid values.
    """
    if conf is None:
        conf = {}

    out = dict(DEFAULT_CONFIG)

    for key in ('debug', 'keyboard_enabled', 'show_pending_operation'):
        out[key] = _require_bool(conf, key)

    # theme — one of THEME_NAMES
    theme = conf.get('theme', DEFAULT_CONFIG['theme'])
    if theme not in THEME_NAMES:
        raise ValueError(f"Invalid 'theme': {theme!r} (must be one of {', '.join(THEME_NAMES)})")
    out['theme'] = theme

    # font_size — int within FONT_SIZE_RANGE; bools are not sizes
    fs_raw = conf.get('font_size', DEFAULT_CONFIG['font_size'])
    if isinstance(fs_raw, bool):
        raise ValueError(f"Invalid 'font_size': {fs_raw}")
    try:
        fs = int(fs_raw)
    except (TypeError, ValueError):
        raise ValueError(f"Invalid 'font_size': {fs_raw}")
    lo, hi = FONT_SIZE_RANGE
    if not (lo <= fs <= hi):
        raise ValueError(f"Invalid 'font_size': {fs} (must be between {lo} and {hi})")
    out['font_size'] = fs

    return out


def _read_and_merge(path: str, target_config: dict, debug: bool = False) -> bool:
    """Read a JSON file, validate, and merge into *target_config*.

    Returns True on success, False on any error.
    """
    try:
        with open(path, 'r', encoding='utf-8') as f:
            raw = f.read()
    except OSError as exc:
        logger.debug("Cannot read config %s: %s", path, exc)
        return False

    try:
        cfg = json.loads(raw)
    except json.JSONDecodeError:
        try:
            cfg = json.loads(_sanitize_json_text(raw))
        except json.JSONDecodeError as exc:
            if debug:
                logger.warning("JSON parse error in %s: %s", path, exc)
            return False

    if not isinstance(cfg, dict):
        if debug:
            logger.warning("Invalid config %s: top-level value must be an object", path)
        return False

    try:
        validated = validate_config(cfg)
    except ValueError as verr:
        if debug:
            logger.warning("Invalid config %s: %s", path, verr)
        return False

    # Only override keys explicitly present in source
    for k in cfg:
        if k in validated:
            target_config[k] = validated[k]
    return True


# ------------------------------------------------------------------
# Top-level loader
# ------------------------------------------------------------------

def load_config(config_path: str | None = None, debug: bool = False) -> dict:
    """Load and merge configuration.

    If *config_path* is given, uses only that file (returns defaults if
    the file does not exist).  Otherwise falls back to
    ``~/.config/keycalc/config.json``.

    Returns the effective configuration dict (always has all default keys).
    """
    config = dict(DEFAULT_CONFIG)
    path = config_path if config_path is not None else os.path.expanduser(USER_CONFIG_PATH)
    if os.path.exists(path):
        _read_and_merge(path, config, debug=debug)
    return config


# ------------------------------------------------------------------
# ConfigManager
# ------------------------------------------------------------------

class ConfigManager:
    """Centralized configuration management with load/save/validate."""

    def __init__(self, config_path: str | None = None, debug: bool = False):
        self._config_path = config_path or os.path.expanduser(USER_CONFIG_PATH)
        self._debug = debug
        self._config: dict = load_config(self._config_path, debug=debug)

    def reload(self) -> bool:
        """Reload configuration from file. Returns True on success."""
        try:
            self._config = load_config(self._config_path, debug=self._debug)
            return True
        except Exception:
            logger.exception("Config reload failed")
            return False

    def save(self, target_path: str | None = None) -> bool:
        """Atomically save configuration to file. Returns True on success."""
        save_path = target_path or self._config_path
        try:
            save_json(save_path, self.get_all())
            return True
        except (OSError, TypeError, ValueError) as exc:
            logger.warning("Could not save config to %s: %s", save_path, exc)
            return False

    def get(self, key: str, default=None):
        return self._config.get(key, default)

    def set(self, key: str, value) -> None:
        self._config[key] = value

    def update(self, updates: dict) -> None:
        self._config.update(updates)

    def get_all(self) -> dict:
        """Return all configuration (excluding internal keys)."""
        return {k: v for k, v in self._config.items() if not k.startswith('_')}

    def reset_to_defaults(self) -> None:
        self._config = dict(DEFAULT_CONFIG)

    def validate(self) -> bool:
        """Validate current configuration. Returns True if valid."""
        try:
            validate_config(self._config)
            return True
        except ValueError:
            return False

    @property
    def config_path(self) -> str:
        """Current config file path."""
        return self._config_path
