"""Configuration loader and validator for Cifra.

Provides ``load_config(path)`` which reads a JSON config (with a
comment and trailing-comma tolerant sanitizer) and falls back to
``~/.config/cifra/config.json``.

Also provides ``validate_config(conf)`` which normalizes and
validates config keys, raising ``ValueError`` on invalid values.
"""

from __future__ import annotations

import json
import logging
import os
import re

from cifra.core.translator import Direction
from cifra.persistence import save_json

logger = logging.getLogger(__name__)

USER_CONFIG_PATH = '~/.config/cifra/config.json'

UI_LANGUAGES = ('auto', 'pt', 'en')
FONT_SIZE_RANGE = (8, 72)

# Single source of truth for default configuration
DEFAULT_CONFIG: dict = {
    'debug': False,
    'default_direction': Direction.SYMBOL_TO_LETTER.value,
    'ui_language': 'auto',
    'font_size': 18,
    'show_reference_table': True,
}


# ------------------------------------------------------------------
# Helpers
# ------------------------------------------------------------------

def _sanitize_json_text(s: str) -> str:
    """Remove ``#``/``//`` line comments and trailing commas from JSON-like text."""
    s = re.sub(r"^[ \t]*#.*$", "", s, flags=re.MULTILINE)
    s = re.sub(r"^[ \t]*//.*$", "", s, flags=re.MULTILINE)
    # Inline // comments only after a value, so "//" inside strings survives
    s = re.sub(r"([,\[\{\]\}\"\d]|true|false|null)[ \t]*//.*$", r"\1", s, flags=re.MULTILINE)
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

    out['debug'] = _require_bool(conf, 'debug')
    out['show_reference_table'] = _require_bool(conf, 'show_reference_table')

    # default_direction — any spelling Direction.parse accepts, stored as value
    raw_dir = conf.get('default_direction', DEFAULT_CONFIG['default_direction'])
    try:
        out['default_direction'] = Direction.parse(raw_dir).value
    except ValueError:
        raise ValueError(f"Invalid 'default_direction': {raw_dir!r}")

    # ui_language — auto | pt | en
    lang = conf.get('ui_language', DEFAULT_CONFIG['ui_language'])
    if not isinstance(lang, str) or lang.lower() not in UI_LANGUAGES:
        raise ValueError(f"Invalid 'ui_language': {lang!r} (must be one of {', '.join(UI_LANGUAGES)})")
    out['ui_language'] = lang.lower()

    # font_size — int in FONT_SIZE_RANGE
    fs = conf.get('font_size', DEFAULT_CONFIG['font_size'])
    if isinstance(fs, bool):
        raise ValueError(f"Invalid 'font_size': {fs}")
    try:
        fs_i = int(fs)
    except (TypeError, ValueError):
        raise ValueError(f"Invalid 'font_size': {fs}")
    lo, hi = FONT_SIZE_RANGE
    if not (lo <= fs_i <= hi):
        raise ValueError(f"Invalid 'font_size': {fs} (must be between {lo} and {hi})")
    out['font_size'] = fs_i

    return out


def _read_and_merge(path: str, target_config: dict, debug: bool = False) -> bool:
    """Read a JSON file, validate, and merge into *target_config*.

    Returns True on success, False on any error.
    """
    try:
        with open(path, 'r', encoding='utf-8') as f:
            raw = f.read()
    except OSError as exc:
        if debug:
            logger.warning("Cannot read config %s: %s", path, exc)
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
            logger.warning("Invalid config %s: top level must be an object", path)
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
    logger.debug("Config merged from %s", path)
    return True


# ------------------------------------------------------------------
# Top-level loader
# ------------------------------------------------------------------

def load_config(config_path: str | None = None, debug: bool = False) -> dict:
    """Load and merge configuration.

    If *config_path* is given, uses only that file (returns defaults if
    the file does not exist).  Otherwise falls back to
    ``~/.config/cifra/config.json``.

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
        """Reset to defaults, then overlay from file. Returns True if the file was merged."""
        self._config = dict(DEFAULT_CONFIG)
        if not os.path.exists(self._config_path):
            return False
        return _read_and_merge(self._config_path, self._config, debug=self._debug)

    def save(self, target_path: str | None = None) -> bool:
        """Atomically save configuration to file. Returns True on success."""
        save_path = target_path or self._config_path
        try:
            save_json(save_path, self.get_all())
        except OSError as exc:
            logger.error("Failed to save config %s: %s", save_path, exc)
            return False
        logger.debug("Config saved to %s", save_path)
        return True

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
    def default_direction(self) -> Direction:
        """Configured start-up direction (falls back to the default if invalid)."""
        try:
            return Direction.parse(self._config.get('default_direction', ''))
        except ValueError:
            return Direction.parse(DEFAULT_CONFIG['default_direction'])

    @property
    def config_path(self) -> str:
        return self._config_path
