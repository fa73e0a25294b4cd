"""
Settings Module for the Ring Arena Solver

User preferences are kept as a JSON object in config.json in the working
directory. Unknown strategies and malformed values fall back to the
defaults, so a stale file never stops the program from starting.
"""

import json
import logging
from pathlib import Path
from typing import Dict, Any

from .solver import get_default_strategy_name, get_strategy_names

logger = logging.getLogger(__name__)

SETTINGS_FILE = Path("config.json")

# timeout_sec None means each strategy's own time limit
DEFAULT_SETTINGS: Dict[str, Any] = {
    "debug_enabled": False,
    "strategy_name": "best",
    "max_turns": 100,
    "timeout_sec": None,
}


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _checked(settings: Dict[str, Any]) -> Dict[str, Any]:
    """Replace values the solver cannot use with their defaults."""
    strategy_name = settings.get("strategy_name")
    if strategy_name not in get_strategy_names():
        logger.warning(f"Saved strategy '{strategy_name}' not found, using default")
        settings["strategy_name"] = get_default_strategy_name()

    max_turns = settings.get("max_turns")
    if not (isinstance(max_turns, int) and not isinstance(max_turns, bool) and max_turns > 0):
        logger.warning(f"Invalid max_turns {max_turns!r}, using default")
        settings["max_turns"] = DEFAULT_SETTINGS["max_turns"]

    timeout_sec = settings.get("timeout_sec")
    if timeout_sec is not None and not (_is_number(timeout_sec) and timeout_sec > 0):
        logger.warning(f"Invalid timeout_sec {timeout_sec!r}, using default")
        settings["timeout_sec"] = DEFAULT_SETTINGS["timeout_sec"]

    if not isinstance(settings.get("debug_enabled"), bool):
        settings["debug_enabled"] = DEFAULT_SETTINGS["debug_enabled"]
    return settings


def load_settings() -> Dict[str, Any]:
    """
    Load settings from config.json, merged over the defaults.

    Returns:
        Settings dictionary. Returns defaults if file missing or invalid.
    """
    if not SETTINGS_FILE.exists():
        logger.debug("Settings file not found, using defaults")
        return DEFAULT_SETTINGS.copy()

    try:
        with open(SETTINGS_FILE, 'r', encoding='utf-8') as f:
            saved = json.load(f)
        if not isinstance(saved, dict):
            raise ValueError(f"expected a JSON object, got {type(saved).__name__}")
    except (ValueError, IOError) as e:
        logger.warning(f"Failed to load settings: {e}, using defaults")
        return DEFAULT_SETTINGS.copy()

    result = _checked({**DEFAULT_SETTINGS, **saved})
    logger.debug(f"Settings loaded: {result}")
    return result


def save_settings(settings: Dict[str, Any]) -> None:
    """Write settings to config.json; failures are logged, not raised."""
    try:
        with open(SETTINGS_FILE, 'w', encoding='utf-8') as f:
            json.dump(settings, f, indent=2)
        logger.debug(f"Settings saved: {settings}")
    except IOError as e:
        logger.error(f"Failed to save settings: {e}")
