"""
guestbook UI Configuration.

Handles persistence of UI preferences: search debounce, panel animation
timing, default tab and simulated repository latency.
Config is stored in ~/.config/guestbook/ui_config.json
(or $GUESTBOOK_CONFIG_DIR/ui_config.json).
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from . import constants

logger = logging.getLogger(__name__)

DEFAULT_CONFIG: dict[str, Any] = {
    "search_debounce_ms": constants.SEARCH_DEBOUNCE_MS,
    "panel_animation_ms": constants.PANEL_ANIMATION_MS,
    "panel_animation_steps": constants.PANEL_ANIMATION_STEPS,
    "default_tab": constants.DEFAULT_TAB_INDEX,
    "repository_latency_ms": constants.DEFAULT_REPOSITORY_LATENCY_MS,
}


def get_config_dir() -> Path:
    """Get the config directory, creating it if needed."""
    constants.GUESTBOOK_CONFIG_DIR.mkdir(parents=True, exist_ok=True)
    return constants.GUESTBOOK_CONFIG_DIR


def get_ui_config_path() -> Path:
    """
    Get path to UI config file.

    Returns:
        Path to <config dir>/ui_config.json
    """
    return get_config_dir() / "ui_config.json"


def load_ui_config() -> dict[str, Any]:
    """
    Load UI configuration from file.

    Returns:
        Config dict, or defaults if file doesn't exist or is invalid
    """
    path = get_ui_config_path()
    if path.exists():
        try:
            config = json.loads(path.read_text())
            if not isinstance(config, dict):
                logger.warning("Ignoring malformed UI config at %s", path)
                return DEFAULT_CONFIG.copy()
            # Merge with defaults to handle missing keys
            return {**DEFAULT_CONFIG, **config}
        except (json.JSONDecodeError, OSError) as e:
            logger.warning("Could not read UI config %s: %s", path, e)
            return DEFAULT_CONFIG.copy()
    return DEFAULT_CONFIG.copy()


def save_ui_config(config: dict[str, Any]) -> None:
    """
    Save UI configuration to file.

    Args:
        config: Configuration dict to save
    """
    path = get_ui_config_path()
    try:
        path.write_text(json.dumps(config, indent=2) + "\n")
    except OSError as e:
        # Config is non-critical
        logger.debug("Could not save UI config %s: %s", path, e)


def _get_int(key: str, minimum: int = 0) -> int:
    value = load_ui_config().get(key, DEFAULT_CONFIG[key])
    if isinstance(value, bool) or not isinstance(value, int) or value < minimum:
        logger.warning("Invalid %s=%r in UI config, using default", key, value)
        return int(DEFAULT_CONFIG[key])
    return value


def get_search_debounce() -> float:
    """Search debounce window in seconds."""
    return _get_int("search_debounce_ms") / 1000


def get_panel_animation_duration() -> float:
    """Panel expand/collapse duration in seconds."""
    return _get_int("panel_animation_ms") / 1000


def get_panel_animation_steps() -> int:
    """Number of progress emissions per panel animation."""
    return _get_int("panel_animation_steps", minimum=1)


def get_default_tab() -> int:
    """Tab selected when the detail panel initializes."""
    index = _get_int("default_tab")
    if index >= len(constants.NAVIGATION_TABS):
        return constants.DEFAULT_TAB_INDEX
    return index


def get_repository_latency() -> float:
    """Simulated repository latency in seconds."""
    return _get_int("repository_latency_ms") / 1000


def set_value(key: str, value: Any) -> None:
    """
    Set and persist a single preference.

    Args:
        key: Config key (must be a known key)
        value: New value
    """
    if key not in DEFAULT_CONFIG:
        from guestbook.exceptions import ConfigurationError

        raise ConfigurationError(f"Unknown UI config key: {key}", setting=key)
    config = load_ui_config()
    config[key] = value
    save_ui_config(config)
