# SlidePrompter - Utils Configuration

"""
Centralized configuration for SlidePrompter.
All tunables live here; a YAML file can override any of them at startup.
"""

import os
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml
from PySide6.QtCore import QStandardPaths

from slide_prompter.utils.logging import get_logger

logger = get_logger(__name__)

APP_NAME = "SlidePrompter"
DATA_DIR_ENV = "SLIDE_PROMPTER_DATA_DIR"

DEFAULTS: Dict[str, Any] = {
    # ===========================================================================
    # Window
    # ===========================================================================
    "window_width": 300,
    "window_height": 400,
    "always_on_top": True,

    # ===========================================================================
    # Status line
    # ===========================================================================
    "status_reset_ms": 2000,        # Delay before a save result reverts to idle
    "status_idle_label": "Ready",

    # ===========================================================================
    # Reading settings (font slider / line-height slider)
    # ===========================================================================
    "font_size_default": 13,        # px
    "font_size_min": 10,
    "font_size_max": 32,
    "line_height_default": 1.5,     # unitless multiplier
    "line_height_min": 1.0,
    "line_height_max": 3.0,
    "line_height_step": 0.1,

    # ===========================================================================
    # Storage
    # ===========================================================================
    "data_dir": None,               # None = platform app-data location
    "scripts_file": "scripts.json",
    "local_storage_file": "local_storage.json",
    "settings_key": "teleprompter-settings",
}

CONFIG: Dict[str, Any] = dict(DEFAULTS)


def get_config() -> Dict[str, Any]:
    """Return a copy of the configuration dictionary."""
    return CONFIG.copy()


def get(key: str, default: Any = None) -> Any:
    """Get a configuration value by key."""
    return CONFIG.get(key, default)


def reset() -> None:
    """Restore every value to its default."""
    CONFIG.clear()
    CONFIG.update(DEFAULTS)


def load_config_file(path: Union[str, Path]) -> Dict[str, Any]:
    """
    Merge a YAML config file over the current configuration.

    Args:
        path: Path to a YAML mapping of config keys.

    Returns:
        The keys that were applied.

    Raises:
        ValueError: If the file is not valid YAML or not a mapping.
    """
    path = Path(path)
    if not path.exists():
        logger.info("Config file %s not found, using defaults", path)
        return {}

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Config file {path} must contain a mapping, got {type(data).__name__}")

    applied = {}
    for key, value in data.items():
        if key not in DEFAULTS:
            logger.warning("Ignoring unknown config key: %s", key)
            continue
        CONFIG[key] = value
        applied[key] = value

    logger.info("Loaded %d config value(s) from %s", len(applied), path)
    return applied


def data_dir() -> Path:
    """
    Resolve the directory holding scripts and local settings.

    Order: SLIDE_PROMPTER_DATA_DIR env var, the "data_dir" config key,
    then the platform application-data location.
    """
    override: Optional[str] = os.environ.get(DATA_DIR_ENV) or CONFIG.get("data_dir")
    if override:
        return Path(override).expanduser()

    location = QStandardPaths.writableLocation(QStandardPaths.StandardLocation.AppDataLocation)
    if location:
        base = Path(location)
        # Without a QApplication the location ends in the interpreter name
        if base.name != APP_NAME:
            base = base.parent / APP_NAME
        return base
    return Path.home() / f".{APP_NAME.lower()}"


def scripts_path() -> Path:
    return data_dir() / CONFIG["scripts_file"]


def local_storage_path() -> Path:
    return data_dir() / CONFIG["local_storage_file"]
