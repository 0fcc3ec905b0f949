# SlidePrompter Settings Storage

"""
Local key/value storage for reading settings.

Settings never travel through the scripts gateway. They are kept in a small
JSON object file under a fixed key, the same way a browser keeps
localStorage entries.
"""

import json
from pathlib import Path
from typing import Any, Dict, Optional, Union

from slide_prompter.core.models import PrompterSettings
from slide_prompter.utils import config
from slide_prompter.utils.logging import get_logger

logger = get_logger(__name__)


class LocalStorage:
    """JSON-file backed key/value store."""

    def __init__(self, path: Union[str, Path]):
        self._path = Path(path)

    def _read_all(self) -> Dict[str, Any]:
        if not self._path.exists():
            return {}
        with open(self._path, "r", encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError(f"{self._path} does not contain a JSON object")
        return data

    def get_item(self, key: str) -> Optional[Any]:
        return self._read_all().get(key)

    def set_item(self, key: str, value: Any) -> None:
        try:
            data = self._read_all()
        except ValueError:
            logger.warning("Discarding unreadable local storage at %s", self._path)
            data = {}
        data[key] = value
        self._path.parent.mkdir(parents=True, exist_ok=True)
        with open(self._path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2)


def default_settings() -> PrompterSettings:
    return PrompterSettings(
        font_size=int(config.get("font_size_default")),
        line_height=float(config.get("line_height_default")),
    )


def clamp_settings(settings: PrompterSettings) -> PrompterSettings:
    """Clamp values into the slider ranges."""
    font_size = max(config.get("font_size_min"), min(config.get("font_size_max"), int(settings.font_size)))
    line_height = max(config.get("line_height_min"), min(config.get("line_height_max"), float(settings.line_height)))
    return PrompterSettings(font_size=font_size, line_height=round(line_height, 2))


class SettingsStore:
    """Loads and saves PrompterSettings under a single storage key."""

    def __init__(self, storage: LocalStorage, key: Optional[str] = None):
        self._storage = storage
        self._key = key or config.get("settings_key")

    def load(self) -> PrompterSettings:
        """
        Read settings, merged over the defaults.

        Unreadable storage falls back to the defaults.
        """
        defaults = default_settings()
        try:
            saved = self._storage.get_item(self._key)
        except (OSError, ValueError) as e:
            logger.error("Failed to load settings: %s", e)
            return defaults

        if not isinstance(saved, dict):
            return defaults

        try:
            settings = clamp_settings(PrompterSettings.from_dict(saved, defaults))
        except (TypeError, ValueError, OverflowError) as e:
            logger.error("Ignoring invalid saved settings %r: %s", saved, e)
            return defaults

        logger.info("Settings loaded: %s", settings)
        return settings

    def save(self, settings: PrompterSettings) -> bool:
        try:
            self._storage.set_item(self._key, settings.to_dict())
        except (OSError, TypeError) as e:
            logger.error("Failed to save settings: %s", e)
            return False
        logger.info("Settings saved: %s", settings)
        return True
