# SlidePrompter Persistence Gateway

"""
Durable storage for slide scripts.

The store only depends on two calls:
- load_scripts() -> raw mapping (may raise ScriptLoadError)
- save_scripts(mapping) -> bool

JsonFileGateway keeps scripts in a versioned JSON document:
    {"version": 2, "slides": {"1": {"script": "...", "title": "..."}}}
Files written before versioning hold the bare mapping and are passed through
unchanged so the store can migrate them.
"""

import json
import os
import tempfile
from pathlib import Path
from typing import Any, Dict, Optional, Union

from slide_prompter.utils.logging import get_logger

logger = get_logger(__name__)

FORMAT_VERSION = 2


class ScriptLoadError(Exception):
    """Raised when persisted scripts cannot be read."""


class PersistenceGateway:
    """Interface between the slide store and durable storage."""

    def load_scripts(self) -> Dict[str, Any]:
        raise NotImplementedError

    def save_scripts(self, slides: Dict[str, Any]) -> bool:
        raise NotImplementedError


class JsonFileGateway(PersistenceGateway):
    """
    Reads and writes scripts as a JSON file.

    Writes go to a temporary file in the same directory and replace the
    target, so a crash mid-write leaves the previous file intact.
    """

    def __init__(self, path: Union[str, Path]):
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def load_scripts(self) -> Dict[str, Any]:
        """
        Read the raw slide mapping.

        Returns:
            The slide mapping, or {} when no file has been written yet.

        Raises:
            ScriptLoadError: If the file is unreadable or not a known layout.
        """
        if not self._path.exists():
            logger.info("No scripts file at %s, starting empty", self._path)
            return {}

        try:
            with open(self._path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            raise ScriptLoadError(f"Failed to read {self._path}: {e}") from e

        if not isinstance(data, dict):
            raise ScriptLoadError(f"{self._path} does not contain a JSON object")

        if "version" not in data:
            # Pre-versioning file: the whole object is the slide mapping
            return data

        version = data.get("version")
        if version != FORMAT_VERSION:
            raise ScriptLoadError(f"Unsupported scripts format version: {version!r}")

        slides = data.get("slides", {})
        if not isinstance(slides, dict):
            raise ScriptLoadError(f"'slides' in {self._path} is not a JSON object")
        return slides

    def save_scripts(self, slides: Dict[str, Any]) -> bool:
        """
        Write the slide mapping.

        Returns:
            True if the file was written.
        """
        document = {"version": FORMAT_VERSION, "slides": slides}
        tmp_path: Optional[str] = None
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(
                prefix=self._path.name, suffix=".tmp", dir=str(self._path.parent)
            )
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(document, f, indent=2, ensure_ascii=False)
            os.replace(tmp_path, self._path)
            tmp_path = None
        except (OSError, TypeError, ValueError) as e:
            logger.error("Failed to save scripts to %s: %s", self._path, e)
            return False
        finally:
            if tmp_path is not None:
                try:
                    os.unlink(tmp_path)
                except OSError:
                    pass

        logger.debug("Saved %d slide(s) to %s", len(slides), self._path)
        return True


class MemoryGateway(PersistenceGateway):
    """Keeps scripts in memory; used for headless runs and tests."""

    def __init__(self, initial: Optional[Dict[str, Any]] = None):
        self.saved: Optional[Dict[str, Any]] = None
        self._initial = dict(initial or {})
        self.save_count = 0

    def load_scripts(self) -> Dict[str, Any]:
        if self.saved is not None:
            return json.loads(json.dumps(self.saved))
        return dict(self._initial)

    def save_scripts(self, slides: Dict[str, Any]) -> bool:
        # Round-trip through JSON so callers cannot alias the stored copy
        self.saved = json.loads(json.dumps(slides))
        self.save_count += 1
        return True
