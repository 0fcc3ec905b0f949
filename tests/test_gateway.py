"""
Unit tests for the persistence gateways

Tests the versioned JSON file layout, legacy pass-through and failure paths.
"""

import pytest
import json
import tempfile
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from slide_prompter.core.gateway import (
    FORMAT_VERSION, JsonFileGateway, MemoryGateway, ScriptLoadError,
)
from slide_prompter.core.slide_store import SlideStore


SLIDES = {
    "1": {"script": "Good morning", "title": "Intro"},
    "3": {"script": "", "title": "Break"},
}


class TestJsonFileGatewayLoad:
    """Tests for reading the scripts file."""

    def test_missing_file_is_empty(self):
        """Test a first run with no file gives an empty mapping."""
        with tempfile.TemporaryDirectory() as tmpdir:
            gateway = JsonFileGateway(Path(tmpdir) / "scripts.json")
            assert gateway.load_scripts() == {}

    def test_versioned_document_unwrapped(self):
        """Test the slides mapping is returned from a versioned file."""
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "scripts.json"
            path.write_text(json.dumps({"version": FORMAT_VERSION, "slides": SLIDES}), encoding="utf-8")

            assert JsonFileGateway(path).load_scripts() == SLIDES

    def test_legacy_file_passed_through(self):
        """Test an unversioned file is returned for migration."""
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "scripts.json"
            path.write_text(json.dumps({"1": "Hello", "2": "World"}), encoding="utf-8")

            raw = JsonFileGateway(path).load_scripts()
            store = SlideStore.load(raw)
            assert store.get(2).script == "World"

    def test_invalid_json_raises(self):
        """Test corrupt files raise ScriptLoadError."""
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "scripts.json"
            path.write_text("{not json", encoding="utf-8")

            with pytest.raises(ScriptLoadError):
                JsonFileGateway(path).load_scripts()

    def test_non_object_raises(self):
        """Test a JSON array is rejected."""
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "scripts.json"
            path.write_text("[1, 2, 3]", encoding="utf-8")

            with pytest.raises(ScriptLoadError):
                JsonFileGateway(path).load_scripts()

    def test_unknown_version_raises(self):
        """Test a future format version is refused."""
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "scripts.json"
            path.write_text(json.dumps({"version": 99, "slides": {}}), encoding="utf-8")

            with pytest.raises(ScriptLoadError):
                JsonFileGateway(path).load_scripts()


class TestJsonFileGatewaySave:
    """Tests for writing the scripts file."""

    def test_save_writes_versioned_document(self):
        """Test saved files carry the version tag."""
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "scripts.json"
            assert JsonFileGateway(path).save_scripts(SLIDES) is True

            data = json.loads(path.read_text(encoding="utf-8"))
            assert data == {"version": FORMAT_VERSION, "slides": SLIDES}

    def test_creates_parent_dirs(self):
        """Test missing parent directories are created."""
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "nested" / "dir" / "scripts.json"
            assert JsonFileGateway(path).save_scripts(SLIDES)
            assert path.exists()

    def test_save_then_load(self):
        """Test a saved store loads back identically."""
        with tempfile.TemporaryDirectory() as tmpdir:
            gateway = JsonFileGateway(Path(tmpdir) / "scripts.json")
            store = SlideStore()
            store.set_script(2, "Ünïcode – text")
            store.set_title(2, "Title")

            gateway.save_scripts(store.serialize())
            assert SlideStore.load(gateway.load_scripts()) == store

    def test_no_temp_files_left(self):
        """Test the atomic write cleans up after itself."""
        with tempfile.TemporaryDirectory() as tmpdir:
            gateway = JsonFileGateway(Path(tmpdir) / "scripts.json")
            gateway.save_scripts(SLIDES)
            gateway.save_scripts({})
            assert [p.name for p in Path(tmpdir).iterdir()] == ["scripts.json"]

    def test_save_failure_returns_false(self):
        """Test an unwritable target reports failure instead of raising."""
        with tempfile.TemporaryDirectory() as tmpdir:
            blocker = Path(tmpdir) / "blocker"
            blocker.write_text("a file, not a directory", encoding="utf-8")
            gateway = JsonFileGateway(blocker / "scripts.json")

            assert gateway.save_scripts(SLIDES) is False

    def test_unserializable_data_returns_false(self):
        """Test non-JSON values report failure and keep the old file."""
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "scripts.json"
            gateway = JsonFileGateway(path)
            gateway.save_scripts(SLIDES)

            assert gateway.save_scripts({"1": object()}) is False
            assert gateway.load_scripts() == SLIDES


class TestMemoryGateway:
    """Tests for the in-memory gateway."""

    def test_initial_data(self):
        gateway = MemoryGateway({"1": "legacy"})
        assert gateway.load_scripts() == {"1": "legacy"}

    def test_saved_data_is_loaded(self):
        gateway = MemoryGateway()
        gateway.save_scripts(SLIDES)
        assert gateway.load_scripts() == SLIDES
        assert gateway.save_count == 1

    def test_saved_copy_is_detached(self):
        """Test later mutation of the argument does not leak in."""
        gateway = MemoryGateway()
        data = {"1": {"script": "a", "title": ""}}
        gateway.save_scripts(data)
        data["1"]["script"] = "b"
        assert gateway.saved["1"]["script"] == "a"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
