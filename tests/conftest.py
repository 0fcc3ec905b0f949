"""
Pytest configuration and fixtures for SlidePrompter tests.
"""

import os
import pytest
import sys
from pathlib import Path

# Add src to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT / "src"))

# Run headless when no display is available
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PySide6.QtWidgets import QApplication

from slide_prompter.core.gateway import MemoryGateway
from slide_prompter.core.settings_store import LocalStorage, SettingsStore
from slide_prompter.utils import config


@pytest.fixture(scope="session")
def qapp():
    """Create QApplication once per test session."""
    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    yield app


@pytest.fixture(autouse=True)
def clean_config(tmp_path, monkeypatch):
    """Isolate every test from user config and the real app-data folder."""
    config.reset()
    monkeypatch.setenv(config.DATA_DIR_ENV, str(tmp_path / "appdata"))
    yield
    config.reset()


@pytest.fixture
def gateway():
    """In-memory gateway primed with two slides."""
    return MemoryGateway({
        "1": {"script": "Welcome everyone", "title": "Intro"},
        "2": {"script": "Quarterly numbers", "title": ""},
    })


@pytest.fixture
def settings_store(tmp_path):
    return SettingsStore(LocalStorage(tmp_path / "local_storage.json"))


@pytest.fixture
def controller(qapp, gateway, settings_store):
    """Initialized controller with a short status delay."""
    from slide_prompter.ui.prompter_controller import PrompterController

    ctrl = PrompterController(gateway, settings_store, status_reset_ms=50)
    ctrl.initialize()
    return ctrl


@pytest.fixture
def main_window(qapp, qtbot, gateway, settings_store):
    """Create and show main window for testing."""
    from slide_prompter.ui.main_window import MainWindow
    from slide_prompter.ui.prompter_controller import PrompterController

    window = MainWindow(PrompterController(gateway, settings_store, status_reset_ms=50))
    window.show()
    qtbot.addWidget(window)

    # Wait for window to be shown
    qtbot.waitExposed(window)

    yield window

    window.close()
