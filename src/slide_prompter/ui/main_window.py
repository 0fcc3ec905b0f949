"""
SlidePrompter Main Window

Small always-on-top window stacking three regions:
- [A] Title Bar: slide number, title field, edit/settings/window buttons
- [B] Script View: script text or editor
- [C] Bottom Bar: previous/next and save status

The settings panel is an overlay drawn over [B] and [C].

Layout Pattern:
┌────────────────────────────┐
│        [A] TITLE BAR       │
├────────────────────────────┤
│                            │
│       [B] SCRIPT VIEW      │
│                            │
├────────────────────────────┤
│       [C] BOTTOM BAR       │
└────────────────────────────┘
"""

from typing import Optional

from PySide6.QtWidgets import QApplication, QMainWindow, QVBoxLayout, QWidget
from PySide6.QtCore import Qt, Slot
from PySide6.QtGui import QCloseEvent, QKeyEvent, QResizeEvent

from slide_prompter.core.gateway import JsonFileGateway
from slide_prompter.core.models import PrompterSettings
from slide_prompter.core.settings_store import LocalStorage, SettingsStore
from slide_prompter.ui.prompter_controller import PrompterController
from slide_prompter.ui.shortcuts import FocusTarget, handle_key
from slide_prompter.ui.state import ViewState
from slide_prompter.ui.theme import DIMENSIONS, get_application_stylesheet
from slide_prompter.ui.widgets import BottomBar, ScriptView, SettingsPanel, TitleBar
from slide_prompter.utils import config
from slide_prompter.utils.logging import get_logger

logger = get_logger(__name__)


def build_controller(parent=None) -> PrompterController:
    """Controller wired to the on-disk scripts file and local storage."""
    gateway = JsonFileGateway(config.scripts_path())
    settings_store = SettingsStore(LocalStorage(config.local_storage_path()))
    logger.info("Scripts file: %s", gateway.path)
    return PrompterController(gateway, settings_store, parent=parent)


class MainWindow(QMainWindow):
    """
    Prompter window.

    Renders whatever the controller publishes and forwards every user
    action back to it.
    """

    def __init__(self, controller: Optional[PrompterController] = None):
        super().__init__()

        self.controller = controller or build_controller(self)

        self._setup_window()
        self._setup_layout()
        self._connect_signals()

        self.controller.initialize()

        # Start with shortcuts live rather than the cursor in the title field
        self.centralWidget().setFocus()

    def _setup_window(self):
        """Configure main window properties."""
        self.setWindowTitle("SlidePrompter")
        self.setMinimumSize(DIMENSIONS.MIN_WIDTH, DIMENSIONS.MIN_HEIGHT)
        self.resize(int(config.get("window_width")), int(config.get("window_height")))
        if config.get("always_on_top"):
            self.setWindowFlag(Qt.WindowType.WindowStaysOnTopHint, True)

        self.setStyleSheet(get_application_stylesheet())

    def _setup_layout(self):
        central = QWidget()
        central.setFocusPolicy(Qt.FocusPolicy.StrongFocus)
        self.setCentralWidget(central)

        layout = QVBoxLayout(central)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(0)

        # [A] Title bar
        self.title_bar = TitleBar()
        layout.addWidget(self.title_bar)

        # [B] Script view
        self.script_view = ScriptView()
        layout.addWidget(self.script_view, stretch=1)

        # [C] Bottom bar
        self.bottom_bar = BottomBar(self.controller.status_text)
        layout.addWidget(self.bottom_bar)

        # Overlay, positioned in resizeEvent
        self.settings_panel = SettingsPanel(central)

    def _connect_signals(self):
        c = self.controller

        c.view_changed.connect(self._on_view_changed)
        c.status_changed.connect(self.bottom_bar.set_status)
        c.settings_changed.connect(self._on_settings_changed)
        c.close_requested.connect(self.close)
        c.minimize_requested.connect(self.showMinimized)

        # Title bar
        self.title_bar.edit_clicked.connect(c.toggle_edit)
        self.title_bar.settings_clicked.connect(c.open_settings)
        self.title_bar.minimize_clicked.connect(c.minimize_window)
        self.title_bar.close_clicked.connect(c.close_window)
        self.title_bar.title_committed.connect(c.save_title)

        # Script view
        self.script_view.save_clicked.connect(c.save_edit)
        self.script_view.cancel_clicked.connect(c.cancel_edit)
        self.script_view.editor_text_changed.connect(c.set_editor_text)

        # Bottom bar
        self.bottom_bar.prev_clicked.connect(self._on_prev_clicked)
        self.bottom_bar.next_clicked.connect(self._on_next_clicked)

        # Settings
        self.settings_panel.font_size_changed.connect(
            lambda value: c.preview_settings(font_size=value))
        self.settings_panel.line_height_changed.connect(
            lambda value: c.preview_settings(line_height=value))
        self.settings_panel.settings_committed.connect(c.apply_settings)
        self.settings_panel.close_clicked.connect(c.close_settings)

    # =========================================================================
    # Rendering
    # =========================================================================

    @Slot(object)
    def _on_view_changed(self, view: ViewState):
        self.title_bar.render(view)
        self.script_view.render(view)
        self.bottom_bar.render(view)

        if view.settings_open:
            self._place_settings_panel()
            self.settings_panel.set_settings(self.controller.settings)
            self.settings_panel.show()
            self.settings_panel.raise_()
        else:
            self.settings_panel.hide()

        if not view.is_editing and self.focusWidget() is self.script_view.editor:
            self.centralWidget().setFocus()

    @Slot(object)
    def _on_settings_changed(self, settings: PrompterSettings):
        self.script_view.apply_settings(settings)
        if self.settings_panel.isVisible():
            self.settings_panel.set_settings(settings)

    def _place_settings_panel(self):
        self.settings_panel.setGeometry(self.centralWidget().rect())

    def resizeEvent(self, event: QResizeEvent):
        super().resizeEvent(event)
        self._place_settings_panel()

    # =========================================================================
    # Input
    # =========================================================================

    @Slot()
    def _on_prev_clicked(self):
        self.title_bar.commit_pending()
        self.controller.previous_slide()

    @Slot()
    def _on_next_clicked(self):
        self.title_bar.commit_pending()
        self.controller.next_slide()

    def _focus_target(self) -> FocusTarget:
        focus = QApplication.focusWidget()
        if focus is self.script_view.editor:
            return FocusTarget.EDITOR
        if focus is self.title_bar.title_input:
            return FocusTarget.TITLE
        return FocusTarget.WINDOW

    def keyPressEvent(self, event: QKeyEvent):
        if event.modifiers() & (Qt.KeyboardModifier.ControlModifier | Qt.KeyboardModifier.AltModifier):
            super().keyPressEvent(event)
            return
        if handle_key(self.controller, event.key(), self._focus_target()):
            event.accept()
            return
        super().keyPressEvent(event)

    def closeEvent(self, event: QCloseEvent):
        self.title_bar.commit_pending()
        super().closeEvent(event)
