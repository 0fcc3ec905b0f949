"""
Script View Widget

Two pages stacked in the window body:
- View page: the current slide's script, or an empty-state hint
- Edit page: plain-text editor with Save / Cancel
"""

import html

from PySide6.QtWidgets import (
    QFrame, QHBoxLayout, QLabel, QPlainTextEdit, QPushButton, QScrollArea,
    QStackedWidget, QVBoxLayout, QWidget,
)
from PySide6.QtCore import Qt, Signal, Slot

from slide_prompter.core.models import PrompterSettings
from slide_prompter.ui.state import ViewState
from slide_prompter.ui.theme import COLORS, DIMENSIONS

EMPTY_HINT = "No script for this slide.\nPress E to add one."


def script_html(text: str, settings: PrompterSettings) -> str:
    """Render script text as rich text using the reading settings."""
    body = html.escape(text).replace("\n", "<br>")
    line_height = int(round(settings.line_height * 100))
    return (
        f'<div style="font-size:{settings.font_size}px; line-height:{line_height}%;">'
        f"{body}</div>"
    )


class ScriptView(QStackedWidget):
    """
    Script display and editor.

    Signals:
        save_clicked(str): Save pressed, carrying the editor text
        cancel_clicked(): Cancel pressed
        editor_text_changed(str): Editor contents changed
    """

    VIEW_PAGE = 0
    EDIT_PAGE = 1

    save_clicked = Signal(str)
    cancel_clicked = Signal()
    editor_text_changed = Signal(str)

    def __init__(self, parent=None):
        super().__init__(parent)
        self._settings = PrompterSettings()
        self._script = ""
        self._setup_ui()
        self._connect_signals()

    def _setup_ui(self):
        # View page
        view_page = QWidget()
        view_layout = QVBoxLayout(view_page)
        view_layout.setContentsMargins(DIMENSIONS.PANEL_PADDING, DIMENSIONS.PANEL_PADDING,
                                       DIMENSIONS.PANEL_PADDING, DIMENSIONS.PANEL_PADDING)

        self.script_label = QLabel()
        self.script_label.setTextFormat(Qt.TextFormat.RichText)
        self.script_label.setWordWrap(True)
        self.script_label.setAlignment(Qt.AlignmentFlag.AlignTop | Qt.AlignmentFlag.AlignLeft)
        self.script_label.setTextInteractionFlags(Qt.TextInteractionFlag.TextSelectableByMouse)

        self.scroll_area = QScrollArea()
        self.scroll_area.setWidgetResizable(True)
        self.scroll_area.setFrameShape(QFrame.Shape.NoFrame)
        self.scroll_area.setFocusPolicy(Qt.FocusPolicy.NoFocus)
        self.scroll_area.setWidget(self.script_label)
        view_layout.addWidget(self.scroll_area, stretch=1)

        self.empty_label = QLabel(EMPTY_HINT)
        self.empty_label.setProperty("secondary", True)
        self.empty_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.empty_label.setStyleSheet(f"color: {COLORS.TEXT_SECONDARY};")
        view_layout.addWidget(self.empty_label, stretch=1)

        self.addWidget(view_page)

        # Edit page
        edit_page = QWidget()
        edit_layout = QVBoxLayout(edit_page)
        edit_layout.setContentsMargins(DIMENSIONS.PANEL_PADDING, DIMENSIONS.PANEL_PADDING,
                                       DIMENSIONS.PANEL_PADDING, DIMENSIONS.PANEL_PADDING)
        edit_layout.setSpacing(DIMENSIONS.WIDGET_SPACING)

        self.editor = QPlainTextEdit()
        self.editor.setPlaceholderText("Type the script for this slide...")
        edit_layout.addWidget(self.editor, stretch=1)

        buttons = QHBoxLayout()
        buttons.addStretch(1)
        self.btn_cancel = QPushButton("Cancel")
        self.btn_cancel.setFocusPolicy(Qt.FocusPolicy.NoFocus)
        buttons.addWidget(self.btn_cancel)
        self.btn_save = QPushButton("Save")
        self.btn_save.setFocusPolicy(Qt.FocusPolicy.NoFocus)
        self.btn_save.setProperty("active", True)
        buttons.addWidget(self.btn_save)
        edit_layout.addLayout(buttons)

        self.addWidget(edit_page)
        self._show_script("")

    def _connect_signals(self):
        self.btn_save.clicked.connect(self._on_save)
        self.btn_cancel.clicked.connect(self.cancel_clicked)
        self.editor.textChanged.connect(self._on_editor_changed)

    @Slot()
    def _on_save(self):
        self.save_clicked.emit(self.editor.toPlainText())

    @Slot()
    def _on_editor_changed(self):
        self.editor_text_changed.emit(self.editor.toPlainText())

    def _show_script(self, script: str):
        self._script = script
        has_script = bool(script)
        self.scroll_area.setVisible(has_script)
        self.empty_label.setVisible(not has_script)
        self.script_label.setText(script_html(script, self._settings) if has_script else "")

    @property
    def is_editing(self) -> bool:
        return self.currentIndex() == self.EDIT_PAGE

    def render(self, view: ViewState):
        """Switch pages and fill them from a view snapshot."""
        if view.is_editing:
            if not self.is_editing:
                self.editor.blockSignals(True)
                self.editor.setPlainText(view.editor_text)
                self.editor.blockSignals(False)
                self.setCurrentIndex(self.EDIT_PAGE)
                self.editor.setFocus()
        else:
            self.setCurrentIndex(self.VIEW_PAGE)
            self._show_script(view.script)

    def apply_settings(self, settings: PrompterSettings):
        self._settings = settings
        self._show_script(self._script)
