"""
Title Bar Widget

Slide number, editable slide title and window buttons.

Layout:
┌──────────────────────────────────────────────┐
│ 3 │ Slide title...........  │ ✎ │ ⚙ │ – │ ✕ │
└──────────────────────────────────────────────┘
"""

from PySide6.QtWidgets import QFrame, QHBoxLayout, QLabel, QLineEdit, QPushButton
from PySide6.QtCore import Qt, Signal, Slot

from slide_prompter.ui.state import ViewState
from slide_prompter.ui.theme import COLORS, DIMENSIONS


def _tool_button(text: str, tooltip: str) -> QPushButton:
    button = QPushButton(text)
    button.setToolTip(tooltip)
    button.setFixedSize(DIMENSIONS.BUTTON_SIZE, DIMENSIONS.BUTTON_SIZE)
    # Buttons never take focus so Space keeps meaning "next slide"
    button.setFocusPolicy(Qt.FocusPolicy.NoFocus)
    return button


class TitleBar(QFrame):
    """
    Top bar of the prompter window.

    Signals:
        edit_clicked(): Edit button pressed
        settings_clicked(): Settings button pressed
        minimize_clicked(): Minimize button pressed
        close_clicked(): Close button pressed
        title_committed(str): Title field edited and confirmed (Enter or focus out)
    """

    edit_clicked = Signal()
    settings_clicked = Signal()
    minimize_clicked = Signal()
    close_clicked = Signal()
    title_committed = Signal(str)

    def __init__(self, parent=None):
        super().__init__(parent)
        self._setup_ui()
        self._connect_signals()

    def _setup_ui(self):
        self.setFixedHeight(DIMENSIONS.TITLE_BAR_HEIGHT)
        self.setFrameShape(QFrame.Shape.NoFrame)
        self.setStyleSheet(f"""
            TitleBar {{
                background-color: {COLORS.BG_PANEL};
                border-bottom: 1px solid {COLORS.BORDER};
            }}
        """)

        layout = QHBoxLayout(self)
        layout.setContentsMargins(DIMENSIONS.PANEL_PADDING, 2, DIMENSIONS.PANEL_PADDING, 2)
        layout.setSpacing(DIMENSIONS.WIDGET_SPACING)

        self.slide_number = QLabel("1")
        self.slide_number.setMinimumWidth(20)
        self.slide_number.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.slide_number.setToolTip("Current slide")
        layout.addWidget(self.slide_number)

        self.title_input = QLineEdit()
        self.title_input.setPlaceholderText("Slide title")
        layout.addWidget(self.title_input, stretch=1)

        self.btn_edit = _tool_button("✎", "Edit script (E)")
        layout.addWidget(self.btn_edit)

        self.btn_settings = _tool_button("⚙", "Reading settings")
        layout.addWidget(self.btn_settings)

        self.btn_minimize = _tool_button("–", "Minimize")
        layout.addWidget(self.btn_minimize)

        self.btn_close = _tool_button("✕", "Close")
        layout.addWidget(self.btn_close)

    def _connect_signals(self):
        self.btn_edit.clicked.connect(self.edit_clicked)
        self.btn_settings.clicked.connect(self.settings_clicked)
        self.btn_minimize.clicked.connect(self.minimize_clicked)
        self.btn_close.clicked.connect(self.close_clicked)
        self.title_input.editingFinished.connect(self._on_title_edited)

    @Slot()
    def _on_title_edited(self):
        self.title_input.setModified(False)
        self.title_committed.emit(self.title_input.text())

    def commit_pending(self):
        """Emit title_committed if the field holds unsaved typing."""
        if self.title_input.isModified():
            self._on_title_edited()

    def render(self, view: ViewState):
        """Show the slide number, title and edit-button state for a view."""
        self.slide_number.setText(str(view.slide_number))
        self.title_input.setText(view.title)
        self.btn_edit.setProperty("active", view.is_editing)
        self.btn_edit.style().unpolish(self.btn_edit)
        self.btn_edit.style().polish(self.btn_edit)
