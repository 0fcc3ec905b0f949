"""
Bottom Bar Widget

Slide navigation buttons and the save-status line.

Layout:
┌──────────────────────────────────────┐
│ ◀ │ ▶ │                 Saved ✓      │
└──────────────────────────────────────┘
"""

from PySide6.QtWidgets import QFrame, QHBoxLayout, QLabel, QPushButton
from PySide6.QtCore import Qt, Signal, Slot

from slide_prompter.ui.state import ViewState, SaveStatus, STATUS_LABELS
from slide_prompter.ui.theme import COLORS, DIMENSIONS, TYPOGRAPHY


class StatusLabel(QLabel):
    """Save-status text, tinted by outcome."""

    STATUS_COLORS = {
        STATUS_LABELS[SaveStatus.SAVING]: COLORS.STATUS_SAVING,
        STATUS_LABELS[SaveStatus.SAVED]: COLORS.STATUS_SAVED,
        STATUS_LABELS[SaveStatus.FAILED]: COLORS.STATUS_FAILED,
    }

    def __init__(self, text: str = "", parent=None):
        super().__init__(parent)
        self.setAlignment(Qt.AlignmentFlag.AlignRight | Qt.AlignmentFlag.AlignVCenter)
        self.set_status(text)

    def set_status(self, text: str):
        color = self.STATUS_COLORS.get(text, COLORS.STATUS_IDLE)
        self.setText(text)
        self.setStyleSheet(f"color: {color}; font-size: {TYPOGRAPHY.SIZE_SMALL}pt;")


class BottomBar(QFrame):
    """
    Bottom bar with previous/next buttons.

    Signals:
        prev_clicked(): Previous slide requested
        next_clicked(): Next slide requested
    """

    prev_clicked = Signal()
    next_clicked = Signal()

    def __init__(self, idle_label: str = "", parent=None):
        super().__init__(parent)
        self._setup_ui(idle_label)
        self.btn_prev.clicked.connect(self.prev_clicked)
        self.btn_next.clicked.connect(self.next_clicked)

    def _setup_ui(self, idle_label: str):
        self.setFixedHeight(DIMENSIONS.BOTTOM_BAR_HEIGHT)
        self.setStyleSheet(f"""
            BottomBar {{
                background-color: {COLORS.BG_PANEL};
                border-top: 1px solid {COLORS.BORDER};
            }}
        """)

        layout = QHBoxLayout(self)
        layout.setContentsMargins(DIMENSIONS.PANEL_PADDING, 2, DIMENSIONS.PANEL_PADDING, 2)
        layout.setSpacing(DIMENSIONS.WIDGET_SPACING)

        self.btn_prev = QPushButton("◀")
        self.btn_prev.setToolTip("Previous slide (Left)")
        self.btn_prev.setFocusPolicy(Qt.FocusPolicy.NoFocus)
        layout.addWidget(self.btn_prev)

        self.btn_next = QPushButton("▶")
        self.btn_next.setToolTip("Next slide (Right / Space)")
        self.btn_next.setFocusPolicy(Qt.FocusPolicy.NoFocus)
        layout.addWidget(self.btn_next)

        layout.addStretch(1)

        self.status = StatusLabel(idle_label)
        layout.addWidget(self.status)

    def render(self, view: ViewState):
        self.btn_prev.setEnabled(view.can_go_back and not view.is_editing)
        self.btn_next.setEnabled(not view.is_editing)

    @Slot(str)
    def set_status(self, text: str):
        self.status.set_status(text)
