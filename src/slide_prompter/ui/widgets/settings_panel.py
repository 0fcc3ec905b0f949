"""
Settings Panel Widget

Overlay with font-size and line-height sliders and a live preview.
Moving a slider previews the value; releasing it applies and saves.
"""

from PySide6.QtWidgets import (
    QFrame, QFormLayout, QHBoxLayout, QLabel, QPushButton, QSlider, QVBoxLayout,
)
from PySide6.QtCore import Qt, Signal, Slot
from PySide6.QtGui import QMouseEvent

from slide_prompter.core.models import PrompterSettings
from slide_prompter.ui.theme import COLORS, DIMENSIONS
from slide_prompter.ui.widgets.script_view import script_html
from slide_prompter.utils import config

PREVIEW_TEXT = "The quick brown fox jumps over the lazy dog.\nSecond line of the script."

# Line height sliders work in tenths
LINE_HEIGHT_SCALE = 10


class SettingsPanel(QFrame):
    """
    Reading settings overlay.

    Signals:
        font_size_changed(int): Slider moved (preview)
        line_height_changed(float): Slider moved (preview)
        settings_committed(): A slider was released, values should be saved
        close_clicked(): Close button or click outside the card
    """

    font_size_changed = Signal(int)
    line_height_changed = Signal(float)
    settings_committed = Signal()
    close_clicked = Signal()

    def __init__(self, parent=None):
        super().__init__(parent)
        self._settings = PrompterSettings()
        self._setup_ui()
        self._connect_signals()
        self.hide()

    def _setup_ui(self):
        self.setStyleSheet(f"""
            SettingsPanel {{
                background-color: {COLORS.BG_OVERLAY};
            }}
            QFrame#card {{
                background-color: {COLORS.BG_PANEL};
                border: 1px solid {COLORS.BORDER};
                border-radius: 6px;
            }}
        """)

        outer = QVBoxLayout(self)
        outer.setContentsMargins(12, 12, 12, 12)

        self.card = QFrame()
        self.card.setObjectName("card")
        outer.addWidget(self.card)
        outer.addStretch(1)

        layout = QVBoxLayout(self.card)
        layout.setContentsMargins(DIMENSIONS.PANEL_PADDING, DIMENSIONS.PANEL_PADDING,
                                  DIMENSIONS.PANEL_PADDING, DIMENSIONS.PANEL_PADDING)
        layout.setSpacing(DIMENSIONS.WIDGET_SPACING)

        header = QHBoxLayout()
        title = QLabel("Settings")
        header.addWidget(title)
        header.addStretch(1)
        self.btn_close = QPushButton("✕")
        self.btn_close.setFixedSize(DIMENSIONS.BUTTON_SIZE, DIMENSIONS.BUTTON_SIZE)
        self.btn_close.setFocusPolicy(Qt.FocusPolicy.NoFocus)
        header.addWidget(self.btn_close)
        layout.addLayout(header)

        form = QFormLayout()

        self.font_size_slider = QSlider(Qt.Orientation.Horizontal)
        self.font_size_slider.setRange(int(config.get("font_size_min")), int(config.get("font_size_max")))
        self.font_size_value = QLabel()
        row = QHBoxLayout()
        row.addWidget(self.font_size_slider, stretch=1)
        row.addWidget(self.font_size_value)
        form.addRow("Font size", row)

        self.line_height_slider = QSlider(Qt.Orientation.Horizontal)
        self.line_height_slider.setRange(
            int(round(config.get("line_height_min") * LINE_HEIGHT_SCALE)),
            int(round(config.get("line_height_max") * LINE_HEIGHT_SCALE)),
        )
        self.line_height_slider.setSingleStep(
            max(1, int(round(config.get("line_height_step") * LINE_HEIGHT_SCALE)))
        )
        self.line_height_value = QLabel()
        row = QHBoxLayout()
        row.addWidget(self.line_height_slider, stretch=1)
        row.addWidget(self.line_height_value)
        form.addRow("Line height", row)

        layout.addLayout(form)

        self.preview = QLabel()
        self.preview.setTextFormat(Qt.TextFormat.RichText)
        self.preview.setWordWrap(True)
        layout.addWidget(self.preview)

    def _connect_signals(self):
        self.btn_close.clicked.connect(self.close_clicked)
        self.font_size_slider.valueChanged.connect(self._on_font_size_moved)
        self.line_height_slider.valueChanged.connect(self._on_line_height_moved)
        self.font_size_slider.sliderReleased.connect(self.settings_committed)
        self.line_height_slider.sliderReleased.connect(self.settings_committed)

    @Slot(int)
    def _on_font_size_moved(self, value: int):
        self.font_size_changed.emit(value)
        if not self.font_size_slider.isSliderDown():
            # Keyboard and wheel changes have no release event
            self.settings_committed.emit()

    @Slot(int)
    def _on_line_height_moved(self, value: int):
        self.line_height_changed.emit(value / LINE_HEIGHT_SCALE)
        if not self.line_height_slider.isSliderDown():
            self.settings_committed.emit()

    def set_settings(self, settings: PrompterSettings):
        """Reflect settings on the sliders, labels and preview."""
        self._settings = settings
        for slider, value in (
            (self.font_size_slider, settings.font_size),
            (self.line_height_slider, int(round(settings.line_height * LINE_HEIGHT_SCALE))),
        ):
            slider.blockSignals(True)
            slider.setValue(value)
            slider.blockSignals(False)

        self.font_size_value.setText(f"{settings.font_size}px")
        self.line_height_value.setText(f"{settings.line_height:.1f}")
        self.preview.setText(script_html(PREVIEW_TEXT, settings))

    def mousePressEvent(self, event: QMouseEvent):
        # Clicking the dimmed backdrop closes the panel
        if not self.card.geometry().contains(event.position().toPoint()):
            self.close_clicked.emit()
            event.accept()
            return
        super().mousePressEvent(event)
