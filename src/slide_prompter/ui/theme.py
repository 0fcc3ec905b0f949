"""
SlidePrompter Theme Configuration

Centralized visual styling constants for the prompter window.
All colors, dimensions, fonts, and styles defined here.

Design Philosophy:
- Dark background keeps the window unobtrusive next to slides
- Script text is the only high-contrast element
- Compact chrome for a 300px wide window
"""

from dataclasses import dataclass


# =============================================================================
# COLOR PALETTE (Dark Theme)
# =============================================================================

@dataclass(frozen=True)
class Colors:
    """Application color constants."""

    # Window chrome
    BG_DARK: str = "#1A1A1A"          # Window background
    BG_PANEL: str = "#262626"         # Title/bottom bars
    BG_INPUT: str = "#333333"         # Editor and title field
    BG_HOVER: str = "#404040"         # Hover state
    BG_OVERLAY: str = "rgba(0, 0, 0, 200)"  # Settings overlay

    # Borders
    BORDER: str = "#444444"
    SEPARATOR: str = "#3A3A3A"

    # Text
    TEXT_PRIMARY: str = "#F5F5F5"     # Script text
    TEXT_SECONDARY: str = "#9A9A9A"   # Labels, empty state
    TEXT_DISABLED: str = "#5A5A5A"

    # Accent
    ACCENT: str = "#3B82F6"           # Active edit button, sliders
    ACCENT_HOVER: str = "#60A5FA"

    # Status line
    STATUS_IDLE: str = "#9A9A9A"
    STATUS_SAVING: str = "#F59E0B"
    STATUS_SAVED: str = "#10B981"
    STATUS_FAILED: str = "#EF4444"


# =============================================================================
# DIMENSIONS
# =============================================================================

@dataclass(frozen=True)
class Dimensions:
    """Layout and sizing constants."""

    MIN_WIDTH: int = 220
    MIN_HEIGHT: int = 240

    TITLE_BAR_HEIGHT: int = 32
    BOTTOM_BAR_HEIGHT: int = 32
    BUTTON_SIZE: int = 24

    PANEL_PADDING: int = 8
    WIDGET_SPACING: int = 6


# =============================================================================
# TYPOGRAPHY
# =============================================================================

@dataclass(frozen=True)
class Typography:
    """Font configuration."""

    FONT_FAMILY: str = "Segoe UI"

    SIZE_NORMAL: int = 10
    SIZE_SMALL: int = 9


# =============================================================================
# STYLESHEET GENERATOR
# =============================================================================

def get_application_stylesheet() -> str:
    """Generate the Qt stylesheet shared by every prompter widget."""
    c = Colors()
    d = Dimensions()
    t = Typography()

    return f"""
    QWidget {{
        background-color: {c.BG_DARK};
        color: {c.TEXT_PRIMARY};
        font-family: "{t.FONT_FAMILY}";
        font-size: {t.SIZE_NORMAL}pt;
    }}

    QPushButton {{
        background-color: {c.BG_INPUT};
        border: 1px solid {c.BORDER};
        border-radius: 4px;
        padding: 2px 8px;
        min-height: {d.BUTTON_SIZE - 6}px;
    }}

    QPushButton:hover {{
        background-color: {c.BG_HOVER};
    }}

    QPushButton:disabled {{
        color: {c.TEXT_DISABLED};
        border-color: {c.SEPARATOR};
    }}

    QPushButton:checked, QPushButton[active="true"] {{
        background-color: {c.ACCENT};
        border-color: {c.ACCENT};
    }}

    QLineEdit, QPlainTextEdit {{
        background-color: {c.BG_INPUT};
        border: 1px solid {c.BORDER};
        border-radius: 4px;
        padding: 2px 4px;
        selection-background-color: {c.ACCENT};
    }}

    QLabel[secondary="true"] {{
        color: {c.TEXT_SECONDARY};
    }}

    QSlider::groove:horizontal {{
        height: 4px;
        background: {c.BG_INPUT};
        border-radius: 2px;
    }}

    QSlider::handle:horizontal {{
        background: {c.ACCENT};
        width: 12px;
        margin: -5px 0;
        border-radius: 6px;
    }}

    QToolTip {{
        background-color: {c.BG_PANEL};
        color: {c.TEXT_PRIMARY};
        border: 1px solid {c.BORDER};
        padding: 4px;
    }}
    """


# =============================================================================
# CONVENIENCE SINGLETONS
# =============================================================================

COLORS = Colors()
DIMENSIONS = Dimensions()
TYPOGRAPHY = Typography()
