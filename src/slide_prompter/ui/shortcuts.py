"""
Keyboard shortcuts for the prompter window.

Left / Right / Space step through slides, E toggles the editor, Escape
closes the settings panel or cancels editing, and 1-9 jump straight to a
slide. Typing in the script editor or the title field never triggers a
shortcut apart from Escape in the editor.
"""

from enum import Enum, auto
from typing import Dict, Optional, Tuple

from PySide6.QtCore import Qt

from slide_prompter.ui.state import PrompterState


class FocusTarget(Enum):
    """Which part of the window owns keyboard focus."""
    WINDOW = auto()
    EDITOR = auto()
    TITLE = auto()


SHORTCUTS: Dict[int, str] = {
    int(Qt.Key.Key_Left): "previous_slide",
    int(Qt.Key.Key_Right): "next_slide",
    int(Qt.Key.Key_Space): "next_slide",
    int(Qt.Key.Key_E): "toggle_edit",
    int(Qt.Key.Key_Escape): "escape",
}

DIGIT_KEYS: Dict[int, int] = {
    int(getattr(Qt.Key, f"Key_{n}")): n for n in range(1, 10)
}

ESCAPE = int(Qt.Key.Key_Escape)


def resolve_key(key: int, state: PrompterState,
                focus: FocusTarget = FocusTarget.WINDOW) -> Optional[Tuple[str, tuple]]:
    """
    Map a key press to a controller call.

    Returns:
        (method name, args) or None when the key should reach the widget.
    """
    key = int(key)

    if focus == FocusTarget.EDITOR and state.is_editing:
        return ("cancel_edit", ()) if key == ESCAPE else None

    if focus == FocusTarget.TITLE:
        return None

    if state.settings_open:
        return ("close_settings", ()) if key == ESCAPE else None

    if key in SHORTCUTS:
        action = SHORTCUTS[key]
        if action == "escape" and not state.is_editing:
            return None
        return (action, ())

    if key in DIGIT_KEYS and not state.is_editing:
        return ("go_to_slide", (DIGIT_KEYS[key],))

    return None


def handle_key(controller, key: int, focus: FocusTarget = FocusTarget.WINDOW) -> bool:
    """Run the controller call bound to key. Returns True if consumed."""
    resolved = resolve_key(key, controller.state, focus)
    if resolved is None:
        return False
    name, args = resolved
    getattr(controller, name)(*args)
    return True
