"""
SlidePrompter Application State

Plain state containers owned by the PrompterController.

Modes:
- VIEW: Script is displayed, slide navigation is allowed
- EDIT: Script editor is open, navigation is ignored

Transitions:
    VIEW --edit--> EDIT
    EDIT --save--> VIEW     (script written to the store and flushed)
    EDIT --cancel--> VIEW   (editor buffer discarded)
"""

from enum import Enum, auto
from typing import Dict, List
from dataclasses import dataclass, field

from slide_prompter.core.models import PrompterSettings


class EditorMode(Enum):
    """Prompter mode enumeration."""
    VIEW = auto()   # Reading the script
    EDIT = auto()   # Editing the current slide's script


# Valid mode transitions (from_mode -> allowed to_modes)
VALID_TRANSITIONS: Dict[EditorMode, List[EditorMode]] = {
    EditorMode.VIEW: [EditorMode.EDIT],
    EditorMode.EDIT: [EditorMode.VIEW],
}


class SaveStatus(Enum):
    """Save-status line states."""
    IDLE = auto()
    SAVING = auto()
    SAVED = auto()
    FAILED = auto()


STATUS_LABELS: Dict[SaveStatus, str] = {
    SaveStatus.IDLE: "Ready",
    SaveStatus.SAVING: "Saving...",
    SaveStatus.SAVED: "Saved ✓",
    SaveStatus.FAILED: "Save failed",
}


@dataclass
class PrompterState:
    """Mutable state of the prompter window."""
    current_slide: int = 1
    mode: EditorMode = EditorMode.VIEW
    editor_buffer: str = ""
    settings_open: bool = False
    status: SaveStatus = SaveStatus.IDLE
    settings: PrompterSettings = field(default_factory=PrompterSettings)

    @property
    def is_editing(self) -> bool:
        return self.mode == EditorMode.EDIT


@dataclass(frozen=True)
class ViewState:
    """Snapshot handed to the rendering layer after every change."""
    slide_number: int
    script: str
    title: str
    mode: EditorMode
    editor_text: str = ""
    settings_open: bool = False

    @property
    def can_go_back(self) -> bool:
        return self.slide_number > 1

    @property
    def is_editing(self) -> bool:
        return self.mode == EditorMode.EDIT
