# SlidePrompter - Prompter Controller

"""
Owns the slide store and the prompter state, and turns user intents into
store mutations, persistence calls and ViewState updates.

Widgets never touch the store directly: they call controller methods and
render whatever view_changed delivers.

Signals:
    view_changed(ViewState): Emitted after any change the view must reflect
    status_changed(str): Save-status label text
    settings_changed(PrompterSettings): Live or applied reading settings
    close_requested(): Window should close
    minimize_requested(): Window should minimize
"""

from __future__ import annotations

from typing import Optional

from PySide6.QtCore import QObject, QTimer, Signal

from slide_prompter.core.gateway import PersistenceGateway, ScriptLoadError
from slide_prompter.core.models import PrompterSettings
from slide_prompter.core.settings_store import SettingsStore, clamp_settings
from slide_prompter.core.slide_store import SlideDataError, SlideStore
from slide_prompter.ui.state import (
    EditorMode, PrompterState, SaveStatus, STATUS_LABELS, VALID_TRANSITIONS, ViewState,
)
from slide_prompter.utils import config
from slide_prompter.utils.logging import get_logger

logger = get_logger(__name__)


class PrompterController(QObject):
    """
    Central controller for the prompter window.

    Usage:
        controller = PrompterController(JsonFileGateway(path), settings_store)
        controller.view_changed.connect(window.render)
        controller.initialize()
    """

    view_changed = Signal(object)       # ViewState
    status_changed = Signal(str)
    settings_changed = Signal(object)   # PrompterSettings
    close_requested = Signal()
    minimize_requested = Signal()

    def __init__(
        self,
        gateway: PersistenceGateway,
        settings_store: Optional[SettingsStore] = None,
        status_reset_ms: Optional[int] = None,
        parent: Optional[QObject] = None,
    ) -> None:
        super().__init__(parent)
        self._gateway = gateway
        self._settings_store = settings_store
        self._store = SlideStore()
        self.state = PrompterState()

        self._idle_label = config.get("status_idle_label", STATUS_LABELS[SaveStatus.IDLE])
        self._status_timer = QTimer(self)
        self._status_timer.setSingleShot(True)
        self._status_timer.setInterval(
            status_reset_ms if status_reset_ms is not None else int(config.get("status_reset_ms"))
        )
        self._status_timer.timeout.connect(self._reset_status)

    # =========================================================================
    # Properties
    # =========================================================================

    @property
    def store(self) -> SlideStore:
        return self._store

    @property
    def current_slide(self) -> int:
        return self.state.current_slide

    @property
    def mode(self) -> EditorMode:
        return self.state.mode

    @property
    def settings(self) -> PrompterSettings:
        return self.state.settings

    @property
    def status_text(self) -> str:
        return self._status_label(self.state.status)

    def view_state(self) -> ViewState:
        record = self._store.get(self.state.current_slide)
        return ViewState(
            slide_number=self.state.current_slide,
            script=record.script,
            title=record.title,
            mode=self.state.mode,
            editor_text=self.state.editor_buffer,
            settings_open=self.state.settings_open,
        )

    # =========================================================================
    # Startup
    # =========================================================================

    def initialize(self) -> None:
        """Load settings and scripts, then publish the first view."""
        self.load_settings()
        self.load_scripts()
        self._emit_view()

    def load_scripts(self) -> SlideStore:
        """
        Replace the store with the gateway's contents.

        Any read or format failure leaves an empty store.
        """
        try:
            raw = self._gateway.load_scripts()
            self._store = SlideStore.load(raw)
        except (ScriptLoadError, SlideDataError) as e:
            logger.error("Failed to load slides, starting empty: %s", e)
            self._store = SlideStore()
        except Exception:
            logger.exception("Unexpected error while loading slides, starting empty")
            self._store = SlideStore()
        else:
            logger.info("Loaded %d slide(s)", len(self._store))
        return self._store

    def save_scripts(self) -> bool:
        """Flush the store through the gateway; False on any failure."""
        try:
            return bool(self._gateway.save_scripts(self._store.serialize()))
        except Exception:
            logger.exception("Save error")
            return False

    # =========================================================================
    # Navigation
    # =========================================================================

    def navigate(self, direction: int) -> bool:
        """
        Move by direction slides (negative = back).

        Returns:
            True if the current slide changed.
        """
        if self.state.is_editing:
            return False
        logger.debug("Navigate slide: %+d", direction)
        return self.go_to_slide(self.state.current_slide + direction)

    def next_slide(self) -> bool:
        return self.navigate(1)

    def previous_slide(self) -> bool:
        return self.navigate(-1)

    def go_to_slide(self, slide_number: int) -> bool:
        """Jump to a slide; ignored in EDIT mode or below slide 1."""
        if self.state.is_editing or slide_number < 1:
            return False
        if slide_number == self.state.current_slide:
            return False
        self.state.current_slide = slide_number
        self._emit_view()
        return True

    # =========================================================================
    # Edit Mode
    # =========================================================================

    def _transition_to(self, mode: EditorMode) -> bool:
        if mode not in VALID_TRANSITIONS[self.state.mode]:
            return False
        self.state.mode = mode
        return True

    def toggle_edit(self) -> None:
        if self.state.is_editing:
            self.cancel_edit()
        else:
            self.enter_edit()

    def enter_edit(self) -> bool:
        """Open the editor on the current slide's script."""
        if not self._transition_to(EditorMode.EDIT):
            return False
        self.state.editor_buffer = self._store.get(self.state.current_slide).script
        self._emit_view()
        return True

    def set_editor_text(self, text: str) -> None:
        """Track the editor contents without touching the store."""
        if self.state.is_editing:
            self.state.editor_buffer = text

    def cancel_edit(self) -> bool:
        """Leave EDIT mode, discarding the editor buffer."""
        if not self._transition_to(EditorMode.VIEW):
            return False
        self.state.editor_buffer = ""
        self._emit_view()
        return True

    def save_edit(self, text: Optional[str] = None) -> bool:
        """
        Store the editor text on the current slide and flush to disk.

        The in-memory change is kept even when the flush fails; in that case
        the editor stays open so the text can be saved again.

        Args:
            text: Editor contents (defaults to the tracked buffer).

        Returns:
            True if the flush succeeded.
        """
        if not self.state.is_editing:
            return False
        if text is not None:
            self.state.editor_buffer = text

        slide = self.state.current_slide
        self._store.set_script(slide, self.state.editor_buffer)
        logger.debug("Script updated for slide %d", slide)

        self._set_status(SaveStatus.SAVING)
        ok = self.save_scripts()
        self._set_status(SaveStatus.SAVED if ok else SaveStatus.FAILED)

        if ok:
            self._transition_to(EditorMode.VIEW)
            self.state.editor_buffer = ""
            self._emit_view()
        return ok

    def save_title(self, text: str) -> bool:
        """Store a title on the current slide and flush; failures are only logged."""
        slide = self.state.current_slide
        if self._store.get(slide).title == text.strip():
            return True
        self._store.set_title(slide, text)
        ok = self.save_scripts()
        if ok:
            logger.info("Title saved for slide %d", slide)
        else:
            logger.error("Failed to save title for slide %d", slide)
        self._emit_view()
        return ok

    # =========================================================================
    # Save Status
    # =========================================================================

    def _status_label(self, status: SaveStatus) -> str:
        if status == SaveStatus.IDLE:
            return self._idle_label
        return STATUS_LABELS[status]

    def _set_status(self, status: SaveStatus) -> None:
        # A new result restarts the revert delay
        self._status_timer.stop()
        self.state.status = status
        self.status_changed.emit(self._status_label(status))
        if status in (SaveStatus.SAVED, SaveStatus.FAILED):
            self._status_timer.start()

    def _reset_status(self) -> None:
        self.state.status = SaveStatus.IDLE
        self.status_changed.emit(self._idle_label)

    # =========================================================================
    # Settings
    # =========================================================================

    def load_settings(self) -> PrompterSettings:
        if self._settings_store is not None:
            self.state.settings = self._settings_store.load()
        self.settings_changed.emit(self.state.settings)
        return self.state.settings

    def open_settings(self) -> None:
        self.state.settings_open = True
        self._emit_view()

    def close_settings(self) -> None:
        if self.state.settings_open:
            self.state.settings_open = False
            self._emit_view()

    def preview_settings(self, font_size: Optional[int] = None,
                         line_height: Optional[float] = None) -> PrompterSettings:
        """Update live values while a slider moves (not persisted)."""
        current = self.state.settings
        self.state.settings = clamp_settings(PrompterSettings(
            font_size=current.font_size if font_size is None else font_size,
            line_height=current.line_height if line_height is None else line_height,
        ))
        self.settings_changed.emit(self.state.settings)
        return self.state.settings

    def apply_settings(self) -> bool:
        """Persist the current settings to local storage."""
        self.settings_changed.emit(self.state.settings)
        if self._settings_store is None:
            return True
        return self._settings_store.save(self.state.settings)

    # =========================================================================
    # Window Commands
    # =========================================================================

    def close_window(self) -> None:
        self.close_requested.emit()

    def minimize_window(self) -> None:
        self.minimize_requested.emit()

    def escape(self) -> None:
        """Escape closes the settings panel first, then cancels editing."""
        if self.state.settings_open:
            self.close_settings()
        elif self.state.is_editing:
            self.cancel_edit()

    def _emit_view(self) -> None:
        self.view_changed.emit(self.view_state())
