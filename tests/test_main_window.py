"""
Test Suite: Main Window

Tests widget structure and that clicks and key presses reach the controller.
"""

import pytest
from PySide6.QtCore import Qt
from PySide6.QtTest import QTest

from slide_prompter.ui.state import EditorMode
from slide_prompter.ui.widgets.script_view import EMPTY_HINT, ScriptView


class TestWindowStructure:
    """Test main window layout."""

    def test_regions_exist(self, main_window):
        assert main_window.title_bar is not None
        assert main_window.script_view is not None
        assert main_window.bottom_bar is not None
        assert main_window.settings_panel is not None

    def test_always_on_top(self, main_window):
        assert main_window.windowFlags() & Qt.WindowType.WindowStaysOnTopHint

    def test_default_size(self, main_window):
        assert main_window.width() == 300
        assert main_window.height() == 400

    def test_settings_hidden_initially(self, main_window):
        assert not main_window.settings_panel.isVisible()


class TestInitialRender:
    """Test the first rendered slide."""

    def test_first_slide_shown(self, main_window):
        assert main_window.title_bar.slide_number.text() == "1"
        assert main_window.title_bar.title_input.text() == "Intro"
        assert "Welcome everyone" in main_window.script_view.script_label.text()

    def test_prev_disabled_on_first_slide(self, main_window):
        assert not main_window.bottom_bar.btn_prev.isEnabled()

    def test_status_idle(self, main_window):
        assert main_window.bottom_bar.status.text() == "Ready"


class TestNavigationUI:
    """Test navigation via buttons and keys."""

    def test_next_button(self, main_window, qtbot):
        qtbot.mouseClick(main_window.bottom_bar.btn_next, Qt.MouseButton.LeftButton)
        assert main_window.controller.current_slide == 2
        assert main_window.title_bar.slide_number.text() == "2"
        assert main_window.bottom_bar.btn_prev.isEnabled()

    def test_empty_slide_shows_hint(self, main_window):
        main_window.controller.go_to_slide(8)
        assert main_window.script_view.empty_label.isVisible()
        assert main_window.script_view.empty_label.text() == EMPTY_HINT
        assert not main_window.script_view.scroll_area.isVisible()

    def test_arrow_keys(self, main_window, qtbot):
        main_window.centralWidget().setFocus()
        QTest.keyClick(main_window, Qt.Key.Key_Right)
        assert main_window.controller.current_slide == 2
        QTest.keyClick(main_window, Qt.Key.Key_Left)
        assert main_window.controller.current_slide == 1

    def test_digit_jump(self, main_window):
        main_window.centralWidget().setFocus()
        QTest.keyClick(main_window, Qt.Key.Key_4)
        assert main_window.controller.current_slide == 4


class TestEditUI:
    """Test the edit page."""

    def test_edit_button_opens_editor(self, main_window, qtbot):
        qtbot.mouseClick(main_window.title_bar.btn_edit, Qt.MouseButton.LeftButton)
        assert main_window.controller.mode == EditorMode.EDIT
        assert main_window.script_view.currentIndex() == ScriptView.EDIT_PAGE
        assert main_window.script_view.editor.toPlainText() == "Welcome everyone"

    def test_save_button(self, main_window, qtbot, gateway):
        main_window.controller.enter_edit()
        main_window.script_view.editor.setPlainText("Rewritten intro")
        qtbot.mouseClick(main_window.script_view.btn_save, Qt.MouseButton.LeftButton)

        assert main_window.controller.mode == EditorMode.VIEW
        assert gateway.saved["1"]["script"] == "Rewritten intro"
        assert "Rewritten intro" in main_window.script_view.script_label.text()
        assert main_window.bottom_bar.status.text() == "Saved ✓"

    def test_cancel_button(self, main_window, qtbot, gateway):
        main_window.controller.enter_edit()
        main_window.script_view.editor.setPlainText("Throwaway")
        qtbot.mouseClick(main_window.script_view.btn_cancel, Qt.MouseButton.LeftButton)

        assert main_window.controller.mode == EditorMode.VIEW
        assert main_window.controller.store.get(1).script == "Welcome everyone"
        assert gateway.save_count == 0

    def test_escape_in_editor_cancels(self, main_window, qtbot):
        main_window.controller.enter_edit()
        main_window.script_view.editor.setFocus()
        QTest.keyClick(main_window.script_view.editor, Qt.Key.Key_Escape)
        assert main_window.controller.mode == EditorMode.VIEW

    def test_status_reverts(self, main_window, qtbot):
        main_window.controller.enter_edit()
        main_window.controller.save_edit("Short")
        qtbot.waitUntil(lambda: main_window.bottom_bar.status.text() == "Ready", timeout=1000)


class TestTitleUI:
    """Test the inline title field."""

    def test_enter_commits_title(self, main_window, qtbot, gateway):
        field = main_window.title_bar.title_input
        field.setFocus()
        field.selectAll()
        QTest.keyClicks(field, "Opening")
        QTest.keyClick(field, Qt.Key.Key_Return)

        assert main_window.controller.store.get(1).title == "Opening"
        assert gateway.saved["1"]["title"] == "Opening"

    def test_pending_title_saved_before_navigation(self, main_window, qtbot):
        field = main_window.title_bar.title_input
        field.setFocus()
        field.selectAll()
        QTest.keyClicks(field, "Typed")
        qtbot.mouseClick(main_window.bottom_bar.btn_next, Qt.MouseButton.LeftButton)

        assert main_window.controller.store.get(1).title == "Typed"
        assert main_window.controller.current_slide == 2

    def test_typing_e_in_title_does_not_edit(self, main_window):
        field = main_window.title_bar.title_input
        field.setFocus()
        QTest.keyClick(field, Qt.Key.Key_E)
        assert main_window.controller.mode == EditorMode.VIEW


class TestSettingsUI:
    """Test the settings overlay."""

    def test_settings_button_opens_panel(self, main_window, qtbot):
        qtbot.mouseClick(main_window.title_bar.btn_settings, Qt.MouseButton.LeftButton)
        assert main_window.settings_panel.isVisible()
        assert main_window.settings_panel.font_size_value.text() == "13px"
        assert main_window.settings_panel.line_height_value.text() == "1.5"

    def test_close_button(self, main_window, qtbot):
        main_window.controller.open_settings()
        qtbot.mouseClick(main_window.settings_panel.btn_close, Qt.MouseButton.LeftButton)
        assert not main_window.settings_panel.isVisible()

    def test_escape_closes_panel(self, main_window):
        main_window.controller.open_settings()
        main_window.centralWidget().setFocus()
        QTest.keyClick(main_window, Qt.Key.Key_Escape)
        assert not main_window.settings_panel.isVisible()

    def test_slider_change_saved(self, main_window, settings_store):
        main_window.controller.open_settings()
        main_window.settings_panel.font_size_slider.setValue(20)

        assert main_window.controller.settings.font_size == 20
        assert settings_store.load().font_size == 20
        assert "font-size:20px" in main_window.script_view.script_label.text()

    def test_line_height_slider(self, main_window, settings_store):
        main_window.controller.open_settings()
        main_window.settings_panel.line_height_slider.setValue(20)
        assert main_window.controller.settings.line_height == 2.0
        assert settings_store.load().line_height == 2.0


class TestWindowButtons:
    def test_close_button_closes(self, main_window, qtbot):
        qtbot.mouseClick(main_window.title_bar.btn_close, Qt.MouseButton.LeftButton)
        qtbot.waitUntil(lambda: not main_window.isVisible(), timeout=1000)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
