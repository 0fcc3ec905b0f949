"""
SlidePrompter UI Widgets Package

Widget components for the prompter window.
Each widget renders a ViewState and reports user intent via Qt signals.
"""

from slide_prompter.ui.widgets.title_bar import TitleBar
from slide_prompter.ui.widgets.script_view import ScriptView
from slide_prompter.ui.widgets.bottom_bar import BottomBar
from slide_prompter.ui.widgets.settings_panel import SettingsPanel

__all__ = [
    "TitleBar",
    "ScriptView",
    "BottomBar",
    "SettingsPanel",
]
