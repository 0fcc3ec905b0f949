"""
SlidePrompter UI Package

PySide6 window on top of the PrompterController.
- Views: Qt widgets in widgets/
- ViewModel: PrompterController + ViewState
"""
