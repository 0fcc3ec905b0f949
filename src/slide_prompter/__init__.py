"""
SlidePrompter

A small always-on-top teleprompter window that shows the speaker's script
for the current slide.

Architecture: MVVM (Model-View-ViewModel)
- Models: slide store, persistence gateway and settings storage in core/
- ViewModel: PrompterController and ViewState in ui/
- Views: Qt widgets in ui/widgets/

Key Principles:
- Slides exist only while they carry a script or a title
- Every edit is flushed to disk straight away
- A failed save never throws away the edit
"""

__version__ = "1.0.0"
__author__ = "SlidePrompter Team"
