"""Qt UI components for the mock test application.

``QuizMainWindow`` lives in :mod:`mockmaster.ui.main_window`; it pulls in
Qt WebEngine and is imported directly by the entry point.
"""

from .dialog_helpers import (
    confirm_abandon_quiz,
    show_error,
    show_info,
    show_warning,
)
from .question_renderer import render_breakdown, render_question_text
from .view_router import ViewRouter

__all__ = [
    "ViewRouter",
    "confirm_abandon_quiz",
    "show_error",
    "show_info",
    "show_warning",
    "render_breakdown",
    "render_question_text",
]
