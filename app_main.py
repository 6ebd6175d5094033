"""Application entry point for MockMaster."""

from __future__ import annotations

import sys

from PySide6.QtWidgets import QApplication

from mockmaster.config import get_settings
from mockmaster.core.services.quiz_generator import GeminiQuizGenerator
from mockmaster.core.services.session_controller import QuizSessionController
from mockmaster.ui.main_window import QuizMainWindow
from mockmaster.utils.logging_config import configure_logging


def main() -> None:
    """Initialize logging and settings, then launch the Qt UI."""
    settings = get_settings()
    logger = configure_logging(settings.log_level)
    logger.info("Starting MockMaster (model %s)…", settings.gemini_model)
    if not settings.gemini_api_key:
        logger.warning("GEMINI_API_KEY is not set; quiz generation will fail until it is provided.")

    app = QApplication(sys.argv)
    controller = QuizSessionController(generator=GeminiQuizGenerator.from_settings(settings))
    window = QuizMainWindow(controller=controller)
    window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
