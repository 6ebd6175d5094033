"""Qt main window hosting the setup, active quiz and result screens."""

from __future__ import annotations

from datetime import date

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QPushButton,
    QStackedWidget,
    QVBoxLayout,
    QWidget,
)

from mockmaster.constants.about import (
    APP_ABOUT_TEXT,
    APP_LICENSE,
    APP_NAME,
    APP_VERSION,
    HELP_TEXT,
)
from mockmaster.constants.ui_constants import (
    FOOTER_TEXT,
    HEADER_ABOUT_BUTTON,
    HEADER_HELP_BUTTON,
    HEADER_NEW_TOPIC_BUTTON,
    WINDOW_TITLE,
)
from mockmaster.core.models import ViewState
from mockmaster.core.services.session_controller import QuizSessionController
from mockmaster.ui.components.active_quiz_panel import ActiveQuizPanel
from mockmaster.ui.components.result_panel import ResultPanel
from mockmaster.ui.components.setup_panel import SetupPanel
from mockmaster.ui.dialog_helpers import confirm_abandon_quiz, show_info
from mockmaster.ui.view_router import ViewRouter
from mockmaster.styling.styles import Styles


class QuizMainWindow(QMainWindow):
    """Main Qt window; the router decides which screen is visible."""

    def __init__(self, controller: QuizSessionController) -> None:
        super().__init__()
        self.setWindowTitle(WINDOW_TITLE)
        self.resize(900, 760)

        self.controller = controller

        self._build_ui()
        self.setStyleSheet(Styles.get_main_window_style())
        self.controller.view_changed.connect(self._handle_view_changed)

    def _build_ui(self) -> None:
        central_widget = QWidget(self)
        self.setCentralWidget(central_widget)

        root_layout = QVBoxLayout()
        central_widget.setLayout(root_layout)

        self._build_header(root_layout)

        self.view_stack = QStackedWidget(self)
        self.setup_panel = SetupPanel(self.controller, self)
        self.active_panel = ActiveQuizPanel(self.controller, self)
        self.result_panel = ResultPanel(self.controller, self)
        self.router = ViewRouter(
            self.controller,
            self.view_stack,
            {
                ViewState.SETUP: self.setup_panel,
                ViewState.ACTIVE: self.active_panel,
                ViewState.RESULT: self.result_panel,
            },
        )
        root_layout.addWidget(self.view_stack, stretch=1)

        footer = QLabel(f"© {date.today().year} {FOOTER_TEXT}", self)
        footer.setAlignment(Qt.AlignCenter)
        footer.setStyleSheet(Styles.get_secondary_label_style())
        root_layout.addWidget(footer)

    def _build_header(self, layout: QVBoxLayout) -> None:
        header_row = QHBoxLayout()

        title = QLabel(APP_NAME, self)
        title.setStyleSheet(Styles.get_large_label_style())
        header_row.addWidget(title)
        header_row.addStretch()

        self.new_topic_button = QPushButton(HEADER_NEW_TOPIC_BUTTON, self)
        self.new_topic_button.clicked.connect(self._handle_new_topic)
        header_row.addWidget(self.new_topic_button)

        self.help_button = QPushButton(HEADER_HELP_BUTTON, self)
        self.help_button.clicked.connect(self._handle_help)
        header_row.addWidget(self.help_button)

        self.about_button = QPushButton(HEADER_ABOUT_BUTTON, self)
        self.about_button.clicked.connect(self._handle_about)
        header_row.addWidget(self.about_button)

        layout.addLayout(header_row)

    def _handle_new_topic(self) -> None:
        if self.controller.view == ViewState.ACTIVE and not confirm_abandon_quiz(self):
            return
        self.controller.reset()

    def _handle_view_changed(self, view: ViewState) -> None:
        if view == ViewState.SETUP:
            self.setup_panel.reset_state()

    def _handle_about(self) -> None:
        details = (
            f"{APP_NAME} v{APP_VERSION}\n"
            f"License: {APP_LICENSE}\n\n"
            f"{APP_ABOUT_TEXT}"
        )
        show_info(self, f"About {APP_NAME}", details)

    def _handle_help(self) -> None:
        show_info(self, f"{APP_NAME} Help", HELP_TEXT)
