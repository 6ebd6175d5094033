"""Component showing the score and per-question breakdown of a finished test."""

from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtWebEngineWidgets import QWebEngineView
from PySide6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from mockmaster.constants.ui_constants import (
    RESULT_BREAKDOWN_TITLE,
    RESULT_NEW_TOPIC_BUTTON,
    RESULT_RETRY_BUTTON,
    RESULT_TITLE,
)
from mockmaster.core.models import ViewState
from mockmaster.core.quiz_session import build_breakdown, score_message, score_percentage
from mockmaster.core.services.session_controller import QuizSessionController
from mockmaster.ui.question_renderer import render_breakdown
from mockmaster.styling.styles import Styles


class ResultPanel(QWidget):
    """Score card with Retry / New Topic actions and a detailed breakdown."""

    def __init__(self, controller: QuizSessionController, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.controller = controller
        self._build_ui()
        self.controller.view_changed.connect(self._handle_view_changed)

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        title = QLabel(RESULT_TITLE, self)
        title.setAlignment(Qt.AlignCenter)
        title.setStyleSheet(Styles.get_title_style())
        layout.addWidget(title)

        self.message_label = QLabel("", self)
        self.message_label.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.message_label)

        score_row = QHBoxLayout()
        score_row.addStretch()
        self.percentage_label = QLabel("0%", self)
        self.percentage_label.setStyleSheet(Styles.get_title_style())
        score_row.addWidget(self.percentage_label)
        score_row.addSpacing(48)
        self.correct_label = QLabel("0/0", self)
        self.correct_label.setStyleSheet(Styles.get_title_style())
        score_row.addWidget(self.correct_label)
        score_row.addStretch()
        layout.addLayout(score_row)

        button_row = QHBoxLayout()
        button_row.addStretch()
        self.retry_button = QPushButton(RESULT_RETRY_BUTTON, self)
        self.retry_button.clicked.connect(self.controller.retry)
        button_row.addWidget(self.retry_button)

        self.new_topic_button = QPushButton(RESULT_NEW_TOPIC_BUTTON, self)
        self.new_topic_button.clicked.connect(self.controller.reset)
        button_row.addWidget(self.new_topic_button)
        button_row.addStretch()
        layout.addLayout(button_row)

        breakdown_title = QLabel(RESULT_BREAKDOWN_TITLE, self)
        breakdown_title.setStyleSheet(Styles.get_large_label_style())
        layout.addWidget(breakdown_title)

        self.breakdown_view = QWebEngineView(self)
        layout.addWidget(self.breakdown_view, stretch=1)

    def _handle_view_changed(self, view: ViewState) -> None:
        if view == ViewState.RESULT:
            self.refresh()

    def refresh(self) -> None:
        quiz = self.controller.quiz
        state = self.controller.state
        if quiz is None or not state.is_finished:
            return

        percentage = score_percentage(state.score, quiz.question_count)
        self.percentage_label.setText(f"{percentage}%")
        self.correct_label.setText(f"{state.score}/{quiz.question_count}")
        self.message_label.setText(score_message(percentage))
        self.message_label.setStyleSheet(Styles.get_score_message_style(percentage))
        self.breakdown_view.setHtml(render_breakdown(build_breakdown(quiz, state)))
