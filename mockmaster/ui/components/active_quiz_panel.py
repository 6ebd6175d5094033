"""Component for answering the questions of a running test."""

from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtWebEngineWidgets import QWebEngineView
from PySide6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QProgressBar,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from mockmaster.constants.ui_constants import (
    ACTIVE_ANSWER_RECORDED,
    ACTIVE_FINISH_BUTTON,
    ACTIVE_NEXT_BUTTON,
    ACTIVE_SELECT_OPTION,
)
from mockmaster.core.models import OPTION_COUNT, QuizState, ViewState
from mockmaster.core.quiz_session import format_clock
from mockmaster.core.services.countdown_timer import is_low_time
from mockmaster.core.services.session_controller import QuizSessionController
from mockmaster.ui.question_renderer import render_question_text
from mockmaster.styling.styles import Styles


class ActiveQuizPanel(QWidget):
    """Shows the current question, the options and the countdown."""

    def __init__(self, controller: QuizSessionController, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.controller = controller
        self._game_font_size: int = 16
        self._rendered_question_id: int | None = None

        self._build_ui()

        self.controller.state_changed.connect(self._handle_state_changed)
        self.controller.time_remaining_changed.connect(self._update_clock)
        self.controller.view_changed.connect(self._handle_view_changed)

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        # Progress and clock
        header_row = QHBoxLayout()
        self.progress_label = QLabel("", self)
        header_row.addWidget(self.progress_label)

        self.progress_bar = QProgressBar(self)
        self.progress_bar.setTextVisible(False)
        header_row.addWidget(self.progress_bar, stretch=1)

        self.clock_label = QLabel("0:00", self)
        self.clock_label.setAlignment(Qt.AlignCenter)
        self.clock_label.setStyleSheet(Styles.get_clock_style(low_time=False))
        header_row.addWidget(self.clock_label)
        layout.addLayout(header_row)

        # Question text
        self.question_view = QWebEngineView(self)
        self.question_view.setMinimumHeight(140)
        layout.addWidget(self.question_view, stretch=1)

        # Options
        self.option_buttons: list[QPushButton] = []
        for index in range(OPTION_COUNT):
            button = QPushButton("", self)
            button.clicked.connect(lambda _checked=False, idx=index: self._handle_option_clicked(idx))
            layout.addWidget(button)
            self.option_buttons.append(button)

        # Footer
        footer_row = QHBoxLayout()
        self.status_label = QLabel(ACTIVE_SELECT_OPTION, self)
        self.status_label.setStyleSheet(Styles.get_secondary_label_style())
        footer_row.addWidget(self.status_label)
        footer_row.addStretch()

        self.next_button = QPushButton(ACTIVE_NEXT_BUTTON, self)
        self.next_button.clicked.connect(self._handle_next_clicked)
        footer_row.addWidget(self.next_button)
        layout.addLayout(footer_row)

    def _handle_option_clicked(self, option_index: int) -> None:
        question = self.controller.current_question()
        if question is None:
            return
        self.controller.record_answer(question.id, option_index)

    def _handle_next_clicked(self) -> None:
        if self.controller.is_last_question():
            self.controller.finish()
        else:
            self.controller.advance()

    def _handle_view_changed(self, view: ViewState) -> None:
        if view == ViewState.ACTIVE:
            self._rendered_question_id = None
            self.refresh()
            self._update_clock(self.controller.time_remaining)

    def _handle_state_changed(self, _state: QuizState) -> None:
        if self.controller.view == ViewState.ACTIVE:
            self.refresh()

    def refresh(self) -> None:
        """Redraw everything that depends on the quiz state."""
        quiz = self.controller.quiz
        question = self.controller.current_question()
        if quiz is None or question is None:
            return

        state = self.controller.state
        position = state.current_question_index + 1
        self.progress_label.setText(f"Question {position} / {quiz.question_count}")
        self.progress_bar.setRange(0, quiz.question_count)
        self.progress_bar.setValue(position)

        if self._rendered_question_id != question.id:
            self.question_view.setHtml(render_question_text(question.text, self._game_font_size))
            self._rendered_question_id = question.id

        selected = state.answers.get(question.id)
        for index, (button, option) in enumerate(zip(self.option_buttons, question.options)):
            button.setText(f"{chr(ord('A') + index)}.  {option}")
            button.setStyleSheet(Styles.get_option_button_style(selected == index))

        answered = selected is not None
        self.status_label.setText(ACTIVE_ANSWER_RECORDED if answered else ACTIVE_SELECT_OPTION)
        self.next_button.setText(
            ACTIVE_FINISH_BUTTON if self.controller.is_last_question() else ACTIVE_NEXT_BUTTON
        )
        self.next_button.setEnabled(answered)

    def _update_clock(self, seconds_remaining: int) -> None:
        self.clock_label.setText(format_clock(seconds_remaining))
        low_time = is_low_time(seconds_remaining)
        self.clock_label.setStyleSheet(
            Styles.get_clock_style(low_time=low_time, blink_state=(seconds_remaining % 2 == 0))
        )
