"""Component for choosing the topic, difficulty and length of a new test."""

from __future__ import annotations

import logging

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QButtonGroup,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from mockmaster.constants.quiz_constants import (
    DEFAULT_DIFFICULTY_LABEL,
    DEFAULT_QUESTION_COUNT,
    QUESTION_COUNT_CHOICES,
)
from mockmaster.constants.ui_constants import (
    GENERATION_FAILED_MESSAGE,
    SETUP_COUNT_LABEL,
    SETUP_DIFFICULTY_LABEL,
    SETUP_GENERATE_BUTTON,
    SETUP_GENERATING_BUTTON,
    SETUP_SUBTITLE,
    SETUP_TITLE,
    SETUP_TOPIC_LABEL,
    SETUP_TOPIC_PLACEHOLDER,
)
from mockmaster.core.errors import QuizValidationError
from mockmaster.core.models import Difficulty
from mockmaster.core.services.session_controller import QuizSessionController
from mockmaster.ui.dialog_helpers import show_error, show_warning
from mockmaster.styling.styles import Styles

logger = logging.getLogger(__name__)


class SetupPanel(QWidget):
    """Form that submits (topic, difficulty, count) to the controller."""

    def __init__(self, controller: QuizSessionController, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.controller = controller
        self._build_ui()

        self.controller.generating_changed.connect(self._handle_generating_changed)
        self.controller.generation_failed.connect(self._handle_generation_failed)

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        title = QLabel(SETUP_TITLE, self)
        title.setAlignment(Qt.AlignCenter)
        title.setStyleSheet(Styles.get_title_style())
        layout.addWidget(title)

        subtitle = QLabel(SETUP_SUBTITLE, self)
        subtitle.setAlignment(Qt.AlignCenter)
        subtitle.setWordWrap(True)
        subtitle.setStyleSheet(Styles.get_secondary_label_style())
        layout.addWidget(subtitle)

        # Topic
        layout.addWidget(QLabel(SETUP_TOPIC_LABEL, self))
        self.topic_input = QLineEdit(self)
        self.topic_input.setPlaceholderText(SETUP_TOPIC_PLACEHOLDER)
        self.topic_input.returnPressed.connect(self._handle_generate)
        layout.addWidget(self.topic_input)

        # Difficulty
        layout.addWidget(QLabel(SETUP_DIFFICULTY_LABEL, self))
        difficulty_row = QHBoxLayout()
        self.difficulty_group = QButtonGroup(self)
        self.difficulty_buttons: dict[Difficulty, QPushButton] = {}
        for difficulty in Difficulty:
            button = QPushButton(difficulty.value, self)
            button.setCheckable(True)
            button.setChecked(difficulty.value == DEFAULT_DIFFICULTY_LABEL)
            self.difficulty_group.addButton(button)
            self.difficulty_buttons[difficulty] = button
            difficulty_row.addWidget(button)
        layout.addLayout(difficulty_row)

        # Question count
        layout.addWidget(QLabel(SETUP_COUNT_LABEL, self))
        count_row = QHBoxLayout()
        self.count_group = QButtonGroup(self)
        self.count_buttons: dict[int, QPushButton] = {}
        for count in QUESTION_COUNT_CHOICES:
            button = QPushButton(str(count), self)
            button.setCheckable(True)
            button.setChecked(count == DEFAULT_QUESTION_COUNT)
            self.count_group.addButton(button)
            self.count_buttons[count] = button
            count_row.addWidget(button)
        layout.addLayout(count_row)

        self.generate_button = QPushButton(SETUP_GENERATE_BUTTON, self)
        self.generate_button.clicked.connect(self._handle_generate)
        layout.addWidget(self.generate_button)

        layout.addStretch()

    def selected_difficulty(self) -> Difficulty:
        for difficulty, button in self.difficulty_buttons.items():
            if button.isChecked():
                return difficulty
        return Difficulty(DEFAULT_DIFFICULTY_LABEL)

    def selected_count(self) -> int:
        for count, button in self.count_buttons.items():
            if button.isChecked():
                return count
        return DEFAULT_QUESTION_COUNT

    def _handle_generate(self) -> None:
        if self.controller.is_generating:
            return
        try:
            self.controller.start_quiz(
                self.topic_input.text(),
                self.selected_difficulty(),
                self.selected_count(),
            )
        except QuizValidationError as exc:
            show_warning(self, "Invalid test settings", str(exc))

    def _handle_generating_changed(self, generating: bool) -> None:
        self.generate_button.setText(SETUP_GENERATING_BUTTON if generating else SETUP_GENERATE_BUTTON)
        for widget in (
            self.generate_button,
            self.topic_input,
            *self.difficulty_buttons.values(),
            *self.count_buttons.values(),
        ):
            widget.setEnabled(not generating)

    def _handle_generation_failed(self, reason: str) -> None:
        logger.info("Showing generation failure notice (%s)", reason)
        show_error(self, "Generation failed", GENERATION_FAILED_MESSAGE)

    def reset_state(self) -> None:
        """Clear the topic but keep the last difficulty and length."""
        self.topic_input.clear()
        self.topic_input.setFocus()
