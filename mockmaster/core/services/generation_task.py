"""Runs one quiz generation request off the GUI thread."""

from __future__ import annotations

import logging

from PySide6.QtCore import QObject, QRunnable, QThreadPool, Signal

from mockmaster.core.errors import GenerationFailed
from mockmaster.core.models import Difficulty, Quiz
from mockmaster.core.services.quiz_generator import QuizGenerator

logger = logging.getLogger(__name__)


class GenerationSignals(QObject):
    """Signals for :class:`GenerationTask`; a ``QRunnable`` cannot emit on its own."""

    succeeded = Signal(int, object)  # request_id, Quiz
    failed = Signal(int, str)  # request_id, reason


class GenerationTask(QRunnable):
    """Calls the generator once and reports the outcome through signals."""

    def __init__(
        self,
        request_id: int,
        generator: QuizGenerator,
        topic: str,
        difficulty: Difficulty,
        num_questions: int,
    ) -> None:
        super().__init__()
        self.request_id = request_id
        self.signals = GenerationSignals()
        self._generator = generator
        self._topic = topic
        self._difficulty = difficulty
        self._num_questions = num_questions

    def run(self) -> None:
        try:
            quiz = self._generator.generate(self._topic, self._difficulty, self._num_questions)
            self._check_result(quiz)
        except GenerationFailed as exc:
            logger.warning("Quiz generation failed: %s", exc)
            self.signals.failed.emit(self.request_id, str(exc))
            return
        except Exception as exc:  # any gateway error is a generation failure
            logger.exception("Quiz generation raised an unexpected error")
            self.signals.failed.emit(self.request_id, str(GenerationFailed(str(exc))))
            return
        self.signals.succeeded.emit(self.request_id, quiz)

    def _check_result(self, quiz: object) -> None:
        """Reject anything other than a complete quiz for the requested parameters."""
        if not isinstance(quiz, Quiz):
            raise GenerationFailed(f"Generator returned {type(quiz).__name__} instead of a quiz.")
        if quiz.question_count != self._num_questions:
            raise GenerationFailed(
                f"Expected {self._num_questions} questions but received {quiz.question_count}."
            )
        if quiz.topic != self._topic or quiz.difficulty != self._difficulty:
            raise GenerationFailed("Generated quiz does not match the requested topic and difficulty.")


def run_in_thread_pool(task: GenerationTask) -> None:
    """Default launcher: hand the task to Qt's global thread pool."""
    QThreadPool.globalInstance().start(task)
