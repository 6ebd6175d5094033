"""
Shared fixtures: an offscreen Qt application and small quiz builders.
"""
from __future__ import annotations

import os

import pytest

# Widgets are created without a display during tests.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PySide6.QtCore import QCoreApplication, Qt  # noqa: E402
from PySide6.QtWidgets import QApplication  # noqa: E402

from mockmaster.core.errors import GenerationFailed  # noqa: E402
from mockmaster.core.models import Difficulty, Question, Quiz  # noqa: E402


@pytest.fixture(scope="session")
def qt_app():
    app = QApplication.instance()
    if app is None:
        QCoreApplication.setAttribute(Qt.AA_ShareOpenGLContexts)
        app = QApplication([])
    yield app


def build_question(question_id: int, correct_index: int = 0) -> Question:
    return Question(
        id=question_id,
        text=f"Question {question_id}?",
        options=(f"Q{question_id} option A", f"Q{question_id} option B", f"Q{question_id} option C", f"Q{question_id} option D"),
        correct_answer_index=correct_index,
        explanation=f"Because option {correct_index} is right for question {question_id}.",
    )


def build_quiz(
    num_questions: int = 5,
    topic: str = "Photosynthesis",
    difficulty: Difficulty = Difficulty.MEDIUM,
    correct_indices: list[int] | None = None,
) -> Quiz:
    correct_indices = correct_indices or [index % 4 for index in range(num_questions)]
    questions = tuple(
        build_question(question_id=index + 1, correct_index=correct_indices[index])
        for index in range(num_questions)
    )
    return Quiz(topic=topic, difficulty=difficulty, questions=questions)


class FakeGenerator:
    """Generator double that records calls and returns canned quizzes."""

    def __init__(self, error: Exception | None = None, correct_indices: list[int] | None = None) -> None:
        self.calls: list[tuple[str, Difficulty, int]] = []
        self.error = error
        self.correct_indices = correct_indices

    def generate(self, topic: str, difficulty: Difficulty, num_questions: int) -> Quiz:
        self.calls.append((topic, difficulty, num_questions))
        if self.error is not None:
            raise self.error
        return build_quiz(num_questions, topic, difficulty, self.correct_indices)


class SignalRecorder:
    """Collects every emission of a Qt signal."""

    def __init__(self, signal) -> None:
        self.emissions: list[tuple] = []
        signal.connect(self._record)

    def _record(self, *args) -> None:
        self.emissions.append(args)

    @property
    def count(self) -> int:
        return len(self.emissions)

    @property
    def last(self):
        return self.emissions[-1] if self.emissions else None


@pytest.fixture
def fake_generator() -> FakeGenerator:
    return FakeGenerator()


@pytest.fixture
def failing_generator() -> FakeGenerator:
    return FakeGenerator(error=GenerationFailed("model returned garbage"))


@pytest.fixture
def run_now():
    """Launcher that runs generation tasks synchronously on the calling thread."""
    return lambda task: task.run()
