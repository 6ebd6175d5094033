"""Domain models for the mock test generator."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from types import MappingProxyType
from typing import Mapping

OPTION_COUNT: int = 4


class Difficulty(str, Enum):
    """Difficulty levels offered to the generation service."""

    EASY = "Easy"
    MEDIUM = "Medium"
    HARD = "Hard"
    EXPERT = "Expert"


class ViewState(Enum):
    """Screen currently shown by the application."""

    SETUP = "setup"
    ACTIVE = "active"
    RESULT = "result"


@dataclass(frozen=True, slots=True)
class Question:
    """Multiple-choice question with exactly four options."""

    id: int
    text: str
    options: tuple[str, ...]
    correct_answer_index: int
    explanation: str

    def __post_init__(self) -> None:
        if not self.text.strip():
            raise ValueError("Question text must not be empty.")
        if len(self.options) != OPTION_COUNT:
            raise ValueError("Each question must have exactly four options.")
        if len(set(self.options)) != OPTION_COUNT:
            raise ValueError("Question options must be distinct.")
        if not 0 <= self.correct_answer_index < OPTION_COUNT:
            raise ValueError("Correct option index must be between 0 and 3.")
        if not self.explanation.strip():
            raise ValueError("Question explanation must not be empty.")


@dataclass(frozen=True, slots=True)
class Quiz:
    """A generated quiz. Replaced wholesale, never edited."""

    topic: str
    difficulty: Difficulty
    questions: tuple[Question, ...]
    created_at: datetime = field(default_factory=datetime.now)

    def __post_init__(self) -> None:
        if not self.topic.strip():
            raise ValueError("Quiz topic must not be empty.")
        if not self.questions:
            raise ValueError("Quiz must contain at least one question.")
        ids = [question.id for question in self.questions]
        if len(set(ids)) != len(ids):
            raise ValueError("Question ids must be unique within a quiz.")

    @property
    def question_count(self) -> int:
        return len(self.questions)

    def has_question(self, question_id: int) -> bool:
        return any(question.id == question_id for question in self.questions)


@dataclass(frozen=True, slots=True)
class QuizState:
    """Progress of one quiz session.

    ``answers`` maps question id to the selected option index. ``score`` is
    only meaningful once ``is_finished`` is set.
    """

    current_question_index: int = 0
    answers: Mapping[int, int] = field(default_factory=lambda: MappingProxyType({}))
    is_finished: bool = False
    score: int = 0


@dataclass(frozen=True, slots=True)
class QuestionReview:
    """Per-question line of the result breakdown."""

    question: Question
    selected_index: int | None
    is_correct: bool

    @property
    def was_answered(self) -> bool:
        return self.selected_index is not None
