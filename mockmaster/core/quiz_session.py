"""Pure transition functions over :class:`QuizState`.

Every function returns a new state and never touches its input, so the
session controller is the only place where the current state is swapped.
Invalid events come back as the unchanged state object; callers can compare
identities to tell whether anything happened.
"""

from __future__ import annotations

from dataclasses import replace
from types import MappingProxyType
from typing import Mapping

from mockmaster.core.models import OPTION_COUNT, QuestionReview, Quiz, QuizState


def initial_state() -> QuizState:
    return QuizState()


def with_answer(state: QuizState, quiz: Quiz, question_id: int, option_index: int) -> QuizState:
    """Record ``option_index`` for ``question_id``, overwriting any earlier pick."""
    if state.is_finished:
        return state
    if not quiz.has_question(question_id):
        return state
    if not 0 <= option_index < OPTION_COUNT:
        return state
    answers = dict(state.answers)
    answers[question_id] = option_index
    return replace(state, answers=MappingProxyType(answers))


def advanced(state: QuizState, quiz: Quiz) -> QuizState:
    if state.is_finished:
        return state
    if state.current_question_index >= quiz.question_count - 1:
        return state
    return replace(state, current_question_index=state.current_question_index + 1)


def finished(state: QuizState, quiz: Quiz) -> QuizState:
    if state.is_finished:
        return state
    return replace(state, is_finished=True, score=compute_score(quiz, state.answers))


def compute_score(quiz: Quiz, answers: Mapping[int, int]) -> int:
    """Count questions whose stored answer equals the correct index.

    Unanswered questions score nothing; there is no partial credit.
    """
    return sum(
        1
        for question in quiz.questions
        if answers.get(question.id) == question.correct_answer_index
    )


def build_breakdown(quiz: Quiz, state: QuizState) -> list[QuestionReview]:
    reviews: list[QuestionReview] = []
    for question in quiz.questions:
        selected = state.answers.get(question.id)
        reviews.append(
            QuestionReview(
                question=question,
                selected_index=selected,
                is_correct=selected == question.correct_answer_index,
            )
        )
    return reviews


def score_percentage(score: int, total: int) -> int:
    if total <= 0:
        return 0
    # Half rounds up, matching how the score is shown to users.
    return int(score * 100 / total + 0.5)


def score_message(percentage: int) -> str:
    if percentage >= 100:
        return "Perfect Score!"
    if percentage >= 80:
        return "Excellent Job!"
    if percentage >= 60:
        return "Good Effort!"
    return "Keep practicing!"


def format_clock(seconds: int) -> str:
    seconds = max(0, seconds)
    minutes, remainder = divmod(seconds, 60)
    return f"{minutes}:{remainder:02d}"
