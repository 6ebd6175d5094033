"""Owner of the quiz session: current quiz, its state, the view and the clock."""

from __future__ import annotations

import logging
from typing import Callable

from PySide6.QtCore import QObject, Signal, Slot

from mockmaster.core import quiz_session
from mockmaster.core.errors import QuizValidationError
from mockmaster.core.models import Difficulty, Question, Quiz, QuizState, ViewState
from mockmaster.core.services.countdown_timer import CountdownTimer, budget_for
from mockmaster.core.services.generation_task import GenerationTask, run_in_thread_pool
from mockmaster.core.services.quiz_generator import QuizGenerator

logger = logging.getLogger(__name__)

TaskLauncher = Callable[[GenerationTask], None]


def validate_start_request(topic: str, difficulty: Difficulty | str, num_questions: int) -> tuple[str, Difficulty, int]:
    """Normalize start parameters or raise :class:`QuizValidationError`."""
    if not isinstance(topic, str) or not topic.strip():
        raise QuizValidationError("Topic must not be empty.")
    try:
        level = Difficulty(difficulty)
    except ValueError as exc:
        raise QuizValidationError(f"Unknown difficulty: {difficulty!r}.") from exc
    if isinstance(num_questions, bool) or not isinstance(num_questions, int) or num_questions <= 0:
        raise QuizValidationError("Number of questions must be a positive integer.")
    return topic.strip(), level, num_questions


class QuizSessionController(QObject):
    """Event-driven state container for one user's quiz sessions.

    All mutations go through the public event methods. Widgets subscribe to
    the signals and read the accessors; they never hold quiz state.
    """

    view_changed = Signal(object)  # ViewState
    state_changed = Signal(object)  # QuizState
    generating_changed = Signal(bool)
    generation_started = Signal()
    generation_failed = Signal(str)
    time_remaining_changed = Signal(int)

    def __init__(
        self,
        generator: QuizGenerator,
        launcher: TaskLauncher | None = None,
        timer: CountdownTimer | None = None,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self._generator = generator
        self._launcher = launcher or run_in_thread_pool

        self._view = ViewState.SETUP
        self._quiz: Quiz | None = None
        self._state: QuizState = quiz_session.initial_state()

        self._generating = False
        self._request_counter = 0
        self._pending_task: GenerationTask | None = None

        self._session_counter = 0
        self._time_remaining = 0
        self._timer = timer or CountdownTimer(self)
        self._timer.ticked.connect(self._on_timer_ticked)
        self._timer.expired.connect(self._on_timer_expired)

    # --- Accessors ---

    @property
    def view(self) -> ViewState:
        return self._view

    @property
    def quiz(self) -> Quiz | None:
        return self._quiz

    @property
    def state(self) -> QuizState:
        return self._state

    @property
    def is_generating(self) -> bool:
        return self._generating

    @property
    def time_remaining(self) -> int:
        return self._time_remaining

    @property
    def session_id(self) -> int:
        return self._session_counter

    @property
    def timer(self) -> CountdownTimer:
        return self._timer

    def current_question(self) -> Question | None:
        if self._quiz is None:
            return None
        return self._quiz.questions[self._state.current_question_index]

    def is_last_question(self) -> bool:
        if self._quiz is None:
            return False
        return self._state.current_question_index == self._quiz.question_count - 1

    def has_answered_current(self) -> bool:
        question = self.current_question()
        return question is not None and question.id in self._state.answers

    # --- Events ---

    def start_quiz(self, topic: str, difficulty: Difficulty | str, num_questions: int) -> bool:
        """Request a new quiz. Returns True when a generation call was dispatched.

        Raises QuizValidationError for bad parameters without touching state.
        """
        clean_topic, level, count = validate_start_request(topic, difficulty, num_questions)

        if self._generating:
            logger.warning("Ignoring start request for %r: a generation is already in flight", clean_topic)
            return False
        if self._view != ViewState.SETUP:
            logger.warning("Ignoring start request outside the setup view (%s)", self._view.value)
            return False

        self._request_counter += 1
        task = GenerationTask(self._request_counter, self._generator, clean_topic, level, count)
        task.signals.succeeded.connect(self._on_generation_succeeded)
        task.signals.failed.connect(self._on_generation_failed)
        self._pending_task = task
        self._set_generating(True)
        self.generation_started.emit()
        logger.info("Generating %s %s questions on %r", count, level.value, clean_topic)
        self._launcher(task)
        return True

    def record_answer(self, question_id: int, option_index: int) -> None:
        if self._quiz is None or self._view != ViewState.ACTIVE:
            logger.debug("Answer for question %s ignored: no active quiz", question_id)
            return
        new_state = quiz_session.with_answer(self._state, self._quiz, question_id, option_index)
        if new_state is self._state:
            logger.debug("Answer %s for question %s ignored", option_index, question_id)
            return
        self._set_state(new_state)

    def advance(self) -> None:
        if self._quiz is None or self._view != ViewState.ACTIVE:
            return
        new_state = quiz_session.advanced(self._state, self._quiz)
        if new_state is not self._state:
            self._set_state(new_state)

    def finish(self) -> None:
        if self._quiz is None:
            return
        self._timer.stop()
        if self._state.is_finished:
            return
        self._set_state(quiz_session.finished(self._state, self._quiz))
        logger.info("Quiz finished with score %s/%s", self._state.score, self._quiz.question_count)
        self._set_view(ViewState.RESULT)

    def retry(self) -> None:
        if self._quiz is None:
            return
        self._timer.stop()
        self._begin_session()

    def reset(self) -> None:
        self._timer.stop()
        self._session_counter += 1
        if self._generating:
            # A result for the abandoned request must not leave setup.
            self._request_counter += 1
            self._pending_task = None
            self._set_generating(False)
        self._quiz = None
        self._set_time_remaining(0)
        self._set_state(quiz_session.initial_state())
        self._set_view(ViewState.SETUP)

    # --- Generation callbacks ---

    @Slot(int, object)
    def _on_generation_succeeded(self, request_id: int, quiz: Quiz) -> None:
        if request_id != self._request_counter:
            logger.debug("Dropping result of superseded request %s", request_id)
            return
        self._pending_task = None
        self._set_generating(False)
        self._quiz = quiz
        self._begin_session()

    @Slot(int, str)
    def _on_generation_failed(self, request_id: int, reason: str) -> None:
        if request_id != self._request_counter:
            return
        self._pending_task = None
        self._set_generating(False)
        self.generation_failed.emit(reason)

    # --- Timer callbacks ---

    @Slot(int, int)
    def _on_timer_ticked(self, session_id: int, seconds_remaining: int) -> None:
        if session_id != self._session_counter:
            return
        self._set_time_remaining(seconds_remaining)

    @Slot(int)
    def _on_timer_expired(self, session_id: int) -> None:
        if session_id != self._session_counter or self._view != ViewState.ACTIVE:
            logger.debug("Ignoring expiry from stale session %s", session_id)
            return
        self.finish()

    # --- Internals ---

    def _begin_session(self) -> None:
        if self._quiz is None:
            logger.warning("Cannot begin a session without a quiz")
            return
        self._session_counter += 1
        self._set_state(quiz_session.initial_state())
        self._timer.start(self._session_counter, budget_for(self._quiz.question_count))
        self._set_view(ViewState.ACTIVE)

    def _set_state(self, state: QuizState) -> None:
        self._state = state
        self.state_changed.emit(state)

    def _set_view(self, view: ViewState) -> None:
        if view == self._view:
            return
        logger.debug("View %s -> %s", self._view.value, view.value)
        self._view = view
        self.view_changed.emit(view)

    def _set_generating(self, generating: bool) -> None:
        self._generating = generating
        self.generating_changed.emit(generating)

    def _set_time_remaining(self, seconds: int) -> None:
        self._time_remaining = seconds
        self.time_remaining_changed.emit(seconds)
