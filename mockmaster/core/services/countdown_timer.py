"""Per-session countdown clock driven by a Qt timer."""

from __future__ import annotations

from enum import Enum, auto
import logging

from PySide6.QtCore import QObject, QTimer, Signal, Slot

from mockmaster.constants.quiz_constants import (
    LOW_TIME_THRESHOLD_SECONDS,
    SECONDS_PER_QUESTION,
    TIMER_TICK_INTERVAL_MS,
)

logger = logging.getLogger(__name__)


class TimerState(Enum):
    STOPPED = auto()
    RUNNING = auto()
    EXPIRED = auto()


def budget_for(question_count: int) -> int:
    """One minute per question; not configurable."""
    return SECONDS_PER_QUESTION * question_count


def is_low_time(seconds_remaining: int) -> bool:
    return seconds_remaining < LOW_TIME_THRESHOLD_SECONDS


class CountdownTimer(QObject):
    """Counts a session's budget down once per second.

    Every emission carries the id of the session that started the clock so
    that receivers can drop ticks belonging to a session they have moved past.
    """

    ticked = Signal(int, int)  # session_id, seconds remaining
    expired = Signal(int)  # session_id

    def __init__(self, parent: QObject | None = None, interval_ms: int = TIMER_TICK_INTERVAL_MS) -> None:
        super().__init__(parent)
        self._state = TimerState.STOPPED
        self._session_id: int | None = None
        self._remaining: int = 0
        self._qtimer = QTimer(self)
        self._qtimer.setInterval(interval_ms)
        self._qtimer.timeout.connect(self.tick)

    @property
    def state(self) -> TimerState:
        return self._state

    @property
    def session_id(self) -> int | None:
        return self._session_id

    @property
    def remaining(self) -> int:
        return self._remaining

    def start(self, session_id: int, total_seconds: int) -> None:
        """Start a fresh countdown, discarding whatever was running before."""
        self._qtimer.stop()
        self._session_id = session_id
        self._remaining = max(0, total_seconds)
        self._state = TimerState.RUNNING
        logger.debug("Timer started for session %s with %ss", session_id, self._remaining)
        self.ticked.emit(session_id, self._remaining)
        if self._remaining == 0:
            self._expire()
            return
        self._qtimer.start()

    def stop(self) -> None:
        self._qtimer.stop()
        if self._state == TimerState.RUNNING:
            logger.debug("Timer stopped for session %s at %ss", self._session_id, self._remaining)
            self._state = TimerState.STOPPED

    @Slot()
    def tick(self) -> None:
        if self._state != TimerState.RUNNING or self._session_id is None:
            return
        self._remaining = max(0, self._remaining - 1)
        self.ticked.emit(self._session_id, self._remaining)
        if self._remaining == 0:
            self._expire()

    def _expire(self) -> None:
        self._qtimer.stop()
        self._state = TimerState.EXPIRED
        logger.info("Time is up for session %s", self._session_id)
        self.expired.emit(self._session_id)
