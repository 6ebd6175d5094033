"""Exception types raised by the quiz core."""

from __future__ import annotations


class MockMasterError(Exception):
    """Base exception for all MockMaster errors."""


class QuizValidationError(MockMasterError, ValueError):
    """Raised when quiz start parameters are rejected before generation."""


class GenerationFailed(MockMasterError):
    """Raised when the generation service fails or returns an unusable quiz."""

    def __init__(self, message: str, raw_text: str | None = None) -> None:
        self.raw_text = raw_text
        super().__init__(message)
