"""Validation boundary between the generation service and the quiz model.

The service answers with untyped JSON. Nothing from it reaches the rest of
the application until it has passed these schemas; every failure is reported
as :class:`GenerationFailed`.
"""

from __future__ import annotations

import json
import re

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError, field_validator

from mockmaster.core.errors import GenerationFailed
from mockmaster.core.models import OPTION_COUNT, Difficulty, Question, Quiz

_FENCE_START_RE = re.compile(r"^```[a-zA-Z0-9_-]*\s*")
_FENCE_END_RE = re.compile(r"\s*```$")


class GeneratedQuestion(BaseModel):
    """One question exactly as the generation service is asked to return it."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore", strict=True)

    id: int
    text: str = Field(min_length=1)
    options: list[str] = Field(min_length=OPTION_COUNT, max_length=OPTION_COUNT)
    correct_answer_index: int = Field(alias="correctAnswerIndex", ge=0, le=OPTION_COUNT - 1)
    explanation: str = Field(min_length=1)

    @field_validator("text", "explanation")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        cleaned = value.strip()
        if not cleaned:
            raise ValueError("must not be blank")
        return cleaned

    @field_validator("options")
    @classmethod
    def _distinct_options(cls, value: list[str]) -> list[str]:
        cleaned = [option.strip() for option in value]
        if any(not option for option in cleaned):
            raise ValueError("option text must not be blank")
        if len(set(cleaned)) != len(cleaned):
            raise ValueError("options must be distinct")
        return cleaned

    def to_question(self) -> Question:
        return Question(
            id=self.id,
            text=self.text,
            options=tuple(self.options),
            correct_answer_index=self.correct_answer_index,
            explanation=self.explanation,
        )


_QUESTION_LIST = TypeAdapter(list[GeneratedQuestion])


def strip_code_fences(text: str) -> str:
    """Remove a surrounding Markdown code fence, if the model added one."""
    stripped = text.strip()
    if stripped.startswith("```"):
        stripped = _FENCE_START_RE.sub("", stripped)
        stripped = _FENCE_END_RE.sub("", stripped)
    return stripped


def parse_generated_quiz(
    raw_text: str | None,
    topic: str,
    difficulty: Difficulty,
    expected_count: int,
) -> Quiz:
    """Validate a raw service response and build a :class:`Quiz` from it."""
    if not raw_text or not raw_text.strip():
        raise GenerationFailed("Empty response from the generation service.", raw_text=raw_text)

    payload_text = strip_code_fences(raw_text)
    try:
        payload = json.loads(payload_text)
    except json.JSONDecodeError as exc:
        raise GenerationFailed(f"Response is not valid JSON: {exc}", raw_text=raw_text) from exc

    # Some models wrap the list in an object such as {"questions": [...]}.
    if isinstance(payload, dict) and isinstance(payload.get("questions"), list):
        payload = payload["questions"]

    try:
        generated = _QUESTION_LIST.validate_python(payload)
    except ValidationError as exc:
        raise GenerationFailed(
            f"Response failed validation with {exc.error_count()} error(s).", raw_text=raw_text
        ) from exc

    if len(generated) != expected_count:
        raise GenerationFailed(
            f"Expected {expected_count} questions but received {len(generated)}.",
            raw_text=raw_text,
        )

    try:
        return Quiz(
            topic=topic,
            difficulty=difficulty,
            questions=tuple(item.to_question() for item in generated),
        )
    except ValueError as exc:
        raise GenerationFailed(str(exc), raw_text=raw_text) from exc
