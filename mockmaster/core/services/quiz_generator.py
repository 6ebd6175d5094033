"""Gateway to the quiz generation service (Google Gemini)."""

from __future__ import annotations

import logging
from typing import Protocol

import google.generativeai as genai

from mockmaster.config import Settings
from mockmaster.core.errors import GenerationFailed
from mockmaster.core.models import Difficulty, Quiz
from mockmaster.core.quiz_schema import parse_generated_quiz

logger = logging.getLogger(__name__)

SYSTEM_INSTRUCTION = (
    "You are an expert tutor and examiner capable of creating high-quality, accurate, "
    "and educational quiz questions for any subject."
)

_PROMPT_TEMPLATE = """Create a multiple-choice mock test about "{topic}".
Difficulty Level: {difficulty}.
Number of Questions: {count}.

Ensure the questions are challenging and relevant to the difficulty level.
Provide exactly 4 distinct options for each question.
The output must be a valid JSON array where every item has the fields:
  "id": integer, unique, 1-based position of the question,
  "text": string, the question,
  "options": array of exactly 4 strings,
  "correctAnswerIndex": integer from 0 to 3 pointing into "options",
  "explanation": string, a brief explanation of why the answer is correct.
Return only the JSON array."""


class QuizGenerator(Protocol):
    """Anything that can turn a topic request into a validated quiz."""

    def generate(self, topic: str, difficulty: Difficulty, num_questions: int) -> Quiz:
        ...


def build_prompt(topic: str, difficulty: Difficulty, num_questions: int) -> str:
    return _PROMPT_TEMPLATE.format(topic=topic, difficulty=difficulty.value, count=num_questions)


class GeminiQuizGenerator:
    """Generates quizzes with a single Gemini call per request."""

    def __init__(self, api_key: str, model_name: str, timeout_seconds: float = 60.0) -> None:
        self._api_key = api_key
        self._model_name = model_name
        self._timeout_seconds = timeout_seconds

    @classmethod
    def from_settings(cls, settings: Settings) -> GeminiQuizGenerator:
        return cls(
            api_key=settings.gemini_api_key,
            model_name=settings.gemini_model,
            timeout_seconds=settings.generation_timeout_seconds,
        )

    def generate(self, topic: str, difficulty: Difficulty, num_questions: int) -> Quiz:
        if not self._api_key:
            raise GenerationFailed("No Gemini API key configured (set GEMINI_API_KEY).")

        logger.info(
            "Requesting %s %s questions on %r from %s",
            num_questions,
            difficulty.value,
            topic,
            self._model_name,
        )
        raw_text = self._request(build_prompt(topic, difficulty, num_questions))
        quiz = parse_generated_quiz(raw_text, topic, difficulty, num_questions)
        logger.info("Received a valid quiz with %s questions", quiz.question_count)
        return quiz

    def _request(self, prompt: str) -> str:
        genai.configure(api_key=self._api_key)
        model = genai.GenerativeModel(self._model_name, system_instruction=SYSTEM_INSTRUCTION)
        response = model.generate_content(
            prompt,
            generation_config={"response_mime_type": "application/json"},
            request_options={"timeout": self._timeout_seconds},
        )
        # ``response.text`` raises when the candidate was blocked or is empty.
        try:
            text = response.text
        except ValueError as exc:
            raise GenerationFailed(f"No usable response from Gemini: {exc}") from exc
        return (text or "").strip()
