# tests/test_quiz_generator.py

import json
from types import SimpleNamespace

import pytest

from conftest import FakeGenerator, SignalRecorder

from mockmaster.config import Settings
from mockmaster.core.errors import GenerationFailed
from mockmaster.core.models import Difficulty
from mockmaster.core.services import quiz_generator
from mockmaster.core.services.generation_task import GenerationTask
from mockmaster.core.services.quiz_generator import GeminiQuizGenerator, build_prompt


def valid_response_text(count: int) -> str:
    return json.dumps(
        [
            {
                "id": index + 1,
                "text": f"Which stage is number {index + 1}?",
                "options": ["Light reactions", "Calvin cycle", "Glycolysis", "Krebs cycle"],
                "correctAnswerIndex": index % 4,
                "explanation": "Textbook definition.",
            }
            for index in range(count)
        ]
    )


class FakeGenAI:
    """Stands in for the google.generativeai module."""

    def __init__(self, text=None, error=None):
        self.text = text
        self.error = error
        self.configured_key = None
        self.model_name = None
        self.system_instruction = None
        self.calls = []

    def configure(self, api_key):
        self.configured_key = api_key

    def GenerativeModel(self, model_name, system_instruction=None):
        self.model_name = model_name
        self.system_instruction = system_instruction
        return SimpleNamespace(generate_content=self._generate_content)

    def _generate_content(self, prompt, generation_config=None, request_options=None):
        self.calls.append((prompt, generation_config, request_options))
        if self.error is not None:
            raise self.error
        return SimpleNamespace(text=self.text)


@pytest.fixture
def fake_genai(monkeypatch):
    fake = FakeGenAI(text=valid_response_text(5))
    monkeypatch.setattr(quiz_generator, "genai", fake)
    return fake


class TestGeminiQuizGenerator:
    """Gemini gateway behaviour with the SDK replaced"""

    def test_generate_returns_validated_quiz(self, fake_genai):
        generator = GeminiQuizGenerator(api_key="secret", model_name="gemini-test", timeout_seconds=12)

        quiz = generator.generate("Photosynthesis", Difficulty.MEDIUM, 5)

        assert quiz.topic == "Photosynthesis"
        assert quiz.question_count == 5
        assert fake_genai.configured_key == "secret"
        assert fake_genai.model_name == "gemini-test"
        assert fake_genai.system_instruction == quiz_generator.SYSTEM_INSTRUCTION
        prompt, config, options = fake_genai.calls[0]
        assert '"Photosynthesis"' in prompt
        assert "Difficulty Level: Medium" in prompt
        assert "Number of Questions: 5" in prompt
        assert config == {"response_mime_type": "application/json"}
        assert options == {"timeout": 12}

    def test_missing_api_key_fails_without_calling_service(self, fake_genai):
        generator = GeminiQuizGenerator(api_key="", model_name="gemini-test")

        with pytest.raises(GenerationFailed):
            generator.generate("Photosynthesis", Difficulty.MEDIUM, 5)
        assert fake_genai.calls == []

    def test_short_response_fails(self, fake_genai):
        fake_genai.text = valid_response_text(3)
        generator = GeminiQuizGenerator(api_key="secret", model_name="gemini-test")

        with pytest.raises(GenerationFailed):
            generator.generate("Photosynthesis", Difficulty.MEDIUM, 5)

    def test_empty_response_fails(self, fake_genai):
        fake_genai.text = ""
        generator = GeminiQuizGenerator(api_key="secret", model_name="gemini-test")

        with pytest.raises(GenerationFailed):
            generator.generate("Photosynthesis", Difficulty.MEDIUM, 5)

    def test_from_settings(self):
        settings = Settings(_env_file=None, GEMINI_API_KEY="k", GEMINI_MODEL="m", GENERATION_TIMEOUT_SECONDS=5)
        generator = GeminiQuizGenerator.from_settings(settings)
        assert generator._api_key == "k"
        assert generator._model_name == "m"
        assert generator._timeout_seconds == 5

    def test_build_prompt_mentions_four_options(self):
        prompt = build_prompt("Rust lifetimes", Difficulty.EXPERT, 10)
        assert "exactly 4" in prompt
        assert "Difficulty Level: Expert" in prompt


class TestGenerationTask:
    """Worker reporting through signals"""

    def test_success_emits_quiz(self, qt_app):
        task = GenerationTask(3, FakeGenerator(), "Botany", Difficulty.EASY, 5)
        successes = SignalRecorder(task.signals.succeeded)

        task.run()

        request_id, quiz = successes.last
        assert request_id == 3
        assert quiz.topic == "Botany"

    def test_sdk_error_becomes_failure(self, qt_app, fake_genai):
        fake_genai.error = RuntimeError("quota exceeded")
        generator = GeminiQuizGenerator(api_key="secret", model_name="gemini-test")
        task = GenerationTask(1, generator, "Botany", Difficulty.EASY, 5)
        failures = SignalRecorder(task.signals.failed)

        task.run()

        assert failures.emissions == [(1, "quota exceeded")]
