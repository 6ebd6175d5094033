# tests/test_quiz_schema.py

import json

import pytest

from mockmaster.core.errors import GenerationFailed
from mockmaster.core.models import Difficulty
from mockmaster.core.quiz_schema import parse_generated_quiz, strip_code_fences


def payload_item(question_id=1, **overrides):
    item = {
        "id": question_id,
        "text": f"What is fact {question_id}?",
        "options": ["Alpha", "Beta", "Gamma", "Delta"],
        "correctAnswerIndex": 1,
        "explanation": "Beta is the documented answer.",
    }
    item.update(overrides)
    return item


def payload(count=2, **overrides):
    return json.dumps([payload_item(index + 1, **overrides) for index in range(count)])


def parse(raw, count=2):
    return parse_generated_quiz(raw, "Greek letters", Difficulty.EASY, count)


class TestParseGeneratedQuiz:
    """Validation boundary for generation responses"""

    def test_valid_payload_builds_quiz(self):
        quiz = parse(payload())

        assert quiz.topic == "Greek letters"
        assert quiz.difficulty == Difficulty.EASY
        assert quiz.question_count == 2
        first = quiz.questions[0]
        assert first.options == ("Alpha", "Beta", "Gamma", "Delta")
        assert first.correct_answer_index == 1

    def test_code_fenced_payload_is_accepted(self):
        quiz = parse(f"```json\n{payload()}\n```")
        assert quiz.question_count == 2

    def test_wrapped_questions_object_is_accepted(self):
        raw = json.dumps({"questions": [payload_item(1), payload_item(2)]})
        assert parse(raw).question_count == 2

    def test_snake_case_index_is_accepted(self):
        item = payload_item(1)
        item["correct_answer_index"] = item.pop("correctAnswerIndex")
        assert parse(json.dumps([item]), count=1).questions[0].correct_answer_index == 1

    def test_whitespace_is_trimmed(self):
        raw = json.dumps([payload_item(1, text="  Padded?  ", options=[" a", "b ", "c", "d"])])
        question = parse(raw, count=1).questions[0]
        assert question.text == "Padded?"
        assert question.options == ("a", "b", "c", "d")

    @pytest.mark.parametrize("raw", [None, "", "   "])
    def test_empty_response_fails(self, raw):
        with pytest.raises(GenerationFailed):
            parse(raw)

    def test_invalid_json_fails(self):
        with pytest.raises(GenerationFailed) as exc_info:
            parse("[{not json")
        assert exc_info.value.raw_text == "[{not json"

    def test_wrong_question_count_fails(self):
        with pytest.raises(GenerationFailed, match="Expected 3"):
            parse(payload(2), count=3)

    @pytest.mark.parametrize(
        "overrides",
        [
            {"options": ["A", "B", "C"]},
            {"options": ["A", "B", "C", "D", "E"]},
            {"options": ["A", "A", "C", "D"]},
            {"options": ["A", "", "C", "D"]},
            {"correctAnswerIndex": 4},
            {"correctAnswerIndex": -1},
            {"correctAnswerIndex": "1"},
            {"text": "   "},
            {"explanation": ""},
            {"id": "one"},
        ],
    )
    def test_structurally_invalid_question_fails(self, overrides):
        with pytest.raises(GenerationFailed):
            parse(payload(1, **overrides), count=1)

    def test_missing_field_fails(self):
        item = payload_item(1)
        del item["explanation"]
        with pytest.raises(GenerationFailed):
            parse(json.dumps([item]), count=1)

    def test_duplicate_ids_fail(self):
        raw = json.dumps([payload_item(1), payload_item(1)])
        with pytest.raises(GenerationFailed):
            parse(raw)

    def test_non_list_payload_fails(self):
        with pytest.raises(GenerationFailed):
            parse(json.dumps({"text": "not a list"}))


class TestStripCodeFences:
    """Markdown fence removal"""

    def test_plain_text_untouched(self):
        assert strip_code_fences(' [1, 2] ') == "[1, 2]"

    def test_fences_removed(self):
        assert strip_code_fences("```json\n[1]\n```") == "[1]"
        assert strip_code_fences("```\n[1]\n```") == "[1]"
