"""Unit тесты для core/config.py."""

import pytest
from pydantic import ValidationError

from flashme.core.config import GenerationSettings, QuizSettings, Settings
from flashme.core.constants import DEFAULT_MAX_TEXT_LENGTH, DEFAULT_QUESTIONS_LIMIT
from flashme.core.enums import GenerationProvider


class TestSettings:
    """Тесты для Settings."""

    def test_defaults(self) -> None:
        """Тест значений по умолчанию."""
        config = Settings(_env_file=None)

        assert config.app_name == "flashme"
        assert config.quiz.max_text_length == DEFAULT_MAX_TEXT_LENGTH
        assert config.quiz.default_questions_limit == DEFAULT_QUESTIONS_LIMIT
        assert config.quiz.max_concurrent_generations is None
        assert config.generation.provider == GenerationProvider.OPENAI
        assert config.generation.timeout_seconds is None
        assert config.generation.llm_titles is False
        assert config.log.format == "text"

    def test_nested_env_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Тест переопределения через FLASHME__SECTION__FIELD."""
        monkeypatch.setenv("FLASHME__QUIZ__MAX_TEXT_LENGTH", "20000")
        monkeypatch.setenv("FLASHME__GENERATION__PROVIDER", "anthropic")
        monkeypatch.setenv("FLASHME__LOG__FORMAT", "json")

        config = Settings(_env_file=None)

        assert config.quiz.max_text_length == 20000
        assert config.generation.provider == GenerationProvider.ANTHROPIC
        assert config.log.format == "json"

    def test_invalid_log_level(self) -> None:
        """Тест: неизвестный уровень логирования отклоняется."""
        with pytest.raises(ValidationError):
            Settings(_env_file=None, log={"level": "VERBOSE"})


class TestGenerationSettings:
    """Тесты для GenerationSettings."""

    @pytest.mark.parametrize("value", [None, ""])
    def test_empty_api_key_is_none(self, value: str | None) -> None:
        """Тест: пустой ключ нормализуется в None."""
        assert GenerationSettings(api_key=value).api_key is None

    def test_short_api_key_rejected(self) -> None:
        """Тест: слишком короткий ключ."""
        with pytest.raises(ValidationError, match="слишком короткий"):
            GenerationSettings(api_key="short")

    def test_answers_per_question_minimum(self) -> None:
        """Тест: меньше двух вариантов ответа запрещено."""
        with pytest.raises(ValidationError, match="answers_per_question"):
            GenerationSettings(answers_per_question=1)

        assert GenerationSettings(answers_per_question=2).answers_per_question == 2

    def test_temperature_bounds(self) -> None:
        """Тест границ температуры."""
        with pytest.raises(ValidationError):
            GenerationSettings(temperature=2.5)


class TestQuizSettings:
    """Тесты для QuizSettings."""

    def test_max_text_length_positive(self) -> None:
        """Тест: длина текста должна быть положительной."""
        with pytest.raises(ValidationError):
            QuizSettings(max_text_length=0)
