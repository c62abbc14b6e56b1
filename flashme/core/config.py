"""flashme - Configuration.

Конфигурация приложения через Pydantic Settings.
Строгая типизация, валидация форматов и централизованное управление.
"""

from typing import Literal

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from flashme.core.constants import (
    DEFAULT_ANSWERS_PER_QUESTION,
    DEFAULT_APP_NAME,
    DEFAULT_ERROR_EXCERPT_LENGTH,
    DEFAULT_GENERATION_MODEL,
    DEFAULT_GENERATION_TEMPERATURE,
    DEFAULT_LLM_MAX_RETRIES,
    DEFAULT_MAX_TEXT_LENGTH,
    DEFAULT_MAX_TOKENS,
    DEFAULT_QUESTIONS_COUNT,
    DEFAULT_QUESTIONS_LIMIT,
    DEFAULT_TITLE_MAX_LENGTH,
)
from flashme.core.enums import GenerationProvider


class QuizSettings(BaseModel):
    """Настройки пайплайна генерации квизов."""

    max_text_length: int = Field(
        default=DEFAULT_MAX_TEXT_LENGTH,
        ge=1,
        description="Максимальная длина исходного текста в символах",
    )
    error_excerpt_length: int = Field(
        default=DEFAULT_ERROR_EXCERPT_LENGTH,
        ge=0,
        description="Длина фрагмента текста в диагностике ошибок",
    )
    title_max_length: int = Field(
        default=DEFAULT_TITLE_MAX_LENGTH,
        ge=1,
        description="Максимальная длина заголовка квиза",
    )
    default_questions_limit: int = Field(
        default=DEFAULT_QUESTIONS_LIMIT,
        ge=1,
        description="Количество вопросов в практике по умолчанию",
    )
    max_concurrent_generations: int | None = Field(
        default=None,
        ge=1,
        description="Лимит одновременных генераций (None = без лимита)",
    )


class GenerationSettings(BaseModel):
    """Настройки сервиса генерации вопросов."""

    provider: GenerationProvider = Field(
        default=GenerationProvider.OPENAI,
        description="Провайдер генерации",
    )
    model: str = Field(default=DEFAULT_GENERATION_MODEL, description="Модель LLM")
    api_key: str | None = Field(default=None, description="API ключ провайдера")
    base_url: str | None = Field(default=None, description="Base URL API (опционально)")
    temperature: float = Field(
        default=DEFAULT_GENERATION_TEMPERATURE,
        ge=0.0,
        le=2.0,
        description="Температура генерации",
    )
    questions_count: int = Field(
        default=DEFAULT_QUESTIONS_COUNT,
        ge=1,
        description="Количество вопросов в одном квизе",
    )
    answers_per_question: int = Field(
        default=DEFAULT_ANSWERS_PER_QUESTION,
        description="Количество вариантов ответа на вопрос",
    )
    max_tokens: int = Field(default=DEFAULT_MAX_TOKENS, ge=1, description="Максимум токенов в ответе")
    timeout_seconds: float | None = Field(
        default=None,
        gt=0,
        description="Таймаут запроса (None = без явного таймаута)",
    )
    max_retries: int = Field(default=DEFAULT_LLM_MAX_RETRIES, ge=0, description="Повторы SDK клиента")
    llm_titles: bool = Field(
        default=False,
        description="Генерировать заголовок через LLM вместо фрагмента текста",
    )

    @field_validator("answers_per_question")
    @classmethod
    def validate_answers_per_question(cls, value: int) -> int:
        """Валидация количества вариантов ответа.

        Args:
            value: Количество вариантов.

        Returns:
            Проверенное значение.

        Raises:
            ValueError: Если вариантов меньше двух.

        """
        if value < 2:
            msg = f"answers_per_question ({value}) должен быть >= 2"
            raise ValueError(msg)
        return value

    @field_validator("api_key")
    @classmethod
    def validate_api_key(cls, value: str | None) -> str | None:
        """Валидация API ключа.

        Args:
            value: API ключ для проверки.

        Returns:
            None если ключ пустой, иначе значение без изменений.

        Raises:
            ValueError: Если ключ слишком короткий.

        """
        if not value:
            return None
        if len(value) < 10:
            msg = "API ключ слишком короткий"
            raise ValueError(msg)
        return value


class LogSettings(BaseModel):
    """Настройки логирования."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Уровень логирования",
    )
    format: Literal["json", "text"] = Field(default="text", description="Формат логов")
    file_path: str | None = Field(default=None, description="Путь к файлу логов (опционально)")
    rotation: str = Field(default="10 MB", description="Ротация логов")
    retention: str = Field(default="10 days", description="Время хранения логов")


class Settings(BaseSettings):
    """Главные настройки приложения.

    Все настройки загружаются из переменных окружения с префиксом FLASHME__.
    Пример: FLASHME__QUIZ__MAX_TEXT_LENGTH=20000
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        env_prefix="FLASHME__",
        extra="ignore",
    )

    app_name: str = Field(default=DEFAULT_APP_NAME, description="Название приложения")
    environment: Literal["local", "dev", "prod"] = Field(default="local", description="Окружение")
    debug: bool = Field(default=False, description="Режим отладки")

    quiz: QuizSettings = Field(default_factory=QuizSettings)
    generation: GenerationSettings = Field(default_factory=GenerationSettings)
    log: LogSettings = Field(default_factory=LogSettings)


# Глобальный объект настроек (singleton)
settings = Settings()
