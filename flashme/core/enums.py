"""Enums для flashme.

Централизованное хранилище всех enum'ов проекта.
"""

from enum import Enum


class QuizGenerationStatus(str, Enum):
    """Статус задачи генерации квиза."""

    PENDING = "PENDING"  # Начальное состояние
    IN_PROGRESS = "IN_PROGRESS"  # Генерация запланирована или идёт
    COMPLETED = "COMPLETED"  # Терминальный успех
    FAILED = "FAILED"  # Терминальная ошибка


class GenerationProvider(str, Enum):
    """Тип провайдера генерации вопросов."""

    OPENAI = "openai"  # OpenAI API
    ANTHROPIC = "anthropic"  # Anthropic Claude API
