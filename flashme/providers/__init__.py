"""Клиенты внешнего сервиса генерации вопросов."""

from flashme.providers.base import (
    AnswerDraft,
    ExcerptTitleGenerator,
    GeneratedQuiz,
    GenerationClient,
    QuestionDraft,
    TitleGenerator,
)
from flashme.providers.factory import create_generation_client, create_title_generator

__all__ = [
    "AnswerDraft",
    "ExcerptTitleGenerator",
    "GeneratedQuiz",
    "GenerationClient",
    "QuestionDraft",
    "TitleGenerator",
    "create_generation_client",
    "create_title_generator",
]
