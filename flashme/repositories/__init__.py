"""Репозитории: контракты и in-memory реализация."""

from flashme.repositories.base import (
    AnswerRepository,
    PaginatedResult,
    PaginationMeta,
    PaginationParams,
    QuestionRepository,
    QuizGenerationTaskRepository,
    Repositories,
    UserAnswersRepository,
    UserRepository,
)
from flashme.repositories.memory import InMemoryDatabase, InMemoryRepositories

__all__ = [
    "AnswerRepository",
    "InMemoryDatabase",
    "InMemoryRepositories",
    "PaginatedResult",
    "PaginationMeta",
    "PaginationParams",
    "QuestionRepository",
    "QuizGenerationTaskRepository",
    "Repositories",
    "UserAnswersRepository",
    "UserRepository",
]
