"""Контракты репозиториев (typing.Protocol) и модели пагинации.

Движок хранения вне проекта: здесь только интерфейсы, которые
реализует инфраструктура. In-memory реализация лежит в memory.py.
"""

from collections.abc import Sequence
from typing import Generic, Protocol, TypeVar, runtime_checkable

from pydantic import BaseModel, Field

from flashme.core.constants import DEFAULT_PAGE, DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE
from flashme.core.enums import QuizGenerationStatus
from flashme.entities import Answer, Question, QuizGenerationTask, User, UserAnswer

T = TypeVar("T")


class PaginationParams(BaseModel):
    """Параметры страницы."""

    page: int = Field(default=DEFAULT_PAGE, ge=1, description="Номер страницы (с 1)")
    limit: int = Field(default=DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE, description="Размер страницы")

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


class PaginationMeta(BaseModel):
    """Метаданные страницы."""

    page: int
    limit: int
    total: int
    total_pages: int


class PaginatedResult(BaseModel, Generic[T]):
    """Страница результатов."""

    data: list[T]
    meta: PaginationMeta

    @classmethod
    def build(cls, items: Sequence[T], total: int, params: PaginationParams) -> "PaginatedResult[T]":
        total_pages = (total + params.limit - 1) // params.limit if total else 0
        return cls(
            data=list(items),
            meta=PaginationMeta(page=params.page, limit=params.limit, total=total, total_pages=total_pages),
        )


@runtime_checkable
class QuizGenerationTaskRepository(Protocol):
    """Хранилище задач генерации."""

    async def save(self, task: QuizGenerationTask) -> None: ...

    async def find_by_id(self, task_id: str) -> QuizGenerationTask | None: ...

    async def find_by_user_id(self, user_id: str) -> list[QuizGenerationTask]: ...

    async def find_by_user_id_paginated(
        self,
        user_id: str,
        params: PaginationParams,
    ) -> PaginatedResult[QuizGenerationTask]: ...

    async def find_by_user_id_and_statuses(
        self,
        user_id: str,
        statuses: Sequence[QuizGenerationStatus],
    ) -> list[QuizGenerationTask]: ...

    async def soft_delete(self, task_id: str) -> None: ...


@runtime_checkable
class QuestionRepository(Protocol):
    """Хранилище вопросов."""

    async def save_questions(self, questions: Sequence[Question]) -> None: ...

    async def save(self, question: Question) -> None: ...

    async def find_by_id(self, question_id: str) -> Question | None: ...

    async def find_by_user_id(self, user_id: str) -> list[Question]: ...

    async def find_by_quiz_generation_task_id(self, task_id: str) -> list[Question]: ...

    async def soft_delete_by_task_id(self, task_id: str) -> None: ...


@runtime_checkable
class AnswerRepository(Protocol):
    """Хранилище вариантов ответа."""

    async def save_answers(self, answers: Sequence[Answer]) -> None: ...

    async def find_by_id(self, answer_id: str) -> Answer | None: ...

    async def find_by_question_id(self, question_id: str) -> list[Answer]: ...

    async def soft_delete_by_question_id(self, question_id: str) -> None: ...


@runtime_checkable
class UserRepository(Protocol):
    """Поиск пользователей."""

    async def find_by_id(self, user_id: str) -> User | None: ...


@runtime_checkable
class UserAnswersRepository(Protocol):
    """Хранилище ответов пользователей."""

    async def save(self, user_answer: UserAnswer) -> None: ...

    async def find_by_id(self, user_answer_id: str) -> UserAnswer | None: ...

    async def find_by_user_id(self, user_id: str) -> list[UserAnswer]: ...


class Repositories(Protocol):
    """Набор репозиториев, из которого собираются сервисы."""

    tasks: QuizGenerationTaskRepository
    questions: QuestionRepository
    answers: AnswerRepository
    users: UserRepository
    user_answers: UserAnswersRepository
