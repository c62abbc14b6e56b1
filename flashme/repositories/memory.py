"""In-memory реализация репозиториев.

Используется в тестах и локальной сборке. Сущности хранятся как
orjson-снимки, поэтому изменения объекта после save не видны
хранилищу до следующего save (как у настоящей БД).

Storage Schema:
    tasks         -> {task_id: bytes}
    questions     -> {question_id: bytes}
    answers       -> {answer_id: bytes}
    users         -> {user_id: bytes}
    user_answers  -> {user_answer_id: bytes}
"""

from collections.abc import Sequence
from typing import TypeVar

import orjson
from pydantic import BaseModel

from flashme.core.enums import QuizGenerationStatus
from flashme.entities import Answer, Question, QuizGenerationTask, User, UserAnswer
from flashme.repositories.base import PaginatedResult, PaginationParams
from flashme.shared.logging import get_logger

logger = get_logger()

ModelT = TypeVar("ModelT", bound=BaseModel)


def _dump(entity: BaseModel) -> bytes:
    return orjson.dumps(entity.model_dump(mode="json"))


def _load(model: type[ModelT], raw: bytes) -> ModelT:
    return model.model_validate(orjson.loads(raw))


class InMemoryDatabase:
    """Общее хранилище для всех in-memory репозиториев."""

    def __init__(self) -> None:
        self.tasks: dict[str, bytes] = {}
        self.questions: dict[str, bytes] = {}
        self.answers: dict[str, bytes] = {}
        self.users: dict[str, bytes] = {}
        self.user_answers: dict[str, bytes] = {}

    def clear(self) -> None:
        self.tasks.clear()
        self.questions.clear()
        self.answers.clear()
        self.users.clear()
        self.user_answers.clear()


class InMemoryQuizGenerationTaskRepository:
    """Задачи генерации в памяти."""

    def __init__(self, db: InMemoryDatabase) -> None:
        self.db = db

    def _active(self, user_id: str) -> list[QuizGenerationTask]:
        tasks = [_load(QuizGenerationTask, raw) for raw in self.db.tasks.values()]
        active = [t for t in tasks if t.user_id == user_id and not t.is_deleted]
        active.sort(key=lambda t: t.created_at, reverse=True)
        return active

    async def save(self, task: QuizGenerationTask) -> None:
        self.db.tasks[task.id] = _dump(task)
        logger.debug("Задача сохранена", task_id=task.id, status=task.status.value)

    async def find_by_id(self, task_id: str) -> QuizGenerationTask | None:
        raw = self.db.tasks.get(task_id)
        return _load(QuizGenerationTask, raw) if raw is not None else None

    async def find_by_user_id(self, user_id: str) -> list[QuizGenerationTask]:
        return self._active(user_id)

    async def find_by_user_id_paginated(
        self,
        user_id: str,
        params: PaginationParams,
    ) -> PaginatedResult[QuizGenerationTask]:
        tasks = self._active(user_id)
        page = tasks[params.offset : params.offset + params.limit]
        return PaginatedResult[QuizGenerationTask].build(page, total=len(tasks), params=params)

    async def find_by_user_id_and_statuses(
        self,
        user_id: str,
        statuses: Sequence[QuizGenerationStatus],
    ) -> list[QuizGenerationTask]:
        wanted = set(statuses)
        return [t for t in self._active(user_id) if t.status in wanted]

    async def soft_delete(self, task_id: str) -> None:
        task = await self.find_by_id(task_id)
        if task is None or task.is_deleted:
            return
        task.soft_delete()
        await self.save(task)


class InMemoryQuestionRepository:
    """Вопросы в памяти. Владельца вопроса ищет через задачу."""

    def __init__(self, db: InMemoryDatabase) -> None:
        self.db = db

    def _all(self) -> list[Question]:
        return [_load(Question, raw) for raw in self.db.questions.values()]

    async def save_questions(self, questions: Sequence[Question]) -> None:
        for question in questions:
            self.db.questions[question.id] = _dump(question)

    async def save(self, question: Question) -> None:
        self.db.questions[question.id] = _dump(question)

    async def find_by_id(self, question_id: str) -> Question | None:
        raw = self.db.questions.get(question_id)
        return _load(Question, raw) if raw is not None else None

    async def find_by_user_id(self, user_id: str) -> list[Question]:
        owned_task_ids = set()
        for raw in self.db.tasks.values():
            task = _load(QuizGenerationTask, raw)
            if task.user_id == user_id and not task.is_deleted:
                owned_task_ids.add(task.id)
        return [
            q for q in self._all() if q.quiz_generation_task_id in owned_task_ids and q.deleted_at is None
        ]

    async def find_by_quiz_generation_task_id(self, task_id: str) -> list[Question]:
        return [q for q in self._all() if q.quiz_generation_task_id == task_id and q.deleted_at is None]

    async def soft_delete_by_task_id(self, task_id: str) -> None:
        for question in self._all():
            if question.quiz_generation_task_id == task_id and question.deleted_at is None:
                question.soft_delete()
                self.db.questions[question.id] = _dump(question)


class InMemoryAnswerRepository:
    """Варианты ответа в памяти."""

    def __init__(self, db: InMemoryDatabase) -> None:
        self.db = db

    def _all(self) -> list[Answer]:
        return [_load(Answer, raw) for raw in self.db.answers.values()]

    async def save_answers(self, answers: Sequence[Answer]) -> None:
        for answer in answers:
            self.db.answers[answer.id] = _dump(answer)

    async def find_by_id(self, answer_id: str) -> Answer | None:
        raw = self.db.answers.get(answer_id)
        return _load(Answer, raw) if raw is not None else None

    async def find_by_question_id(self, question_id: str) -> list[Answer]:
        return [a for a in self._all() if a.question_id == question_id and a.deleted_at is None]

    async def soft_delete_by_question_id(self, question_id: str) -> None:
        for answer in self._all():
            if answer.question_id == question_id and answer.deleted_at is None:
                answer.soft_delete()
                self.db.answers[answer.id] = _dump(answer)


class InMemoryUserRepository:
    """Пользователи в памяти."""

    def __init__(self, db: InMemoryDatabase) -> None:
        self.db = db

    def add(self, user: User) -> None:
        self.db.users[user.id] = _dump(user)

    async def find_by_id(self, user_id: str) -> User | None:
        raw = self.db.users.get(user_id)
        return _load(User, raw) if raw is not None else None


class InMemoryUserAnswersRepository:
    """Ответы пользователей в памяти (только добавление)."""

    def __init__(self, db: InMemoryDatabase) -> None:
        self.db = db

    async def save(self, user_answer: UserAnswer) -> None:
        self.db.user_answers[user_answer.id] = _dump(user_answer)

    async def find_by_id(self, user_answer_id: str) -> UserAnswer | None:
        raw = self.db.user_answers.get(user_answer_id)
        return _load(UserAnswer, raw) if raw is not None else None

    async def find_by_user_id(self, user_id: str) -> list[UserAnswer]:
        answers = [_load(UserAnswer, raw) for raw in self.db.user_answers.values()]
        return sorted((a for a in answers if a.user_id == user_id), key=lambda a: a.created_at)


class InMemoryRepositories:
    """Набор in-memory репозиториев поверх одного InMemoryDatabase."""

    def __init__(self, db: InMemoryDatabase | None = None) -> None:
        self.db = db or InMemoryDatabase()
        self.tasks = InMemoryQuizGenerationTaskRepository(self.db)
        self.questions = InMemoryQuestionRepository(self.db)
        self.answers = InMemoryAnswerRepository(self.db)
        self.users = InMemoryUserRepository(self.db)
        self.user_answers = InMemoryUserAnswersRepository(self.db)

    def reset(self) -> None:
        self.db.clear()
        logger.debug("In-memory хранилище очищено")
