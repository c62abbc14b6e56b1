"""Чтение и удаление задач генерации пользователя."""

from flashme.core.constants import DEFAULT_PAGE, DEFAULT_PAGE_SIZE
from flashme.core.enums import QuizGenerationStatus
from flashme.entities import QuizGenerationTask
from flashme.repositories.base import (
    AnswerRepository,
    PaginatedResult,
    PaginationParams,
    QuestionRepository,
    QuizGenerationTaskRepository,
    UserRepository,
)
from flashme.shared.logging import get_logger
from flashme.use_cases.base import ensure_task_owned_by, ensure_user_exists

logger = get_logger()

ONGOING_STATUSES = (QuizGenerationStatus.PENDING, QuizGenerationStatus.IN_PROGRESS)


class FetchQuizGenerationTaskForUserUseCase:
    """Одна задача пользователя с проверкой владельца."""

    def __init__(self, user_repository: UserRepository, task_repository: QuizGenerationTaskRepository) -> None:
        self.user_repository = user_repository
        self.task_repository = task_repository

    async def execute(self, user_id: str, task_id: str) -> QuizGenerationTask:
        await ensure_user_exists(self.user_repository, user_id)
        return await ensure_task_owned_by(self.task_repository, task_id, user_id)


class FetchQuizGenerationTasksForUserUseCase:
    """Постраничный список задач пользователя."""

    def __init__(self, user_repository: UserRepository, task_repository: QuizGenerationTaskRepository) -> None:
        self.user_repository = user_repository
        self.task_repository = task_repository

    async def execute(
        self,
        user_id: str,
        page: int = DEFAULT_PAGE,
        limit: int = DEFAULT_PAGE_SIZE,
    ) -> PaginatedResult[QuizGenerationTask]:
        """Получить страницу задач.

        Raises:
            UserNotFoundError: Пользователь не найден
            pydantic.ValidationError: Некорректные page/limit

        """
        await ensure_user_exists(self.user_repository, user_id)
        params = PaginationParams(page=page, limit=limit)
        return await self.task_repository.find_by_user_id_paginated(user_id, params)


class FetchOngoingQuizGenerationTasksUseCase:
    """Задачи пользователя в статусах PENDING и IN_PROGRESS."""

    def __init__(self, user_repository: UserRepository, task_repository: QuizGenerationTaskRepository) -> None:
        self.user_repository = user_repository
        self.task_repository = task_repository

    async def execute(self, user_id: str) -> list[QuizGenerationTask]:
        await ensure_user_exists(self.user_repository, user_id)
        return await self.task_repository.find_by_user_id_and_statuses(user_id, ONGOING_STATUSES)


class SoftDeleteQuizGenerationTaskForUserUseCase:
    """Мягкое удаление задачи вместе с вопросами и ответами.

    Сначала удаляются ответы, затем вопросы, последней сама задача.
    """

    def __init__(
        self,
        user_repository: UserRepository,
        task_repository: QuizGenerationTaskRepository,
        question_repository: QuestionRepository,
        answer_repository: AnswerRepository,
    ) -> None:
        self.user_repository = user_repository
        self.task_repository = task_repository
        self.question_repository = question_repository
        self.answer_repository = answer_repository

    async def execute(self, user_id: str, task_id: str) -> None:
        await ensure_user_exists(self.user_repository, user_id)
        task = await ensure_task_owned_by(self.task_repository, task_id, user_id)

        for question in task.questions:
            await self.answer_repository.soft_delete_by_question_id(question.id)
        await self.question_repository.soft_delete_by_task_id(task.id)
        await self.task_repository.soft_delete(task.id)

        logger.info("Задача генерации квиза удалена", task_id=task.id, user_id=user_id)
