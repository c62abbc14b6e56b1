"""Общие проверки сценариев."""

from flashme.entities import QuizGenerationTask, User
from flashme.repositories.base import QuizGenerationTaskRepository, UserRepository
from flashme.shared.errors import TaskNotFoundError, UnauthorizedTaskAccessError, UserNotFoundError


async def ensure_user_exists(user_repository: UserRepository, user_id: str) -> User:
    """Найти пользователя или выбросить UserNotFoundError."""
    user = await user_repository.find_by_id(user_id)
    if user is None:
        raise UserNotFoundError(user_id)
    return user


async def ensure_task_owned_by(
    task_repository: QuizGenerationTaskRepository,
    task_id: str,
    user_id: str,
) -> QuizGenerationTask:
    """Найти задачу и проверить владельца.

    Raises:
        TaskNotFoundError: Задачи нет или она удалена
        UnauthorizedTaskAccessError: Задача принадлежит другому пользователю

    """
    task = await task_repository.find_by_id(task_id)
    if task is None or task.is_deleted:
        raise TaskNotFoundError(task_id)

    if task.user_id != user_id:
        raise UnauthorizedTaskAccessError(task_id, user_id)

    return task
