"""Создание задачи генерации квиза (точка входа пайплайна).

Проверяет текст и пользователя, сохраняет задачу и запускает генерацию
в фоне, не дожидаясь её окончания.
"""

import functools
from dataclasses import dataclass

from flashme.core.constants import DEFAULT_MAX_TEXT_LENGTH, FILE_UPLOAD_PLACEHOLDER_TEXT
from flashme.core.enums import QuizGenerationStatus
from flashme.entities import QuizGenerationTask
from flashme.repositories.base import UserRepository
from flashme.services.quiz.background import BackgroundTaskRunner
from flashme.services.quiz.quiz_processor import QuizProcessor
from flashme.services.quiz.quiz_storage import QuizStorageService
from flashme.shared.errors import RequiredTextContentError, TaskAlreadyInProgressError, TextTooLongError
from flashme.shared.logging import get_logger
from flashme.use_cases.base import ensure_user_exists

logger = get_logger()


@dataclass
class CreateQuizGenerationTaskResult:
    """Созданная задача (в момент возврата всё ещё IN_PROGRESS)."""

    task: QuizGenerationTask


class CreateQuizGenerationTaskUseCase:
    """Сценарий создания задачи генерации квиза."""

    def __init__(
        self,
        user_repository: UserRepository,
        storage: QuizStorageService,
        processor: QuizProcessor,
        runner: BackgroundTaskRunner,
        max_text_length: int = DEFAULT_MAX_TEXT_LENGTH,
    ) -> None:
        """Инициализировать сценарий.

        Args:
            user_repository: Поиск пользователей
            storage: Координатор сохранения
            processor: Обработчик генерации
            runner: Runner фоновых задач
            max_text_length: Максимальная длина текста (включительно)

        """
        self.user_repository = user_repository
        self.storage = storage
        self.processor = processor
        self.runner = runner
        self.max_text_length = max_text_length

    async def execute(
        self,
        user_id: str,
        text: str,
        is_file_upload: bool = False,
        existing_task: QuizGenerationTask | None = None,
    ) -> CreateQuizGenerationTaskResult:
        """Создать задачу и запустить генерацию в фоне.

        Args:
            user_id: ID пользователя
            text: Исходный текст
            is_file_upload: Текст придёт позже из загруженного файла
            existing_task: Уже сохранённая задача (продолжение после загрузки)

        Returns:
            CreateQuizGenerationTaskResult с задачей

        Raises:
            RequiredTextContentError: Пустой текст
            TextTooLongError: Текст длиннее max_text_length
            UserNotFoundError: Пользователь не найден
            TaskAlreadyInProgressError: Генерация по existing_task уже идёт

        """
        if is_file_upload:
            await ensure_user_exists(self.user_repository, user_id)
            return await self._handle_file_upload(user_id, text)

        self._validate_text(text)
        await ensure_user_exists(self.user_repository, user_id)

        task = existing_task or self._create_task(user_id, text)
        if self.runner.is_running(task.id):
            raise TaskAlreadyInProgressError(task.id)

        await self.storage.save_task(task)

        self.runner.schedule(
            task.id,
            self.processor.process(task, text),
            on_cancelled=functools.partial(self.processor.abandon, task),
        )

        logger.info(
            "Задача генерации квиза создана",
            task_id=task.id,
            user_id=user_id,
            text_length=len(text),
            resumed=existing_task is not None,
        )

        return CreateQuizGenerationTaskResult(task=task)

    async def _handle_file_upload(self, user_id: str, text: str) -> CreateQuizGenerationTaskResult:
        task = self._create_task(user_id, text or FILE_UPLOAD_PLACEHOLDER_TEXT)
        await self.storage.save_task(task)

        logger.info("Задача ожидает загрузки файла", task_id=task.id, user_id=user_id)
        return CreateQuizGenerationTaskResult(task=task)

    def _validate_text(self, text: str | None) -> None:
        if not text or not text.strip():
            raise RequiredTextContentError()

        if len(text) > self.max_text_length:
            raise TextTooLongError(len(text), self.max_text_length)

    @staticmethod
    def _create_task(user_id: str, text: str) -> QuizGenerationTask:
        return QuizGenerationTask(
            text_content=text,
            questions=[],
            status=QuizGenerationStatus.IN_PROGRESS,
            user_id=user_id,
        )
