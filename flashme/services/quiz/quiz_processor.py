"""Quiz Processor - оркестрация генерации квиза для одной задачи.

Координирует QuizGenerator и QuizStorageService. При любой ошибке
переводит задачу в FAILED, пытается её сохранить и пробрасывает
исходную ошибку дальше.
"""

import asyncio

from flashme.core.enums import QuizGenerationStatus
from flashme.entities import QuizGenerationTask
from flashme.services.quiz.quiz_generator import QuizGenerator
from flashme.services.quiz.quiz_storage import QuizStorageService
from flashme.shared.errors import AppException
from flashme.shared.logging import get_logger

logger = get_logger()


class QuizProcessor:
    """Обработчик задачи генерации квиза."""

    def __init__(self, generator: QuizGenerator, storage: QuizStorageService) -> None:
        """Инициализировать QuizProcessor.

        Args:
            generator: Построитель вопросов
            storage: Координатор сохранения

        """
        self.generator = generator
        self.storage = storage

    async def process(self, task: QuizGenerationTask, text: str) -> None:
        """Сгенерировать вопросы для задачи и сохранить результат.

        Args:
            task: Задача (изменяется на месте)
            text: Исходный текст

        Raises:
            GenerationServiceError: Ошибка сервиса генерации
            NoQuestionsGeneratedError: Вопросы не сгенерированы
            StorageError: Ошибка сохранения результата
            asyncio.CancelledError: Обработка отменена

        """
        logger.info("Начало обработки задачи", task_id=task.id, text_length=len(text))

        try:
            result = await self.generator.generate_questions_and_title(task.id, text)

            task.set_title(result.title)
            for question in result.questions:
                task.add_question(question)
            task.update_status(QuizGenerationStatus.COMPLETED)

            await self.storage.save_quiz_data(task, result.questions)

        except asyncio.CancelledError:
            logger.warning("Обработка задачи отменена", task_id=task.id)
            await self._handle_failure(task)
            raise

        except Exception as e:
            log_extra = e.log_context() if isinstance(e, AppException) else {}
            log_extra.update(task_id=task.id, error_type=type(e).__name__, error=str(e))
            logger.error("Ошибка обработки задачи", **log_extra)
            await self._handle_failure(task)
            raise

        logger.info("Задача завершена успешно", task_id=task.id, questions=len(task.questions))

    async def abandon(self, task: QuizGenerationTask) -> None:
        """Завершить задачу, обработка которой отменена до старта.

        Args:
            task: Задача, для которой process так и не запустился

        """
        logger.warning("Задача отменена до начала генерации", task_id=task.id)
        await self._handle_failure(task)

    async def _handle_failure(self, task: QuizGenerationTask) -> None:
        """Перевести задачу в FAILED и сохранить (best-effort).

        Ошибка сохранения только логируется, чтобы не скрыть исходную.
        """
        task.update_status(QuizGenerationStatus.FAILED)

        try:
            await self.storage.save_failed_task(task)
        except Exception as e:
            logger.exception("Не удалось сохранить задачу с ошибкой", task_id=task.id, error=str(e))
