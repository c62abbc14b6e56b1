"""Quiz Storage - сохранение задачи, вопросов и ответов.

Записи в три репозитория не атомарны: при ошибке на середине
уже сохранённые данные не откатываются.
"""

from flashme.entities import Answer, Question, QuizGenerationTask
from flashme.repositories.base import AnswerRepository, QuestionRepository, QuizGenerationTaskRepository
from flashme.shared.errors import StorageError
from flashme.shared.errors.decorators import reraise_as
from flashme.shared.logging import get_logger

logger = get_logger()


class QuizStorageService:
    """Координатор сохранения данных квиза."""

    def __init__(
        self,
        task_repository: QuizGenerationTaskRepository,
        question_repository: QuestionRepository,
        answer_repository: AnswerRepository,
    ) -> None:
        self.task_repository = task_repository
        self.question_repository = question_repository
        self.answer_repository = answer_repository

    async def save_task(self, task: QuizGenerationTask) -> None:
        """Сохранить задачу (без вопросов)."""
        await self.task_repository.save(task)

    @reraise_as(StorageError, "Не удалось сохранить задачу генерации квиза")
    async def save_quiz_data(self, task: QuizGenerationTask, questions: list[Question]) -> None:
        """Сохранить задачу, затем вопросы, затем все ответы одним списком.

        Args:
            task: Задача генерации
            questions: Вопросы задачи

        Raises:
            StorageError: Любая ошибка репозитория (исходная в original_error)

        """
        await self.task_repository.save(task)
        await self.question_repository.save_questions(questions)

        answers: list[Answer] = [answer for question in questions for answer in question.answers]
        await self.answer_repository.save_answers(answers)

        logger.info(
            "Данные квиза сохранены",
            task_id=task.id,
            questions=len(questions),
            answers=len(answers),
        )

    async def save_failed_task(self, task: QuizGenerationTask) -> None:
        """Сохранить задачу в статусе FAILED.

        Вопросы сохраняются, только если они есть. Ошибки не
        заворачиваются: вызывающий код сам решает, что с ними делать.
        """
        await self.task_repository.save(task)
        if task.questions:
            await self.question_repository.save_questions(task.questions)

        logger.debug("Задача с ошибкой сохранена", task_id=task.id, questions=len(task.questions))
