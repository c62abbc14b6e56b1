"""Вопросы: практика, ответы пользователя и ручное редактирование квиза."""

from collections.abc import Sequence

from flashme.core.constants import DEFAULT_QUESTIONS_LIMIT
from flashme.entities import Answer, Question, QuizGenerationTask, UserAnswer
from flashme.providers.base import AnswerDraft
from flashme.repositories.base import (
    AnswerRepository,
    QuestionRepository,
    QuizGenerationTaskRepository,
    UserAnswersRepository,
    UserRepository,
)
from flashme.services.quiz.question_selector import QuestionSelector
from flashme.shared.errors import InvalidAnswerError, InvalidQuestionError, UserAnswerStorageError
from flashme.shared.logging import get_logger
from flashme.use_cases.base import ensure_task_owned_by, ensure_user_exists

logger = get_logger()


class FetchQuestionsForUserUseCase:
    """Подбор вопросов для практики с учётом истории ответов."""

    def __init__(
        self,
        user_repository: UserRepository,
        question_repository: QuestionRepository,
        user_answers_repository: UserAnswersRepository,
        selector: QuestionSelector | None = None,
        default_limit: int = DEFAULT_QUESTIONS_LIMIT,
    ) -> None:
        self.user_repository = user_repository
        self.question_repository = question_repository
        self.user_answers_repository = user_answers_repository
        self.selector = selector or QuestionSelector()
        self.default_limit = default_limit

    async def execute(
        self,
        user_id: str,
        limit: int | None = None,
        quiz_generation_task_id: str | None = None,
    ) -> list[Question]:
        """Подобрать вопросы.

        Args:
            user_id: ID пользователя
            limit: Сколько вопросов вернуть (по умолчанию default_limit)
            quiz_generation_task_id: Ограничить пул одной задачей

        Returns:
            Подобранные вопросы (пустой список при limit <= 0 или пустом пуле)

        Raises:
            UserNotFoundError: Пользователь не найден

        """
        await ensure_user_exists(self.user_repository, user_id)

        limit = self.default_limit if limit is None else limit
        if limit <= 0:
            return []

        if quiz_generation_task_id:
            pool = await self.question_repository.find_by_quiz_generation_task_id(quiz_generation_task_id)
        else:
            pool = await self.question_repository.find_by_user_id(user_id)

        if not pool:
            return []

        history = await self.user_answers_repository.find_by_user_id(user_id)
        selected = self.selector.select_questions(pool, history, limit)

        logger.debug("Вопросы подобраны", user_id=user_id, pool=len(pool), history=len(history), selected=len(selected))
        return selected


class UserAnswersQuestionUseCase:
    """Пользователь отвечает на вопрос."""

    def __init__(
        self,
        user_repository: UserRepository,
        user_answers_repository: UserAnswersRepository,
        answer_repository: AnswerRepository,
    ) -> None:
        self.user_repository = user_repository
        self.user_answers_repository = user_answers_repository
        self.answer_repository = answer_repository

    async def execute(self, user_id: str, question_id: str, answer_id: str) -> UserAnswer:
        """Сохранить ответ пользователя.

        Args:
            user_id: ID пользователя
            question_id: ID вопроса
            answer_id: ID выбранного варианта

        Returns:
            Сохранённый UserAnswer

        Raises:
            UserNotFoundError: Пользователь не найден
            InvalidAnswerError: Вариант не найден или относится к другому вопросу
            UserAnswerStorageError: Ошибка сохранения

        """
        await ensure_user_exists(self.user_repository, user_id)

        answer = await self._fetch_answer(answer_id)
        if answer.question_id != question_id:
            raise InvalidAnswerError(f"Ответ не относится к вопросу '{question_id}'")

        user_answer = UserAnswer(user_id=user_id, question_id=question_id, answer=answer)

        try:
            await self.user_answers_repository.save(user_answer)
        except Exception as e:
            raise UserAnswerStorageError(
                message=f"Не удалось сохранить ответ пользователя: {e}",
                original_error=e,
            ) from e

        logger.debug("Ответ пользователя сохранён", user_id=user_id, question_id=question_id, correct=answer.is_correct)
        return user_answer

    async def _fetch_answer(self, answer_id: str) -> Answer:
        answer = await self.answer_repository.find_by_id(answer_id)
        if answer is None:
            raise InvalidAnswerError(f"Ответ с ID '{answer_id}' не найден")
        return answer


def _replace_question(task: QuizGenerationTask, question: Question) -> None:
    task.questions = [question if q.id == question.id else q for q in task.questions]


async def _find_question(question_repository: QuestionRepository, question_id: str) -> Question:
    question = await question_repository.find_by_id(question_id)
    if question is None or question.deleted_at is not None:
        raise InvalidQuestionError(f"Вопрос с ID '{question_id}' не найден")
    return question


class UserAddsQuestionUseCase:
    """Пользователь добавляет свой вопрос в квиз."""

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

    async def execute(
        self,
        user_id: str,
        task_id: str,
        content: str,
        answers: Sequence[AnswerDraft],
    ) -> Question:
        """Добавить вопрос с вариантами ответа.

        Args:
            user_id: ID пользователя
            task_id: ID задачи генерации (квиза)
            content: Текст вопроса
            answers: Варианты ответа (минимум два, хотя бы один правильный)

        Returns:
            Созданный Question с ответами

        Raises:
            UserNotFoundError: Пользователь не найден
            TaskNotFoundError: Задачи нет или она удалена
            UnauthorizedTaskAccessError: Задача принадлежит другому пользователю
            InvalidQuestionError: Некорректный текст или набор ответов

        """
        await ensure_user_exists(self.user_repository, user_id)
        task = await ensure_task_owned_by(self.task_repository, task_id, user_id)
        self._validate(content, answers)

        question = Question(content=content, quiz_generation_task_id=task_id)
        for draft in answers:
            question.add_answer(Answer(content=draft.text, is_correct=draft.is_correct, question_id=question.id))

        await self.question_repository.save(question)
        await self.answer_repository.save_answers(question.answers)

        task.add_question(question)
        await self.task_repository.save(task)

        logger.info("Вопрос добавлен пользователем", user_id=user_id, task_id=task_id, question_id=question.id)
        return question

    @staticmethod
    def _validate(content: str, answers: Sequence[AnswerDraft]) -> None:
        if not content.strip():
            raise InvalidQuestionError("Текст вопроса не может быть пустым")

        if len(answers) < 2:
            raise InvalidQuestionError("Нужно минимум два варианта ответа")

        if not any(answer.is_correct for answer in answers):
            raise InvalidQuestionError("Хотя бы один ответ должен быть правильным")

        if not all(answer.text.strip() for answer in answers):
            raise InvalidQuestionError("Все ответы должны содержать текст")


class UserEditsQuestionUseCase:
    """Пользователь меняет текст вопроса."""

    def __init__(
        self,
        user_repository: UserRepository,
        task_repository: QuizGenerationTaskRepository,
        question_repository: QuestionRepository,
    ) -> None:
        self.user_repository = user_repository
        self.task_repository = task_repository
        self.question_repository = question_repository

    async def execute(self, user_id: str, question_id: str, content: str) -> Question:
        """Изменить текст вопроса.

        Raises:
            UserNotFoundError: Пользователь не найден
            InvalidQuestionError: Вопрос не найден или текст пустой
            TaskNotFoundError: Задача вопроса удалена
            UnauthorizedTaskAccessError: Вопрос принадлежит другому пользователю

        """
        await ensure_user_exists(self.user_repository, user_id)
        question = await _find_question(self.question_repository, question_id)
        task = await ensure_task_owned_by(self.task_repository, question.quiz_generation_task_id, user_id)

        if not content.strip():
            raise InvalidQuestionError("Текст вопроса не может быть пустым")

        question.update_content(content)
        await self.question_repository.save(question)

        _replace_question(task, question)
        await self.task_repository.save(task)

        logger.info("Вопрос изменён пользователем", user_id=user_id, question_id=question_id)
        return question


class UserEditsAnswerUseCase:
    """Пользователь меняет текст и правильность варианта ответа."""

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

    async def execute(self, user_id: str, answer_id: str, content: str, is_correct: bool) -> Answer:
        """Изменить вариант ответа.

        Вопрос должен сохранить хотя бы один правильный ответ, поэтому
        снять отметку с последнего правильного нельзя.

        Raises:
            UserNotFoundError: Пользователь не найден
            InvalidAnswerError: Ответ не найден, текст пустой или не остаётся правильных ответов
            InvalidQuestionError: Вопрос ответа не найден
            TaskNotFoundError: Задача вопроса удалена
            UnauthorizedTaskAccessError: Ответ принадлежит другому пользователю

        """
        await ensure_user_exists(self.user_repository, user_id)

        answer = await self.answer_repository.find_by_id(answer_id)
        if answer is None or answer.deleted_at is not None:
            raise InvalidAnswerError(f"Ответ с ID '{answer_id}' не найден")

        question = await _find_question(self.question_repository, answer.question_id)
        task = await ensure_task_owned_by(self.task_repository, question.quiz_generation_task_id, user_id)

        if not content.strip():
            raise InvalidAnswerError("Текст ответа не может быть пустым")

        if not is_correct:
            siblings = await self.answer_repository.find_by_question_id(question.id)
            if not any(a.is_correct for a in siblings if a.id != answer_id):
                raise InvalidAnswerError("Хотя бы один ответ вопроса должен быть правильным")

        answer.update_content(content)
        answer.set_is_correct(is_correct)
        await self.answer_repository.save_answers([answer])

        question.answers = [answer if a.id == answer_id else a for a in question.answers]
        await self.question_repository.save(question)

        _replace_question(task, question)
        await self.task_repository.save(task)

        logger.info("Ответ изменён пользователем", user_id=user_id, answer_id=answer_id, is_correct=is_correct)
        return answer
