"""Quiz Generator - превращение ответа сервиса генерации в сущности.

Не обращается к задаче и репозиториям: только вызывает клиента
генерации и строит Question/Answer.
"""

from dataclasses import dataclass, field

from flashme.core.constants import DEFAULT_ERROR_EXCERPT_LENGTH, DEFAULT_TITLE_MAX_LENGTH
from flashme.entities import Answer, Question
from flashme.providers.base import ExcerptTitleGenerator, GenerationClient, QuestionDraft, TitleGenerator
from flashme.shared.errors import GenerationServiceError, NoQuestionsGeneratedError
from flashme.shared.logging import get_logger

logger = get_logger()


@dataclass
class QuizGenerationResult:
    """Заголовок и готовые вопросы для задачи."""

    title: str
    questions: list[Question] = field(default_factory=list)


class QuizGenerator:
    """Строит вопросы квиза через GenerationClient."""

    def __init__(
        self,
        generation_client: GenerationClient,
        title_generator: TitleGenerator | None = None,
        excerpt_length: int = DEFAULT_ERROR_EXCERPT_LENGTH,
    ) -> None:
        """Инициализировать генератор.

        Args:
            generation_client: Клиент внешнего сервиса генерации
            title_generator: Источник заголовков (по умолчанию фрагмент текста)
            excerpt_length: Длина фрагмента текста в NoQuestionsGeneratedError

        """
        self.generation_client = generation_client
        self.title_generator = title_generator or ExcerptTitleGenerator(max_length=DEFAULT_TITLE_MAX_LENGTH)
        self.excerpt_length = excerpt_length

    async def generate_questions_and_title(self, task_id: str, text: str) -> QuizGenerationResult:
        """Сгенерировать заголовок и вопросы по тексту.

        Args:
            task_id: ID задачи, которой будут принадлежать вопросы
            text: Исходный текст

        Returns:
            QuizGenerationResult с заголовком и вопросами

        Raises:
            GenerationServiceError: Клиент генерации упал
            NoQuestionsGeneratedError: Клиент вернул пустой результат

        """
        drafts = await self._generate_drafts(text)
        if not drafts:
            raise NoQuestionsGeneratedError(text, excerpt_length=self.excerpt_length)

        title = await self._generate_title(text)

        questions = [self._build_question(task_id, draft) for draft in drafts]

        logger.info(
            "Вопросы построены",
            task_id=task_id,
            questions=len(questions),
            answers=sum(len(q.answers) for q in questions),
        )

        return QuizGenerationResult(title=title, questions=questions)

    async def _generate_drafts(self, text: str) -> list[QuestionDraft] | None:
        try:
            return await self.generation_client.generate(text)
        except Exception as e:
            raise GenerationServiceError(message=f"Ошибка сервиса генерации: {e}", original_error=e) from e

    async def _generate_title(self, text: str) -> str:
        try:
            return await self.title_generator.generate_title(text)
        except Exception as e:
            raise GenerationServiceError(message=f"Ошибка генерации заголовка: {e}", original_error=e) from e

    def _build_question(self, task_id: str, draft: QuestionDraft) -> Question:
        question = Question(content=draft.question, answers=[], quiz_generation_task_id=task_id)
        for answer_draft in draft.answers:
            question.add_answer(
                Answer(content=answer_draft.text, is_correct=answer_draft.is_correct, question_id=question.id)
            )
        return question
