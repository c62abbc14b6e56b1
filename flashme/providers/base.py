"""Base types и Protocol для клиентов генерации.

Использует typing.Protocol для duck typing вместо ABC.
"""

from typing import Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict, Field


class AnswerDraft(BaseModel):
    """Черновик варианта ответа от сервиса генерации."""

    model_config = ConfigDict(populate_by_name=True)

    text: str = Field(description="Текст ответа")
    is_correct: bool = Field(alias="isCorrect", description="Признак правильного ответа")


class QuestionDraft(BaseModel):
    """Черновик вопроса от сервиса генерации (ещё не провалидирован доменом)."""

    question: str = Field(description="Текст вопроса")
    answers: list[AnswerDraft] = Field(default_factory=list, description="Варианты ответа")


class GeneratedQuiz(BaseModel):
    """Структура JSON ответа модели."""

    questions: list[QuestionDraft] = Field(default_factory=list, description="Вопросы")


@runtime_checkable
class GenerationClient(Protocol):
    """Protocol для внешнего сервиса генерации вопросов.

    Может выбрасывать любые исключения: QuizGenerator превращает их
    в GenerationServiceError.
    """

    async def generate(self, text: str) -> list[QuestionDraft]:
        """Сгенерировать черновики вопросов по тексту.

        Args:
            text: Исходный текст

        Returns:
            Список черновиков (может быть пустым)

        """
        ...


@runtime_checkable
class TitleGenerator(Protocol):
    """Protocol для получения заголовка квиза по тексту."""

    async def generate_title(self, text: str) -> str:
        """Получить заголовок квиза.

        Args:
            text: Исходный текст

        Returns:
            Заголовок

        """
        ...


class ExcerptTitleGenerator:
    """Заголовок из первой непустой строки текста.

    Строка обрезается до max_length по границе слова. Не ходит в сеть.
    """

    def __init__(self, max_length: int) -> None:
        self.max_length = max_length

    async def generate_title(self, text: str) -> str:
        for line in text.splitlines():
            candidate = " ".join(line.split())
            if candidate:
                return self._truncate(candidate)
        return ""

    def _truncate(self, line: str) -> str:
        if len(line) <= self.max_length:
            return line
        cut = line[: self.max_length]
        head, sep, _ = cut.rpartition(" ")
        # Одно длинное слово режем жёстко
        return head.rstrip() if sep and head else cut
