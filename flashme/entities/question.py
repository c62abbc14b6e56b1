"""Question - вопрос квиза."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from flashme.entities.answer import Answer
from flashme.entities.base import new_id, utc_now
from flashme.shared.errors import RequiredContentError


class Question(BaseModel):
    """Вопрос квиза.

    Вопрос принадлежит одной задаче генерации на всё время жизни.
    Вопрос без ответов допустим: ответы добавляются после создания.

    Attributes:
        content: Текст вопроса (непустой при создании и при каждом изменении)
        answers: Варианты ответа (владение)
        quiz_generation_task_id: ID задачи-владельца

    """

    model_config = ConfigDict(validate_assignment=True)

    id: str = Field(default_factory=new_id, description="ID вопроса")
    content: str = Field(description="Текст вопроса")
    answers: list[Answer] = Field(default_factory=list, description="Варианты ответа")
    quiz_generation_task_id: str = Field(description="ID задачи генерации")
    created_at: datetime = Field(default_factory=utc_now, description="Время создания")
    updated_at: datetime = Field(default_factory=utc_now, description="Время обновления")
    deleted_at: datetime | None = Field(default=None, description="Метка мягкого удаления")

    @field_validator("content")
    @classmethod
    def validate_content(cls, value: str) -> str:
        """Содержимое вопроса не может быть пустым."""
        if not value or not value.strip():
            raise RequiredContentError("Question")
        return value

    def add_answer(self, answer: Answer) -> None:
        """Добавить вариант ответа.

        Args:
            answer: Ответ, ссылающийся на этот вопрос

        """
        self.answers.append(answer)
        self.updated_at = utc_now()

    def update_content(self, content: str) -> None:
        """Изменить текст вопроса.

        Args:
            content: Новый текст

        Raises:
            RequiredContentError: Если текст пустой

        """
        self.content = content
        self.updated_at = utc_now()

    def soft_delete(self) -> None:
        """Пометить вопрос удалённым."""
        now = utc_now()
        self.deleted_at = now
        self.updated_at = now
