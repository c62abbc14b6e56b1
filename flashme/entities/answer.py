"""Answer - вариант ответа на вопрос."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from flashme.entities.base import new_id, utc_now
from flashme.shared.errors import RequiredContentError


class Answer(BaseModel):
    """Вариант ответа, принадлежащий ровно одному вопросу.

    Наличие хотя бы одного правильного ответа у вопроса проверяется
    сценариями генерации и редактирования, а не этой сущностью.
    """

    model_config = ConfigDict(validate_assignment=True)

    id: str = Field(default_factory=new_id, description="ID ответа")
    content: str = Field(description="Текст ответа")
    is_correct: bool = Field(description="Признак правильного ответа")
    question_id: str = Field(description="ID вопроса-владельца")
    created_at: datetime = Field(default_factory=utc_now, description="Время создания")
    updated_at: datetime = Field(default_factory=utc_now, description="Время обновления")
    deleted_at: datetime | None = Field(default=None, description="Метка мягкого удаления")

    @field_validator("content")
    @classmethod
    def validate_content(cls, value: str) -> str:
        """Содержимое ответа не может быть пустым."""
        if not value or not value.strip():
            raise RequiredContentError("Answer")
        return value

    def update_content(self, content: str) -> None:
        """Изменить текст ответа.

        Args:
            content: Новый текст

        Raises:
            RequiredContentError: Если текст пустой

        """
        self.content = content
        self.updated_at = utc_now()

    def set_is_correct(self, is_correct: bool) -> None:
        """Изменить признак правильности."""
        self.is_correct = is_correct
        self.updated_at = utc_now()

    def soft_delete(self) -> None:
        """Пометить ответ удалённым."""
        now = utc_now()
        self.deleted_at = now
        self.updated_at = now
