"""UserAnswer - неизменяемая запись ответа пользователя.

Используется только для анализа частоты ответов при подборе вопросов.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from flashme.entities.answer import Answer
from flashme.entities.base import new_id, utc_now
from flashme.shared.errors import InvalidAnswerError


class UserAnswer(BaseModel):
    """Ответ пользователя на вопрос.

    Хранит ссылку (не владение) на выбранный Answer и ID вопроса.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=new_id, description="ID записи")
    user_id: str = Field(description="ID пользователя")
    question_id: str = Field(description="ID вопроса")
    answer: Answer = Field(description="Выбранный вариант ответа")
    created_at: datetime = Field(default_factory=utc_now, description="Время создания")
    updated_at: datetime = Field(default_factory=utc_now, description="Время обновления")

    @field_validator("user_id")
    @classmethod
    def validate_user_id(cls, value: str) -> str:
        if not value:
            raise InvalidAnswerError("User ID обязателен")
        return value

    @field_validator("question_id")
    @classmethod
    def validate_question_id(cls, value: str) -> str:
        if not value:
            raise InvalidAnswerError("Question ID обязателен")
        return value

    @property
    def answer_id(self) -> str:
        return self.answer.id

    @property
    def is_correct(self) -> bool:
        return self.answer.is_correct
