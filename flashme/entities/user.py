"""User - владелец задач генерации (только для поиска по ID)."""

from datetime import datetime

from pydantic import BaseModel, Field

from flashme.entities.base import new_id, utc_now


class User(BaseModel):
    """Пользователь системы."""

    id: str = Field(default_factory=new_id, description="ID пользователя")
    email: str | None = Field(default=None, description="Email")
    created_at: datetime = Field(default_factory=utc_now, description="Время создания")
