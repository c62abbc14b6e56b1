"""QuizGenerationTask - единица работы генерации квиза.

Задача хранит исходный текст, статус жизненного цикла и накопленные
вопросы. Задача - единственная точка изменения своих вопросов:
вопросы только добавляются, никогда не удаляются через API задачи.

Example:
    >>> task = QuizGenerationTask(text_content="...", user_id="user-1")
    >>> task.update_status(QuizGenerationStatus.COMPLETED)
    >>> task.generated_at is not None
    True

"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from flashme.core.enums import QuizGenerationStatus
from flashme.entities.base import new_id, utc_now
from flashme.entities.question import Question
from flashme.shared.errors import RequiredUserIdError


class QuizGenerationTask(BaseModel):
    """Задача генерации квиза со статусной машиной.

    Таблицы переходов нет: любой статус можно установить из любого.
    Переход в COMPLETED выставляет generated_at только один раз.
    updated_at обновляется при каждом изменении.
    """

    model_config = ConfigDict(validate_assignment=True)

    id: str = Field(default_factory=new_id, description="ID задачи")
    text_content: str = Field(default="", description="Исходный текст (пустой при загрузке файла)")
    title: str | None = Field(default=None, description="Заголовок квиза")
    category: str | None = Field(default=None, description="Категория квиза")
    status: QuizGenerationStatus = Field(
        default=QuizGenerationStatus.PENDING,
        description="Статус генерации",
    )
    generated_at: datetime | None = Field(default=None, description="Время успешной генерации")
    created_at: datetime = Field(default_factory=utc_now, description="Время создания")
    updated_at: datetime = Field(default_factory=utc_now, description="Время обновления")
    deleted_at: datetime | None = Field(default=None, description="Метка мягкого удаления")
    user_id: str = Field(description="ID пользователя-владельца")
    questions: list[Question] = Field(default_factory=list, description="Вопросы задачи")

    @field_validator("user_id")
    @classmethod
    def validate_user_id(cls, value: str) -> str:
        """Владелец обязателен."""
        if not value or not value.strip():
            raise RequiredUserIdError()
        return value

    def add_question(self, question: Question) -> None:
        """Добавить вопрос в задачу.

        Полнота вопроса (наличие ответов) здесь не проверяется.

        Args:
            question: Вопрос для добавления

        """
        self.questions.append(question)
        self.updated_at = utc_now()

    def update_status(self, status: QuizGenerationStatus) -> None:
        """Перевести задачу в новый статус.

        Args:
            status: Новый статус

        """
        now = utc_now()
        self.status = status
        self.updated_at = now

        if status == QuizGenerationStatus.COMPLETED and self.generated_at is None:
            self.generated_at = now

    def set_title(self, title: str) -> None:
        """Установить заголовок."""
        self.title = title
        self.updated_at = utc_now()

    def set_category(self, category: str) -> None:
        """Установить категорию."""
        self.category = category
        self.updated_at = utc_now()

    def soft_delete(self) -> None:
        """Пометить задачу удалённой."""
        now = utc_now()
        self.deleted_at = now
        self.updated_at = now

    def is_generation_complete(self) -> bool:
        """Проверить, завершена ли генерация успешно."""
        return self.status == QuizGenerationStatus.COMPLETED

    @property
    def is_deleted(self) -> bool:
        """Задача помечена удалённой."""
        return self.deleted_at is not None
