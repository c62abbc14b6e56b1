"""Quiz-специфичные исключения.

Этот модуль содержит исключения пайплайна генерации квизов:
валидация при создании задачи, ошибки сервиса генерации,
ошибки сохранения и ответов пользователя.
"""

from typing import Any

from flashme.shared.errors.base import AppException
from flashme.shared.errors.domain_errors import (
    ConflictError,
    ForbiddenError,
    NotFoundError,
    ServiceUnavailableError,
    ValidationError,
)


class UserNotFoundError(NotFoundError):
    """Пользователь не найден."""

    def __init__(self, user_id: str) -> None:
        """Инициализация исключения.

        Args:
            user_id: Идентификатор пользователя.

        """
        super().__init__(
            message=f"Пользователь с ID '{user_id}' не найден",
            details={"user_id": user_id},
        )


class TaskNotFoundError(NotFoundError):
    """Задача генерации квиза не найдена."""

    def __init__(self, task_id: str) -> None:
        """Инициализация исключения.

        Args:
            task_id: Идентификатор задачи.

        """
        super().__init__(
            message=f"Задача генерации квиза с ID '{task_id}' не найдена",
            details={"task_id": task_id},
        )


class UnauthorizedTaskAccessError(ForbiddenError):
    """Задача принадлежит другому пользователю."""

    def __init__(self, task_id: str, user_id: str) -> None:
        """Инициализация исключения.

        Args:
            task_id: Идентификатор задачи.
            user_id: Идентификатор пользователя, запросившего доступ.

        """
        super().__init__(
            message=f"Задача '{task_id}' не принадлежит пользователю '{user_id}'",
            details={"task_id": task_id, "user_id": user_id},
        )


class RequiredContentError(ValidationError):
    """Содержимое обязательно."""

    def __init__(self, entity_name: str = "Entity") -> None:
        """Инициализация исключения.

        Args:
            entity_name: Название сущности (Question, Answer).

        """
        super().__init__(
            message=f"Содержимое обязательно для {entity_name}",
            details={"entity": entity_name},
        )


class RequiredUserIdError(ValidationError):
    """Идентификатор пользователя обязателен."""


class RequiredTextContentError(ValidationError):
    """Текст для генерации обязателен."""


class TextTooLongError(ValidationError):
    """Текст превышает допустимую длину."""

    def __init__(self, length: int, max_length: int) -> None:
        """Инициализация исключения.

        Args:
            length: Фактическая длина текста.
            max_length: Максимально допустимая длина.

        """
        super().__init__(
            message=f"Текст превышает допустимую длину: {length} > {max_length}",
            details={"length": length, "max_length": max_length},
        )


class GenerationServiceError(ServiceUnavailableError):
    """Ошибка сервиса генерации вопросов."""

    def __init__(
        self,
        message: str | None = None,
        original_error: BaseException | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Инициализация исключения.

        Args:
            message: Описание ошибки.
            original_error: Исходное исключение клиента генерации.
            details: Дополнительная информация.

        """
        self.original_error = original_error
        details = details or {}
        if original_error is not None:
            details.setdefault("error_type", type(original_error).__name__)
            details.setdefault("error", str(original_error))
        super().__init__(message=message, details=details)
        if original_error is not None:
            self.__cause__ = original_error


class NoQuestionsGeneratedError(AppException):
    """Сервис генерации не вернул ни одного вопроса."""

    status_code = 422

    def __init__(self, text: str, excerpt_length: int = 50) -> None:
        """Инициализация исключения.

        Args:
            text: Исходный текст задачи.
            excerpt_length: Сколько символов текста сохранить для диагностики.

        """
        self.excerpt = text[:excerpt_length]
        super().__init__(
            message=f'Не удалось сгенерировать вопросы по тексту: "{self.excerpt}..."',
            details={"excerpt": self.excerpt, "text_length": len(text)},
        )


class StorageError(AppException):
    """Ошибка сохранения данных квиза."""

    status_code = 500

    def __init__(
        self,
        message: str | None = None,
        original_error: BaseException | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Инициализация исключения.

        Args:
            message: Описание ошибки.
            original_error: Исходное исключение репозитория.
            details: Дополнительная информация.

        """
        self.original_error = original_error
        details = details or {}
        if original_error is not None:
            details.setdefault("error_type", type(original_error).__name__)
            details.setdefault("error", str(original_error))
        super().__init__(message=message, details=details)
        if original_error is not None:
            self.__cause__ = original_error


class InvalidAnswerError(ValidationError):
    """Некорректный ответ пользователя."""


class UserAnswerStorageError(StorageError):
    """Ошибка сохранения ответа пользователя."""


class TaskAlreadyInProgressError(ConflictError):
    """Генерация по задаче уже выполняется."""

    def __init__(self, task_id: str) -> None:
        """Инициализация исключения.

        Args:
            task_id: Идентификатор задачи.

        """
        super().__init__(
            message=f"Генерация по задаче '{task_id}' уже выполняется",
            details={"task_id": task_id},
        )


class InvalidQuestionError(ValidationError):
    """Некорректный вопрос."""
