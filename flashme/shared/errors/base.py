"""Base exception class for application errors.

Коды ошибок выводятся из имён классов, сообщения по умолчанию из docstring.
"""

import re
from typing import Any

from flashme.shared.errors.context import get_trace_id
from flashme.shared.errors.schemas import ErrorResponse

_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


def error_code_from_class_name(name: str) -> str:
    """TextTooLongError -> TEXT_TOO_LONG."""
    for suffix in ("Exception", "Error"):
        if name.endswith(suffix):
            name = name[: -len(suffix)]
            break
    return _CAMEL_BOUNDARY.sub("_", name).upper()


class AppException(Exception):
    """Базовый класс для всех бизнес-ошибок.

    Подклассы получают code и default_message автоматически, если не
    задают их явно.
    """

    status_code: int = 500
    code: str = "INTERNAL_ERROR"
    default_message: str = "Внутренняя ошибка"

    def __init__(
        self,
        message: str | None = None,
        details: dict[str, Any] | None = None,
        status_code: int | None = None,
        code: str | None = None,
    ) -> None:
        """Инициализация исключения.

        Args:
            message: Сообщение (по умолчанию default_message класса)
            details: Диагностические данные
            status_code: Переопределить статус класса
            code: Переопределить код класса

        """
        self.message = message or self.default_message
        self.details: dict[str, Any] = dict(details or {})

        if status_code is not None:
            self.status_code = status_code
        if code is not None:
            self.code = code

        super().__init__(self.message)

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)

        if "code" not in cls.__dict__:
            cls.code = error_code_from_class_name(cls.__name__)

        if "default_message" not in cls.__dict__ and cls.__doc__:
            cls.default_message = cls.__doc__.strip().splitlines()[0]

    def log_context(self) -> dict[str, Any]:
        """Поля для structured логов (logger.error(..., **exc.log_context()))."""
        return {"error_code": self.code, "status_code": self.status_code, **self.details}

    def to_response(self) -> ErrorResponse:
        """Представление ошибки для внешнего слоя с текущим trace_id."""
        return ErrorResponse(
            error=self.code,
            message=self.message,
            details=self.details,
            trace_id=get_trace_id(),
        )
