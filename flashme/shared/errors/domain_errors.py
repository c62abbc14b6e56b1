"""Domain errors.

Общие доменные исключения приложения.
"""

from flashme.shared.errors.base import AppException


class NotFoundError(AppException):
    """Ресурс не найден."""

    status_code = 404
    code = "NOT_FOUND"


class ValidationError(AppException):
    """Ошибка валидации данных."""

    status_code = 422
    code = "VALIDATION_ERROR"


class ForbiddenError(AppException):
    """Доступ запрещён."""

    status_code = 403
    code = "FORBIDDEN"


class ConflictError(AppException):
    """Конфликт с текущим состоянием ресурса."""

    status_code = 409
    code = "CONFLICT"


class ServiceUnavailableError(AppException):
    """Сервис недоступен."""

    status_code = 503
    code = "SERVICE_UNAVAILABLE"
