"""Shared errors module.

Система обработки ошибок приложения.
"""

from flashme.shared.errors.base import AppException
from flashme.shared.errors.context import get_trace_id, set_trace_id, trace_id_var, trace_scope
from flashme.shared.errors.decorators import reraise_as
from flashme.shared.errors.domain_errors import (
    ConflictError,
    ForbiddenError,
    NotFoundError,
    ServiceUnavailableError,
    ValidationError,
)
from flashme.shared.errors.quiz_errors import (
    GenerationServiceError,
    InvalidAnswerError,
    InvalidQuestionError,
    NoQuestionsGeneratedError,
    RequiredContentError,
    RequiredTextContentError,
    RequiredUserIdError,
    StorageError,
    TaskAlreadyInProgressError,
    TaskNotFoundError,
    TextTooLongError,
    UnauthorizedTaskAccessError,
    UserAnswerStorageError,
    UserNotFoundError,
)
from flashme.shared.errors.schemas import ErrorResponse

__all__ = [
    # Base
    "AppException",
    # Context
    "trace_id_var",
    "get_trace_id",
    "set_trace_id",
    "trace_scope",
    # Domain errors
    "NotFoundError",
    "ValidationError",
    "ForbiddenError",
    "ConflictError",
    "ServiceUnavailableError",
    # Quiz errors
    "UserNotFoundError",
    "TaskNotFoundError",
    "UnauthorizedTaskAccessError",
    "RequiredContentError",
    "RequiredUserIdError",
    "RequiredTextContentError",
    "TextTooLongError",
    "GenerationServiceError",
    "NoQuestionsGeneratedError",
    "StorageError",
    "InvalidAnswerError",
    "InvalidQuestionError",
    "TaskAlreadyInProgressError",
    "UserAnswerStorageError",
    # Schemas
    "ErrorResponse",
    # Decorators
    "reraise_as",
]
