"""flashme - Core module.

Ядро приложения: конфигурация, константы, перечисления.
"""

from flashme.core.config import settings
from flashme.core.constants import DEFAULT_MAX_TEXT_LENGTH, DEFAULT_QUESTIONS_LIMIT
from flashme.core.enums import GenerationProvider, QuizGenerationStatus

__all__ = [
    "settings",
    "DEFAULT_MAX_TEXT_LENGTH",
    "DEFAULT_QUESTIONS_LIMIT",
    "GenerationProvider",
    "QuizGenerationStatus",
]
