"""Модуль структурированного логирования.

Предоставляет единый интерфейс для логирования во всем приложении:
- trace_id в каждой записи (для фоновой генерации равен ID задачи)
- JSON формат для production structured logging
- Human-readable формат для development

Основное использование:
    >>> from flashme.shared.logging import setup_logging, get_logger
    >>> setup_logging()  # Вызвать один раз при старте
    >>> logger = get_logger()
    >>> logger.info("Задача создана", task_id=task.id)
"""

from flashme.shared.logging.config import (
    InterceptHandler,
    configure_third_party_loggers,
    get_logger,
    setup_logging,
    trace_id_patcher,
)
from flashme.shared.logging.formatters import build_log_entry, json_formatter, sanitize_extra

__all__ = [
    "InterceptHandler",
    "build_log_entry",
    "configure_third_party_loggers",
    "get_logger",
    "json_formatter",
    "sanitize_extra",
    "setup_logging",
    "trace_id_patcher",
]
