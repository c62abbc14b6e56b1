"""Logging configuration.

Настройка логирования через Loguru.

Этот модуль настраивает единый логгер для всего приложения:
- Loguru для собственных логов (цвета или JSON, trace_id в каждой записи)
- Перехват логов сторонних библиотек (openai, anthropic, httpx) и перенаправление в Loguru
"""

import logging
import sys
from typing import TYPE_CHECKING, Any

from loguru import logger

from flashme.core.config import settings
from flashme.shared.errors.context import trace_id_var
from flashme.shared.logging.formatters import TEXT_FORMAT, json_formatter

if TYPE_CHECKING:
    from loguru import Logger


class InterceptHandler(logging.Handler):
    """Handler для перехвата логов стандартного logging и перенаправления в Loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        """Перехват и отправка логов в Loguru.

        Args:
            record: Запись лога из стандартного logging.

        """
        try:
            level: str | int = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Получаем глубину стека
        frame, depth = logging.currentframe(), 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


def trace_id_patcher(record: dict[str, Any]) -> None:
    """Добавить trace_id в запись лога.

    Args:
        record: Запись лога.

    """
    record["extra"].setdefault("trace_id", trace_id_var.get() or "no-trace")


def setup_logging() -> None:
    """Настроить Loguru для всего приложения.

    Конфигурация:
    - text: human-readable в stdout с цветами
    - json: JSON формат для structured logging
    - Опциональный файл с ротацией (всегда JSON)
    - Перехват сторонних логгеров
    """
    logger.remove()
    logger.configure(patcher=trace_id_patcher)

    is_json = settings.log.format == "json"

    logger.add(
        sys.stdout,
        format=json_formatter if is_json else TEXT_FORMAT,
        level=settings.log.level,
        colorize=not is_json,
        backtrace=True,
        diagnose=settings.debug,
    )

    if settings.log.file_path:
        logger.add(
            settings.log.file_path,
            format=json_formatter,
            level=settings.log.level,
            rotation=settings.log.rotation,
            retention=settings.log.retention,
            compression="zip",
            backtrace=True,
            diagnose=settings.debug,
        )

    configure_third_party_loggers()

    logger.info(
        "Логгер настроен",
        level=settings.log.level,
        format=settings.log.format,
        file=settings.log.file_path,
    )


def configure_third_party_loggers() -> None:
    """Настроить логирование сторонних библиотек."""
    loggers_to_intercept = [
        "asyncio",
        "openai",
        "anthropic",
        "httpx",
    ]

    for logger_name in loggers_to_intercept:
        logging_logger = logging.getLogger(logger_name)
        logging_logger.handlers = [InterceptHandler()]
        logging_logger.propagate = False

    # Шумные библиотеки
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("openai").setLevel(logging.WARNING)
    logging.getLogger("anthropic").setLevel(logging.WARNING)

    logger.debug("Сторонние логгеры настроены")


def get_logger(name: str | None = None) -> "Logger":
    """Получить настроенный logger instance.

    Args:
        name: Имя логгера (обычно __name__ модуля)

    Returns:
        Настроенный Loguru logger

    """
    if name:
        return logger.bind(logger_name=name)
    return logger
