"""Форматтеры логов для Loguru.

Предоставляет форматтеры для структурированного логирования:
- JSON формат для production (structured logging с trace_id)
- Human-readable формат для development
- Sanitization для чувствительных данных (credentials)
"""

from typing import Any

import orjson

from flashme.core.constants import SENSITIVE_LOG_KEYS

REDACTED = "***REDACTED***"

TEXT_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
    "trace_id=<yellow>{extra[trace_id]}</yellow> - "
    "<level>{message}</level>"
)


def sanitize_extra(extra: dict[str, Any]) -> dict[str, Any]:
    """Замаскировать чувствительные поля в extra.

    Args:
        extra: Дополнительные поля записи лога

    Returns:
        Новый словарь с замаскированными credentials

    """
    return {
        key: REDACTED if key.lower() in SENSITIVE_LOG_KEYS else value
        for key, value in extra.items()
    }


def build_log_entry(record: dict[str, Any]) -> dict[str, Any]:
    """Собрать словарь JSON записи из Loguru record.

    Args:
        record: Loguru record dictionary

    Returns:
        Словарь с полями timestamp, level, message, module, function, line,
        полями из extra и описанием исключения (если есть)

    """
    log_entry: dict[str, Any] = {
        "timestamp": record["time"].isoformat(),
        "level": record["level"].name,
        "message": record["message"],
        "module": record["name"],
        "function": record["function"],
        "line": record["line"],
    }

    extra = {k: v for k, v in record["extra"].items() if not k.startswith("_")}
    log_entry.update(sanitize_extra(extra))

    exception = record.get("exception")
    if exception:
        log_entry["exception"] = {
            "type": exception.type.__name__ if exception.type else None,
            "value": str(exception.value) if exception.value else None,
        }

    return log_entry


def json_formatter(record: dict[str, Any]) -> str:
    """JSON форматтер для production structured logging.

    Loguru ожидает от форматтера шаблон, поэтому сериализованная запись
    кладётся в extra и шаблон ссылается на неё.

    Args:
        record: Loguru record dictionary

    Returns:
        Шаблон формата для Loguru

    """
    record["extra"]["_json"] = orjson.dumps(build_log_entry(record), default=str).decode("utf-8")
    return "{extra[_json]}\n"
