"""Общие хелперы сущностей."""

from datetime import datetime, timezone
from uuid import uuid4


def utc_now() -> datetime:
    """Текущее время в UTC."""
    return datetime.now(timezone.utc)


def new_id() -> str:
    """Сгенерировать новый идентификатор сущности."""
    return str(uuid4())
