"""Error schemas.

Pydantic схемы для ошибок.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ErrorResponse(BaseModel):
    """Стандартное представление ошибки для внешнего слоя."""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "error": "TEXT_TOO_LONG",
                "message": "Текст превышает допустимую длину: 50001 > 50000",
                "details": {"length": 50001, "max_length": 50000},
                "trace_id": "a1b2c3d4-e5f6-4789-9012-345678901234",
            }
        }
    )

    error: str = Field(..., description="Код ошибки")
    message: str = Field(..., description="Человекочитаемое сообщение")
    details: dict[str, Any] = Field(default_factory=dict, description="Дополнительные детали")
    trace_id: str = Field(default="", description="ID трассировки для отладки")
