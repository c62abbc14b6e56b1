"""trace_id текущего контекста выполнения.

Для фоновой генерации trace_id равен ID задачи, поэтому все логи и
ErrorResponse одного жизненного цикла задачи связаны между собой.
"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar, Token
from uuid import uuid4

trace_id_var: ContextVar[str] = ContextVar("trace_id", default="")


def get_trace_id() -> str:
    """Текущий trace_id; при отсутствии создаётся новый uuid4."""
    current = trace_id_var.get()
    if current:
        return current

    generated = str(uuid4())
    trace_id_var.set(generated)
    return generated


def set_trace_id(trace_id: str) -> Token[str]:
    """Установить trace_id и вернуть token для reset."""
    return trace_id_var.set(trace_id)


@contextmanager
def trace_scope(trace_id: str) -> Iterator[str]:
    """Временно установить trace_id на время блока.

    Args:
        trace_id: Идентификатор (для генерации квиза - ID задачи)

    Yields:
        Установленный trace_id

    """
    token = trace_id_var.set(trace_id)
    try:
        yield trace_id
    finally:
        trace_id_var.reset(token)
