"""Error handling decorators.

Декораторы для обработки ошибок.
"""

import functools
import inspect
from typing import Any, Callable, TypeVar

from loguru import logger

from flashme.shared.errors.quiz_errors import StorageError

T = TypeVar("T")


def reraise_as(
    error_cls: type[StorageError],
    message: str,
) -> Callable[[Callable[..., T]], Callable[..., T]]:
    """Декоратор для преобразования технических ошибок в доменную.

    Любое исключение, кроме уже являющегося error_cls, заворачивается
    в error_cls с сохранением исходного исключения.

    Args:
        error_cls: Класс доменной ошибки (StorageError или наследник).
        message: Префикс сообщения об ошибке.

    Returns:
        Декоратор.

    """

    def decorator(func: Callable[..., T]) -> Callable[..., T]:
        @functools.wraps(func)
        async def async_wrapper(*args: Any, **kwargs: Any) -> T:
            try:
                return await func(*args, **kwargs)
            except error_cls:
                raise
            except Exception as e:
                logger.warning(
                    f"Technical error in {func.__name__}",
                    exception_type=type(e).__name__,
                    exception_message=str(e),
                )
                raise error_cls(message=f"{message}: {e}", original_error=e) from e

        @functools.wraps(func)
        def sync_wrapper(*args: Any, **kwargs: Any) -> T:
            try:
                return func(*args, **kwargs)
            except error_cls:
                raise
            except Exception as e:
                logger.warning(
                    f"Technical error in {func.__name__}",
                    exception_type=type(e).__name__,
                    exception_message=str(e),
                )
                raise error_cls(message=f"{message}: {e}", original_error=e) from e

        # Определяем, асинхронная функция или нет
        if inspect.iscoroutinefunction(func):
            return async_wrapper  # type: ignore[return-value]
        return sync_wrapper

    return decorator
