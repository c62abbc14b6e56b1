"""Background Task Runner - явный fire-and-forget для генерации.

Запускает корутины через asyncio.create_task, держит ссылки на
запущенные задачи (иначе их может собрать GC), ограничивает
параллелизм семафором и логирует ошибки на своей границе.
"""

import asyncio
import inspect
from collections.abc import Awaitable, Callable, Coroutine
from typing import Any

from flashme.shared.errors.context import trace_scope
from flashme.shared.logging import get_logger

logger = get_logger()


class BackgroundTaskRunner:
    """Реестр фоновых задач генерации по task_id.

    Ошибки фоновых задач не пробрасываются: они логируются, а
    наблюдаемым сигналом остаётся статус FAILED у самой задачи.
    Если задачу отменили до старта корутины (ожидание семафора, cancel
    сразу после schedule, shutdown), вызывается on_cancelled.
    """

    def __init__(self, max_concurrency: int | None = None) -> None:
        """Инициализировать runner.

        Args:
            max_concurrency: Лимит одновременных задач (None = без лимита)

        """
        self._semaphore = asyncio.Semaphore(max_concurrency) if max_concurrency else None
        self._tasks: dict[str, asyncio.Task[None]] = {}
        self._cancel_hooks: set[asyncio.Task[None]] = set()
        self._closed = False

        logger.info("BackgroundTaskRunner инициализирован", max_concurrency=max_concurrency)

    @property
    def active_count(self) -> int:
        return len(self._tasks)

    def is_running(self, task_id: str) -> bool:
        return task_id in self._tasks

    def schedule(
        self,
        task_id: str,
        coro: Coroutine[Any, Any, Any],
        on_cancelled: Callable[[], Awaitable[None]] | None = None,
    ) -> asyncio.Task[None]:
        """Запустить корутину в фоне и вернуться сразу.

        Args:
            task_id: ID задачи генерации (ключ реестра)
            coro: Корутина обработки
            on_cancelled: Вызывается, если задачу отменили до запуска coro

        Returns:
            asyncio.Task фоновой обработки

        Raises:
            RuntimeError: Runner остановлен или задача уже выполняется

        """
        if self._closed:
            coro.close()
            msg = "BackgroundTaskRunner остановлен"
            raise RuntimeError(msg)

        if task_id in self._tasks:
            coro.close()
            msg = f"Задача '{task_id}' уже выполняется"
            raise RuntimeError(msg)

        task = asyncio.create_task(self._run(task_id, coro), name=f"quiz-generation-{task_id}")
        self._tasks[task_id] = task
        task.add_done_callback(lambda done: self._on_done(task_id, done, coro, on_cancelled))

        logger.debug("Фоновая задача запланирована", task_id=task_id, active=len(self._tasks))
        return task

    async def _run(self, task_id: str, coro: Coroutine[Any, Any, Any]) -> None:
        with trace_scope(task_id), logger.contextualize(task_id=task_id):
            try:
                if self._semaphore is None:
                    await coro
                else:
                    async with self._semaphore:
                        await coro
            except asyncio.CancelledError:
                logger.warning("Фоновая задача отменена", task_id=task_id)
                raise
            except Exception as e:
                logger.exception(
                    "Ошибка фоновой генерации квиза",
                    task_id=task_id,
                    error_type=type(e).__name__,
                    error=str(e),
                )

    def _on_done(
        self,
        task_id: str,
        task: asyncio.Task[None],
        coro: Coroutine[Any, Any, Any],
        on_cancelled: Callable[[], Awaitable[None]] | None,
    ) -> None:
        self._tasks.pop(task_id, None)

        never_started = inspect.getcoroutinestate(coro) == inspect.CORO_CREATED
        coro.close()

        if task.cancelled() and never_started and on_cancelled is not None:
            hook = asyncio.create_task(self._run_cancel_hook(task_id, on_cancelled), name=f"quiz-cancel-{task_id}")
            self._cancel_hooks.add(hook)
            hook.add_done_callback(self._cancel_hooks.discard)

    async def _run_cancel_hook(self, task_id: str, on_cancelled: Callable[[], Awaitable[None]]) -> None:
        with trace_scope(task_id), logger.contextualize(task_id=task_id):
            logger.warning("Фоновая задача отменена до запуска", task_id=task_id)
            try:
                await on_cancelled()
            except Exception as e:
                logger.exception("Ошибка обработки отмены фоновой задачи", task_id=task_id, error=str(e))

    def cancel(self, task_id: str) -> bool:
        """Отменить фоновую задачу.

        Returns:
            True, если задача была найдена и отменена

        """
        task = self._tasks.get(task_id)
        if task is None or task.done():
            return False

        task.cancel()
        logger.info("Отмена фоновой задачи", task_id=task_id)
        return True

    async def wait_idle(self) -> None:
        """Дождаться завершения всех запущенных задач и обработчиков отмены."""
        while self._tasks or self._cancel_hooks:
            await asyncio.gather(*self._tasks.values(), *self._cancel_hooks, return_exceptions=True)

    async def shutdown(self, cancel: bool = True) -> None:
        """Остановить runner.

        Args:
            cancel: Отменить выполняющиеся задачи (иначе дождаться их)

        """
        self._closed = True

        if cancel:
            for task in list(self._tasks.values()):
                task.cancel()

        await self.wait_idle()

        logger.info("BackgroundTaskRunner остановлен", cancelled=cancel)
