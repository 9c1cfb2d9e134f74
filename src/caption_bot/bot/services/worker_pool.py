# 👷 caption_bot/bot/services/worker_pool.py
"""
👷 WorkerPool — N послідовних споживачів однієї спільної черги апдейтів.

🔹 Кожен воркер обробляє події строго по одній; воркери працюють паралельно.
🔹 Зупинка кооперативна: спільний `asyncio.Event`, воркер виходить між подіями.
🔹 `FailureMode.STRICT`: перша помилка зупиняє весь пул, `done` несе цю помилку.
🔹 `FailureMode.ISOLATE`: помилку залоговано, подію відкинуто, воркер працює далі.
"""

from __future__ import annotations

# 🔠 Системні імпорти
import asyncio
import logging
from typing import Any, Awaitable, Callable, List, Optional

# 🧩 Внутрішні модулі проєкту
from caption_bot.domain.dispatch.dto import FailureMode
from caption_bot.domain.dispatch.interfaces import IUpdateSource
from caption_bot.errors import AppError, ConfigError, ExceptionHandlerService
from caption_bot.shared.utils.logger import LOG_NAME

# ================================
# 🧾 ЛОГЕР ТА ТИПИ
# ================================
logger = logging.getLogger(f"{LOG_NAME}.pool")

ItemHandler = Callable[[Any], Awaitable[Any]]


# ================================
# 🏛️ ПУЛ ВОРКЕРІВ
# ================================
class WorkerPool:
    """👷 Фіксований пул без динамічного масштабування."""

    def __init__(
        self,
        *,
        source: IUpdateSource,
        handler: ItemHandler,
        workers: int,
        exception_handler: ExceptionHandlerService,
        failure_mode: FailureMode = FailureMode.ISOLATE,
    ) -> None:
        if workers < 1:
            raise ConfigError("Number of workers must be positive", key="workers", details=str(workers))
        self._source = source
        self._handler = handler
        self._size = workers
        self._errors = exception_handler
        self._mode = failure_mode

        self._stop = asyncio.Event()
        self._failures: "asyncio.Queue[AppError]" = asyncio.Queue()	# 📥 Багато писачів, один читач
        self._workers: List["asyncio.Task[None]"] = []
        self._done: Optional["asyncio.Task[Optional[AppError]]"] = None

    # ================================
    # 🔑 ПУБЛІЧНИЙ API
    # ================================
    @property
    def workers(self) -> List["asyncio.Task[None]"]:
        return list(self._workers)

    @property
    def failure_mode(self) -> FailureMode:
        return self._mode

    async def start(self) -> "asyncio.Task[Optional[AppError]]":
        """
        Запускає джерело, воркерів і супервізора.

        Returns:
            asyncio.Task: завершується, коли пул повністю зупинено; результат —
            помилка, що спричинила зупинку, або None для зовнішньої зупинки.
        """
        if self._done is not None:
            return self._done

        await self._source.start()
        self._workers = [
            asyncio.create_task(self._worker(index), name=f"caption-worker-{index}")
            for index in range(self._size)
        ]
        self._done = asyncio.create_task(self._supervise(), name="caption-pool-supervisor")
        logger.info("👷 Worker pool started (workers=%d, mode=%s)", self._size, self._mode.value)
        return self._done

    def stop(self) -> None:
        """🛑 Зовнішній сигнал зупинки; воркери вийдуть після поточної події."""
        if not self._stop.is_set():
            logger.info("🛑 Stop requested")
        self._stop.set()

    # ================================
    # 👷 ВОРКЕР
    # ================================
    async def _worker(self, index: int) -> None:
        logger.debug("▶️ worker-%d started", index)
        while not self._stop.is_set():
            item = await self._next_item()
            if item is None:
                break
            try:
                await self._handler(item)
            except asyncio.CancelledError:
                raise
            except Exception as exc:
                error = self._report(exc, item)
                if self._mode is FailureMode.STRICT:
                    logger.error("💥 worker-%d failed, stopping pool: %s", index, error)
                    self._failures.put_nowait(error)
                    break
                logger.info("🩹 worker-%d dropped event after error: %s", index, error.code)
        logger.debug("⏹️ worker-%d exited", index)

    def _report(self, exc: Exception, item: Any) -> AppError:
        """🧯 Обробник помилок сам може впасти; тоді воркер отримує сиру форму помилки."""
        try:
            return self._errors.handle(exc, item)
        except asyncio.CancelledError:
            raise
        except Exception:
            logger.exception("🔥 Exception handler failed while reporting %s", type(exc).__name__)
            fallback = AppError(str(exc) or type(exc).__name__)
            fallback.__cause__ = exc
            return fallback

    async def _next_item(self) -> Optional[Any]:
        """⏳ Перше з двох: наступний елемент черги або сигнал зупинки."""
        get_task = asyncio.ensure_future(self._source.queue.get())
        stop_task = asyncio.ensure_future(self._stop.wait())
        done, pending = await asyncio.wait({get_task, stop_task}, return_when=asyncio.FIRST_COMPLETED)
        for task in pending:
            task.cancel()
        if get_task in done:
            return get_task.result()
        return None

    # ================================
    # 🧭 СУПЕРВІЗОР
    # ================================
    async def _supervise(self) -> Optional[AppError]:
        failure_task = asyncio.ensure_future(self._failures.get())
        stop_task = asyncio.ensure_future(self._stop.wait())
        done, pending = await asyncio.wait({failure_task, stop_task}, return_when=asyncio.FIRST_COMPLETED)
        for task in pending:
            task.cancel()

        error: Optional[AppError] = failure_task.result() if failure_task in done else None

        self._stop.set()											# 🛑 Зупиняємо решту воркерів
        await asyncio.gather(*self._workers, return_exceptions=True)
        await self._source.stop()

        if error is not None:
            logger.error("🔥 Worker pool stopped by error: %s", error)
        else:
            logger.info("👋 Worker pool stopped")
        return error


__all__ = ["WorkerPool"]
