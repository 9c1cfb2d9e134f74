# 🛡️ caption_bot/errors/exception_handler_service.py
"""
🛡️ Центральний сервіс обробки помилок воркерів.

🔹 Конвертує будь-які винятки в доменні `AppError`, використовуючи передані стратегії.
🔹 Логує повний контекст (chat_id, код помилки, payload) і рахує метрику.
🔹 Не вирішує долю воркера: це робить пул за обраним `FailureMode`.
"""

from __future__ import annotations

# 🔠 Системні імпорти
import asyncio
import logging
from typing import Any, List, Optional

# 🧩 Внутрішні модулі проєкту
from caption_bot.shared.metrics import WORKER_ERRORS
from caption_bot.shared.utils.logger import LOG_NAME
from .custom_errors import AppError, ErrorCode
from .strategies import IErrorHandlingStrategy


# ================================
# 🧾 ЛОГЕР
# ================================
logger = logging.getLogger(f"{LOG_NAME}.errors")


# ================================
# 🧠 СЕРВІС ОБРОБКИ ПОМИЛОК
# ================================
class ExceptionHandlerService:
    """🧠 Перетворює та журналює винятки, що вилетіли з обробки події."""

    def __init__(self, strategies: List[IErrorHandlingStrategy]) -> None:
        self._strategies = list(strategies)							# 📦 Копія списку, щоб уникнути мутацій
        logger.debug("🛡️ ExceptionHandlerService init", extra={"strategies": len(self._strategies)})

    # ================================
    # 🔑 ПУБЛІЧНИЙ API
    # ================================
    def convert(self, error: Exception) -> AppError:
        """🔄 Пропускає виняток через стратегії; невідомі загортає в базовий `AppError`."""
        if isinstance(error, AppError):
            return error

        for strategy in self._strategies:
            converted = strategy.handle(error)
            if converted is not None:
                converted.__cause__ = error							# 🔗 Зберігаємо першопричину
                return converted

        wrapped = AppError(f"Unexpected {type(error).__name__}", details=str(error))
        wrapped.__cause__ = error
        return wrapped

    def handle(self, error: Exception, event: Optional[Any] = None) -> AppError:
        """
        Головна точка входу: конвертує, логує, рахує.

        Args:
            error: Виняток з обробки події.
            event: Подія, на якій стався збій (для логів).

        Returns:
            AppError: Доменна форма помилки.
        """
        if isinstance(error, asyncio.CancelledError):					# ⏹️ Скасування не є помилкою обробки
            raise error

        domain_error = self.convert(error)
        extra = dict(domain_error.to_log_extra())
        chat_id = getattr(event, "chat_id", None)
        if chat_id is None:											# 🤖 Сирий `Update` з черги
            chat_id = getattr(getattr(event, "effective_chat", None), "id", None)
        if chat_id is not None:
            extra.setdefault("chat_id", chat_id)

        if domain_error.code == ErrorCode.UNKNOWN:
            logger.error("🔥 Unhandled exception: %s", domain_error, extra=extra, exc_info=error)
        else:
            logger.warning("⚠️ %s: %s", domain_error.code, domain_error, extra=extra)

        WORKER_ERRORS.labels(error=domain_error.code).inc()
        return domain_error


__all__ = ["ExceptionHandlerService"]
