# 📜 caption_bot/errors/strategies.py
"""
📜 Стратегії конвертації сторонніх винятків у доменні `AppError`.

🔹 Виносять логіку із `ExceptionHandlerService`, щоб сервіс залишався простим DI-клієнтом.
🔹 Telegram і httpx → `TransportError`, Pillow → `ImageDecodeError` / `RenderError`.
"""

from __future__ import annotations

# 🌐 Зовнішні бібліотеки
import httpx															# 🌐 HTTP-клієнт під капотом PTB
from PIL import Image, UnidentifiedImageError							# 🖼️ Винятки декодування
from telegram.error import RetryAfter, TelegramError					# 🤖 Telegram винятки

# 🔠 Системні імпорти
import logging
from typing import Optional, Protocol

# 🧩 Внутрішні модулі проєкту
from caption_bot.shared.utils.logger import LOG_NAME
from .custom_errors import AppError, ImageDecodeError, TransportError


# ================================
# 🧾 ЛОГЕР
# ================================
logger = logging.getLogger(f"{LOG_NAME}.errors.strategies")


# ================================
# 🧠 КОНТРАКТ СТРАТЕГІЙ
# ================================
class IErrorHandlingStrategy(Protocol):
    """🧠 Контракт, що визначає єдиний метод `handle`."""

    def handle(self, error: Exception) -> Optional[AppError]:
        """Вертає `AppError`, якщо виняток розпізнано, або None."""


# ================================
# 🤖 TELEGRAM-СТРАТЕГІЯ
# ================================
class TelegramErrorStrategy(IErrorHandlingStrategy):
    """🤖 Конвертує Telegram-помилки в `TransportError`."""

    def handle(self, error: Exception) -> Optional[AppError]:
        if isinstance(error, RetryAfter):								# ⏳ Telegram просить почекати
            retry_after = error.retry_after
            secs = int(retry_after.total_seconds()) if hasattr(retry_after, "total_seconds") else int(retry_after)
            logger.debug("⏳ Telegram retry_after", extra={"seconds": secs})
            return TransportError("Telegram flood control", details=str(error), retry_after_s=secs)
        if isinstance(error, TelegramError):
            logger.debug("🤖 Telegram general error")
            return TransportError("Telegram API error", details=str(error))
        return None


# ================================
# 🌐 HTTPX-СТРАТЕГІЯ
# ================================
class HttpxErrorStrategy(IErrorHandlingStrategy):
    """🌐 Перетворює httpx-помилки на `TransportError`."""

    def handle(self, error: Exception) -> Optional[AppError]:
        if isinstance(error, httpx.TimeoutException):
            logger.debug("⏱️ httpx timeout")
            return TransportError("HTTP timeout", details=str(error))
        if isinstance(error, httpx.HTTPStatusError):
            status = error.response.status_code
            logger.debug("🔢 httpx status error", extra={"status": status})
            return TransportError(f"HTTP status {status}", details=str(error))
        if isinstance(error, httpx.HTTPError):
            logger.debug("🌐 httpx transport error")
            return TransportError("HTTP transport error", details=str(error))
        return None


# ================================
# 🖼️ PILLOW-СТРАТЕГІЯ
# ================================
class PillowErrorStrategy(IErrorHandlingStrategy):
    """🖼️ Нерозпізнані та «бомбові» зображення → `ImageDecodeError`."""

    def handle(self, error: Exception) -> Optional[AppError]:
        if isinstance(error, (UnidentifiedImageError, Image.DecompressionBombError)):
            logger.debug("🖼️ Pillow decode error: %s", type(error).__name__)
            return ImageDecodeError("Cannot decode photo", details=str(error))
        return None


__all__ = [
    "IErrorHandlingStrategy",
    "TelegramErrorStrategy",
    "HttpxErrorStrategy",
    "PillowErrorStrategy",
]
