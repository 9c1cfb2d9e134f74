# 🚨 caption_bot/errors/custom_errors.py
"""
🚨 Ієрархія доменних винятків бота.

🔹 `AppError` — спільний корінь із кодом помилки та `details`.
🔹 `ConfigError` — фатальні помилки старту (конфіг, токен, шрифт).
🔹 `TransportError` — збої Telegram / мережі при завантаженні чи відправці.
🔹 `RenderError` / `ImageDecodeError` — збої вимірювання, малювання чи декодування.
"""

from __future__ import annotations

# 🔠 Системні імпорти
from typing import Dict, Optional


# ================================
# ⚠️ КОДИ ПОМИЛОК
# ================================
class ErrorCode:
    """⚠️ Стабільні коди для логів і метрик."""

    CONFIG = "config_error"
    TRANSPORT = "transport_error"
    RENDER = "render_error"
    DECODE = "decode_error"
    UNKNOWN = "unknown_error"


# ================================
# 🧠 БАЗОВИЙ ВИНЯТОК
# ================================
class AppError(Exception):
    """🧠 Корінь ієрархії: повідомлення + опційні деталі."""

    code: str = ErrorCode.UNKNOWN

    def __init__(self, message: str, *, details: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details

    def to_log_extra(self) -> Dict[str, object]:
        """📦 Формує словник для `logger.extra`."""
        extra: Dict[str, object] = {"error_code": self.code}
        if self.details:
            extra["details"] = self.details
        return extra

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} ({self.details})"
        return self.message


class ConfigError(AppError):
    """⚙️ Невалідна конфігурація — бот не стартує."""

    code = ErrorCode.CONFIG

    def __init__(self, message: str, *, details: Optional[str] = None, key: Optional[str] = None) -> None:
        super().__init__(message, details=details)
        self.key = key									# 🔑 Ключ конфігу, що спричинив помилку

    def to_log_extra(self) -> Dict[str, object]:
        extra = super().to_log_extra()
        if self.key:
            extra["config_key"] = self.key
        return extra


class TransportError(AppError):
    """🌐 Збій завантаження фото або відправки результату."""

    code = ErrorCode.TRANSPORT

    def __init__(
        self,
        message: str,
        *,
        details: Optional[str] = None,
        chat_id: Optional[int] = None,
        retry_after_s: Optional[int] = None,
    ) -> None:
        super().__init__(message, details=details)
        self.chat_id = chat_id
        self.retry_after_s = retry_after_s			# ⏳ Telegram RetryAfter, лише для логів

    def to_log_extra(self) -> Dict[str, object]:
        extra = super().to_log_extra()
        if self.chat_id is not None:
            extra["chat_id"] = self.chat_id
        if self.retry_after_s is not None:
            extra["retry_after_s"] = self.retry_after_s
        return extra


class RenderError(AppError):
    """🖌️ Шрифт не зміг виміряти або намалювати підпис."""

    code = ErrorCode.RENDER


class ImageDecodeError(RenderError):
    """🖼️ Завантажені байти не є зображенням, яке читає Pillow."""

    code = ErrorCode.DECODE


# ================================
# 📤 ПУБЛІЧНИЙ API
# ================================
__all__ = [
    "ErrorCode",
    "AppError",
    "ConfigError",
    "TransportError",
    "RenderError",
    "ImageDecodeError",
]
