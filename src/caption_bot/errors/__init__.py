# 🚨 caption_bot/errors/__init__.py
"""
🚨 Пакет помилок: доменна ієрархія, стратегії конвертації та сервіс обробки.
"""

from __future__ import annotations

from .custom_errors import (
    AppError,
    ConfigError,
    ErrorCode,
    ImageDecodeError,
    RenderError,
    TransportError,
)
from .exception_handler_service import ExceptionHandlerService
from .strategies import (
    HttpxErrorStrategy,
    IErrorHandlingStrategy,
    PillowErrorStrategy,
    TelegramErrorStrategy,
)

__all__ = [
    "AppError",
    "ConfigError",
    "ErrorCode",
    "ImageDecodeError",
    "RenderError",
    "TransportError",
    "ExceptionHandlerService",
    "IErrorHandlingStrategy",
    "HttpxErrorStrategy",
    "PillowErrorStrategy",
    "TelegramErrorStrategy",
]
