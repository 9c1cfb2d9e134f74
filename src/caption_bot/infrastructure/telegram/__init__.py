# 🤖 caption_bot/infrastructure/telegram/__init__.py
"""
🤖 Telegram-транспорт: джерело апдейтів, завантаження/відправка фото, мапінг подій.
"""

from __future__ import annotations

from .transport import TelegramTransport
from .update_mapper import to_inbound_event
from .update_source import TelegramUpdateSource

__all__ = ["TelegramTransport", "TelegramUpdateSource", "to_inbound_event"]
