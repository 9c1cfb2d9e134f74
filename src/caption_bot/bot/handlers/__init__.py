# 🤖 caption_bot/bot/handlers/__init__.py
"""
🤖 Пакет `handlers` — обробка вхідних апдейтів.

⚠️ Публічно "піднімаємо" тільки ключові класи.
"""

from .caption_dispatcher import CaptionDispatcher

__all__ = ["CaptionDispatcher"]
