# 🖼️ caption_bot/__init__.py
"""
🖼️ caption_bot — Telegram-бот, що накладає короткий підпис на надіслані фото.
"""

__version__ = "1.0.0"
