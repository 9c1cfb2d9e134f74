# 🏗️ caption_bot/infrastructure/__init__.py
"""🏗️ Інфраструктура: зображення та Telegram-транспорт."""
