# 🤖 caption_bot/bot/__init__.py
"""
🤖 Bot-рівень: обробка подій, пул воркерів та точка входу.
"""
