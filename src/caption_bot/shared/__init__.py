# 🧰 caption_bot/shared/__init__.py
"""🧰 Наскрізні утиліти: логування, метрики, випадковість."""
