# ⚙️ caption_bot/config/setup/__init__.py
"""
⚙️ Пакет для налаштування та 'збірки' всіх компонентів бота перед запуском.

Контейнер імпортується ліниво (`caption_bot.config.setup.container`), щоб
доменні модулі могли брати константи без циклічних імпортів.
"""

from .constants import CONST, AppConstants

__all__ = [
    "AppConstants",
    "CONST",
]
