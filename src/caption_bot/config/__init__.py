# ⚙️ caption_bot/config/__init__.py
"""
⚙️ Пакет Config — централізована конфігурація та ініціалізація бота.

Цей пакет відповідає за:
- Завантаження налаштувань (YAML + .env) і їх валідацію.
- Створення та зв'язування всіх сервісів через DI‑контейнер.
"""

# ================================
# 🧩 ПУБЛІЧНИЙ API ПАКЕТУ
# ================================
from typing import TYPE_CHECKING

from .config_service import ConfigService
from .settings import BotSettings, GroupSettings
from .setup.constants import CONST, AppConstants

if TYPE_CHECKING:  # лише для підказок типів, без виконання імпорту під час рантайму
    from .setup.container import Container

__all__ = [
    "AppConstants",
    "BotSettings",
    "CONST",
    "ConfigService",
    "Container",
    "GroupSettings",
]


def __getattr__(name: str):
    if name == "Container":
        from .setup.container import Container  # локальний імпорт → немає циклу

        return Container
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
