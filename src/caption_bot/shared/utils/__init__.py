# 🧰 caption_bot/shared/utils/__init__.py
"""
🧰 Пакет спільних утиліт: логування та джерело випадковості.
"""

from __future__ import annotations

# 🔠 Логування
from .logger import (
    LOG_NAME,
    get_logger,
    init_logging,
    init_logging_from_config,
)

# 🎲 Випадковість
from .random_source import secure_seeded_random

# ================================
# 📦 ЕКСПОРТ ПАКЕТУ
# ================================
__all__ = [
    "LOG_NAME",
    "get_logger",
    "init_logging",
    "init_logging_from_config",
    "secure_seeded_random",
]
