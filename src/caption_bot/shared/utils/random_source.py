# 🎲 caption_bot/shared/utils/random_source.py
"""
🎲 Єдине джерело випадковості процесу.

🔹 Сід береться один раз із криптографічного джерела (`secrets`).
🔹 Далі використовується швидкий `random.Random` без пересідування на кожну подію.
"""

from __future__ import annotations

# 🔠 Системні імпорти
import logging
import random
import secrets

# 🧩 Внутрішні модулі проєкту
from .logger import LOG_NAME

logger = logging.getLogger(f"{LOG_NAME}.random")


def secure_seeded_random() -> random.Random:
    """Створює генератор, засіяний 64 бітами з `secrets`."""
    rng = random.Random(secrets.randbits(64))		# 🔐 Одноразовий криптографічний сід
    logger.debug("🎲 Генератор випадкових чисел засіяно")
    return rng


__all__ = ["secure_seeded_random"]
