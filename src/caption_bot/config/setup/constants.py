# 📖 caption_bot/config/setup/constants.py
"""
📖 Типобезпечні константи бота.

🔹 Геометрія підпису: частка ширини, нижній відступ, межі кегля, смуга яскравості.
🔹 Параметри доставки: якість JPEG, імʼя файлу, grace-період зупинки.
🔹 Імутабельність через `dataclass(slots=True, frozen=True)`.
"""

from __future__ import annotations

# 🔠 Системні імпорти
from dataclasses import dataclass
from typing import Final, Tuple


# ================================
# 🖌️ ГЕОМЕТРІЯ ПІДПИСУ
# ================================
@dataclass(frozen=True, slots=True)
class _CaptionLayout:
    """Параметри компонування підпису."""

    TEXT_WIDTH_RATIO: Final[float] = 0.76                 # 📏 Цільова частка ширини зображення
    BOTTOM_MARGIN: Final[float] = 0.07                    # ⬇️ Відступ від низу як частка висоти
    MIN_FONT_SIZE: Final[int] = 48
    MAX_FONT_SIZE: Final[int] = 150
    REFERENCE_SIZES: Final[Tuple[int, int]] = (10, 100)   # 🔎 Кеглі для оцінки середньої ширини гліфа
    LUMA_BAND_HEIGHT: Final[int] = 80                     # 🌗 Висота смуги вибірки, px
    LUMA_THRESHOLD: Final[float] = 0.7                    # ☀️ >= поріг → чорний текст
    LUMA_WEIGHTS: Final[Tuple[float, float, float]] = (0.2989, 0.5870, 0.1140)


# ================================
# 📤 ДОСТАВКА ТА ЖИТТЄВИЙ ЦИКЛ
# ================================
@dataclass(frozen=True, slots=True)
class _Delivery:
    """Параметри відправки результату та зупинки процесу."""

    JPEG_QUALITY: Final[int] = 85
    OUTPUT_FILENAME: Final[str] = "output.jpeg"
    SHUTDOWN_GRACE_S: Final[float] = 10.0                 # ⏳ Після цього аварійний halt
    POLL_TIMEOUT_S: Final[int] = 60                       # 📡 Long-poll getUpdates
    DEFAULT_TOKEN_PLACEHOLDER: Final[str] = "Your token here"


@dataclass(frozen=True, slots=True)
class AppConstants:
    """Кореневий контейнер констант."""

    LAYOUT: Final[_CaptionLayout] = _CaptionLayout()                   # 🖌️ Геометрія підпису
    DELIVERY: Final[_Delivery] = _Delivery()                           # 📤 Доставка та зупинка


CONST = AppConstants()                                                 # 🧱 Єдиний екземпляр констант

__all__ = ["AppConstants", "CONST"]
