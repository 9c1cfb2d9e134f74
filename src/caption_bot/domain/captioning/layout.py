# 📐 caption_bot/domain/captioning/layout.py
"""
📐 Чисті функції компонування підпису.

🔹 Оцінка кегля однією формулою (без ітеративного підбору).
🔹 Перенос на два рядки за кількістю слів, не за шириною.
🔹 Вибір кольору тексту за середньою яскравістю смуги під підписом.
"""

from __future__ import annotations

# 🔠 Системні імпорти
import logging
from typing import Tuple

# 🧩 Внутрішні модулі проєкту
from caption_bot.config.setup.constants import CONST
from caption_bot.shared.utils.logger import LOG_NAME
from .dto import TextColor
from .interfaces import IFontMetrics

logger = logging.getLogger(f"{LOG_NAME}.layout")

_LAYOUT = CONST.LAYOUT


def mean_glyph_width(font: IFontMetrics, text: str) -> float:
    """
    Середня ширина на один пункт кегля, усереднена по двох опорних кеглях.

    На малих кеглях округлення хінтингу спотворює ширину, тому беремо
    середнє між 10pt і 100pt.
    """
    small, large = _LAYOUT.REFERENCE_SIZES
    width_small = font.text_width(small, text)
    width_large = font.text_width(large, text)
    return (width_small / small + width_large / large) / 2


def estimate_font_size(image_width: int, font: IFontMetrics, text: str) -> int:
    """🔢 Кегль, за якого текст займає ~76% ширини; кламп [48, 150] і відсікання до int."""
    k = mean_glyph_width(font, text)
    if k <= 0:
        return _LAYOUT.MAX_FONT_SIZE

    size = image_width * _LAYOUT.TEXT_WIDTH_RATIO / k
    size = min(max(size, float(_LAYOUT.MIN_FONT_SIZE)), float(_LAYOUT.MAX_FONT_SIZE))
    logger.debug("🔢 k=%.3f → size=%.2f (w=%d)", k, size, image_width)
    return int(size)


def split_words(text: str) -> Tuple[str, ...]:
    """✂️ Ділить список слів навпіл: перша половина — рядок 1, решта — рядок 2."""
    words = text.split()
    if len(words) < 2:
        return (text,)
    n = len(words) // 2
    return (" ".join(words[:n]), " ".join(words[n:]))


def wrap_caption(text: str, image_width: int, font: IFontMetrics, size: int) -> Tuple[str, ...]:
    """
    Повертає 1 або 2 рядки.

    Переносимо лише коли повний текст ширший за зображення. Одне слово
    не переноситься, навіть якщо вилазить за край.
    """
    full_width = font.text_width(size, text)
    if full_width <= image_width:
        return (text,)
    lines = split_words(text)
    if len(lines) == 1:
        logger.debug("↔️ Одне слово ширше за кадр (%d > %d), лишаємо як є", full_width, image_width)
    return lines


def luminosity_band(image_height: int) -> Tuple[int, int]:
    """
    🌗 Відступи від низу [bottom, top) для вибірки яскравості.

    Висота смуги фіксована в пікселях незалежно від роздільності.
    """
    bottom = int(_LAYOUT.BOTTOM_MARGIN * image_height)
    return bottom, bottom + _LAYOUT.LUMA_BAND_HEIGHT


def pick_text_color(mean_luminosity: float) -> TextColor:
    """☀️ Світлий фон (>= 0.7) → чорний текст, інакше білий."""
    if mean_luminosity >= _LAYOUT.LUMA_THRESHOLD:
        return TextColor.BLACK
    return TextColor.WHITE


def baseline_offset(image_height: int) -> int:
    """⬇️ Відстань від нижнього краю до базової лінії нижнього рядка."""
    return int(_LAYOUT.BOTTOM_MARGIN * image_height)


__all__ = [
    "mean_glyph_width",
    "estimate_font_size",
    "split_words",
    "wrap_caption",
    "luminosity_band",
    "pick_text_color",
    "baseline_offset",
]
