# 🖌️ caption_bot/infrastructure/image_generation/captioner.py
"""
🖌️ Captioner — накладає підпис на фото без ручного підлаштування.

🔹 Кегль: одна оцінка за середньою шириною гліфа, кламп [48, 150].
🔹 Перенос: не більше двох рядків, ділимо за кількістю слів.
🔹 Колір: білий або чорний за яскравістю смуги біля низу кадру.
🔹 Рядки малюються знизу вгору, кожен центрований по горизонталі.

Вхідне зображення не змінюється; результат — нова RGB-копія того ж розміру.
"""

from __future__ import annotations

# 🌐 Зовнішні бібліотеки
from PIL import Image, ImageDraw, ImageStat

# 🔠 Системні імпорти
import logging

# 🧩 Внутрішні модулі проєкту
from caption_bot.config.setup.constants import CONST
from caption_bot.domain.captioning.dto import LayoutPlan
from caption_bot.domain.captioning.layout import (
    baseline_offset,
    estimate_font_size,
    luminosity_band,
    pick_text_color,
    wrap_caption,
)
from caption_bot.errors import RenderError
from caption_bot.shared.utils.logger import LOG_NAME
from .font_service import CaptionFont

logger = logging.getLogger(f"{LOG_NAME}.captioner")

_WEIGHTS = CONST.LAYOUT.LUMA_WEIGHTS


def mean_luminosity(image: Image.Image) -> float:
    """
    🌗 Середня нормована luma смуги під підписом.

    Беремо рядки `h - i` для `i` у [bottom, top); рядки поза кадром
    рахуються як чорні, знаменник завжди `(top - bottom) * w`.
    """
    width, height = image.size
    bottom, top = luminosity_band(height)
    samples = (top - bottom) * width
    if samples <= 0:
        return 0.0

    first_row = max(height - top + 1, 0)
    last_row = min(height - bottom, height - 1)
    if last_row < first_row:
        return 0.0

    rgb = image if image.mode == "RGB" else image.convert("RGB")
    band = rgb.crop((0, first_row, width, last_row + 1))
    red, green, blue = ImageStat.Stat(band).sum[:3]
    total = _WEIGHTS[0] * red + _WEIGHTS[1] * green + _WEIGHTS[2] * blue
    return total / (samples * 255.0)


# ================================
# 🏛️ РЕНДЕРЕР ПІДПИСІВ
# ================================
class Captioner:
    """🖌️ Чиста функція (image, font, text) → нове зображення з підписом."""

    def __init__(self, font: CaptionFont) -> None:
        self._font = font

    @property
    def font(self) -> CaptionFont:
        return self._font

    # ================================
    # 📐 ПЛАН
    # ================================
    def plan(self, source: Image.Image, text: str) -> LayoutPlan:
        """📐 Кегль, рядки та колір для конкретного кадру."""
        width, _ = source.size
        try:
            size = estimate_font_size(width, self._font, text)
            lines = wrap_caption(text, width, self._font, size)
        except (OSError, ValueError) as exc:
            raise RenderError("Font cannot measure caption", details=str(exc)) from exc

        luma = mean_luminosity(source)
        plan = LayoutPlan(font_size=size, lines=lines, text_color=pick_text_color(luma))
        logger.debug(
            "📐 Plan: size=%d wrapped=%s luma=%.3f color=%s",
            plan.font_size,
            plan.is_wrapped,
            luma,
            plan.text_color.name,
        )
        return plan

    # ================================
    # 🖌️ РЕНДЕР
    # ================================
    def render(self, source: Image.Image, text: str) -> Image.Image:
        """🖌️ Повертає нове RGB-зображення з накладеним підписом."""
        plan = self.plan(source, text)
        out = source.convert("RGB") if source.mode != "RGB" else source.copy()
        self.draw(out, plan)
        return out

    def draw(self, canvas: Image.Image, plan: LayoutPlan) -> None:
        """✏️ Малює рядки плану на полотні знизу вгору."""
        width, height = canvas.size
        size = plan.font_size
        draw = ImageDraw.Draw(canvas)
        y_offset = 0
        try:
            face = self._font.face(size)
            for line in reversed(plan.lines):
                line_width = self._font.text_width(size, line)
                x = int((width - line_width) / 2)
                y = height - baseline_offset(height) - y_offset
                y_offset += self._font.text_height(size, line)
                draw.text((x, y), line, font=face, fill=plan.text_color.rgb, anchor="ls")
        except (OSError, ValueError) as exc:
            raise RenderError("Font cannot draw caption", details=str(exc)) from exc


__all__ = ["Captioner", "mean_luminosity"]
