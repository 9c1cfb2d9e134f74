# 🖌️ caption_bot/domain/captioning/__init__.py
"""🖌️ Домен компонування підпису: план, колір, контракт метрик шрифту."""

from __future__ import annotations

from .dto import LayoutPlan, TextColor
from .interfaces import IFontMetrics
from .layout import (
    baseline_offset,
    estimate_font_size,
    luminosity_band,
    mean_glyph_width,
    pick_text_color,
    split_words,
    wrap_caption,
)

__all__ = [
    "LayoutPlan",
    "TextColor",
    "IFontMetrics",
    "baseline_offset",
    "estimate_font_size",
    "luminosity_band",
    "mean_glyph_width",
    "pick_text_color",
    "split_words",
    "wrap_caption",
]
