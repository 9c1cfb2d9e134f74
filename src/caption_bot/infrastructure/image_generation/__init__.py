# 🎨 caption_bot/infrastructure/image_generation/__init__.py
"""
🎨 Сервіси опрацювання зображень.

🔹 `CaptionFont` — єдиний шрифт процесу та його метрики.
🔹 `Captioner` — компонування та малювання підпису.
🔹 `decode_image` / `encode_jpeg` — кодек на межі транспорту.
"""

from __future__ import annotations

from .captioner import Captioner, mean_luminosity
from .codec import decode_image, encode_jpeg
from .font_service import CaptionFont

__all__ = ["CaptionFont", "Captioner", "mean_luminosity", "decode_image", "encode_jpeg"]
