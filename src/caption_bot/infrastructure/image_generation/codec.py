# 🗜️ caption_bot/infrastructure/image_generation/codec.py
"""
🗜️ Декодування вхідних фото та JPEG-кодування результату.
"""

from __future__ import annotations

# 🌐 Зовнішні бібліотеки
from PIL import Image, UnidentifiedImageError

# 🔠 Системні імпорти
import logging
from io import BytesIO

# 🧩 Внутрішні модулі проєкту
from caption_bot.config.setup.constants import CONST
from caption_bot.errors import ImageDecodeError
from caption_bot.shared.utils.logger import LOG_NAME

logger = logging.getLogger(f"{LOG_NAME}.codec")


def decode_image(data: bytes) -> Image.Image:
    """🖼️ Байти → повністю завантажене зображення Pillow."""
    try:
        with Image.open(BytesIO(data)) as img:
            img.load()	# 📥 Дані незалежні від буфера
            logger.debug("🖼️ Decoded image of format %s (%dx%d)", img.format, img.width, img.height)
            return img.copy()
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError) as exc:
        raise ImageDecodeError("Cannot decode photo", details=str(exc)) from exc


def encode_jpeg(image: Image.Image, quality: int = CONST.DELIVERY.JPEG_QUALITY) -> bytes:
    """🗜️ Зображення → JPEG-байти із фіксованою якістю."""
    if image.mode != "RGB":
        image = image.convert("RGB")
    buf = BytesIO()
    image.save(buf, format="JPEG", quality=quality)
    logger.debug("🗜️ Encoded JPEG (%d bytes, q=%d)", buf.tell(), quality)
    return buf.getvalue()


__all__ = ["decode_image", "encode_jpeg"]
