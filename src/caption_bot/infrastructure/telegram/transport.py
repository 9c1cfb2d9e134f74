# 🚚 caption_bot/infrastructure/telegram/transport.py
"""
🚚 TelegramTransport — завантаження фото та відправка результату через Bot API.
"""

from __future__ import annotations

# 🌐 Зовнішні бібліотеки
from telegram import Bot, InputFile

# 🔠 Системні імпорти
import logging
from io import BytesIO

# 🧩 Внутрішні модулі проєкту
from caption_bot.domain.dispatch.dto import PhotoRef
from caption_bot.domain.dispatch.interfaces import IImageTransport
from caption_bot.shared.utils.logger import LOG_NAME

logger = logging.getLogger(f"{LOG_NAME}.telegram")


class TelegramTransport(IImageTransport):
    """🚚 Тонка обгортка над `telegram.Bot`; винятки PTB летять як є."""

    def __init__(self, bot: Bot) -> None:
        self._bot = bot

    async def fetch(self, photo: PhotoRef) -> bytes:
        tg_file = await self._bot.get_file(photo.file_id)
        logger.debug("⬇️ Downloading file %s (%dx%d)", photo.file_id, photo.width, photo.height)
        data = await tg_file.download_as_bytearray()
        return bytes(data)

    async def send_photo(self, chat_id: int, data: bytes, filename: str) -> None:
        await self._bot.send_photo(
            chat_id=chat_id,
            photo=InputFile(BytesIO(data), filename=filename),
        )
        logger.debug("⬆️ Sent photo to chat=%s (%d bytes)", chat_id, len(data))


__all__ = ["TelegramTransport"]
