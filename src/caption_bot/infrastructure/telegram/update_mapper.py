# 🔁 caption_bot/infrastructure/telegram/update_mapper.py
"""
🔁 Мапінг Telegram `Update` → доменна `InboundEvent`.
"""

from __future__ import annotations

# 🌐 Зовнішні бібліотеки
from telegram import Update
from telegram.constants import ChatType

# 🔠 Системні імпорти
from typing import Optional

# 🧩 Внутрішні модулі проєкту
from caption_bot.domain.dispatch.dto import InboundEvent, PhotoRef

GROUP_CHAT_TYPES = frozenset((ChatType.GROUP, ChatType.SUPERGROUP))


def to_inbound_event(update: Update) -> Optional[InboundEvent]:
    """📨 None, якщо апдейт не несе повідомлення (callback, edited_message тощо)."""
    message = update.message
    if message is None:
        return None

    photos = tuple(
        PhotoRef(file_id=size.file_id, width=size.width, height=size.height)
        for size in (message.photo or ())
    )
    return InboundEvent(
        chat_id=message.chat.id,
        is_group=message.chat.type in GROUP_CHAT_TYPES,
        caption=message.caption,
        photos=photos,
    )


__all__ = ["to_inbound_event", "GROUP_CHAT_TYPES"]
