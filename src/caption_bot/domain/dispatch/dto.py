# 📦 caption_bot/domain/dispatch/dto.py
"""
📦 DTO диспетчера: вхідна подія, посилання на фото, результат обробки.

🔹 `InboundEvent` не залежить від Telegram — транспорт мапить свої апдейти в нього.
🔹 `DispatchOutcome` описує і успіх, і тихі відмови (це не помилки).
🔹 `FailureMode` — як пул реагує на помилку однієї події.
"""

from __future__ import annotations

# 🔠 Системні імпорти
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple


@dataclass(frozen=True, slots=True)
class PhotoRef:
    """🖼️ Один розмір фото, доступний для завантаження."""

    file_id: str
    width: int
    height: int


@dataclass(frozen=True, slots=True)
class InboundEvent:
    """📨 Повідомлення, що прийшло в чат."""

    chat_id: int
    is_group: bool = False
    caption: Optional[str] = None
    photos: Tuple[PhotoRef, ...] = field(default_factory=tuple)

    @property
    def has_photo(self) -> bool:
        return bool(self.photos)

    def largest_photo(self) -> PhotoRef:
        """📐 Фото з найбільшою шириною (перше при рівності)."""
        if not self.photos:
            raise ValueError("event has no photos")
        return max(self.photos, key=lambda photo: photo.width)


class DispatchOutcome(str, Enum):
    """🏷️ Чим завершилась обробка події."""

    SENT = "sent"
    NO_MESSAGE = "no_message"
    NOT_ALLOWED = "not_allowed"
    NO_PHOTO = "no_photo"
    GROUP_DISABLED = "group_disabled"
    GROUP_NOT_ACTIVATED = "group_not_activated"

    @property
    def is_rejection(self) -> bool:
        return self is not DispatchOutcome.SENT


class FailureMode(str, Enum):
    """🧯 Реакція пулу на помилку обробки події."""

    STRICT = "strict"      # 🛑 Перша помилка зупиняє весь пул
    ISOLATE = "isolate"    # 🩹 Лог, подію відкинуто, воркер працює далі


__all__ = ["PhotoRef", "InboundEvent", "DispatchOutcome", "FailureMode"]
