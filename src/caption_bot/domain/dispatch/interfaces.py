# 🔌 caption_bot/domain/dispatch/interfaces.py
"""
🔌 Контракти зовнішніх співпрацівників диспетчера.

🔹 `IUpdateSource` — потік вхідних апдейтів у спільну чергу.
🔹 `IImageTransport` — завантаження фото та відправка результату.
"""

from __future__ import annotations

# 🔠 Системні імпорти
import asyncio
from typing import Any, Protocol

# 🧩 Внутрішні модулі проєкту
from .dto import PhotoRef


class IUpdateSource(Protocol):
    """📡 Джерело апдейтів: наповнює `queue`, поки запущене."""

    @property
    def queue(self) -> "asyncio.Queue[Any]": ...

    async def start(self) -> None: ...

    async def stop(self) -> None: ...


class IImageTransport(Protocol):
    """🚚 Транспорт зображень."""

    async def fetch(self, photo: PhotoRef) -> bytes:
        """⬇️ Повертає сирі байти фото."""
        ...

    async def send_photo(self, chat_id: int, data: bytes, filename: str) -> None:
        """⬆️ Надсилає готове зображення в чат."""
        ...


__all__ = ["IUpdateSource", "IImageTransport"]
