# 📡 caption_bot/infrastructure/telegram/update_source.py
"""
📡 TelegramUpdateSource — long-polling `getUpdates` у спільну `asyncio.Queue`.

🔹 Використовує `telegram.ext.Updater` без `Application`: апдейти лише
   складаються в чергу, а розбирають їх воркери пулу.
"""

from __future__ import annotations

# 🌐 Зовнішні бібліотеки
from telegram import Bot, Update
from telegram.ext import Updater

# 🔠 Системні імпорти
import asyncio
import logging
from typing import Optional

# 🧩 Внутрішні модулі проєкту
from caption_bot.config.setup.constants import CONST
from caption_bot.domain.dispatch.interfaces import IUpdateSource
from caption_bot.shared.utils.logger import LOG_NAME

logger = logging.getLogger(f"{LOG_NAME}.telegram")


class TelegramUpdateSource(IUpdateSource):
    """📡 Обгортка над `Updater` із керованим стартом/зупинкою."""

    def __init__(
        self,
        bot: Bot,
        *,
        poll_timeout: int = CONST.DELIVERY.POLL_TIMEOUT_S,
        queue: Optional["asyncio.Queue[Update]"] = None,
    ) -> None:
        self._queue: "asyncio.Queue[Update]" = queue if queue is not None else asyncio.Queue()
        self._updater = Updater(bot=bot, update_queue=self._queue)
        self._poll_timeout = poll_timeout
        self._started = False

    @property
    def queue(self) -> "asyncio.Queue[Update]":
        return self._queue

    async def start(self) -> None:
        if self._started:
            return
        await self._updater.initialize()
        await self._updater.start_polling(
            timeout=self._poll_timeout,
            allowed_updates=[Update.MESSAGE],
        )
        self._started = True
        logger.info("📡 Polling started (timeout=%ss)", self._poll_timeout)

    async def stop(self) -> None:
        if not self._started:
            return
        if self._updater.running:
            await self._updater.stop()
        await self._updater.shutdown()
        self._started = False
        logger.info("📴 Polling stopped")


__all__ = ["TelegramUpdateSource"]
