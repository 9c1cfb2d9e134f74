# 📨 caption_bot/bot/handlers/caption_dispatcher.py
"""
📨 CaptionDispatcher — політика доступу, груповий шлюз і запуск Captioner.

🔹 Тихо відкидає події без повідомлення, без фото, від заборонених чатів
   та з груп, де шлюз не спрацював (`DispatchOutcome`).
🔹 Завантажує найширший розмір фото, обирає випадкову фразу,
   рендерить у потоці й надсилає JPEG назад у чат.
🔹 Помилки транспорту та рендеру не ловить: ними опікується пул воркерів.
"""

from __future__ import annotations

# 🌐 Зовнішні бібліотеки
from telegram import Update

# 🔠 Системні імпорти
import asyncio
import logging
import random
from typing import Optional, Sequence, Tuple

# 🧩 Внутрішні модулі проєкту
from caption_bot.config.setup.constants import CONST
from caption_bot.domain.access.policy import AccessPolicy, GroupGate
from caption_bot.domain.dispatch.dto import DispatchOutcome, InboundEvent
from caption_bot.domain.dispatch.interfaces import IImageTransport
from caption_bot.infrastructure.image_generation import Captioner, decode_image, encode_jpeg
from caption_bot.infrastructure.telegram.update_mapper import to_inbound_event
from caption_bot.shared.metrics import CAPTION_EVENTS, RENDER_SECONDS
from caption_bot.shared.utils.logger import LOG_NAME

# ================================
# 🧾 ЛОГЕР МОДУЛЯ
# ================================
logger = logging.getLogger(f"{LOG_NAME}.dispatcher")


# ================================
# 🏛️ ДИСПЕТЧЕР
# ================================
class CaptionDispatcher:
    """✨ Обробляє одну подію за раз; стан між подіями не зберігає."""

    def __init__(
        self,
        *,
        transport: IImageTransport,
        captioner: Captioner,
        policy: AccessPolicy,
        group_gate: GroupGate,
        phrases: Sequence[str],
        rng: random.Random,
    ) -> None:
        if not phrases:
            raise ValueError("phrases must not be empty")
        self._transport = transport
        self._captioner = captioner
        self._policy = policy
        self._gate = group_gate
        self._phrases: Tuple[str, ...] = tuple(phrases)
        self._rng = rng

    # ================================
    # 🔌 ВХІДНІ ТОЧКИ
    # ================================
    async def handle_update(self, update: Update) -> DispatchOutcome:
        """🤖 Адаптер для сирого Telegram-апдейту з черги."""
        return await self.dispatch(to_inbound_event(update))

    async def dispatch(self, event: Optional[InboundEvent]) -> DispatchOutcome:
        """
        Проводить подію через усі перевірки і, якщо можна, відповідає фото з підписом.

        Returns:
            DispatchOutcome: `SENT` або причина тихої відмови.
        """
        outcome = self._check(event)
        if outcome is not None or event is None:
            return self._finish(outcome or DispatchOutcome.NO_MESSAGE, event)

        photo = event.largest_photo()
        data = await self._transport.fetch(photo)

        phrase = self._rng.choice(self._phrases)
        logger.debug("🖌️ chat=%s phrase=%r source=%s", event.chat_id, phrase, photo.file_id)
        payload = await asyncio.to_thread(self._render_jpeg, data, phrase)

        await self._transport.send_photo(event.chat_id, payload, CONST.DELIVERY.OUTPUT_FILENAME)
        return self._finish(DispatchOutcome.SENT, event)

    # ================================
    # 🛂 ПЕРЕВІРКИ
    # ================================
    def _check(self, event: Optional[InboundEvent]) -> Optional[DispatchOutcome]:
        if event is None:
            return DispatchOutcome.NO_MESSAGE
        if not self._policy.is_allowed(event.chat_id):
            return DispatchOutcome.NOT_ALLOWED
        if not event.has_photo:
            return DispatchOutcome.NO_PHOTO
        if event.is_group:
            if not self._gate.enabled:
                return DispatchOutcome.GROUP_DISABLED
            if not self._gate.allows(event.caption):
                return DispatchOutcome.GROUP_NOT_ACTIVATED
        return None

    # ================================
    # 🧰 ДОПОМІЖНІ МЕТОДИ
    # ================================
    def _render_jpeg(self, data: bytes, phrase: str) -> bytes:
        """🧵 Виконується в пулі потоків: decode → render → encode."""
        with RENDER_SECONDS.time():
            source = decode_image(data)
            rendered = self._captioner.render(source, phrase)
            return encode_jpeg(rendered)

    @staticmethod
    def _finish(outcome: DispatchOutcome, event: Optional[InboundEvent]) -> DispatchOutcome:
        CAPTION_EVENTS.labels(outcome=outcome.value).inc()
        chat_id = event.chat_id if event is not None else "N/A"
        if outcome.is_rejection:
            logger.debug("🚫 chat=%s skipped: %s", chat_id, outcome.value)
        else:
            logger.info("✅ Caption sent to chat=%s", chat_id)
        return outcome


__all__ = ["CaptionDispatcher"]
