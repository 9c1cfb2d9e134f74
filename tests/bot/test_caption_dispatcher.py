"""
🧪 test_caption_dispatcher.py — unit-тести для CaptionDispatcher

Перевіряє:
- Повний шлях: fetch → render → send_photo з JPEG того ж розміру
- Тихі відмови (немає повідомлення, заборонений чат, без фото, групи)
- Проброс помилок транспорту і декодування нагору (для пулу воркерів)
"""

import random
from io import BytesIO
from unittest.mock import AsyncMock

import pytest
from PIL import Image

from caption_bot.bot.handlers import CaptionDispatcher
from caption_bot.domain.access import AccessPolicy, GroupGate
from caption_bot.domain.dispatch import DispatchOutcome, InboundEvent, PhotoRef
from caption_bot.errors import ImageDecodeError
from caption_bot.infrastructure.image_generation import Captioner


def _jpeg(width=640, height=480, color=(30, 30, 30)):
    buf = BytesIO()
    Image.new("RGB", (width, height), color).save(buf, format="JPEG")
    return buf.getvalue()


PHOTOS = (
    PhotoRef(file_id="small", width=90, height=67),
    PhotoRef(file_id="big", width=640, height=480),
)


@pytest.fixture
def transport():
    fake = AsyncMock()
    fake.fetch = AsyncMock(return_value=_jpeg())
    fake.send_photo = AsyncMock()
    return fake


@pytest.fixture
def make_dispatcher(transport, caption_font):
    def _make(*, policy=None, gate=None, phrases=("HELLO WORLD",)):
        return CaptionDispatcher(
            transport=transport,
            captioner=Captioner(caption_font),
            policy=policy or AccessPolicy(),
            group_gate=gate or GroupGate(enabled=False),
            phrases=phrases,
            rng=random.Random(0),
        )

    return _make


@pytest.mark.asyncio
async def test_private_photo_is_captioned_and_sent(make_dispatcher, transport):
    """✅ Найбільше фото завантажено, результат — JPEG того ж розміру."""
    outcome = await make_dispatcher().dispatch(InboundEvent(chat_id=5, photos=PHOTOS))

    assert outcome is DispatchOutcome.SENT
    transport.fetch.assert_awaited_once_with(PHOTOS[1])
    transport.send_photo.assert_awaited_once()
    chat_id, payload, filename = transport.send_photo.call_args.args
    assert chat_id == 5
    assert filename == "output.jpeg"
    with Image.open(BytesIO(payload)) as sent:
        assert sent.format == "JPEG"
        assert sent.size == (640, 480)


@pytest.mark.asyncio
async def test_missing_message_is_ignored(make_dispatcher, transport):
    assert await make_dispatcher().dispatch(None) is DispatchOutcome.NO_MESSAGE
    transport.fetch.assert_not_awaited()


@pytest.mark.asyncio
async def test_blacklisted_chat_is_ignored(make_dispatcher, transport):
    dispatcher = make_dispatcher(policy=AccessPolicy.from_lists(blacklist=[5]))
    outcome = await dispatcher.dispatch(InboundEvent(chat_id=5, photos=PHOTOS))
    assert outcome is DispatchOutcome.NOT_ALLOWED
    transport.fetch.assert_not_awaited()


@pytest.mark.asyncio
async def test_chat_outside_whitelist_is_ignored(make_dispatcher, transport):
    dispatcher = make_dispatcher(policy=AccessPolicy.from_lists(whitelist=[1]))
    outcome = await dispatcher.dispatch(InboundEvent(chat_id=5, photos=PHOTOS))
    assert outcome is DispatchOutcome.NOT_ALLOWED


@pytest.mark.asyncio
async def test_message_without_photo_is_ignored(make_dispatcher, transport):
    outcome = await make_dispatcher().dispatch(InboundEvent(chat_id=5, caption="hello"))
    assert outcome is DispatchOutcome.NO_PHOTO
    transport.send_photo.assert_not_awaited()


@pytest.mark.asyncio
async def test_group_photo_rejected_when_groups_disabled(make_dispatcher, transport):
    outcome = await make_dispatcher().dispatch(InboundEvent(chat_id=-100, is_group=True, photos=PHOTOS))
    assert outcome is DispatchOutcome.GROUP_DISABLED
    transport.fetch.assert_not_awaited()


@pytest.mark.asyncio
async def test_group_photo_requires_activation(make_dispatcher, transport):
    gate = GroupGate(enabled=True, activation_phrase="/caption", activation_probability=0.0)
    dispatcher = make_dispatcher(gate=gate)

    skipped = await dispatcher.dispatch(InboundEvent(chat_id=-100, is_group=True, caption="lol", photos=PHOTOS))
    sent = await dispatcher.dispatch(InboundEvent(chat_id=-100, is_group=True, caption="/caption", photos=PHOTOS))

    assert skipped is DispatchOutcome.GROUP_NOT_ACTIVATED
    assert sent is DispatchOutcome.SENT
    transport.send_photo.assert_awaited_once()


@pytest.mark.asyncio
async def test_transport_failure_propagates(make_dispatcher, transport):
    transport.fetch.side_effect = ConnectionError("network down")
    with pytest.raises(ConnectionError):
        await make_dispatcher().dispatch(InboundEvent(chat_id=5, photos=PHOTOS))
    transport.send_photo.assert_not_awaited()


@pytest.mark.asyncio
async def test_undecodable_photo_raises_decode_error(make_dispatcher, transport):
    transport.fetch.return_value = b"garbage"
    with pytest.raises(ImageDecodeError):
        await make_dispatcher().dispatch(InboundEvent(chat_id=5, photos=PHOTOS))


def test_dispatcher_requires_phrases(transport, caption_font):
    with pytest.raises(ValueError):
        CaptionDispatcher(
            transport=transport,
            captioner=Captioner(caption_font),
            policy=AccessPolicy(),
            group_gate=GroupGate(),
            phrases=(),
            rng=random.Random(0),
        )
