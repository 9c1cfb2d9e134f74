"""
🧪 test_exception_handling.py — unit-тести для стратегій та ExceptionHandlerService

Перевіряє:
- Конвертацію Telegram / httpx / Pillow винятків у доменні помилки
- Загортання невідомих винятків і збереження першопричини
- Логування, метрику помилок і проброс CancelledError
"""

import asyncio
import logging

import httpx
import pytest
from PIL import UnidentifiedImageError
from prometheus_client import REGISTRY
from telegram.error import NetworkError, RetryAfter, TelegramError

from caption_bot.domain.dispatch import InboundEvent
from caption_bot.errors import (
    AppError,
    ConfigError,
    ErrorCode,
    ExceptionHandlerService,
    HttpxErrorStrategy,
    ImageDecodeError,
    PillowErrorStrategy,
    TelegramErrorStrategy,
    TransportError,
)


@pytest.fixture
def service():
    return ExceptionHandlerService(
        strategies=[TelegramErrorStrategy(), HttpxErrorStrategy(), PillowErrorStrategy()]
    )


def _errors_total(code):
    return REGISTRY.get_sample_value("caption_worker_errors_total", {"error": code}) or 0.0


# ================================
# 📜 СТРАТЕГІЇ
# ================================
def test_telegram_retry_after_keeps_delay():
    converted = TelegramErrorStrategy().handle(RetryAfter(5))
    assert isinstance(converted, TransportError)
    assert converted.retry_after_s == 5
    assert converted.to_log_extra()["retry_after_s"] == 5


@pytest.mark.parametrize("error", [TelegramError("bad request"), NetworkError("reset")])
def test_telegram_errors_become_transport_errors(error):
    assert isinstance(TelegramErrorStrategy().handle(error), TransportError)


def test_telegram_strategy_ignores_foreign_errors():
    assert TelegramErrorStrategy().handle(ValueError("x")) is None


def test_httpx_timeout_and_status_errors():
    request = httpx.Request("GET", "https://api.telegram.org/file/bot/x.jpg")
    response = httpx.Response(502, request=request)
    strategy = HttpxErrorStrategy()

    timeout = strategy.handle(httpx.ConnectTimeout("slow", request=request))
    status = strategy.handle(httpx.HTTPStatusError("bad gateway", request=request, response=response))
    generic = strategy.handle(httpx.ConnectError("refused", request=request))

    assert timeout.message == "HTTP timeout"
    assert status.message == "HTTP status 502"
    assert generic.message == "HTTP transport error"
    assert all(isinstance(err, TransportError) for err in (timeout, status, generic))


def test_pillow_unidentified_image_becomes_decode_error():
    converted = PillowErrorStrategy().handle(UnidentifiedImageError("cannot identify"))
    assert isinstance(converted, ImageDecodeError)
    assert converted.code == ErrorCode.DECODE


# ================================
# 🛡️ СЕРВІС
# ================================
def test_convert_passes_domain_errors_through(service):
    error = ConfigError("broken", key="token")
    assert service.convert(error) is error


def test_convert_wraps_unknown_errors_with_cause(service):
    original = KeyError("missing")
    converted = service.convert(original)
    assert type(converted) is AppError
    assert converted.code == ErrorCode.UNKNOWN
    assert converted.__cause__ is original
    assert "KeyError" in converted.message


def test_convert_links_strategy_result_to_original(service):
    original = TelegramError("flood")
    converted = service.convert(original)
    assert isinstance(converted, TransportError)
    assert converted.__cause__ is original


def test_handle_logs_and_counts_errors(service, caplog):
    before = _errors_total(ErrorCode.TRANSPORT)
    event = InboundEvent(chat_id=77)

    with caplog.at_level(logging.WARNING, logger="caption_bot"):
        result = service.handle(TelegramError("timed out"), event)

    assert isinstance(result, TransportError)
    assert _errors_total(ErrorCode.TRANSPORT) == before + 1
    record = next(r for r in caplog.records if r.levelno == logging.WARNING)
    assert record.chat_id == 77
    assert record.error_code == ErrorCode.TRANSPORT


def test_handle_unknown_error_is_logged_as_error(service, caplog):
    with caplog.at_level(logging.ERROR, logger="caption_bot"):
        service.handle(ZeroDivisionError("oops"))
    assert any("Unhandled exception" in r.getMessage() for r in caplog.records)


def test_handle_reraises_cancellation(service):
    with pytest.raises(asyncio.CancelledError):
        service.handle(asyncio.CancelledError())
