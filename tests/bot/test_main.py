"""
🧪 test_main.py — unit-тести для entry-point (main.py) та DI-контейнера

Перевіряє:
- Парсинг `--config`
- Код виходу при помилці конфігурації, старту транспорту та при помилці пулу
- `serve`: повернення результату пулу і зупинку за сигналом
- Складання контейнера з готовими залежностями
"""

import asyncio
import logging
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from telegram.error import InvalidToken

from caption_bot.bot import main
from caption_bot.config import BotSettings, Container
from caption_bot.domain.dispatch import FailureMode
from caption_bot.errors import AppError, ConfigError, ExceptionHandlerService, TelegramErrorStrategy


@pytest.mark.parametrize("args,expected", [
    ([], None),
    (["--config=prod.yaml"], "prod.yaml"),
    (["--config", "dev.yaml"], "dev.yaml"),
    (["--verbose", "--config"], None),
    (["--config="], None),
])
def test_parse_config_path(args, expected):
    assert main.parse_config_path(args) == expected


def test_run_exits_with_error_on_bad_config():
    with patch.object(main, "load_settings", side_effect=ConfigError("bad token", key="token")), \
            patch.object(main, "init_logging"):
        with pytest.raises(SystemExit) as exc_info:
            main.run(["--config=missing.yaml"])
    assert exc_info.value.code == 1


def test_run_exits_non_zero_when_pool_fails():
    settings = MagicMock(workers=1)

    async def failing_serve(container):
        return AppError("worker crashed")

    with patch.object(main, "load_settings", return_value=settings) as load, \
            patch.object(main, "bootstrap_logging"), \
            patch.object(main, "Container"), \
            patch.object(main, "serve", failing_serve):
        with pytest.raises(SystemExit) as exc_info:
            main.run(["--config", "x.yaml"])

    load.assert_called_once_with("x.yaml")
    assert exc_info.value.code == 1


def test_run_returns_normally_after_clean_stop():
    async def clean_serve(container):
        return None

    with patch.object(main, "load_settings", return_value=MagicMock(workers=1)), \
            patch.object(main, "bootstrap_logging"), \
            patch.object(main, "Container"), \
            patch.object(main, "serve", clean_serve):
        main.run([])


def test_run_exits_with_error_when_startup_is_rejected(caplog):
    """🔑 Відхилений токен під час старту пулу → критичний лог і код виходу 1."""
    container = MagicMock()
    container.worker_pool.start = AsyncMock(side_effect=InvalidToken())
    container.exception_handler_service = ExceptionHandlerService(strategies=[TelegramErrorStrategy()])

    with patch.object(main, "load_settings", return_value=MagicMock(workers=1)), \
            patch.object(main, "bootstrap_logging"), \
            patch.object(main, "Container", return_value=container), \
            caplog.at_level(logging.CRITICAL, logger=main.logger.name):
        with pytest.raises(SystemExit) as exc_info:
            main.run([])

    assert exc_info.value.code == 1
    assert any("Telegram API error" in record.getMessage() for record in caplog.records)


class FakePool:
    """👷 Пул, що завершується за командою тесту."""

    def __init__(self):
        self.done = None
        self.stopped = False

    async def start(self):
        self.done = asyncio.get_running_loop().create_future()
        return self.done

    def stop(self):
        self.stopped = True
        if not self.done.done():
            self.done.set_result(None)


@pytest.mark.asyncio
async def test_serve_returns_pool_error():
    pool = FakePool()
    container = MagicMock(worker_pool=pool)

    task = asyncio.create_task(main.serve(container))
    await asyncio.sleep(0)
    error = AppError("boom")
    pool.done.set_result(error)

    assert await asyncio.wait_for(task, timeout=2) is error
    assert pool.stopped is False


@pytest.mark.asyncio
async def test_serve_stops_pool_on_signal():
    pool = FakePool()
    container = MagicMock(worker_pool=pool)
    stop_event = {}

    def _capture(loop, event):
        stop_event["event"] = event

    with patch.object(main, "_install_signal_handlers", _capture):
        task = asyncio.create_task(main.serve(container))
        await asyncio.sleep(0)
        await asyncio.sleep(0)
        stop_event["event"].set()
        result = await asyncio.wait_for(task, timeout=2)

    assert result is None
    assert pool.stopped is True


@pytest.mark.asyncio
async def test_serve_forces_exit_when_workers_hang():
    pool = FakePool()
    pool.stop = lambda: setattr(pool, "stopped", True)
    container = MagicMock(worker_pool=pool)
    captured = {}

    with patch.object(main, "_install_signal_handlers", lambda loop, event: captured.setdefault("event", event)), \
            patch.object(main, "_force_exit") as force_exit:
        task = asyncio.create_task(main.serve(container, grace_s=0.01))
        await asyncio.sleep(0)
        await asyncio.sleep(0)
        captured["event"].set()
        assert await asyncio.wait_for(task, timeout=2) is None

    force_exit.assert_called_once_with(0.01)


def test_container_wires_dispatch_pipeline(caption_font):
    settings = BotSettings(
        token="123:abc",
        phrases=("HELLO",),
        workers=2,
        failure_mode=FailureMode.STRICT,
        whitelist=(1,),
    )
    container = Container(settings, bot=MagicMock(), font=caption_font)

    assert container.font is caption_font
    assert container.captioner.font is caption_font
    assert container.access_policy.is_allowed(1)
    assert not container.access_policy.is_allowed(2)
    assert container.worker_pool.failure_mode is FailureMode.STRICT
    assert container.group_gate.rng is container.rng
