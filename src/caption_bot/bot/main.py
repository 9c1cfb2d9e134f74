# 🤖 caption_bot/bot/main.py
"""
🤖 Entry-point бота, що підписує фото випадковою фразою.

🔹 Готує середовище (CLI `--config` → ConfigService → BotSettings) та ініціалізує DI-контейнер.
🔹 Запускає пул воркерів і чекає на його завершення або на SIGINT/SIGTERM.
🔹 Після сигналу дає воркерам 10 секунд на завершення, інакше — аварійний вихід.
"""

from __future__ import annotations

# 🔠 Системні імпорти
import asyncio															# 🔄 Цикл подій
import logging															# 🧾 Логування подій запуску
import os																# 🚪 Аварійний вихід процесу
import signal															# 📶 SIGINT / SIGTERM
import sys																# 🧵 CLI-аргументи
from typing import List, Optional

# 🧩 Внутрішні модулі проєкту
from caption_bot.config.settings import BotSettings
from caption_bot.config.setup.constants import CONST
from caption_bot.config.setup.container import Container, bootstrap_logging, load_settings
from caption_bot.errors import AppError, ConfigError
from caption_bot.shared.utils.logger import LOG_NAME, init_logging


# ================================
# 🪵 ГЛОБАЛЬНИЙ ЛОГЕР
# ================================
logger = logging.getLogger(LOG_NAME)


# ================================
# ⚙️ CLI-ФЛАГИ
# ================================
def parse_config_path(args: List[str]) -> Optional[str]:
    """
    Витягує шлях із `--config=<path>` або `--config <path>`.
    """
    for index, arg in enumerate(args):
        if arg.startswith("--config="):
            return arg.split("=", 1)[1] or None
        if arg == "--config" and index + 1 < len(args):
            return args[index + 1]
    return None


# ================================
# 🛑 ЗУПИНКА
# ================================
STOP_SIGNALS = (signal.SIGINT, signal.SIGTERM)


def _install_signal_handlers(loop: asyncio.AbstractEventLoop, stop_requested: asyncio.Event) -> None:
    for sig in STOP_SIGNALS:
        try:
            loop.add_signal_handler(sig, stop_requested.set)
        except (NotImplementedError, RuntimeError):						# 🪟 Windows: лише KeyboardInterrupt
            logger.debug("⚠️ Сигнал %s не підтримується цим циклом", sig)


def _remove_signal_handlers(loop: asyncio.AbstractEventLoop) -> None:
    for sig in STOP_SIGNALS:
        try:
            loop.remove_signal_handler(sig)
        except (NotImplementedError, RuntimeError):
            logger.debug("⚠️ Не вдалося зняти обробник %s", sig)


def _force_exit(grace_s: float) -> None:
    logger.critical("💀 Воркери не завершились за %.0f с, аварійний вихід", grace_s)
    logging.shutdown()
    os._exit(1)


async def serve(
    container: Container,
    *,
    grace_s: float = CONST.DELIVERY.SHUTDOWN_GRACE_S,
) -> Optional[AppError]:
    """
    Запускає пул і чекає на перше з двох: завершення пулу або сигнал зупинки.

    Returns:
        Optional[AppError]: помилка, що зупинила пул у strict-режимі, або None.
    """
    pool = container.worker_pool
    done = await pool.start()
    logger.info("🤖 Bot is starting…")

    loop = asyncio.get_running_loop()
    stop_requested = asyncio.Event()
    _install_signal_handlers(loop, stop_requested)
    signal_task = asyncio.ensure_future(stop_requested.wait())

    try:
        finished, _ = await asyncio.wait({done, signal_task}, return_when=asyncio.FIRST_COMPLETED)
        if done in finished:
            return done.result()

        logger.info("📶 Отримано сигнал зупинки")
        pool.stop()
        try:
            return await asyncio.wait_for(asyncio.shield(done), timeout=grace_s)
        except asyncio.TimeoutError:
            _force_exit(grace_s)
            return None
    finally:
        signal_task.cancel()
        _remove_signal_handlers(loop)


# ================================
# 🚀 ENTRYPOINT
# ================================
def run(argv: Optional[List[str]] = None) -> None:
    """
    Основна точка входу: читає конфіг, будує контейнер і запускає бота.
    """
    args = list(sys.argv[1:] if argv is None else argv)

    try:
        settings: BotSettings = load_settings(parse_config_path(args))
    except ConfigError as error:
        init_logging(file_enabled=False)								# 🪵 Мінімальний логер для повідомлення
        logger.critical("🚨 Помилка конфігурації: %s", error)
        sys.exit(1)

    bootstrap_logging(settings)
    logger.debug("🧾 Налаштування завантажено, воркерів: %d", settings.workers)

    try:
        container = Container(settings)
    except ConfigError as error:
        logger.critical("🚨 Помилка ініціалізації: %s", error)
        sys.exit(1)

    try:
        error = asyncio.run(serve(container))
    except Exception as exc:										# 📡 Невалідний токен, API недоступний
        fatal = container.exception_handler_service.convert(exc)
        logger.critical("🚨 Не вдалося запустити бота: %s", fatal, extra=fatal.to_log_extra())
        sys.exit(1)
    if error is not None:
        logger.error("🔥 Bot stopped with error: %s", error)
        sys.exit(1)
    logger.info("👋 Bot stopped without error")


if __name__ == "__main__":
    run()
