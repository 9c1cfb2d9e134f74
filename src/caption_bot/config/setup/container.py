# 📦 caption_bot/config/setup/container.py
"""
📦 Контейнер залежностей бота-підписувача.

🔹 Створює сервіси в правильному порядку DI
🔹 Інкапсулює побудову Telegram-клієнта, шрифту та рендерера
🔹 Дає єдину точку доступу до диспетчера і пулу воркерів
"""

from __future__ import annotations

# 🌐 Зовнішні бібліотеки
from telegram import Bot                                                 # 🤖 Клієнт Bot API

# 🔠 Системні імпорти
import logging                                                           # 🧾 Базові засоби логування
from typing import Optional

# 🧩 Внутрішні модулі проєкту

# 🤖 Bot-рівень
from caption_bot.bot.handlers.caption_dispatcher import CaptionDispatcher  # 📨 Обробка однієї події
from caption_bot.bot.services.worker_pool import WorkerPool              # 👷 Пул воркерів

# ⚙️ Конфігурація
from caption_bot.config.config_service import ConfigService              # 🗂️ YAML + ENV
from caption_bot.config.settings import BotSettings                      # 🧾 Типізовані налаштування
from caption_bot.config.setup.constants import CONST, AppConstants       # ⚙️ Глобальні константи

# 🏭 Доменна логіка
from caption_bot.domain.access.policy import AccessPolicy, GroupGate     # 🛂 Доступ і груповий шлюз

# 🚨 Обробка помилок
from caption_bot.errors import (
    ExceptionHandlerService,
    HttpxErrorStrategy,
    PillowErrorStrategy,
    TelegramErrorStrategy,
)

# 🖼️ Інфраструктура
from caption_bot.infrastructure.image_generation import CaptionFont, Captioner  # ✍️ Шрифт і рендер
from caption_bot.infrastructure.telegram import TelegramTransport, TelegramUpdateSource  # 📡 Bot API

# 📈 Спільні утиліти
from caption_bot.shared.metrics.exporters import maybe_start_prometheus  # 📈 Bootstrap метрик
from caption_bot.shared.utils.logger import LOG_NAME, init_logging_from_config  # 🧾 Конфіг логування
from caption_bot.shared.utils.random_source import secure_seeded_random  # 🎲 Джерело випадковості

logger = logging.getLogger(f"{LOG_NAME}.container")


def bootstrap_logging(settings: BotSettings) -> logging.Logger:
    """
    Запускає кореневий логер за розділом `logging` та прапорцем `debug`.
    """
    return init_logging_from_config(settings.logging, debug=settings.debug)


def load_settings(path: Optional[str] = None) -> BotSettings:
    """⚙️ Шлях → ConfigService → BotSettings; помилки конфігу летять нагору."""
    return BotSettings.from_config(ConfigService(path))


# ================================
# 🏛️ КОНТЕЙНЕР ЗАЛЕЖНОСТЕЙ
# ================================
class Container:
    """
    Координує ініціалізацію інфраструктурних, доменних та бот-сервісів.
    """

    def __init__(self, settings: BotSettings, *, bot: Optional[Bot] = None, font: Optional[CaptionFont] = None):
        self.settings = settings
        self.constants: AppConstants = CONST
        logger.info("🚀 Стартуємо побудову контейнера залежностей")
        self._bootstrap_metrics_if_enabled()
        self._setup_error_handlers()
        self._setup_rendering(font)
        self._setup_telegram(bot)
        self._setup_dispatch()
        logger.info("✅ Контейнер ініціалізовано успішно")

    # ================================
    # 📈 МЕТРИКИ
    # ================================
    def _bootstrap_metrics_if_enabled(self) -> None:
        """
        Стартує Prometheus-експортер, якщо це дозволено конфігурацією.
        """
        if not self.settings.metrics_enabled:
            logger.debug("📉 Prometheus вимкнено конфігом")
            return
        try:
            maybe_start_prometheus(self.settings.metrics_port)
        except OSError:                                                  # ⚠️ Порт зайнятий, бот працює без експортера
            logger.exception("⚠️ Не вдалося стартувати експортер метрик")

    # ================================
    # 🛡️ ОБРОБКА ПОМИЛОК
    # ================================
    def _setup_error_handlers(self) -> None:
        strategies = [
            TelegramErrorStrategy(),                                     # ✉️ Telegram Bot API
            HttpxErrorStrategy(),                                        # 🌐 HTTP-рівень
            PillowErrorStrategy(),                                       # 🖼️ Биті зображення
        ]
        self.exception_handler_service = ExceptionHandlerService(strategies=strategies)
        logger.debug("🛡️ ExceptionHandlerService активовано (%d стратегій)", len(strategies))

    # ================================
    # 🖌️ РЕНДЕРИНГ
    # ================================
    def _setup_rendering(self, font: Optional[CaptionFont]) -> None:
        self.font = font or CaptionFont.resolve(self.settings.font_path)  # 🔤 Один шрифт на процес
        self.captioner = Captioner(self.font)
        self.rng = secure_seeded_random()

    # ================================
    # 📡 TELEGRAM
    # ================================
    def _setup_telegram(self, bot: Optional[Bot]) -> None:
        self.bot = bot or Bot(token=self.settings.token)
        self.transport = TelegramTransport(self.bot)
        self.update_source = TelegramUpdateSource(self.bot, poll_timeout=self.settings.poll_timeout)

    # ================================
    # 📨 ДИСПЕТЧЕРИЗАЦІЯ
    # ================================
    def _setup_dispatch(self) -> None:
        settings = self.settings
        self.access_policy = AccessPolicy.from_lists(settings.whitelist, settings.blacklist)
        self.group_gate = GroupGate(
            enabled=settings.group.enabled,
            activation_phrase=settings.group.activation_phrase,
            activation_probability=settings.group.activation_probability,
            rng=self.rng,
        )
        self.dispatcher = CaptionDispatcher(
            transport=self.transport,
            captioner=self.captioner,
            policy=self.access_policy,
            group_gate=self.group_gate,
            phrases=settings.phrases,
            rng=self.rng,
        )
        self.worker_pool = WorkerPool(
            source=self.update_source,
            handler=self.dispatcher.handle_update,
            workers=settings.workers,
            exception_handler=self.exception_handler_service,
            failure_mode=settings.failure_mode,
        )
        logger.debug("👷 Пул на %d воркерів, режим %s", settings.workers, settings.failure_mode.value)


__all__ = ["Container", "bootstrap_logging", "load_settings"]
