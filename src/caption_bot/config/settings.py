# 🧾 caption_bot/config/settings.py
"""
🧾 Типізовані налаштування бота, зібрані з `ConfigService`.

🔹 Валідує все, що робить старт неможливим, і кидає `ConfigError`.
🔹 Після побудови — незмінний обʼєкт, що передається в контейнер.
"""

from __future__ import annotations

# 🔠 Системні імпорти
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

# 🧩 Внутрішні модулі проєкту
from caption_bot.config.config_service import ConfigService
from caption_bot.config.setup.constants import CONST
from caption_bot.domain.dispatch.dto import FailureMode
from caption_bot.errors import ConfigError
from caption_bot.shared.utils.logger import LOG_NAME

logger = logging.getLogger(f"{LOG_NAME}.config")


# ================================
# 🛠️ ДОПОМІЖНІ ФУНКЦІЇ
# ================================
def _coerce_int(value: Any, key: str) -> int:
    if isinstance(value, bool):
        raise ConfigError("Expected an integer", key=key, details=repr(value))
    try:
        return int(value)
    except (TypeError, ValueError) as e:
        raise ConfigError("Expected an integer", key=key, details=repr(value)) from e


def _coerce_float(value: Any, key: str) -> float:
    try:
        return float(value)
    except (TypeError, ValueError) as e:
        raise ConfigError("Expected a number", key=key, details=repr(value)) from e


def _optional_id_list(value: Any, key: str) -> Optional[Tuple[int, ...]]:
    """🧾 None → список відсутній; список → кортеж chat id."""
    if value is None:
        return None
    if not isinstance(value, (list, tuple, set)):
        raise ConfigError("Expected a list of chat ids", key=key, details=repr(value))
    return tuple(_coerce_int(item, key) for item in value)


# ================================
# 🧱 DTO НАЛАШТУВАНЬ
# ================================
@dataclass(frozen=True)
class GroupSettings:
    """👥 Параметри обробки групових чатів."""

    enabled: bool = False
    activation_phrase: str = ""
    activation_probability: float = 0.0


@dataclass(frozen=True)
class BotSettings:
    """🧾 Повний набір параметрів процесу."""

    token: str
    phrases: Tuple[str, ...]
    workers: int = 1
    debug: bool = False
    whitelist: Optional[Tuple[int, ...]] = None
    blacklist: Optional[Tuple[int, ...]] = None
    font_path: Optional[Path] = None
    group: GroupSettings = field(default_factory=GroupSettings)
    failure_mode: FailureMode = FailureMode.ISOLATE
    poll_timeout: int = CONST.DELIVERY.POLL_TIMEOUT_S
    logging: Dict[str, Any] = field(default_factory=dict)
    metrics_enabled: bool = False
    metrics_port: int = 9108

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        """🛡️ Перевіряє інваріанти; кидає `ConfigError` на першій проблемі."""
        if not self.token or self.token == CONST.DELIVERY.DEFAULT_TOKEN_PLACEHOLDER:
            raise ConfigError(
                "You are using the default config, please copy it and fill in the token",
                key="token",
            )
        if self.workers <= 0:
            raise ConfigError("Number of workers must be positive", key="workers", details=str(self.workers))
        if not self.phrases:
            raise ConfigError("At least one caption phrase is required", key="phrases")
        if any(not phrase.strip() for phrase in self.phrases):
            raise ConfigError("Caption phrases must be non-empty", key="phrases")
        probability = self.group.activation_probability
        if not 0.0 <= probability <= 1.0:
            raise ConfigError(
                "Activation probability must be within [0, 1]",
                key="group.activation_probability",
                details=str(probability),
            )
        if self.poll_timeout <= 0:
            raise ConfigError("Poll timeout must be positive", key="telegram.poll_timeout")

    # ================================
    # 🏭 ФАБРИКА
    # ================================
    @classmethod
    def from_config(cls, config: ConfigService) -> "BotSettings":
        """⚙️ Збирає налаштування з конфіг-сервісу."""
        raw_phrases = config.get("phrases") or []
        if not isinstance(raw_phrases, (list, tuple)):
            raise ConfigError("Expected a list of phrases", key="phrases", details=repr(raw_phrases))

        raw_mode = str(config.get("failure_mode", FailureMode.ISOLATE.value)).strip().lower()
        try:
            failure_mode = FailureMode(raw_mode)
        except ValueError as e:
            raise ConfigError("Unknown failure mode", key="failure_mode", details=raw_mode) from e

        font = config.get("font")
        group = GroupSettings(
            enabled=bool(config.get("group.enabled", False)),
            activation_phrase=str(config.get("group.activation_phrase") or ""),
            activation_probability=_coerce_float(
                config.get("group.activation_probability", 0.0), "group.activation_probability"
            ),
        )

        settings = cls(
            token=str(config.get("token") or "").strip(),
            phrases=tuple(str(phrase) for phrase in raw_phrases),
            workers=_coerce_int(config.get("workers", 1), "workers"),
            debug=bool(config.get("debug", False)),
            whitelist=_optional_id_list(config.get("whitelist"), "whitelist"),
            blacklist=_optional_id_list(config.get("blacklist"), "blacklist"),
            font_path=Path(str(font)).expanduser() if font else None,
            group=group,
            failure_mode=failure_mode,
            poll_timeout=_coerce_int(
                config.get("telegram.poll_timeout", CONST.DELIVERY.POLL_TIMEOUT_S), "telegram.poll_timeout"
            ),
            logging=config.section("logging"),
            metrics_enabled=bool(config.get("metrics.enabled", False)),
            metrics_port=_coerce_int(config.get("metrics.port", 9108), "metrics.port"),
        )
        logger.debug(
            "🧾 Settings: workers=%d mode=%s phrases=%d group=%s",
            settings.workers,
            settings.failure_mode.value,
            len(settings.phrases),
            settings.group.enabled,
        )
        return settings


__all__ = ["BotSettings", "GroupSettings"]
