# ⚙️ caption_bot/config/config_service.py
"""
⚙️ config_service.py — Сервіс для доступу до статичної конфігурації.

🔹 Клас `ConfigService`:
- Завантажує конфігурацію з YAML-файлу та змінних оточення (.env).
- Надає єдиний метод .get() для доступу до будь-якого параметра за крапковим ключем.
- Шлях до YAML передається явно (CLI `--config`, `CAPTION_BOT_CONFIG` або `config.yaml`).
"""

from __future__ import annotations

# 🌐 Зовнішні бібліотеки
import yaml                                  # 📦 YAML-парсинг
from dotenv import load_dotenv              # 🔐 Завантаження змінних із .env

# 🔠 Системні імпорти
import logging
import os
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

# 🧩 Внутрішні модулі проєкту
from caption_bot.errors import ConfigError
from caption_bot.shared.utils.logger import LOG_NAME

logger = logging.getLogger(f"{LOG_NAME}.config")

DEFAULT_CONFIG_PATH = "config.yaml"
CONFIG_PATH_ENV = "CAPTION_BOT_CONFIG"

# 🔐 ENV-змінні, що перекривають значення з YAML
ENV_OVERRIDES: Mapping[str, str] = {
    "TELEGRAM_TOKEN": "token",
    "CAPTION_BOT_WORKERS": "workers",
    "CAPTION_BOT_FONT": "font",
}


# ============================
# ⚙️ СЕРВІС ДОСТУПУ ДО КОНФІГІВ
# ============================
class ConfigService:
    """
    ⚙️ Надає доступ до всіх статичних конфігураційних параметрів бота.
    Конфігурація зчитується один раз у конструкторі й далі не змінюється.
    """

    def __init__(
        self,
        path: Optional[Union[str, Path]] = None,
        *,
        data: Optional[Dict[str, Any]] = None,
        use_env: bool = True,
    ) -> None:
        self._config: Dict[str, Any] = {}
        if data is not None:                                   # 🧪 Готовий словник (тести, вбудовування)
            self._deep_update(self._config, data)
            self.path: Optional[Path] = None
        else:
            self.path = self.resolve_path(path)
            self._deep_update(self._config, self._load_yaml(self.path))
        if use_env:
            self._apply_env_overrides()
        logger.debug("🔍 Конфігурацію завантажено (%d ключів верхнього рівня)", len(self._config))

    # ===============================
    # 🔑 ПУБЛІЧНИЙ API
    # ===============================
    @staticmethod
    def resolve_path(path: Optional[Union[str, Path]] = None) -> Path:
        """📍 Визначає шлях до YAML: аргумент → ENV → `config.yaml`."""
        raw = path or os.getenv(CONFIG_PATH_ENV) or DEFAULT_CONFIG_PATH
        return Path(raw).expanduser()

    def get(self, key: str, default: Any = None) -> Any:
        """
        🔑 Отримує значення конфігурації за ключем (наприклад: 'group.enabled').

        Args:
            key (str): Ключ у форматі з крапкою.
            default (Any): Значення за замовчуванням, якщо ключ не знайдено.

        Returns:
            Any: Значення параметра або default.
        """
        value: Any = self._config
        for k in key.split('.'):
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default
        return value

    def section(self, key: str) -> Dict[str, Any]:
        """📂 Повертає вкладений словник або порожній, якщо ключа немає."""
        node = self.get(key, {})
        return dict(node) if isinstance(node, dict) else {}

    def as_dict(self) -> Dict[str, Any]:
        return dict(self._config)

    # ===============================
    # 🔧 ЗАВАНТАЖЕННЯ
    # ===============================
    @staticmethod
    def _load_yaml(path: Path) -> Dict[str, Any]:
        """📘 Читає YAML; відсутній чи биті файли — фатальні."""
        logger.debug("📘 Завантаження %s", path)
        try:
            with open(path, "r", encoding="utf-8") as f:
                loaded = yaml.safe_load(f)
        except FileNotFoundError as e:
            raise ConfigError("Config file not found", details=str(path)) from e
        except OSError as e:
            raise ConfigError("Config file is not readable", details=str(e)) from e
        except yaml.YAMLError as e:
            raise ConfigError("Config file is not valid YAML", details=str(e)) from e

        if loaded is None:
            return {}
        if not isinstance(loaded, dict):
            raise ConfigError("Config root must be a mapping", details=str(path))
        return loaded

    def _apply_env_overrides(self) -> None:
        """🔐 Підтягує .env і перекриває відповідні ключі YAML."""
        load_dotenv()
        env_vars = {
            key: os.environ[name]
            for name, key in ENV_OVERRIDES.items()
            if os.environ.get(name)
        }
        if env_vars:
            logger.debug("🔐 ENV перекриває ключі: %s", sorted(env_vars))
            self._deep_update(self._config, self._unflatten_dict(env_vars))

    # ===============================
    # 🔧 ДОПОМІЖНІ МЕТОДИ ЗЛИТТЯ КОНФІГІВ
    # ===============================
    @staticmethod
    def _unflatten_dict(d: Dict[str, Any]) -> Dict[str, Any]:
        """
        🔁 Перетворює ключі з крапками в ієрархічний словник.
        'group.enabled' → {'group': {'enabled': ...}}
        """
        result: Dict[str, Any] = {}
        for key, value in d.items():
            parts = key.split('.')
            d_ref = result
            for part in parts[:-1]:
                d_ref = d_ref.setdefault(part, {})
            d_ref[parts[-1]] = value
        return result

    def _deep_update(self, source: Dict[str, Any], overrides: Mapping[str, Any]) -> None:
        """🔁 Рекурсивно обʼєднує два словника (оновлення значень)."""
        for key, value in overrides.items():
            if (
                isinstance(value, dict) and
                key in source and
                isinstance(source[key], dict)
            ):
                self._deep_update(source[key], value)
            else:
                source[key] = value


__all__ = ["ConfigService", "DEFAULT_CONFIG_PATH", "CONFIG_PATH_ENV"]
