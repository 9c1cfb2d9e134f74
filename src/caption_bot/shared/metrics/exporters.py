# 📈 caption_bot/shared/metrics/exporters.py
"""
📈 Легкий bootstrap HTTP-експортера `/metrics`.
"""

from __future__ import annotations

# 🌐 Зовнішні бібліотеки
from prometheus_client import start_http_server

# 🔠 Системні імпорти
import logging
import threading

# 🧩 Внутрішні модулі проєкту
from caption_bot.shared.utils.logger import LOG_NAME

logger = logging.getLogger(f"{LOG_NAME}.metrics")

_lock = threading.Lock()
_started_port: int | None = None					# 🔒 Експортер стартує лише раз на процес


def maybe_start_prometheus(port: int) -> bool:
    """
    Стартує експортер на вказаному порті, якщо його ще не запущено.

    Returns:
        bool: True, якщо експортер запущено саме цим викликом.
    """
    global _started_port
    with _lock:
        if _started_port is not None:
            logger.debug("📈 Prometheus вже працює на порті %s", _started_port)
            return False
        start_http_server(port)
        _started_port = port
        logger.info("📈 Prometheus exporter слухає порт %s", port)
        return True


__all__ = ["maybe_start_prometheus"]
