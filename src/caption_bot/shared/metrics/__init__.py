# 📊 caption_bot/shared/metrics/__init__.py
"""
📊 Пакет метрик Prometheus для бота.

🔹 Лічильники подій, помилок воркерів та гістограма рендеру.
🔹 Легкий bootstrap експортер `/metrics`.
"""

from __future__ import annotations

from .captioning import CAPTION_EVENTS, RENDER_SECONDS, WORKER_ERRORS
from .exporters import maybe_start_prometheus

# ================================
# 📦 ЕКСПОРТ ПАКЕТУ
# ================================
__all__ = [
    "CAPTION_EVENTS",
    "WORKER_ERRORS",
    "RENDER_SECONDS",
    "maybe_start_prometheus",
]
