# 📊 caption_bot/shared/metrics/captioning.py
"""
📊 Лічильники Prometheus для конвеєра підписів.

🔹 `CAPTION_EVENTS` — результати обробки подій (sent / причини відмови).
🔹 `WORKER_ERRORS` — помилки воркерів за доменним кодом.
🔹 `RENDER_SECONDS` — тривалість decode → render → encode.
"""

from __future__ import annotations

# 🌐 Зовнішні бібліотеки
from prometheus_client import Counter, Histogram

CAPTION_EVENTS = Counter(
    "caption_events_total",
    "Вхідні події за результатом обробки",
    ["outcome"],
)
WORKER_ERRORS = Counter(
    "caption_worker_errors_total",
    "Помилки обробки подій у воркерах",
    ["error"],
)
RENDER_SECONDS = Histogram(
    "caption_render_seconds",
    "Тривалість декодування, рендеру та кодування зображення",
    buckets=(0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0),
)

__all__ = ["CAPTION_EVENTS", "WORKER_ERRORS", "RENDER_SECONDS"]
