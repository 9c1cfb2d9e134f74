# 👷 caption_bot/bot/services/__init__.py
"""
👷 Сервіси бот-рівня: керування конкурентною обробкою подій.
"""

from .worker_pool import WorkerPool

__all__ = ["WorkerPool"]
