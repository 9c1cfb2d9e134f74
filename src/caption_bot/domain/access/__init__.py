# 🛂 caption_bot/domain/access/__init__.py
"""🛂 Політика доступу та груповий шлюз."""

from __future__ import annotations

from .policy import AccessPolicy, GroupGate

__all__ = ["AccessPolicy", "GroupGate"]
