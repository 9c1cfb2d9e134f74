# 📨 caption_bot/domain/dispatch/__init__.py
"""📨 Доменні типи та контракти диспетчера подій."""

from __future__ import annotations

from .dto import DispatchOutcome, FailureMode, InboundEvent, PhotoRef
from .interfaces import IImageTransport, IUpdateSource

__all__ = [
    "DispatchOutcome",
    "FailureMode",
    "InboundEvent",
    "PhotoRef",
    "IImageTransport",
    "IUpdateSource",
]
