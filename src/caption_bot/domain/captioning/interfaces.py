# ✍️ caption_bot/domain/captioning/interfaces.py
"""
✍️ Контракт метрик шрифту, на який спирається компонування.
"""

from __future__ import annotations

# 🔠 Системні імпорти
from typing import Protocol


class IFontMetrics(Protocol):
    """✍️ Незмінне джерело гліфів: ширина та висота рядка для заданого кегля."""

    def text_width(self, size: int, text: str) -> int:
        """📏 Сумарний advance (з кернінгом), округлений угору до пікселя."""
        ...

    def text_height(self, size: int, text: str) -> int:
        """📐 Advance height рядка (ascent + descent), 0 для порожнього."""
        ...


__all__ = ["IFontMetrics"]
