# 🖌️ caption_bot/domain/captioning/dto.py
"""
🖌️ Проміжні структури компонування підпису.
"""

from __future__ import annotations

# 🔠 Системні імпорти
from dataclasses import dataclass
from enum import Enum
from typing import Tuple


class TextColor(Enum):
    """🎨 Колір підпису, що контрастує з фоном."""

    WHITE = (255, 255, 255)
    BLACK = (0, 0, 0)

    @property
    def rgb(self) -> Tuple[int, int, int]:
        return self.value


@dataclass(frozen=True, slots=True)
class LayoutPlan:
    """📐 Детермінований план: кегль, рядки (1–2), колір."""

    font_size: int
    lines: Tuple[str, ...]
    text_color: TextColor

    @property
    def is_wrapped(self) -> bool:
        return len(self.lines) > 1


__all__ = ["TextColor", "LayoutPlan"]
