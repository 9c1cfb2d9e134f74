# tests/conftest.py
import sys
from pathlib import Path

import pytest
from PIL import Image

# Додаємо src в sys.path, щоб працював імпорт "caption_bot.…" без встановлення пакета
ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from caption_bot.infrastructure.image_generation import CaptionFont  # noqa: E402


class MonospaceMetrics:
    """🔤 Детерміновані метрики: кожен символ = `ratio * size` пікселів."""

    def __init__(self, ratio: float = 0.5, height_ratio: float = 1.2):
        self.ratio = ratio
        self.height_ratio = height_ratio

    def text_width(self, size: int, text: str) -> int:
        return int(round(len(text) * size * self.ratio))

    def text_height(self, size: int, text: str) -> int:
        return int(round(size * self.height_ratio)) if text else 0


@pytest.fixture
def mono_metrics():
    """🔧 Шрифт-заглушка з лінійною шириною."""
    return MonospaceMetrics()


@pytest.fixture(scope="session")
def caption_font():
    """🔧 Вбудований у Pillow FreeType-шрифт (однаковий на всіх платформах)."""
    return CaptionFont.bundled()


@pytest.fixture
def solid_image():
    """🔧 Фабрика однотонних RGB-зображень."""

    def _make(width=800, height=600, color=(0, 0, 0)):
        return Image.new("RGB", (width, height), color)

    return _make
