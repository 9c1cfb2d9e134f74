# 🔤 caption_bot/infrastructure/image_generation/font_service.py
"""
🔤 CaptionFont — єдиний шрифт процесу та його метрики.

🔹 Пріоритет джерел: шлях із конфігу → системні дефолти → вбудований шрифт Pillow.
🔹 Байти шрифту читаються один раз; обличчя `(size)` кешуються в памʼяті.
🔹 Надає ширину (advance + кернінг) та висоту рядка для компонування.
"""

from __future__ import annotations

# 🌐 Зовнішні бібліотеки
from PIL import ImageFont	# 🖼️ FreeType-шрифти Pillow

# 🔠 Системні імпорти
import functools
import logging
import math
from io import BytesIO
from pathlib import Path
from typing import Callable, Iterable, Optional, Sequence

# 🧩 Внутрішні модулі проєкту
from caption_bot.domain.captioning.interfaces import IFontMetrics
from caption_bot.errors import ConfigError
from caption_bot.shared.utils.logger import LOG_NAME

# ================================
# 🧾 ЛОГЕР ТА КОНСТАНТИ
# ================================
logger = logging.getLogger(f"{LOG_NAME}.font")

DEFAULT_FONT_PATHS: Sequence[str] = (
    "/usr/share/fonts/truetype/dejavu/DejaVuSans-Bold.ttf",	# 🐧 Linux
    "/System/Library/Fonts/Supplemental/Arial Bold.ttf",	# 🍎 macOS Arial
    r"C:\Windows\Fonts\arialbd.ttf",	# 🪟 Arial Bold
)

FaceLoader = Callable[[int], ImageFont.FreeTypeFont]


# ================================
# 🏛️ ШРИФТ ПІДПИСУ
# ================================
class CaptionFont(IFontMetrics):
    """✍️ Незмінний спільний шрифт; безпечний для одночасних рендерів."""

    def __init__(self, loader: FaceLoader, *, name: str) -> None:
        self.name = name
        self._face = functools.lru_cache(maxsize=None)(loader)	# ♻️ Кеш облич за кеглем

    # ================================
    # 🏭 ФАБРИКИ
    # ================================
    @classmethod
    def from_bytes(cls, data: bytes, *, name: str = "<bytes>") -> "CaptionFont":
        """📦 Шрифт із сирих байтів TrueType/OpenType."""

        def _load(size: int) -> ImageFont.FreeTypeFont:
            return ImageFont.truetype(BytesIO(data), size)

        try:
            _load(10)	# 🧪 Перевіряємо, що FreeType розуміє файл
        except OSError as exc:
            raise ConfigError("Cannot parse font", details=f"{name}: {exc}") from exc
        return cls(_load, name=name)

    @classmethod
    def from_path(cls, path: Path) -> "CaptionFont":
        """📂 Шрифт із файлу; нечитабельний файл — фатальна помилка конфігу."""
        try:
            data = Path(path).read_bytes()
        except OSError as exc:
            raise ConfigError("Cannot read font", details=f"{path}: {exc}") from exc
        font = cls.from_bytes(data, name=str(path))
        logger.info("✅ Шрифт завантажено з %s", path)
        return font

    @classmethod
    def bundled(cls) -> "CaptionFont":
        """🪢 Вбудований у Pillow шрифт (потребує FreeType)."""
        probe = ImageFont.load_default(size=10)
        if not isinstance(probe, ImageFont.FreeTypeFont):
            raise ConfigError("Pillow is built without FreeType, bundled font is unavailable")

        def _load(size: int) -> ImageFont.FreeTypeFont:
            return ImageFont.load_default(size=size)  # type: ignore[return-value]

        return cls(_load, name="pillow-default")

    @classmethod
    def resolve(
        cls,
        path: Optional[Path] = None,
        search_paths: Iterable[str] = DEFAULT_FONT_PATHS,
    ) -> "CaptionFont":
        """🔎 Явний шлях має пріоритет; інакше — перший доступний системний, далі Pillow."""
        if path is not None:
            return cls.from_path(path)

        for candidate in search_paths:
            candidate_path = Path(candidate)
            if not candidate_path.exists():
                continue
            try:
                return cls.from_path(candidate_path)
            except ConfigError as exc:	# ⚠️ Пошкоджений системний файл, пробуємо наступний
                logger.debug("⚠️ Неможливо використати %s: %s", candidate_path, exc)

        logger.warning("⚠️ Шрифт не задано і системних не знайдено, використовую вбудований Pillow.")
        return cls.bundled()

    # ================================
    # 📣 ПУБЛІЧНЕ API
    # ================================
    def face(self, size: int) -> ImageFont.FreeTypeFont:
        """🔤 FreeType-обличчя для кегля (з кешу)."""
        return self._face(int(size))

    def text_width(self, size: int, text: str) -> int:
        """📏 Advance-ширина рядка з кернінгом, округлена вгору."""
        if not text:
            return 0
        return math.ceil(self.face(size).getlength(text))

    def text_height(self, size: int, text: str) -> int:
        """📐 Ascent + descent на заданому кеглі."""
        if not text:
            return 0
        ascent, descent = self.face(size).getmetrics()
        return int(ascent + abs(descent))

    def __repr__(self) -> str:
        return f"CaptionFont(name={self.name!r})"


__all__ = ["CaptionFont", "DEFAULT_FONT_PATHS"]
