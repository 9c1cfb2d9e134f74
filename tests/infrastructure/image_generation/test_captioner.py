"""
🧪 test_captioner.py — інтеграційні тести Captioner на реальному шрифті Pillow

Перевіряє:
- Середню яскравість смуги (включно з рядками поза кадром)
- Колір тексту для темного та світлого фону
- Центрування та базову лінію однорядкового підпису
- Перенос на два рядки для вузького кадру
- Незмінність вхідного зображення
"""

import pytest
from PIL import Image, ImageChops

from caption_bot.config.setup.constants import CONST
from caption_bot.domain.captioning import TextColor, baseline_offset
from caption_bot.errors import RenderError
from caption_bot.infrastructure.image_generation import Captioner, mean_luminosity


def _ink_bbox(source, rendered):
    """🔎 Прямокутник пікселів, що змінились після рендеру."""
    return ImageChops.difference(rendered, source.convert("RGB")).getbbox()


# ================================
# 🌗 ЯСКРАВІСТЬ
# ================================
def test_mean_luminosity_of_white_band_is_close_to_one(solid_image):
    assert mean_luminosity(solid_image(color=(255, 255, 255))) == pytest.approx(0.9999, abs=1e-3)


def test_mean_luminosity_of_black_band_is_zero(solid_image):
    assert mean_luminosity(solid_image()) == 0.0


def test_mean_luminosity_counts_rows_outside_image_as_black(solid_image):
    """📉 Кадр 50px: у смугу потрапляє лише 48 з 80 рядків."""
    luma = mean_luminosity(solid_image(width=100, height=50, color=(255, 255, 255)))
    assert luma == pytest.approx(0.9999 * 48 / 80, abs=1e-3)


def test_mean_luminosity_only_samples_the_band(solid_image):
    """🎯 Біла смуга знизу на чорному фоні — світло; рядки вище смуги не враховуються."""
    image = solid_image()
    bottom, top = 42, 122
    image.paste((255, 255, 255), (0, 600 - top + 1, 800, 600 - bottom + 1))
    assert mean_luminosity(image) == pytest.approx(0.9999, abs=1e-3)


def test_mean_luminosity_uses_channel_weights(solid_image):
    luma = mean_luminosity(solid_image(color=(0, 255, 0)))
    assert luma == pytest.approx(CONST.LAYOUT.LUMA_WEIGHTS[1], abs=1e-3)


# ================================
# 🖌️ РЕНДЕР
# ================================
def test_render_single_line_is_centred_on_baseline(caption_font, solid_image):
    """✅ 800×600 «HELLO WORLD»: один рядок, білий, по центру, на базовій лінії 7%."""
    source = solid_image()
    captioner = Captioner(caption_font)

    plan = captioner.plan(source, "HELLO WORLD")
    assert plan.lines == ("HELLO WORLD",)
    assert not plan.is_wrapped
    assert CONST.LAYOUT.MIN_FONT_SIZE <= plan.font_size <= CONST.LAYOUT.MAX_FONT_SIZE
    assert plan.text_color is TextColor.WHITE

    rendered = captioner.render(source, "HELLO WORLD")
    assert rendered.size == source.size
    assert rendered.mode == "RGB"

    left, top, right, bottom = _ink_bbox(source, rendered)
    assert abs((left + right) / 2 - 400) <= 20
    baseline = 600 - baseline_offset(600)
    assert baseline - 4 <= bottom <= baseline + 3
    assert top < baseline


def test_render_on_light_background_uses_black_text(caption_font, solid_image):
    source = solid_image(color=(250, 250, 250))
    captioner = Captioner(caption_font)

    assert captioner.plan(source, "HELLO WORLD").text_color is TextColor.BLACK
    rendered = captioner.render(source, "HELLO WORLD")
    bbox = _ink_bbox(source, rendered)
    assert bbox is not None
    darkest = min(rendered.crop(bbox).convert("L").getextrema())
    assert darkest < 50


def test_render_wraps_for_narrow_image(caption_font, solid_image):
    """↩️ Вузький кадр: мінімальний кегль і два рядки, другий — на базовій лінії."""
    source = solid_image(width=200, height=600)
    captioner = Captioner(caption_font)

    plan = captioner.plan(source, "HELLO BIG WORLD")
    assert plan.font_size == CONST.LAYOUT.MIN_FONT_SIZE
    assert plan.lines == ("HELLO", "BIG WORLD")

    rendered = captioner.render(source, "HELLO BIG WORLD")
    _, top, _, bottom = _ink_bbox(source, rendered)
    baseline = 600 - baseline_offset(600)
    line_height = caption_font.text_height(plan.font_size, "BIG WORLD")
    assert bottom <= baseline + 3
    assert top < baseline - line_height


def test_render_does_not_modify_source(caption_font, solid_image):
    source = solid_image()
    Captioner(caption_font).render(source, "HELLO WORLD")
    assert source.getextrema() == ((0, 0), (0, 0), (0, 0))


def test_render_converts_non_rgb_sources(caption_font):
    source = Image.new("L", (400, 300), 0)
    rendered = Captioner(caption_font).render(source, "HI")
    assert rendered.mode == "RGB"
    assert source.mode == "L"


def test_plan_wraps_font_failures_in_render_error(solid_image):
    class BrokenFont:
        def text_width(self, size, text):
            raise OSError("broken glyph table")

        def text_height(self, size, text):
            return 0

    with pytest.raises(RenderError):
        Captioner(BrokenFont()).plan(solid_image(), "HELLO")
