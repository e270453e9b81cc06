import pytest

from oxideui.render_object import TextStyle
from oxideui.text import (
    FontDescriptor,
    FontManager,
    FontNotFoundError,
    FontStyle,
    FontWeight,
    TextCache,
    TextLayout,
)

STYLE = TextStyle(font_size=10.0)


def test_font_weight_lookup_and_bold_descriptor():
    assert FontWeight(700) is FontWeight.BOLD
    assert FontWeight(400) is FontWeight.REGULAR
    assert FontDescriptor("Sans").bold().weight.value == 700


def test_descriptor_builders():
    base = FontDescriptor("Sans")
    assert base.weight is FontWeight.REGULAR
    assert base.style is FontStyle.NORMAL
    styled = base.bold().italic()
    assert styled == FontDescriptor("Sans", FontWeight.BOLD, FontStyle.ITALIC)
    assert base.with_weight(FontWeight.THIN).weight is FontWeight.THIN
    assert base.weight is FontWeight.REGULAR


def test_load_font_reads_and_caches(tmp_path):
    font_file = tmp_path / "f.ttf"
    font_file.write_bytes(b"font-bytes")
    manager = FontManager(font_paths=lambda d: [tmp_path / "missing.ttf", font_file])
    descriptor = FontDescriptor("Anything")
    assert manager.load_font(descriptor) == b"font-bytes"
    font_file.unlink()
    assert manager.load_font(descriptor) == b"font-bytes"


def test_load_font_missing_raises(tmp_path):
    manager = FontManager(font_paths=lambda d: [tmp_path / "nope.ttf"])
    with pytest.raises(FontNotFoundError, match="Font not found: Ghost"):
        manager.load_font(FontDescriptor("Ghost"))


def test_measure_scales_with_length():
    manager = FontManager()
    one = manager.measure_text("a", STYLE)
    four = manager.measure_text("abcd", STYLE)
    assert four.width == pytest.approx(4 * one.width)
    assert one.height == four.height
    assert one.ascent + one.descent == pytest.approx(STYLE.font_size)


def test_shape_glyphs_cover_width():
    manager = FontManager()
    shaped = manager.shape_text("hello", STYLE)
    assert len(shaped.glyphs) == 5
    assert sum(g.x_advance for g in shaped.glyphs) == pytest.approx(shaped.width)
    assert [g.glyph_id for g in shaped.glyphs] == list(range(5))
    assert shaped.glyphs[0].x_offset == 0.0


def test_shape_empty_text():
    shaped = FontManager().shape_text("", STYLE)
    assert shaped.glyphs == ()
    assert shaped.width == 0.0


def test_layout_without_width_is_single_line():
    layout = TextLayout(FontManager())
    lines = layout.layout_text("one two three", STYLE)
    assert len(lines) == 1
    assert len(lines[0].glyphs) == len("one two three")


def test_layout_wide_keeps_one_line():
    layout = TextLayout(FontManager())
    lines = layout.layout_text("one   two three", STYLE, max_width=10_000.0)
    assert len(lines) == 1
    assert len(lines[0].glyphs) == len("one two three")


def test_layout_narrow_gives_line_per_word():
    layout = TextLayout(FontManager())
    words = ["alpha", "be", "gamma"]
    lines = layout.layout_text(" ".join(words), STYLE, max_width=0.0)
    assert [len(line.glyphs) for line in lines] == [len(w) for w in words]


def test_layout_empty_text_has_no_lines():
    assert TextLayout(FontManager()).layout_text("   ", STYLE, max_width=50.0) == []


def test_text_cache_reuses_and_clears():
    manager = FontManager()
    cache = TextCache()
    first = cache.get_or_shape("abc", STYLE, manager)
    second = cache.get_or_shape("abc", STYLE, manager)
    assert first is second
    assert len(cache) == 1
    cache.get_or_shape("abc", TextStyle(font_size=20.0), manager)
    assert len(cache) == 2
    cache.clear()
    assert len(cache) == 0
    assert cache.get_or_shape("abc", STYLE, manager) == first