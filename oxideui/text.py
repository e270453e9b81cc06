"""Font descriptors, font loading, approximate text measurement, shaping and wrapping."""

from __future__ import annotations

import sys
import threading
from dataclasses import dataclass, replace
from enum import Enum
from pathlib import Path
from typing import Callable, Iterable, Optional

from oxideui.render_object import TextStyle

_AVG_CHAR_WIDTH = 0.6
_LINE_HEIGHT = 1.2
_ASCENT = 0.8
_DESCENT = 0.2
_LINE_GAP = 0.2


class FontWeight(Enum):
    THIN = 100
    EXTRA_LIGHT = 200
    LIGHT = 300
    REGULAR = 400
    MEDIUM = 500
    SEMI_BOLD = 600
    BOLD = 700
    EXTRA_BOLD = 800
    BLACK = 900


class FontStyle(Enum):
    NORMAL = "normal"
    ITALIC = "italic"
    OBLIQUE = "oblique"


@dataclass(frozen=True)
class FontDescriptor:
    """A font family with weight and style; used as a cache key."""

    family: str
    weight: FontWeight = FontWeight.REGULAR
    style: FontStyle = FontStyle.NORMAL

    def bold(self) -> FontDescriptor:
        return replace(self, weight=FontWeight.BOLD)

    def italic(self) -> FontDescriptor:
        return replace(self, style=FontStyle.ITALIC)

    def with_weight(self, weight: FontWeight) -> FontDescriptor:
        return replace(self, weight=weight)


@dataclass(frozen=True)
class GlyphInfo:
    glyph_id: int
    x_offset: float
    y_offset: float
    x_advance: float
    y_advance: float


@dataclass(frozen=True)
class ShapedText:
    glyphs: tuple[GlyphInfo, ...]
    width: float
    height: float
    baseline: float


@dataclass(frozen=True)
class TextMetrics:
    width: float
    height: float
    ascent: float
    descent: float
    line_gap: float


class FontNotFoundError(LookupError):
    """No font file could be found for a descriptor."""


def _system_font_names() -> list[str]:
    if sys.platform.startswith("linux"):
        return ["DejaVu Sans", "Liberation Sans", "Ubuntu", "Noto Sans"]
    if sys.platform == "darwin":
        return ["SF Pro Display", "Helvetica Neue", "Arial"]
    if sys.platform.startswith("win"):
        return ["Segoe UI", "Arial", "Tahoma"]
    return ["sans-serif"]


def _default_font_paths(descriptor: FontDescriptor) -> list[Path]:
    if not sys.platform.startswith("linux"):
        return []
    family = descriptor.family
    slug = family.lower().replace(" ", "-")
    return [
        Path(f"/usr/share/fonts/truetype/{slug}.ttf"),
        Path(f"/usr/share/fonts/TTF/{family}.ttf"),
        Path(f"/usr/local/share/fonts/{family}.ttf"),
    ]


class FontManager:
    """Loads font files, caching them, and measures and shapes text."""

    def __init__(
        self,
        font_paths: Callable[[FontDescriptor], Iterable[Path]] = _default_font_paths,
    ) -> None:
        self._font_paths = font_paths
        self._cache: dict[FontDescriptor, bytes] = {}
        self._lock = threading.Lock()
        self.system_fonts = _system_font_names()

    def load_font(self, descriptor: FontDescriptor) -> bytes:
        """Return the font file's bytes, from the cache when already loaded."""
        with self._lock:
            cached = self._cache.get(descriptor)
        if cached is not None:
            return cached
        data = self._load_from_disk(descriptor)
        with self._lock:
            self._cache[descriptor] = data
        return data

    def _load_from_disk(self, descriptor: FontDescriptor) -> bytes:
        for path in self._font_paths(descriptor):
            try:
                return Path(path).read_bytes()
            except OSError:
                continue
        raise FontNotFoundError(f"Font not found: {descriptor.family}")

    def measure_text(self, text: str, style: TextStyle) -> TextMetrics:
        """Approximate metrics from the font size and character count."""
        size = style.font_size
        return TextMetrics(
            width=size * _AVG_CHAR_WIDTH * len(text),
            height=size * _LINE_HEIGHT,
            ascent=size * _ASCENT,
            descent=size * _DESCENT,
            line_gap=size * _LINE_GAP,
        )

    def shape_text(self, text: str, style: TextStyle) -> ShapedText:
        """One evenly spaced glyph per character."""
        metrics = self.measure_text(text, style)
        advance = metrics.width / len(text) if text else 0.0
        glyphs = tuple(
            GlyphInfo(
                glyph_id=index,
                x_offset=index * advance,
                y_offset=0.0,
                x_advance=advance,
                y_advance=0.0,
            )
            for index in range(len(text))
        )
        return ShapedText(glyphs, metrics.width, metrics.height, metrics.ascent)


class TextLayout:
    """Breaks text into shaped lines."""

    def __init__(self, font_manager: FontManager) -> None:
        self.font_manager = font_manager

    def layout_text(
        self, text: str, style: TextStyle, max_width: Optional[float] = None
    ) -> list[ShapedText]:
        """One line, or words wrapped to ``max_width`` when given."""
        if max_width is None:
            return [self.font_manager.shape_text(text, style)]
        return list(self._wrap(text, style, max_width))

    def _wrap(self, text: str, style: TextStyle, max_width: float):
        words: list[str] = []
        width = 0.0
        for word in text.split():
            word_width = self.font_manager.measure_text(word, style).width
            if words and width + word_width > max_width:
                yield self.font_manager.shape_text(" ".join(words), style)
                words, width = [], 0.0
            if words:
                width += word_width / len(word.encode("utf-8"))
            words.append(word)
            width += word_width
        if words:
            yield self.font_manager.shape_text(" ".join(words), style)


class TextCache:
    """Caches shaped text by content, font family and size."""

    def __init__(self) -> None:
        self._cache: dict[tuple[str, str, float], ShapedText] = {}
        self._lock = threading.Lock()

    def get_or_shape(
        self, text: str, style: TextStyle, font_manager: FontManager
    ) -> ShapedText:
        key = (text, style.font_family, style.font_size)
        with self._lock:
            cached = self._cache.get(key)
        if cached is not None:
            return cached
        shaped = font_manager.shape_text(text, style)
        with self._lock:
            self._cache[key] = shaped
        return shaped

    def clear(self) -> None:
        with self._lock:
            self._cache.clear()

    def __len__(self) -> int:
        return len(self._cache)