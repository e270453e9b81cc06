"""Backend-neutral drawing primitives: colours, geometry and render objects."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence, Union

from oxideui.constraints import Size


@dataclass(frozen=True)
class Color:
    """An RGBA colour with 8-bit channels."""

    r: int
    g: int
    b: int
    a: int = 255

    def __post_init__(self) -> None:
        for channel in (self.r, self.g, self.b, self.a):
            if not 0 <= channel <= 255:
                raise ValueError(f"colour channel out of range 0..255: {channel}")

    def with_alpha(self, alpha: int) -> Color:
        return Color(self.r, self.g, self.b, alpha)

    @classmethod
    def rgb(cls, r: int, g: int, b: int) -> Color:
        return cls(r, g, b, 255)

    @classmethod
    def rgba(cls, r: int, g: int, b: int, a: int) -> Color:
        return cls(r, g, b, a)

    @classmethod
    def from_hex(cls, hex_value: int) -> Color:
        """Build an opaque colour from ``0xRRGGBB``; higher bits are ignored."""
        return cls((hex_value >> 16) & 0xFF, (hex_value >> 8) & 0xFF, hex_value & 0xFF, 255)


Color.BLACK = Color.rgb(0, 0, 0)
Color.WHITE = Color.rgb(255, 255, 255)
Color.RED = Color.rgb(255, 0, 0)
Color.GREEN = Color.rgb(0, 255, 0)
Color.BLUE = Color.rgb(0, 0, 255)
Color.TRANSPARENT = Color.rgba(0, 0, 0, 0)


@dataclass(frozen=True)
class Point:
    x: float = 0.0
    y: float = 0.0


Point.ZERO = Point(0.0, 0.0)


@dataclass(frozen=True)
class Rect:
    x: float
    y: float
    width: float
    height: float

    @classmethod
    def from_size(cls, size: Size) -> Rect:
        return cls(0.0, 0.0, size.width, size.height)

    def contains(self, x: float, y: float) -> bool:
        """True if the point lies inside the rectangle, edges included."""
        return self.x <= x <= self.x + self.width and self.y <= y <= self.y + self.height


@dataclass(frozen=True)
class TextStyle:
    font_family: str = "sans-serif"
    font_size: float = 16.0
    color: Color = Color.BLACK
    bold: bool = False
    italic: bool = False


@dataclass(frozen=True)
class Paint:
    color: Color = Color.BLACK
    stroke_width: float = 1.0
    anti_alias: bool = True


_IDENTITY = ((1.0, 0.0, 0.0), (0.0, 1.0, 0.0), (0.0, 0.0, 1.0))


@dataclass(frozen=True)
class Matrix:
    """A 3x3 affine transform, stored row by row."""

    values: tuple[tuple[float, float, float], ...] = _IDENTITY

    def __post_init__(self) -> None:
        rows = tuple(tuple(float(v) for v in row) for row in self.values)
        if len(rows) != 3 or any(len(row) != 3 for row in rows):
            raise ValueError("a matrix must have 3 rows of 3 values")
        object.__setattr__(self, "values", rows)

    @classmethod
    def identity(cls) -> Matrix:
        return cls(_IDENTITY)

    @classmethod
    def translate(cls, x: float, y: float) -> Matrix:
        return cls(((1.0, 0.0, x), (0.0, 1.0, y), (0.0, 0.0, 1.0)))

    @classmethod
    def scale(cls, sx: float, sy: float) -> Matrix:
        return cls(((sx, 0.0, 0.0), (0.0, sy, 0.0), (0.0, 0.0, 1.0)))


@dataclass(frozen=True)
class RenderRect:
    rect: Rect
    paint: Paint = field(default_factory=Paint)

    @classmethod
    def filled(cls, rect: Rect, color: Color) -> RenderRect:
        """A rectangle painted with ``color`` and otherwise default paint."""
        return cls(rect, Paint(color=color))


@dataclass(frozen=True)
class RenderText:
    content: str
    style: TextStyle = field(default_factory=TextStyle)
    position: Point = Point.ZERO


@dataclass(frozen=True)
class RenderImage:
    size: Size


@dataclass(frozen=True)
class RenderClip:
    rect: Rect
    child: "RenderObject"


@dataclass(frozen=True)
class RenderTransform:
    matrix: Matrix
    child: "RenderObject"


@dataclass(frozen=True)
class RenderGroup:
    children: Sequence["RenderObject"] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "children", tuple(self.children))


@dataclass(frozen=True)
class RenderNone:
    """Draws nothing."""


RenderObject = Union[
    RenderRect, RenderText, RenderImage, RenderClip, RenderTransform, RenderGroup, RenderNone
]