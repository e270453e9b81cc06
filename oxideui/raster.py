"""A software framebuffer that draws render objects as packed ARGB pixels."""

from __future__ import annotations

from oxideui.render_object import (
    Color,
    Point,
    Rect,
    RenderClip,
    RenderGroup,
    RenderObject,
    RenderRect,
    RenderText,
    RenderTransform,
    TextStyle,
)

WHITE_PIXEL = 0xFFFFFFFF


def pack_color(color: Color) -> int:
    """Pack a colour into a 32-bit ``0xAARRGGBB`` value."""
    return (color.a << 24) | (color.r << 16) | (color.g << 8) | color.b


def _clamp(value: float, upper: int) -> int:
    return int(min(max(value, 0.0), float(upper)))


class Framebuffer:
    """A row-major buffer of ARGB pixels; sizes are at least one pixel."""

    def __init__(self, width: int, height: int) -> None:
        self.width = 1
        self.height = 1
        self.pixels: list[int] = []
        self.resize(width, height)

    def resize(self, width: int, height: int) -> None:
        """Change the size; the new buffer is cleared to white."""
        self.width = max(int(width), 1)
        self.height = max(int(height), 1)
        self.pixels = [WHITE_PIXEL] * (self.width * self.height)

    def clear(self, value: int = WHITE_PIXEL) -> None:
        self.pixels = [value] * (self.width * self.height)

    def pixel(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height}")
        return self.pixels[y * self.width + x]

    def draw(self, render_object: RenderObject) -> None:
        """Draw rectangles and text; transforms and clips draw their child unchanged."""
        if isinstance(render_object, RenderRect):
            self.draw_rect(render_object.rect, render_object.paint.color)
        elif isinstance(render_object, RenderText):
            self.draw_text(render_object.content, render_object.style, render_object.position)
        elif isinstance(render_object, RenderGroup):
            for child in render_object.children:
                self.draw(child)
        elif isinstance(render_object, (RenderTransform, RenderClip)):
            self.draw(render_object.child)

    def _fill(self, x1: int, y1: int, x2: int, y2: int, value: int) -> None:
        if x2 <= x1:
            return
        run = [value] * (x2 - x1)
        for y in range(y1, y2):
            start = y * self.width + x1
            self.pixels[start : start + len(run)] = run

    def draw_rect(self, rect: Rect, color: Color) -> None:
        """Fill the part of ``rect`` that lies inside the buffer."""
        x1 = _clamp(rect.x, self.width)
        y1 = _clamp(rect.y, self.height)
        x2 = _clamp(rect.x + rect.width, self.width)
        y2 = _clamp(rect.y + rect.height, self.height)
        self._fill(x1, y1, x2, y2, pack_color(color))

    def draw_text(self, text: str, style: TextStyle, position: Point) -> None:
        """Draw each non-space character as a solid block."""
        x = int(max(position.x, 0.0))
        y = int(max(position.y, 0.0))
        char_width = int(style.font_size * 0.6)
        char_height = int(style.font_size * 1.2)
        value = pack_color(style.color)
        for index, ch in enumerate(text):
            char_x = x + index * char_width
            if char_x >= self.width or y >= self.height:
                break
            if ch.isspace():
                continue
            block_w = min(max(char_width - 2, 0), self.width - char_x)
            block_h = min(char_height, self.height - y)
            self._fill(char_x, y, char_x + block_w, y + block_h, value)