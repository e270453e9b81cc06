"""Damage tracking, display lists and viewport culling for the render tree."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from oxideui.element import ElementId
from oxideui.render_object import (
    Matrix,
    Rect,
    RenderClip,
    RenderGroup,
    RenderImage,
    RenderObject,
    RenderRect,
    RenderText,
    RenderTransform,
)

_TEXT_BOUNDS_WIDTH = 100.0
_TEXT_BOUNDS_HEIGHT = 20.0


class DamageRegion:
    """Rectangles that need redrawing."""

    def __init__(self) -> None:
        self.rects: list[Rect] = []

    def add(self, rect: Rect) -> None:
        self.rects.append(rect)

    def merge(self) -> Optional[Rect]:
        """The smallest rectangle covering every damaged rectangle, or None."""
        if not self.rects:
            return None
        min_x = min(rect.x for rect in self.rects)
        min_y = min(rect.y for rect in self.rects)
        max_x = max(rect.x + rect.width for rect in self.rects)
        max_y = max(rect.y + rect.height for rect in self.rects)
        return Rect(min_x, min_y, max_x - min_x, max_y - min_y)

    def clear(self) -> None:
        self.rects.clear()


@dataclass
class DisplayItem:
    """A drawable primitive with its resolved bounds, transform, opacity and clip."""

    render_object: RenderObject
    bounds: Rect
    transform: Matrix = field(default_factory=Matrix.identity)
    opacity: float = 1.0
    clip: Optional[Rect] = None


def _overlaps(bounds: Rect, viewport: Rect) -> bool:
    return (
        bounds.x < viewport.x + viewport.width
        and bounds.x + bounds.width > viewport.x
        and bounds.y < viewport.y + viewport.height
        and bounds.y + bounds.height > viewport.y
    )


class DisplayList:
    """An ordered list of display items."""

    def __init__(self) -> None:
        self.items: list[DisplayItem] = []

    def add(self, item: DisplayItem) -> None:
        self.items.append(item)

    def clear(self) -> None:
        self.items.clear()

    def cull(self, viewport: Rect) -> None:
        """Drop items whose bounds do not overlap ``viewport``."""
        self.items = [item for item in self.items if _overlaps(item.bounds, viewport)]

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self):
        return iter(self.items)


def _multiply(a: Matrix, b: Matrix) -> Matrix:
    columns = list(zip(*b.values))
    return Matrix(
        tuple(
            tuple(sum(x * y for x, y in zip(row, column)) for column in columns)
            for row in a.values
        )
    )


def _transform_rect(rect: Rect, matrix: Matrix) -> Rect:
    (a, b, c), (d, e, f), _ = matrix.values
    x1 = rect.x * a + rect.y * b + c
    y1 = rect.x * d + rect.y * e + f
    right = rect.x + rect.width
    bottom = rect.y + rect.height
    x2 = right * a + bottom * b + c
    y2 = right * d + bottom * e + f
    return Rect(min(x1, x2), min(y1, y2), abs(x2 - x1), abs(y2 - y1))


def _bounds(obj: RenderObject, transform: Matrix) -> Rect:
    if isinstance(obj, RenderRect):
        return _transform_rect(obj.rect, transform)
    if isinstance(obj, RenderText):
        position = obj.position
        return _transform_rect(
            Rect(position.x, position.y, _TEXT_BOUNDS_WIDTH, _TEXT_BOUNDS_HEIGHT), transform
        )
    if isinstance(obj, RenderImage):
        return _transform_rect(Rect.from_size(obj.size), transform)
    return Rect(0.0, 0.0, 0.0, 0.0)


class RenderPipeline:
    """Flattens render trees into culled display lists and tracks damage."""

    def __init__(self, viewport: Rect) -> None:
        self.damage = DamageRegion()
        self.display_list = DisplayList()
        self.layer_cache: dict[ElementId, RenderObject] = {}
        self.viewport = viewport

    def mark_dirty(self, element_id: ElementId, bounds: Rect) -> None:
        """Record damage and drop the element's cached layer."""
        self.damage.add(bounds)
        self.layer_cache.pop(element_id, None)

    def build_display_list(self, root: RenderObject) -> None:
        """Rebuild the display list from ``root`` and cull it to the viewport."""
        self.display_list.clear()
        self._collect(root, Matrix.identity(), 1.0, None)
        self.display_list.cull(self.viewport)

    def _collect(
        self, obj: RenderObject, transform: Matrix, opacity: float, clip: Optional[Rect]
    ) -> None:
        if isinstance(obj, RenderGroup):
            for child in obj.children:
                self._collect(child, transform, opacity, clip)
        elif isinstance(obj, RenderTransform):
            self._collect(obj.child, _multiply(transform, obj.matrix), opacity, clip)
        elif isinstance(obj, RenderClip):
            self._collect(obj.child, transform, opacity, _transform_rect(obj.rect, transform))
        else:
            self.display_list.add(
                DisplayItem(
                    render_object=obj,
                    bounds=_bounds(obj, transform),
                    transform=transform,
                    opacity=opacity,
                    clip=clip,
                )
            )

    def update_viewport(self, viewport: Rect) -> None:
        self.viewport = viewport

    def has_damage(self) -> bool:
        return bool(self.damage.rects)

    def clear_damage(self) -> None:
        self.damage.clear()