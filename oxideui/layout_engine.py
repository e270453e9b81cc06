"""Layout tree nodes, flex/grid/stack/absolute layout and a simple constraint solver."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Optional

from oxideui.constraints import Constraints, Size

_GRID_COLUMNS = 3
_GRID_GAP = 10.0
_GRID_CELL_HEIGHT = 100.0
_GRID_INTRINSIC_COLUMN_WIDTH = 300.0


class LayoutType(Enum):
    FLEX = "flex"
    GRID = "grid"
    ABSOLUTE = "absolute"
    STACK = "stack"


@dataclass
class LayoutNode:
    """A node in the layout tree; layout fills in ``size`` and ``position``."""

    id: int
    constraints: Constraints = field(default_factory=Constraints)
    size: Size = field(default_factory=Size)
    position: tuple[float, float] = (0.0, 0.0)
    children: list[LayoutNode] = field(default_factory=list)
    layout_type: LayoutType = LayoutType.FLEX


class FlexDirection(Enum):
    ROW = "row"
    ROW_REVERSE = "row-reverse"
    COLUMN = "column"
    COLUMN_REVERSE = "column-reverse"


class JustifyContent(Enum):
    FLEX_START = "flex-start"
    FLEX_END = "flex-end"
    CENTER = "center"
    SPACE_BETWEEN = "space-between"
    SPACE_AROUND = "space-around"
    SPACE_EVENLY = "space-evenly"


class AlignItems(Enum):
    FLEX_START = "flex-start"
    FLEX_END = "flex-end"
    CENTER = "center"
    BASELINE = "baseline"
    STRETCH = "stretch"


class AlignContent(Enum):
    FLEX_START = "flex-start"
    FLEX_END = "flex-end"
    CENTER = "center"
    SPACE_BETWEEN = "space-between"
    SPACE_AROUND = "space-around"
    STRETCH = "stretch"


class FlexWrap(Enum):
    NO_WRAP = "nowrap"
    WRAP = "wrap"
    WRAP_REVERSE = "wrap-reverse"


@dataclass(frozen=True)
class FlexLayout:
    direction: FlexDirection = FlexDirection.ROW
    justify_content: JustifyContent = JustifyContent.FLEX_START
    align_items: AlignItems = AlignItems.STRETCH
    align_content: AlignContent = AlignContent.STRETCH
    wrap: FlexWrap = FlexWrap.NO_WRAP
    gap: float = 0.0


@dataclass(frozen=True)
class FlexItem:
    flex_grow: float = 0.0
    flex_shrink: float = 1.0
    flex_basis: Optional[float] = None
    align_self: Optional[AlignItems] = None


_TRACK_KINDS = frozenset({"fixed", "flex", "auto", "min-content", "max-content"})


@dataclass(frozen=True)
class GridTrack:
    """A grid row or column size: fixed, flex fraction, auto, min- or max-content."""

    kind: str
    value: float = 0.0

    def __post_init__(self) -> None:
        if self.kind not in _TRACK_KINDS:
            raise ValueError(f"unknown grid track kind: {self.kind!r}")

    @classmethod
    def fixed(cls, value: float) -> GridTrack:
        return cls("fixed", value)

    @classmethod
    def flex(cls, value: float) -> GridTrack:
        return cls("flex", value)


GridTrack.AUTO = GridTrack("auto")
GridTrack.MIN_CONTENT = GridTrack("min-content")
GridTrack.MAX_CONTENT = GridTrack("max-content")


class GridAutoFlow(Enum):
    ROW = "row"
    COLUMN = "column"
    ROW_DENSE = "row-dense"
    COLUMN_DENSE = "column-dense"


@dataclass(frozen=True)
class GridLayout:
    columns: tuple[GridTrack, ...] = ()
    rows: tuple[GridTrack, ...] = ()
    column_gap: float = 0.0
    row_gap: float = 0.0
    auto_flow: GridAutoFlow = GridAutoFlow.ROW


@dataclass(frozen=True)
class GridItem:
    column_start: Optional[int] = None
    column_end: Optional[int] = None
    row_start: Optional[int] = None
    row_end: Optional[int] = None


def _grid_rows(count: int) -> int:
    return -(-count // _GRID_COLUMNS)


class LayoutEngine:
    """Positions and sizes the direct children of a layout node."""

    def __init__(self) -> None:
        self._cache: dict[int, LayoutNode] = {}

    def layout(self, node: LayoutNode) -> None:
        """Lay out ``node`` in place according to its layout type."""
        if node.layout_type is LayoutType.FLEX:
            self._layout_flex(node)
        elif node.layout_type is LayoutType.GRID:
            self._layout_grid(node)
        elif node.layout_type is LayoutType.ABSOLUTE:
            self._layout_absolute(node)
        else:
            self._layout_stack(node)

    @staticmethod
    def _layout_flex(node: LayoutNode) -> None:
        offset = 0.0
        for child in node.children:
            child_size = child.constraints.biggest()
            child.position = (offset, 0.0)
            child.size = child_size
            offset += child_size.width
        node.size = Size(offset, node.constraints.max_height)

    @staticmethod
    def _layout_grid(node: LayoutNode) -> None:
        available = node.constraints.max_width - _GRID_GAP * (_GRID_COLUMNS - 1)
        cell_width = available / _GRID_COLUMNS
        for index, child in enumerate(node.children):
            row, col = divmod(index, _GRID_COLUMNS)
            child.position = (
                col * (cell_width + _GRID_GAP),
                row * (_GRID_CELL_HEIGHT + _GRID_GAP),
            )
            child.size = Size(cell_width, _GRID_CELL_HEIGHT)
        rows = _grid_rows(len(node.children))
        height = rows * _GRID_CELL_HEIGHT + (rows - 1) * _GRID_GAP if rows else 0.0
        node.size = Size(node.constraints.max_width, height)

    @staticmethod
    def _layout_absolute(node: LayoutNode) -> None:
        for child in node.children:
            child.size = child.constraints.biggest()
        node.size = node.constraints.biggest()

    @staticmethod
    def _layout_stack(node: LayoutNode) -> None:
        max_width = 0.0
        max_height = 0.0
        for child in node.children:
            child.position = (0.0, 0.0)
            child.size = child.constraints.biggest()
            max_width = max(max_width, child.size.width)
            max_height = max(max_height, child.size.height)
        node.size = Size(max_width, max_height)

    def measure_intrinsic(self, node: LayoutNode) -> Size:
        """The size ``node`` would like without outside constraints."""
        if node.layout_type is LayoutType.FLEX:
            sizes = [self.measure_intrinsic(child) for child in node.children]
            return Size(
                sum(size.width for size in sizes),
                max((size.height for size in sizes), default=0.0),
            )
        if node.layout_type is LayoutType.GRID:
            rows = _grid_rows(len(node.children))
            return Size(_GRID_INTRINSIC_COLUMN_WIDTH * _GRID_COLUMNS, _GRID_CELL_HEIGHT * rows)
        return node.constraints.smallest()


class ConstraintKind(Enum):
    EQUAL = "equal"
    GREATER_THAN = "greater_than"
    LESS_THAN = "less_than"


@dataclass(frozen=True)
class LayoutConstraint:
    """A bound on a named layout variable."""

    kind: ConstraintKind
    var: str
    value: float


class LayoutSolver:
    """Applies equality and bound constraints to named variables in order."""

    def __init__(self) -> None:
        self._variables: dict[str, float] = {}

    def solve(self, constraints: Iterable[LayoutConstraint]) -> bool:
        """Apply each constraint in turn; always succeeds."""
        for constraint in constraints:
            var, value = constraint.var, constraint.value
            if constraint.kind is ConstraintKind.EQUAL:
                self._variables[var] = value
            elif constraint.kind is ConstraintKind.GREATER_THAN:
                if self._variables.get(var, 0.0) < value:
                    self._variables[var] = value
            elif self._variables.get(var, math.inf) > value:
                self._variables[var] = value
        return True

    def get_value(self, var: str) -> Optional[float]:
        return self._variables.get(var)