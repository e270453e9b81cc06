"""Box constraints, sizes, edge insets and alignment used by layout."""

from __future__ import annotations

import math
from dataclasses import dataclass, replace
from enum import Enum


def _clamp(value: float, low: float, high: float) -> float:
    if low > high:
        raise ValueError(f"invalid clamp range: minimum {low} exceeds maximum {high}")
    return min(max(value, low), high)


@dataclass(frozen=True)
class Size:
    """A size in logical pixels."""

    width: float = 0.0
    height: float = 0.0

    @classmethod
    def zero(cls) -> Size:
        return cls(0.0, 0.0)

    @classmethod
    def infinite(cls) -> Size:
        return cls(math.inf, math.inf)

    def constrain(self, constraints: Constraints) -> Size:
        """Clamp this size into the range allowed by ``constraints``."""
        return constraints.constrain(self)


@dataclass(frozen=True)
class Constraints:
    """The range of sizes a child may take; unbounded by default."""

    min_width: float = 0.0
    max_width: float = math.inf
    min_height: float = 0.0
    max_height: float = math.inf

    @classmethod
    def tight(cls, size: Size) -> Constraints:
        return cls(size.width, size.width, size.height, size.height)

    @classmethod
    def loose(cls, max_size: Size) -> Constraints:
        return cls(0.0, max_size.width, 0.0, max_size.height)

    @classmethod
    def unbounded(cls) -> Constraints:
        return cls(0.0, math.inf, 0.0, math.inf)

    @classmethod
    def unconstrained(cls) -> Constraints:
        return cls.unbounded()

    def has_bounded_width(self) -> bool:
        return math.isfinite(self.max_width)

    def has_bounded_height(self) -> bool:
        return math.isfinite(self.max_height)

    def is_tight(self) -> bool:
        return self.min_width == self.max_width and self.min_height == self.max_height

    def biggest(self) -> Size:
        """The largest finite size allowed; unbounded axes become zero."""
        width = self.max_width if math.isfinite(self.max_width) else 0.0
        height = self.max_height if math.isfinite(self.max_height) else 0.0
        return Size(width, height)

    def smallest(self) -> Size:
        return Size(self.min_width, self.min_height)

    def constrain(self, size: Size) -> Size:
        return Size(
            _clamp(size.width, self.min_width, self.max_width),
            _clamp(size.height, self.min_height, self.max_height),
        )

    def constrain_width(self, width: float) -> Constraints:
        fixed = min(max(width, self.min_width), self.max_width)
        return replace(self, min_width=fixed, max_width=fixed)

    def constrain_height(self, height: float) -> Constraints:
        fixed = min(max(height, self.min_height), self.max_height)
        return replace(self, min_height=fixed, max_height=fixed)

    def deflate(self, amount: EdgeInsets) -> Constraints:
        horizontal = amount.horizontal()
        vertical = amount.vertical()
        return Constraints(
            max(self.min_width - horizontal, 0.0),
            max(self.max_width - horizontal, 0.0),
            max(self.min_height - vertical, 0.0),
            max(self.max_height - vertical, 0.0),
        )

    def loosen(self) -> Constraints:
        return replace(self, min_width=0.0, min_height=0.0)

    def tighten(self, size: Size) -> Constraints:
        return Constraints.tight(size)


@dataclass(frozen=True)
class EdgeInsets:
    """Padding or margin on each side of a box."""

    left: float = 0.0
    top: float = 0.0
    right: float = 0.0
    bottom: float = 0.0

    @classmethod
    def all(cls, value: float) -> EdgeInsets:
        return cls(value, value, value, value)

    @classmethod
    def symmetric(cls, horizontal: float, vertical: float) -> EdgeInsets:
        return cls(horizontal, vertical, horizontal, vertical)

    @classmethod
    def only(cls, left: float, top: float, right: float, bottom: float) -> EdgeInsets:
        return cls(left, top, right, bottom)

    @classmethod
    def zero(cls) -> EdgeInsets:
        return cls(0.0, 0.0, 0.0, 0.0)

    def horizontal(self) -> float:
        return self.left + self.right

    def vertical(self) -> float:
        return self.top + self.bottom


def _offset(free: float, factor: float) -> float:
    if factor == 0.0:
        return 0.0
    if factor == 1.0:
        return free
    return free / 2.0


class Alignment(Enum):
    """Where a child sits inside its container."""

    TOP_LEFT = (0.0, 0.0)
    TOP_CENTER = (0.5, 0.0)
    TOP_RIGHT = (1.0, 0.0)
    CENTER_LEFT = (0.0, 0.5)
    CENTER = (0.5, 0.5)
    CENTER_RIGHT = (1.0, 0.5)
    BOTTOM_LEFT = (0.0, 1.0)
    BOTTOM_CENTER = (0.5, 1.0)
    BOTTOM_RIGHT = (1.0, 1.0)

    def align(self, size: Size, container_size: Size) -> tuple[float, float]:
        """Offset of a box of ``size`` aligned inside ``container_size``."""
        fx, fy = self.value
        return (
            _offset(container_size.width - size.width, fx),
            _offset(container_size.height - size.height, fy),
        )