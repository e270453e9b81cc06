"""UI events, propagation phases and handler results."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Hashable, Optional, Union

from oxideui.render_object import Point


class MouseButton(Enum):
    """Standard mouse buttons; other buttons are given by their number as an int."""

    LEFT = "left"
    RIGHT = "right"
    MIDDLE = "middle"
    BACK = "back"
    FORWARD = "forward"


ButtonLike = Union[MouseButton, int]


@dataclass(frozen=True)
class Vector2:
    x: float = 0.0
    y: float = 0.0


Vector2.ZERO = Vector2(0.0, 0.0)


@dataclass(frozen=True)
class Modifiers:
    shift: bool = False
    ctrl: bool = False
    alt: bool = False
    meta: bool = False


class UiEvent:
    """Base class of every UI event."""

    def position(self) -> Optional[Point]:
        """The pointer position carried by the event, if any."""
        return None

    def is_pointer_event(self) -> bool:
        return False

    def is_keyboard_event(self) -> bool:
        return False


class _PointerEvent(UiEvent):
    point: Point

    def position(self) -> Optional[Point]:
        return self.point

    def is_pointer_event(self) -> bool:
        return True


class _KeyboardEvent(UiEvent):
    def is_keyboard_event(self) -> bool:
        return True


@dataclass(frozen=True)
class PointerDown(_PointerEvent):
    pointer_id: int
    point: Point
    button: ButtonLike = MouseButton.LEFT


@dataclass(frozen=True)
class PointerUp(_PointerEvent):
    pointer_id: int
    point: Point
    button: ButtonLike = MouseButton.LEFT


@dataclass(frozen=True)
class PointerMove(_PointerEvent):
    pointer_id: int
    point: Point
    delta: Vector2 = Vector2.ZERO


@dataclass(frozen=True)
class Scroll(_PointerEvent):
    point: Point
    delta: Vector2 = Vector2.ZERO


@dataclass(frozen=True)
class KeyDown(_KeyboardEvent):
    key: str
    modifiers: Modifiers = field(default_factory=Modifiers)
    repeat: bool = False


@dataclass(frozen=True)
class KeyUp(_KeyboardEvent):
    key: str
    modifiers: Modifiers = field(default_factory=Modifiers)


@dataclass(frozen=True)
class TextInput(_KeyboardEvent):
    character: str

    def __post_init__(self) -> None:
        if len(self.character) != 1:
            raise ValueError("text input carries exactly one character")


@dataclass(frozen=True)
class Focus(UiEvent):
    """The target gained focus."""


@dataclass(frozen=True)
class Blur(UiEvent):
    """The target lost focus."""


@dataclass(frozen=True)
class Custom(UiEvent):
    name: str
    data: Any = None


class EventPhase(Enum):
    CAPTURING = "capturing"
    AT_TARGET = "at_target"
    BUBBLING = "bubbling"


@dataclass
class EventContext:
    """State handed to an event handler while an event propagates."""

    target: Hashable
    current_target: Hashable
    phase: EventPhase
    handled: bool = False
    default_prevented: bool = False

    def stop_propagation(self) -> None:
        self.handled = True

    def prevent_default(self) -> None:
        self.default_prevented = True

    def is_at_target(self) -> bool:
        return self.target == self.current_target


@dataclass
class EventPath:
    """Elements an event visits: root to target, then target to root."""

    target: Hashable
    capturing: list = field(default_factory=list)
    bubbling: list = field(default_factory=list)


class EventResult(Enum):
    UNHANDLED = "unhandled"
    HANDLED = "handled"
    STOPPED = "stopped"

    def should_stop(self) -> bool:
        return self is EventResult.STOPPED

    def is_handled(self) -> bool:
        return self in (EventResult.HANDLED, EventResult.STOPPED)