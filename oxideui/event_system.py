"""Gesture recognition, focus management, text composition and accessibility."""

from __future__ import annotations

import math
import os
import sys
import threading
import time
from collections import deque
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Optional

from oxideui.element import ElementId
from oxideui.event import Vector2
from oxideui.render_object import Point

Clock = Callable[[], float]

_FOCUS_HISTORY_LIMIT = 10


def _distance(a: Point, b: Point) -> float:
    return math.hypot(b.x - a.x, b.y - a.y)


class GestureType(Enum):
    TAP = "tap"
    DOUBLE_TAP = "double_tap"
    LONG_PRESS = "long_press"
    PAN = "pan"
    PINCH = "pinch"
    ROTATE = "rotate"


@dataclass
class GestureState:
    """Progress of one pointer's gesture; times are in seconds."""

    gesture_type: GestureType
    start_position: Point
    current_position: Optional[Point] = None
    start_time: Optional[float] = None
    velocity: Vector2 = Vector2.ZERO
    scale: float = 1.0
    rotation: float = 0.0
    clock: Clock = field(default=time.monotonic, repr=False, compare=False)

    def __post_init__(self) -> None:
        if self.current_position is None:
            self.current_position = self.start_position
        if self.start_time is None:
            self.start_time = self.clock()

    def update(self, position: Point) -> None:
        """Move the pointer to ``position``, recomputing velocity."""
        dt = self.clock() - self.start_time
        if dt > 0.0:
            self.velocity = Vector2(
                (position.x - self.current_position.x) / dt,
                (position.y - self.current_position.y) / dt,
            )
        self.current_position = position

    def distance(self) -> float:
        """Straight-line distance from the start position."""
        return _distance(self.start_position, self.current_position)

    def duration(self) -> float:
        """Seconds since the gesture started."""
        return self.clock() - self.start_time


class GestureRecognizer:
    """Turns pointer down/move/up sequences into taps, pans and presses."""

    def __init__(
        self,
        tap_threshold: float = 10.0,
        long_press_duration: float = 0.5,
        double_tap_duration: float = 0.3,
        clock: Clock = time.monotonic,
    ) -> None:
        self.tap_threshold = tap_threshold
        self.long_press_duration = long_press_duration
        self.double_tap_duration = double_tap_duration
        self._clock = clock
        self._active: dict[int, GestureState] = {}
        self._last_tap: Optional[tuple[float, Point]] = None

    def handle_pointer_down(self, pointer_id: int, position: Point) -> Optional[GestureType]:
        """Start tracking a pointer; report a double tap if it completes one."""
        if self._last_tap is not None:
            last_time, last_position = self._last_tap
            if (
                self._clock() - last_time < self.double_tap_duration
                and _distance(last_position, position) < self.tap_threshold
            ):
                self._last_tap = None
                return GestureType.DOUBLE_TAP
        self._active[pointer_id] = GestureState(GestureType.TAP, position, clock=self._clock)
        return None

    def handle_pointer_move(self, pointer_id: int, position: Point) -> Optional[GestureType]:
        """Update a pointer; report when a tap turns into a pan or long press."""
        gesture = self._active.get(pointer_id)
        if gesture is None:
            return None
        gesture.update(position)
        if gesture.gesture_type is GestureType.TAP and gesture.distance() > self.tap_threshold:
            gesture.gesture_type = GestureType.PAN
            return GestureType.PAN
        if (
            gesture.gesture_type is GestureType.TAP
            and gesture.duration() > self.long_press_duration
        ):
            gesture.gesture_type = GestureType.LONG_PRESS
            return GestureType.LONG_PRESS
        return None

    def handle_pointer_up(self, pointer_id: int) -> Optional[GestureType]:
        """Finish a pointer's gesture and return what it turned out to be."""
        gesture = self._active.pop(pointer_id, None)
        if gesture is None:
            return None
        if gesture.gesture_type is GestureType.TAP and gesture.distance() < self.tap_threshold:
            self._last_tap = (self._clock(), gesture.start_position)
            return GestureType.TAP
        return gesture.gesture_type

    def get_gesture(self, pointer_id: int) -> Optional[GestureState]:
        return self._active.get(pointer_id)


class FocusManager:
    """Tracks keyboard focus, tab order and focus listeners."""

    def __init__(self) -> None:
        self._focused: Optional[ElementId] = None
        self._history: deque[ElementId] = deque(maxlen=_FOCUS_HISTORY_LIMIT)
        self._tab_order: list[ElementId] = []
        self._listeners: dict[ElementId, list[Callable[[bool], None]]] = {}

    @property
    def focus_history(self) -> list[ElementId]:
        """The most recently focused elements, oldest first."""
        return list(self._history)

    def set_focus(self, element: Optional[ElementId]) -> None:
        """Move focus, telling the old element's and new element's listeners."""
        if self._focused == element:
            return
        if self._focused is not None:
            for listener in self._listeners.get(self._focused, []):
                listener(False)
        if element is not None:
            self._history.append(element)
        self._focused = element
        if element is not None:
            for listener in self._listeners.get(element, []):
                listener(True)

    def get_focused(self) -> Optional[ElementId]:
        return self._focused

    def _current_index(self) -> int:
        try:
            return self._tab_order.index(self._focused)
        except ValueError:
            return 0

    def focus_next(self) -> None:
        if not self._tab_order:
            return
        index = (self._current_index() + 1) % len(self._tab_order)
        self.set_focus(self._tab_order[index])

    def focus_previous(self) -> None:
        if not self._tab_order:
            return
        index = (self._current_index() - 1) % len(self._tab_order)
        self.set_focus(self._tab_order[index])

    def register_focusable(self, element: ElementId) -> None:
        if element not in self._tab_order:
            self._tab_order.append(element)

    def unregister_focusable(self, element: ElementId) -> None:
        self._tab_order = [e for e in self._tab_order if e != element]
        if self._focused == element:
            self.set_focus(None)

    def add_focus_listener(self, element: ElementId, listener: Callable[[bool], None]) -> None:
        self._listeners.setdefault(element, []).append(listener)


class InputMethodManager:
    """Holds in-progress text composition from an input method."""

    def __init__(self) -> None:
        self._composition: Optional[str] = None
        self._composition_range: Optional[tuple[int, int]] = None
        self._active_input: Optional[ElementId] = None

    @property
    def composition_range(self) -> Optional[tuple[int, int]]:
        return self._composition_range

    def start_composition(self, element: ElementId) -> None:
        self._active_input = element
        self._composition = ""

    def update_composition(self, text: str, cursor: tuple[int, int]) -> None:
        self._composition = text
        self._composition_range = cursor

    def commit_composition(self) -> Optional[str]:
        """Return the composed text and end the composition."""
        text, self._composition = self._composition, None
        self._composition_range = None
        return text

    def cancel_composition(self) -> None:
        self._composition = None
        self._composition_range = None

    def get_composition(self) -> Optional[str]:
        return self._composition

    def get_active_input(self) -> Optional[ElementId]:
        return self._active_input


class AccessibilityRole(Enum):
    BUTTON = "button"
    TEXT = "text"
    TEXT_FIELD = "text_field"
    IMAGE = "image"
    LINK = "link"
    CHECKBOX = "checkbox"
    RADIO_BUTTON = "radio_button"
    SLIDER = "slider"
    LIST = "list"
    LIST_ITEM = "list_item"
    HEADING = "heading"


def _detect_screen_reader() -> bool:
    if sys.platform.startswith("linux"):
        return "ACCESSIBILITY_ENABLED" in os.environ
    return False


class AccessibilityManager:
    """Labels and roles for elements, and announcements for screen readers."""

    def __init__(self, screen_reader_enabled: Optional[bool] = None) -> None:
        self._labels: dict[ElementId, str] = {}
        self._roles: dict[ElementId, AccessibilityRole] = {}
        self._lock = threading.Lock()
        self._screen_reader_enabled = (
            _detect_screen_reader() if screen_reader_enabled is None else screen_reader_enabled
        )

    def set_label(self, element: ElementId, label: str) -> None:
        with self._lock:
            self._labels[element] = label

    def set_role(self, element: ElementId, role: AccessibilityRole) -> None:
        with self._lock:
            self._roles[element] = role

    def get_label(self, element: ElementId) -> Optional[str]:
        return self._labels.get(element)

    def get_role(self, element: ElementId) -> Optional[AccessibilityRole]:
        return self._roles.get(element)

    def is_screen_reader_enabled(self) -> bool:
        return self._screen_reader_enabled

    def announce(self, message: str) -> None:
        """Print an announcement when a screen reader is active."""
        if self._screen_reader_enabled:
            print(f"ACCESSIBILITY: {message}")