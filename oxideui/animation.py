"""Animations: easing curves, interpolation, repeats, keyframes and transitions."""

from __future__ import annotations

import abc
import itertools
import math
import threading
import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Generic, Optional, Sequence, TypeVar

from oxideui.render_object import Color

T = TypeVar("T")
Clock = Callable[[], float]

_id_counter = itertools.count(1)
_id_lock = threading.Lock()


def _next_animation_id() -> int:
    with _id_lock:
        return next(_id_counter)


@dataclass(frozen=True)
class AnimationId:
    """Unique identifier of an animation; each new id is larger than the last."""

    value: int = field(default_factory=_next_animation_id)


class EasingCurve(abc.ABC):
    """Maps linear progress ``t`` in 0..1 to eased progress."""

    @abc.abstractmethod
    def evaluate(self, t: float) -> float:
        """Eased progress for linear progress ``t``."""


@dataclass(frozen=True)
class Linear(EasingCurve):
    def evaluate(self, t: float) -> float:
        return t


@dataclass(frozen=True)
class EaseIn(EasingCurve):
    def evaluate(self, t: float) -> float:
        return t * t


@dataclass(frozen=True)
class EaseOut(EasingCurve):
    def evaluate(self, t: float) -> float:
        return t * (2.0 - t)


@dataclass(frozen=True)
class EaseInOut(EasingCurve):
    def evaluate(self, t: float) -> float:
        if t < 0.5:
            return 2.0 * t * t
        return -1.0 + (4.0 - 2.0 * t) * t


@dataclass(frozen=True)
class CubicBezier(EasingCurve):
    """A cubic Bezier curve; only the y control points shape the value."""

    x1: float
    y1: float
    x2: float
    y2: float

    def evaluate(self, t: float) -> float:
        mt = 1.0 - t
        return 3.0 * mt * mt * t * self.y1 + 3.0 * mt * t * t * self.y2 + t * t * t


@dataclass(frozen=True)
class Spring(EasingCurve):
    """A damped spring settling from 0 towards 1."""

    damping: float
    stiffness: float

    def evaluate(self, t: float) -> float:
        if self.stiffness < 0:
            raise ValueError(f"spring stiffness must be non-negative: {self.stiffness}")
        omega = math.sqrt(self.stiffness)
        zeta = self.damping / (2.0 * omega) if omega > 0 else math.inf
        if zeta < 1.0:
            root = math.sqrt(1.0 - zeta * zeta)
            omega_d = omega * root
            decay = math.exp(-zeta * omega * t)
            return 1.0 - decay * (math.cos(omega_d * t) + (zeta / root) * math.sin(omega_d * t))
        return 1.0 - math.exp(-omega * t) * (1.0 + omega * t)


def _to_u8(value: float) -> int:
    if math.isnan(value):
        return 0
    return int(min(max(value, 0.0), 255.0))


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def interpolate(start: T, end: T, t: float) -> T:
    """Value between ``start`` (t=0) and ``end`` (t=1).

    Numbers, tuples of numbers and colours are supported; colour channels
    are truncated and saturated to 0..255.
    """
    if _is_number(start) and _is_number(end):
        return start + (end - start) * t
    if isinstance(start, Color) and isinstance(end, Color):
        return Color(
            _to_u8(start.r + (end.r - start.r) * t),
            _to_u8(start.g + (end.g - start.g) * t),
            _to_u8(start.b + (end.b - start.b) * t),
            _to_u8(start.a + (end.a - start.a) * t),
        )
    if isinstance(start, tuple) and isinstance(end, tuple):
        if len(start) != len(end):
            raise ValueError("cannot interpolate tuples of different lengths")
        return tuple(interpolate(a, b, t) for a, b in zip(start, end))
    raise TypeError(f"cannot interpolate {type(start).__name__} and {type(end).__name__}")


@dataclass
class AnimatedValue(Generic[T]):
    """A start and end value and the current value between them."""

    start: T
    end: T
    current: Any = None

    def __post_init__(self) -> None:
        if self.current is None:
            self.current = self.start

    def update(self, t: float) -> None:
        self.current = interpolate(self.start, self.end, t)


class _RepeatKind(Enum):
    ONCE = "once"
    LOOP = "loop"
    REVERSE = "reverse"
    COUNT = "count"


@dataclass(frozen=True)
class AnimationRepeat:
    """How an animation continues once it reaches its end."""

    kind: _RepeatKind
    times: int = 0

    @classmethod
    def count(cls, n: int) -> AnimationRepeat:
        """Run ``n`` times in total."""
        if n < 0:
            raise ValueError(f"repeat count must be non-negative: {n}")
        return cls(_RepeatKind.COUNT, n)


AnimationRepeat.ONCE = AnimationRepeat(_RepeatKind.ONCE)
AnimationRepeat.LOOP = AnimationRepeat(_RepeatKind.LOOP)
AnimationRepeat.REVERSE = AnimationRepeat(_RepeatKind.REVERSE)


def _progress(clock: Clock, start_time: float, duration: float) -> float:
    if duration == 0:
        return 1.0
    return min((clock() - start_time) / duration, 1.0)


def _check_duration(duration: float) -> float:
    if duration < 0:
        raise ValueError(f"duration must be non-negative: {duration}")
    return float(duration)


class Animation(Generic[T]):
    """A value animated from ``start`` to ``end`` over ``duration`` seconds."""

    def __init__(self, start: T, end: T, duration: float, clock: Clock = time.monotonic) -> None:
        self.id = AnimationId()
        self.value: AnimatedValue[T] = AnimatedValue(start, end)
        self.duration = _check_duration(duration)
        self.curve: EasingCurve = Linear()
        self.clock = clock
        self.start_time = clock()
        self.repeat = AnimationRepeat.ONCE
        self.on_complete: Optional[Callable[[], None]] = None

    def with_curve(self, curve: EasingCurve) -> Animation[T]:
        self.curve = curve
        return self

    def with_repeat(self, repeat: AnimationRepeat) -> Animation[T]:
        self.repeat = repeat
        return self

    def with_on_complete(self, callback: Callable[[], None]) -> Animation[T]:
        self.on_complete = callback
        return self

    def _complete(self) -> bool:
        if self.on_complete is not None:
            self.on_complete()
        return False

    def update(self) -> bool:
        """Advance to the current time; return False once the animation has finished."""
        t = _progress(self.clock, self.start_time, self.duration)
        self.value.update(self.curve.evaluate(t))
        if t < 1.0:
            return True
        kind = self.repeat.kind
        if kind is _RepeatKind.ONCE:
            return self._complete()
        if kind is _RepeatKind.REVERSE:
            self.value.start, self.value.end = self.value.end, self.value.start
        elif kind is _RepeatKind.COUNT:
            if self.repeat.times <= 1:
                return self._complete()
            self.repeat = AnimationRepeat.count(self.repeat.times - 1)
        self.start_time = self.clock()
        return True

    def current_value(self) -> T:
        return self.value.current

    def __repr__(self) -> str:
        return (
            f"Animation(id={self.id!r}, value={self.value!r}, duration={self.duration!r}, "
            f"curve={self.curve!r}, repeat={self.repeat!r})"
        )


class AnimationController(Generic[T]):
    """Runs a set of animations and drops those that have finished."""

    def __init__(self) -> None:
        self._animations: dict[AnimationId, Animation[T]] = {}

    def add(self, animation: Animation[T]) -> AnimationId:
        self._animations[animation.id] = animation
        return animation.id

    def remove(self, animation_id: AnimationId) -> None:
        self._animations.pop(animation_id, None)

    def update_all(self) -> None:
        self._animations = {
            animation_id: animation
            for animation_id, animation in self._animations.items()
            if animation.update()
        }

    def get(self, animation_id: AnimationId) -> Optional[Animation[T]]:
        return self._animations.get(animation_id)

    def clear(self) -> None:
        self._animations.clear()

    def __len__(self) -> int:
        return len(self._animations)


@dataclass(frozen=True)
class Keyframe(Generic[T]):
    """A value reached at ``time`` (0..1); ``curve`` eases towards the next keyframe."""

    time: float
    value: T
    curve: EasingCurve = field(default_factory=Linear)


class KeyframeAnimation(Generic[T]):
    """An animation passing through a list of keyframes."""

    def __init__(
        self, keyframes: Sequence[Keyframe[T]], duration: float, clock: Clock = time.monotonic
    ) -> None:
        if not keyframes:
            raise ValueError("a keyframe animation needs at least one keyframe")
        self.id = AnimationId()
        self.keyframes = list(keyframes)
        self.duration = _check_duration(duration)
        self.clock = clock
        self.start_time = clock()
        self.current_value: T = self.keyframes[0].value

    def update(self) -> bool:
        """Advance to the current time; return False once the end is reached."""
        t = _progress(self.clock, self.start_time, self.duration)
        prev = nxt = self.keyframes[0]
        for keyframe in self.keyframes:
            if keyframe.time <= t:
                prev = keyframe
            if keyframe.time >= t:
                nxt = keyframe
                break
        if prev.time == nxt.time:
            self.current_value = prev.value
        else:
            segment_t = (t - prev.time) / (nxt.time - prev.time)
            self.current_value = interpolate(prev.value, nxt.value, prev.curve.evaluate(segment_t))
        return t < 1.0


class TransitionBuilder(Generic[T]):
    """Builds an implicit transition; 0.3 seconds with ease-in-out by default."""

    def __init__(self, start: T, end: T, clock: Clock = time.monotonic) -> None:
        self._start = start
        self._end = end
        self._duration = 0.3
        self._curve: EasingCurve = EaseInOut()
        self._clock = clock

    def duration(self, duration: float) -> TransitionBuilder[T]:
        self._duration = _check_duration(duration)
        return self

    def curve(self, curve: EasingCurve) -> TransitionBuilder[T]:
        self._curve = curve
        return self

    def build(self) -> Animation[T]:
        return Animation(self._start, self._end, self._duration, self._clock).with_curve(
            self._curve
        )