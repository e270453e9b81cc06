"""Fine-grained reactivity: state tokens, subscriptions and dirty tracking."""

from __future__ import annotations

import copy
import itertools
import threading
from dataclasses import dataclass, field
from typing import Callable, Generic, TypeVar

from oxideui.element import ElementId

T = TypeVar("T")

_token_counter = itertools.count(1)
_token_lock = threading.Lock()


def _next_token_value() -> int:
    with _token_lock:
        return next(_token_counter)


@dataclass(frozen=True)
class StateToken:
    """Identifies one piece of state; each new token is unique."""

    value: int = field(default_factory=_next_token_value)


@dataclass(frozen=True)
class StateChange:
    """A state change and the elements it affects."""

    token: StateToken
    affected_elements: frozenset[ElementId]


class StateTracker:
    """Maps state tokens to subscribed elements and collects dirty elements."""

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._subscriptions: dict[StateToken, set[ElementId]] = {}
        self._dependencies: dict[ElementId, set[StateToken]] = {}
        self._pending: list[StateChange] = []
        self._dirty: set[ElementId] = set()

    def subscribe(self, element: ElementId, token: StateToken) -> None:
        with self._lock:
            self._subscriptions.setdefault(token, set()).add(element)
            self._dependencies.setdefault(element, set()).add(token)

    def unsubscribe_all(self, element: ElementId) -> None:
        """Remove every subscription held by ``element``."""
        with self._lock:
            for token in self._dependencies.pop(element, set()):
                self._subscriptions.get(token, set()).discard(element)

    def notify_change(self, token: StateToken) -> None:
        """Record a change and mark every subscribed element dirty."""
        with self._lock:
            affected = frozenset(self._subscriptions.get(token, ()))
            if affected:
                self._pending.append(StateChange(token, affected))
                self._dirty.update(affected)

    def get_dirty_elements(self) -> set[ElementId]:
        with self._lock:
            return set(self._dirty)

    def clear_dirty(self) -> None:
        with self._lock:
            self._dirty.clear()

    def drain_pending_changes(self) -> list[StateChange]:
        """Return the pending changes in order and forget them."""
        with self._lock:
            changes, self._pending = self._pending, []
            return changes

    def mark_dirty(self, element: ElementId) -> None:
        with self._lock:
            self._dirty.add(element)


class ReactiveState(Generic[T]):
    """A value whose changes mark its subscribed elements dirty."""

    def __init__(self, initial: T, tracker: StateTracker) -> None:
        self._token = StateToken()
        self._value = initial
        self._tracker = tracker
        self._lock = threading.RLock()

    def get(self) -> T:
        """Return a copy of the current value."""
        with self._lock:
            return copy.deepcopy(self._value)

    def set(self, new_value: T) -> None:
        with self._lock:
            self._value = new_value
        self._tracker.notify_change(self._token)

    def update(self, updater: Callable[[T], T]) -> None:
        """Replace the value with ``updater(current)`` and notify."""
        with self._lock:
            self._value = updater(copy.deepcopy(self._value))
        self._tracker.notify_change(self._token)

    def subscribe(self, element: ElementId) -> None:
        self._tracker.subscribe(element, self._token)

    def token(self) -> StateToken:
        return self._token


_EMPTY = object()


class DerivedState(Generic[T]):
    """A value computed on demand and cached until invalidated."""

    def __init__(self, compute: Callable[[], T], tracker: StateTracker) -> None:
        self._token = StateToken()
        self._compute = compute
        self._cache: object = _EMPTY
        self._tracker = tracker
        self._lock = threading.RLock()

    @property
    def token(self) -> StateToken:
        return self._token

    def get(self) -> T:
        """Return the cached value, computing it first if needed."""
        with self._lock:
            if self._cache is _EMPTY:
                self._cache = self._compute()
            return copy.deepcopy(self._cache)

    def invalidate(self) -> None:
        """Drop the cached value and notify subscribers."""
        with self._lock:
            self._cache = _EMPTY
        self._tracker.notify_change(self._token)

    def subscribe(self, element: ElementId) -> None:
        self._tracker.subscribe(element, self._token)


class EffectRunner:
    """Side effects run together in registration order."""

    def __init__(self) -> None:
        self._effects: list[Callable[[], None]] = []
        self._lock = threading.Lock()

    def register(self, effect: Callable[[], None]) -> None:
        with self._lock:
            self._effects.append(effect)

    def run_all(self) -> None:
        with self._lock:
            effects = list(self._effects)
        for effect in effects:
            effect()

    def clear(self) -> None:
        with self._lock:
            self._effects.clear()


class StateBatch:
    """Queues state changes and notifies them all at once on commit."""

    def __init__(self, tracker: StateTracker) -> None:
        self._tracker = tracker
        self._changes: list[StateToken] = []

    def queue_change(self, token: StateToken) -> None:
        self._changes.append(token)

    def commit(self) -> None:
        """Notify every queued change in order, then empty the batch."""
        changes, self._changes = self._changes, []
        for token in changes:
            self._tracker.notify_change(token)