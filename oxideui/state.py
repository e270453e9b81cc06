"""Observable value container that notifies listeners on change."""

from __future__ import annotations

import copy
import threading
from typing import Callable, Generic, TypeVar

T = TypeVar("T")


class State(Generic[T]):
    """A shared value whose listeners are called with every new value."""

    def __init__(self, initial: T) -> None:
        self._value = initial
        self._listeners: list[Callable[[T], None]] = []
        self._lock = threading.RLock()

    def get(self) -> T:
        """Return a copy of the current value."""
        with self._lock:
            return copy.deepcopy(self._value)

    def set(self, new_value: T) -> None:
        with self._lock:
            self._value = copy.deepcopy(new_value)
            listeners = list(self._listeners)
        self._notify(listeners, new_value)

    def update(self, updater: Callable[[T], T]) -> None:
        """Replace the value with ``updater(current)`` and notify listeners."""
        with self._lock:
            new_value = updater(copy.deepcopy(self._value))
            self._value = new_value
            listeners = list(self._listeners)
            snapshot = copy.deepcopy(new_value)
        self._notify(listeners, snapshot)

    def subscribe(self, listener: Callable[[T], None]) -> None:
        with self._lock:
            self._listeners.append(listener)

    @staticmethod
    def _notify(listeners: list[Callable[[T], None]], value: T) -> None:
        for listener in listeners:
            listener(value)