"""Widget base classes, reconciliation keys and build results."""

from __future__ import annotations

import abc
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Optional, Sequence, Union

from oxideui.event import EventContext, EventResult, UiEvent
from oxideui.render_object import RenderObject

if TYPE_CHECKING:
    from oxideui.context import BuildContext

_U64_MAX = 2**64 - 1


@dataclass(frozen=True)
class WidgetKey:
    """Identifies a widget across rebuilds: a string, a 64-bit number or a type."""

    value: Union[str, int, type]

    def __post_init__(self) -> None:
        value = self.value
        if isinstance(value, bool):
            raise TypeError("a widget key cannot be a bool")
        if isinstance(value, int):
            if not 0 <= value <= _U64_MAX:
                raise ValueError(f"numeric widget key out of 64-bit range: {value}")
        elif not isinstance(value, (str, type)):
            raise TypeError(f"unsupported widget key value: {value!r}")

    @classmethod
    def string(cls, s: str) -> WidgetKey:
        return cls(str(s))

    @classmethod
    def u64(cls, n: int) -> WidgetKey:
        return cls(n)

    @classmethod
    def type_id(cls, t: type) -> WidgetKey:
        if not isinstance(t, type):
            raise TypeError(f"expected a type, got {t!r}")
        return cls(t)

    def __str__(self) -> str:
        value = self.value
        if isinstance(value, str):
            return f'Key("{value}")'
        if isinstance(value, type):
            return f"Key({value.__qualname__})"
        return f"Key({value})"


@dataclass(frozen=True)
class LeafNode:
    """A build result that draws a render object directly."""

    render_object: RenderObject


@dataclass(frozen=True)
class ContainerNode:
    """A build result made of child widgets."""

    children: Sequence["Widget"] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "children", tuple(self.children))


@dataclass(frozen=True)
class EmptyNode:
    """A build result that renders nothing."""


WidgetNode = Union[LeafNode, ContainerNode, EmptyNode]


class Widget(abc.ABC):
    """An immutable, declarative description of part of the interface."""

    @abc.abstractmethod
    def build(self, ctx: BuildContext) -> WidgetNode:
        """Describe this widget as a leaf, a container or nothing."""

    def handle_event(self, event: UiEvent, context: EventContext) -> EventResult:
        """React to an event; by default the event is left unhandled."""
        return EventResult.UNHANDLED

    def key(self) -> Optional[WidgetKey]:
        """Key used to match this widget with an existing element."""
        return None


class StatelessWidget(Widget):
    """A widget without internal state; building delegates to ``build_stateless``."""

    def build(self, ctx: BuildContext) -> WidgetNode:
        return self.build_stateless(ctx)

    @abc.abstractmethod
    def build_stateless(self, ctx: BuildContext) -> WidgetNode:
        """Build the widget from the context alone."""


class WidgetState:
    """Mutable state owned by a stateful widget's element."""

    def reduce(self, action: Any) -> bool:
        """Apply an action; return whether the state changed."""
        return False


class StatefulWidget(Widget):
    """A widget whose element keeps a ``WidgetState`` across rebuilds."""

    @abc.abstractmethod
    def create_state(self) -> WidgetState:
        """Create the initial state."""

    @abc.abstractmethod
    def build_stateful(self, state: WidgetState, ctx: BuildContext) -> WidgetNode:
        """Build the widget from its state."""

    def did_mount(self, state: WidgetState, ctx: BuildContext) -> None:
        """Called when the widget is first mounted."""

    def did_update(self, prev: StatefulWidget, state: WidgetState, ctx: BuildContext) -> None:
        """Called when the parent rebuilt with a new configuration."""

    def will_unmount(self, state: WidgetState, ctx: BuildContext) -> None:
        """Called just before the widget leaves the tree."""