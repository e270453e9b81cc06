"""The element tree: mutable runtime counterparts of widgets."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

from oxideui.constraints import Constraints, Size
from oxideui.render_object import RenderObject
from oxideui.widget import Widget, WidgetKey


@dataclass(frozen=True, order=True)
class ElementId:
    """Unique identifier of an element."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError(f"element id must be non-negative: {self.value}")


@dataclass(eq=False)
class Element:
    """Runtime instance of a widget: relationships, state and layout results."""

    id: ElementId
    widget_type: type
    parent: Optional[ElementId] = None
    children: list[ElementId] = field(default_factory=list)
    state: Any = None
    slot_index: int = 0
    key: Optional[WidgetKey] = None
    dirty: bool = True
    render_object: Optional[RenderObject] = None
    constraints: Constraints = field(default_factory=Constraints)
    size: Size = field(default_factory=Size)


class ElementTree:
    """All elements, indexed by id, with the root and parent/child links."""

    def __init__(self) -> None:
        self._elements: dict[ElementId, Element] = {}
        self._root: Optional[ElementId] = None
        self._next_id = 1

    def create_element(
        self, widget: Widget, parent: Optional[ElementId] = None, slot_index: int = 0
    ) -> ElementId:
        """Add an element for ``widget``; the first element becomes the root."""
        element_id = ElementId(self._next_id)
        self._next_id += 1
        self._elements[element_id] = Element(
            id=element_id,
            widget_type=type(widget),
            parent=parent,
            slot_index=slot_index,
            key=widget.key(),
        )
        if parent is not None and (parent_element := self._elements.get(parent)) is not None:
            parent_element.children.append(element_id)
        if self._root is None:
            self._root = element_id
        return element_id

    def get(self, element_id: ElementId) -> Optional[Element]:
        return self._elements.get(element_id)

    def root(self) -> Optional[ElementId]:
        return self._root

    def set_root(self, element_id: ElementId) -> None:
        self._root = element_id

    def mark_dirty(self, element_id: ElementId) -> None:
        """Flag an element and all its ancestors for rebuilding."""
        current: Optional[ElementId] = element_id
        while current is not None and (element := self._elements.get(current)) is not None:
            element.dirty = True
            current = element.parent

    def remove_element(self, element_id: ElementId) -> None:
        """Remove an element together with its whole subtree."""
        element = self._elements.get(element_id)
        if element is None:
            return
        for child_id in list(element.children):
            self.remove_element(child_id)
        del self._elements[element_id]
        if element.parent is not None and (parent := self._elements.get(element.parent)) is not None:
            parent.children = [child for child in parent.children if child != element_id]
        if self._root == element_id:
            self._root = None

    def get_parent(self, element_id: ElementId) -> Optional[ElementId]:
        element = self._elements.get(element_id)
        return element.parent if element is not None else None

    def get_children(self, element_id: ElementId) -> list[ElementId]:
        element = self._elements.get(element_id)
        return list(element.children) if element is not None else []

    def find_ancestor(self, element_id: ElementId, widget_type: type) -> Optional[ElementId]:
        """Nearest element, starting with ``element_id`` itself, built from ``widget_type``."""
        current: Optional[ElementId] = element_id
        while current is not None and (element := self._elements.get(current)) is not None:
            if element.widget_type == widget_type:
                return current
            current = element.parent
        return None

    def collect_dirty(self) -> list[ElementId]:
        return [element.id for element in self._elements.values() if element.dirty]

    def clear_dirty(self) -> None:
        for element in self._elements.values():
            element.dirty = False

    def __contains__(self, element_id: object) -> bool:
        return element_id in self._elements

    def __len__(self) -> int:
        return len(self._elements)