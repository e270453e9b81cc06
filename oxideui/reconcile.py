"""Diffing of new widgets against the element tree, reusing elements where possible."""

from __future__ import annotations

from typing import Iterable, Optional

from oxideui.element import ElementId, ElementTree
from oxideui.widget import Widget, WidgetKey


def can_update(old_type: type, old_key: Optional[WidgetKey], new_widget: Widget) -> bool:
    """True if an element of ``old_type`` keyed ``old_key`` can take ``new_widget``."""
    return old_type == type(new_widget) and old_key == new_widget.key()


def _find_reusable_element(
    element_tree: ElementTree,
    new_widget: Widget,
    parent: Optional[ElementId],
    slot_index: int,
) -> Optional[ElementId]:
    if parent is None:
        return None
    parent_element = element_tree.get(parent)
    if parent_element is None or not 0 <= slot_index < len(parent_element.children):
        return None
    child_id = parent_element.children[slot_index]
    child = element_tree.get(child_id)
    if child is not None and can_update(child.widget_type, child.key, new_widget):
        return child_id
    return None


def reconcile(
    element_tree: ElementTree,
    new_widget: Widget,
    parent: Optional[ElementId] = None,
    slot_index: int = 0,
) -> ElementId:
    """Place ``new_widget`` at ``slot_index`` under ``parent``, reusing a matching element.

    A reused element keeps its state and is marked dirty; otherwise a new
    element is mounted.
    """
    existing = _find_reusable_element(element_tree, new_widget, parent, slot_index)
    if existing is not None:
        element = element_tree.get(existing)
        element.dirty = True
        element.widget_type = type(new_widget)
        return existing
    return element_tree.create_element(new_widget, parent, slot_index)


def unmount_element(element_tree: ElementTree, element_id: ElementId) -> None:
    """Remove an element, unmounting its children first."""
    for child_id in element_tree.get_children(element_id):
        unmount_element(element_tree, child_id)
    element_tree.remove_element(element_id)


def reconcile_children(
    element_tree: ElementTree,
    parent_id: ElementId,
    new_children: Iterable[Widget],
) -> None:
    """Make ``new_children`` the children of ``parent_id``, dropping elements no longer used."""
    old_children = element_tree.get_children(parent_id)
    new_child_ids = [
        reconcile(element_tree, child, parent_id, index)
        for index, child in enumerate(new_children)
    ]
    kept = set(new_child_ids)
    for old_child_id in old_children:
        if old_child_id not in kept:
            unmount_element(element_tree, old_child_id)
    parent = element_tree.get(parent_id)
    if parent is not None:
        parent.children = new_child_ids