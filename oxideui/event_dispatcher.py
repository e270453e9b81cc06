"""Routes UI events through the element tree in capture, target and bubble phases."""

from __future__ import annotations

from typing import Optional

from oxideui.element import ElementId, ElementTree
from oxideui.event import EventContext, EventPath, EventPhase, EventResult, UiEvent
from oxideui.render_object import (
    Point,
    RenderClip,
    RenderGroup,
    RenderObject,
    RenderText,
    RenderTransform,
    RenderRect,
)
from oxideui.widget import Widget

_TEXT_HIT_MARGIN = 20.0


def _point_in(point: Point, render_object: RenderObject) -> bool:
    if isinstance(render_object, RenderRect):
        return render_object.rect.contains(point.x, point.y)
    if isinstance(render_object, RenderText):
        position = render_object.position
        return (
            abs(point.x - position.x) < _TEXT_HIT_MARGIN
            and abs(point.y - position.y) < _TEXT_HIT_MARGIN
        )
    if isinstance(render_object, RenderGroup):
        return any(_point_in(point, child) for child in render_object.children)
    if isinstance(render_object, RenderTransform):
        return _point_in(point, render_object.child)
    if isinstance(render_object, RenderClip):
        return render_object.rect.contains(point.x, point.y) and _point_in(
            point, render_object.child
        )
    return False


class EventDispatcher:
    """Finds the target of each event and calls the registered widgets' handlers."""

    def __init__(self) -> None:
        self._focused: Optional[ElementId] = None
        self._hovered: Optional[ElementId] = None
        self._pointer_position: Optional[Point] = None
        self._handlers: dict[ElementId, Widget] = {}

    def register_widget(self, element_id: ElementId, widget: Widget) -> None:
        self._handlers[element_id] = widget

    def unregister_widget(self, element_id: ElementId) -> None:
        self._handlers.pop(element_id, None)

    def dispatch_event(self, event: UiEvent, element_tree: ElementTree) -> EventResult:
        """Deliver ``event`` and return the result that stopped it, or UNHANDLED."""
        position = event.position()
        if position is not None:
            self._pointer_position = position

        if event.is_pointer_event() and position is not None:
            target = self._hit_test(position, element_tree)
        else:
            target = self._focused
        if target is None:
            return EventResult.UNHANDLED

        if event.is_pointer_event():
            self._update_hover_state(target)

        return self._propagate(event, self._build_event_path(target, element_tree))

    def _hit_test(self, position: Point, element_tree: ElementTree) -> Optional[ElementId]:
        root = element_tree.root()
        if root is None:
            return None
        return self._hit_test_from(position, root, element_tree)

    def _hit_test_from(
        self, position: Point, element_id: ElementId, element_tree: ElementTree
    ) -> Optional[ElementId]:
        element = element_tree.get(element_id)
        if element is None:
            return None
        if element.render_object is not None and not _point_in(position, element.render_object):
            return None
        for child_id in reversed(element.children):
            hit = self._hit_test_from(position, child_id, element_tree)
            if hit is not None:
                return hit
        return element_id

    @staticmethod
    def _build_event_path(target: ElementId, element_tree: ElementTree) -> EventPath:
        bubbling = []
        current: Optional[ElementId] = target
        while current is not None:
            bubbling.append(current)
            current = element_tree.get_parent(current)
        return EventPath(target=target, capturing=bubbling[::-1], bubbling=bubbling)

    def _propagate(self, event: UiEvent, path: EventPath) -> EventResult:
        for element_id in path.capturing:
            if element_id == path.target:
                break
            result = self._dispatch_to(event, element_id, path.target, EventPhase.CAPTURING)
            if result is not None and result.should_stop():
                return result

        result = self._dispatch_to(event, path.target, path.target, EventPhase.AT_TARGET)
        if result is not None and result.should_stop():
            return result

        for element_id in path.bubbling:
            if element_id == path.target:
                continue
            result = self._dispatch_to(event, element_id, path.target, EventPhase.BUBBLING)
            if result is not None and result.should_stop():
                return result

        return EventResult.UNHANDLED

    def _dispatch_to(
        self, event: UiEvent, element_id: ElementId, target: ElementId, phase: EventPhase
    ) -> Optional[EventResult]:
        widget = self._handlers.get(element_id)
        if widget is None:
            return None
        return widget.handle_event(event, EventContext(target, element_id, phase))

    def _update_hover_state(self, new_target: ElementId) -> None:
        if self._hovered != new_target:
            self._hovered = new_target

    def set_focus(self, element_id: Optional[ElementId]) -> None:
        self._focused = element_id

    def focused_element(self) -> Optional[ElementId]:
        return self._focused

    def hovered_element(self) -> Optional[ElementId]:
        return self._hovered

    def pointer_position(self) -> Optional[Point]:
        return self._pointer_position

    def widget_handlers(self) -> dict[ElementId, Widget]:
        """The live mapping of element ids to handler widgets."""
        return self._handlers