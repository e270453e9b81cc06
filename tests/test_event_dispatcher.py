import pytest

from oxideui.constraints import Size
from oxideui.element import ElementTree
from oxideui.event import EventPhase, EventResult, KeyDown, PointerDown, Scroll
from oxideui.event_dispatcher import EventDispatcher
from oxideui.render_object import (
    Color,
    Point,
    Rect,
    RenderClip,
    RenderImage,
    RenderRect,
    RenderText,
)
from oxideui.widget import EmptyNode, Widget


class Recorder(Widget):
    def __init__(self, log, result=EventResult.HANDLED):
        self.log = log
        self.result = result

    def build(self, ctx):
        return EmptyNode()

    def handle_event(self, event, context):
        self.log.append((context.current_target, context.phase, context.target))
        return self.result


@pytest.fixture
def scene():
    tree = ElementTree()
    log = []
    root_widget = Recorder(log)
    child_widget = Recorder(log)
    root = tree.create_element(root_widget)
    child = tree.create_element(child_widget, root, 0)
    tree.get(root).render_object = RenderRect.filled(Rect(0, 0, 100, 100), Color.WHITE)
    tree.get(child).render_object = RenderRect.filled(Rect(10, 10, 20, 20), Color.RED)
    dispatcher = EventDispatcher()
    dispatcher.register_widget(root, root_widget)
    dispatcher.register_widget(child, child_widget)
    return tree, dispatcher, log, root, child, root_widget, child_widget


def test_pointer_event_visits_capture_target_bubble(scene):
    tree, dispatcher, log, root, child, *_ = scene
    result = dispatcher.dispatch_event(PointerDown(1, Point(15, 15)), tree)
    assert result is EventResult.UNHANDLED
    assert log == [
        (root, EventPhase.CAPTURING, child),
        (child, EventPhase.AT_TARGET, child),
        (root, EventPhase.BUBBLING, child),
    ]
    assert dispatcher.hovered_element() == child
    assert dispatcher.pointer_position() == Point(15, 15)


def test_stopped_in_capture_phase_ends_propagation(scene):
    tree, dispatcher, log, root, child, root_widget, _ = scene
    root_widget.result = EventResult.STOPPED
    result = dispatcher.dispatch_event(PointerDown(1, Point(15, 15)), tree)
    assert result is EventResult.STOPPED
    assert log == [(root, EventPhase.CAPTURING, child)]


def test_stopped_at_target_skips_bubbling(scene):
    tree, dispatcher, log, root, child, _, child_widget = scene
    child_widget.result = EventResult.STOPPED
    result = dispatcher.dispatch_event(PointerDown(1, Point(15, 15)), tree)
    assert result is EventResult.STOPPED
    assert [entry[1] for entry in log] == [EventPhase.CAPTURING, EventPhase.AT_TARGET]


def test_point_outside_root_is_unhandled(scene):
    tree, dispatcher, log, *_ = scene
    result = dispatcher.dispatch_event(Scroll(Point(500, 500)), tree)
    assert result is EventResult.UNHANDLED
    assert log == []
    assert dispatcher.hovered_element() is None
    assert dispatcher.pointer_position() == Point(500, 500)


def test_point_outside_child_targets_root(scene):
    tree, dispatcher, log, root, *_ = scene
    dispatcher.dispatch_event(PointerDown(1, Point(80, 80)), tree)
    assert log == [(root, EventPhase.AT_TARGET, root)]
    assert dispatcher.hovered_element() == root


def test_keyboard_event_without_focus_is_unhandled(scene):
    tree, dispatcher, log, *_ = scene
    assert dispatcher.dispatch_event(KeyDown("Enter"), tree) is EventResult.UNHANDLED
    assert log == []


def test_keyboard_event_goes_to_focused_element(scene):
    tree, dispatcher, log, root, child, *_ = scene
    dispatcher.set_focus(child)
    assert dispatcher.focused_element() == child
    dispatcher.dispatch_event(KeyDown("Enter"), tree)
    assert [entry[0] for entry in log] == [root, child, root]
    assert dispatcher.pointer_position() is None


def test_unregistered_widget_is_not_called(scene):
    tree, dispatcher, log, root, child, *_ = scene
    dispatcher.unregister_widget(child)
    assert child not in dispatcher.widget_handlers()
    dispatcher.dispatch_event(PointerDown(1, Point(15, 15)), tree)
    assert log == [
        (root, EventPhase.CAPTURING, child),
        (root, EventPhase.BUBBLING, child),
    ]


def test_text_hit_uses_margin_around_position():
    tree = ElementTree()
    log = []
    widget = Recorder(log)
    root = tree.create_element(widget)
    tree.get(root).render_object = RenderText("hi", position=Point(50, 50))
    dispatcher = EventDispatcher()
    dispatcher.register_widget(root, widget)
    dispatcher.dispatch_event(PointerDown(1, Point(60, 60)), tree)
    assert log == [(root, EventPhase.AT_TARGET, root)]
    log.clear()
    dispatcher.dispatch_event(PointerDown(1, Point(80, 50)), tree)
    assert log == []


def test_image_is_never_hit():
    tree = ElementTree()
    log = []
    widget = Recorder(log)
    root = tree.create_element(widget)
    tree.get(root).render_object = RenderImage(Size(100, 100))
    dispatcher = EventDispatcher()
    dispatcher.register_widget(root, widget)
    assert dispatcher.dispatch_event(PointerDown(1, Point(5, 5)), tree) is EventResult.UNHANDLED
    assert log == []


def test_clip_requires_point_inside_clip_and_child():
    tree = ElementTree()
    log = []
    widget = Recorder(log)
    root = tree.create_element(widget)
    child = RenderRect.filled(Rect(0, 0, 100, 100), Color.BLUE)
    tree.get(root).render_object = RenderClip(Rect(0, 0, 50, 50), child)
    dispatcher = EventDispatcher()
    dispatcher.register_widget(root, widget)
    dispatcher.dispatch_event(PointerDown(1, Point(75, 75)), tree)
    assert log == []
    dispatcher.dispatch_event(PointerDown(1, Point(25, 25)), tree)
    assert log == [(root, EventPhase.AT_TARGET, root)]


def test_empty_tree_is_unhandled():
    dispatcher = EventDispatcher()
    result = dispatcher.dispatch_event(PointerDown(1, Point(1, 1)), ElementTree())
    assert result is EventResult.UNHANDLED
    assert dispatcher.hovered_element() is None