# oxideui

The core of a declarative UI framework, in pure Python with no third-party
dependencies. You describe the interface as widgets. The package builds them
into render objects, lays them out, routes events to them, tracks state and
animations, and can rasterise the result into an in-memory pixel buffer.

## What is in the package

- `oxideui.constraints`: `Size`, `Constraints` (tight, loose, unbounded,
  `constrain`, `deflate`, `loosen`, and so on), `EdgeInsets` and `Alignment`.
- `oxideui.render_object`: `Color`, `Point`, `Rect`, `Matrix`, `TextStyle`,
  `Paint`, and the render objects `RenderRect`, `RenderText`, `RenderImage`,
  `RenderClip`, `RenderTransform`, `RenderGroup` and `RenderNone`.
- `oxideui.widget`: the `Widget`, `StatelessWidget` and `StatefulWidget` base
  classes, `WidgetState`, `WidgetKey`, and the build results `LeafNode`,
  `ContainerNode` and `EmptyNode`.
- `oxideui.element`: `ElementId`, `Element` and `ElementTree`, which covers
  parent and child links, dirty marking that climbs to the root, subtree
  removal and ancestor lookup by widget type.
- `oxideui.context`: `Theme`, a set of named colours, fonts and shadow values,
  and `BuildContext`.
- `oxideui.reconcile`: `can_update`, `reconcile`, `unmount_element` and
  `reconcile_children`. A child element is reused when its widget type and key
  match; otherwise a new element is mounted.
- `oxideui.widget_builder`: `WidgetBuilder`, which builds a widget tree into
  one render object.
- `oxideui.event`: the event types `PointerDown`, `PointerUp`, `PointerMove`,
  `Scroll`, `KeyDown`, `KeyUp`, `TextInput`, `Focus`, `Blur` and `Custom`,
  plus `EventContext`, `EventPhase`, `EventPath` and `EventResult`.
- `oxideui.event_dispatcher`: `EventDispatcher`. It hit-tests pointer events
  against the element tree and sends keyboard and other events to the focused
  element. Each event passes through a capturing phase, the target and a
  bubbling phase, and a handler returning `EventResult.STOPPED` ends
  propagation.
- `oxideui.event_system`: `GestureRecognizer` (tap, double tap, long press,
  pan), `FocusManager` (tab order, listeners), `InputMethodManager` and
  `AccessibilityManager`.
- `oxideui.state`: `State`, a value with listeners.
- `oxideui.state_driven`: `StateTracker`, `ReactiveState`, `DerivedState`,
  `EffectRunner` and `StateBatch`. These mark the elements subscribed to a
  piece of state dirty when it changes.
- `oxideui.animation`: the easing curves `Linear`, `EaseIn`, `EaseOut`,
  `EaseInOut`, `CubicBezier` and `Spring`, `interpolate` for numbers, tuples
  and colours, `Animation` with `AnimationRepeat` (`ONCE`, `LOOP`, `REVERSE`,
  `count(n)`), `AnimationController`, `KeyframeAnimation` and
  `TransitionBuilder`. Durations are in seconds. Every animation takes a
  `clock` callable, which makes it deterministic in tests.
- `oxideui.layout_engine`: `LayoutNode` and `LayoutEngine`, which handle flex
  layout (children in a row), a fixed three-column grid, stack and absolute
  layout. Also `LayoutSolver` with `LayoutConstraint`, and the flex and grid
  property types.
- `oxideui.pipeline`: `DamageRegion`, `DisplayList`, `DisplayItem` and
  `RenderPipeline`, which flattens a render tree into a display list and culls
  it to a viewport.
- `oxideui.text`: `FontDescriptor`, `FontManager` (font file loading with a
  cache, plus approximate measurement and shaping based on the font size),
  `TextLayout` (word wrapping), `TextCache` and `FontNotFoundError`.
- `oxideui.raster`: `Framebuffer`, a buffer of packed `0xAARRGGBB` pixels that
  draws rectangles and block text, and `pack_color`.

## Installation

```
pip install .
```

## Example

```python
from oxideui.constraints import Constraints, Size
from oxideui.raster import Framebuffer, pack_color
from oxideui.render_object import Color, Rect, RenderRect
from oxideui.state import State
from oxideui.widget import ContainerNode, LeafNode, Widget
from oxideui.widget_builder import WidgetBuilder

constraints = Constraints.loose(Size(100.0, 200.0))
print(constraints.constrain(Size(150.0, 50.0)))  # Size(width=100.0, height=50.0)


class Box(Widget):
    def build(self, ctx):
        return LeafNode(RenderRect.filled(Rect(0, 0, 10, 10), Color.RED))


class Root(Widget):
    def build(self, ctx):
        return ContainerNode([Box()])


tree = WidgetBuilder().build_widget_tree(Root(), Constraints.loose(Size(800, 600)))
frame = Framebuffer(20, 20)
frame.draw(tree)
assert frame.pixel(5, 5) == pack_color(Color.RED)

counter = State(0)
counter.subscribe(lambda value: print("counter is now", value))
counter.update(lambda value: value + 1)  # prints: counter is now 1
```

## What it does not do

The package does not open windows, run an event loop or present frames on a
screen, and it has no GPU drawing. `Framebuffer` only fills an in-memory
list of pixels. The package also has no ready-made widgets such as text labels,
buttons or rows: you write widgets yourself by subclassing `Widget`. There is
no loading of themes from files either, so `Theme` is built in code.

## Running the tests

```
pip install .[test]
pytest
```