import math

import pytest

from oxideui.constraints import Constraints, Size
from oxideui.layout_engine import (
    ConstraintKind,
    FlexItem,
    GridTrack,
    LayoutConstraint,
    LayoutEngine,
    LayoutNode,
    LayoutSolver,
    LayoutType,
)


def tight_child(node_id, width, height, layout_type=LayoutType.FLEX):
    return LayoutNode(node_id, Constraints.tight(Size(width, height)), layout_type=layout_type)


def test_flex_places_children_in_a_row():
    children = [tight_child(1, 10.0, 20.0), tight_child(2, 30.0, 40.0)]
    node = LayoutNode(0, Constraints.loose(Size(500.0, 60.0)), children=children)
    LayoutEngine().layout(node)
    assert children[0].position == (0.0, 0.0)
    assert children[1].position == (10.0, 0.0)
    assert children[1].size == Size(30.0, 40.0)
    assert node.size.width == sum(child.size.width for child in children)
    assert node.size.height == 60.0


def test_grid_cells_share_size_and_columns():
    children = [LayoutNode(i) for i in range(1, 5)]
    node = LayoutNode(
        0, Constraints.loose(Size(320.0, 1000.0)), children=children, layout_type=LayoutType.GRID
    )
    LayoutEngine().layout(node)
    assert len({child.size for child in children}) == 1
    assert children[0].size.height == 100.0
    assert children[3].position[0] == children[0].position[0]
    assert children[3].position[1] > children[0].position[1]
    assert children[1].position[1] == children[0].position[1]
    assert node.size.width == 320.0


def test_grid_height_grows_with_rows():
    engine = LayoutEngine()
    three = LayoutNode(0, Constraints.loose(Size(320.0, 1000.0)),
                       children=[LayoutNode(i) for i in range(3)], layout_type=LayoutType.GRID)
    four = LayoutNode(0, Constraints.loose(Size(320.0, 1000.0)),
                      children=[LayoutNode(i) for i in range(4)], layout_type=LayoutType.GRID)
    engine.layout(three)
    engine.layout(four)
    assert three.size.height == 100.0
    assert four.size.height > three.size.height


def test_empty_grid_has_zero_height():
    node = LayoutNode(0, Constraints.loose(Size(320.0, 1000.0)), layout_type=LayoutType.GRID)
    LayoutEngine().layout(node)
    assert node.size.height == 0.0


def test_absolute_keeps_positions():
    child = tight_child(1, 15.0, 25.0)
    child.position = (7.0, 9.0)
    node = LayoutNode(
        0, Constraints.loose(Size(200.0, 100.0)), children=[child], layout_type=LayoutType.ABSOLUTE
    )
    LayoutEngine().layout(node)
    assert child.position == (7.0, 9.0)
    assert child.size == Size(15.0, 25.0)
    assert node.size == Size(200.0, 100.0)


def test_stack_takes_largest_child():
    children = [tight_child(1, 10.0, 50.0), tight_child(2, 40.0, 20.0)]
    for child in children:
        child.position = (5.0, 5.0)
    node = LayoutNode(0, children=children, layout_type=LayoutType.STACK)
    LayoutEngine().layout(node)
    assert all(child.position == (0.0, 0.0) for child in children)
    assert node.size == Size(40.0, 50.0)


def test_unbounded_child_gets_zero_size():
    child = LayoutNode(1)
    node = LayoutNode(0, children=[child], layout_type=LayoutType.STACK)
    LayoutEngine().layout(node)
    assert child.size == Size(0.0, 0.0)


def test_measure_flex_intrinsic_sums_widths():
    children = [
        LayoutNode(1, Constraints(10.0, 100.0, 5.0, 100.0), layout_type=LayoutType.STACK),
        LayoutNode(2, Constraints(20.0, 100.0, 8.0, 100.0), layout_type=LayoutType.STACK),
    ]
    node = LayoutNode(0, children=children)
    engine = LayoutEngine()
    size = engine.measure_intrinsic(node)
    sizes = [engine.measure_intrinsic(child) for child in children]
    assert size.width == sum(s.width for s in sizes)
    assert size.height == max(s.height for s in sizes)


def test_measure_grid_intrinsic():
    node = LayoutNode(0, children=[LayoutNode(i) for i in range(5)], layout_type=LayoutType.GRID)
    assert LayoutEngine().measure_intrinsic(node) == Size(900.0, 200.0)


def test_measure_other_types_uses_smallest():
    node = LayoutNode(0, Constraints(3.0, 10.0, 4.0, 10.0), layout_type=LayoutType.ABSOLUTE)
    assert LayoutEngine().measure_intrinsic(node) == Size(3.0, 4.0)


def test_flex_item_defaults():
    item = FlexItem()
    assert item.flex_grow == 0.0
    assert item.flex_shrink == 1.0
    assert item.flex_basis is None


def test_grid_track_rejects_unknown_kind():
    with pytest.raises(ValueError):
        GridTrack("percent", 5.0)
    assert GridTrack.fixed(12.0) == GridTrack("fixed", 12.0)


def test_solver_equal_then_bounds():
    solver = LayoutSolver()
    assert solver.solve([
        LayoutConstraint(ConstraintKind.EQUAL, "w", 50.0),
        LayoutConstraint(ConstraintKind.GREATER_THAN, "w", 30.0),
        LayoutConstraint(ConstraintKind.LESS_THAN, "w", 40.0),
    ]) is True
    assert solver.get_value("w") == 40.0


def test_solver_greater_than_raises_value():
    solver = LayoutSolver()
    solver.solve([
        LayoutConstraint(ConstraintKind.EQUAL, "h", 10.0),
        LayoutConstraint(ConstraintKind.GREATER_THAN, "h", 25.0),
    ])
    assert solver.get_value("h") == 25.0


def test_solver_defaults_for_missing_variables():
    solver = LayoutSolver()
    solver.solve([
        LayoutConstraint(ConstraintKind.GREATER_THAN, "a", -5.0),
        LayoutConstraint(ConstraintKind.LESS_THAN, "b", 7.0),
    ])
    assert solver.get_value("a") is None
    assert solver.get_value("b") == 7.0
    assert solver.get_value("missing") is None


def test_flex_with_unbounded_height_keeps_infinity():
    node = LayoutNode(0, children=[tight_child(1, 5.0, 5.0)])
    LayoutEngine().layout(node)
    assert math.isinf(node.size.height)
    assert node.size.width == 5.0