import math

import pytest

from oxideui.constraints import Alignment, Constraints, EdgeInsets, Size


def test_constraints_tight():
    constraints = Constraints.tight(Size(100.0, 200.0))
    assert constraints.min_width == 100.0
    assert constraints.max_width == 100.0
    assert constraints.min_height == 200.0
    assert constraints.max_height == 200.0
    assert constraints.is_tight()


def test_constraints_loose():
    constraints = Constraints.loose(Size(100.0, 200.0))
    assert constraints.min_width == 0.0
    assert constraints.max_width == 100.0
    assert constraints.min_height == 0.0
    assert constraints.max_height == 200.0
    assert not constraints.is_tight()


def test_size_constrain():
    constraints = Constraints(10.0, 100.0, 20.0, 200.0)
    constrained = constraints.constrain(Size(150.0, 250.0))
    assert constrained.width == 100.0
    assert constrained.height == 200.0


def test_size_constrain_method_matches_constraints():
    constraints = Constraints(10.0, 100.0, 20.0, 200.0)
    size = Size(5.0, 250.0)
    assert size.constrain(constraints) == constraints.constrain(size)
    assert size.constrain(constraints) == Size(10.0, 200.0)


def test_default_is_unbounded():
    assert Constraints() == Constraints.unbounded()
    assert Constraints.unconstrained() == Constraints.unbounded()
    assert not Constraints().has_bounded_width()
    assert not Constraints().has_bounded_height()


def test_bounded_checks():
    constraints = Constraints.loose(Size(100.0, 200.0))
    assert constraints.has_bounded_width()
    assert constraints.has_bounded_height()


def test_biggest_replaces_infinity_with_zero():
    assert Constraints.unbounded().biggest() == Size(0.0, 0.0)
    assert Constraints.loose(Size(100.0, 200.0)).biggest() == Size(100.0, 200.0)


def test_smallest():
    assert Constraints(10.0, 100.0, 20.0, 200.0).smallest() == Size(10.0, 20.0)


def test_constrain_width_and_height():
    constraints = Constraints(10.0, 100.0, 20.0, 200.0)
    widened = constraints.constrain_width(150.0)
    assert widened.min_width == 100.0 and widened.max_width == 100.0
    assert widened.min_height == 20.0 and widened.max_height == 200.0
    heightened = constraints.constrain_height(5.0)
    assert heightened.min_height == 20.0 and heightened.max_height == 20.0
    assert heightened.min_width == 10.0


def test_deflate_never_goes_negative():
    constraints = Constraints(10.0, 100.0, 20.0, 200.0)
    deflated = constraints.deflate(EdgeInsets.all(10.0))
    assert deflated == Constraints(0.0, 80.0, 0.0, 180.0)
    assert constraints.deflate(EdgeInsets.all(1000.0)) == Constraints(0.0, 0.0, 0.0, 0.0)


def test_loosen_and_tighten():
    constraints = Constraints(10.0, 100.0, 20.0, 200.0)
    assert constraints.loosen() == Constraints(0.0, 100.0, 0.0, 200.0)
    assert constraints.tighten(Size(100.0, 200.0)) == Constraints.tight(Size(100.0, 200.0))


def test_constrain_with_inverted_range_raises():
    with pytest.raises(ValueError):
        Constraints(100.0, 10.0, 0.0, 10.0).constrain(Size(50.0, 5.0))


def test_size_helpers():
    assert Size.zero() == Size()
    assert math.isinf(Size.infinite().width)
    assert math.isinf(Size.infinite().height)


def test_edge_insets():
    insets = EdgeInsets.only(1.0, 2.0, 3.0, 4.0)
    assert insets.horizontal() == 4.0
    assert insets.vertical() == 6.0
    assert EdgeInsets.symmetric(5.0, 7.0) == EdgeInsets(5.0, 7.0, 5.0, 7.0)
    assert EdgeInsets.zero() == EdgeInsets()
    assert EdgeInsets.all(3.0) == EdgeInsets(3.0, 3.0, 3.0, 3.0)


@pytest.mark.parametrize(
    "alignment, expected",
    [
        (Alignment.TOP_LEFT, (0.0, 0.0)),
        (Alignment.CENTER, (40.0, 20.0)),
        (Alignment.BOTTOM_RIGHT, (80.0, 40.0)),
        (Alignment.TOP_RIGHT, (80.0, 0.0)),
        (Alignment.CENTER_LEFT, (0.0, 20.0)),
        (Alignment.BOTTOM_CENTER, (40.0, 40.0)),
    ],
)
def test_alignment(alignment, expected):
    assert alignment.align(Size(20.0, 60.0), Size(100.0, 100.0)) == expected