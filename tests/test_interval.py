"""Tests for circular arc intersection and union."""

from __future__ import annotations

import itertools
import math
from typing import List

import pytest

from latticeMatch.circular.angle import AngleValue
from latticeMatch.circular.interval import ArcKind, Interval


def _deg(lower: float, upper: float) -> Interval:
    """Build an interval from degree bounds.

    Parameters:
        lower: Lower bound in degrees.
        upper: Upper bound in degrees.

    Returns:
        Interval in radians.
    """

    return Interval.from_degrees(lower, upper)


def _assert_degrees(interval: Interval, lower: float, upper: float) -> None:
    """Assert interval bounds in degrees.

    Parameters:
        interval: Interval to check.
        lower: Expected lower bound in degrees.
        upper: Expected upper bound in degrees.
    """

    assert not interval.is_empty()
    assert interval.as_degrees() == pytest.approx((lower, upper))


SAMPLE_ARCS = [
    _deg(10, 20),
    _deg(15, 30),
    _deg(20, 20),
    _deg(0, 10),
    _deg(100, 200),
    _deg(5, 355),
    _deg(200, 340),
    _deg(350, 10),
    _deg(300, 30),
    _deg(330, 60),
    _deg(350, 200),
    _deg(100, 10),
    _deg(340, 5),
    Interval.full_circle(),
    Interval(),
]


def _sample_points() -> List[AngleValue]:
    """Return probe angles including every sample arc bound.

    Returns:
        List of AngleValue probes.
    """

    points = [AngleValue.from_degrees(step * 2.5) for step in range(144)]
    for arc in SAMPLE_ARCS:
        if not arc.is_empty():
            points.extend([arc.lower, arc.upper])
    return points


POINTS = _sample_points()


def test_classification_covers_each_kind() -> None:
    """Classify empty, regular, wrapping and full-circle arcs."""

    assert Interval().kind is ArcKind.EMPTY
    assert _deg(10, 20).kind is ArcKind.REGULAR
    assert _deg(20, 20).kind is ArcKind.REGULAR
    assert _deg(350, 10).kind is ArcKind.WRAPPING
    assert Interval.full_circle().kind is ArcKind.FULL_CIRCLE


def test_setters_mark_bounds_and_keep_full_circle_flag() -> None:
    """Require both bounds and keep the full-circle flag until toggled."""

    interval = Interval()
    interval.set_lower(1.0)
    assert interval.is_empty()
    interval.set_upper(2.0)
    assert interval.kind is ArcKind.REGULAR
    interval.set_full_circle(True)
    interval.set_lower(0.5)
    assert interval.is_circle()
    interval.set_full_circle(False)
    assert interval.as_radians() == (0.5, 2.0)
    interval.set_empty()
    assert interval.is_empty()
    assert not interval.is_circle()


def test_is_inside_wrapping_arc() -> None:
    """Contain zero but not the opposite side in a wrapping arc."""

    arc = _deg(350, 10)
    assert arc.is_inside(0.0)
    assert arc.is_inside(math.radians(355))
    assert arc.is_inside(arc.upper)
    assert not arc.is_inside(math.radians(180))


def test_is_inside_regular_full_and_empty() -> None:
    """Handle membership for regular, full-circle and empty arcs."""

    arc = _deg(10, 20)
    assert arc.is_inside(math.radians(10))
    assert arc.is_inside(math.radians(20))
    assert not arc.is_inside(math.radians(25))
    assert Interval.full_circle().is_inside(4.0)
    assert not Interval().is_inside(0.0)


def test_disjoint_regular_overlap_is_empty() -> None:
    """Return an empty intersection for disjoint regular arcs."""

    assert _deg(0, 10).overlap(_deg(20, 30)).is_empty()


@pytest.mark.parametrize("other", [_deg(10, 20), _deg(350, 10), _deg(5, 355)])
def test_full_circle_overlap_returns_other(other: Interval) -> None:
    """Return the other operand when intersecting with a full circle."""

    assert Interval.full_circle().overlap(other) == other
    assert other.overlap(Interval.full_circle()) == other


def test_overlap_with_empty_is_empty() -> None:
    """Return empty when either operand is empty."""

    assert _deg(10, 20).overlap(Interval()).is_empty()
    assert Interval().overlap(Interval.full_circle()).is_empty()


def test_overlap_regular_regular() -> None:
    """Intersect overlapping and touching regular arcs."""

    _assert_degrees(_deg(10, 20).overlap(_deg(15, 30)), 15, 20)
    _assert_degrees(_deg(10, 20).overlap(_deg(20, 30)), 20, 20)


def test_overlap_wrapping_wrapping() -> None:
    """Intersect two wrapping arcs at their common zero region."""

    _assert_degrees(_deg(300, 30).overlap(_deg(330, 60)), 330, 30)


def test_overlap_wrapping_wrapping_two_pieces() -> None:
    """Return the piece through zero and expose the second piece."""

    a = _deg(350, 200)
    b = _deg(100, 10)
    _assert_degrees(a.overlap(b), 350, 10)
    parts = a.overlap_parts(b)
    assert len(parts) == 2
    _assert_degrees(parts[1], 100, 200)


@pytest.mark.parametrize(
    "regular, expected",
    [
        ((0, 5), (0, 5)),
        ((352, 358), (352, 358)),
        ((300, 355), (350, 355)),
        ((5, 40), (5, 10)),
        ((100, 200), None),
    ],
)
def test_overlap_wrapping_regular_cases(regular, expected) -> None:
    """Intersect a wrapping arc with regular arcs in each position."""

    wrap = _deg(350, 10)
    other = _deg(*regular)
    for result in (wrap.overlap(other), other.overlap(wrap)):
        if expected is None:
            assert result.is_empty()
        else:
            _assert_degrees(result, *expected)


def test_overlap_wrapping_regular_two_pieces() -> None:
    """Split a regular arc spanning the gap of a wrapping arc."""

    parts = _deg(350, 10).overlap_parts(_deg(5, 355))
    assert len(parts) == 2
    _assert_degrees(parts[0], 350, 355)
    _assert_degrees(parts[1], 5, 10)


def test_combine_regular_arcs() -> None:
    """Merge overlapping or touching regular arcs and refuse disjoint ones."""

    _assert_degrees(_deg(10, 20).combine(_deg(15, 30)), 10, 30)
    _assert_degrees(_deg(10, 20).combine(_deg(20, 30)), 10, 30)
    assert _deg(0, 10).combine(_deg(20, 30)).is_empty()


def test_combine_wrapping_arcs() -> None:
    """Merge wrapping arcs into a wider arc or the full circle."""

    _assert_degrees(_deg(300, 30).combine(_deg(330, 60)), 300, 60)
    assert _deg(350, 200).combine(_deg(100, 10)).is_circle()


@pytest.mark.parametrize(
    "regular, expected",
    [
        ((0, 5), (350, 10)),
        ((5, 40), (350, 40)),
        ((300, 355), (300, 10)),
        ((5, 355), "circle"),
        ((100, 200), None),
    ],
)
def test_combine_wrapping_regular_cases(regular, expected) -> None:
    """Unite a wrapping arc with regular arcs in each position."""

    wrap = _deg(350, 10)
    other = _deg(*regular)
    for result in (wrap.combine(other), other.combine(wrap)):
        if expected is None:
            assert result.is_empty()
        elif expected == "circle":
            assert result.is_circle()
        else:
            _assert_degrees(result, *expected)


def test_combine_with_empty_and_full_circle() -> None:
    """Keep the other operand for empty and absorb everything into a full circle."""

    assert _deg(10, 20).combine(Interval()) == _deg(10, 20)
    assert Interval().combine(_deg(350, 10)) == _deg(350, 10)
    assert Interval().combine(Interval()).is_empty()
    assert Interval.full_circle().combine(_deg(10, 20)).is_circle()
    assert _deg(350, 10).combine(Interval.full_circle()).is_circle()


@pytest.mark.parametrize("a, b", list(itertools.product(SAMPLE_ARCS, repeat=2)))
def test_overlap_is_symmetric_and_exact(a: Interval, b: Interval) -> None:
    """Intersect to the same point set in both orders, covering every kind pair."""

    forward = a.overlap(b)
    backward = b.overlap(a)
    parts = a.overlap_parts(b)
    for point in POINTS:
        assert forward.is_inside(point) == backward.is_inside(point)
        in_both = a.is_inside(point) and b.is_inside(point)
        assert any(part.is_inside(point) for part in parts) == in_both
        if forward.is_inside(point):
            assert in_both


@pytest.mark.parametrize("a, b", list(itertools.product(SAMPLE_ARCS, repeat=2)))
def test_combine_is_tight_union(a: Interval, b: Interval) -> None:
    """Unite exactly the points of both arcs, or refuse for disjoint arcs."""

    union = a.combine(b)
    if union.is_empty():
        assert not a.overlap_parts(b) or a.is_empty() or b.is_empty()
        return
    for point in POINTS:
        assert union.is_inside(point) == (a.is_inside(point) or b.is_inside(point))


def test_size_uses_wrapped_length() -> None:
    """Measure wrapping arcs across zero and the full circle as 2*pi."""

    assert _deg(350, 10).size() == pytest.approx(math.radians(20))
    assert _deg(10, 30).size() == pytest.approx(math.radians(20))
    assert Interval.full_circle().size() == pytest.approx(2 * math.pi)
    assert Interval().size() == 0.0


def test_equality_ignores_placeholders() -> None:
    """Compare bounds, emptiness and the full-circle flag."""

    assert Interval() == Interval()
    assert _deg(10, 20) == _deg(10, 20)
    assert _deg(10, 20) != _deg(10, 21)
    assert Interval.full_circle() != Interval(0.0, 0.0)
    circle = Interval(1.0, 2.0)
    circle.set_full_circle(True)
    assert circle == Interval.full_circle()


def test_copy_is_independent() -> None:
    """Mutating a copy leaves the original untouched."""

    original = _deg(10, 20)
    clone = original.copy()
    clone.set_upper(3.0)
    assert original == _deg(10, 20)
