"""Closed arcs on the circle and their intersection and union.

An arc runs counter-clockwise from its lower to its upper bound and
includes both bounds. A wrapping arc (``lower > upper``) is the union of
``[lower, 2*pi)`` and ``[0, upper]``. Intersection and union dispatch on
the pair of arc kinds through explicit tables, one entry per combination.
"""

from __future__ import annotations

import math
from enum import Enum
from typing import Callable, Dict, List, Optional, Tuple

from latticeMatch.circular.angle import TWO_PI, AngleLike, AngleValue


class ArcKind(Enum):
    """Classification of an interval; exactly one applies at a time."""

    EMPTY = "empty"
    REGULAR = "regular"
    WRAPPING = "wrapping"
    FULL_CIRCLE = "full_circle"


class Interval:
    """A closed arc between two angles, or an empty or full-circle arc.

    Setting a bound marks it as set; the interval is empty until both
    bounds are set. Setting bounds does not leave the full-circle state,
    use ``set_full_circle(False)`` for that.
    """

    __hash__ = None

    def __init__(
        self,
        lower: Optional[AngleLike] = None,
        upper: Optional[AngleLike] = None,
    ) -> None:
        """Initialize the interval.

        Parameters:
            lower: Lower bound in radians or as AngleValue; None leaves it unset.
            upper: Upper bound in radians or as AngleValue; None leaves it unset.
        """

        self._lower = AngleValue(0.0)
        self._upper = AngleValue(0.0)
        self._lower_set = False
        self._upper_set = False
        self._full_circle = False
        if lower is not None:
            self.set_lower(lower)
        if upper is not None:
            self.set_upper(upper)

    @classmethod
    def from_degrees(cls, lower: float, upper: float) -> "Interval":
        return cls(math.radians(lower), math.radians(upper))

    @classmethod
    def full_circle(cls) -> "Interval":
        """Return a full-circle interval with placeholder bounds 0, 0."""

        interval = cls(0.0, 0.0)
        interval.set_full_circle(True)
        return interval

    @classmethod
    def empty(cls) -> "Interval":
        return cls()

    @property
    def lower(self) -> AngleValue:
        return self._lower

    @property
    def upper(self) -> AngleValue:
        return self._upper

    def set_lower(self, value: AngleLike) -> None:
        self._lower = value if isinstance(value, AngleValue) else AngleValue(value)
        self._lower_set = True

    def set_upper(self, value: AngleLike) -> None:
        self._upper = value if isinstance(value, AngleValue) else AngleValue(value)
        self._upper_set = True

    def set_full_circle(self, flag: bool = True) -> None:
        self._full_circle = bool(flag)

    def set_empty(self) -> None:
        """Mark the interval as empty and reset its bounds."""

        self._lower = AngleValue(0.0)
        self._upper = AngleValue(0.0)
        self._lower_set = False
        self._upper_set = False
        self._full_circle = False

    def is_empty(self) -> bool:
        return not (self._lower_set and self._upper_set)

    def is_circle(self) -> bool:
        return self._full_circle and not self.is_empty()

    def is_wrapping(self) -> bool:
        return self.kind is ArcKind.WRAPPING

    @property
    def kind(self) -> ArcKind:
        if self.is_empty():
            return ArcKind.EMPTY
        if self._full_circle:
            return ArcKind.FULL_CIRCLE
        if self._lower.value > self._upper.value:
            return ArcKind.WRAPPING
        return ArcKind.REGULAR

    def is_inside(self, value: AngleLike) -> bool:
        """Return True when the angle lies on the arc, bounds included.

        Parameters:
            value: Angle in radians or as AngleValue.

        Returns:
            Membership flag.
        """

        point = value if isinstance(value, AngleValue) else AngleValue(value)
        kind = self.kind
        if kind is ArcKind.EMPTY:
            return False
        if kind is ArcKind.FULL_CIRCLE:
            return True
        if kind is ArcKind.WRAPPING:
            return point >= self._lower or point <= self._upper
        return self._lower <= point <= self._upper

    def size(self) -> float:
        """Return the arc length in radians (2*pi for a full circle)."""

        kind = self.kind
        if kind is ArcKind.EMPTY:
            return 0.0
        if kind is ArcKind.FULL_CIRCLE:
            return TWO_PI
        return (self._upper - self._lower).value

    def overlap(self, other: "Interval") -> "Interval":
        """Return the intersection of two arcs as a new interval.

        Two arcs can intersect in two separate pieces; only the first is
        returned here, which for two wrapping arcs is the piece through
        zero and for a wrapping and a regular arc is the piece starting at
        the wrapping arc's lower bound. Use ``overlap_parts`` for all pieces.

        Parameters:
            other: Interval to intersect with.

        Returns:
            Intersection, possibly empty.
        """

        parts = self.overlap_parts(other)
        return parts[0] if parts else Interval()

    def overlap_parts(self, other: "Interval") -> List["Interval"]:
        """Return every piece of the intersection of two arcs.

        Parameters:
            other: Interval to intersect with.

        Returns:
            Zero, one or two disjoint non-empty intervals.
        """

        return _OVERLAP_TABLE[(self.kind, other.kind)](self, other)

    def combine(self, other: "Interval") -> "Interval":
        """Return the union of two arcs when it is a single arc.

        Parameters:
            other: Interval to unite with.

        Returns:
            Union as one interval (possibly a full circle), or an empty
            interval if the arcs are disjoint and must be kept apart.
        """

        return _COMBINE_TABLE[(self.kind, other.kind)](self, other)

    def copy(self) -> "Interval":
        clone = Interval()
        clone._lower = self._lower
        clone._upper = self._upper
        clone._lower_set = self._lower_set
        clone._upper_set = self._upper_set
        clone._full_circle = self._full_circle
        return clone

    def as_radians(self) -> Tuple[float, float]:
        return self._lower.value, self._upper.value

    def as_degrees(self) -> Tuple[float, float]:
        return self._lower.degrees, self._upper.degrees

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Interval):
            return NotImplemented
        if self.is_empty() or other.is_empty():
            return self.is_empty() and other.is_empty()
        if self.is_circle() or other.is_circle():
            return self.is_circle() and other.is_circle()
        return self._lower == other._lower and self._upper == other._upper

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __repr__(self) -> str:
        kind = self.kind
        if kind is ArcKind.EMPTY:
            return "Interval()"
        if kind is ArcKind.FULL_CIRCLE:
            return "Interval.full_circle()"
        return f"Interval({self._lower.value!r}, {self._upper.value!r})"


def _arc(lower: float, upper: float) -> Interval:
    return Interval(lower, upper)


def _overlap_none(a: Interval, b: Interval) -> List[Interval]:
    return []


def _overlap_keep_first(a: Interval, b: Interval) -> List[Interval]:
    return [a.copy()]


def _overlap_keep_second(a: Interval, b: Interval) -> List[Interval]:
    return [b.copy()]


def _overlap_regular_regular(a: Interval, b: Interval) -> List[Interval]:
    lower = max(a.lower.value, b.lower.value)
    upper = min(a.upper.value, b.upper.value)
    if upper >= lower:
        return [_arc(lower, upper)]
    return []


def _overlap_wrapping_wrapping(a: Interval, b: Interval) -> List[Interval]:
    # Both arcs contain zero, so the piece through zero always exists.
    parts = [
        _arc(max(a.lower.value, b.lower.value), min(a.upper.value, b.upper.value))
    ]
    # At most one of these holds: the lower lobe of one arc reaching into
    # the upper lobe of the other.
    if a.lower.value <= b.upper.value:
        parts.append(_arc(a.lower.value, b.upper.value))
    if b.lower.value <= a.upper.value:
        parts.append(_arc(b.lower.value, a.upper.value))
    return parts


def _overlap_wrapping_regular(wrap: Interval, regular: Interval) -> List[Interval]:
    if regular.upper <= wrap.upper or regular.lower >= wrap.lower:
        return [regular.copy()]
    parts = []
    if regular.upper >= wrap.lower:
        parts.append(_arc(wrap.lower.value, regular.upper.value))
    if regular.lower <= wrap.upper:
        parts.append(_arc(regular.lower.value, wrap.upper.value))
    return parts


def _overlap_regular_wrapping(a: Interval, b: Interval) -> List[Interval]:
    return _overlap_wrapping_regular(b, a)


def _combine_empty(a: Interval, b: Interval) -> Interval:
    return Interval()


def _combine_keep_first(a: Interval, b: Interval) -> Interval:
    return a.copy()


def _combine_keep_second(a: Interval, b: Interval) -> Interval:
    return b.copy()


def _combine_full(a: Interval, b: Interval) -> Interval:
    return Interval.full_circle()


def _combine_regular_regular(a: Interval, b: Interval) -> Interval:
    if min(a.upper.value, b.upper.value) >= max(a.lower.value, b.lower.value):
        return _arc(min(a.lower.value, b.lower.value), max(a.upper.value, b.upper.value))
    return Interval()


def _combine_wrapping_wrapping(a: Interval, b: Interval) -> Interval:
    lower = min(a.lower.value, b.lower.value)
    upper = max(a.upper.value, b.upper.value)
    if upper >= lower:
        return Interval.full_circle()
    return _arc(lower, upper)


def _combine_wrapping_regular(wrap: Interval, regular: Interval) -> Interval:
    reaches_upper_gap_edge = regular.lower <= wrap.upper
    reaches_lower_gap_edge = regular.upper >= wrap.lower
    if reaches_upper_gap_edge and reaches_lower_gap_edge:
        return Interval.full_circle()
    if regular.upper <= wrap.upper or regular.lower >= wrap.lower:
        return wrap.copy()
    if reaches_upper_gap_edge:
        return _arc(wrap.lower.value, regular.upper.value)
    if reaches_lower_gap_edge:
        return _arc(regular.lower.value, wrap.upper.value)
    return Interval()


def _combine_regular_wrapping(a: Interval, b: Interval) -> Interval:
    return _combine_wrapping_regular(b, a)


_E, _R, _W, _F = ArcKind.EMPTY, ArcKind.REGULAR, ArcKind.WRAPPING, ArcKind.FULL_CIRCLE

_OVERLAP_TABLE: Dict[Tuple[ArcKind, ArcKind], Callable[[Interval, Interval], List[Interval]]] = {
    (_E, _E): _overlap_none,
    (_E, _R): _overlap_none,
    (_E, _W): _overlap_none,
    (_E, _F): _overlap_none,
    (_R, _E): _overlap_none,
    (_R, _R): _overlap_regular_regular,
    (_R, _W): _overlap_regular_wrapping,
    (_R, _F): _overlap_keep_first,
    (_W, _E): _overlap_none,
    (_W, _R): _overlap_wrapping_regular,
    (_W, _W): _overlap_wrapping_wrapping,
    (_W, _F): _overlap_keep_first,
    (_F, _E): _overlap_none,
    (_F, _R): _overlap_keep_second,
    (_F, _W): _overlap_keep_second,
    (_F, _F): _overlap_keep_first,
}

_COMBINE_TABLE: Dict[Tuple[ArcKind, ArcKind], Callable[[Interval, Interval], Interval]] = {
    (_E, _E): _combine_empty,
    (_E, _R): _combine_keep_second,
    (_E, _W): _combine_keep_second,
    (_E, _F): _combine_keep_second,
    (_R, _E): _combine_keep_first,
    (_R, _R): _combine_regular_regular,
    (_R, _W): _combine_regular_wrapping,
    (_R, _F): _combine_full,
    (_W, _E): _combine_keep_first,
    (_W, _R): _combine_wrapping_regular,
    (_W, _W): _combine_wrapping_wrapping,
    (_W, _F): _combine_full,
    (_F, _E): _combine_keep_first,
    (_F, _R): _combine_full,
    (_F, _W): _combine_full,
    (_F, _F): _combine_full,
}
