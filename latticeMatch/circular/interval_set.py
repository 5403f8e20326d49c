"""Self-normalizing unions of disjoint circular intervals."""

from __future__ import annotations

from typing import Iterator, List, Optional, Tuple, Union

from latticeMatch.circular.angle import AngleLike, AngleValue
from latticeMatch.circular.interval import Interval
from latticeMatch.circular.ordering import IntervalOrdering, SortMode


class IntervalSet:
    """Union of disjoint arcs on the circle.

    The stored arcs never overlap, touch or merge into one arc; the set is
    normalized after every mutating call. Storage order carries no meaning
    beyond the last call to ``sort``.
    """

    def __init__(self, first: Optional[Interval] = None) -> None:
        """Initialize the set.

        Parameters:
            first: Optional interval to seed the set with; empty intervals are ignored.
        """

        self._storage: List[Interval] = []
        if first is not None:
            self.add(first)

    @classmethod
    def from_bounds(cls, lower: AngleLike, upper: AngleLike) -> "IntervalSet":
        return cls(Interval(lower, upper))

    def add(self, value: Union[Interval, "IntervalSet"]) -> None:
        """Add an interval or all intervals of another set.

        Parameters:
            value: Interval or IntervalSet. Empty intervals are ignored.
        """

        if isinstance(value, IntervalSet):
            self._storage.extend([interval.copy() for interval in value._storage])
        elif isinstance(value, Interval):
            if value.is_empty():
                return
            self._storage.append(value.copy())
        else:
            raise TypeError(f"Cannot add {type(value).__name__} to an IntervalSet.")
        self._combine()

    def add_bounds(self, lower: AngleLike, upper: AngleLike) -> None:
        self.add(Interval(lower, upper))

    def clear(self) -> None:
        self._storage.clear()

    def overlap(self, other: Union[Interval, "IntervalSet"]) -> "IntervalSet":
        """Intersect the set with an interval or another set.

        Parameters:
            other: Interval restricting the set, or IntervalSet whose
                intervals are each intersected with every stored interval.

        Returns:
            New normalized IntervalSet with the intersection.
        """

        result = IntervalSet()
        if isinstance(other, IntervalSet):
            for interval in other._storage:
                result.add(self.overlap(interval))
            return result
        for interval in self._storage:
            result._storage.extend(interval.overlap_parts(other))
        result._combine()
        return result

    def is_empty(self) -> bool:
        return not self._storage

    def is_circle(self) -> bool:
        """Return True when the set covers the whole circle."""

        return len(self._storage) == 1 and self._storage[0].is_circle()

    def contains(self, value: AngleLike) -> bool:
        point = value if isinstance(value, AngleValue) else AngleValue(value)
        return any(interval.is_inside(point) for interval in self._storage)

    def total_size(self) -> float:
        return float(sum(interval.size() for interval in self._storage))

    def sort(self, mode: Union[SortMode, str] = SortMode.BY_LOWER) -> None:
        """Reorder the stored intervals.

        Parameters:
            mode: SortMode or its configuration name.

        Raises:
            ConfigurationError: If the mode is unknown.
        """

        ordering = IntervalOrdering(mode)
        self._storage.sort(key=ordering.key)

    def get_ranges(self) -> List[Interval]:
        """Return copies of the normalized intervals in storage order."""

        return [interval.copy() for interval in self._storage]

    def as_radians(self) -> List[Tuple[float, float]]:
        return [interval.as_radians() for interval in self._storage]

    def as_degrees(self) -> List[Tuple[float, float]]:
        return [interval.as_degrees() for interval in self._storage]

    def _combine(self) -> None:
        # Merge pairs until no two stored arcs combine into one.
        merged = True
        while merged:
            merged = False
            for i in range(len(self._storage) - 1):
                for j in range(len(self._storage) - 1, i, -1):
                    union = self._storage[i].combine(self._storage[j])
                    if not union.is_empty():
                        self._storage[i] = union
                        del self._storage[j]
                        merged = True
                if merged:
                    break

    def __len__(self) -> int:
        return len(self._storage)

    def __iter__(self) -> Iterator[Interval]:
        return iter(self.get_ranges())

    def __contains__(self, value: AngleLike) -> bool:
        return self.contains(value)

    def __repr__(self) -> str:
        return f"IntervalSet({self._storage!r})"
