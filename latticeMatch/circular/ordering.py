"""Explicit orderings for circular intervals."""

from __future__ import annotations

import math
from enum import Enum
from typing import TYPE_CHECKING, Callable, Tuple, Union

if TYPE_CHECKING:
    from latticeMatch.circular.interval import Interval

SortKey = Tuple[int, float]


class ConfigurationError(ValueError):
    """Raised when an ordering is requested with an unknown sort mode."""


class SortMode(Enum):
    """Field used to order intervals for display or iteration."""

    BY_LOWER = "lower"
    BY_UPPER = "upper"
    BY_SIZE = "size"


def sort_mode_from_config(value: Union[SortMode, str, None]) -> SortMode:
    """Resolve a sort mode from a configuration value.

    Parameters:
        value: SortMode member, its configuration name, or None for the default.

    Returns:
        Resolved SortMode.

    Raises:
        ConfigurationError: If the value names no known sort mode.
    """

    if value is None:
        return SortMode.BY_LOWER
    if isinstance(value, SortMode):
        return value
    name = str(value).strip().lower()
    for mode in SortMode:
        if name in (mode.value, mode.name.lower()):
            return mode
    raise ConfigurationError(
        f"Unknown sort mode '{value}'; expected one of "
        f"{', '.join(mode.value for mode in SortMode)}."
    )


class IntervalOrdering:
    """Comparator for intervals under one sort mode.

    ByLower and ByUpper compare the canonical bound values directly and
    ignore wraparound. BySize compares arc lengths, with a full circle
    ordered after every bounded arc. Empty intervals are unordered: every
    predicate involving one returns False.
    """

    def __init__(self, mode: Union[SortMode, str] = SortMode.BY_LOWER) -> None:
        self.mode = sort_mode_from_config(mode)
        self._key_func = self._select_key(self.mode)

    @staticmethod
    def _select_key(mode: SortMode) -> Callable[["Interval"], SortKey]:
        if mode is SortMode.BY_LOWER:
            return lambda interval: (0, interval.lower.value)
        if mode is SortMode.BY_UPPER:
            return lambda interval: (0, interval.upper.value)
        if mode is SortMode.BY_SIZE:

            def by_size(interval: "Interval") -> SortKey:
                if interval.is_circle():
                    return (1, 2.0 * math.pi)
                return (0, interval.size())

            return by_size
        raise ConfigurationError(f"Unsupported sort mode {mode!r}.")

    def key(self, interval: "Interval") -> SortKey:
        """Return the sort key of a non-empty interval.

        Parameters:
            interval: Interval to order.

        Returns:
            Tuple usable as a ``sorted`` key.

        Raises:
            ValueError: If the interval is empty.
        """

        if interval.is_empty():
            raise ValueError("Empty intervals cannot be ordered.")
        return self._key_func(interval)

    def less(self, a: "Interval", b: "Interval") -> bool:
        if a.is_empty() or b.is_empty():
            return False
        return self._key_func(a) < self._key_func(b)

    def greater(self, a: "Interval", b: "Interval") -> bool:
        if a.is_empty() or b.is_empty():
            return False
        return self._key_func(a) > self._key_func(b)

    def less_equal(self, a: "Interval", b: "Interval") -> bool:
        if a.is_empty() or b.is_empty():
            return False
        return self._key_func(a) <= self._key_func(b)

    def greater_equal(self, a: "Interval", b: "Interval") -> bool:
        if a.is_empty() or b.is_empty():
            return False
        return self._key_func(a) >= self._key_func(b)

    def __repr__(self) -> str:
        return f"IntervalOrdering({self.mode.value!r})"
