"""Circular-interval algebra: angles, arcs and disjoint arc sets."""

from latticeMatch.circular.angle import TWO_PI, AngleValue, canonicalize
from latticeMatch.circular.interval import ArcKind, Interval
from latticeMatch.circular.interval_set import IntervalSet
from latticeMatch.circular.ordering import (
    ConfigurationError,
    IntervalOrdering,
    SortMode,
    sort_mode_from_config,
)

__all__ = [
    "TWO_PI",
    "AngleValue",
    "ArcKind",
    "ConfigurationError",
    "Interval",
    "IntervalOrdering",
    "IntervalSet",
    "SortMode",
    "canonicalize",
    "sort_mode_from_config",
]
