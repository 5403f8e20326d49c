"""Candidate rotation ranges from the epitaxy matrix.

The epitaxy matrix of an adlayer on a substrate reads

    ( px, qy )
    ( qx, py )

with

    px = b1 sin(alpha - theta) / (a1 sin(alpha))
    qx = b2 sin(alpha - theta - beta) / (a1 sin(alpha))
    qy = b1 sin(theta) / (a2 sin(alpha))
    py = b2 sin(theta + beta) / (a2 sin(alpha))

For every integer value an element can take, the allowed ranges of b1, b2
and beta map to ranges of the rotation angle theta. Each integer yields two
arcs because arcsin has two branches on the circle.
"""

from __future__ import annotations

import math
from typing import Callable, Dict, List, Tuple

import numpy as np

from latticeMatch.circular.angle import TWO_PI
from latticeMatch.circular.interval import Interval
from latticeMatch.epitaxy.model import LatticeParameters


def solution_count(b_max: float, a: float, sin_alpha: float) -> int:
    """Return the largest integer an epitaxy matrix element can reach.

    Parameters:
        b_max: Upper bound of the adlayer vector length.
        a: Substrate vector length.
        sin_alpha: Sine of the substrate angle.

    Returns:
        Non-negative integer N; solutions run from -N to N.
    """

    return int(abs(b_max / (a * sin_alpha)))


def arc_from_radians(lower: float, upper: float) -> Interval:
    """Build an interval from raw radians, spanning the circle if needed.

    Parameters:
        lower: Raw lower bound, not necessarily canonical.
        upper: Raw upper bound, not smaller than ``lower``.

    Returns:
        Interval, or a full-circle interval if the span reaches 2*pi.
    """

    if upper - lower >= TWO_PI:
        return Interval.full_circle()
    return Interval(lower, upper)


def _asin_bounds(
    a: float, b_min: float, b_max: float, sin_alpha: float
) -> Tuple[np.ndarray, np.ndarray]:
    """Return arcsin ranges for every integer solution index.

    Parameters:
        a: Substrate vector length.
        b_min: Lower bound of the adlayer vector length.
        b_max: Upper bound of the adlayer vector length.
        sin_alpha: Sine of the substrate angle.

    Returns:
        Arrays (r_lo, r_hi) over indices -N..N.
    """

    count = solution_count(b_max, a, sin_alpha)
    k = np.arange(-count, count + 1, dtype=float) * a * sin_alpha
    with np.errstate(divide="ignore", invalid="ignore"):
        x_far = np.divide(k, b_max, out=np.zeros_like(k), where=k != 0)
        x_near = np.divide(k, b_min, out=np.zeros_like(k), where=k != 0)
    asin_far = np.arcsin(np.clip(x_far, -1.0, 1.0))
    asin_near = np.arcsin(np.clip(x_near, -1.0, 1.0))
    return np.minimum(asin_far, asin_near), np.maximum(asin_far, asin_near)


def _arcs(lowers: np.ndarray, uppers: np.ndarray) -> List[Interval]:
    return [arc_from_radians(float(lo), float(hi)) for lo, hi in zip(lowers, uppers)]


def px_ranges(params: LatticeParameters) -> List[Interval]:
    """Rotation ranges for which px is an integer."""

    r_lo, r_hi = _asin_bounds(params.a1, params.b1_min, params.b1_max, params.sin_alpha)
    alpha = params.alpha
    return _arcs(alpha - r_hi, alpha - r_lo) + _arcs(
        alpha - math.pi + r_lo, alpha - math.pi + r_hi
    )


def qx_ranges(params: LatticeParameters) -> List[Interval]:
    """Rotation ranges for which qx is an integer."""

    r_lo, r_hi = _asin_bounds(params.a1, params.b2_min, params.b2_max, params.sin_alpha)
    low = params.alpha - params.beta_max
    high = params.alpha - params.beta_min
    return _arcs(low - r_hi, high - r_lo) + _arcs(
        low - math.pi + r_lo, high - math.pi + r_hi
    )


def qy_ranges(params: LatticeParameters) -> List[Interval]:
    """Rotation ranges for which qy is an integer."""

    r_lo, r_hi = _asin_bounds(params.a2, params.b1_min, params.b1_max, params.sin_alpha)
    return _arcs(r_lo, r_hi) + _arcs(math.pi - r_hi, math.pi - r_lo)


def py_ranges(params: LatticeParameters) -> List[Interval]:
    """Rotation ranges for which py is an integer."""

    r_lo, r_hi = _asin_bounds(params.a2, params.b2_min, params.b2_max, params.sin_alpha)
    return _arcs(r_lo - params.beta_max, r_hi - params.beta_min) + _arcs(
        math.pi - r_hi - params.beta_max, math.pi - r_lo - params.beta_min
    )


FAMILY_BUILDERS: Dict[str, Callable[[LatticeParameters], List[Interval]]] = {
    "px": px_ranges,
    "qx": qx_ranges,
    "qy": qy_ranges,
    "py": py_ranges,
}
