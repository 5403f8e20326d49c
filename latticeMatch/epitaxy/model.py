"""Lattice parameters for substrate and adlayer interface unit cells."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Optional, Sequence

import numpy as np

PARAMETER_NAMES = (
    "a1",
    "a2",
    "alpha",
    "b1min",
    "b1max",
    "b2min",
    "b2max",
    "betamin",
    "betamax",
)


@dataclass(frozen=True)
class LatticeParameters:
    """Sanitized lattice input with angles in radians.

    Parameters:
        a1: Length of the first substrate lattice vector.
        a2: Length of the second substrate lattice vector.
        alpha: Angle between a1 and a2 in [0, 2*pi).
        b1_min: Lower bound of the first adlayer vector length.
        b1_max: Upper bound of the first adlayer vector length.
        b2_min: Lower bound of the second adlayer vector length.
        b2_max: Upper bound of the second adlayer vector length.
        beta_min: Lower bound of the adlayer angle in [0, 2*pi).
        beta_max: Upper bound of the adlayer angle in [0, 2*pi).
    """

    a1: float
    a2: float
    alpha: float
    b1_min: float
    b1_max: float
    b2_min: float
    b2_max: float
    beta_min: float
    beta_max: float

    @property
    def sin_alpha(self) -> float:
        return math.sin(self.alpha)


def _reduce_degrees_to_radians(value: float) -> float:
    return math.radians(float(np.mod(value, 360.0)))


def sanitize_parameters(
    values: Sequence[float], logger: Optional[logging.Logger] = None
) -> LatticeParameters:
    """Sanitize the nine command-line values given in degrees.

    Negative lengths are folded back to positive ones by replacing the
    corresponding angle with its supplement. Reversed min/max pairs are
    swapped.

    Parameters:
        values: a1, a2, alpha, b1min, b1max, b2min, b2max, betamin, betamax.
        logger: Optional logger for warnings.

    Returns:
        LatticeParameters in radians.

    Raises:
        ValueError: If the value count is wrong or the substrate cell is degenerate.
    """

    logger = logger or logging.getLogger(__name__)
    if len(values) != len(PARAMETER_NAMES):
        raise ValueError(
            f"Expected {len(PARAMETER_NAMES)} values ({' '.join(PARAMETER_NAMES)}), "
            f"got {len(values)}."
        )
    a1, a2, alpha, b1_min, b1_max, b2_min, b2_max, beta_min, beta_max = (
        float(value) for value in values
    )
    if b1_min * b2_min < 0 or b1_max * b2_max < 0 or b1_min * b1_max < 0:
        logger.warning(
            "Negative values for b1, b2 don't make any sense. Putting them back in order."
        )
        beta_min = 180.0 - beta_min
        beta_max = 180.0 - beta_max
    if a1 * a2 < 0:
        logger.warning(
            "Negative values for a1, a2 don't make any sense. Putting them back in order."
        )
        alpha = 180.0 - alpha
    a1, a2 = abs(a1), abs(a2)
    b1_min, b1_max, b2_min, b2_max = (abs(b1_min), abs(b1_max), abs(b2_min), abs(b2_max))
    alpha = _reduce_degrees_to_radians(alpha)
    beta_min = _reduce_degrees_to_radians(beta_min)
    beta_max = _reduce_degrees_to_radians(beta_max)
    if b1_min > b1_max:
        b1_min, b1_max = b1_max, b1_min
    if b2_min > b2_max:
        b2_min, b2_max = b2_max, b2_min
    if beta_min > beta_max:
        beta_min, beta_max = beta_max, beta_min
    if beta_max - beta_min > math.pi:
        logger.warning(
            "Sanitized betamax and betamin are more than 180 degrees apart "
            "(betamin: %s, betamax: %s). A beta range across zero is not supported.",
            math.degrees(beta_min),
            math.degrees(beta_max),
        )
    if a1 == 0.0 or a2 == 0.0:
        raise ValueError("Substrate lattice vectors a1 and a2 must have non-zero length.")
    if math.isclose(math.sin(alpha), 0.0, abs_tol=1e-12):
        raise ValueError("Substrate angle alpha must not be a multiple of 180 degrees.")
    params = LatticeParameters(
        a1=a1,
        a2=a2,
        alpha=alpha,
        b1_min=b1_min,
        b1_max=b1_max,
        b2_min=b2_min,
        b2_max=b2_max,
        beta_min=beta_min,
        beta_max=beta_max,
    )
    logger.debug("Sanitized lattice parameters: %s", params)
    return params
