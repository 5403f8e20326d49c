"""Angles kept on the half-open circle domain [0, 2*pi)."""

from __future__ import annotations

import math
from typing import Union

import numpy as np

TWO_PI = 2.0 * math.pi

AngleLike = Union["AngleValue", float, int]


def canonicalize(value: float) -> float:
    """Reduce a real number onto [0, 2*pi).

    Negative numbers are mapped with floor semantics, so -0.1 becomes
    2*pi - 0.1. Non-finite input propagates as NaN.

    Parameters:
        value: Angle in radians.

    Returns:
        Canonical angle in radians.
    """

    with np.errstate(invalid="ignore"):
        reduced = float(np.mod(np.float64(value), TWO_PI))
    # np.mod can round a tiny negative operand up to exactly 2*pi.
    if reduced >= TWO_PI:
        return 0.0
    return reduced


def _as_float(value: AngleLike) -> float:
    if isinstance(value, AngleValue):
        return value.value
    return float(value)


def _operand(value: AngleLike) -> float:
    if isinstance(value, AngleValue):
        return value.value
    return canonicalize(float(value))


class AngleValue:
    """A point on the circle.

    Comparisons are made on the canonical numeric value, not on circular
    distance: ``AngleValue(0.01) < AngleValue(6.0)`` holds although both
    points are close on the circle. Arithmetic results are canonicalized
    again, so subtraction yields the counter-clockwise distance from the
    right operand to the left one.
    """

    __slots__ = ("_value",)

    def __init__(self, value: AngleLike = 0.0) -> None:
        self._value = canonicalize(_as_float(value))

    @classmethod
    def from_degrees(cls, degrees: float) -> "AngleValue":
        return cls(math.radians(degrees))

    @property
    def value(self) -> float:
        """Return the canonical value in radians."""

        return self._value

    @property
    def degrees(self) -> float:
        return math.degrees(self._value)

    def add(self, other: AngleLike) -> "AngleValue":
        return AngleValue(self._value + _operand(other))

    def subtract(self, other: AngleLike) -> "AngleValue":
        return AngleValue(self._value - _operand(other))

    def multiply(self, other: AngleLike) -> "AngleValue":
        return AngleValue(self._value * _operand(other))

    def divide(self, other: AngleLike) -> "AngleValue":
        """Divide by another angle.

        Division by an angle whose canonical value is 0 yields NaN or
        infinity (canonicalized to NaN) instead of raising.

        Parameters:
            other: Divisor.

        Returns:
            Canonicalized quotient.
        """

        with np.errstate(divide="ignore", invalid="ignore"):
            quotient = np.divide(np.float64(self._value), np.float64(_operand(other)))
        return AngleValue(float(quotient))

    def compare_canonical(self, other: AngleLike) -> int:
        """Compare canonical values, returning -1, 0 or 1."""

        other_value = _operand(other)
        if self._value < other_value:
            return -1
        if self._value > other_value:
            return 1
        return 0

    __add__ = add
    __sub__ = subtract
    __mul__ = multiply
    __truediv__ = divide

    def __float__(self) -> float:
        return self._value

    def __lt__(self, other: AngleLike) -> bool:
        return self._value < _operand(other)

    def __le__(self, other: AngleLike) -> bool:
        return self._value <= _operand(other)

    def __gt__(self, other: AngleLike) -> bool:
        return self._value > _operand(other)

    def __ge__(self, other: AngleLike) -> bool:
        return self._value >= _operand(other)

    def __eq__(self, other: object) -> bool:
        # Plain numbers are not reduced; equal values must hash equal.
        if isinstance(other, AngleValue):
            return self._value == other._value
        if isinstance(other, (int, float)):
            return self._value == float(other)
        return NotImplemented

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __hash__(self) -> int:
        return hash(self._value)

    def __repr__(self) -> str:
        return f"AngleValue({self._value!r})"
