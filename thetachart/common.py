"""Angle constants and helpers shared across the package."""

import math

TAU: float = math.tau
"""The full circle constant, equal to 2π."""


def turn_to_radian(t: float) -> float:
    """Convert a number of turns to radians (1 turn is τ)."""
    return t * TAU


def degree_to_radian(d: float) -> float:
    """Convert degrees to radians (360 degrees is τ)."""
    return d / 360.0 * TAU


def get_bit_at(value: int, n: int) -> bool:
    """Return whether bit ``n`` of ``value`` is set.

    Used to mark the position of the axes::

        0b  0      0       1      1
            left   bottom  right  top

    Bits at position 32 and above are always reported as unset.
    """
    if n < 0:
        raise ValueError(f"bit position must be non-negative, got {n}")
    if n >= 32:
        return False
    return value & (1 << n) != 0