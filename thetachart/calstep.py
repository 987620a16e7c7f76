"""Step rounding for axes and NaN-tolerant min/max helpers."""

import math
from collections.abc import Iterable


def _normalise_below_one(num: float) -> tuple[float, int]:
    log10 = 0
    while not (10.0 <= num < 100.0):
        if num <= 10.0:
            num *= 10.0
            log10 -= 1
        else:
            num /= 10.0
            log10 += 1
    return num, log10


def _normalise_from_one(num: float) -> tuple[float, int]:
    log10 = 0
    while not (1.0 <= num < 100.0):
        if num <= 1.0:
            num *= 10.0
            log10 -= 1
        else:
            num /= 10.0
            log10 += 1
    return num, log10


def _round_focus(focus: int) -> int:
    bits = max(focus.bit_length(), 1)
    if bits > 6:
        return 100
    if bits > 5:
        return 50
    if bits > 4:
        return 25 if focus > 20 else 20
    if bits > 3:
        return 20 if focus > 10 else 10
    if bits == 3:
        return 10 if focus > 6 else 5
    return 2


def _apply_power(num: float, power: int) -> float:
    while power < 0:
        num /= 10.0
        power += 1
    while power > 0:
        num *= 10.0
        power -= 1
    return num


class CalStep:
    """Round a raw step size to a readable one built from 1, 2, 2.5 and 5."""

    def __init__(self, num: float) -> None:
        origin = abs(num)
        if origin == 0.0 or not math.isfinite(origin):
            raise ValueError(f"step must be finite and non-zero, got {num}")
        self.origin = origin
        if origin < 1.0:
            focus, power = _normalise_below_one(origin)
        else:
            focus, power = _normalise_from_one(origin)
        self.focus = int(focus)
        self.multi_10 = power

    def cal_scale(self) -> float:
        """Return the rounded step."""
        return _apply_power(float(_round_focus(self.focus)), self.multi_10)


def min_vec(values: Iterable[float]) -> float:
    """Smallest value, ignoring NaN; NaN when nothing is left."""
    numbers = [v for v in values if not math.isnan(v)]
    return min(numbers) if numbers else math.nan


def max_vec(values: Iterable[float]) -> float:
    """Largest value, ignoring NaN; NaN when nothing is left."""
    numbers = [v for v in values if not math.isnan(v)]
    return max(numbers) if numbers else math.nan


def min_max_vec(values: Iterable[float]) -> tuple[float, float]:
    """Return ``(min_vec(values), max_vec(values))``."""
    numbers = list(values)
    return min_vec(numbers), max_vec(numbers)