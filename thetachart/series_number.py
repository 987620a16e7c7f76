"""A numeric series and its axis, pie and radar layouts."""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass, replace

from .calstep import CalStep, min_max_vec
from .common import TAU
from .geometry import Point, Vector
from .shapes import Arc, Axes, Stick, _format_number

_LOW_LIMIT = -0.0000001
_HIGH_LIMIT = 1.0000001


def _count_precision(number: float) -> int:
    count = 0
    while number - math.floor(number) != 0.0:
        number *= 10.0
        count += 1
    return count


@dataclass(frozen=True)
class SNumber:
    """A series of numbers represented on a chart."""

    series: tuple[float, ...] = ()
    is_float: bool = True
    stick: int = 0
    origin: float = 0.0
    value_range: tuple[float, float] | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "series", tuple(float(v) for v in self.series))

    @classmethod
    def from_ints(cls, values: Iterable[int]) -> SNumber:
        """Build a series of whole numbers."""
        return cls(tuple(float(int(v)) for v in values), is_float=False)

    def with_stick(self, stick: int) -> SNumber:
        """Return a copy that asks for ``stick`` ticks on its axis."""
        return replace(self, stick=stick)

    def with_range(self, low: float, high: float) -> SNumber:
        """Return a copy whose axis also covers ``low`` and ``high``."""
        return replace(self, value_range=(low, high))

    def domain(self) -> tuple[float, float]:
        """Return the smallest and largest value covered by the axis."""
        values = list(self.series)
        if self.value_range is not None:
            values.extend(self.value_range)
        else:
            values.append(self.origin)
        return min_max_vec(values)

    def scale(self, value: float) -> float:
        """Map a value to the unit interval of the domain."""
        low, high = self.domain()
        return (value - low) / (high - low)

    def count_distance_step(self) -> tuple[float, float, float]:
        """Return the steps above zero, the step size and the steps below zero."""
        low, high = self.domain()
        count = 10.0 if self.stick == 0 else self.stick - 1.0
        if low >= 0.0 and high >= 0.0:
            step = CalStep(high / count).cal_scale()
            up, down = high / step, 0.0
        elif low < 0.0 and high < 0.0:
            step = CalStep(low / count).cal_scale()
            up, down = 0.0, abs(low) / step
        else:
            step = CalStep((high - low) / count).cal_scale()
            up, down = high / step, abs(low) / step
        return float(math.ceil(up)), step, float(math.ceil(down))

    def to_percent(self) -> list[float]:
        """Return each value as a share of the total."""
        total = sum(self.series)
        return [v / total for v in self.series]

    def to_percent_radar(self) -> list[float]:
        """Return each value as a fraction of one hundred."""
        return [v / 100.0 for v in self.series]

    def gen_pie(self) -> list[Arc]:
        """Return consecutive arcs, starting at the top, one per value."""
        begin = Vector(0.0, -1.0)
        arcs = []
        for share in self.to_percent():
            arc = Arc.from_polar(Point(), begin, share * TAU)
            begin = arc.end
            arcs.append(arc)
        return arcs

    def gen_radar_grid(self, count: int) -> list[Vector]:
        """Return ``count`` unit spokes evenly spread from the top (at least one)."""
        vectors = [Vector(0.0, -1.0)]
        for _ in range(1, count):
            vectors.append(vectors[-1].az_rotate_tau(TAU / count))
        return vectors

    def gen_axes(self) -> Axes:
        """Build the ticks of the axis, keeping those inside the domain."""
        up, step, down = self.count_distance_step()
        precision = _count_precision(step)
        values = sorted(
            [-i * step for i in range(1, int(down) + 1)]
            + [i * step for i in range(int(up) + 1)]
        )
        sticks = [Stick(f"{v:.{precision}f}", self.scale(v)) for v in values]
        return Axes([s for s in sticks if _LOW_LIMIT <= s.value <= _HIGH_LIMIT], step)

    def to_stick(self) -> list[Stick]:
        """Return one stick per value, labelled with the value."""
        return [Stick(_format_number(v), v) for v in self.series]