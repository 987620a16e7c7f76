"""A series of moments in time and its axis."""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass, replace
from datetime import datetime, time

from .calstep import CalStep
from .shapes import Axes, Stick

DEFAULT_FORMAT = "%Y-%m-%d %H:%M:%S"
DEFAULT_UNIT = "full"
EPOCH = datetime(1970, 1, 1)

_LOW_LIMIT = -0.0000001
_HIGH_LIMIT = 1.0000001

_UNIT_FORMATS = {
    "date": "%Y-%m-%d",
    "month": "%Y-%m",
    "year": "%Y",
    "time": "%H:%M:%S",
    "hour": "%H:%M:%S",
}


def _divide(numerator: float, denominator: float) -> float:
    """Divide like IEEE floats do: a zero denominator gives NaN or infinity."""
    if denominator:
        return numerator / denominator
    if numerator == 0 or math.isnan(numerator):
        return math.nan
    return math.copysign(math.inf, numerator)


def _parse(text: str, fmt: str, unit: str) -> datetime:
    if unit == "date":
        return datetime.combine(datetime.strptime(text, fmt).date(), time())
    if unit == "year":
        return _parse(f"{text}-01-01", "%Y-%m-%d", "date")
    return datetime.strptime(text, fmt)


@dataclass(frozen=True)
class STime:
    """A series of moments represented on a chart.

    ``dirty`` records that some input could not be parsed and was left out.
    """

    series: tuple[datetime, ...] = ()
    fmt: str = DEFAULT_FORMAT
    dirty: bool = False
    unit: str = DEFAULT_UNIT

    def __post_init__(self) -> None:
        object.__setattr__(self, "series", tuple(self.series))

    @classmethod
    def parse(cls, values: Iterable[str], fmt: str, unit: str) -> STime:
        """Parse text values; ``unit`` is ``full``, ``date`` or ``year``."""
        series = []
        dirty = False
        for text in values:
            try:
                series.append(_parse(text, fmt, unit))
            except ValueError:
                dirty = True
        return cls(tuple(series), fmt, dirty, unit)

    def with_format(self, fmt: str) -> STime:
        """Return a copy with another format and the full unit."""
        return replace(self, fmt=fmt, unit=DEFAULT_UNIT)

    def with_data(self, series: Iterable[datetime]) -> STime:
        """Return a clean copy holding ``series`` with the full unit."""
        return replace(self, series=tuple(series), dirty=False, unit=DEFAULT_UNIT)

    def with_range(self, low: float, high: float) -> STime:
        """Time series have no numeric range; the series is returned unchanged."""
        return self

    def date_format(self) -> str:
        """Return the display format for the unit, empty when there is none."""
        return _UNIT_FORMATS.get(self.unit, "")

    def get_value(self, index: int) -> float:
        """Return the year of an entry for the year unit, otherwise 1."""
        if self.unit == "year":
            return float(self.series[index].year)
        return 1.0

    def domain(self) -> tuple[datetime, datetime]:
        """Return the earliest and latest moment; the epoch when empty."""
        if not self.series:
            return EPOCH, EPOCH
        return min(self.series), max(self.series)

    def domain_unix(self) -> tuple[float, float]:
        """Return the domain in years for the year unit, otherwise zeros."""
        low, high = self.domain()
        if self.unit == "year":
            return float(low.year), float(high.year)
        return 0.0, 0.0

    def count_distance_step(self) -> tuple[float, float]:
        """Return the number of steps and the step size of the axis."""
        if self.unit != "year":
            return 1.0, 0.0
        low, high = self.domain_unix()
        duration = high - low
        step = CalStep(math.ceil(duration / 5.0)).cal_scale()
        return duration / step, step

    def scale_intervale(self, value: datetime) -> float:
        """Return how many years ``value`` lies after the start of the domain."""
        low, _ = self.domain()
        return float(value.year - low.year)

    def scale(self, value: datetime) -> float:
        """Map a moment to the unit interval for the year unit, otherwise 1."""
        if self.unit != "year":
            return 1.0
        low, high = self.domain_unix()
        return _divide(value.year - low, high - low)

    def gen_axes(self) -> Axes:
        """Build one tick per entry for the year unit, keeping those in range."""
        sticks = []
        if self.unit == "year":
            fmt = self.date_format()
            sticks = [Stick(value.strftime(fmt), self.scale(value)) for value in self.series]
        kept = [s for s in sticks if _LOW_LIMIT <= s.value <= _HIGH_LIMIT]
        return Axes(kept, 1.0)

    def to_stick(self) -> list[Stick]:
        """Time series give no sticks."""
        return []