"""Chart categories and the scale interfaces that series implement."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime
from enum import Enum
from typing import Protocol, runtime_checkable

from .color import Color
from .geometry import Vector
from .shapes import Arc, Axes, Stick


class Category(Enum):
    """The coordinate system a chart is drawn in; Descartes is the usual one."""

    DESCARTES = "descartes"
    POLAR = "polar"


@runtime_checkable
class ScaleLabel(Protocol):
    """A series that is laid out as a label axis."""

    colors: Sequence[Color]

    def scale(self, value: float) -> float:
        """Map a position to the unit interval."""

    def gen_axes(self) -> Axes:
        """Build the ticks of the axis."""

    def to_stick(self) -> list[Stick]:
        """Return one stick per entry of the series."""


@runtime_checkable
class ScaleNumber(Protocol):
    """A series that is laid out as a numeric axis."""

    def domain(self) -> tuple[float, float]:
        """Return the smallest and largest value covered by the axis."""

    def scale(self, value: float) -> float:
        """Map a value to the unit interval of the domain."""

    def count_distance_step(self) -> tuple[float, float, float]:
        """Return the steps above zero, the step size and the steps below zero."""

    def to_percent(self) -> list[float]:
        """Return each value as a share of the total."""

    def gen_pie(self) -> list[Arc]:
        """Return the arcs of a pie chart of the series."""

    def to_percent_radar(self) -> list[float]:
        """Return each value as a fraction of one hundred."""

    def gen_axes(self) -> Axes:
        """Build the ticks of the axis."""

    def to_stick(self) -> list[Stick]:
        """Return one stick per entry of the series."""

    def gen_radar_grid(self, count: int) -> list[Vector]:
        """Return the spokes of a radar grid."""


@runtime_checkable
class ScaleTime(Protocol):
    """A series that is laid out as a time axis."""

    def domain(self) -> tuple[datetime, datetime]:
        """Return the earliest and latest moment of the series."""

    def domain_unix(self) -> tuple[float, float]:
        """Return the domain as numbers in the series' unit."""

    def scale(self, value: datetime) -> float:
        """Map a moment to the unit interval of the domain."""

    def count_distance_step(self) -> tuple[float, float]:
        """Return the number of steps and the step size."""

    def scale_intervale(self, value: datetime) -> float:
        """Return the distance of a moment from the start of the domain."""

    def gen_axes(self) -> Axes:
        """Build the ticks of the axis."""

    def to_stick(self) -> list[Stick]:
        """Return one stick per entry of the series."""