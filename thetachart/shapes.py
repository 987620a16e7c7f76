"""Shapes placed on a chart: arcs, axes, sticks, lines, rectangles and circles."""

from __future__ import annotations

import math
from dataclasses import dataclass, field, replace
from decimal import Decimal

from .common import TAU
from .geometry import Point, Vector


def _format_number(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    text = format(Decimal(repr(float(value))), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


@dataclass
class Arc:
    """A circular arc from ``begin`` to ``end`` around ``origin``."""

    origin: Point = field(default_factory=Point)
    begin: Vector = field(default_factory=Vector)
    end: Vector = field(default_factory=Vector)
    large: bool = False
    sweep: bool = True

    @classmethod
    def from_polar(cls, origin: Point, begin: Vector, tau: float) -> Arc:
        """Build the arc that sweeps ``tau`` radians from ``begin``."""
        end = begin.az_rotate_tau(tau)
        return cls(origin, begin, end, large=abs(tau) >= TAU / 2.0)

    def delta_xy(self) -> tuple[float, float]:
        """Return the displacement from the start to the end of the arc."""
        return self.end.x - self.begin.x, self.end.y - self.begin.y

    def gen_path(self, radius: float) -> str:
        """Return an SVG path for the arc's sector at the given radius."""
        dx, dy = self.delta_xy()
        f = _format_number
        return (
            f"M 0,0 l {f(self.begin.x * radius)},{f(self.begin.y * radius)} "
            f"a{f(radius)},{f(radius)}  0 {int(self.large)},1 {f(dx * radius)},{f(dy * radius)} Z"
        )


@dataclass(frozen=True)
class Stick:
    """A labelled tick on an axis."""

    label: str = ""
    value: float = 0.0

    def with_value(self, value: float) -> Stick:
        """Return a copy carrying ``value``."""
        return replace(self, value=value)


@dataclass
class Axes:
    """The ticks of one axis and the step between them."""

    sticks: list[Stick] = field(default_factory=list)
    step: float = 0.0


@dataclass(frozen=True)
class Line:
    """A segment starting at ``origin`` along ``vector``."""

    origin: Point = field(default_factory=Point)
    vector: Vector = field(default_factory=Vector)

    def end_point(self) -> Point:
        """Return the point where the segment ends."""
        return self.origin.translate(self.vector)


@dataclass(frozen=True)
class Rec:
    """A rectangle spanned by ``vector`` from ``origin``."""

    origin: Point = field(default_factory=Point)
    vector: Vector = field(default_factory=Vector)

    def width(self) -> float:
        """Return the horizontal extent (may be negative)."""
        return self.vector.x

    def height(self) -> float:
        """Return the vertical extent (may be negative)."""
        return self.vector.y


@dataclass(frozen=True)
class Circle:
    """A circle with centre ``origin``."""

    origin: Point = field(default_factory=Point)
    radius: float = 0.0