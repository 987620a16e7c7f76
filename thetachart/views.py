"""Layouts of the drawing area for cartesian and polar charts."""

from __future__ import annotations

from dataclasses import dataclass

from .calstep import min_vec
from .geometry import Point, Vector
from .shapes import Circle, Rec

RADIUS = 0.9
"""Fraction of the available half-size used for the radius of a polar chart."""


def _check_non_negative(**sizes: float) -> None:
    for name, value in sizes.items():
        if value < 0:
            raise ValueError(f"{name} must be non-negative, got {value}")


@dataclass(init=False)
class CView:
    """Regions of a cartesian chart: the plot area and the two axes.

    ``position_origin`` selects the corner of the origin: 0 top left,
    1 top right, 2 bottom right, 3 bottom left.
    """

    vector: Vector
    region_chart: Rec
    region_x_axis: Rec
    region_y_axis: Rec
    position_origin: int
    margin: float

    def __init__(
        self,
        width: int = 0,
        height: int = 0,
        position_origin: int = 0,
        height_x_axis: int = 0,
        width_y_axis: int = 0,
        margin: int = 0,
    ) -> None:
        _check_non_negative(
            width=width,
            height=height,
            position_origin=position_origin,
            height_x_axis=height_x_axis,
            width_y_axis=width_y_axis,
            margin=margin,
        )
        hx = float(height_x_axis)
        wy = float(width_y_axis)
        margin = float(margin)
        w = width - 2.0 * margin
        h = height - 2.0 * margin

        layouts = {
            0: (
                Point(wy, hx),
                Vector(w - wy, h - hx),
                Vector(w - wy, -hx),
                Vector(-wy, h - hx),
            ),
            1: (
                Point(w - wy, hx),
                Vector(-(w - wy), h - hx),
                Vector(-(w - wy), -hx),
                Vector(wy, h - hx),
            ),
            2: (
                Point(w - wy, h - hx),
                Vector(-(w - wy), -(h - hx)),
                Vector(-(w - wy), hx),
                Vector(wy, -(h - hx)),
            ),
            3: (
                Point(wy, h - hx),
                Vector(w - wy, -(h - hx)),
                Vector(w - wy, hx),
                Vector(-wy, -(h - hx)),
            ),
        }
        origin, chart, x_axis, y_axis = layouts.get(
            position_origin, (Point(), Vector(w, h), Vector(), Vector())
        )

        self.vector = Vector(float(width), float(height))
        self.region_chart = Rec(origin, chart)
        self.region_x_axis = Rec(origin, x_axis)
        self.region_y_axis = Rec(origin, y_axis)
        self.position_origin = position_origin
        self.margin = margin


@dataclass(init=False)
class PView:
    """Regions of a polar chart: the chart circle and the label box.

    ``position_label`` places the labels: 0 top, 1 right, 2 bottom, 3 left.
    """

    vector: Vector
    region_chart: Circle
    region_label: Rec
    position_label: int
    margin: float

    def __init__(
        self,
        width: int = 0,
        height: int = 0,
        position_label: int = 0,
        len_label: int = 0,
        margin: int = 0,
    ) -> None:
        _check_non_negative(
            width=width,
            height=height,
            position_label=position_label,
            len_label=len_label,
            margin=margin,
        )
        margin = float(margin)
        w = width - 2.0 * margin
        h = height - 2.0 * margin
        length = float(len_label)

        if position_label == 0:
            label = Rec(Point(0.0, 0.0), Vector(w, length))
            radius = min_vec([w, h - length]) / 2.0 * RADIUS
            origin = Point(w / 2.0, (h - length) / 2.0 + length)
        elif position_label == 1:
            label = Rec(Point(w - length, 0.0), Vector(length, h))
            radius = min_vec([w - length, h]) / 2.0 * RADIUS
            origin = Point((w - length) / 2.0, h / 2.0)
        elif position_label == 2:
            label = Rec(Point(0.0, h - length), Vector(w, length))
            radius = min_vec([w, h - length]) / 2.0 * RADIUS
            origin = Point(w / 2.0, (h - length) / 2.0)
        elif position_label == 3:
            label = Rec(Point(0.0, 0.0), Vector(length, h))
            # The full width is used here, so the circle may reach into the labels.
            radius = min_vec([w, h]) / 2.0 * RADIUS
            origin = Point((w - length) / 2.0 + length, h / 2.0)
        else:
            label = Rec()
            radius = 0.0
            origin = Point()

        self.vector = Vector(float(width), float(height))
        self.region_chart = Circle(origin, radius)
        self.region_label = label
        self.position_label = position_label
        self.margin = margin