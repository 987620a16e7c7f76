"""Cartesian and polar coordinate systems holding series and a layout."""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from .series import Series
from .series_label import SLabel
from .series_number import SNumber
from .views import CView, PView


@dataclass(frozen=True)
class Cartesian:
    """A descartes coordinate system with an x series and a y series."""

    ax: Series
    ay: Series
    view: CView = field(default_factory=CView)

    def with_ax(self, ax: Series) -> Cartesian:
        """Return a copy with another x series."""
        return replace(self, ax=ax)

    def with_ay(self, ay: Series) -> Cartesian:
        """Return a copy with another y series."""
        return replace(self, ay=ay)

    def with_view(
        self,
        width: int,
        height: int,
        position_axes: int,
        height_x_axis: int,
        width_y_axis: int,
        margin: int,
    ) -> Cartesian:
        """Return a copy laid out in a view of the given sizes."""
        view = CView(width, height, position_axes, height_x_axis, width_y_axis, margin)
        return replace(self, view=view)


@dataclass(frozen=True)
class Polar:
    """A polar coordinate system with a data series and a label series."""

    data: Series
    label: Series
    view: PView = field(default_factory=PView)

    def with_data(self, data: Series) -> Polar:
        """Return a copy with another data series."""
        return replace(self, data=data)

    def with_label(self, label: Series) -> Polar:
        """Return a copy with another label series."""
        return replace(self, label=label)

    def with_view(
        self,
        width: int,
        height: int,
        position_label: int,
        width_label: int,
        margin: int,
    ) -> Polar:
        """Return a copy laid out in a view of the given sizes."""
        return replace(self, view=PView(width, height, position_label, width_label, margin))

    def numbers(self) -> SNumber:
        """Return the data when it is numeric, otherwise an empty number series."""
        return self.data if isinstance(self.data, SNumber) else SNumber()

    def labels(self) -> SLabel:
        """Return the labels when they are labels, otherwise an empty label series."""
        return self.label if isinstance(self.label, SLabel) else SLabel()