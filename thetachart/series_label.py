"""A series of labels and the colours drawn for them."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from .color import Color
from .shapes import Axes, Stick


def gen_colors(num: int) -> list[Color]:
    """Return colours for ``num`` labels by repeatedly shifting the hue.

    Two or fewer labels share the single default colour.
    """
    colors = [Color()]
    if num <= 2:
        return colors
    for _ in range(num - 1):
        colors.append(colors[-1].shift_hue())
    return colors


@dataclass(frozen=True)
class SLabel:
    """A series of labels represented on a chart."""

    labels: tuple[str, ...] = ()
    colors: tuple[Color, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "labels", tuple(str(label) for label in self.labels))
        object.__setattr__(self, "colors", tuple(self.colors))

    @classmethod
    def from_labels(cls, labels: Iterable[str]) -> SLabel:
        """Build a series with generated colours."""
        labels = tuple(labels)
        return cls(labels, tuple(gen_colors(len(labels))))

    def with_range(self, low: float, high: float) -> SLabel:
        """Labels have no numeric range; the series is returned unchanged."""
        return self

    def scale(self, value: float) -> float:
        """Map a position among the labels to the unit interval."""
        return value / len(self.labels)

    def gen_axes(self) -> Axes:
        """Place each label in the middle of its slot."""
        sticks = [Stick(label, self.scale(i + 0.5)) for i, label in enumerate(self.labels)]
        return Axes(sticks, 1.0)

    def to_stick(self) -> list[Stick]:
        """Return one stick per label, valued by its index."""
        return [Stick(label, float(i)) for i, label in enumerate(self.labels)]