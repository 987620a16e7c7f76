"""The kinds of series a chart can hold."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Union

from .series_label import SLabel
from .series_number import SNumber
from .series_time import STime

Series = Union[SNumber, SLabel, STime]


def series_from(values: Iterable[float | int | str]) -> Series:
    """Build a series from plain values.

    Floats (or floats mixed with integers) give a float number series,
    integers alone give a whole-number series and strings give a label series.
    """
    items = list(values)
    if any(isinstance(v, bool) for v in items):
        raise TypeError("booleans cannot form a series")
    if items and all(isinstance(v, str) for v in items):
        return SLabel.from_labels(items)
    if items and all(isinstance(v, int) for v in items):
        return SNumber.from_ints(items)
    if all(isinstance(v, (int, float)) for v in items):
        return SNumber(tuple(float(v) for v in items))
    raise TypeError("a series must hold only numbers or only strings")