# thetachart

`thetachart` turns data series into chart geometry. It can:

- work out axis ticks;
- scale values into the unit interval;
- lay out the regions of Cartesian and polar charts;
- build pie slices and radar spokes.

The output is plain coordinates and SVG path strings that any renderer can draw.

## Installation

```
pip install thetachart
```

The package has no runtime dependencies. To install the test tools as well, use `pip install thetachart[test]`.

## Series

### `SNumber` (`thetachart.series_number`)

`SNumber` is an immutable numeric series. It offers:

- `domain()` returns the smallest and largest value the axis covers. That range includes zero. If a range was set with `with_range(low, high)`, it includes `low` and `high` instead.
- `scale(value)` maps a value into the unit interval of the domain.
- `count_distance_step()` returns three numbers: the number of steps above zero, the step size, and the number of steps below zero. Steps are rounded to readable sizes built from 1, 2, 2.5 and 5.
- `with_stick(n)` asks for `n` ticks. The default is 11.
- `gen_axes()` returns an `Axes`. Its ticks are labelled to the precision of the step. Only ticks that fall inside the domain are kept.
- `to_percent()` gives each value's share of the total.
- `to_percent_radar()` gives each value divided by 100.
- `gen_pie()` returns one `Arc` per value. The first arc starts at the top.
- `gen_radar_grid(count)` returns `count` unit spokes spread evenly. The first spoke points up.
- `to_stick()` returns one stick per value.

`SNumber.from_ints(values)` builds a series marked as whole numbers.

```python
from thetachart.series_number import SNumber

numbers = SNumber([1.0, 9.0, 1.7, 5.5, 3.5]).with_range(0.5, 11.0)
axes = numbers.gen_axes()
for stick in axes.sticks:
    print(stick.label, stick.value)
```

### `SLabel` (`thetachart.series_label`)

`SLabel` is a categorical series.

`SLabel.from_labels(labels)` gives every label a colour through `gen_colors(num)`:

- with two labels or fewer, there is a single default colour;
- with more labels, each new colour is the previous one with its hue shifted.

The series also offers:

- `scale(value)`, which divides a position by the number of labels;
- `gen_axes()`, which puts each label in the middle of its slot;
- `to_stick()`, which values each label by its index.

### `STime` (`thetachart.series_time`)

`STime` holds `datetime` values. `STime.parse(values, fmt, unit)` builds one from strings:

- `unit="full"` parses each string with `fmt`.
- `unit="date"` parses a date with `fmt` and sets the time to midnight.
- `unit="year"` takes the string as a year.

Strings that fail to parse are left out, and the series is then marked `dirty`.

Scaling, step counting and ticks are only worked out for the `"year"` unit. For any other unit:

- `scale()` returns `1.0`;
- `gen_axes()` has no ticks;
- `to_stick()` always returns an empty list.

```python
from thetachart.series_time import STime

years = STime.parse(["1982", "1986", "2017", "2020"], "%Y", "year")
print(years.domain())
print([s.label for s in years.gen_axes().sticks])
```

### `series_from` (`thetachart.series`)

`thetachart.series.series_from(values)` chooses a series type for a plain list:

- only strings give an `SLabel`;
- only integers give `SNumber.from_ints(...)`;
- other numbers give a float `SNumber`.

Booleans, and lists that mix strings with numbers, raise `TypeError`.

## Coordinate systems

`thetachart.coords` has two immutable systems. Each `with_*` method returns a new object.

- `Cartesian(ax, ay)` pairs an x series with a y series. `with_view(width, height, position_axes, height_x_axis, width_y_axis, margin)` builds a `CView`.
  - The `CView` holds the chart rectangle and the two axis rectangles.
  - `position_axes` places the origin: 0 top left, 1 top right, 2 bottom right, 3 bottom left.
- `Polar(data, label)` pairs a data series with a label series. `with_view(width, height, position_label, width_label, margin)` builds a `PView`.
  - The `PView` holds the chart circle and the label rectangle.
  - `position_label` places the labels: 0 top, 1 right, 2 bottom, 3 left.
  - `numbers()` and `labels()` return the series. If a series has the wrong kind, they return an empty one instead.

Negative sizes raise `ValueError`.

```python
from thetachart.coords import Cartesian
from thetachart.series import series_from

chart = Cartesian(series_from([1.0, 2.0]), series_from(["A", "B"]))
chart = chart.with_view(800, 600, 3, 30, 40, 10)
print(chart.view.region_chart)
```

## Geometry

### Points and vectors (`thetachart.geometry`)

`Point` and `Vector` both support:

- rotation about the origin;
- comparison within a tolerance through `isclose`.

### Shapes (`thetachart.shapes`)

- `Arc`: `Arc.gen_path(radius)` returns an SVG path for a pie slice drawn from the origin.
- `Line`
- `Rec`
- `Circle`
- `Stick`
- `Axes`

```python
from thetachart.series_number import SNumber

for arc in SNumber([1.0, 2.0, 3.0]).gen_pie():
    print(arc.gen_path(100.0))
```

### Helpers

- `thetachart.common` has:
  - `TAU`;
  - `turn_to_radian` and `degree_to_radian`;
  - `get_bit_at`.
- `thetachart.calstep` has:
  - the `CalStep` step rounder;
  - the NaN-tolerant helpers `min_vec`, `max_vec` and `min_max_vec`.

### Colours (`thetachart.color`)

- `Color.from_hex("#ff0000")` parses `#rrggbb` or `#rgb`. Invalid text gives the default colour, `#005BBE`.
- `to_string_hex()` formats the colour back to hex.
- `shift_hue()` rotates the hue by 70 degrees in LCh space.

## What it does not do

`thetachart` only computes geometry. It does not:

- draw or render charts;
- write SVG or image files;
- provide a command-line tool.

Time axes are only supported for yearly data.