import pytest

from thetachart.series import series_from
from thetachart.series_label import SLabel
from thetachart.series_number import SNumber


def test_floats_give_float_series():
    series = series_from([1.0, 2.0])
    assert isinstance(series, SNumber)
    assert series.series == (1.0, 2.0)
    assert series.is_float is True


def test_ints_give_whole_series():
    series = series_from([-36, 25, 10])
    assert series == SNumber.from_ints([-36, 25, 10])
    assert series.is_float is False


def test_mixed_numbers_are_floats():
    series = series_from([1, 2.5])
    assert series.series == (1.0, 2.5)
    assert series.is_float is True


def test_strings_give_labels():
    series = series_from(["A", "B", "C"])
    assert series == SLabel.from_labels(["A", "B", "C"])
    assert series.labels == ("A", "B", "C")


def test_empty_gives_empty_numbers():
    assert series_from([]) == SNumber()


def test_mixed_kinds_rejected():
    with pytest.raises(TypeError):
        series_from([1.0, "A"])


def test_booleans_rejected():
    with pytest.raises(TypeError):
        series_from([True, False])


def test_range_applies_only_to_numbers():
    numbers = series_from([1.0, 2.0]).with_range(0.0, 4.0)
    assert numbers.domain() == (0.0, 4.0)
    labels = series_from(["A", "B"])
    assert labels.with_range(0.0, 4.0) == labels