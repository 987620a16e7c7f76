import pytest

from thetachart.geometry import Vector
from thetachart.series_number import SNumber


def test_new_series_number():
    linear = SNumber([-36.0, 25.0, 10.0])
    assert linear.series == (-36.0, 25.0, 10.0)
    assert linear.is_float
    assert linear.domain() == (-36.0, 25.0)


def test_from_ints():
    linear = SNumber.from_ints([-36, 25, 10])
    assert linear.series == (-36.0, 25.0, 10.0)
    assert not linear.is_float


def test_from_series_number_with_range():
    linear = SNumber([1.0, 9.0, 1.7, 5.5, 3.5]).with_range(0.5, 11.0)
    assert linear.domain() == (0.5, 11.0)
    assert linear.count_distance_step() == (6.0, 2.0, 0.0)
    axes = linear.gen_axes()
    assert axes.step == 2.0
    assert [s.label for s in axes.sticks] == ["2", "4", "6", "8", "10"]


def test_scale_mixed_signs():
    linear = SNumber([1.0, 1.9, -1.7])
    assert linear.domain() == (-1.7, 1.9)
    assert linear.count_distance_step() == (4.0, 0.5, 4.0)
    axes = linear.gen_axes()
    assert axes.step == 0.5
    assert [s.label for s in axes.sticks] == ["-1.5", "-1.0", "-0.5", "0.0", "0.5", "1.0", "1.5"]


def test_scale_endpoints():
    linear = SNumber([2.0, 8.0, 5.0])
    low, high = linear.domain()
    assert linear.scale(low) == 0.0
    assert linear.scale(high) == 1.0


def test_with_stick_changes_step_count():
    base = SNumber([0.0, 100.0])
    fewer = base.with_stick(6)
    assert fewer.stick == 6
    assert fewer.count_distance_step()[1] > base.count_distance_step()[1]


def test_negative_range_sticks_within_unit_interval():
    linear = SNumber([-10.0, -20.0]).with_range(-30.0, -5.0)
    up, step, down = linear.count_distance_step()
    assert up == 0.0
    assert down > 0.0
    sticks = linear.gen_axes().sticks
    assert sticks
    assert all(-1e-7 <= s.value <= 1.0000001 for s in sticks)
    assert [s.value for s in sticks] == sorted(s.value for s in sticks)


def test_all_zero_series_cannot_build_step():
    with pytest.raises(ValueError):
        SNumber([0.0, 0.0]).count_distance_step()


def test_to_percent():
    assert SNumber([1.0, 3.0]).to_percent() == [0.25, 0.75]


def test_to_percent_radar():
    assert SNumber([50.0, 25.0]).to_percent_radar() == [0.5, 0.25]


def test_gen_pie_closes_circle():
    arcs = SNumber([1.0, 1.0]).gen_pie()
    assert len(arcs) == 2
    assert arcs[0].begin == Vector(0.0, -1.0)
    assert arcs[0].end.isclose(Vector(0.0, 1.0))
    assert arcs[0].large
    assert arcs[1].begin == arcs[0].end
    assert arcs[1].end.isclose(arcs[0].begin)


def test_gen_pie_small_slice_is_not_large():
    arcs = SNumber([1.0, 3.0]).gen_pie()
    assert not arcs[0].large
    assert arcs[1].large


def test_gen_radar_grid():
    grid = SNumber([1.0]).gen_radar_grid(4)
    expected = [Vector(0, -1), Vector(1, 0), Vector(0, 1), Vector(-1, 0)]
    assert len(grid) == 4
    assert all(got.isclose(want) for got, want in zip(grid, expected))


def test_gen_radar_grid_keeps_first_spoke_for_zero():
    assert SNumber([1.0]).gen_radar_grid(0) == [Vector(0.0, -1.0)]


def test_to_stick():
    sticks = SNumber([1.0, 2.5]).to_stick()
    assert [s.label for s in sticks] == ["1", "2.5"]
    assert [s.value for s in sticks] == [1.0, 2.5]