import math
from datetime import datetime

import pytest

from thetachart.series_time import STime

YEARS = ["1982", "1986", "2017", "2020"]


def test_default_then_format_and_data():
    dt1 = datetime(2015, 6, 3, 12, 34, 56, 789000)
    dt2 = datetime(2016, 7, 8, 9, 10, 11)
    stime = STime().with_format("%Y-%m-%d %H:%M:%S").with_data([dt1, dt2])
    assert stime.series == (dt1, dt2)
    assert stime.fmt == "%Y-%m-%d %H:%M:%S"
    assert stime.unit == "full"
    assert stime.dirty is False
    assert stime.domain() == (dt1, dt2)


def test_parse_full():
    stime = STime.parse(
        [
            "1982-04-03 00:00:00",
            "1986-02-12 00:00:00",
            "2017-02-04 00:00:00",
            "2020-05-22 00:00:00",
        ],
        "%Y-%m-%d %H:%M:%S",
        "full",
    )
    assert stime.dirty is False
    assert stime.series[0] == datetime(1982, 4, 3)
    assert stime.series[-1] == datetime(2020, 5, 22)
    assert len(stime.series) == 4


def test_parse_date_gives_midnight():
    stime = STime.parse(
        ["1982-04-03", "1986-02-12", "2017-02-04", "2020-05-22"], "%Y-%m-%d", "date"
    )
    assert stime.series == (
        datetime(1982, 4, 3),
        datetime(1986, 2, 12),
        datetime(2017, 2, 4),
        datetime(2020, 5, 22),
    )
    assert all(d.hour == 0 and d.minute == 0 for d in stime.series)


def test_parse_year():
    stime = STime.parse(["1986", "2017", "2020"], "%Y", "year")
    assert stime.series == (datetime(1986, 1, 1), datetime(2017, 1, 1), datetime(2020, 1, 1))
    assert stime.unit == "year"


def test_parse_marks_dirty_and_skips_bad_values():
    stime = STime.parse(["1982", "abc"], "%Y", "year")
    assert stime.dirty is True
    assert stime.series == (datetime(1982, 1, 1),)


def test_scale_domain_and_axes():
    stime = STime.parse(YEARS, "%Y", "year")
    assert stime.domain() == (datetime(1982, 1, 1), datetime(2020, 1, 1))
    assert stime.domain_unix() == (1982.0, 2020.0)
    axes = stime.gen_axes()
    assert [s.label for s in axes.sticks] == YEARS
    assert [s.value for s in axes.sticks] == pytest.approx([0.0, 4 / 38, 35 / 38, 1.0])
    assert axes.step == 1.0


def test_count_distance_step_year():
    stime = STime.parse(YEARS, "%Y", "year")
    assert stime.count_distance_step() == pytest.approx((3.8, 10.0))


def test_count_distance_step_other_unit():
    stime = STime.parse(["2020-01-01 00:00:00"], "%Y-%m-%d %H:%M:%S", "full")
    assert stime.count_distance_step() == (1.0, 0.0)


def test_count_distance_step_single_year_rejected():
    stime = STime.parse(["2020"], "%Y", "year")
    with pytest.raises(ValueError):
        stime.count_distance_step()


def test_single_year_axes_drop_undefined_ticks():
    stime = STime.parse(["2020"], "%Y", "year")
    assert math.isnan(stime.scale(datetime(2020, 1, 1)))
    assert stime.gen_axes().sticks == []


def test_scale_intervale_counts_years():
    stime = STime.parse(YEARS, "%Y", "year")
    assert stime.scale_intervale(datetime(2017, 5, 1)) == 35.0


def test_scale_non_year_is_one():
    stime = STime.parse(["2020-05-22"], "%Y-%m-%d", "date")
    assert stime.scale(datetime(1999, 1, 1)) == 1.0
    assert stime.domain_unix() == (0.0, 0.0)
    assert stime.gen_axes().sticks == []


def test_date_format_by_unit():
    assert STime(unit="year").date_format() == "%Y"
    assert STime(unit="date").date_format() == "%Y-%m-%d"
    assert STime(unit="month").date_format() == "%Y-%m"
    assert STime(unit="hour").date_format() == "%H:%M:%S"
    assert STime().date_format() == ""


def test_get_value():
    stime = STime.parse(YEARS, "%Y", "year")
    assert stime.get_value(2) == 2017.0
    assert stime.with_format("%Y").get_value(2) == 1.0
    with pytest.raises(IndexError):
        stime.get_value(10)


def test_empty_domain_is_epoch():
    assert STime().domain() == (datetime(1970, 1, 1), datetime(1970, 1, 1))


def test_with_format_keeps_dirty_and_resets_unit():
    stime = STime.parse(["1982", "x"], "%Y", "year").with_format("%Y")
    assert stime.dirty is True
    assert stime.unit == "full"


def test_with_data_clears_dirty():
    stime = STime.parse(["x"], "%Y", "year").with_data([datetime(2000, 1, 1)])
    assert stime.dirty is False
    assert stime.series == (datetime(2000, 1, 1),)


def test_to_stick_and_range():
    stime = STime.parse(YEARS, "%Y", "year")
    assert stime.to_stick() == []
    assert stime.with_range(0.0, 5.0) == stime