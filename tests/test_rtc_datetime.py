import pytest

from trafficctl.rtc_datetime import SECONDS_FROM_1970_TO_2000, DateTime, TimeSpan


def test_epoch_unixtime_matches_constant():
    assert DateTime(2000, 1, 1).unixtime() == SECONDS_FROM_1970_TO_2000
    assert SECONDS_FROM_1970_TO_2000 == 946684800


def test_default_from_unixtime_is_year_2000():
    assert DateTime.from_unixtime() == DateTime(2000, 1, 1)


def test_secondstime_of_epoch_is_zero():
    assert DateTime(2000, 1, 1).secondstime() == 0


def test_secondstime_plus_constant_is_unixtime():
    dt = DateTime(2031, 7, 19, 8, 15, 42)
    assert dt.secondstime() + SECONDS_FROM_1970_TO_2000 == dt.unixtime()


def test_year_2000_first_day_is_saturday():
    assert DateTime(2000, 1, 1).day_of_the_week() == 6


@pytest.mark.parametrize(
    "fields",
    [
        (2000, 1, 1, 0, 0, 0),
        (2024, 2, 29, 23, 59, 59),
        (2024, 12, 31, 12, 0, 0),
        (2099, 12, 31, 23, 59, 59),
        (2023, 3, 1, 6, 30, 5),
    ],
)
def test_unixtime_round_trip(fields):
    dt = DateTime(*fields)
    back = DateTime.from_unixtime(dt.unixtime())
    assert back == dt
    assert (back.year, back.month, back.day, back.hour, back.minute, back.second) == fields
    assert dt.is_valid()


def test_year_offset_form_equals_full_year():
    assert DateTime(24, 5, 6, 7, 8, 9) == DateTime(2024, 5, 6, 7, 8, 9)
    assert DateTime(24, 5, 6).year == 2024


def test_invalid_day_is_detected():
    assert not DateTime(2021, 2, 31).is_valid()
    assert not DateTime(2024, 13, 1).is_valid()


def test_year_out_of_range_is_invalid():
    assert not DateTime(2100, 1, 1).is_valid()


def test_twelve_hour_midnight_and_noon():
    assert DateTime(2020, 1, 1, 0).twelve_hour() == 12
    assert DateTime(2020, 1, 1, 12).twelve_hour() == 12
    assert DateTime(2020, 1, 1, 7).twelve_hour() == 7


def test_twelve_hour_afternoon_matches_morning_counterpart():
    for hour in range(13, 24):
        assert DateTime(2020, 1, 1, hour).twelve_hour() == DateTime(2020, 1, 1, hour - 12).twelve_hour()


def test_is_pm():
    assert not DateTime(2020, 1, 1, 11, 59, 59).is_pm()
    assert DateTime(2020, 1, 1, 12).is_pm()


def test_day_of_week_advances_by_one_each_day():
    start = DateTime(2024, 2, 27)
    for offset in range(10):
        dt = start + TimeSpan.from_parts(offset, 0, 0, 0)
        assert dt.day_of_the_week() == (start.day_of_the_week() + offset) % 7


def test_add_and_subtract_span_round_trip():
    dt = DateTime(2024, 2, 28, 23, 0, 0)
    span = TimeSpan.from_parts(1, 2, 3, 4)
    later = dt + span
    assert later > dt
    assert later - span == dt
    assert later - dt == span


def test_difference_of_datetimes_is_timespan():
    dt = DateTime(2030, 6, 1, 10, 0, 0)
    assert (dt + TimeSpan(100)) - dt == TimeSpan(100)


def test_ordering():
    a = DateTime(2020, 1, 1)
    b = DateTime(2020, 1, 2)
    c = DateTime(2020, 1, 2, 0, 0, 1)
    assert a < b < c
    assert c >= b and b <= c and a != b
    assert sorted([c, a, b]) == [a, b, c]


def test_equal_datetimes_hash_alike():
    assert len({DateTime(2025, 1, 1), DateTime(25, 1, 1)}) == 1


def test_timespan_documented_example():
    span = TimeSpan.from_parts(4, 3, 27, 7)
    assert span.total_seconds() == 358027
    assert (span.days(), span.hours(), span.minutes(), span.seconds()) == (4, 3, 27, 7)


def test_timespan_negative_truncates_toward_zero():
    span = TimeSpan(-90)
    assert span.minutes() == -1
    assert span.seconds() == -30


def test_timespan_arithmetic():
    a = TimeSpan(500)
    b = TimeSpan(200)
    assert (a + b) - b == a
    assert (a - b) + b == a
    assert (a + b).total_seconds() == a.total_seconds() + b.total_seconds()


def test_timespan_wraps_to_32_bits():
    assert TimeSpan(2**31).total_seconds() == -(2**31)