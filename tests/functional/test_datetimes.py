import datetime as dt

import pytest

from utilbelt.core.clock import FixedClock, use_clock
from utilbelt.core.enums import Season, TimeOfDay, Weekday
from utilbelt.functional import datetimes

# Tuesday
NOW = dt.datetime(2024, 3, 5, 14, 30, 45)
UTC = dt.timezone.utc


@pytest.fixture
def clock():
    return FixedClock(NOW)


# --- Relative to now ---------------------------------------------------------


def test_relative_day_predicates(clock):
    assert datetimes.is_today(dt.datetime(2024, 3, 5, 8, 0), clock=clock)
    assert datetimes.is_yesterday(dt.datetime(2024, 3, 4, 23, 0), clock=clock)
    assert datetimes.is_tomorrow(dt.datetime(2024, 3, 6, 0, 0), clock=clock)
    assert not datetimes.is_today(dt.datetime(2024, 3, 6, 0, 0), clock=clock)


def test_past_and_future(clock):
    assert datetimes.is_past(NOW - dt.timedelta(seconds=1), clock=clock)
    assert datetimes.is_future(NOW + dt.timedelta(seconds=1), clock=clock)
    assert not datetimes.is_past(NOW, clock=clock)
    assert not datetimes.is_future(NOW, clock=clock)


def test_default_clock_is_used(clock):
    with use_clock(clock):
        assert datetimes.is_today(dt.datetime(2024, 3, 5))
        assert datetimes.is_yesterday(dt.datetime(2024, 3, 4))


def test_now_is_read_in_value_timezone():
    clock = FixedClock(dt.datetime(2024, 3, 5, 22, 0, tzinfo=UTC))
    plus_three = dt.timezone(dt.timedelta(hours=3))
    assert datetimes.is_today(dt.datetime(2024, 3, 6, 1, 0, tzinfo=plus_three), clock=clock)
    assert datetimes.is_yesterday(dt.datetime(2024, 3, 5, 1, 0, tzinfo=plus_three), clock=clock)


# --- Comparison --------------------------------------------------------------


def test_same_field_comparisons():
    a = dt.datetime(2024, 3, 5, 14, 30, 45, 123000)
    assert datetimes.is_same_millisecond(a, a.replace(microsecond=123999))
    assert not datetimes.is_same_millisecond(a, a.replace(microsecond=124000))
    assert datetimes.is_same_second(a, a.replace(microsecond=0))
    assert datetimes.is_same_minute(a, a.replace(second=0))
    assert datetimes.is_same_hour(a, a.replace(minute=0))
    assert datetimes.is_same_day(a, a.replace(hour=0))
    assert not datetimes.is_same_day(a, a.replace(month=4))
    assert datetimes.is_same_month(a, a.replace(day=1))
    assert not datetimes.is_same_month(a, a.replace(year=2023))
    assert datetimes.is_same_year(a, a.replace(month=1))


def test_is_between_is_inclusive():
    start = dt.datetime(2024, 1, 1)
    end = dt.datetime(2024, 12, 31)
    assert datetimes.is_between(start, start, end)
    assert datetimes.is_between(end, start, end)
    assert not datetimes.is_between(dt.datetime(2025, 1, 1), start, end)


def test_ahead_and_behind_by_days():
    base = dt.datetime(2024, 3, 5)
    assert datetimes.is_ahead_by_days(dt.datetime(2024, 3, 10), base, 5)
    assert not datetimes.is_ahead_by_days(dt.datetime(2024, 3, 9, 23), base, 5)
    assert datetimes.is_behind_by_days(dt.datetime(2024, 3, 1), base, 4)
    assert not datetimes.is_behind_by_days(dt.datetime(2024, 3, 1, 1), base, 4)


# --- Time of day and weekday ---------------------------------------------------


@pytest.mark.parametrize(
    "hour, band",
    [(6, TimeOfDay.MORNING), (11, TimeOfDay.MORNING), (12, TimeOfDay.AFTERNOON), (17, TimeOfDay.AFTERNOON),
     (18, TimeOfDay.EVENING), (22, TimeOfDay.EVENING), (23, TimeOfDay.NIGHT), (0, TimeOfDay.NIGHT), (5, TimeOfDay.NIGHT)],
)
def test_time_of_day(hour, band):
    value = NOW.replace(hour=hour)
    assert datetimes.time_of_day(value) is band
    predicates = {
        TimeOfDay.MORNING: datetimes.is_morning,
        TimeOfDay.AFTERNOON: datetimes.is_afternoon,
        TimeOfDay.EVENING: datetimes.is_evening,
        TimeOfDay.NIGHT: datetimes.is_night,
    }
    for other, predicate in predicates.items():
        assert predicate(value) is (other is band)


def test_weekdays():
    saturday = dt.datetime(2024, 3, 9)
    assert datetimes.iso_weekday(NOW) is Weekday.TUESDAY
    assert datetimes.is_weekday(NOW)
    assert datetimes.is_weekend(saturday)
    assert datetimes.days_until_weekend(NOW) == 4
    assert datetimes.days_until_weekend(saturday) == 0


# --- Boundaries ----------------------------------------------------------------


def test_day_boundaries():
    assert datetimes.start_of_day(NOW) == dt.datetime(2024, 3, 5)
    assert datetimes.end_of_day(NOW) == dt.datetime(2024, 3, 5, 23, 59, 59, 999000)


def test_week_boundaries():
    assert datetimes.start_of_week(NOW) == dt.datetime(2024, 3, 4)
    assert datetimes.end_of_week(NOW) == dt.datetime(2024, 3, 10, 23, 59, 59, 999000)
    sunday = dt.datetime(2024, 3, 10, 12)
    assert datetimes.start_of_week(sunday) == dt.datetime(2024, 3, 4)


@pytest.mark.parametrize(
    "value, end",
    [
        (dt.datetime(2024, 3, 5), dt.datetime(2024, 3, 31, 23, 59, 59, 999000)),
        (dt.datetime(2024, 2, 10), dt.datetime(2024, 2, 29, 23, 59, 59, 999000)),
        (dt.datetime(2023, 12, 25), dt.datetime(2023, 12, 31, 23, 59, 59, 999000)),
    ],
)
def test_month_boundaries(value, end):
    assert datetimes.start_of_month(value) == value.replace(day=1)
    assert datetimes.end_of_month(value) == end


def test_year_boundaries():
    assert datetimes.start_of_year(NOW) == dt.datetime(2024, 1, 1)
    assert datetimes.end_of_year(NOW) == dt.datetime(2024, 12, 31, 23, 59, 59, 999000)


def test_boundaries_keep_timezone():
    aware = NOW.replace(tzinfo=UTC)
    assert datetimes.start_of_day(aware).tzinfo is UTC
    assert datetimes.end_of_month(aware).tzinfo is UTC


# --- Calendar --------------------------------------------------------------------


def test_leap_year_and_quarter():
    assert datetimes.is_leap_year(dt.datetime(2024, 1, 1))
    assert datetimes.is_leap_year(dt.datetime(2000, 1, 1))
    assert not datetimes.is_leap_year(dt.datetime(1900, 1, 1))
    assert [datetimes.quarter_of_year(dt.datetime(2024, m, 1)) for m in (1, 3, 4, 7, 12)] == [1, 1, 2, 3, 4]


@pytest.mark.parametrize(
    "value, week",
    [
        (dt.datetime(2024, 3, 5), 10),
        (dt.datetime(2021, 1, 1), 53),
        (dt.datetime(2020, 12, 31), 53),
        (dt.datetime(2024, 12, 30), 1),
        (dt.datetime(2024, 1, 1), 1),
    ],
)
def test_week_of_year(value, week):
    assert datetimes.week_of_year(value) == week


def test_age(clock):
    assert datetimes.age(dt.datetime(2000, 3, 6), clock=clock) == 23
    assert datetimes.age(dt.datetime(2000, 3, 5), clock=clock) == 24


@pytest.mark.parametrize(
    "month, day, season",
    [
        (1, 15, Season.WINTER),
        (3, 19, Season.WINTER),
        (3, 20, Season.SPRING),
        (6, 20, Season.SPRING),
        (6, 21, Season.SUMMER),
        (9, 22, Season.SUMMER),
        (9, 23, Season.AUTUMN),
        (12, 20, Season.AUTUMN),
        (12, 21, Season.WINTER),
    ],
)
def test_season_boundaries_are_inclusive_starts(month, day, season):
    value = dt.datetime(2024, month, day)
    assert datetimes.season(value) is season
    assert datetimes.is_in_season(value, season)


def test_days_in_month():
    assert datetimes.days_in_month(dt.datetime(2024, 2, 1)) == 29
    assert datetimes.days_in_month(dt.datetime(2023, 2, 1)) == 28
    assert datetimes.days_in_month(dt.datetime(2024, 4, 1)) == 30


# --- Arithmetic ------------------------------------------------------------------


def test_days_and_hours_until():
    start = dt.datetime(2024, 1, 1)
    assert datetimes.days_until(start, dt.datetime(2024, 1, 11)) == 10
    assert datetimes.days_until(dt.datetime(2024, 1, 11), start) == -10
    assert datetimes.days_until(start, dt.datetime(2024, 1, 2, 23)) == 1
    assert datetimes.hours_until(start, start + dt.timedelta(minutes=90)) == 1
    assert datetimes.hours_until(start, start - dt.timedelta(minutes=90)) == -1


def test_days_until_end_of_year():
    assert datetimes.days_until_end_of_year(dt.datetime(2024, 12, 31)) == 1
    assert datetimes.days_until_end_of_year(dt.datetime(2024, 1, 1)) == 366


def test_add_workdays():
    friday = dt.datetime(2024, 1, 5)
    monday = dt.datetime(2024, 1, 8)
    assert datetimes.add_workdays(friday, 1) == monday
    assert datetimes.add_workdays(monday, 5) == dt.datetime(2024, 1, 15)
    assert datetimes.add_workdays(monday, -1) == friday
    assert datetimes.add_workdays(monday, 0) == monday


def test_next_weekday_never_returns_same_day():
    assert datetimes.next_weekday(NOW, Weekday.TUESDAY) == dt.datetime(2024, 3, 12, 14, 30, 45)
    assert datetimes.next_weekday(NOW, Weekday.FRIDAY).date() == dt.date(2024, 3, 8)
    with pytest.raises(ValueError):
        datetimes.next_weekday(NOW, 8)


# --- Formatting ------------------------------------------------------------------


@pytest.mark.parametrize(
    "delta, expected",
    [
        (dt.timedelta(0), "just now"),
        (dt.timedelta(seconds=-59), "just now"),
        (dt.timedelta(minutes=-1), "1 minute ago"),
        (dt.timedelta(minutes=-5), "5 minutes ago"),
        (dt.timedelta(hours=-2), "2 hours ago"),
        (dt.timedelta(hours=3), "in 3 hours"),
        (dt.timedelta(days=-3), "3 days ago"),
        (dt.timedelta(days=-14), "2 weeks ago"),
        (dt.timedelta(days=-60), "2 months ago"),
        (dt.timedelta(days=400), "in 1 year"),
        (dt.timedelta(days=-800), "2 years ago"),
    ],
)
def test_time_ago(clock, delta, expected):
    assert datetimes.time_ago(NOW + delta, clock=clock) == expected


def test_time_ago_with_reference():
    reference = dt.datetime(2024, 1, 1, 12)
    assert datetimes.time_ago(dt.datetime(2024, 1, 1, 11), reference=reference) == "1 hour ago"


@pytest.mark.parametrize(
    "pattern, expected",
    [
        ("yyyy-MM-dd", "2024-03-05"),
        ("dd MMM yyyy", "05 Mar 2024"),
        ("HH:mm:ss", "14:30:45"),
        ("MMMM", "March"),
        ("EEE", "Tue"),
        ("EEEE, MMMM d at HH:mm", "Tuesday, March 5 at 14:30"),
        ("d/M/yy H", "5/3/24 14"),
        ("[yyyy]", "[2024]"),
    ],
)
def test_format(pattern, expected):
    assert datetimes.format(NOW, pattern) == expected
