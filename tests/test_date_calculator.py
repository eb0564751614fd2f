from __future__ import annotations

from datetime import date, datetime, timedelta, timezone

import pandas as pd
import pytest

from businesstime.business_calendar import (
    BusinessWindow,
    InvalidConfiguration,
    InvalidInput,
    ShiftResult,
    add_business_hours,
    add_business_minutes,
    add_business_time,
    get_default_calendar,
    get_default_window,
    reset_defaults,
    set_default_calendar,
    set_default_window,
    shift_with_calendar,
)
from businesstime.conventions.calendars import TARGET, WEEKEND_ONLY, HolidayCalendar

HOUR = 3_600_000


@pytest.fixture(autouse=True)
def _restore_defaults():
    yield
    reset_defaults()


def test_defaults_are_weekend_calendar_and_nine_to_five() -> None:
    assert get_default_calendar() is WEEKEND_ONLY
    assert get_default_window() == BusinessWindow.from_hours(9, 17)


def test_shift_with_calendar_uses_calendar_collaborators() -> None:
    result = shift_with_calendar(date(2024, 3, 28), 16 * HOUR, 2 * HOUR, calendar=TARGET)
    assert result == ShiftResult(date(2024, 4, 2), 10 * HOUR)


def test_add_business_time_over_weekend() -> None:
    assert add_business_time(datetime(2024, 3, 8, 16), "2h") == datetime(2024, 3, 11, 10)


def test_add_business_time_accepts_negative_timedelta() -> None:
    result = add_business_time(datetime(2024, 3, 11, 10, 30), timedelta(hours=-2))
    assert result == datetime(2024, 3, 8, 16, 30)


def test_add_business_time_with_millis_and_string_moment() -> None:
    assert add_business_time("2024-03-06T09:00:00", 1500) == datetime(2024, 3, 6, 9, 0, 1, 500_000)


def test_plain_date_starts_at_midnight() -> None:
    assert add_business_time(date(2024, 3, 6), "1h") == datetime(2024, 3, 6, 10)


def test_timestamp_moment_returns_datetime() -> None:
    result = add_business_time(pd.Timestamp("2024-03-06 12:00"), pd.Timedelta(minutes=30))
    assert type(result) is datetime
    assert result == datetime(2024, 3, 6, 12, 30)


def test_tzinfo_is_kept_without_conversion() -> None:
    tz = timezone(timedelta(hours=9))
    result = add_business_time(datetime(2024, 3, 8, 16, tzinfo=tz), "2h")
    assert result == datetime(2024, 3, 11, 10, tzinfo=tz)
    assert result.tzinfo is tz


def test_full_day_from_open_lands_on_close() -> None:
    assert add_business_hours(datetime(2024, 3, 6, 9), 8) == datetime(2024, 3, 6, 17)


def test_fractional_hours_and_minutes() -> None:
    start = datetime(2024, 3, 6, 16)
    assert add_business_hours(start, 1.5) == datetime(2024, 3, 7, 9, 30)
    assert add_business_minutes(start, -90) == datetime(2024, 3, 6, 14, 30)


def test_midnight_close_rolls_to_next_day() -> None:
    window = BusinessWindow.from_strings("00:00", "24:00")
    assert add_business_hours(datetime(2024, 3, 6), 24, window=window) == datetime(2024, 3, 7)


def test_explicit_calendar_overrides_default() -> None:
    office = HolidayCalendar(holidays=["2024-03-07"])
    assert add_business_hours(datetime(2024, 3, 6, 16), 2, calendar=office) == datetime(2024, 3, 8, 10)


def test_set_default_window_and_calendar() -> None:
    set_default_window(BusinessWindow.from_strings("08:00", "12:00"))
    set_default_calendar("target")
    assert get_default_calendar() is TARGET
    assert add_business_hours(datetime(2024, 3, 28, 11), 2) == datetime(2024, 4, 2, 9)


def test_set_default_calendar_accepts_instance() -> None:
    office = HolidayCalendar(name="OFFICE")
    set_default_calendar(office)
    assert get_default_calendar() is office


@pytest.mark.parametrize("value", ["MARS", 42, None])
def test_set_default_calendar_rejects_unknown(value) -> None:
    with pytest.raises(InvalidConfiguration):
        set_default_calendar(value)


def test_set_default_window_rejects_tuples() -> None:
    with pytest.raises(InvalidConfiguration):
        set_default_window((9, 17))


@pytest.mark.parametrize("amount", [1.5, None, "soon"])
def test_rejects_unsupported_amounts(amount) -> None:
    with pytest.raises(InvalidInput):
        add_business_time(datetime(2024, 3, 6, 10), amount)


def test_rejects_unparseable_moment() -> None:
    with pytest.raises(InvalidInput):
        add_business_time("next tuesday", "1h")


def test_fractional_amounts_truncate_to_the_millisecond() -> None:
    start = datetime(2024, 3, 6, 10)
    # 0.0000499 min is 2994 microseconds
    assert add_business_minutes(start, 0.0000499) == datetime(2024, 3, 6, 10, 0, 0, 2000)
    assert add_business_minutes(start, -0.0000499) == datetime(2024, 3, 6, 9, 59, 59, 998_000)
    assert add_business_hours(start, -0.7) == add_business_time(start, timedelta(hours=-0.7))
