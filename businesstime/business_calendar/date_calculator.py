"""
Calendar-driven business-time calculations.
Binds a Calendar to the shifter and provides datetime-level helpers for
scheduling and SLA deadlines.
"""

import logging
from datetime import date, datetime, timedelta
from typing import Optional, Union

from businesstime.conventions.calendars import Calendar, get_calendar
from businesstime.utils.date import (
    DateLike,
    DurationLike,
    combine_millis,
    millis_of_day,
    to_datetime,
    to_millis,
)

from .errors import InvalidConfiguration
from .shifter import ShiftResult, shift_by_millis
from .window import DEFAULT_WINDOW, BusinessWindow

logger = logging.getLogger(__name__)

# Default settings
_DEFAULT_CALENDAR_NAME = "WEEKEND"
_DEFAULT_CALENDAR: Optional[Calendar] = None  # Will be initialized on first use
_DEFAULT_WINDOW: BusinessWindow = DEFAULT_WINDOW


def get_default_calendar() -> Calendar:
    """Get default calendar, initializing if needed."""
    global _DEFAULT_CALENDAR
    if _DEFAULT_CALENDAR is None:
        _DEFAULT_CALENDAR = get_calendar(_DEFAULT_CALENDAR_NAME)
    return _DEFAULT_CALENDAR


def set_default_calendar(calendar: Union[str, Calendar]) -> None:
    """Set the default calendar, by registry name or instance."""
    global _DEFAULT_CALENDAR
    if isinstance(calendar, str):
        try:
            calendar = get_calendar(calendar)
        except ValueError as exc:
            raise InvalidConfiguration(str(exc)) from exc
    elif not isinstance(calendar, Calendar):
        raise InvalidConfiguration(f"Expected calendar name or Calendar, got {type(calendar).__name__}")
    logger.debug("Default calendar set to %s", calendar)
    _DEFAULT_CALENDAR = calendar


def get_default_window() -> BusinessWindow:
    return _DEFAULT_WINDOW


def set_default_window(window: BusinessWindow) -> None:
    """Set the business window used when none is passed explicitly."""
    global _DEFAULT_WINDOW
    if not isinstance(window, BusinessWindow):
        raise InvalidConfiguration(f"Expected BusinessWindow, got {type(window).__name__}")
    logger.debug("Default business window set to %s", window)
    _DEFAULT_WINDOW = window


def reset_defaults() -> None:
    """Restore the initial calendar and window defaults."""
    global _DEFAULT_CALENDAR, _DEFAULT_WINDOW
    _DEFAULT_CALENDAR = None
    _DEFAULT_WINDOW = DEFAULT_WINDOW


def shift_with_calendar(
    start_date: date,
    start_time_of_day: int,
    millis_to_move: int,
    window: BusinessWindow = None,
    calendar: Calendar = None,
) -> ShiftResult[date]:
    """Shift a date and millis-of-day using ``calendar`` to skip non-working days."""
    if window is None:
        window = get_default_window()
    if calendar is None:
        calendar = get_default_calendar()
    return shift_by_millis(
        start_date,
        start_time_of_day,
        millis_to_move,
        window,
        calendar.is_non_working_day,
        calendar.add_business_days,
    )


def add_business_time(
    moment: DateLike,
    amount: DurationLike,
    window: BusinessWindow = None,
    calendar: Calendar = None,
) -> datetime:
    """
    Move ``moment`` by ``amount`` of business time.

    Args:
        moment: datetime, pandas Timestamp, date (midnight) or ISO 8601 string
        amount: Milliseconds as int, a timedelta, or a pandas duration string
            such as '1h30min'; negative amounts move backward
        window: Business hours, defaults to the module default (09:00-17:00)
        calendar: Business-day calendar, defaults to the module default

    Returns:
        The resulting datetime, carrying the input's tzinfo unchanged.
    """
    start = to_datetime(moment)
    result = shift_with_calendar(
        start.date(), millis_of_day(start), to_millis(amount), window, calendar
    )
    return combine_millis(result.date, result.time_of_day_millis, tzinfo=start.tzinfo)


def add_business_hours(
    moment: DateLike, hours: float, window: BusinessWindow = None, calendar: Calendar = None
) -> datetime:
    """Move ``moment`` by a (possibly fractional) number of business hours."""
    return add_business_time(moment, timedelta(hours=hours), window, calendar)


def add_business_minutes(
    moment: DateLike, minutes: float, window: BusinessWindow = None, calendar: Calendar = None
) -> datetime:
    return add_business_time(moment, timedelta(minutes=minutes), window, calendar)
