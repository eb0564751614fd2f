"""Business-time arithmetic.

Shift a date and time of day by a signed duration counted only inside a
business window on business days.

Key modules:
- business_calendar: business window, shifter, datetime helpers and defaults
- conventions: business-day calendars (QuantLib-backed and custom)
- utils: date, datetime and duration coercion
"""

from .business_calendar import (
    DEFAULT_WINDOW,
    MILLIS_PER_CALENDAR_DAY,
    BusinessWindow,
    InvalidConfiguration,
    InvalidInput,
    ShiftResult,
    add_business_hours,
    add_business_minutes,
    add_business_time,
    set_default_calendar,
    set_default_window,
    shift_by_millis,
    shift_with_calendar,
)
from .conventions import Calendar, HolidayCalendar, get_calendar, register_calendar

__version__ = "1.0.0"

__all__ = [
    "__version__",
    "BusinessWindow",
    "DEFAULT_WINDOW",
    "MILLIS_PER_CALENDAR_DAY",
    "ShiftResult",
    "shift_by_millis",
    "shift_with_calendar",
    "add_business_time",
    "add_business_hours",
    "add_business_minutes",
    "set_default_calendar",
    "set_default_window",
    "InvalidConfiguration",
    "InvalidInput",
    "Calendar",
    "HolidayCalendar",
    "get_calendar",
    "register_calendar",
]
