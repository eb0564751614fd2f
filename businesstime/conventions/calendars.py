"""
Business-day calendars.

Each calendar answers two questions for business-time arithmetic: whether a
date is a non-working day, and which date lies ``n`` business days away.
Stepping counts business days strictly after (``n > 0``) or strictly before
(``n < 0``) the origin, so ``+1`` from a Saturday is the following Monday and
``-1`` is the preceding Friday.

Market calendars are backed by QuantLib; ``HolidayCalendar`` covers custom
holiday lists without it.
"""

import logging
from abc import ABC, abstractmethod
from datetime import date, datetime
from typing import Dict, Iterable, Union

import QuantLib as ql
from dateutil.relativedelta import relativedelta

from businesstime.utils.date import to_date

logger = logging.getLogger(__name__)


def _to_ql_date(dt: Union[date, datetime]) -> ql.Date:
    """Convert Python date/datetime to QuantLib Date."""
    if isinstance(dt, datetime):
        dt = dt.date()
    return ql.Date(dt.day, dt.month, dt.year)


def _to_py_date(ql_date: ql.Date) -> date:
    """Convert QuantLib Date to Python date."""
    return date(ql_date.year(), ql_date.month(), ql_date.dayOfMonth())


class Calendar(ABC):
    """Base class for business-day calendars."""

    def __init__(self, name: str):
        self.name = name

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"

    @abstractmethod
    def is_business_day(self, dt: Union[date, datetime]) -> bool:
        """Check if date is a business day (not weekend or holiday)."""

    def is_non_working_day(self, dt: Union[date, datetime]) -> bool:
        return not self.is_business_day(dt)

    @abstractmethod
    def add_business_days(self, start_date: Union[date, datetime], days: int) -> date:
        """Return the date ``days`` business days away from ``start_date``."""


class QuantLibCalendar(Calendar):
    """Calendar delegating to a ``QuantLib.Calendar``."""

    def __init__(self, name: str, ql_calendar: ql.Calendar):
        super().__init__(name)
        self._ql_calendar = ql_calendar

    def is_business_day(self, dt: Union[date, datetime]) -> bool:
        return self._ql_calendar.isBusinessDay(_to_ql_date(dt))

    def add_business_days(self, start_date: Union[date, datetime], days: int) -> date:
        if days == 0:
            return start_date.date() if isinstance(start_date, datetime) else start_date
        ql_result = self._ql_calendar.advance(_to_ql_date(start_date), days, ql.Days)
        return _to_py_date(ql_result)


class TargetCalendar(QuantLibCalendar):
    """TARGET (Trans-European Automated Real-time Gross settlement Express Transfer) calendar."""

    def __init__(self):
        super().__init__("TARGET", ql.TARGET())


class WeekendCalendar(QuantLibCalendar):
    """Simple calendar that only considers weekends as non-business days."""

    def __init__(self):
        super().__init__("WEEKEND", ql.WeekendsOnly())


class SouthKoreaCalendar(QuantLibCalendar):
    """South Korean settlement calendar."""

    def __init__(self):
        super().__init__("KR", ql.SouthKorea(ql.SouthKorea.Settlement))


class UnitedStatesCalendar(QuantLibCalendar):
    """NYSE trading calendar."""

    def __init__(self):
        super().__init__("US", ql.UnitedStates(ql.UnitedStates.NYSE))


class HolidayCalendar(Calendar):
    """Calendar built from weekend weekdays plus an explicit holiday list.

    Args:
        holidays: Dates or 'YYYY-MM-DD' / 'YYYYMMDD' strings
        weekend: Weekday numbers treated as non-working (Monday is 0)
        name: Optional calendar name
    """

    def __init__(
        self,
        holidays: Iterable[Union[str, date]] = (),
        weekend: Iterable[int] = (5, 6),
        name: str = "CUSTOM",
    ):
        super().__init__(name)
        self.holidays = frozenset(to_date(h) for h in holidays)
        self.weekend = frozenset(weekend)
        if len(self.weekend) >= 7:
            raise ValueError("A calendar needs at least one working weekday")

    def is_business_day(self, dt: Union[date, datetime]) -> bool:
        dt = to_date(dt)
        return dt.weekday() not in self.weekend and dt not in self.holidays

    def add_business_days(self, start_date: Union[date, datetime], days: int) -> date:
        dt = to_date(start_date)
        step = relativedelta(days=1 if days > 0 else -1)
        remaining = abs(days)
        while remaining > 0:
            dt += step
            while not self.is_business_day(dt):
                dt += step
            remaining -= 1
        return dt


# Pre-defined calendar instances
TARGET = TargetCalendar()
WEEKEND_ONLY = WeekendCalendar()

# Calendar registry
CALENDARS: Dict[str, Calendar] = {
    "TARGET": TARGET,
    "EUR": TARGET,  # Alias
    "WEEKEND": WEEKEND_ONLY,
    "KR": SouthKoreaCalendar(),
    "US": UnitedStatesCalendar(),
}


def get_calendar(name: str) -> Calendar:
    """Get a calendar by (case-insensitive) name."""
    key = name.upper()
    if key not in CALENDARS:
        raise ValueError(
            f"Unknown calendar: {name}. Available: {list(CALENDARS.keys())}"
        )
    return CALENDARS[key]


def register_calendar(name: str, calendar: Calendar) -> None:
    """Register a custom calendar under ``name``."""
    key = name.upper()
    if key in CALENDARS:
        raise ValueError(f"Calendar '{name}' already registered")
    if not isinstance(calendar, Calendar):
        raise TypeError(f"Expected Calendar, got {type(calendar).__name__}")
    logger.debug("Registering calendar %s as %s", calendar, key)
    CALENDARS[key] = calendar
