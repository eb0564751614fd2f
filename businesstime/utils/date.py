from datetime import date, datetime, time, timedelta
from numbers import Integral
from typing import Union

import pandas as pd
from dateutil import parser as date_parser
from pandas import Timestamp

from businesstime.business_calendar.errors import InvalidInput
from businesstime.business_calendar.window import time_to_millis

DATE_FMT = "%Y-%m-%d"
COMPACT_FMT = "%Y%m%d"

_ONE_MILLI = timedelta(milliseconds=1)

DateLike = Union[str, date, datetime, Timestamp]
DurationLike = Union[int, str, timedelta]


def to_date(date_like: DateLike) -> date:
    """
    Convert a string, date or datetime to a plain date.
    Accepts 'YYYY-MM-DD' and 'YYYYMMDD' string formats.
    """
    if isinstance(date_like, Timestamp):
        return date_like.date()
    if isinstance(date_like, datetime):
        return date_like.date()
    if isinstance(date_like, date):
        return date_like
    if isinstance(date_like, str):
        for fmt in (DATE_FMT, COMPACT_FMT):
            try:
                return datetime.strptime(date_like.strip(), fmt).date()
            except ValueError:
                continue
        raise ValueError(f"Unsupported date string format: {date_like!r}")
    raise TypeError(f"Unsupported type for date: {type(date_like)}")


def to_datetime(moment: DateLike) -> datetime:
    """
    Convert a date-like into a datetime. Plain dates map to midnight and
    strings are parsed as ISO 8601. Time zone info is kept as given.
    """
    if isinstance(moment, Timestamp):
        return moment.to_pydatetime()
    if isinstance(moment, datetime):
        return moment
    if isinstance(moment, date):
        return datetime.combine(moment, time.min)
    if isinstance(moment, str):
        try:
            return date_parser.isoparse(moment.strip())
        except ValueError as exc:
            raise InvalidInput(f"Unsupported datetime string: {moment!r}") from exc
    raise InvalidInput(f"Unsupported type for datetime: {type(moment)}")


def millis_of_day(moment: datetime) -> int:
    """Milliseconds since midnight of the moment's wall-clock time."""
    return time_to_millis(moment.time())


def combine_millis(day: date, time_of_day_millis: int, tzinfo=None) -> datetime:
    """Datetime at ``time_of_day_millis`` after midnight of ``day``; 24:00 rolls over."""
    midnight = datetime.combine(day, time.min, tzinfo=tzinfo)
    return midnight + timedelta(milliseconds=time_of_day_millis)


def to_millis(amount: DurationLike) -> int:
    """
    Convert a duration to whole milliseconds, truncating toward zero.
    Ints are taken as milliseconds already; strings go through pandas
    (e.g. '1h30min', '2 days').
    """
    if isinstance(amount, bool):
        raise InvalidInput("Duration must not be a bool")
    if isinstance(amount, Integral):
        return int(amount)
    if isinstance(amount, str):
        try:
            amount = pd.Timedelta(amount)
        except ValueError as exc:
            raise InvalidInput(f"Unsupported duration string: {amount!r}") from exc
    if isinstance(amount, timedelta):
        millis = abs(amount) // _ONE_MILLI
        return -millis if amount < timedelta(0) else millis
    raise InvalidInput(f"Unsupported type for duration: {type(amount)}")
