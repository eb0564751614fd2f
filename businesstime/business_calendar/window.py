"""
Business window definition: the part of each business day during which
business time accrues.
"""

from dataclasses import dataclass
from datetime import datetime, time

from .errors import InvalidConfiguration

MILLIS_PER_SECOND = 1000
MILLIS_PER_MINUTE = 60 * MILLIS_PER_SECOND
MILLIS_PER_HOUR = 60 * MILLIS_PER_MINUTE
MILLIS_PER_CALENDAR_DAY = 24 * MILLIS_PER_HOUR

_TIME_FORMATS = ("%H:%M", "%H:%M:%S", "%H:%M:%S.%f")
_END_OF_DAY = ("24:00", "24:00:00", "24:00:00.000")


def time_to_millis(value: time) -> int:
    """Milliseconds since midnight for a wall-clock time (microseconds truncated)."""
    return (
        value.hour * MILLIS_PER_HOUR
        + value.minute * MILLIS_PER_MINUTE
        + value.second * MILLIS_PER_SECOND
        + value.microsecond // 1000
    )


def _parse_time_of_day(text: str) -> int:
    t = text.strip()
    if t in _END_OF_DAY:
        return MILLIS_PER_CALENDAR_DAY
    for fmt in _TIME_FORMATS:
        try:
            return time_to_millis(datetime.strptime(t, fmt).time())
        except ValueError:
            continue
    raise InvalidConfiguration(f"Unsupported time-of-day format: {text!r}")


@dataclass(frozen=True)
class BusinessWindow:
    """Business hours as millisecond offsets from midnight.

    ``end_millis_of_day`` may equal ``MILLIS_PER_CALENDAR_DAY`` so that a
    window can run up to midnight.
    """

    start_millis_of_day: int
    end_millis_of_day: int

    def __post_init__(self):
        start, end = self.start_millis_of_day, self.end_millis_of_day
        if not isinstance(start, int) or not isinstance(end, int):
            raise InvalidConfiguration("Window bounds must be integers")
        if not 0 <= start < MILLIS_PER_CALENDAR_DAY:
            raise InvalidConfiguration(
                f"Window start must be within [0, {MILLIS_PER_CALENDAR_DAY}), got {start}"
            )
        if end > MILLIS_PER_CALENDAR_DAY:
            raise InvalidConfiguration(
                f"Window end must not exceed {MILLIS_PER_CALENDAR_DAY}, got {end}"
            )
        if end <= start:
            raise InvalidConfiguration(
                f"Window end ({end}) must be after window start ({start})"
            )

    @property
    def millis_per_day(self) -> int:
        """Business milliseconds available in one business day."""
        return self.end_millis_of_day - self.start_millis_of_day

    def contains(self, time_of_day_millis: int) -> bool:
        return self.start_millis_of_day <= time_of_day_millis <= self.end_millis_of_day

    @classmethod
    def from_times(cls, start: time, end: time) -> "BusinessWindow":
        """Build a window from wall-clock times.

        ``datetime.time`` cannot express 24:00; use ``from_hours(..., 24)`` or
        ``from_strings(..., "24:00")`` for windows that close at midnight.
        """
        return cls(time_to_millis(start), time_to_millis(end))

    @classmethod
    def from_hours(cls, start_hour: int, end_hour: int) -> "BusinessWindow":
        return cls(start_hour * MILLIS_PER_HOUR, end_hour * MILLIS_PER_HOUR)

    @classmethod
    def from_strings(cls, start: str, end: str) -> "BusinessWindow":
        """Build a window from strings such as ``"09:00"`` and ``"17:30:00"``."""
        return cls(_parse_time_of_day(start), _parse_time_of_day(end))


DEFAULT_WINDOW = BusinessWindow.from_hours(9, 17)
