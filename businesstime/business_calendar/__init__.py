"""Business window arithmetic and calendar-driven business-time helpers."""

from .errors import InvalidConfiguration, InvalidInput
from .window import (
    DEFAULT_WINDOW,
    MILLIS_PER_CALENDAR_DAY,
    MILLIS_PER_HOUR,
    MILLIS_PER_MINUTE,
    MILLIS_PER_SECOND,
    BusinessWindow,
)
from .shifter import ShiftResult, shift_by_millis
from .date_calculator import (
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
