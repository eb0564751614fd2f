"""Shift a (date, time-of-day) pair by a signed amount of business milliseconds.

Business time only accrues inside a :class:`BusinessWindow` on business days.
The date type is opaque: the caller supplies a non-working-day predicate and a
business-day stepper that understand it.

The residual inside the landing day is measured from the window start and is
1-indexed, so a shift that ends exactly on a boundary is reported as the
close of the earlier day (17:00) rather than the open of the later one
(09:00), whichever direction it moved in.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from numbers import Integral
from typing import Callable, Generic, TypeVar

from .errors import InvalidConfiguration, InvalidInput
from .window import MILLIS_PER_CALENDAR_DAY, BusinessWindow

logger = logging.getLogger(__name__)

D = TypeVar("D")

NonWorkingDayFunc = Callable[[D], bool]
DayStepperFunc = Callable[[D, int], D]

_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


@dataclass(frozen=True)
class ShiftResult(Generic[D]):
    """Date and milliseconds-since-midnight reached by a shift."""

    date: D
    time_of_day_millis: int


def _as_int(value, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, Integral):
        raise InvalidInput(f"{name} must be an integer, got {type(value).__name__}")
    return int(value)


def shift_by_millis(
    start_date: D,
    start_time_of_day: int,
    millis_to_move: int,
    window: BusinessWindow,
    is_non_working_day: NonWorkingDayFunc,
    move_by_business_days: DayStepperFunc,
) -> ShiftResult[D]:
    """Move ``start_date`` at ``start_time_of_day`` by ``millis_to_move`` business millis.

    Args:
        start_date: Starting date, any type the collaborators accept
        start_time_of_day: Starting time as millis since midnight; may lie
            outside the business window
        millis_to_move: Signed business millis, positive moves forward
        window: Business hours applied to every business day
        is_non_working_day: Predicate queried once, on ``start_date`` only
        move_by_business_days: ``(date, n) -> date`` returning the date ``n``
            business days away; called at most once and never with ``n == 0``

    Returns:
        ShiftResult whose time lies within the window bounds (inclusive)
        unless ``millis_to_move`` is zero, in which case the start is returned
        unchanged.

    Raises:
        InvalidConfiguration: If ``window`` is not a valid BusinessWindow
        InvalidInput: If the time of day or the shift amount is out of range
    """
    if not isinstance(window, BusinessWindow):
        raise InvalidConfiguration(f"Expected BusinessWindow, got {type(window).__name__}")
    millis_per_day = window.millis_per_day
    if millis_per_day <= 0:
        raise InvalidConfiguration("Business window must have a positive width")

    start_time_of_day = _as_int(start_time_of_day, "start_time_of_day")
    if not 0 <= start_time_of_day < MILLIS_PER_CALENDAR_DAY:
        raise InvalidInput(
            f"start_time_of_day must be within [0, {MILLIS_PER_CALENDAR_DAY}), "
            f"got {start_time_of_day}"
        )
    millis_to_move = _as_int(millis_to_move, "millis_to_move")
    if not _INT64_MIN <= millis_to_move <= _INT64_MAX:
        raise InvalidInput(f"millis_to_move out of 64-bit range: {millis_to_move}")

    if millis_to_move == 0:
        return ShiftResult(start_date, start_time_of_day)

    window_start = window.start_millis_of_day
    window_end = window.end_millis_of_day
    forward = millis_to_move > 0
    total = millis_to_move
    days_adjustment = 0

    if not is_non_working_day(start_date):
        if forward:
            if start_time_of_day < window_start:
                # Before hours: already at the previous business day's close
                days_adjustment -= 1
                total += millis_per_day
            else:
                total += min(millis_per_day, start_time_of_day - window_start)
        else:
            if start_time_of_day > window_end:
                # After hours: already at the next business day's open
                days_adjustment += 1
                total -= millis_per_day
            else:
                total -= min(millis_per_day, window_end - start_time_of_day)
    else:
        # Deliberately steps at least one day so the result is always a business
        # day; a non-working start sits between the previous close and the next open.
        days_adjustment = 1 if forward else -1

    if not forward:
        # Backward totals count from the window end; re-anchor to the window start.
        total += millis_per_day
    days, residual = divmod(total - 1, millis_per_day)
    days += days_adjustment
    end_time_of_day = window_start + residual + 1

    end_date = move_by_business_days(start_date, days) if days != 0 else start_date

    logger.debug(
        "Shifted %s @%s by %s ms: %s business days, end %s @%s",
        start_date,
        start_time_of_day,
        millis_to_move,
        days,
        end_date,
        end_time_of_day,
    )
    return ShiftResult(end_date, end_time_of_day)
