from .calendars import (
    CALENDARS,
    Calendar,
    HolidayCalendar,
    QuantLibCalendar,
    SouthKoreaCalendar,
    TargetCalendar,
    UnitedStatesCalendar,
    WeekendCalendar,
    get_calendar,
    register_calendar,
)
