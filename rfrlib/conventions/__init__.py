# Re-export conventions components
from .types import BusinessDayAdjustment, CalendarType, IndexRounding, ReferenceRate
from .daycount import (
    ACT_360,
    ACT_365F,
    DayCountConvention,
    get_day_count_convention,
)
from .calendars import Calendar, get_calendar, make_calendar
from .holidays import (
    ENGLAND_RULES,
    SIX_RULES,
    TARGET_RULES,
    make_holiday_calendar,
    make_holiday_schedule,
    make_six_calendar,
)
