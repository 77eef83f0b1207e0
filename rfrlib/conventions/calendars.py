"""
QuantLib-backed publication calendars.

Built-in jurisdictions come straight from QuantLib; benchmark-specific
calendars (e.g. the SIX money market calendar) are bespoke QuantLib calendars
populated from a holiday schedule.
"""

import logging
from datetime import date, datetime, timedelta
from typing import Iterable, List, Sequence, Union

import QuantLib as ql

logger = logging.getLogger(__name__)

SATURDAY = ql.Saturday
SUNDAY = ql.Sunday


def _to_ql_date(dt: Union[date, datetime]) -> ql.Date:
    """Convert Python date/datetime to QuantLib Date."""
    if isinstance(dt, datetime):
        dt = dt.date()
    return ql.Date(dt.day, dt.month, dt.year)


def _to_py_date(ql_date: ql.Date) -> date:
    """Convert QuantLib Date to Python date."""
    return date(ql_date.year(), ql_date.month(), ql_date.dayOfMonth())


class Calendar:
    """Business day classification backed by a QuantLib calendar."""

    def __init__(self, name: str, ql_calendar: ql.Calendar):
        self.name = name
        self._ql_calendar = ql_calendar

    def is_business_day(self, dt: Union[date, datetime]) -> bool:
        """Check if date is a business day (not weekend or holiday)."""
        return self._ql_calendar.isBusinessDay(_to_ql_date(dt))

    def is_holiday(self, dt: Union[date, datetime]) -> bool:
        """Check if date is a holiday (weekends included)."""
        return self._ql_calendar.isHoliday(_to_ql_date(dt))

    def last_business_day(self, year: int, month: int) -> date:
        """Last business day of the given calendar month."""
        return _to_py_date(self._ql_calendar.endOfMonth(ql.Date(1, month, year)))

    def is_last_business_day(self, dt: Union[date, datetime]) -> bool:
        if isinstance(dt, datetime):
            dt = dt.date()
        return dt == self.last_business_day(dt.year, dt.month)

    def add_business_days(self, start_date: Union[date, datetime], days: int) -> date:
        """Add business days to a date."""
        ql_result = self._ql_calendar.advance(_to_ql_date(start_date), days, ql.Days)
        return _to_py_date(ql_result)

    def business_days(
        self, start: Union[date, datetime], end: Union[date, datetime]
    ) -> List[date]:
        """Business days in [start, end], ascending."""
        if isinstance(start, datetime):
            start = start.date()
        if isinstance(end, datetime):
            end = end.date()

        days = []
        current = start
        while current <= end:
            if self.is_business_day(current):
                days.append(current)
            current += timedelta(days=1)
        return days

    def __repr__(self) -> str:
        return f"Calendar({self.name!r})"


def make_calendar(
    name: str,
    holidays: Iterable[date] = (),
    weekend: Sequence[int] = (SATURDAY, SUNDAY),
) -> Calendar:
    """
    Build a bespoke calendar from weekend days and an explicit holiday list.

    Args:
        name: Calendar name (informational)
        holidays: Non-weekend days on which the calendar is closed
        weekend: QuantLib weekdays treated as weekend

    Returns:
        Calendar wrapping a ``QuantLib.BespokeCalendar``
    """
    ql_calendar = ql.BespokeCalendar(name)
    for weekday in weekend:
        ql_calendar.addWeekend(weekday)

    count = 0
    for holiday in holidays:
        ql_calendar.addHoliday(_to_ql_date(holiday))
        count += 1

    logger.debug("Built calendar %s with %s holidays", name, count)
    return Calendar(name, ql_calendar)


TARGET = Calendar("TARGET", ql.TARGET())
WEEKEND_ONLY = Calendar("WEEKEND", ql.WeekendsOnly())
UNITED_KINGDOM = Calendar("UK", ql.UnitedKingdom(ql.UnitedKingdom.Settlement))
US_SOFR = Calendar("SOFR", ql.UnitedStates(ql.UnitedStates.SOFR))
SWITZERLAND = Calendar("SWITZERLAND", ql.Switzerland())

CALENDARS = {
    "TARGET": TARGET,
    "EUR": TARGET,
    "WEEKEND": WEEKEND_ONLY,
    "UK": UNITED_KINGDOM,
    "GBP": UNITED_KINGDOM,
    "SOFR": US_SOFR,
    "USD": US_SOFR,
    "SWITZERLAND": SWITZERLAND,
}


def get_calendar(name: str) -> Calendar:
    """Get a built-in calendar by name."""
    if name not in CALENDARS:
        raise ValueError(
            f"Unknown calendar: {name}. Available: {list(CALENDARS.keys())}"
        )
    return CALENDARS[name]
