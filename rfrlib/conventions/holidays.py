"""
Annual holiday rules and holiday schedules for publication calendars.

A rule yields at most one holiday per year; a schedule is the sorted set of
holidays produced by a collection of rules over a range of years.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Iterable, List, Optional

from dateutil.easter import easter
from dateutil.relativedelta import MO, relativedelta, weekday

from rfrlib.conventions.calendars import Calendar, make_calendar

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NamedHoliday:
    """Holiday on a fixed day of a fixed month (e.g. 1 May)."""

    name: str
    month: int
    day: int

    def in_year(self, year: int) -> Optional[date]:
        return date(year, self.month, self.day)


@dataclass(frozen=True)
class EasterHoliday:
    """Holiday at a fixed offset (in days) from Western Easter Sunday."""

    name: str
    offset: int

    def in_year(self, year: int) -> Optional[date]:
        return easter(year) + timedelta(days=self.offset)


@dataclass(frozen=True)
class WeekdayHoliday:
    """Holiday on the nth weekday of a month; negative ``nth`` counts from month end."""

    name: str
    month: int
    day_of_week: weekday
    nth: int

    def in_year(self, year: int) -> Optional[date]:
        if self.nth > 0:
            anchor = date(year, self.month, 1)
        else:
            anchor = date(year, self.month, 1) + relativedelta(day=31)
        result = anchor + relativedelta(weekday=self.day_of_week(self.nth))
        if result.month != self.month:
            return None
        return result


NEW_YEARS_DAY = NamedHoliday("New Year's Day", 1, 1)
BERCHTOLDS_DAY = NamedHoliday("Berchtold's Day", 1, 2)
GOOD_FRIDAY = EasterHoliday("Good Friday", -2)
EASTER_MONDAY = EasterHoliday("Easter Monday", 1)
LABOUR_DAY = NamedHoliday("Labour Day", 5, 1)
ASCENSION_DAY = EasterHoliday("Ascension Day", 39)
WHIT_MONDAY = EasterHoliday("Whit Monday", 50)
SWISS_NATIONAL_DAY = NamedHoliday("Swiss National Day", 8, 1)
EARLY_MAY_BANK_HOLIDAY = WeekdayHoliday("Early May Bank Holiday", 5, MO, 1)
SPRING_BANK_HOLIDAY = WeekdayHoliday("Spring Bank Holiday", 5, MO, -1)
SUMMER_BANK_HOLIDAY = WeekdayHoliday("Summer Bank Holiday", 8, MO, -1)
CHRISTMAS_DAY = NamedHoliday("Christmas Day", 12, 25)
BOXING_DAY = NamedHoliday("Boxing Day", 12, 26)

# ECB press release of 14 December 2000
TARGET_RULES = (
    NEW_YEARS_DAY,
    GOOD_FRIDAY,
    EASTER_MONDAY,
    LABOUR_DAY,
    CHRISTMAS_DAY,
    BOXING_DAY,
)

# Swiss money market calendar used for SARON publications
SIX_RULES = (
    NEW_YEARS_DAY,
    BERCHTOLDS_DAY,
    GOOD_FRIDAY,
    EASTER_MONDAY,
    LABOUR_DAY,
    ASCENSION_DAY,
    WHIT_MONDAY,
    SWISS_NATIONAL_DAY,
    CHRISTMAS_DAY,
    BOXING_DAY,
)

# England and Wales bank holidays; weekend holidays are substituted
ENGLAND_RULES = (
    NEW_YEARS_DAY,
    GOOD_FRIDAY,
    EASTER_MONDAY,
    EARLY_MAY_BANK_HOLIDAY,
    SPRING_BANK_HOLIDAY,
    SUMMER_BANK_HOLIDAY,
    CHRISTMAS_DAY,
    BOXING_DAY,
)


def _is_weekend(dt: date) -> bool:
    return dt.weekday() >= 5


def make_holiday_schedule(
    first_year: int,
    last_year: int,
    rules: Iterable,
    substitute: bool = False,
    extra: Iterable[date] = (),
) -> List[date]:
    """
    Enumerate the holidays produced by ``rules`` in [first_year, last_year].

    Args:
        first_year: First calendar year of the schedule
        last_year: Last calendar year of the schedule (inclusive)
        rules: Annual holiday rules
        substitute: Move holidays falling on a weekend to the next weekday
            that is not already a holiday
        extra: One-off holidays added as-is (e.g. royal events)

    Returns:
        Sorted list of holiday dates
    """
    if first_year > last_year:
        raise ValueError(f"first_year {first_year} is after last_year {last_year}")

    rules = tuple(rules)
    holidays = set()
    for year in range(first_year, last_year + 1):
        observed = sorted(
            d for d in (rule.in_year(year) for rule in rules) if d is not None
        )
        for holiday in observed:
            if substitute and _is_weekend(holiday):
                moved = holiday
                while _is_weekend(moved) or moved in holidays or moved in observed:
                    moved += timedelta(days=1)
                logger.debug("Holiday %s substituted to %s", holiday, moved)
                holiday = moved
            holidays.add(holiday)

    holidays.update(extra)
    return sorted(holidays)


def make_holiday_calendar(
    name: str,
    first_year: int,
    last_year: int,
    rules: Iterable,
    substitute: bool = False,
    extra: Iterable[date] = (),
) -> Calendar:
    """Saturday/Sunday weekend calendar closed on the scheduled holidays."""
    holidays = make_holiday_schedule(first_year, last_year, rules, substitute, extra)
    return make_calendar(name, holidays)


def make_six_calendar(first_year: int, last_year: int) -> Calendar:
    """SIX money market calendar over [first_year, last_year]."""
    return make_holiday_calendar("SIX", first_year, last_year, SIX_RULES)
