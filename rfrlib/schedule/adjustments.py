"""
Date adjustment functions for compounding schedules.
"""

from datetime import date, datetime, timedelta
from typing import Union

from dateutil.relativedelta import relativedelta

from rfrlib.conventions.calendars import Calendar
from rfrlib.conventions.types import BusinessDayAdjustment


# A year of closed days means the calendar has no business days at all
MAX_ROLL_DAYS = 366


def _roll(dt: date, calendar: Calendar, step: int) -> date:
    """Step one calendar day at a time until ``dt`` is a business day."""
    start = dt
    while not calendar.is_business_day(dt):
        dt += timedelta(days=step)
        if abs((dt - start).days) > MAX_ROLL_DAYS:
            raise ValueError(
                f"No business day within {MAX_ROLL_DAYS} days of {start} on {calendar.name}"
            )
    return dt


def adjust_date(
    dt: Union[date, datetime], adjustment: BusinessDayAdjustment, calendar: Calendar
) -> date:
    """Apply business day adjustment to a date."""
    if isinstance(dt, datetime):
        dt = dt.date()

    if adjustment == BusinessDayAdjustment.NO_ADJUSTMENT:
        return dt
    if adjustment == BusinessDayAdjustment.FOLLOWING:
        return _roll(dt, calendar, 1)
    if adjustment == BusinessDayAdjustment.PRECEDING:
        return _roll(dt, calendar, -1)

    if adjustment == BusinessDayAdjustment.MODIFIED_FOLLOWING:
        step = 1
    elif adjustment == BusinessDayAdjustment.MODIFIED_PRECEDING:
        step = -1
    else:
        raise ValueError(f"Unknown business day adjustment: {adjustment}")

    # Modified rules never leave the month; roll the other way instead
    adjusted = _roll(dt, calendar, step)
    if adjusted.month != dt.month:
        adjusted = _roll(dt, calendar, -step)
    return adjusted


def get_month_end(year: int, month: int) -> date:
    """Get the last calendar day of a given month."""
    if month == 12:
        next_month = date(year + 1, 1, 1)
    else:
        next_month = date(year, month + 1, 1)

    return next_month - timedelta(days=1)


def add_months(dt: Union[date, datetime], months: int) -> date:
    """
    Add (or subtract) calendar months to a date.

    A day that does not exist in the target month (e.g. 31 Jan + 1M) is
    clamped to the last day of that month. Unlike a swap end-of-month roll, a
    month-end start date does not stick to month end (28 Feb + 1M = 28 Mar).
    """
    if isinstance(dt, datetime):
        dt = dt.date()
    return dt + relativedelta(months=months)
