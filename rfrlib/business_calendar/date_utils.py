"""
Date calculation utilities for overnight rate publications.

Provides tenor arithmetic and the derivation of reset maturities and
effective dates from a publication calendar.
"""

from datetime import date, datetime, timedelta
from typing import Protocol, Union, runtime_checkable

from rfrlib.conventions.calendars import Calendar
from rfrlib.conventions.types import BusinessDayAdjustment
from rfrlib.schedule.adjustments import add_months


@runtime_checkable
class BusinessDayConvention(Protocol):
    """Anything that maps a date onto a business day of a calendar."""

    def adjust(self, dt: Union[date, datetime], calendar: Calendar) -> date:
        ...


def _normalize_tenor(tenor: str) -> str:
    return tenor.upper().strip()


def tenor_to_months(tenor: str) -> int:
    """Convert tenor string (e.g., '3M', '1Y') to number of months."""
    t = _normalize_tenor(tenor)
    if t.endswith("M"):
        return int(t[:-1])
    if t.endswith("Y"):
        return int(t[:-1]) * 12
    raise ValueError(f"Unsupported tenor: {tenor}")


def tenor_to_days(tenor: str) -> int:
    """Convert short tenor string (e.g., '1W', '7D') to number of days."""
    t = _normalize_tenor(tenor)
    if t.endswith("D"):
        return int(t[:-1])
    if t.endswith("W"):
        return int(t[:-1]) * 7
    raise ValueError(f"Unsupported short tenor: {tenor}")


def is_month_tenor(tenor: str) -> bool:
    return _normalize_tenor(tenor).endswith(("M", "Y"))


def add_tenor(dt: Union[date, datetime], tenor: str, sign: int = 1) -> date:
    """
    Shift a date by a tenor without any business day adjustment.

    Month and year tenors use calendar-month arithmetic, clamping to the last
    valid day of the target month; day and week tenors are plain day counts.
    """
    if isinstance(dt, datetime):
        dt = dt.date()
    if sign not in (1, -1):
        raise ValueError(f"sign must be 1 or -1, got {sign}")

    if is_month_tenor(tenor):
        return add_months(dt, sign * tenor_to_months(tenor))
    return dt + timedelta(days=sign * tenor_to_days(tenor))


def make_overnight_maturity(effective: Union[date, datetime], publication: Calendar) -> date:
    """Maturity of an overnight reset: the next business day after ``effective``."""
    if isinstance(effective, datetime):
        effective = effective.date()
    return BusinessDayAdjustment.FOLLOWING.adjust(effective + timedelta(days=1), publication)


def make_maturity(
    effective: Union[date, datetime],
    tenor: str,
    convention: BusinessDayConvention,
    publication: Calendar,
) -> date:
    """Maturity of a term period starting on ``effective``."""
    return convention.adjust(add_tenor(effective, tenor), publication)


def make_effective(
    maturity: Union[date, datetime],
    tenor: str,
    convention: BusinessDayConvention,
    publication: Calendar,
) -> date:
    """
    Effective (start) date of a term period ending on ``maturity``.

    Note that 1W periods are normally adjusted with Preceding while month
    periods use ModifiedPreceding or an InverseModifiedFollowing built for
    this maturity.
    """
    return convention.adjust(add_tenor(maturity, tenor, sign=-1), publication)
