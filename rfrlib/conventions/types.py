"""
Basic types and enums used across the compounding engine.
"""

from datetime import date, datetime
from enum import Enum
from typing import Union


class BusinessDayAdjustment(Enum):
    """Business day adjustment rules."""

    NO_ADJUSTMENT = "NO_ADJUSTMENT"
    FOLLOWING = "FOLLOWING"
    MODIFIED_FOLLOWING = "MODIFIED_FOLLOWING"
    PRECEDING = "PRECEDING"
    MODIFIED_PRECEDING = "MODIFIED_PRECEDING"

    def adjust(self, dt: Union[date, datetime], calendar) -> date:
        """Adjust a date to a business day of ``calendar`` under this rule."""
        from rfrlib.schedule.adjustments import adjust_date

        return adjust_date(dt, self, calendar)


class CalendarType(Enum):
    """Predefined publication calendars."""

    TARGET = "TARGET"
    WEEKEND = "WEEKEND"
    UK = "UK"
    SOFR = "SOFR"
    SIX = "SIX"


class ReferenceRate(Enum):
    """Overnight reference rates with published compounded products."""

    ESTR = "ESTR"
    SOFR = "SOFR"
    SONIA = "SONIA"
    SARON = "SARON"


class IndexRounding(Enum):
    """How a compounded index applies its rounding."""

    PUBLISHED_ONLY = "PUBLISHED_ONLY"  # running index kept at full precision
    EVERY_STEP = "EVERY_STEP"  # running index rounded after every period
