"""
Inverse Modified Following start-date resolution.

SARON compounded rates are defined by their end date. The start date is the
business day from which Modified Following term arithmetic reproduces that
end date. Several start dates can map onto the same end date, so the SIX
rules pick one of them:

* If the end date is the last business day of a month, the start date is the
  last business day of the start month.
* If a single start date maps onto the end date, it is used.
* With an odd number of candidates the middle one is used; with an even
  number the earlier of the two middle ones.
* If no candidate exists (the calculated start date is a non-business day or
  does not exist, e.g. 30 February), Modified Preceding is applied to it.

A start month without any business day raises ``ResolverExhaustedError``.
"""

import logging
from datetime import date, datetime, timedelta
from typing import List, Sequence, Union

from rfrlib.business_calendar.date_utils import make_maturity
from rfrlib.conventions.calendars import Calendar
from rfrlib.conventions.types import BusinessDayAdjustment
from rfrlib.errors import ResolverExhaustedError
from rfrlib.schedule.adjustments import get_month_end

logger = logging.getLogger(__name__)

# Month length and weekend/holiday rolls keep every candidate within this many
# calendar days of the calculated start date.
SEARCH_WINDOW_DAYS = 4


def middle(candidates: Sequence[date]) -> date:
    """Middle candidate; the earlier of the two middle ones for an even count."""
    if not candidates:
        raise ValueError("candidates must not be empty")
    if len(candidates) % 2 != 0:
        return candidates[len(candidates) // 2]
    return candidates[len(candidates) // 2 - 1]


class InverseModifiedFollowing:
    """
    Business day convention recovering a start date for one maturity and term.

    An instance is bound to a single ``(maturity, tenor)`` pair and is meant to
    be passed to ``make_effective`` for that same pair.
    """

    __slots__ = ("_maturity", "_tenor")

    def __init__(self, maturity: Union[date, datetime], tenor: str):
        if isinstance(maturity, datetime):
            maturity = maturity.date()
        self._maturity = maturity
        self._tenor = tenor

    @property
    def maturity(self) -> date:
        return self._maturity

    @property
    def tenor(self) -> str:
        return self._tenor

    def candidates(self, dt: date, calendar: Calendar) -> List[date]:
        """Business days near ``dt`` that roll forward onto the maturity, ascending."""
        window_start = dt - timedelta(days=SEARCH_WINDOW_DAYS)
        window_end = dt + timedelta(days=SEARCH_WINDOW_DAYS)

        return [
            d
            for d in calendar.business_days(window_start, window_end)
            if make_maturity(
                d, self._tenor, BusinessDayAdjustment.MODIFIED_FOLLOWING, calendar
            )
            == self._maturity
        ]

    def adjust(self, dt: Union[date, datetime], calendar: Calendar) -> date:
        """Resolve the start date for a calculated (unadjusted) start date ``dt``."""
        if isinstance(dt, datetime):
            dt = dt.date()

        if self._is_month_end_maturity(calendar):
            start = self._month_end_start(dt, calendar)
            logger.debug(
                "Maturity %s is a month-end business day, start moved to %s",
                self._maturity,
                start,
            )
            return start

        found = self.candidates(dt, calendar)
        logger.debug(
            "Start date candidates for maturity %s (%s) around %s: %s",
            self._maturity,
            self._tenor,
            dt,
            found,
        )

        if not found:
            start = self._modified_preceding(dt, calendar)
            logger.debug("No candidate for %s, Modified Preceding gives %s", dt, start)
            return start

        if len(found) == 1:
            return found[0]
        return middle(found)

    def _is_month_end_maturity(self, calendar: Calendar) -> bool:
        try:
            return calendar.is_last_business_day(self._maturity)
        except RuntimeError as exc:
            raise ResolverExhaustedError(
                self._maturity, self._tenor, "calendar has no month-end business day"
            ) from exc

    def _month_end_start(self, dt: date, calendar: Calendar) -> date:
        try:
            start = calendar.last_business_day(dt.year, dt.month)
        except RuntimeError as exc:
            raise ResolverExhaustedError(
                self._maturity, self._tenor, f"no business day up to the end of {dt:%Y-%m}"
            ) from exc
        if (start.year, start.month) != (dt.year, dt.month):
            raise ResolverExhaustedError(
                self._maturity, self._tenor, f"no business day in {dt:%Y-%m}"
            )
        return start

    def _modified_preceding(self, dt: date, calendar: Calendar) -> date:
        """Modified Preceding, searching no further than the month of ``dt``."""
        before = calendar.business_days(dt.replace(day=1), dt)
        if before:
            return before[-1]
        after = calendar.business_days(dt, get_month_end(dt.year, dt.month))
        if after:
            return after[0]
        raise ResolverExhaustedError(
            self._maturity, self._tenor, f"no business day in {dt:%Y-%m}"
        )

    def __eq__(self, other) -> bool:
        if not isinstance(other, InverseModifiedFollowing):
            return NotImplemented
        return (self._maturity, self._tenor) == (other._maturity, other._tenor)

    def __hash__(self) -> int:
        return hash((self._maturity, self._tenor))

    def __repr__(self) -> str:
        return f"InverseModifiedFollowing({self._maturity!s}, {self._tenor!r})"
