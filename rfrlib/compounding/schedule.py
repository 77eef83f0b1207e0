"""
Decomposition of a coupon period into overnight compounding periods.
"""

import logging

from rfrlib.business_calendar.date_utils import make_overnight_maturity
from rfrlib.conventions.calendars import Calendar
from rfrlib.errors import EmptyInputError
from rfrlib.schedule.core import CompoundingPeriod, CompoundingSchedule, DateRange

logger = logging.getLogger(__name__)


def make_compounding_schedule(
    coupon_period: DateRange, publication: Calendar
) -> CompoundingSchedule:
    """
    Split a coupon period into consecutive overnight periods.

    Each period runs from a fixing date to the next publication business day
    and uses the rate fixed on its first day. A final period that would run
    past the coupon maturity is cut at the maturity.

    Args:
        coupon_period: Coupon period [effective, maturity]
        publication: Calendar on which the overnight rate is published

    Returns:
        Compounding schedule covering the coupon period

    Raises:
        EmptyInputError: If the coupon period has no length
    """
    if coupon_period.start == coupon_period.end:
        raise EmptyInputError(f"Coupon period {coupon_period} has no overnight periods")

    periods = []
    effective = coupon_period.start
    while effective < coupon_period.end:
        maturity = min(make_overnight_maturity(effective, publication), coupon_period.end)
        periods.append(CompoundingPeriod(DateRange(effective, maturity), effective))
        effective = maturity

    logger.debug("Compounding schedule %s has %s periods", coupon_period, len(periods))
    return CompoundingSchedule(tuple(periods))
