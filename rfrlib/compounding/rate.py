"""
Compounded average rate builder.
"""

import logging
from datetime import date, datetime
from typing import Type, Union

from rfrlib.business_calendar.date_utils import (
    BusinessDayConvention,
    make_effective,
    make_overnight_maturity,
)
from rfrlib.compounding.compounder import compound
from rfrlib.compounding.rounding import round_half_away
from rfrlib.compounding.schedule import make_compounding_schedule
from rfrlib.conventions.calendars import Calendar
from rfrlib.errors import EmptyInputError
from rfrlib.schedule.core import DateRange
from rfrlib.timeseries.resets import Resets
from rfrlib.timeseries.series import DateIndexedSeries

logger = logging.getLogger(__name__)

DEFAULT_DECIMAL_PLACES = 4

# A convention instance, or a class instantiated per maturity as cls(maturity, tenor)
ConventionLike = Union[BusinessDayConvention, Type]


def _convention_for(convention: ConventionLike, maturity: date, tenor: str) -> BusinessDayConvention:
    if isinstance(convention, type):
        return convention(maturity, tenor)
    return convention


def make_compounded_rate(
    tenor: str,
    resets: Resets,
    start: Union[date, datetime],
    convention: ConventionLike,
    publication: Calendar,
    decimal_places: int = DEFAULT_DECIMAL_PLACES,
) -> DateIndexedSeries:
    """
    Compounded average rates over a rolling window of one tenor.

    For every overnight maturity ``d`` of a reset from ``start`` to the last
    published reset, the window ``[make_effective(d, tenor), d]`` is
    compounded and the annualised rate is published in percent at ``d``.
    Windows starting before ``start`` are not published.

    Args:
        tenor: Window length, e.g. '1W', '1M', '3M'
        resets: Overnight fixings (percent) with their day count
        start: First date whose reset may be used
        convention: Start-date convention; pass ``InverseModifiedFollowing``
            (the class) to build one per maturity
        publication: Calendar on which rates are published
        decimal_places: Decimal places of the published rate

    Returns:
        Series over [start, maturity of last reset] with one rate per window
    """
    if isinstance(start, datetime):
        start = start.date()
    last_reset = resets.last_reset_date()
    if start > last_reset:
        raise EmptyInputError(
            f"No reset published between {start} and the last reset {last_reset}"
        )

    period = DateRange(start, make_overnight_maturity(last_reset, publication))
    published = DateIndexedSeries(period)

    count = 0
    fixing = start
    while fixing <= last_reset:
        maturity = make_overnight_maturity(fixing, publication)
        fixing = maturity

        effective = make_effective(
            maturity, tenor, _convention_for(convention, maturity, tenor), publication
        )
        if effective < start:
            logger.debug("Skipping %s %s window starting %s", tenor, maturity, effective)
            continue

        schedule = make_compounding_schedule(DateRange(effective, maturity), publication)
        rate = compound(schedule, resets) * 100.0
        published[maturity] = round_half_away(rate, decimal_places)
        count += 1

    logger.info("Compounded %s rate over %s: %s publications", tenor, period, count)
    return published
