"""
Compounded index builders.

Two publication modes exist and produce different figures:

* ``make_compounded_index`` keeps the running index at full precision and
  rounds only the published value (SOFR, ESTR and SONIA indices).
* ``make_compounded_index_rounded`` rounds the running index after every
  overnight period and keeps compounding the rounded value (SARON index).
"""

import logging
from datetime import date, datetime
from typing import Iterator, Tuple, Union

from rfrlib.business_calendar.date_utils import make_overnight_maturity
from rfrlib.compounding.rounding import round_half_away
from rfrlib.conventions.calendars import Calendar
from rfrlib.errors import EmptyInputError
from rfrlib.schedule.core import DateRange
from rfrlib.timeseries.resets import Resets
from rfrlib.timeseries.series import DateIndexedSeries

logger = logging.getLogger(__name__)

DEFAULT_DECIMAL_PLACES = 8
DEFAULT_STARTING_VALUE = 100.0


def _overnight_growth(
    resets: Resets, start: date, last_reset: date, publication: Calendar
) -> Iterator[Tuple[date, float]]:
    """Yield (maturity, 1 + r * tau) for every overnight period from ``start``."""
    day_count = resets.day_count
    effective = start
    while effective <= last_reset:
        maturity = make_overnight_maturity(effective, publication)
        tau = day_count.fraction(DateRange(effective, maturity))
        yield maturity, 1.0 + resets.value(effective) * tau
        effective = maturity


def _index_range(
    resets: Resets, start: Union[date, datetime], publication: Calendar
) -> Tuple[date, date, DateRange]:
    if isinstance(start, datetime):
        start = start.date()
    last_reset = resets.last_reset_date()
    if start > last_reset:
        raise EmptyInputError(
            f"No reset published between {start} and the last reset {last_reset}"
        )
    return start, last_reset, DateRange(start, make_overnight_maturity(last_reset, publication))


def make_compounded_index(
    resets: Resets,
    start: Union[date, datetime],
    publication: Calendar,
    decimal_places: int = DEFAULT_DECIMAL_PLACES,
    starting_value: float = DEFAULT_STARTING_VALUE,
) -> DateIndexedSeries:
    """
    Compounded index published with rounding applied to the published value only.

    The index equals ``starting_value`` on ``start`` and is advanced one
    overnight period at a time up to the maturity of the last published reset.

    Args:
        resets: Overnight fixings (percent) with their day count
        start: Index start date (base date)
        publication: Calendar on which the index is published
        decimal_places: Decimal places of the published index
        starting_value: Index level on the start date

    Returns:
        Series over [start, maturity of last reset] with values on publication days
    """
    start, last_reset, period = _index_range(resets, start, publication)

    published = DateIndexedSeries(period)
    published[start] = round_half_away(starting_value, decimal_places)

    index = starting_value
    count = 0
    for maturity, growth in _overnight_growth(resets, start, last_reset, publication):
        index *= growth
        published[maturity] = round_half_away(index, decimal_places)
        count += 1

    logger.info("Compounded index over %s: %s publications", period, count + 1)
    return published


def make_compounded_index_rounded(
    resets: Resets,
    start: Union[date, datetime],
    publication: Calendar,
    decimal_places: int = DEFAULT_DECIMAL_PLACES,
    starting_value: float = DEFAULT_STARTING_VALUE,
) -> DateIndexedSeries:
    """
    Compounded index rounded after every overnight period.

    Identical walk to ``make_compounded_index`` except that the running index
    is replaced by its rounded value before compounding the next period.
    """
    start, last_reset, period = _index_range(resets, start, publication)

    published = DateIndexedSeries(period)
    index = round_half_away(starting_value, decimal_places)
    published[start] = index

    count = 0
    for maturity, growth in _overnight_growth(resets, start, last_reset, publication):
        index = round_half_away(index * growth, decimal_places)
        published[maturity] = index
        count += 1

    logger.info("Rounded compounded index over %s: %s publications", period, count + 1)
    return published
