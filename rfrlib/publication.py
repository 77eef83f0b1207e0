"""
Benchmark-level entry points.

Wire a benchmark configuration to the index and rate builders so that a
caller only supplies resets, a start date and the publication calendar.
"""

import logging
from datetime import date, datetime
from typing import Dict, Union

from rfrlib.benchmarks import BenchmarkConfig, get_benchmark
from rfrlib.compounding.index import (
    make_compounded_index,
    make_compounded_index_rounded,
)
from rfrlib.compounding.rate import make_compounded_rate
from rfrlib.conventions.calendars import Calendar, get_calendar
from rfrlib.conventions.holidays import make_six_calendar
from rfrlib.conventions.types import CalendarType, IndexRounding
from rfrlib.data.base import ResetSource
from rfrlib.timeseries.resets import Resets
from rfrlib.timeseries.series import DateIndexedSeries

logger = logging.getLogger(__name__)

Benchmark = Union[BenchmarkConfig, str]


def _config(benchmark: Benchmark) -> BenchmarkConfig:
    if isinstance(benchmark, str):
        return get_benchmark(benchmark)
    return benchmark


def make_publication_calendar(benchmark: Benchmark, first_year: int, last_year: int) -> Calendar:
    """
    Publication calendar of a benchmark.

    Calendars built from holiday rules (SIX) cover [first_year, last_year];
    QuantLib calendars ignore the year range.
    """
    config = _config(benchmark)
    if config.calendar == CalendarType.SIX:
        return make_six_calendar(first_year, last_year)
    return get_calendar(config.calendar.value)


def load_resets(benchmark: Benchmark, source: ResetSource) -> Resets:
    """Load fixings from ``source`` with the benchmark's day count."""
    config = _config(benchmark)
    return source.load(config.day_count_convention)


def publish_compounded_index(
    benchmark: Benchmark,
    resets: Resets,
    start: Union[date, datetime],
    publication: Calendar,
) -> DateIndexedSeries:
    """Compounded index series as the benchmark administrator publishes it."""
    config = _config(benchmark)
    logger.info("Publishing %s compounded index from %s", config.name, start)

    if config.index_rounding == IndexRounding.EVERY_STEP:
        builder = make_compounded_index_rounded
    else:
        builder = make_compounded_index

    return builder(
        resets,
        start,
        publication,
        decimal_places=config.index_decimal_places,
        starting_value=config.index_starting_value,
    )


def publish_compounded_rate(
    benchmark: Benchmark,
    tenor: str,
    resets: Resets,
    start: Union[date, datetime],
    publication: Calendar,
) -> DateIndexedSeries:
    """Compounded average rate series for one configured tenor."""
    config = _config(benchmark)
    term = config.term(tenor)
    logger.info("Publishing %s %s compounded rate from %s", config.name, term.tenor, start)
    return make_compounded_rate(
        term.tenor,
        resets,
        start,
        term.convention,
        publication,
        decimal_places=config.rate_decimal_places,
    )


def publish_compounded_rates(
    benchmark: Benchmark,
    resets: Resets,
    start: Union[date, datetime],
    publication: Calendar,
) -> Dict[str, DateIndexedSeries]:
    """Compounded average rate series for every configured tenor."""
    config = _config(benchmark)
    return {
        term.tenor: publish_compounded_rate(config, term.tenor, resets, start, publication)
        for term in config.rate_terms
    }
