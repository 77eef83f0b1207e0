"""Compounded risk-free-rate publications.

This package computes compounded overnight-rate indices and compounded
average rates the way benchmark administrators publish them.

Key modules:
- timeseries: date-indexed series and reset fixings
- business_calendar: overnight maturities, term arithmetic and the inverse
  Modified Following start-date resolver
- compounding: compounding schedules, the compounder and index/rate builders
- conventions: calendars, holiday rules, day counts and adjustment rules
- data: reset sources and pandas conversion
- benchmarks / publication: per-benchmark configuration and entry points
"""

from rfrlib.publication import (
    publish_compounded_index,
    publish_compounded_rate,
    publish_compounded_rates,
)

__version__ = "1.0.0"

__all__ = [
    "__version__",
    "publish_compounded_index",
    "publish_compounded_rate",
    "publish_compounded_rates",
]
