"""
Publication conventions of the supported overnight benchmarks.

Each benchmark fixes the accrual basis, the publication calendar, the index
base and rounding, and the compounded-rate tenors with the convention that
determines their start dates.
"""

from dataclasses import dataclass
from typing import Tuple, Type, Union

from rfrlib.business_calendar.inverse import InverseModifiedFollowing
from rfrlib.conventions.daycount import DayCountConvention, get_day_count_convention
from rfrlib.conventions.types import (
    BusinessDayAdjustment,
    CalendarType,
    IndexRounding,
    ReferenceRate,
)


@dataclass(frozen=True)
class RateTerm:
    """A published compounded-rate tenor and its start-date convention.

    Attributes:
        tenor: Window length, e.g. '1W', '3M'
        convention: A business day adjustment, or ``InverseModifiedFollowing``
            (the class) to resolve start dates per maturity
    """

    tenor: str
    convention: Union[BusinessDayAdjustment, Type[InverseModifiedFollowing]]


@dataclass(frozen=True)
class BenchmarkConfig:
    """Publication conventions for one overnight benchmark."""

    reference_rate: ReferenceRate
    day_count: str
    calendar: CalendarType
    index_decimal_places: int
    index_starting_value: float
    index_rounding: IndexRounding
    rate_decimal_places: int
    rate_terms: Tuple[RateTerm, ...] = ()

    @property
    def name(self) -> str:
        return self.reference_rate.value

    @property
    def day_count_convention(self) -> DayCountConvention:
        return get_day_count_convention(self.day_count)

    def term(self, tenor: str) -> RateTerm:
        """Configured term for ``tenor``."""
        for term in self.rate_terms:
            if term.tenor == tenor.upper().strip():
                return term
        raise ValueError(
            f"{self.name} publishes no {tenor} rate. "
            f"Available: {[term.tenor for term in self.rate_terms]}"
        )


SOFR = BenchmarkConfig(
    reference_rate=ReferenceRate.SOFR,
    day_count="ACT/360",
    calendar=CalendarType.SOFR,
    index_decimal_places=8,
    index_starting_value=1.0,
    index_rounding=IndexRounding.PUBLISHED_ONLY,
    rate_decimal_places=5,
)

ESTR = BenchmarkConfig(
    reference_rate=ReferenceRate.ESTR,
    day_count="ACT/360",
    calendar=CalendarType.TARGET,
    index_decimal_places=8,
    index_starting_value=100.0,
    index_rounding=IndexRounding.PUBLISHED_ONLY,
    rate_decimal_places=5,
    rate_terms=(
        RateTerm("1W", BusinessDayAdjustment.PRECEDING),
        RateTerm("1M", BusinessDayAdjustment.MODIFIED_PRECEDING),
        RateTerm("3M", BusinessDayAdjustment.MODIFIED_PRECEDING),
        RateTerm("6M", BusinessDayAdjustment.MODIFIED_PRECEDING),
        RateTerm("12M", BusinessDayAdjustment.MODIFIED_PRECEDING),
    ),
)

SONIA = BenchmarkConfig(
    reference_rate=ReferenceRate.SONIA,
    day_count="ACT/365F",
    calendar=CalendarType.UK,
    index_decimal_places=8,
    index_starting_value=100.0,
    index_rounding=IndexRounding.PUBLISHED_ONLY,
    rate_decimal_places=4,
)

SARON = BenchmarkConfig(
    reference_rate=ReferenceRate.SARON,
    day_count="ACT/360",
    calendar=CalendarType.SIX,
    index_decimal_places=6,
    index_starting_value=10_000.0,
    index_rounding=IndexRounding.EVERY_STEP,
    rate_decimal_places=4,
    rate_terms=(
        RateTerm("1W", BusinessDayAdjustment.PRECEDING),
        RateTerm("1M", InverseModifiedFollowing),
        RateTerm("3M", InverseModifiedFollowing),
        RateTerm("6M", InverseModifiedFollowing),
        RateTerm("12M", InverseModifiedFollowing),
    ),
)

BENCHMARKS = {
    "SOFR": SOFR,
    "ESTR": ESTR,
    "EUROSTR": ESTR,
    "SONIA": SONIA,
    "SARON": SARON,
}


def get_benchmark(name: str) -> BenchmarkConfig:
    """Get a benchmark configuration by name."""
    name_upper = name.upper().replace("€", "EURO")
    if name_upper not in BENCHMARKS:
        raise ValueError(
            f"Unknown benchmark: {name}. Available: {list(BENCHMARKS.keys())}"
        )
    return BENCHMARKS[name_upper]
