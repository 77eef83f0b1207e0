"""
Core data structures for compounding schedules.
"""

from dataclasses import dataclass
from datetime import date
from typing import Iterator, Tuple

from rfrlib.errors import EmptyInputError


@dataclass(frozen=True)
class DateRange:
    """Inclusive [start, end] range of calendar dates."""

    start: date
    end: date

    def __post_init__(self):
        if self.start > self.end:
            raise ValueError(f"Range start {self.start} is after end {self.end}")

    @property
    def days(self) -> int:
        """Number of calendar days from start to end."""
        return (self.end - self.start).days

    def __contains__(self, dt: date) -> bool:
        return self.start <= dt <= self.end

    def __str__(self) -> str:
        return f"[{self.start}, {self.end}]"


@dataclass(frozen=True)
class CompoundingPeriod:
    """An overnight accrual period and the fixing date whose rate applies to it."""

    period: DateRange
    fixing_date: date

    @property
    def effective(self) -> date:
        return self.period.start

    @property
    def maturity(self) -> date:
        return self.period.end


@dataclass(frozen=True)
class CompoundingSchedule:
    """
    Contiguous sequence of compounding periods covering one coupon period.

    Attributes:
        periods: Overnight periods, each starting where the previous one ends
    """

    periods: Tuple[CompoundingPeriod, ...]

    def __post_init__(self):
        if not self.periods:
            raise EmptyInputError("Compounding schedule must contain at least one period")
        for previous, current in zip(self.periods, self.periods[1:]):
            if previous.maturity != current.effective:
                raise ValueError(
                    f"Compounding periods {previous.period} and {current.period} "
                    "are not contiguous"
                )

    @property
    def effective(self) -> date:
        return self.periods[0].effective

    @property
    def maturity(self) -> date:
        return self.periods[-1].maturity

    @property
    def period(self) -> DateRange:
        """Full coupon period covered by the schedule."""
        return DateRange(self.effective, self.maturity)

    def __len__(self) -> int:
        return len(self.periods)

    def __iter__(self) -> Iterator[CompoundingPeriod]:
        return iter(self.periods)

    def __getitem__(self, index: int) -> CompoundingPeriod:
        return self.periods[index]
