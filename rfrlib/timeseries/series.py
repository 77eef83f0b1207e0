"""
Dense daily time series keyed by calendar date.
"""

from datetime import date, datetime, timedelta
from typing import Generic, Iterator, List, Optional, Tuple, TypeVar, Union

from rfrlib.errors import RangeError
from rfrlib.schedule.core import DateRange

T = TypeVar("T")


class DateIndexedSeries(Generic[T]):
    """
    Optional values stored for every calendar day of an inclusive date range.

    Storage is pre-allocated for the whole range on construction and never
    resized; a slot holds ``None`` until it is set.
    """

    __slots__ = ("_period", "_observations")

    def __init__(self, period: DateRange):
        self._period = period
        self._observations: List[Optional[T]] = [None] * (period.days + 1)

    @property
    def period(self) -> DateRange:
        return self._period

    def _index(self, dt: Union[date, datetime]) -> int:
        if isinstance(dt, datetime):
            dt = dt.date()
        if dt < self._period.start or dt > self._period.end:
            raise RangeError(dt, self._period.start, self._period.end)
        return (dt - self._period.start).days

    def get(self, dt: Union[date, datetime]) -> Optional[T]:
        """Value stored for ``dt``, ``None`` when the slot is empty."""
        return self._observations[self._index(dt)]

    def set(self, dt: Union[date, datetime], value: Optional[T]) -> None:
        """Replace the value stored for ``dt``."""
        self._observations[self._index(dt)] = value

    __getitem__ = get
    __setitem__ = set

    def __len__(self) -> int:
        return len(self._observations)

    def dates(self) -> Iterator[date]:
        """Every calendar date of the range, ascending."""
        for offset in range(len(self._observations)):
            yield self._period.start + timedelta(days=offset)

    def items(self) -> Iterator[Tuple[date, T]]:
        """(date, value) pairs for the populated slots, ascending."""
        for dt, value in zip(self.dates(), self._observations):
            if value is not None:
                yield dt, value

    def __eq__(self, other) -> bool:
        if not isinstance(other, DateIndexedSeries):
            return NotImplemented
        return (
            self._period == other._period
            and self._observations == other._observations
        )

    def __repr__(self) -> str:
        populated = sum(value is not None for value in self._observations)
        return f"DateIndexedSeries({self._period}, populated={populated})"
