"""
Overnight rate fixings paired with their day count convention.
"""

from datetime import date, datetime, timedelta
from typing import Union

from rfrlib.conventions.daycount import DayCountConvention
from rfrlib.errors import EmptyInputError, MissingResetError
from rfrlib.timeseries.series import DateIndexedSeries


class Resets:
    """
    Published overnight fixings.

    Values are stored as percentages (1.80 for 1.80%) exactly as published;
    ``value`` converts them to decimals. The day count convention is shared,
    not copied.
    """

    __slots__ = ("_ts", "_dc")

    def __init__(self, ts: DateIndexedSeries, day_count: DayCountConvention):
        self._ts = ts
        self._dc = day_count

    @property
    def time_series(self) -> DateIndexedSeries:
        return self._ts

    @property
    def day_count(self) -> DayCountConvention:
        return self._dc

    def value(self, dt: Union[date, datetime]) -> float:
        """Decimal rate fixed on ``dt``; raises ``MissingResetError`` for gaps."""
        percentage = self._ts.get(dt)
        if percentage is None:
            if isinstance(dt, datetime):
                dt = dt.date()
            raise MissingResetError(dt)
        return percentage / 100.0

    def last_reset_date(self) -> date:
        """Latest date at or before the end of the range with a published value."""
        period = self._ts.period
        dt = period.end
        while self._ts.get(dt) is None:
            if dt == period.start:
                raise EmptyInputError(f"No reset published in {period}")
            dt -= timedelta(days=1)
        return dt

    def __eq__(self, other) -> bool:
        if not isinstance(other, Resets):
            return NotImplemented
        return self._ts == other._ts and self._dc is other._dc

    def __repr__(self) -> str:
        return f"Resets({self._ts!r}, {self._dc})"
