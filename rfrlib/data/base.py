"""
Base abstractions for reset data loading.
"""

from abc import ABC, abstractmethod
from typing import Protocol, runtime_checkable

from rfrlib.conventions.daycount import DayCountConvention
from rfrlib.timeseries.resets import Resets
from rfrlib.timeseries.series import DateIndexedSeries


@runtime_checkable
class ResetSource(Protocol):
    """
    Protocol for sources of published overnight fixings.

    Implementations read from files, databases or APIs and return the
    fixings in percent exactly as published.
    """

    def load_series(self) -> DateIndexedSeries:
        """Load the published observations."""
        ...

    def load(self, day_count: DayCountConvention) -> Resets:
        """Load the observations as resets accruing on ``day_count``."""
        ...


class BaseResetSource(ABC):
    """Abstract base class for reset sources."""

    @abstractmethod
    def load_series(self) -> DateIndexedSeries:
        """Load the published observations (to be implemented by subclasses)."""
        pass

    def load(self, day_count: DayCountConvention) -> Resets:
        return Resets(self.load_series(), day_count)
