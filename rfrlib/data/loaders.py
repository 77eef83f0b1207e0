"""
Concrete reset sources.
"""

import logging
import os
from pathlib import Path
from typing import Optional, Union

import pandas as pd

from rfrlib.conventions.calendars import Calendar
from rfrlib.errors import EmptyInputError
from rfrlib.timeseries.series import DateIndexedSeries

from .base import BaseResetSource
from .frames import series_from_frame

logger = logging.getLogger(__name__)

DATA_DIR_ENV = "RFRLIB_DATA_DIR"


def resolve_data_path(path: Union[str, Path]) -> Path:
    """Resolve a relative path against ``$RFRLIB_DATA_DIR`` when it is set."""
    path = Path(path)
    data_dir = os.getenv(DATA_DIR_ENV)
    if not path.is_absolute() and data_dir:
        return Path(data_dir) / path
    return path


class CSVResetSource(BaseResetSource):
    """
    Load fixings from a CSV file published by a benchmark administrator.

    Examples of layouts handled: the Bank of England database export
    (``Date``/``IUDSOIA``), the ECB data portal (``Period``/rate column) and
    the SIX download (``;``-separated ``Date``/``SARON``).
    """

    def __init__(
        self,
        path: Union[str, Path],
        date_column: str,
        value_column: str,
        separator: str = ",",
        date_format: Optional[str] = None,
        calendar: Optional[Calendar] = None,
    ):
        """
        Initialize CSV reset source.

        Args:
            path: CSV file (relative paths resolve against $RFRLIB_DATA_DIR)
            date_column: Header of the date column
            value_column: Header of the fixing column
            separator: Field separator
            date_format: strptime format of the dates (inferred when None)
            calendar: Publication calendar used to flag fixings published on
                non-business days
        """
        self.path = resolve_data_path(path)
        self.date_column = date_column
        self.value_column = value_column
        self.separator = separator
        self.date_format = date_format
        self.calendar = calendar

    def load_series(self) -> DateIndexedSeries:
        if not self.path.exists():
            raise FileNotFoundError(f"Reset file not found: {self.path}")

        try:
            frame = pd.read_csv(self.path, sep=self.separator)
        except pd.errors.EmptyDataError as exc:
            raise EmptyInputError(f"Reset file {self.path} is empty") from exc
        if frame.empty:
            raise EmptyInputError(f"Reset file {self.path} has no rows")

        ts = series_from_frame(frame, self.date_column, self.value_column, self.date_format)

        if self.calendar is not None:
            off_days = [dt for dt, _ in ts.items() if not self.calendar.is_business_day(dt)]
            if off_days:
                logger.warning(
                    "%s fixings in %s fall on non-business days of %s (first: %s)",
                    len(off_days),
                    self.path.name,
                    self.calendar.name,
                    off_days[0],
                )
        return ts
