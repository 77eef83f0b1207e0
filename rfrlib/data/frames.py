"""
Conversion between pandas objects and date-indexed series.
"""

import logging
from typing import Optional

import pandas as pd

from rfrlib.errors import EmptyInputError
from rfrlib.schedule.core import DateRange
from rfrlib.timeseries.series import DateIndexedSeries

logger = logging.getLogger(__name__)


def series_from_frame(
    frame: pd.DataFrame,
    date_column: str,
    value_column: str,
    date_format: Optional[str] = None,
) -> DateIndexedSeries:
    """
    Build a daily series of floats from two columns of a DataFrame.

    Rows whose value is missing or not numeric are dropped. When a date
    appears more than once the last row wins.

    Args:
        frame: Source data
        date_column: Column holding observation dates
        value_column: Column holding observations
        date_format: strptime format of the dates (inferred when None)

    Returns:
        Series spanning the first to the last observation date
    """
    for column in (date_column, value_column):
        if column not in frame.columns:
            raise ValueError(
                f"Column {column!r} not found. Available: {list(frame.columns)}"
            )

    dates = pd.to_datetime(frame[date_column], format=date_format)
    values = pd.to_numeric(frame[value_column], errors="coerce")
    observations = pd.Series(values.to_numpy(), index=dates.dt.date)

    missing = int(observations.isna().sum())
    if missing:
        logger.warning("Dropping %s rows without a numeric %r", missing, value_column)
    observations = observations.dropna()

    duplicated = observations.index.duplicated(keep="last")
    if duplicated.any():
        logger.warning("Dropping %s duplicated dates, keeping the last value", int(duplicated.sum()))
        observations = observations[~duplicated]

    if observations.empty:
        raise EmptyInputError(f"No observations found in column {value_column!r}")

    observations = observations.sort_index()
    ts = DateIndexedSeries(DateRange(observations.index[0], observations.index[-1]))
    for dt, value in observations.items():
        ts[dt] = float(value)

    logger.info("Loaded %s observations over %s", len(observations), ts.period)
    return ts


def to_pandas(series: DateIndexedSeries, name: Optional[str] = None) -> pd.Series:
    """Populated slots of a series as a pandas Series indexed by date."""
    dates, values = [], []
    for dt, value in series.items():
        dates.append(dt)
        values.append(value)
    return pd.Series(values, index=pd.Index(dates, name="date"), name=name, dtype="float64")
