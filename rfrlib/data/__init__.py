"""
Reset data loading and pandas conversion.
"""

from .base import BaseResetSource, ResetSource
from .frames import series_from_frame, to_pandas
from .loaders import CSVResetSource, resolve_data_path

__all__ = [
    "ResetSource",
    "BaseResetSource",
    "CSVResetSource",
    "resolve_data_path",
    "series_from_frame",
    "to_pandas",
]
