from .series import DateIndexedSeries
from .resets import Resets
