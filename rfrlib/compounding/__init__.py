"""Compounding schedules, the compounder and the index/rate builders."""

from .compounder import accrual_factor, compound
from .index import make_compounded_index, make_compounded_index_rounded
from .rate import make_compounded_rate
from .rounding import round_half_away
from .schedule import make_compounding_schedule

__all__ = [
    "accrual_factor",
    "compound",
    "make_compounded_index",
    "make_compounded_index_rounded",
    "make_compounded_rate",
    "make_compounding_schedule",
    "round_half_away",
]
