"""
Daily compounding of overnight rates over a compounding schedule.
"""

from rfrlib.schedule.core import CompoundingSchedule
from rfrlib.timeseries.resets import Resets


def accrual_factor(schedule: CompoundingSchedule, resets: Resets) -> float:
    """Growth of one unit over the schedule: prod(1 + r_i * tau_i)."""
    day_count = resets.day_count
    c = 1.0
    for p in schedule:
        c *= 1.0 + resets.value(p.fixing_date) * day_count.fraction(p.period)
    return c


def compound(schedule: CompoundingSchedule, resets: Resets) -> float:
    """
    Compounded rate over the schedule, annualised as a simple rate.

    Returns a decimal rate (0.018 for 1.8%). No rounding is applied.
    """
    full_period = resets.day_count.fraction(schedule.period)
    return (accrual_factor(schedule, resets) - 1.0) / full_period
