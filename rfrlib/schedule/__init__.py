# Re-export schedule components
from .adjustments import add_months, adjust_date, get_month_end
from .core import CompoundingPeriod, CompoundingSchedule, DateRange
