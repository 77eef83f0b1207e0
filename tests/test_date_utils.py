from datetime import date, datetime

import pytest

from rfrlib.business_calendar.date_utils import (
    BusinessDayConvention,
    add_tenor,
    is_month_tenor,
    make_effective,
    make_maturity,
    make_overnight_maturity,
    tenor_to_days,
    tenor_to_months,
)
from rfrlib.conventions.calendars import make_calendar
from rfrlib.conventions.types import BusinessDayAdjustment

PRECEDING = BusinessDayAdjustment.PRECEDING
MODIFIED_PRECEDING = BusinessDayAdjustment.MODIFIED_PRECEDING
MODIFIED_FOLLOWING = BusinessDayAdjustment.MODIFIED_FOLLOWING


class TestTenors:
    @pytest.mark.parametrize("tenor, months", [("1M", 1), ("3m", 3), (" 12M ", 12), ("1Y", 12)])
    def test_months(self, tenor, months):
        assert tenor_to_months(tenor) == months
        assert is_month_tenor(tenor)

    @pytest.mark.parametrize("tenor, days", [("1W", 7), ("2W", 14), ("7D", 7)])
    def test_days(self, tenor, days):
        assert tenor_to_days(tenor) == days
        assert not is_month_tenor(tenor)

    @pytest.mark.parametrize("tenor", ["1Q", "M", ""])
    def test_unsupported(self, tenor):
        with pytest.raises(ValueError):
            add_tenor(date(2020, 1, 1), tenor)

    def test_add_tenor_backwards(self):
        assert add_tenor(date(2020, 3, 31), "1M", sign=-1) == date(2020, 2, 29)
        assert add_tenor(datetime(2020, 4, 23, 8, 0), "1W", sign=-1) == date(2020, 4, 16)

    def test_add_tenor_sign(self):
        with pytest.raises(ValueError):
            add_tenor(date(2020, 1, 1), "1M", sign=2)


class TestOvernightMaturity:
    def test_next_business_day(self, weekend):
        assert make_overnight_maturity(date(2018, 4, 2), weekend) == date(2018, 4, 3)

    def test_over_weekend(self, weekend):
        assert make_overnight_maturity(date(2018, 4, 6), weekend) == date(2018, 4, 9)

    def test_over_holiday(self, spring_bank_holiday):
        assert make_overnight_maturity(date(2023, 5, 26), spring_bank_holiday) == date(2023, 5, 30)

    def test_from_non_business_day(self, weekend):
        assert make_overnight_maturity(date(2018, 4, 7), weekend) == date(2018, 4, 9)


class TestMakeEffective:
    @pytest.mark.parametrize(
        "maturity, tenor, convention, expected",
        [
            (date(2020, 4, 23), "1W", PRECEDING, date(2020, 4, 16)),
            (date(2020, 5, 25), "1M", MODIFIED_PRECEDING, date(2020, 4, 24)),
            (date(2020, 3, 31), "1M", MODIFIED_PRECEDING, date(2020, 2, 28)),
            (date(2022, 7, 31), "1M", MODIFIED_PRECEDING, date(2022, 6, 30)),
        ],
    )
    def test_weekend_calendar(self, weekend, maturity, tenor, convention, expected):
        assert make_effective(maturity, tenor, convention, weekend) == expected

    def test_modified_preceding_rolls_forward_across_month(self):
        calendar = make_calendar("NYD", [date(2019, 1, 1)])
        assert make_effective(date(2019, 2, 1), "1M", MODIFIED_PRECEDING, calendar) == date(2019, 1, 2)

    def test_make_maturity(self, weekend):
        assert make_maturity(date(2019, 1, 31), "1M", MODIFIED_FOLLOWING, weekend) == date(2019, 2, 28)
        assert make_maturity(date(2018, 3, 30), "1M", MODIFIED_FOLLOWING, weekend) == date(2018, 4, 30)

    def test_adjustments_satisfy_protocol(self):
        assert isinstance(PRECEDING, BusinessDayConvention)
