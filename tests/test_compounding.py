from datetime import date

import pytest

from rfrlib.compounding.compounder import accrual_factor, compound
from rfrlib.compounding.schedule import make_compounding_schedule
from rfrlib.errors import EmptyInputError, MissingResetError, RangeError
from rfrlib.schedule.core import CompoundingPeriod, CompoundingSchedule, DateRange


def _period(start: date, end: date) -> CompoundingPeriod:
    return CompoundingPeriod(DateRange(start, end), start)


class TestCompoundingSchedule:
    def test_one_period_per_business_day(self, weekend):
        schedule = make_compounding_schedule(DateRange(date(2018, 4, 2), date(2018, 4, 9)), weekend)
        assert len(schedule) == 5
        assert [p.fixing_date for p in schedule] == [
            date(2018, 4, 2),
            date(2018, 4, 3),
            date(2018, 4, 4),
            date(2018, 4, 5),
            date(2018, 4, 6),
        ]
        assert schedule[-1].period == DateRange(date(2018, 4, 6), date(2018, 4, 9))
        assert schedule.period == DateRange(date(2018, 4, 2), date(2018, 4, 9))

    def test_periods_are_contiguous(self, six):
        schedule = make_compounding_schedule(DateRange(date(2018, 3, 22), date(2018, 4, 23)), six)
        for previous, current in zip(schedule, list(schedule)[1:]):
            assert previous.maturity == current.effective
        assert schedule.effective == date(2018, 3, 22)
        assert schedule.maturity == date(2018, 4, 23)
        # Good Friday and Easter Monday are absorbed by the 29 March period
        assert schedule[5].period == DateRange(date(2018, 3, 29), date(2018, 4, 3))

    def test_final_period_cut_at_maturity(self, weekend):
        schedule = make_compounding_schedule(DateRange(date(2018, 4, 2), date(2018, 4, 7)), weekend)
        assert schedule[-1].period == DateRange(date(2018, 4, 6), date(2018, 4, 7))
        assert schedule.maturity == date(2018, 4, 7)

    def test_starts_on_non_business_day(self, weekend):
        schedule = make_compounding_schedule(DateRange(date(2018, 4, 7), date(2018, 4, 10)), weekend)
        assert [p.period for p in schedule] == [
            DateRange(date(2018, 4, 7), date(2018, 4, 9)),
            DateRange(date(2018, 4, 9), date(2018, 4, 10)),
        ]

    def test_degenerate_coupon_period(self, weekend):
        with pytest.raises(EmptyInputError):
            make_compounding_schedule(DateRange(date(2018, 4, 2), date(2018, 4, 2)), weekend)

    def test_empty_schedule_rejected(self):
        with pytest.raises(EmptyInputError):
            CompoundingSchedule(())

    def test_gap_between_periods_rejected(self):
        with pytest.raises(ValueError, match="not contiguous"):
            CompoundingSchedule(
                (
                    _period(date(2018, 4, 2), date(2018, 4, 3)),
                    _period(date(2018, 4, 4), date(2018, 4, 5)),
                )
            )


class TestCompounder:
    def test_single_period(self, weekend, sofr_resets):
        schedule = make_compounding_schedule(DateRange(date(2018, 4, 2), date(2018, 4, 3)), weekend)
        assert accrual_factor(schedule, sofr_resets) == pytest.approx(1.00005, abs=1e-12)
        assert compound(schedule, sofr_resets) == pytest.approx(0.018, abs=1e-6)

    def test_week(self, weekend, sofr_resets):
        schedule = make_compounding_schedule(DateRange(date(2018, 4, 2), date(2018, 4, 9)), weekend)
        assert accrual_factor(schedule, sofr_resets) == pytest.approx(1.000343654623, abs=1e-11)
        assert compound(schedule, sofr_resets) == pytest.approx(0.0176736663, abs=1e-9)

    def test_weekend_period_uses_friday_fixing(self, weekend, sofr_resets):
        schedule = make_compounding_schedule(DateRange(date(2018, 4, 6), date(2018, 4, 9)), weekend)
        assert len(schedule) == 1
        assert compound(schedule, sofr_resets) == pytest.approx(0.0175, abs=1e-12)

    def test_missing_fixing(self, sofr_resets):
        sofr_resets.time_series[date(2018, 4, 4)] = None
        schedule = CompoundingSchedule(
            (
                _period(date(2018, 4, 3), date(2018, 4, 4)),
                _period(date(2018, 4, 4), date(2018, 4, 5)),
            )
        )
        with pytest.raises(MissingResetError) as exc_info:
            compound(schedule, sofr_resets)
        assert exc_info.value.date == date(2018, 4, 4)

    def test_fixing_outside_reset_range(self, sofr_resets):
        # 9 April is after the last published reset
        schedule = CompoundingSchedule((_period(date(2018, 4, 9), date(2018, 4, 10)),))
        with pytest.raises(RangeError):
            accrual_factor(schedule, sofr_resets)
