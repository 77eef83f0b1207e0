"""Shared calendars, reset series and Hypothesis settings."""

from __future__ import annotations

from datetime import date
from typing import Callable, Sequence, Union

import pytest
from hypothesis import HealthCheck, settings

from rfrlib.conventions.calendars import Calendar, get_calendar, make_calendar
from rfrlib.conventions.daycount import ACT_360, DayCountConvention
from rfrlib.conventions.holidays import make_six_calendar
from rfrlib.schedule.core import DateRange
from rfrlib.timeseries.resets import Resets
from rfrlib.timeseries.series import DateIndexedSeries

# ---------------------------------------------------------------------------
# Hypothesis global settings
# ---------------------------------------------------------------------------

settings.register_profile(
    "ci",
    max_examples=200,
    suppress_health_check=[HealthCheck.too_slow],
    deadline=None,
)
settings.register_profile(
    "dev",
    max_examples=50,
    suppress_health_check=[HealthCheck.too_slow],
    deadline=None,
)
settings.load_profile("dev")


# ---------------------------------------------------------------------------
# Calendars
# ---------------------------------------------------------------------------

WEEKEND = get_calendar("WEEKEND")
SIX = make_six_calendar(2017, 2020)


@pytest.fixture
def weekend() -> Calendar:
    return WEEKEND


@pytest.fixture
def six() -> Calendar:
    return SIX


@pytest.fixture
def spring_bank_holiday() -> Calendar:
    return make_calendar("TEST", [date(2023, 5, 29)])


# ---------------------------------------------------------------------------
# Resets
# ---------------------------------------------------------------------------

SOFR_FIXINGS = {
    date(2018, 4, 2): 1.80,
    date(2018, 4, 3): 1.83,
    date(2018, 4, 4): 1.74,
    date(2018, 4, 5): 1.75,
    date(2018, 4, 6): 1.75,
}


@pytest.fixture
def sofr_resets() -> Resets:
    ts = DateIndexedSeries(DateRange(date(2018, 4, 2), date(2018, 4, 6)))
    for dt, value in SOFR_FIXINGS.items():
        ts[dt] = value
    return Resets(ts, ACT_360)


ResetFactory = Callable[..., Resets]


@pytest.fixture
def make_resets() -> ResetFactory:
    """Resets on every business day of ``calendar`` in [start, end]."""

    def _make(
        calendar: Calendar,
        start: date,
        end: date,
        rates: Union[float, Sequence[float]],
        day_count: DayCountConvention = ACT_360,
    ) -> Resets:
        ts = DateIndexedSeries(DateRange(start, end))
        days = calendar.business_days(start, end)
        if isinstance(rates, (int, float)):
            rates = [float(rates)] * len(days)
        if len(rates) != len(days):
            raise ValueError(f"{len(days)} business days but {len(rates)} rates")
        for dt, rate in zip(days, rates):
            ts[dt] = rate
        return Resets(ts, day_count)

    return _make
