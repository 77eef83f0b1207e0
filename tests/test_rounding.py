import math

import pytest
from hypothesis import given
from hypothesis import strategies as st

from rfrlib.compounding.rounding import EXACT_MAGNITUDE, round_half_away


class TestRoundHalfAway:
    @pytest.mark.parametrize(
        "x, places, expected",
        [
            (1.011111, 2, 1.01),
            (2.5, 0, 3.0),
            (-2.5, 0, -3.0),
            (0.125, 2, 0.13),
            (-0.125, 2, -0.13),
            (1.00034365463, 8, 1.00034365),
            (1.7673666, 4, 1.7674),
            (0.0, 5, 0.0),
        ],
    )
    def test_values(self, x, places, expected):
        assert round_half_away(x, places) == expected

    def test_differs_from_builtin_round(self):
        assert round(0.125, 2) == 0.12
        assert round_half_away(0.125, 2) == 0.13

    def test_negative_places(self):
        with pytest.raises(ValueError):
            round_half_away(1.0, -1)

    @pytest.mark.parametrize("x", [math.inf, -math.inf])
    def test_non_finite_passthrough(self, x):
        assert round_half_away(x, 4) == x

    def test_nan_passthrough(self):
        assert math.isnan(round_half_away(math.nan, 4))


@given(
    level=st.floats(min_value=0.0, max_value=1e5, allow_nan=False),
    places=st.sampled_from([4, 5, 6, 8]),
)
def test_idempotent_at_published_precision(level, places):
    once = round_half_away(level, places)
    assert round_half_away(once, places) == once


@given(
    x=st.floats(min_value=-1.0, max_value=1.0, allow_nan=False),
    places=st.integers(min_value=0, max_value=15),
)
def test_idempotent_small_values(x, places):
    once = round_half_away(x, places)
    assert round_half_away(once, places) == once


@given(
    x=st.floats(min_value=-1e5, max_value=1e5, allow_nan=False),
    places=st.integers(min_value=0, max_value=10),
)
def test_idempotent_below_exact_magnitude(x, places):
    assert abs(x * 10.0 ** places) < EXACT_MAGNITUDE
    once = round_half_away(x, places)
    assert round_half_away(once, places) == once
    assert abs(once - x) <= 0.5 * 10.0 ** -places + 1e-9
