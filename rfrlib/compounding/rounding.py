"""Publication rounding."""

import math

EXACT_MAGNITUDE = 2.0 ** 50


def round_half_away(x: float, decimal_places: int) -> float:
    """
    Round ``x`` to ``decimal_places`` decimals, halves away from zero.

    Computed as ``round(x * 10**n) / 10**n``; Python's built-in ``round``
    rounds halves to even and would disagree with published figures.

    Rounding an already rounded value returns it unchanged while
    ``abs(x * 10**n)`` stays below ``EXACT_MAGNITUDE`` (2**50, about 1.1e15).
    Above that the spacing of doubles near ``x * 10**n`` approaches 0.5 and a
    second rounding can move the last digit. Published indices and rates sit
    far below the limit (SARON: 1e4 at 6 decimals, i.e. 1e10).
    """
    if decimal_places < 0:
        raise ValueError(f"decimal_places must be non-negative, got {decimal_places}")

    p = 10.0 ** decimal_places
    y = x * p
    if not math.isfinite(y):
        return x

    r = math.floor(abs(y))
    if abs(y) - r >= 0.5:
        r += 1
    return math.copysign(r, y) / p
