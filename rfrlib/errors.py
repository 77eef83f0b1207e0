"""
Exceptions raised by the compounding engine.

Every error subclasses the builtin exception closest to its meaning so that
callers catching ``IndexError``/``KeyError``/``ValueError`` keep working.
"""

from datetime import date
from typing import Optional


class RfrError(Exception):
    """Base class for all rfrlib errors."""


class RangeError(RfrError, IndexError):
    """A date lies outside the date range a series was constructed with."""

    def __init__(self, requested: date, start: date, end: date):
        self.requested = requested
        self.start = start
        self.end = end
        super().__init__(
            f"Date {requested} is not consistent with range [{start}, {end}]"
        )


class MissingResetError(RfrError, KeyError):
    """A fixing date required by a calculation has no published value."""

    def __init__(self, fixing_date: date):
        self.date = fixing_date
        super().__init__(fixing_date)

    def __str__(self) -> str:
        return f"No reset published for {self.date}"


class ResolverExhaustedError(RfrError, RuntimeError):
    """The inverse convention resolver could not produce a start date."""

    def __init__(self, maturity: date, term: str, reason: Optional[str] = None):
        self.maturity = maturity
        self.term = term
        message = f"Unable to resolve start date for maturity {maturity} and term {term}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class EmptyInputError(RfrError, ValueError):
    """A series, schedule or file was constructed from empty input."""
