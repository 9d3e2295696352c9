"""Pytest fixtures for Luach tests."""

import pytest

from luach.hebrew_date import HebrewDate
from luach.models import HebrewMonth
from luach.observance import ObservanceContext


@pytest.fixture
def teves_14_5784() -> HebrewDate:
    """Tuesday 26 December 2023."""
    return HebrewDate(5784, HebrewMonth.TEVES, 14)


@pytest.fixture
def first_day_pesach_5784() -> HebrewDate:
    """Tuesday 23 April 2024."""
    return HebrewDate(5784, HebrewMonth.NISSAN, 15)


@pytest.fixture
def make_ctx():
    """Build an ObservanceContext from a Gregorian date."""

    def _make(year: int, month: int, day: int, in_israel: bool = False) -> ObservanceContext:
        return ObservanceContext(HebrewDate.from_gregorian(year, month, day), in_israel)

    return _make


@pytest.fixture
def make_hebrew_ctx():
    """Build an ObservanceContext from a Hebrew date."""

    def _make(
        year: int, month: HebrewMonth, day: int, in_israel: bool = False
    ) -> ObservanceContext:
        return ObservanceContext(HebrewDate(year, month, day), in_israel)

    return _make
