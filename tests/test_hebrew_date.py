"""Tests for the HebrewDate value type."""

from datetime import date

import pytest

from luach.hebrew_date import HebrewDate
from luach.models import DayOfWeek, HebrewMonth, YearType


def test_from_gregorian(teves_14_5784):
    assert HebrewDate.from_gregorian(2023, 12, 26) == teves_14_5784


def test_from_date(first_day_pesach_5784):
    assert HebrewDate.from_date(date(2024, 4, 23)) == first_day_pesach_5784


def test_gregorian_round_trip(teves_14_5784):
    assert teves_14_5784.gregorian == (2023, 12, 26)
    assert teves_14_5784.to_date() == date(2023, 12, 26)


def test_properties(teves_14_5784):
    assert teves_14_5784.weekday == DayOfWeek.TUESDAY
    assert teves_14_5784.is_leap_year
    assert teves_14_5784.days_in_year == 383
    assert teves_14_5784.days_in_month == 29
    assert teves_14_5784.year_type == YearType.DEFICIENT
    assert teves_14_5784.is_kislev_short
    assert not teves_14_5784.is_cheshvan_long
    assert teves_14_5784.days_since_start_of_year == 102


def test_month_accepts_int():
    assert HebrewDate(5784, 10, 14).month is HebrewMonth.TEVES


def test_str(teves_14_5784):
    assert str(teves_14_5784) == "14 Teves 5784"
    assert str(HebrewDate(5784, HebrewMonth.ADAR_II, 1)) == "1 Adar II 5784"


def test_rejects_day_past_month_end():
    with pytest.raises(ValueError, match="between 1 and 29"):
        HebrewDate(5784, HebrewMonth.CHESHVAN, 30)


def test_rejects_day_zero():
    with pytest.raises(ValueError):
        HebrewDate(5784, HebrewMonth.NISSAN, 0)


def test_rejects_adar_ii_in_common_year():
    with pytest.raises(ValueError, match="Adar II"):
        HebrewDate(5785, HebrewMonth.ADAR_II, 1)


def test_rejects_bad_month():
    with pytest.raises(ValueError, match="between 1 and 13"):
        HebrewDate(5784, 14, 1)


def test_rejects_year_zero():
    with pytest.raises(ValueError, match="year"):
        HebrewDate(0, HebrewMonth.TISHREI, 1)


def test_of_rolls_short_month_forward():
    assert HebrewDate.of(5784, HebrewMonth.CHESHVAN, 30) == HebrewDate(
        5784, HebrewMonth.KISLEV, 1
    )


def test_of_rolls_adar_ii_of_common_year_into_nissan():
    assert HebrewDate.of(5785, HebrewMonth.ADAR_II, 1) == HebrewDate(
        5785, HebrewMonth.NISSAN, 1
    )


def test_of_keeps_valid_date(teves_14_5784):
    assert HebrewDate.of(5784, 10, 14) == teves_14_5784


def test_of_rejects_day_31():
    with pytest.raises(ValueError):
        HebrewDate.of(5784, HebrewMonth.TISHREI, 31)


def test_from_gregorian_rejects_invalid():
    with pytest.raises(ValueError):
        HebrewDate.from_gregorian(2023, 2, 29)
    with pytest.raises(ValueError):
        HebrewDate.from_gregorian(2023, 13, 1)


def test_ordering_follows_calendar():
    # Nissan is numbered 1 but comes after Adar II within the year.
    adar_ii = HebrewDate(5784, HebrewMonth.ADAR_II, 29)
    nissan = HebrewDate(5784, HebrewMonth.NISSAN, 1)
    tishrei = HebrewDate(5784, HebrewMonth.TISHREI, 1)
    assert tishrei < adar_ii < nissan
    assert nissan > adar_ii
    assert sorted([nissan, tishrei, adar_ii]) == [tishrei, adar_ii, nissan]


def test_tomorrow_crosses_year():
    last = HebrewDate(5783, HebrewMonth.ELUL, 29)
    assert last.tomorrow == HebrewDate(5784, HebrewMonth.TISHREI, 1)
    assert last.tomorrow.yesterday == last


def test_plus_days(teves_14_5784, first_day_pesach_5784):
    delta = first_day_pesach_5784.absolute_day - teves_14_5784.absolute_day
    assert teves_14_5784.plus_days(delta) == first_day_pesach_5784


def test_hashable(teves_14_5784):
    assert len({teves_14_5784, HebrewDate.from_gregorian(2023, 12, 26)}) == 1


def test_frozen(teves_14_5784):
    with pytest.raises(AttributeError):
        teves_14_5784.day = 15


def test_gregorian_of_year_one():
    assert HebrewDate(1, HebrewMonth.TISHREI, 1).gregorian == (-3760, 9, 7)
    assert HebrewDate.from_gregorian(-3760, 9, 7) == HebrewDate(1, HebrewMonth.TISHREI, 1)
