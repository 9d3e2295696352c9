"""Tests for molad arithmetic."""

from datetime import datetime, timedelta, timezone

import pytest

from luach.constants import CHALAKIM_PER_DAY, JEWISH_EPOCH
from luach.models import DayOfWeek, HebrewMonth, Molad
from luach.molad import (
    chalakim_since_molad_tohu,
    chalakim_to_molad,
    is_leap_year,
    molad_for_month,
    molad_to_absolute_day,
    month_of_year,
    months_elapsed,
)
from luach.bridge import day_of_week


def test_leap_years_in_cycle():
    # Years 3, 6, 8, 11, 14, 17 and 19 of the 19 year cycle
    leap = [y for y in range(1, 20) if is_leap_year(y)]
    assert leap == [3, 6, 8, 11, 14, 17, 19]


def test_known_leap_years():
    assert is_leap_year(5784)
    assert is_leap_year(5782)
    assert not is_leap_year(5783)
    assert not is_leap_year(5785)


def test_seven_leap_years_in_every_cycle():
    for start in (1, 100, 5700, 5777):
        assert sum(is_leap_year(y) for y in range(start, start + 19)) == 7


def test_month_of_year_starts_at_tishrei():
    assert month_of_year(5785, HebrewMonth.TISHREI) == 1
    assert month_of_year(5785, HebrewMonth.ADAR) == 6
    assert month_of_year(5785, HebrewMonth.NISSAN) == 7
    assert month_of_year(5785, HebrewMonth.ELUL) == 12


def test_month_of_year_leap():
    assert month_of_year(5784, HebrewMonth.ADAR) == 6
    assert month_of_year(5784, HebrewMonth.ADAR_II) == 7
    assert month_of_year(5784, HebrewMonth.NISSAN) == 8
    assert month_of_year(5784, HebrewMonth.ELUL) == 13


def test_months_elapsed_first_month():
    assert months_elapsed(1, HebrewMonth.TISHREI) == 0


def test_months_elapsed_full_cycle():
    assert months_elapsed(20, HebrewMonth.TISHREI) == 235


def test_months_elapsed_across_leap_year():
    # 5784 has 13 months
    assert (
        months_elapsed(5785, HebrewMonth.TISHREI)
        - months_elapsed(5784, HebrewMonth.TISHREI)
        == 13
    )


def test_molad_tohu():
    assert chalakim_since_molad_tohu(1, HebrewMonth.TISHREI) == 31524
    days, molad = chalakim_to_molad(31524)
    assert days == 1
    assert molad == Molad(hours=5, minutes=11, chalakim=6)


def test_chalakim_to_molad_teves_5784():
    days, molad = chalakim_to_molad(chalakim_since_molad_tohu(5784, HebrewMonth.TEVES))
    assert molad == Molad(hours=2, minutes=1, chalakim=3)
    assert days + JEWISH_EPOCH == datetime(2023, 12, 12).toordinal()


def test_molad_to_absolute_day():
    chalakim = chalakim_since_molad_tohu(5784, HebrewMonth.TEVES)
    assert molad_to_absolute_day(chalakim) == chalakim // CHALAKIM_PER_DAY + JEWISH_EPOCH


def test_molad_for_month_teves_5784():
    molad_date = molad_for_month(5784, HebrewMonth.TEVES)
    assert molad_date.gregorian == (2023, 12, 12)
    assert molad_date.molad == Molad(hours=20, minutes=1, chalakim=3)
    assert day_of_week(molad_date.absolute_day) == DayOfWeek.TUESDAY


def test_molad_as_datetime():
    instant = molad_for_month(5784, HebrewMonth.TEVES).as_datetime()
    assert instant.utcoffset() == timedelta(hours=2)
    assert instant.replace(tzinfo=None) == datetime(2023, 12, 12, 19, 40, 13, 504000)
    assert int(instant.timestamp()) == 1702402813


def test_molad_as_datetime_utc():
    instant = molad_for_month(5784, HebrewMonth.TEVES).as_datetime()
    assert instant.astimezone(timezone.utc).hour == 17


def test_molad_advances_civil_day_after_midnight():
    # Raw hours of 6 or more are past midnight of the following civil day.
    for month in HebrewMonth:
        if month == HebrewMonth.ADAR_II:
            continue
        days, raw = chalakim_to_molad(chalakim_since_molad_tohu(5785, month))
        molad_date = molad_for_month(5785, month)
        expected = days + JEWISH_EPOCH + (1 if raw.hours >= 6 else 0)
        assert molad_date.absolute_day == expected
        assert molad_date.molad.hours == (raw.hours + 18) % 24


def test_molad_rejects_out_of_range_values():
    with pytest.raises(ValueError, match="hours"):
        Molad(hours=24, minutes=0, chalakim=0)
    with pytest.raises(ValueError, match="minutes"):
        Molad(hours=0, minutes=60, chalakim=0)
    with pytest.raises(ValueError, match="chalakim"):
        Molad(hours=0, minutes=0, chalakim=18)


def test_molad_for_early_month_has_civil_date():
    # Molad BaHaRaD: Sunday evening, the night before the first Rosh Hashana
    molad_date = molad_for_month(1, HebrewMonth.TISHREI)
    assert molad_date.gregorian == (-3760, 9, 6)
    assert molad_date.molad == Molad(hours=23, minutes=11, chalakim=6)
