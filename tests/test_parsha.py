"""Tests for the weekly Torah reading."""

from datetime import date

import pytest

from luach.bridge import hebrew_to_absolute
from luach.hebrew_date import HebrewDate
from luach.models import HebrewMonth
from luach.parsha import (
    DOUBLED_READINGS,
    WEEKLY_READINGS,
    Parsha,
    get_parsha,
    get_special_shabbos,
    get_upcoming_parsha,
    schedule,
)


def parsha_on(year, month, day, in_israel=False):
    return get_parsha(HebrewDate.from_gregorian(year, month, day), in_israel)


def expand(readings):
    """Split combined readings into their two parts."""
    parts = {combined: first for first, combined in DOUBLED_READINGS.items()}
    expanded = []
    for reading in readings:
        if reading in parts:
            first = parts[reading]
            expanded.extend([first, WEEKLY_READINGS[WEEKLY_READINGS.index(first) + 1]])
        else:
            expanded.append(reading)
    return expanded


def test_weekday_has_no_parsha():
    assert parsha_on(2023, 12, 26) is Parsha.NONE


def test_hebrew_names():
    assert Parsha.BERESHIS.hebrew == "בראשית"
    assert all(parsha.hebrew is not None for parsha in Parsha)


class TestYear5784:
    def test_before_succos(self):
        assert parsha_on(2023, 9, 23) is Parsha.HAAZINU

    def test_bereshis(self):
        assert parsha_on(2023, 10, 14) is Parsha.BERESHIS

    def test_winter(self):
        assert parsha_on(2023, 12, 23) is Parsha.VAYIGASH
        assert parsha_on(2023, 12, 30) is Parsha.VAYECHI
        assert parsha_on(2024, 1, 27) is Parsha.BESHALACH

    def test_around_pesach(self):
        assert parsha_on(2024, 4, 20) is Parsha.METZORA
        assert parsha_on(2024, 4, 27) is Parsha.NONE
        assert parsha_on(2024, 5, 4) is Parsha.ACHREI_MOS

    def test_end_of_year(self):
        assert parsha_on(2024, 9, 28) is Parsha.NITZAVIM_VAYEILECH


def test_vayakhel_and_pekudei_apart_5785():
    assert parsha_on(2025, 3, 22) is Parsha.VAYAKHEL
    assert parsha_on(2025, 3, 29) is Parsha.PEKUDEI


def test_achrei_mos_before_pesach_5774():
    assert parsha_on(2014, 4, 12) is Parsha.ACHREI_MOS


class TestIsraelDiaspora:
    def test_eighth_day_of_pesach_on_shabbos(self):
        assert parsha_on(2022, 4, 23, in_israel=True) is Parsha.ACHREI_MOS
        assert parsha_on(2022, 4, 23) is Parsha.NONE

    def test_readings_rejoin_by_summer(self):
        assert parsha_on(2022, 7, 30, in_israel=True) is Parsha.MASEI
        assert parsha_on(2022, 7, 30) is Parsha.MATOS_MASEI

    def test_second_day_of_shavuos_on_shabbos(self):
        assert parsha_on(2026, 5, 23, in_israel=True) is Parsha.NASSO
        assert parsha_on(2026, 5, 23) is Parsha.NONE
        assert parsha_on(2026, 5, 30) is Parsha.NASSO


class TestUpcoming:
    def test_from_weekday(self):
        assert get_upcoming_parsha(HebrewDate.from_gregorian(2023, 12, 20)) is Parsha.VAYIGASH

    def test_from_shabbos_is_next_week(self):
        assert get_upcoming_parsha(HebrewDate.from_gregorian(2023, 12, 23)) is Parsha.VAYECHI

    def test_skips_yom_tov(self):
        assert get_upcoming_parsha(HebrewDate.from_gregorian(2024, 4, 21)) is Parsha.ACHREI_MOS


class TestSpecialShabbos:
    def test_four_parshiyos(self):
        assert get_special_shabbos(HebrewDate.from_gregorian(2024, 3, 9)) is Parsha.SHKALIM
        assert get_special_shabbos(HebrewDate.from_gregorian(2024, 3, 23)) is Parsha.ZACHOR

    def test_hagadol(self):
        assert get_special_shabbos(HebrewDate.from_gregorian(2024, 4, 20)) is Parsha.HAGADOL

    def test_shuva(self):
        assert get_special_shabbos(HebrewDate.from_gregorian(2023, 9, 23)) is Parsha.SHUVA

    def test_shira(self):
        assert get_special_shabbos(HebrewDate.from_gregorian(2024, 1, 27)) is Parsha.SHIRA

    def test_chazon_and_nachamu(self):
        # 8 and 15 Av 5785
        assert get_special_shabbos(HebrewDate.from_gregorian(2025, 8, 2)) is Parsha.CHAZON
        assert get_special_shabbos(HebrewDate.from_gregorian(2025, 8, 9)) is Parsha.NACHAMU

    def test_ordinary_shabbos(self):
        assert get_special_shabbos(HebrewDate.from_gregorian(2023, 12, 23)) is Parsha.NONE

    def test_weekday(self):
        assert get_special_shabbos(HebrewDate.from_gregorian(2024, 3, 21)) is Parsha.NONE


@pytest.mark.parametrize("in_israel", [False, True])
@pytest.mark.parametrize("year", range(5780, 5800))
def test_readings_run_in_order(year, in_israel):
    readings = schedule(year, in_israel)
    succos = hebrew_to_absolute(year, HebrewMonth.TISHREI, 15)
    read = [readings[day] for day in sorted(readings) if day > succos]
    expanded = expand(reading for reading in read if reading is not Parsha.NONE)
    assert expanded == list(WEEKLY_READINGS[: len(expanded)])
    assert expanded[-1] in (Parsha.NITZAVIM, Parsha.VAYEILECH)


@pytest.mark.parametrize("year", range(5780, 5800))
def test_year_ends_where_next_begins(year):
    last = [r for r in schedule(year).values() if r is not Parsha.NONE][-1]
    first = [r for r in schedule(year + 1).values() if r is not Parsha.NONE][0]
    if last is Parsha.NITZAVIM_VAYEILECH:
        assert first is Parsha.HAAZINU
    else:
        assert first is Parsha.VAYEILECH


def test_schedule_only_has_shabbosos():
    assert all(date.fromordinal(day).weekday() == 5 for day in schedule(5784))
