"""Rosh Hashana postponements (dechiyos).

The Tishrei molad fixes a provisional day for Rosh Hashana; four rules may
push it later. The first three look at the time of the molad and together
add at most one day. Lo ADU Rosh is applied afterwards and may add one more.
"""

from .constants import (
    BETUTAKFOT_PARTS,
    CHALAKIM_PER_DAY,
    GATRAD_PARTS,
    JEWISH_EPOCH,
    MOLAD_ZAKEN_PARTS,
)
from .models import DayOfWeek, HebrewMonth
from .molad import chalakim_since_molad_tohu, is_leap_year

MOLAD_ZAKEN = "molad_zaken"
GATRAD = "gatrad"
BETUTAKFOT = "betutakfot"
LO_ADU_ROSH = "lo_adu_rosh"

# Day numbers modulo 7 counted from the epoch Sunday.
_SUNDAY, _MONDAY, _TUESDAY, _WEDNESDAY, _FRIDAY = 0, 1, 2, 3, 5


def _tishrei_molad(year: int) -> tuple[int, int]:
    """Day and chalakim-into-day of the Tishrei molad."""
    return divmod(chalakim_since_molad_tohu(year, HebrewMonth.TISHREI), CHALAKIM_PER_DAY)


def postponement_rules(year: int) -> list[str]:
    """Names of the postponement rules applied to the year's Rosh Hashana."""
    molad_day, molad_parts = _tishrei_molad(year)
    weekday = molad_day % 7
    applied = []

    if molad_parts >= MOLAD_ZAKEN_PARTS:
        applied.append(MOLAD_ZAKEN)
    elif weekday == _TUESDAY and molad_parts >= GATRAD_PARTS and not is_leap_year(year):
        applied.append(GATRAD)
    elif (
        weekday == _MONDAY
        and molad_parts >= BETUTAKFOT_PARTS
        and is_leap_year(year - 1)
    ):
        applied.append(BETUTAKFOT)

    rosh_hashana = molad_day + (1 if applied else 0)
    if rosh_hashana % 7 in (_SUNDAY, _WEDNESDAY, _FRIDAY):
        applied.append(LO_ADU_ROSH)
    return applied


def elapsed_days(year: int) -> int:
    """Days from the epoch Sunday to Rosh Hashana of the year."""
    molad_day, _ = _tishrei_molad(year)
    return molad_day + len(postponement_rules(year))


def rosh_hashana_absolute(year: int) -> int:
    """Absolute day of 1 Tishrei."""
    return elapsed_days(year) + 1 + JEWISH_EPOCH


def rosh_hashana_weekday(year: int) -> DayOfWeek:
    """Day of the week on which the year begins."""
    return DayOfWeek(elapsed_days(year) % 7 + 1)
