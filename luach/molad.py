"""Molad arithmetic in chalakim since Molad Tohu.

Everything here is exact integer arithmetic. Python's ``//`` and ``%``
floor toward negative infinity, which keeps years before the epoch
consistent with the ones after it.
"""

from .constants import (
    CHALAKIM_MOLAD_TOHU,
    CHALAKIM_PER_DAY,
    CHALAKIM_PER_HOUR,
    CHALAKIM_PER_MINUTE,
    CHALAKIM_PER_MONTH,
    JEWISH_EPOCH,
    MONTHS_PER_CYCLE,
    YEARS_PER_CYCLE,
)
from .models import HebrewMonth, Molad, MoladDate


def is_leap_year(year: int) -> bool:
    """Whether the year has 13 months (7 years in every 19)."""
    return (7 * year + 1) % YEARS_PER_CYCLE < 7


def month_of_year(year: int, month: HebrewMonth | int) -> int:
    """Position of a month counting from Tishrei (Tishrei is 1)."""
    leap = is_leap_year(year)
    return (int(month) + (6 if leap else 5)) % (13 if leap else 12) + 1


def months_elapsed(year: int, month: HebrewMonth | int) -> int:
    """Months from Molad Tohu to the molad of the given month."""
    years_before = year - 1
    cycles, year_in_cycle = divmod(years_before, YEARS_PER_CYCLE)
    return (
        MONTHS_PER_CYCLE * cycles  # complete Metonic cycles
        + 12 * year_in_cycle  # regular months this cycle
        + (7 * year_in_cycle + 1) // YEARS_PER_CYCLE  # leap months this cycle
        + month_of_year(year, month)
        - 1
    )


def chalakim_since_molad_tohu(year: int, month: HebrewMonth | int) -> int:
    """Chalakim from the start of the epoch Sunday to the month's molad."""
    return CHALAKIM_MOLAD_TOHU + CHALAKIM_PER_MONTH * months_elapsed(year, month)


def chalakim_to_molad(chalakim: int) -> tuple[int, Molad]:
    """Split a chalakim count into whole days and the time of day.

    The hours are counted from the start of the molad day at 6 pm, which is
    how the calendar reckons them.
    """
    days, parts = divmod(chalakim, CHALAKIM_PER_DAY)
    hours, parts = divmod(parts, CHALAKIM_PER_HOUR)
    minutes, parts = divmod(parts, CHALAKIM_PER_MINUTE)
    return days, Molad(hours=hours, minutes=minutes, chalakim=parts)


def molad_to_absolute_day(chalakim: int) -> int:
    """Absolute day on which a molad falls."""
    return chalakim // CHALAKIM_PER_DAY + JEWISH_EPOCH


def molad_for_month(year: int, month: HebrewMonth | int) -> MoladDate:
    """The month's molad on the civil day it falls, with its clock time.

    The raw hour count starts at 6 pm of the previous civil evening, so a raw
    hour of 6 or more is already past midnight of the following civil day.
    """
    from .bridge import absolute_to_gregorian

    days, raw = chalakim_to_molad(chalakim_since_molad_tohu(year, month))
    absolute_day = days + JEWISH_EPOCH
    if raw.hours >= 6:
        absolute_day += 1
    clock = Molad(hours=(raw.hours + 18) % 24, minutes=raw.minutes, chalakim=raw.chalakim)
    return MoladDate(
        absolute_day=absolute_day,
        gregorian=absolute_to_gregorian(absolute_day),
        molad=clock,
    )
