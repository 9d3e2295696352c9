"""Conversion between Gregorian dates, absolute days and Hebrew dates.

Absolute days use Rata Die numbering: 1 January of the proleptic Gregorian
year 1 is day 1, the same count as ``date.toordinal()``.
"""

from .constants import JEWISH_EPOCH
from .dechiyos import elapsed_days
from .models import DayOfWeek, HebrewMonth
from .year import last_month_of_year, month_length

_GREGORIAN_MONTH_DAYS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def is_gregorian_leap_year(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def last_day_of_gregorian_month(month: int, year: int) -> int:
    """Number of days in a Gregorian month."""
    if month == 2 and is_gregorian_leap_year(year):
        return 29
    return _GREGORIAN_MONTH_DAYS[month - 1]


def gregorian_to_absolute(year: int, month: int, day: int) -> int:
    """Absolute day of a proleptic Gregorian date."""
    days = day + sum(last_day_of_gregorian_month(m, year) for m in range(1, month))
    prior = year - 1
    return days + 365 * prior + prior // 4 - prior // 100 + prior // 400


def absolute_to_gregorian(absolute_day: int) -> tuple[int, int, int]:
    """Gregorian (year, month, day) of an absolute day."""
    # Close first guess, a little early for either sign.
    year = absolute_day // 366 if absolute_day > 0 else absolute_day // 365
    while absolute_day < gregorian_to_absolute(year, 1, 1):
        year -= 1
    while absolute_day >= gregorian_to_absolute(year + 1, 1, 1):
        year += 1

    month = 1
    while absolute_day > gregorian_to_absolute(
        year, month, last_day_of_gregorian_month(month, year)
    ):
        month += 1

    day = absolute_day - gregorian_to_absolute(year, month, 1) + 1
    return year, month, day


def days_since_start_of_year(year: int, month: HebrewMonth | int, day: int) -> int:
    """Day number within the Hebrew year, counting 1 Tishrei as day 1."""
    month = int(month)
    elapsed = day
    if month < HebrewMonth.TISHREI:
        for m in range(HebrewMonth.TISHREI, last_month_of_year(year) + 1):
            elapsed += month_length(m, year)
        for m in range(HebrewMonth.NISSAN, month):
            elapsed += month_length(m, year)
    else:
        for m in range(HebrewMonth.TISHREI, month):
            elapsed += month_length(m, year)
    return elapsed


def hebrew_to_absolute(year: int, month: HebrewMonth | int, day: int) -> int:
    """Absolute day of a Hebrew date.

    Days past the end of the month are not rejected; they carry into the
    following month.
    """
    return days_since_start_of_year(year, month, day) + elapsed_days(year) + JEWISH_EPOCH


def absolute_to_hebrew(absolute_day: int) -> tuple[int, HebrewMonth, int]:
    """Hebrew (year, month, day) of an absolute day."""
    # 6940 days per 19 year cycle gives a close first guess.
    year = (absolute_day - JEWISH_EPOCH) * 19 // 6940 + 1
    while absolute_day < hebrew_to_absolute(year, HebrewMonth.TISHREI, 1):
        year -= 1
    while absolute_day >= hebrew_to_absolute(year + 1, HebrewMonth.TISHREI, 1):
        year += 1

    if absolute_day < hebrew_to_absolute(year, HebrewMonth.NISSAN, 1):
        month = HebrewMonth.TISHREI
    else:
        month = HebrewMonth.NISSAN
    while absolute_day > hebrew_to_absolute(year, month, month_length(month, year)):
        month = HebrewMonth(month + 1)

    day = absolute_day - hebrew_to_absolute(year, month, 1) + 1
    return year, month, day


def day_of_week(absolute_day: int) -> DayOfWeek:
    """Day of the week of an absolute day (day 1 was a Monday)."""
    return DayOfWeek(absolute_day % 7 + 1)
