"""Year and month lengths of the Hebrew calendar."""

from .dechiyos import elapsed_days
from .models import HebrewMonth, YearType
from .molad import is_leap_year

__all__ = [
    "days_in_year",
    "is_cheshvan_long",
    "is_kislev_short",
    "is_leap_year",
    "last_month_of_year",
    "month_length",
    "months_in_year",
    "months_of_year",
    "year_length_category",
]

_SHORT_MONTHS = frozenset(
    {
        HebrewMonth.IYAR,
        HebrewMonth.TAMMUZ,
        HebrewMonth.ELUL,
        HebrewMonth.TEVES,
        HebrewMonth.ADAR_II,
    }
)


def days_in_year(year: int) -> int:
    """Number of days from Rosh Hashana of the year to the next one."""
    return elapsed_days(year + 1) - elapsed_days(year)


def year_length_category(year: int) -> YearType:
    """Classify the year as deficient, regular or complete.

    Common years are 353/354/355 days and leap years 383/384/385, so the last
    digit alone identifies the category.
    """
    remainder = days_in_year(year) % 10
    if remainder == 3:
        return YearType.DEFICIENT
    if remainder == 5:
        return YearType.COMPLETE
    return YearType.REGULAR


def is_cheshvan_long(year: int) -> bool:
    """Whether Cheshvan has 30 days (a complete year)."""
    return year_length_category(year) == YearType.COMPLETE


def is_kislev_short(year: int) -> bool:
    """Whether Kislev has 29 days (a deficient year)."""
    return year_length_category(year) == YearType.DEFICIENT


def month_length(month: HebrewMonth | int, year: int) -> int:
    """Number of days in a Hebrew month of the given year."""
    month = HebrewMonth.coerce(month)
    if month in _SHORT_MONTHS:
        return 29
    if month == HebrewMonth.CHESHVAN and not is_cheshvan_long(year):
        return 29
    if month == HebrewMonth.KISLEV and is_kislev_short(year):
        return 29
    if month == HebrewMonth.ADAR and not is_leap_year(year):
        return 29
    return 30


def months_in_year(year: int) -> int:
    """13 in a leap year, otherwise 12."""
    return 13 if is_leap_year(year) else 12


def last_month_of_year(year: int) -> HebrewMonth:
    """The month numbered last in the year: Adar II in leap years, else Adar."""
    return HebrewMonth.ADAR_II if is_leap_year(year) else HebrewMonth.ADAR


def months_of_year(year: int) -> list[HebrewMonth]:
    """The year's months in calendar order, starting from Tishrei."""
    last = last_month_of_year(year)
    return [HebrewMonth(m) for m in range(HebrewMonth.TISHREI, last + 1)] + [
        HebrewMonth(m) for m in range(HebrewMonth.NISSAN, HebrewMonth.ELUL + 1)
    ]
