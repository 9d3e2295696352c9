"""The HebrewDate value type."""

from dataclasses import dataclass
from datetime import date
from functools import cached_property, total_ordering

from . import bridge, dechiyos, year as hebrew_year
from .models import DayOfWeek, HebrewMonth, YearType


@total_ordering
@dataclass(frozen=True)
class HebrewDate:
    """A valid day of the Hebrew calendar.

    The constructor is strict: an impossible day (30 Cheshvan in a year where
    Cheshvan is short, Adar II in a common year) raises ValueError. Use
    ``HebrewDate.of`` to have such dates roll forward instead.
    """

    year: int
    month: HebrewMonth
    day: int

    def __post_init__(self) -> None:
        """Validate the date against the year's calendar."""
        if self.year < 1:
            raise ValueError(f"Hebrew year must be 1 or later, got {self.year}")
        object.__setattr__(self, "month", HebrewMonth.coerce(self.month))
        if self.month == HebrewMonth.ADAR_II and not hebrew_year.is_leap_year(self.year):
            raise ValueError(f"Adar II does not exist in common year {self.year}")
        length = hebrew_year.month_length(self.month, self.year)
        if not 1 <= self.day <= length:
            raise ValueError(
                f"Day must be between 1 and {length} for {self.month.display_name} "
                f"{self.year}, got {self.day}"
            )

    @classmethod
    def of(cls, year: int, month: HebrewMonth | int, day: int) -> "HebrewDate":
        """Build a date, rolling day 30 of a short month into the next month.

        Adar II of a common year likewise rolls forward into Nissan.
        """
        month = HebrewMonth.coerce(month)
        if not 1 <= day <= 30:
            raise ValueError(f"Day must be between 1 and 30, got {day}")
        return cls.from_absolute(bridge.hebrew_to_absolute(year, month, day))

    @classmethod
    def from_absolute(cls, absolute_day: int) -> "HebrewDate":
        return cls(*bridge.absolute_to_hebrew(absolute_day))

    @classmethod
    def from_gregorian(cls, year: int, month: int, day: int) -> "HebrewDate":
        """Hebrew date of a proleptic Gregorian date."""
        if not 1 <= month <= 12:
            raise ValueError(f"Gregorian month must be between 1 and 12, got {month}")
        last = bridge.last_day_of_gregorian_month(month, year)
        if not 1 <= day <= last:
            raise ValueError(f"Gregorian day must be between 1 and {last}, got {day}")
        return cls.from_absolute(bridge.gregorian_to_absolute(year, month, day))

    @classmethod
    def from_date(cls, value: date) -> "HebrewDate":
        return cls.from_absolute(value.toordinal())

    @classmethod
    def today(cls) -> "HebrewDate":
        return cls.from_date(date.today())

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, HebrewDate):
            return NotImplemented
        return self.absolute_day < other.absolute_day

    @cached_property
    def absolute_day(self) -> int:
        return bridge.hebrew_to_absolute(self.year, self.month, self.day)

    @cached_property
    def gregorian(self) -> tuple[int, int, int]:
        """(year, month, day) in the proleptic Gregorian calendar."""
        return bridge.absolute_to_gregorian(self.absolute_day)

    @property
    def weekday(self) -> DayOfWeek:
        return bridge.day_of_week(self.absolute_day)

    @property
    def is_leap_year(self) -> bool:
        return hebrew_year.is_leap_year(self.year)

    @cached_property
    def days_in_year(self) -> int:
        return hebrew_year.days_in_year(self.year)

    @property
    def days_in_month(self) -> int:
        return hebrew_year.month_length(self.month, self.year)

    @cached_property
    def year_type(self) -> YearType:
        return hebrew_year.year_length_category(self.year)

    @property
    def is_cheshvan_long(self) -> bool:
        return self.year_type == YearType.COMPLETE

    @property
    def is_kislev_short(self) -> bool:
        return self.year_type == YearType.DEFICIENT

    @property
    def elapsed_days(self) -> int:
        """Days from the epoch Sunday to Rosh Hashana of this date's year."""
        return dechiyos.elapsed_days(self.year)

    @property
    def days_since_start_of_year(self) -> int:
        """Day number within the year, 1 Tishrei being day 1."""
        return bridge.days_since_start_of_year(self.year, self.month, self.day)

    def plus_days(self, days: int) -> "HebrewDate":
        return HebrewDate.from_absolute(self.absolute_day + days)

    @property
    def tomorrow(self) -> "HebrewDate":
        return self.plus_days(1)

    @property
    def yesterday(self) -> "HebrewDate":
        return self.plus_days(-1)

    def to_date(self) -> date:
        """The Gregorian date as a ``datetime.date`` (years 1-9999 only)."""
        return date(*self.gregorian)

    def __str__(self) -> str:
        return f"{self.day} {self.month.display_name} {self.year}"
