"""Data models for the Hebrew calendar engine."""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from enum import Enum, IntEnum

from .constants import (
    JERUSALEM_LMT_OFFSET_SECONDS,
    JERUSALEM_STANDARD_UTC_OFFSET_HOURS,
)


class HebrewMonth(IntEnum):
    """Hebrew months, numbered from Nissan as in the Torah."""

    NISSAN = 1
    IYAR = 2
    SIVAN = 3
    TAMMUZ = 4
    AV = 5
    ELUL = 6
    TISHREI = 7
    CHESHVAN = 8
    KISLEV = 9
    TEVES = 10
    SHEVAT = 11
    ADAR = 12
    ADAR_II = 13

    @classmethod
    def coerce(cls, value: "int | HebrewMonth") -> "HebrewMonth":
        """Convert a month number to a HebrewMonth, rejecting out-of-range values."""
        try:
            return cls(value)
        except ValueError:
            raise ValueError(f"Month must be between 1 and 13, got {value!r}") from None

    @property
    def display_name(self) -> str:
        """Transliterated month name, e.g. 'Adar II'."""
        return "Adar II" if self is HebrewMonth.ADAR_II else self.name.title()


class DayOfWeek(IntEnum):
    """Day of the week, Sunday first."""

    SUNDAY = 1
    MONDAY = 2
    TUESDAY = 3
    WEDNESDAY = 4
    THURSDAY = 5
    FRIDAY = 6
    SATURDAY = 7


class YearType(IntEnum):
    """Length category of a Hebrew year (its kviah)."""

    DEFICIENT = 0  # chaserim: Cheshvan and Kislev both 29
    REGULAR = 1  # kesidran: Cheshvan 29, Kislev 30
    COMPLETE = 2  # shelaimim: Cheshvan and Kislev both 30


class DafCycle(Enum):
    """Which Talmud a Daf Yomi cycle runs through."""

    BAVLI = "bavli"
    YERUSHALMI = "yerushalmi"


@dataclass(frozen=True)
class Molad:
    """Time of day of a molad, in hours, minutes and chalakim."""

    hours: int
    minutes: int
    chalakim: int  # 0-17; one chelek is 3 1/3 seconds

    def __post_init__(self) -> None:
        """Validate the time of day."""
        if not 0 <= self.hours <= 23:
            raise ValueError(f"Molad hours must be between 0 and 23, got {self.hours}")
        if not 0 <= self.minutes <= 59:
            raise ValueError(f"Molad minutes must be between 0 and 59, got {self.minutes}")
        if not 0 <= self.chalakim <= 17:
            raise ValueError(f"Molad chalakim must be between 0 and 17, got {self.chalakim}")


@dataclass(frozen=True)
class MoladDate:
    """A molad placed on the civil day it falls on, with its clock time."""

    absolute_day: int
    gregorian: tuple[int, int, int]
    molad: Molad

    def as_datetime(self) -> datetime:
        """The molad as an instant in Jerusalem standard time (UTC+2).

        The molad is reckoned in Jerusalem local mean time, which is
        20 minutes and 56.496 seconds ahead of standard time.
        """
        year, month, day = self.gregorian
        tz = timezone(timedelta(hours=JERUSALEM_STANDARD_UTC_OFFSET_HOURS))
        local_mean = datetime(
            year, month, day, self.molad.hours, self.molad.minutes, tzinfo=tz
        ) + timedelta(seconds=self.molad.chalakim * 10 / 3)
        return local_mean - timedelta(seconds=JERUSALEM_LMT_OFFSET_SECONDS)


@dataclass(frozen=True)
class Daf:
    """A page of Talmud in one of the Daf Yomi cycles."""

    tractate_index: int
    page: int
    cycle: DafCycle

    @property
    def tractate(self) -> str:
        """Transliterated tractate name."""
        from .dafyomi.tractates import tractate_name

        return tractate_name(self.cycle, self.tractate_index)

    @property
    def tractate_he(self) -> str:
        """Hebrew tractate name."""
        from .dafyomi.tractates import tractate_name_he

        return tractate_name_he(self.cycle, self.tractate_index)
