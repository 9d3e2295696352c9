"""Holidays, fasts and other calendar facts derived from a Hebrew date."""

import logging
import math
from dataclasses import dataclass
from datetime import date as civil_date, datetime, timedelta
from enum import Enum

from .dafyomi import get_bavli_daf, get_yerushalmi_daf
from .hebrew_date import HebrewDate
from .models import Daf, DayOfWeek, HebrewMonth, MoladDate
from .molad import molad_for_month
from .parsha import Parsha, get_parsha, get_special_shabbos, get_upcoming_parsha

logger = logging.getLogger(__name__)

CHAG_START_MAX_DAYS = 10
CHAG_END_MAX_DAYS = 4
CHOL_HAMOED_MAX_DAYS = 6

# 28 Julian years of 365.25 days.
BIRKAS_HACHAMAH_CYCLE_DAYS = 10227
BIRKAS_HACHAMAH_DAY_IN_CYCLE = 172
TAL_UMATAR_TEKUFAH_DAYS = 47


class Holiday(Enum):
    """Holidays and special days, in order of precedence.

    When two fall on the same day the earlier member wins (Chanukah over
    Rosh Chodesh, for example).
    """

    EREV_PESACH = "Erev Pesach"
    PESACH = "Pesach"
    CHOL_HAMOED_PESACH = "Chol Hamoed Pesach"
    PESACH_SHENI = "Pesach Sheni"
    EREV_SHAVUOS = "Erev Shavuos"
    SHAVUOS = "Shavuos"
    SEVENTEENTH_OF_TAMMUZ = "Seventeenth of Tammuz"
    TISHA_BEAV = "Tishah B'Av"
    TU_BEAV = "Tu B'Av"
    EREV_ROSH_HASHANA = "Erev Rosh Hashana"
    ROSH_HASHANA = "Rosh Hashana"
    FAST_OF_GEDALYAH = "Fast of Gedalyah"
    EREV_YOM_KIPPUR = "Erev Yom Kippur"
    YOM_KIPPUR = "Yom Kippur"
    EREV_SUCCOS = "Erev Succos"
    SUCCOS = "Succos"
    CHOL_HAMOED_SUCCOS = "Chol Hamoed Succos"
    HOSHANA_RABBA = "Hoshana Rabbah"
    SHEMINI_ATZERES = "Shemini Atzeres"
    SIMCHAS_TORAH = "Simchas Torah"
    EREV_CHANUKAH = "Erev Chanukah"
    CHANUKAH = "Chanukah"
    TENTH_OF_TEVES = "Tenth of Teves"
    TU_BESHVAT = "Tu B'Shvat"
    FAST_OF_ESTHER = "Fast of Esther"
    PURIM = "Purim"
    SHUSHAN_PURIM = "Shushan Purim"
    PURIM_KATAN = "Purim Katan"
    EREV_ROSH_CHODESH = "Erev Rosh Chodesh"
    ROSH_CHODESH = "Rosh Chodesh"
    YOM_HASHOAH = "Yom HaShoah"
    YOM_HAZIKARON = "Yom Hazikaron"
    YOM_HAATZMAUT = "Yom Ha'atzmaut"
    YOM_YERUSHALAYIM = "Yom Yerushalayim"
    LAG_BAOMER = "Lag B'Omer"
    SHUSHAN_PURIM_KATAN = "Shushan Purim Katan"
    ISRU_CHAG = "Isru Chag"


def occurs_on(holiday: Holiday, ctx: "ObservanceContext") -> bool:
    """Whether a holiday falls on the context's day."""
    d = ctx.date
    month, day, dow = d.month, d.day, d.weekday
    leap, israel = d.is_leap_year, ctx.in_israel
    purim_month = HebrewMonth.ADAR_II if leap else HebrewMonth.ADAR

    if holiday is Holiday.EREV_PESACH:
        return month == HebrewMonth.NISSAN and day == 14
    if holiday is Holiday.PESACH:
        return month == HebrewMonth.NISSAN and (
            day in (15, 21) or (not israel and day in (16, 22))
        )
    if holiday is Holiday.CHOL_HAMOED_PESACH:
        return month == HebrewMonth.NISSAN and (17 <= day <= 20 or (israel and day == 16))
    if holiday is Holiday.PESACH_SHENI:
        return month == HebrewMonth.IYAR and day == 14
    if holiday is Holiday.EREV_SHAVUOS:
        return month == HebrewMonth.SIVAN and day == 5
    if holiday is Holiday.SHAVUOS:
        return month == HebrewMonth.SIVAN and (day == 6 or (not israel and day == 7))
    if holiday is Holiday.SEVENTEENTH_OF_TAMMUZ:
        return month == HebrewMonth.TAMMUZ and (
            (day == 17 and dow != DayOfWeek.SATURDAY)
            or (day == 18 and dow == DayOfWeek.SUNDAY)
        )
    if holiday is Holiday.TISHA_BEAV:
        return month == HebrewMonth.AV and (
            (day == 9 and dow != DayOfWeek.SATURDAY)
            or (day == 10 and dow == DayOfWeek.SUNDAY)
        )
    if holiday is Holiday.TU_BEAV:
        return month == HebrewMonth.AV and day == 15
    if holiday is Holiday.EREV_ROSH_HASHANA:
        return month == HebrewMonth.ELUL and day == 29
    if holiday is Holiday.ROSH_HASHANA:
        return month == HebrewMonth.TISHREI and day in (1, 2)
    if holiday is Holiday.FAST_OF_GEDALYAH:
        return month == HebrewMonth.TISHREI and (
            (day == 3 and dow != DayOfWeek.SATURDAY)
            or (day == 4 and dow == DayOfWeek.SUNDAY)
        )
    if holiday is Holiday.EREV_YOM_KIPPUR:
        return month == HebrewMonth.TISHREI and day == 9
    if holiday is Holiday.YOM_KIPPUR:
        return month == HebrewMonth.TISHREI and day == 10
    if holiday is Holiday.EREV_SUCCOS:
        return month == HebrewMonth.TISHREI and day == 14
    if holiday is Holiday.SUCCOS:
        return month == HebrewMonth.TISHREI and (day == 15 or (not israel and day == 16))
    if holiday is Holiday.CHOL_HAMOED_SUCCOS:
        return month == HebrewMonth.TISHREI and (17 <= day <= 20 or (israel and day == 16))
    if holiday is Holiday.HOSHANA_RABBA:
        return month == HebrewMonth.TISHREI and day == 21
    if holiday is Holiday.SHEMINI_ATZERES:
        return month == HebrewMonth.TISHREI and day == 22
    if holiday is Holiday.SIMCHAS_TORAH:
        return month == HebrewMonth.TISHREI and day == 23 and not israel
    if holiday is Holiday.EREV_CHANUKAH:
        return month == HebrewMonth.KISLEV and day == 24
    if holiday is Holiday.CHANUKAH:
        return (month == HebrewMonth.KISLEV and day >= 25) or (
            month == HebrewMonth.TEVES
            and (day in (1, 2) or (day == 3 and d.is_kislev_short))
        )
    if holiday is Holiday.TENTH_OF_TEVES:
        return month == HebrewMonth.TEVES and day == 10
    if holiday is Holiday.TU_BESHVAT:
        return month == HebrewMonth.SHEVAT and day == 15
    if holiday is Holiday.FAST_OF_ESTHER:
        return month == purim_month and (
            (day in (11, 12) and dow == DayOfWeek.THURSDAY)
            or (day == 13 and dow not in (DayOfWeek.FRIDAY, DayOfWeek.SATURDAY))
        )
    if holiday is Holiday.PURIM:
        return month == purim_month and day == 14
    if holiday is Holiday.SHUSHAN_PURIM:
        return month == purim_month and day == 15
    if holiday is Holiday.PURIM_KATAN:
        return leap and month == HebrewMonth.ADAR and day == 14
    if holiday is Holiday.EREV_ROSH_CHODESH:
        return day == 29 and month != HebrewMonth.ELUL
    if holiday is Holiday.ROSH_CHODESH:
        return (day == 1 and month != HebrewMonth.TISHREI) or day == 30
    if holiday is Holiday.YOM_HASHOAH:
        return month == HebrewMonth.NISSAN and (
            (day == 26 and dow == DayOfWeek.THURSDAY)
            or (day == 28 and dow == DayOfWeek.MONDAY)
            or (day == 27 and dow not in (DayOfWeek.SUNDAY, DayOfWeek.FRIDAY))
        )
    if holiday is Holiday.YOM_HAZIKARON:
        return month == HebrewMonth.IYAR and (
            (day == 4 and dow == DayOfWeek.TUESDAY)
            or (day in (2, 3) and dow == DayOfWeek.WEDNESDAY)
            or (day == 5 and dow == DayOfWeek.MONDAY)
        )
    if holiday is Holiday.YOM_HAATZMAUT:
        return month == HebrewMonth.IYAR and (
            (day == 5 and dow == DayOfWeek.WEDNESDAY)
            or (day == 6 and dow == DayOfWeek.TUESDAY)
            or (day in (3, 4) and dow == DayOfWeek.THURSDAY)
        )
    if holiday is Holiday.YOM_YERUSHALAYIM:
        return month == HebrewMonth.IYAR and day == 28
    if holiday is Holiday.LAG_BAOMER:
        return month == HebrewMonth.IYAR and day == 18
    if holiday is Holiday.SHUSHAN_PURIM_KATAN:
        return leap and month == HebrewMonth.ADAR and day == 15
    if holiday is Holiday.ISRU_CHAG:
        return month == HebrewMonth.SIVAN and (
            (israel and day == 7) or (not israel and day == 8)
        )
    raise ValueError(f"Unhandled holiday: {holiday!r}")


@dataclass(frozen=True)
class ObservanceContext:
    """A Hebrew date together with the Israel/diaspora setting."""

    date: HebrewDate
    in_israel: bool = False

    @classmethod
    def from_date(cls, value: civil_date, in_israel: bool = False) -> "ObservanceContext":
        return cls(HebrewDate.from_date(value), in_israel)

    def _with_date(self, date: HebrewDate) -> "ObservanceContext":
        return ObservanceContext(date, self.in_israel)

    @property
    def tomorrow(self) -> "ObservanceContext":
        return self._with_date(self.date.tomorrow)

    @property
    def yesterday(self) -> "ObservanceContext":
        return self._with_date(self.date.yesterday)

    def current_holiday(self) -> Holiday | None:
        """The highest-precedence holiday on this day, if any."""
        for holiday in Holiday:
            if occurs_on(holiday, self):
                return holiday
        return None

    def holidays(self) -> list[Holiday]:
        """Every holiday on this day, in order of precedence."""
        return [holiday for holiday in Holiday if occurs_on(holiday, self)]

    # Classification

    @property
    def is_rosh_chodesh(self) -> bool:
        return occurs_on(Holiday.ROSH_CHODESH, self)

    @property
    def is_erev_rosh_chodesh(self) -> bool:
        return occurs_on(Holiday.EREV_ROSH_CHODESH, self)

    @property
    def is_chanukah(self) -> bool:
        return occurs_on(Holiday.CHANUKAH, self)

    @property
    def is_yom_tov(self) -> bool:
        """Whether the day is a Yom Tov in the broad sense.

        Erev Yom Tov (other than Hoshana Rabba and Chol Hamoed Pesach),
        fasts other than Yom Kippur, Isru Chag and Rosh Chodesh do not count.
        """
        holiday = self.current_holiday()
        if holiday is None:
            return False
        excluded = (
            (
                self.is_erev_yom_tov
                and not (
                    occurs_on(Holiday.HOSHANA_RABBA, self)
                    or occurs_on(Holiday.CHOL_HAMOED_PESACH, self)
                )
            )
            or (self.is_taanis and not occurs_on(Holiday.YOM_KIPPUR, self))
            or occurs_on(Holiday.ISRU_CHAG, self)
            or holiday in (Holiday.EREV_ROSH_CHODESH, Holiday.ROSH_CHODESH)
        )
        return not excluded

    @property
    def is_yom_tov_assur_bemelacha(self) -> bool:
        """Whether the day is a Yom Tov on which work is forbidden."""
        return any(
            occurs_on(holiday, self)
            for holiday in (
                Holiday.PESACH,
                Holiday.SHAVUOS,
                Holiday.SUCCOS,
                Holiday.SHEMINI_ATZERES,
                Holiday.SIMCHAS_TORAH,
                Holiday.ROSH_HASHANA,
                Holiday.YOM_KIPPUR,
            )
        )

    @property
    def is_assur_bemelacha(self) -> bool:
        """Shabbos or a Yom Tov on which work is forbidden."""
        return self.date.weekday == DayOfWeek.SATURDAY or self.is_yom_tov_assur_bemelacha

    @property
    def is_erev_yom_tov(self) -> bool:
        """Erev Pesach, Shavuos, Rosh Hashana, Yom Kippur or Succos.

        Hoshana Rabba and the last day of Chol Hamoed Pesach also count.
        """
        return (
            any(
                occurs_on(holiday, self)
                for holiday in (
                    Holiday.EREV_PESACH,
                    Holiday.EREV_SHAVUOS,
                    Holiday.EREV_ROSH_HASHANA,
                    Holiday.EREV_YOM_KIPPUR,
                    Holiday.EREV_SUCCOS,
                    Holiday.HOSHANA_RABBA,
                )
            )
            or (occurs_on(Holiday.CHOL_HAMOED_PESACH, self) and self.date.day == 20)
        )

    @property
    def is_erev_yom_tov_sheni(self) -> bool:
        """Whether tomorrow is a second day of Yom Tov."""
        month, day = self.date.month, self.date.day
        if month == HebrewMonth.TISHREI and day == 1:
            return True
        if self.in_israel:
            return False
        if month == HebrewMonth.NISSAN:
            return day in (15, 21)
        if month == HebrewMonth.TISHREI:
            return day in (15, 22)
        if month == HebrewMonth.SIVAN:
            return day == 6
        return False

    @property
    def is_tomorrow_shabbos_or_yom_tov(self) -> bool:
        return (
            self.date.weekday == DayOfWeek.FRIDAY
            or self.is_erev_yom_tov
            or self.is_erev_yom_tov_sheni
        )

    @property
    def is_taanis(self) -> bool:
        """Whether the day is a public fast."""
        return any(
            occurs_on(holiday, self)
            for holiday in (
                Holiday.SEVENTEENTH_OF_TAMMUZ,
                Holiday.TISHA_BEAV,
                Holiday.YOM_KIPPUR,
                Holiday.FAST_OF_ESTHER,
                Holiday.FAST_OF_GEDALYAH,
                Holiday.TENTH_OF_TEVES,
            )
        )

    @property
    def is_taanis_bechoros(self) -> bool:
        """Fast of the firstborn: 14 Nissan, or Thursday the 12th when the 14th is Shabbos."""
        day, dow = self.date.day, self.date.weekday
        return self.date.month == HebrewMonth.NISSAN and (
            (day == 14 and dow != DayOfWeek.SATURDAY)
            or (day == 12 and dow == DayOfWeek.THURSDAY)
        )

    @property
    def is_cholhamoed(self) -> bool:
        return occurs_on(Holiday.CHOL_HAMOED_PESACH, self) or occurs_on(
            Holiday.CHOL_HAMOED_SUCCOS, self
        )

    @property
    def is_aseres_yemei_teshuva(self) -> bool:
        return self.date.month == HebrewMonth.TISHREI and self.date.day <= 10

    # Counters

    def day_of_chanukah(self) -> int | None:
        if not self.is_chanukah:
            return None
        if self.date.month == HebrewMonth.KISLEV:
            return self.date.day - 24
        return self.date.day + (5 if self.date.is_kislev_short else 6)

    def day_of_omer(self) -> int | None:
        month, day = self.date.month, self.date.day
        if month == HebrewMonth.NISSAN and day >= 16:
            return day - 15
        if month == HebrewMonth.IYAR:
            return day + 15
        if month == HebrewMonth.SIVAN and day < 6:
            return day + 44
        return None

    def chol_hamoed_day(self) -> int | None:
        """Which day of Chol Hamoed this is, counting from 1."""
        if not self.is_cholhamoed:
            return None
        count = 0
        current = self
        while current.is_cholhamoed and count < CHOL_HAMOED_MAX_DAYS:
            count += 1
            current = current.yesterday
        return count

    # Bounded walks

    def chag_start(self) -> "ObservanceContext | None":
        """The Erev Yom Tov on or before this day, within a few days."""
        current = self
        for _ in range(CHAG_START_MAX_DAYS):
            if current.is_erev_yom_tov:
                return current
            current = current.yesterday
        logger.debug(f"No Erev Yom Tov within {CHAG_START_MAX_DAYS} days before {self.date}")
        return None

    def chag_havdalah_date(self) -> "ObservanceContext | None":
        """The last day on which work is forbidden in the chag starting at chag_start()."""
        start = self.chag_start()
        if start is None:
            return None
        current = start.tomorrow
        for _ in range(CHAG_END_MAX_DAYS):
            if not current.is_assur_bemelacha:
                return current.yesterday
            current = current.tomorrow
        logger.warning(f"Chag starting {start.date} did not end within {CHAG_END_MAX_DAYS} days")
        return None

    # Liturgical calendar facts

    @property
    def tekufas_tishrei_elapsed_days(self) -> int:
        """Days since Tekufas Tishrei, using Julian years of 365.25 days."""
        days = self.date.elapsed_days + (self.date.days_since_start_of_year - 1) + 0.5
        solar = (self.date.year - 1) * 365.25
        return math.floor(days - solar)

    @property
    def is_birkas_hachamah(self) -> bool:
        elapsed = self.date.elapsed_days + self.date.days_since_start_of_year
        return elapsed % BIRKAS_HACHAMAH_CYCLE_DAYS == BIRKAS_HACHAMAH_DAY_IN_CYCLE

    @property
    def is_mashiv_haruach_recited(self) -> bool:
        """Between Shemini Atzeres and the first day of Pesach, exclusive."""
        start = HebrewDate(self.date.year, HebrewMonth.TISHREI, 22)
        end = HebrewDate(self.date.year, HebrewMonth.NISSAN, 15)
        return start < self.date < end

    @property
    def is_mashiv_haruach_start_date(self) -> bool:
        return self.date.month == HebrewMonth.TISHREI and self.date.day == 22

    @property
    def is_mashiv_haruach_end_date(self) -> bool:
        return self.date.month == HebrewMonth.NISSAN and self.date.day == 15

    @property
    def is_morid_hatal_recited(self) -> bool:
        return (
            not self.is_mashiv_haruach_recited
            or self.is_mashiv_haruach_start_date
            or self.is_mashiv_haruach_end_date
        )

    @property
    def is_vesein_tal_umatar_recited(self) -> bool:
        """Whether the request for rain is said in the weekday Amidah.

        In Israel it starts on 7 Cheshvan; elsewhere 60 days after Tekufas
        Tishrei. It stops on the first day of Pesach in both.
        """
        month, day = self.date.month, self.date.day
        if month == HebrewMonth.NISSAN and day < 15:
            return True
        if month < HebrewMonth.CHESHVAN:
            return False
        if self.in_israel:
            return month != HebrewMonth.CHESHVAN or day >= 7
        return self.tekufas_tishrei_elapsed_days >= TAL_UMATAR_TEKUFAH_DAYS

    @property
    def is_vesein_beracha_recited(self) -> bool:
        return not self.is_vesein_tal_umatar_recited

    @property
    def is_ledavid_said(self) -> bool:
        """Psalm 27 from Rosh Chodesh Elul through Hoshana Rabba."""
        return self.date.month == HebrewMonth.ELUL or (
            self.date.month == HebrewMonth.TISHREI and self.date.day < 22
        )

    @property
    def is_machar_chodesh(self) -> bool:
        """Shabbos on which tomorrow is Rosh Chodesh."""
        return self.date.weekday == DayOfWeek.SATURDAY and self.date.day in (29, 30)

    @property
    def is_shabbos_mevorchim(self) -> bool:
        return (
            self.date.weekday == DayOfWeek.SATURDAY
            and self.date.month != HebrewMonth.ELUL
            and 23 <= self.date.day <= 29
        )

    # Molad and Kiddush Levana

    def molad(self) -> MoladDate:
        """The molad of this date's month."""
        return molad_for_month(self.date.year, self.date.month)

    def earliest_kiddush_levana_3_days(self) -> datetime:
        return self.molad().as_datetime() + timedelta(days=3)

    def earliest_kiddush_levana_7_days(self) -> datetime:
        return self.molad().as_datetime() + timedelta(days=7)

    def latest_kiddush_levana_between_moldos(self) -> datetime:
        """Half of 29 days, 12 hours and 793 chalakim after the molad."""
        return self.molad().as_datetime() + timedelta(
            days=14, hours=18, minutes=22, seconds=1, milliseconds=666
        )

    def latest_kiddush_levana_15_days(self) -> datetime:
        return self.molad().as_datetime() + timedelta(days=15)

    # Daf Yomi and weekly reading

    def daf_yomi_bavli(self) -> Daf | None:
        return get_bavli_daf(self.date.to_date())

    def daf_yomi_yerushalmi(self) -> Daf | None:
        return get_yerushalmi_daf(self.date.to_date())

    def parsha(self) -> Parsha:
        return get_parsha(self.date, self.in_israel)

    def upcoming_parsha(self) -> Parsha:
        return get_upcoming_parsha(self.date, self.in_israel)

    def special_shabbos(self) -> Parsha:
        return get_special_shabbos(self.date, self.in_israel)
