"""Weekly Torah readings.

The reading for each Shabbos is laid out per year. Shabbosos that fall on a
Yom Tov (or on Chol Hamoed) have no weekly reading. Between them the year is
cut into segments at fixed points, each ending with a known reading:

* Shabbos before Pesach: Tzav in a common year, Metzora in a leap year
* Shabbos before Shavuos: Bamidbar
* Shabbos before or on Tisha B'Av: Devarim
* Shabbos before Rosh Hashana: Nitzavim, or Nitzavim-Vayeilech when the
  next year has room for only Haazinu before Succos

Within a segment readings are doubled, in a fixed order, only as far as is
needed to fit its Shabbosos. When a segment has more Shabbosos than
readings, the next readings are pulled forward (Acharei Mos before Pesach in
some leap years, and the longer run of Israeli readings after an eighth day
of Pesach on Shabbos).
"""

import logging
from enum import Enum
from functools import lru_cache
from types import MappingProxyType

from .bridge import hebrew_to_absolute
from .hebrew_date import HebrewDate
from .models import DayOfWeek, HebrewMonth
from .molad import is_leap_year

logger = logging.getLogger(__name__)

UPCOMING_PARSHA_MAX_WEEKS = 4


class Parsha(Enum):
    """Weekly readings, combined readings and special Shabbosos."""

    NONE = ""
    BERESHIS = "Bereshis"
    NOACH = "Noach"
    LECH_LECHA = "Lech Lecha"
    VAYERA = "Vayera"
    CHAYEI_SARA = "Chayei Sara"
    TOLDOS = "Toldos"
    VAYETZEI = "Vayetzei"
    VAYISHLACH = "Vayishlach"
    VAYESHEV = "Vayeshev"
    MIKETZ = "Miketz"
    VAYIGASH = "Vayigash"
    VAYECHI = "Vayechi"
    SHEMOS = "Shemos"
    VAERA = "Vaera"
    BO = "Bo"
    BESHALACH = "Beshalach"
    YISRO = "Yisro"
    MISHPATIM = "Mishpatim"
    TERUMAH = "Terumah"
    TETZAVEH = "Tetzaveh"
    KI_SISA = "Ki Sisa"
    VAYAKHEL = "Vayakhel"
    PEKUDEI = "Pekudei"
    VAYIKRA = "Vayikra"
    TZAV = "Tzav"
    SHMINI = "Shmini"
    TAZRIA = "Tazria"
    METZORA = "Metzora"
    ACHREI_MOS = "Achrei Mos"
    KEDOSHIM = "Kedoshim"
    EMOR = "Emor"
    BEHAR = "Behar"
    BECHUKOSAI = "Bechukosai"
    BAMIDBAR = "Bamidbar"
    NASSO = "Nasso"
    BEHAALOSCHA = "Beha'aloscha"
    SHLACH = "Sh'lach"
    KORACH = "Korach"
    CHUKAS = "Chukas"
    BALAK = "Balak"
    PINCHAS = "Pinchas"
    MATOS = "Matos"
    MASEI = "Masei"
    DEVARIM = "Devarim"
    VAESCHANAN = "Vaeschanan"
    EIKEV = "Eikev"
    REEH = "Re'eh"
    SHOFTIM = "Shoftim"
    KI_SEITZEI = "Ki Seitzei"
    KI_SAVO = "Ki Savo"
    NITZAVIM = "Nitzavim"
    VAYEILECH = "Vayeilech"
    HAAZINU = "Ha'Azinu"
    VZOS_HABERACHA = "Vezos Habracha"
    VAYAKHEL_PEKUDEI = "Vayakhel Pekudei"
    TAZRIA_METZORA = "Tazria Metzora"
    ACHREI_MOS_KEDOSHIM = "Achrei Mos Kedoshim"
    BEHAR_BECHUKOSAI = "Behar Bechukosai"
    CHUKAS_BALAK = "Chukas Balak"
    MATOS_MASEI = "Matos Masei"
    NITZAVIM_VAYEILECH = "Nitzavim Vayeilech"
    SHKALIM = "Shekalim"
    ZACHOR = "Zachor"
    PARA = "Parah"
    HACHODESH = "Hachodesh"
    HAGADOL = "Hagadol"
    CHAZON = "Chazon"
    NACHAMU = "Nachamu"
    SHUVA = "Shuva"
    SHIRA = "Shira"

    @property
    def hebrew(self) -> str:
        return PARSHA_NAMES_HE[self]


PARSHA_NAMES_HE = {
    Parsha.NONE: "",
    Parsha.BERESHIS: "בראשית",
    Parsha.NOACH: "נח",
    Parsha.LECH_LECHA: "לך לך",
    Parsha.VAYERA: "וירא",
    Parsha.CHAYEI_SARA: "חיי שרה",
    Parsha.TOLDOS: "תולדות",
    Parsha.VAYETZEI: "ויצא",
    Parsha.VAYISHLACH: "וישלח",
    Parsha.VAYESHEV: "וישב",
    Parsha.MIKETZ: "מקץ",
    Parsha.VAYIGASH: "ויגש",
    Parsha.VAYECHI: "ויחי",
    Parsha.SHEMOS: "שמות",
    Parsha.VAERA: "וארא",
    Parsha.BO: "בא",
    Parsha.BESHALACH: "בשלח",
    Parsha.YISRO: "יתרו",
    Parsha.MISHPATIM: "משפטים",
    Parsha.TERUMAH: "תרומה",
    Parsha.TETZAVEH: "תצוה",
    Parsha.KI_SISA: "כי תשא",
    Parsha.VAYAKHEL: "ויקהל",
    Parsha.PEKUDEI: "פקודי",
    Parsha.VAYIKRA: "ויקרא",
    Parsha.TZAV: "צו",
    Parsha.SHMINI: "שמיני",
    Parsha.TAZRIA: "תזריע",
    Parsha.METZORA: "מצרע",
    Parsha.ACHREI_MOS: "אחרי מות",
    Parsha.KEDOSHIM: "קדושים",
    Parsha.EMOR: "אמור",
    Parsha.BEHAR: "בהר",
    Parsha.BECHUKOSAI: "בחקתי",
    Parsha.BAMIDBAR: "במדבר",
    Parsha.NASSO: "נשא",
    Parsha.BEHAALOSCHA: "בהעלתך",
    Parsha.SHLACH: "שלח לך",
    Parsha.KORACH: "קרח",
    Parsha.CHUKAS: "חוקת",
    Parsha.BALAK: "בלק",
    Parsha.PINCHAS: "פינחס",
    Parsha.MATOS: "מטות",
    Parsha.MASEI: "מסעי",
    Parsha.DEVARIM: "דברים",
    Parsha.VAESCHANAN: "ואתחנן",
    Parsha.EIKEV: "עקב",
    Parsha.REEH: "ראה",
    Parsha.SHOFTIM: "שופטים",
    Parsha.KI_SEITZEI: "כי תצא",
    Parsha.KI_SAVO: "כי תבוא",
    Parsha.NITZAVIM: "ניצבים",
    Parsha.VAYEILECH: "וילך",
    Parsha.HAAZINU: "האזינו",
    Parsha.VZOS_HABERACHA: "וזאת הברכה",
    Parsha.VAYAKHEL_PEKUDEI: "ויקהל פקודי",
    Parsha.TAZRIA_METZORA: "תזריע מצרע",
    Parsha.ACHREI_MOS_KEDOSHIM: "אחרי מות קדושים",
    Parsha.BEHAR_BECHUKOSAI: "בהר בחקתי",
    Parsha.CHUKAS_BALAK: "חוקת בלק",
    Parsha.MATOS_MASEI: "מטות מסעי",
    Parsha.NITZAVIM_VAYEILECH: "ניצבים וילך",
    Parsha.SHKALIM: "שקלים",
    Parsha.ZACHOR: "זכור",
    Parsha.PARA: "פרה",
    Parsha.HACHODESH: "החדש",
    Parsha.HAGADOL: "הגדול",
    Parsha.CHAZON: "חזון",
    Parsha.NACHAMU: "נחמו",
    Parsha.SHUVA: "שובה",
    Parsha.SHIRA: "שירה",
}

_MEMBERS = list(Parsha)

# Readings that can fall on Shabbos, in order. Vezos Habracha is read on
# Simchas Torah only.
WEEKLY_READINGS = tuple(
    _MEMBERS[_MEMBERS.index(Parsha.BERESHIS) : _MEMBERS.index(Parsha.HAAZINU) + 1]
)

# Pairs that may be read together, in the order they are joined.
DOUBLED_READINGS = {
    Parsha.VAYAKHEL: Parsha.VAYAKHEL_PEKUDEI,
    Parsha.TAZRIA: Parsha.TAZRIA_METZORA,
    Parsha.ACHREI_MOS: Parsha.ACHREI_MOS_KEDOSHIM,
    Parsha.BEHAR: Parsha.BEHAR_BECHUKOSAI,
    Parsha.MATOS: Parsha.MATOS_MASEI,
    Parsha.CHUKAS: Parsha.CHUKAS_BALAK,
    Parsha.NITZAVIM: Parsha.NITZAVIM_VAYEILECH,
}
_COMBINED = frozenset(DOUBLED_READINGS.values())


def _first_saturday(absolute_day: int) -> int:
    """The first Shabbos on or after an absolute day."""
    return absolute_day + (6 - absolute_day % 7) % 7


def _yom_tov_days(year: int, in_israel: bool) -> frozenset[int]:
    """Days of the year whose Shabbos reading replaces the weekly parsha."""
    ranges = [
        (HebrewMonth.TISHREI, 1, 2),
        (HebrewMonth.TISHREI, 10, 10),
        (HebrewMonth.TISHREI, 15, 22 if in_israel else 23),
        (HebrewMonth.NISSAN, 15, 21 if in_israel else 22),
        (HebrewMonth.SIVAN, 6, 6 if in_israel else 7),
    ]
    return frozenset(
        hebrew_to_absolute(year, month, day)
        for month, first, last in ranges
        for day in range(first, last + 1)
    )


def _reading_shabbosos(year: int, in_israel: bool, start: int, end: int) -> list[int]:
    """Shabbosos in [start, end) that have a weekly reading."""
    skip = _yom_tov_days(year, in_israel)
    return [day for day in range(_first_saturday(start), end, 7) if day not in skip]


def _shabbosos_before_succos(year: int, in_israel: bool) -> list[int]:
    return _reading_shabbosos(
        year,
        in_israel,
        hebrew_to_absolute(year, HebrewMonth.TISHREI, 1),
        hebrew_to_absolute(year, HebrewMonth.TISHREI, 15),
    )


def _fill_segment(
    pointer: int, anchor: Parsha, slots: int
) -> tuple[list[Parsha], int]:
    """Lay out readings for a segment's Shabbosos.

    Starts at WEEKLY_READINGS[pointer] and aims to finish with ``anchor``.
    Returns the readings, one per Shabbos, and the index of the next unread
    reading.
    """
    end = WEEKLY_READINGS.index(anchor) + 1
    if slots > end - pointer:
        end = min(len(WEEKLY_READINGS), pointer + slots)
    readings = list(WEEKLY_READINGS[pointer:end])

    for first, combined in DOUBLED_READINGS.items():
        if len(readings) <= slots:
            break
        if first not in readings:
            continue
        i = readings.index(first)
        following = WEEKLY_READINGS[WEEKLY_READINGS.index(first) + 1]
        if i + 1 < len(readings) and readings[i + 1] == following:
            readings[i : i + 2] = [combined]

    if len(readings) > slots:
        logger.warning(
            f"{len(readings) - slots} readings before {anchor.value} "
            f"do not fit and carry into the next segment"
        )
    read = readings[:slots]
    pointer += sum(2 if reading in _COMBINED else 1 for reading in read)
    return read, pointer


@lru_cache(maxsize=64)
def schedule(year: int, in_israel: bool = False) -> MappingProxyType:
    """Map each Shabbos of a Hebrew year (by absolute day) to its reading."""
    rosh_hashana = hebrew_to_absolute(year, HebrewMonth.TISHREI, 1)
    next_rosh_hashana = hebrew_to_absolute(year + 1, HebrewMonth.TISHREI, 1)

    readings = {
        day: Parsha.NONE
        for day in range(_first_saturday(rosh_hashana), next_rosh_hashana, 7)
    }

    before_succos = _shabbosos_before_succos(year, in_israel)
    opening = [Parsha.VAYEILECH, Parsha.HAAZINU][-len(before_succos) :]
    readings.update(zip(before_succos, opening))

    if len(_shabbosos_before_succos(year + 1, in_israel)) == 1:
        last_reading = Parsha.VAYEILECH
    else:
        last_reading = Parsha.NITZAVIM

    boundaries = [
        hebrew_to_absolute(year, HebrewMonth.TISHREI, 15),
        hebrew_to_absolute(year, HebrewMonth.NISSAN, 15),
        hebrew_to_absolute(year, HebrewMonth.SIVAN, 6),
        hebrew_to_absolute(year, HebrewMonth.AV, 10),
        next_rosh_hashana,
    ]
    anchors = [
        Parsha.METZORA if is_leap_year(year) else Parsha.TZAV,
        Parsha.BAMIDBAR,
        Parsha.DEVARIM,
        last_reading,
    ]

    pointer = 0
    for start, end, anchor in zip(boundaries, boundaries[1:], anchors):
        shabbosos = _reading_shabbosos(year, in_israel, start, end)
        segment, pointer = _fill_segment(pointer, anchor, len(shabbosos))
        readings.update(zip(shabbosos, segment))

    logger.debug(f"Laid out {len(readings)} Shabbosos for {year} (in_israel={in_israel})")
    return MappingProxyType(readings)


def get_parsha(date: HebrewDate, in_israel: bool = False) -> Parsha:
    """The weekly reading on a Shabbos, or NONE on a weekday or Yom Tov."""
    if date.weekday != DayOfWeek.SATURDAY:
        return Parsha.NONE
    return schedule(date.year, in_israel)[date.absolute_day]


def get_upcoming_parsha(date: HebrewDate, in_israel: bool = False) -> Parsha:
    """The reading of the next Shabbos after ``date`` that has one."""
    days_to_shabbos = (DayOfWeek.SATURDAY - date.weekday) % 7 or 7
    shabbos = date.plus_days(days_to_shabbos)
    for _ in range(UPCOMING_PARSHA_MAX_WEEKS):
        parsha = get_parsha(shabbos, in_israel)
        if parsha is not Parsha.NONE:
            return parsha
        shabbos = shabbos.plus_days(7)
    logger.warning(f"No weekly reading within {UPCOMING_PARSHA_MAX_WEEKS} weeks of {date}")
    return Parsha.NONE


def get_special_shabbos(date: HebrewDate, in_israel: bool = False) -> Parsha:
    """The special Shabbos (the four parshiyos, Hagadol, Shuva, etc.) or NONE."""
    if date.weekday != DayOfWeek.SATURDAY:
        return Parsha.NONE

    month, day, leap = date.month, date.day, date.is_leap_year
    if (month == HebrewMonth.SHEVAT and not leap) or (month == HebrewMonth.ADAR and leap):
        if day in (25, 27, 29):
            return Parsha.SHKALIM
    if (month == HebrewMonth.ADAR and not leap) or month == HebrewMonth.ADAR_II:
        if day == 1:
            return Parsha.SHKALIM
        if day in (8, 9, 11, 13):
            return Parsha.ZACHOR
        if day in (18, 20, 22, 23):
            return Parsha.PARA
        if day in (25, 27, 29):
            return Parsha.HACHODESH
    if month == HebrewMonth.NISSAN:
        if day == 1:
            return Parsha.HACHODESH
        if 8 <= day <= 14:
            return Parsha.HAGADOL
    if month == HebrewMonth.AV:
        if 4 <= day <= 9:
            return Parsha.CHAZON
        if 10 <= day <= 16:
            return Parsha.NACHAMU
    if month == HebrewMonth.TISHREI and 3 <= day <= 8:
        return Parsha.SHUVA
    if get_parsha(date, in_israel) is Parsha.BESHALACH:
        return Parsha.SHIRA
    return Parsha.NONE
