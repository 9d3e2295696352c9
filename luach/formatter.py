"""Plain-text formatting of calendar days for the preview CLI."""

from .bridge import hebrew_to_absolute
from .hebrew_date import HebrewDate
from .models import Daf, DayOfWeek, HebrewMonth, MoladDate
from .observance import Holiday, ObservanceContext
from .parsha import Parsha

HEBREW_MONTH_NAMES = {
    HebrewMonth.NISSAN: "ניסן",
    HebrewMonth.IYAR: "אייר",
    HebrewMonth.SIVAN: "סיוון",
    HebrewMonth.TAMMUZ: "תמוז",
    HebrewMonth.AV: "אב",
    HebrewMonth.ELUL: "אלול",
    HebrewMonth.TISHREI: "תשרי",
    HebrewMonth.CHESHVAN: "חשוון",
    HebrewMonth.KISLEV: "כסלו",
    HebrewMonth.TEVES: "טבת",
    HebrewMonth.SHEVAT: "שבט",
    HebrewMonth.ADAR: "אדר",
    HebrewMonth.ADAR_II: "אדר ב",
}


def month_name(month: HebrewMonth, leap: bool = False) -> str:
    """Transliterated month name; Adar is 'Adar I' in a leap year."""
    if month == HebrewMonth.ADAR and leap:
        return "Adar I"
    return month.display_name


def month_name_he(month: HebrewMonth, leap: bool = False) -> str:
    if month == HebrewMonth.ADAR and leap:
        return "אדר א"
    return HEBREW_MONTH_NAMES[month]


def format_hebrew_date(date: HebrewDate) -> str:
    """Format as e.g. '14 Teves, 5784'."""
    return f"{date.day} {month_name(date.month, date.is_leap_year)}, {date.year}"


def format_gregorian(date: HebrewDate) -> str:
    year, month, day = date.gregorian
    return f"{year:04d}-{month:02d}-{day:02d}"


def format_weekday(day: DayOfWeek) -> str:
    return "Shabbos" if day == DayOfWeek.SATURDAY else day.name.title()


def format_daf(daf: Daf | None) -> str:
    """Format a daf as '<tractate> <page>', or note that there is none."""
    if daf is None:
        return "No daf today"
    return f"{daf.tractate} {daf.page} ({daf.tractate_he})"


def format_molad(molad_date: MoladDate) -> str:
    """Format the molad the way it is announced, with its civil date."""
    year, month, day = molad_date.gregorian
    molad = molad_date.molad
    chalakim = "chelek" if molad.chalakim == 1 else "chalakim"
    return (
        f"{year:04d}-{month:02d}-{day:02d} "
        f"{molad.hours:02d}:{molad.minutes:02d} and {molad.chalakim} {chalakim}"
    )


def format_day_summary(ctx: ObservanceContext) -> str:
    """Summarise a day: dates, holiday, counters, reading and Daf Yomi."""
    date = ctx.date
    lines = [
        f"{format_hebrew_date(date)} | {date.day} {month_name_he(date.month, date.is_leap_year)} {date.year}",
        f"{format_weekday(date.weekday)}, {format_gregorian(date)}",
    ]

    holidays = ctx.holidays()
    if holidays:
        lines.append("Holiday: " + ", ".join(holiday.value for holiday in holidays))
    if ctx.is_yom_tov:
        lines.append("Yom Tov")
    if ctx.is_taanis:
        lines.append("Fast day")

    chanukah = ctx.day_of_chanukah()
    if chanukah is not None:
        lines.append(f"Chanukah day {chanukah}")
    omer = ctx.day_of_omer()
    if omer is not None:
        lines.append(f"Omer day {omer}")

    if date.weekday == DayOfWeek.SATURDAY:
        parsha = ctx.parsha()
        if parsha is not Parsha.NONE:
            lines.append(f"Parsha: {parsha.value} ({parsha.hebrew})")
        special = ctx.special_shabbos()
        if special is not Parsha.NONE:
            lines.append(f"Shabbos {special.value}")
    else:
        lines.append(f"Upcoming parsha: {ctx.upcoming_parsha().value}")

    if ctx.is_shabbos_mevorchim:
        next_month = date.plus_days(date.days_in_month - date.day + 1)
        lines.append(f"Molad: {format_molad(ObservanceContext(next_month).molad())}")

    lines.append(f"Daf Yomi: {format_daf(ctx.daf_yomi_bavli())}")
    lines.append(f"Yerushalmi: {format_daf(ctx.daf_yomi_yerushalmi())}")
    return "\n".join(lines)


def format_year_holidays(year: int, in_israel: bool = False) -> str:
    """One line per day of the Hebrew year that has a holiday."""
    start = hebrew_to_absolute(year, HebrewMonth.TISHREI, 1)
    end = hebrew_to_absolute(year + 1, HebrewMonth.TISHREI, 1)
    lines = []
    for absolute_day in range(start, end):
        ctx = ObservanceContext(HebrewDate.from_absolute(absolute_day), in_israel)
        holiday = ctx.current_holiday()
        if holiday in (None, Holiday.EREV_ROSH_CHODESH):
            continue
        lines.append(
            f"{format_gregorian(ctx.date)}  {format_hebrew_date(ctx.date):<22} {holiday.value}"
        )
    return "\n".join(lines)
