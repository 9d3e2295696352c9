"""Daf Yomi Yerushalmi: the Vilna Yerushalmi cycle begun on 2 February 1980.

No page is learned on Yom Kippur or on Tisha B'Av (the 10th of Av when the
9th is Shabbos), so each cycle runs 1554 study days plus however many of
those days fall inside it.
"""

import logging
from datetime import date
from functools import lru_cache

from ..bridge import absolute_to_hebrew, day_of_week, hebrew_to_absolute
from ..models import Daf, DafCycle, DayOfWeek, HebrewMonth
from .tractates import YERUSHALMI_PAGES

logger = logging.getLogger(__name__)

YERUSHALMI_START = date(1980, 2, 2)
PAGES_PER_CYCLE = sum(YERUSHALMI_PAGES)


def excluded_days(year: int) -> tuple[int, int]:
    """Absolute days of Yom Kippur and observed Tisha B'Av in a Hebrew year."""
    yom_kippur = hebrew_to_absolute(year, HebrewMonth.TISHREI, 10)
    tisha_beav = hebrew_to_absolute(year, HebrewMonth.AV, 9)
    if day_of_week(tisha_beav) == DayOfWeek.SATURDAY:
        tisha_beav += 1
    return yom_kippur, tisha_beav


def count_excluded_days(start: int, end: int) -> int:
    """Number of days without a page in the absolute-day range [start, end)."""
    if end <= start:
        return 0
    first_year = absolute_to_hebrew(start)[0]
    last_year = absolute_to_hebrew(end - 1)[0]
    return sum(
        1
        for year in range(first_year, last_year + 1)
        for excluded in excluded_days(year)
        if start <= excluded < end
    )


@lru_cache(maxsize=None)
def cycle_end(start: int) -> int:
    """First absolute day after the cycle that begins on ``start``."""
    end = start + PAGES_PER_CYCLE
    while True:
        extended = start + PAGES_PER_CYCLE + count_excluded_days(start, end)
        if extended == end:
            return end
        end = extended


def get_yerushalmi_daf(day: date) -> Daf | None:
    """Return the Yerushalmi page studied on a civil date.

    None before the first cycle and on the days without a page.
    """
    if day < YERUSHALMI_START:
        return None

    target = day.toordinal()
    year = absolute_to_hebrew(target)[0]
    if target in excluded_days(year):
        return None

    start = YERUSHALMI_START.toordinal()
    end = cycle_end(start)
    cycle_no = 1
    while end <= target:
        start, end = end, cycle_end(end)
        cycle_no += 1

    remaining = target - start - count_excluded_days(start, target)
    for index, count in enumerate(YERUSHALMI_PAGES):
        if remaining < count:
            logger.debug(f"Yerushalmi cycle {cycle_no}: tractate {index} page {remaining + 1}")
            return Daf(tractate_index=index, page=remaining + 1, cycle=DafCycle.YERUSHALMI)
        remaining -= count

    logger.warning(f"Yerushalmi date {day} is past the end of cycle {cycle_no}")
    return None
