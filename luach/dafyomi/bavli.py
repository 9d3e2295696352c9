"""Daf Yomi Bavli: one page of the Babylonian Talmud per day since 1923."""

import logging
from collections.abc import Callable
from datetime import date

from ..julian import julian_day
from ..models import Daf, DafCycle
from .tractates import BAVLI_PAGES

logger = logging.getLogger(__name__)

DAF_YOMI_START = date(1923, 9, 11)
# The 8th cycle began here, with Shekalim counted as 22 pages instead of 13.
SHEKALIM_CHANGE = date(1975, 6, 24)

SHEKALIM_INDEX = 4
DAYS_PER_CYCLE_BEFORE_CHANGE = 2702
DAYS_PER_CYCLE = 2711

# Kinnim, Tamid and Midos are printed mid-volume; their first page is not 2.
PAGE_OFFSETS = {36: 21, 37: 24, 38: 32}


def get_bavli_daf(
    day: date, julian_day: Callable[[int, int, int], float] = julian_day
) -> Daf | None:
    """Return the Bavli page studied on a civil date, or None before 1923-09-11."""
    if day < DAF_YOMI_START:
        return None

    today_jd = int(julian_day(day.year, day.month, day.day))
    if day >= SHEKALIM_CHANGE:
        change_jd = int(julian_day(SHEKALIM_CHANGE.year, SHEKALIM_CHANGE.month, SHEKALIM_CHANGE.day))
        cycle_no, daf_no = divmod(today_jd - change_jd, DAYS_PER_CYCLE)
        cycle_no += 8
    else:
        start_jd = int(julian_day(DAF_YOMI_START.year, DAF_YOMI_START.month, DAF_YOMI_START.day))
        cycle_no, daf_no = divmod(today_jd - start_jd, DAYS_PER_CYCLE_BEFORE_CHANGE)
        cycle_no += 1

    pages = list(BAVLI_PAGES)
    if cycle_no <= 7:
        pages[SHEKALIM_INDEX] = 13

    total = 0
    for index, count in enumerate(pages):
        total += count - 1
        if daf_no < total:
            page = 1 + count - (total - daf_no) + PAGE_OFFSETS.get(index, 0)
            logger.debug(f"Bavli cycle {cycle_no}, day {daf_no}: tractate {index} page {page}")
            return Daf(tractate_index=index, page=page, cycle=DafCycle.BAVLI)

    # Unreachable for a consistent page table: the cycle length equals the sum.
    logger.warning(f"Bavli day {daf_no} of cycle {cycle_no} is past the last tractate")
    return None
