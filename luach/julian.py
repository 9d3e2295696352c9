"""Astronomical Julian day numbers."""

import math


def julian_day(year: int, month: int, day: int) -> float:
    """Julian day at 0h UT of a Gregorian date (Meeus, Astronomical Algorithms).

    The result ends in .5 because Julian days begin at noon.
    """
    if month <= 2:
        year -= 1
        month += 12
    century = year // 100
    correction = 2 - century + century // 4
    return (
        math.floor(365.25 * (year + 4716))
        + math.floor(30.6001 * (month + 1))
        + day
        + correction
        - 1524.5
    )
