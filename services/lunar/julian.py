"""
Calendar to Julian Day conversion.
"""

from datetime import date


def date_to_julian_day(when: date) -> int:
    """Julian Day Number of a proleptic Gregorian calendar date.

    Day-count form: the whole JDN of the date, with no fractional part for
    the time of day. ``datetime`` values are accepted and their time is
    ignored.

    Example:
        date_to_julian_day(date(2000, 1, 1))  # 2451545
    """
    a = (14 - when.month) // 12
    y = when.year + 4800 - a
    m = when.month + 12 * a - 3
    return (
        when.day
        + (153 * m + 2) // 5
        + 365 * y
        + y // 4
        - y // 100
        + y // 400
        - 32045
    )


def day_of_year(when: date) -> int:
    """Whole days since "January 0" of the date's year (Jan 1 -> 1)."""
    return (date(when.year, when.month, when.day) - date(when.year, 1, 1)).days + 1
