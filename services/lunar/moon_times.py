"""
Rise/Set/Transit Model

Approximate local moonrise, moonset and best-viewing (transit) clock times.

The Moon rises roughly 50 minutes later each day, so rise time is modeled
as a linear sweep through the day across the synodic cycle, shifted by
longitude, latitude and season. Set time is a fixed 12.4 hours after rise.
There is no horizon-crossing search; polar latitudes are not special-cased.
"""

import math
from dataclasses import dataclass
from datetime import date

from services.lunar.angles import DEG_TO_RAD, TWO_PI, normalize_hours
from services.lunar.julian import day_of_year
from services.lunar.models import DEFAULT_CONSTANTS, AstronomicalConstants
from services.lunar.phase_model import calculate_moon_phase

# Mean time the Moon spends above the horizon
HOURS_ABOVE_HORIZON = 12.4
# Rise time at new moon before location adjustments
NEW_MOON_RISE_HOUR = 6.0


@dataclass(frozen=True)
class TimesResult:
    """Formatted and raw local rise/set/transit times."""
    rise: str
    set: str
    best_viewing: str
    rise_raw: float          # Hours, 0 <= h < 24
    set_raw: float           # Hours, 0 <= h < 24
    best_viewing_raw: float  # Hours, 0 <= h < 24


def format_time(hours: float) -> str:
    """Format decimal hours as a 12-hour clock string.

    Example:
        format_time(0.5)    # "12:30 AM"
        format_time(13.25)  # "1:15 PM"
    """
    h = math.floor(hours)
    m = math.floor((hours - h) * 60)
    period = "PM" if h >= 12 else "AM"
    if h == 0:
        display_hour = 12
    elif h > 12:
        display_hour = h - 12
    else:
        display_hour = h
    return f"{display_hour}:{m:02d} {period}"


def rise_time_hours(
    age_days: float,
    lat: float,
    lng: float,
    year_day: int,
    constants: AstronomicalConstants = DEFAULT_CONSTANTS,
) -> float:
    """Approximate moonrise as local clock hours in [0, 24)."""
    base_time = NEW_MOON_RISE_HOUR + (age_days / constants.synodic_month) * 24
    time_zone_offset = lng / 15
    latitude_adjustment = math.sin(lat * DEG_TO_RAD) * 2
    seasonal_adjustment = math.sin((year_day / 365) * TWO_PI) * 0.5
    return normalize_hours(
        base_time - time_zone_offset + latitude_adjustment + seasonal_adjustment
    )


def calculate_moon_times(
    when: date,
    lat: float,
    lng: float,
    constants: AstronomicalConstants = DEFAULT_CONSTANTS,
) -> TimesResult:
    """
    Get approximate moonrise, moonset and best viewing time.

    Args:
        when: Observation date
        lat: Observer latitude in degrees
        lng: Observer longitude in degrees (the longitude/15 hour offset
            stands in for the local time zone)
        constants: Astronomical constants to use

    Returns:
        TimesResult with 12-hour clock strings and raw hours
    """
    age_days = calculate_moon_phase(when, constants).age_days

    rise = rise_time_hours(age_days, lat, lng, day_of_year(when), constants)
    set_ = normalize_hours(rise + HOURS_ABOVE_HORIZON)
    best_viewing = normalize_hours((rise + set_) / 2)

    return TimesResult(
        rise=format_time(rise),
        set=format_time(set_),
        best_viewing=format_time(best_viewing),
        rise_raw=rise,
        set_raw=set_,
        best_viewing_raw=best_viewing,
    )
