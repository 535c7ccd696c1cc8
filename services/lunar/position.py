"""
Topocentric Position Model

Altitude/azimuth of the Moon for an observer, from the mean lunar longitude
and an approximate sidereal time. The Moon is placed on the celestial
equator-like circle defined by its mean longitude alone: no latitude term,
no obliquity, no parallax. Right ascension and declination are the matching
proxy values, not a rigorous ecliptic-to-equatorial transform.
"""

import math
from dataclasses import dataclass
from datetime import date

from services.lunar.angles import (
    DEG_TO_RAD,
    RAD_TO_DEG,
    normalize_degrees,
    safe_asin,
)
from services.lunar.julian import date_to_julian_day
from services.lunar.models import DEFAULT_CONSTANTS, AstronomicalConstants

JULIAN_CENTURY_DAYS = 36525.0

COMPASS_POINTS = (
    "N", "NNE", "NE", "ENE", "E", "ESE", "SE", "SSE",
    "S", "SSW", "SW", "WSW", "W", "WNW", "NW", "NNW",
)


@dataclass(frozen=True)
class PositionResult:
    """Moon position as seen by the observer."""
    altitude_deg: float          # Degrees above horizon (-90 to +90)
    azimuth_deg: float           # Degrees from North (0-360)
    right_ascension_deg: float   # Mean lunar longitude proxy (0-360)
    declination_deg: float       # Proxy (-90 to +90)

    @property
    def is_visible(self) -> bool:
        """Check if the Moon is above the horizon."""
        return self.altitude_deg > 0

    @property
    def compass_direction(self) -> str:
        """16-point compass direction of the azimuth."""
        index = round(self.azimuth_deg / 22.5) % 16
        return COMPASS_POINTS[index]


@dataclass(frozen=True)
class MeanElements:
    """Mean lunar elements in degrees (not normalized)."""
    longitude: float             # L, mean longitude
    elongation: float            # D, mean elongation from the Sun
    sun_anomaly: float           # M, Sun's mean anomaly
    argument_of_latitude: float  # F


def julian_centuries(
    julian_day: float,
    constants: AstronomicalConstants = DEFAULT_CONSTANTS,
) -> float:
    """Julian centuries since J2000.0."""
    return (julian_day - constants.j2000_epoch) / JULIAN_CENTURY_DAYS


def mean_elements(t: float) -> MeanElements:
    """Mean elements at ``t`` Julian centuries from J2000.0.

    Only the longitude feeds the position; D, M and F are kept for
    perturbation terms the model does not apply.
    """
    return MeanElements(
        longitude=218.3164477 + 481267.88123421 * t,
        elongation=297.8501921 + 445267.1114034 * t,
        sun_anomaly=357.5291092 + 35999.0502909 * t,
        argument_of_latitude=93.2720950 + 483202.0175233 * t,
    )


def greenwich_sidereal_time(
    julian_day: float,
    constants: AstronomicalConstants = DEFAULT_CONSTANTS,
) -> float:
    """Approximate Greenwich Mean Sidereal Time in degrees (not normalized)."""
    return 280.46061837 + 360.98564736629 * (julian_day - constants.j2000_epoch)


def lunar_position_from_julian_day(
    julian_day: float,
    lat: float,
    lng: float,
    constants: AstronomicalConstants = DEFAULT_CONSTANTS,
) -> PositionResult:
    """Compute the Moon's altitude/azimuth for a Julian Day and observer."""
    elements = mean_elements(julian_centuries(julian_day, constants))

    longitude_rad = normalize_degrees(elements.longitude) * DEG_TO_RAD
    lat_rad = lat * DEG_TO_RAD

    lst_rad = normalize_degrees(greenwich_sidereal_time(julian_day, constants) + lng) * DEG_TO_RAD
    hour_angle = lst_rad - longitude_rad

    altitude = safe_asin(
        math.sin(lat_rad) * math.sin(longitude_rad)
        + math.cos(lat_rad) * math.cos(longitude_rad) * math.cos(hour_angle)
    )
    azimuth = math.atan2(
        -math.sin(hour_angle),
        math.cos(lat_rad) * math.tan(longitude_rad) - math.sin(lat_rad) * math.cos(hour_angle),
    )

    return PositionResult(
        altitude_deg=altitude * RAD_TO_DEG,
        azimuth_deg=normalize_degrees(azimuth * RAD_TO_DEG),
        right_ascension_deg=normalize_degrees(elements.longitude),
        declination_deg=safe_asin(math.sin(longitude_rad)) * RAD_TO_DEG,
    )


def calculate_lunar_position(
    when: date,
    lat: float,
    lng: float,
    constants: AstronomicalConstants = DEFAULT_CONSTANTS,
) -> PositionResult:
    """
    Get altitude/azimuth of the Moon for an observer on a calendar date.

    Args:
        when: Observation date; time of day is ignored
        lat: Observer latitude in degrees, assumed within [-90, 90]
        lng: Observer longitude in degrees, assumed within [-180, 180]
        constants: Astronomical constants to use

    Returns:
        PositionResult with alt/az and the RA/Dec proxies
    """
    return lunar_position_from_julian_day(date_to_julian_day(when), lat, lng, constants)
