"""
LUNAR NEXUS Engine Data Model

Read-only astronomical constants and the observer coordinate type shared by
every calculation in services.lunar.
"""

import math
from dataclasses import dataclass

from lunarnexus.constants import (
    LATITUDE_MAX_DEG,
    LATITUDE_MIN_DEG,
    LONGITUDE_MAX_DEG,
    LONGITUDE_MIN_DEG,
)
from lunarnexus.exceptions import LocationError


@dataclass(frozen=True)
class AstronomicalConstants:
    """Physical and orbital constants for the closed-form lunar model.

    One instance (DEFAULT_CONSTANTS) is built at import time and passed by
    reference into every calculation. Tests may inject their own.
    """
    synodic_month: float = 29.53058867       # Days, new moon to new moon
    sidereal_month: float = 27.321661        # Days, relative to fixed stars
    average_distance_km: float = 384400.0
    perigee_distance_km: float = 356500.0
    apogee_distance_km: float = 406700.0
    lunar_radius_km: float = 1737.4
    j2000_epoch: float = 2451545.0           # Julian Day of J2000.0
    new_moon_epoch: float = 2451550.1        # Reference new moon (2000-01-06)
    eccentricity: float = 0.0549             # Lunar orbital eccentricity

    @property
    def phase_length(self) -> float:
        """Length of one of the eight named phases, in days."""
        return self.synodic_month / 8


DEFAULT_CONSTANTS = AstronomicalConstants()


@dataclass(frozen=True)
class GeoCoordinate:
    """Observer position in decimal degrees (positive = North / East).

    The engine never validates or mutates coordinates; use ``validated``
    at the point where user input enters the application.
    """
    lat: float
    lng: float

    @classmethod
    def validated(cls, lat: float, lng: float) -> "GeoCoordinate":
        """Build a coordinate, rejecting non-finite or out-of-range values.

        Raises:
            LocationError: If lat is outside [-90, 90] or lng outside [-180, 180].
        """
        lat = float(lat)
        lng = float(lng)
        if not (math.isfinite(lat) and math.isfinite(lng)):
            raise LocationError(f"Coordinates must be finite numbers: {lat}, {lng}")
        if not LATITUDE_MIN_DEG <= lat <= LATITUDE_MAX_DEG:
            raise LocationError(f"Latitude {lat} outside [-90, 90]")
        if not LONGITUDE_MIN_DEG <= lng <= LONGITUDE_MAX_DEG:
            raise LocationError(f"Longitude {lng} outside [-180, 180]")
        return cls(lat=lat, lng=lng)

    def __str__(self) -> str:
        return f"{self.lat:.2f}°, {self.lng:.2f}°"
