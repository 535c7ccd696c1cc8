"""
Phase & Illumination Model

Position in the synodic cycle, named phase, illuminated fraction, lunar age,
Earth-Moon distance and the countdown to the next named phase, all from a
single reference new moon and mean cycle length.

Accuracy is illustrative: illumination is a cosine of the cycle angle rather
than a terminator calculation, and distance uses a single eccentricity term.
Far from the reference epoch the phase drifts silently; that is a limit of
the approximation, not an error.
"""

import math
from dataclasses import dataclass
from datetime import date

from services.lunar.angles import TWO_PI, clamp, floored_mod, round_half_up
from services.lunar.julian import date_to_julian_day
from services.lunar.models import DEFAULT_CONSTANTS, AstronomicalConstants
from services.lunar.phases import PHASE_COUNT, MoonPhase, get_phase


@dataclass(frozen=True)
class PhaseResult:
    """Lunar phase state for one date."""
    phase: MoonPhase
    phase_index: int              # 0-7, index into MOON_PHASES
    illumination: int             # Percent illuminated (0-100)
    age_days: float               # Days since new moon, 0.1 precision
    distance_km: int              # Earth-Moon distance
    next_phase: MoonPhase
    days_to_next_phase: float     # 0.1 precision
    phase_angle: float            # Radians along the cycle, 0 to 2*pi
    angular_size_arcsec: float    # Apparent diameter

    @property
    def angular_size_arcmin(self) -> float:
        return self.angular_size_arcsec / 60.0

    @property
    def is_waxing(self) -> bool:
        return 0 < self.phase_index < PHASE_COUNT // 2


def angular_size(
    distance_km: float,
    constants: AstronomicalConstants = DEFAULT_CONSTANTS,
) -> float:
    """Apparent diameter of the Moon in arcseconds at ``distance_km``."""
    return 2 * math.atan(constants.lunar_radius_km / distance_km) * (180 / math.pi) * 3600


def orbital_distance(
    julian_day: float,
    constants: AstronomicalConstants = DEFAULT_CONSTANTS,
) -> float:
    """Single-term eccentric-orbit distance in km (unrounded).

    Bounded by average * (1 -/+ eccentricity), inside [perigee, apogee].
    """
    anomaly = ((julian_day - constants.j2000_epoch) / 365.25) * TWO_PI
    return constants.average_distance_km * (1 - constants.eccentricity * math.cos(anomaly))


def moon_phase_from_julian_day(
    julian_day: float,
    constants: AstronomicalConstants = DEFAULT_CONSTANTS,
) -> PhaseResult:
    """Compute the phase state for a (possibly fractional) Julian Day."""
    synodic = constants.synodic_month

    # Floored modulo keeps dates before the reference new moon in range
    days_since_new_moon = floored_mod(julian_day - constants.new_moon_epoch, synodic)
    cycle_fraction = days_since_new_moon / synodic

    phase_angle = cycle_fraction * TWO_PI
    illumination = (1 - math.cos(phase_angle)) * 50

    # Exact boundaries fall into the lower-index phase
    phase_index = int(math.floor(cycle_fraction * PHASE_COUNT)) % PHASE_COUNT
    next_phase_index = (phase_index + 1) % PHASE_COUNT

    distance = orbital_distance(julian_day, constants)

    phase_length = constants.phase_length
    days_to_next = phase_length - floored_mod(days_since_new_moon, phase_length)

    return PhaseResult(
        phase=get_phase(phase_index),
        phase_index=phase_index,
        illumination=int(clamp(round_half_up(illumination), 0, 100)),
        age_days=round_half_up(days_since_new_moon, 1),
        distance_km=round_half_up(distance),
        next_phase=get_phase(next_phase_index),
        days_to_next_phase=round_half_up(days_to_next, 1),
        phase_angle=phase_angle,
        angular_size_arcsec=angular_size(distance, constants),
    )


def calculate_moon_phase(
    when: date,
    constants: AstronomicalConstants = DEFAULT_CONSTANTS,
) -> PhaseResult:
    """Phase, illumination, age and distance of the Moon on a calendar date.

    Only the calendar date matters; pass a stable value such as local noon
    so results do not flicker across midnight.

    Args:
        when: Observation date (``date`` or ``datetime``).
        constants: Astronomical constants to use.

    Returns:
        PhaseResult for the date.
    """
    return moon_phase_from_julian_day(date_to_julian_day(when), constants)
