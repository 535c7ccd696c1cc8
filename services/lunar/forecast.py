"""
Multi-day phase forecast and the sky-region lookup.
"""

from dataclasses import dataclass
from datetime import date, timedelta

from lunarnexus.logging_config import get_logger
from services.lunar.models import DEFAULT_CONSTANTS, AstronomicalConstants
from services.lunar.phase_model import PhaseResult, calculate_moon_phase

logger = get_logger("services.lunar.forecast")

# Indexed by calendar month, January first
MONTHLY_CONSTELLATIONS: tuple[str, ...] = (
    "Capricornus", "Aquarius", "Pisces", "Aries", "Taurus", "Gemini",
    "Cancer", "Leo", "Virgo", "Libra", "Scorpius", "Sagittarius",
)


@dataclass(frozen=True)
class ForecastDay:
    """Phase state for one day of a forecast."""
    date: date
    phase_result: PhaseResult


def get_constellation(when: date) -> str:
    """Zodiac constellation associated with the date's calendar month.

    A month-based label for display, not the constellation the Moon is
    actually in.
    """
    return MONTHLY_CONSTELLATIONS[when.month - 1]


def generate_forecast(
    start: date,
    days: int = 7,
    constants: AstronomicalConstants = DEFAULT_CONSTANTS,
) -> tuple[ForecastDay, ...]:
    """Phase results for the ``days`` days following ``start``.

    ``start`` itself is not included; the first entry is ``start + 1 day``.

    Raises:
        ValueError: If days is less than 1.
    """
    if days < 1:
        raise ValueError(f"Forecast needs at least one day, got {days}")

    logger.debug(f"Generating {days}-day forecast after {start.isoformat()}")
    return tuple(
        ForecastDay(
            date=start + timedelta(days=offset),
            phase_result=calculate_moon_phase(start + timedelta(days=offset), constants),
        )
        for offset in range(1, days + 1)
    )
