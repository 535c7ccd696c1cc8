"""
LUNAR NEXUS Moon Report

Combines the phase, position and rise/set models into a single report for
one date and observer, and renders reports and forecasts as plain text or
JSON-ready dictionaries for the command line front end.
"""

from dataclasses import dataclass
from datetime import date
from typing import Any, Iterable, Optional

from lunarnexus.logging_config import get_logger
from services.lunar.forecast import ForecastDay, get_constellation
from services.lunar.models import DEFAULT_CONSTANTS, AstronomicalConstants, GeoCoordinate
from services.lunar.moon_times import TimesResult, calculate_moon_times
from services.lunar.phase_model import PhaseResult, calculate_moon_phase
from services.lunar.phases import MoonPhase
from services.lunar.position import PositionResult, calculate_lunar_position

logger = get_logger("services.lunar.report")


@dataclass(frozen=True)
class MoonReport:
    """Everything known about the Moon for one date and location."""
    date: date
    location: GeoCoordinate
    phase: PhaseResult
    position: PositionResult
    times: TimesResult
    constellation: str
    site_name: Optional[str] = None
    timezone: Optional[str] = None


def build_moon_report(
    when: date,
    location: GeoCoordinate,
    constants: AstronomicalConstants = DEFAULT_CONSTANTS,
    site_name: Optional[str] = None,
    timezone: Optional[str] = None,
) -> MoonReport:
    """Run every model for ``when`` at ``location``.

    ``site_name`` and ``timezone`` only label the report; they do not
    affect any calculation.
    """
    logger.debug(f"Building moon report for {when.isoformat()} at {location}")
    return MoonReport(
        date=when,
        location=location,
        phase=calculate_moon_phase(when, constants),
        position=calculate_lunar_position(when, location.lat, location.lng, constants),
        times=calculate_moon_times(when, location.lat, location.lng, constants),
        constellation=get_constellation(when),
        site_name=site_name,
        timezone=timezone,
    )


# =============================================================================
# Rendering
# =============================================================================


def format_long_date(when: date) -> str:
    """e.g. "Saturday, January 1, 2000"."""
    return f"{when.strftime('%A, %B')} {when.day}, {when.year}"


def format_short_date(when: date) -> str:
    """e.g. "Sat, Jan 1"."""
    return f"{when.strftime('%a, %b')} {when.day}"


def format_location(report: MoonReport) -> str:
    """e.g. "London (51.50°, -0.13°), Europe/London"."""
    text = str(report.location)
    if report.site_name:
        text = f"{report.site_name} ({text})"
    if report.timezone:
        text = f"{text}, {report.timezone}"
    return text


def format_report(report: MoonReport) -> str:
    """Render a report as aligned text lines."""
    phase = report.phase
    position = report.position
    times = report.times

    rows = [
        ("Phase", f"{phase.phase.emoji} {phase.phase.name}"),
        ("", phase.phase.description),
        ("Illumination", f"{phase.illumination}%"),
        ("Distance", f"{phase.distance_km:,} km from Earth"),
        ("Angular size", f"{phase.angular_size_arcmin:.1f}'"),
        ("Lunar age", f"{phase.age_days} days"),
        ("Next phase", f"{phase.next_phase.name} in {phase.days_to_next_phase} days"),
        ("Moonrise", times.rise),
        ("Moonset", times.set),
        ("Best viewing", times.best_viewing),
        ("Altitude", f"{round(position.altitude_deg)}°"),
        ("Azimuth", f"{round(position.azimuth_deg)}° {position.compass_direction}"),
        ("Constellation", report.constellation),
    ]

    lines = [
        format_long_date(report.date),
        f"Location: {format_location(report)}",
        "",
    ]
    width = max(len(label) for label, _ in rows)
    for label, value in rows:
        lines.append(f"{label:<{width}}  {value}")
    return "\n".join(lines)


def format_forecast(days: Iterable[ForecastDay]) -> str:
    """One line per forecast day."""
    return "\n".join(
        f"{format_short_date(day.date):<12} {day.phase_result.phase.emoji} "
        f"{day.phase_result.phase.name:<16} {day.phase_result.illumination}% illuminated"
        for day in days
    )


def format_phase_catalog(phases: Iterable[MoonPhase]) -> str:
    """Describe each named phase with its photography tip."""
    blocks = []
    for phase in phases:
        blocks.append(
            f"{phase.emoji} {phase.name} ({phase.angle}°, ~{phase.illumination}%)\n"
            f"   {phase.description}\n"
            f"   Photography: {phase.photography}"
        )
    return "\n\n".join(blocks)


def phase_to_dict(phase: MoonPhase) -> dict[str, Any]:
    return {
        "name": phase.name,
        "illumination": phase.illumination,
        "emoji": phase.emoji,
        "angle": phase.angle,
        "description": phase.description,
        "photography": phase.photography,
    }


def phase_result_to_dict(result: PhaseResult) -> dict[str, Any]:
    return {
        "phase": result.phase.name,
        "phase_index": result.phase_index,
        "waxing": result.is_waxing,
        "emoji": result.phase.emoji,
        "illumination": result.illumination,
        "age_days": result.age_days,
        "distance_km": result.distance_km,
        "next_phase": result.next_phase.name,
        "days_to_next_phase": result.days_to_next_phase,
        "phase_angle": result.phase_angle,
        "angular_size_arcsec": result.angular_size_arcsec,
    }


def report_to_dict(report: MoonReport) -> dict[str, Any]:
    """JSON-serialisable view of a report."""
    return {
        "date": report.date.isoformat(),
        "location": {
            "lat": report.location.lat,
            "lng": report.location.lng,
            "name": report.site_name,
            "timezone": report.timezone,
        },
        "phase": phase_result_to_dict(report.phase),
        "position": {
            "altitude_deg": report.position.altitude_deg,
            "azimuth_deg": report.position.azimuth_deg,
            "right_ascension_deg": report.position.right_ascension_deg,
            "declination_deg": report.position.declination_deg,
            "compass_direction": report.position.compass_direction,
            "visible": report.position.is_visible,
        },
        "times": {
            "rise": report.times.rise,
            "set": report.times.set,
            "best_viewing": report.times.best_viewing,
            "rise_raw": report.times.rise_raw,
            "set_raw": report.times.set_raw,
            "best_viewing_raw": report.times.best_viewing_raw,
        },
        "constellation": report.constellation,
    }


def forecast_to_dict(days: Iterable[ForecastDay]) -> list[dict[str, Any]]:
    return [
        {"date": day.date.isoformat(), **phase_result_to_dict(day.phase_result)}
        for day in days
    ]
