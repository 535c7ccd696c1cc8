"""
LUNAR NEXUS Calculation Engine

Closed-form lunar calculations for a calendar date and observer location:
- Julian Day conversion
- Phase, illumination, age and distance
- Topocentric altitude/azimuth
- Approximate rise/set/transit times
- Multi-day forecast and combined moon report

All functions are pure; results are frozen dataclasses.
"""

from .models import (
    AstronomicalConstants,
    DEFAULT_CONSTANTS,
    GeoCoordinate,
)
from .phases import (
    MoonPhase,
    MOON_PHASES,
    get_phase,
    find_phase,
)
from .julian import (
    date_to_julian_day,
    day_of_year,
)
from .phase_model import (
    PhaseResult,
    angular_size,
    calculate_moon_phase,
    moon_phase_from_julian_day,
)
from .position import (
    PositionResult,
    calculate_lunar_position,
    lunar_position_from_julian_day,
)
from .moon_times import (
    TimesResult,
    calculate_moon_times,
    format_time,
)
from .forecast import (
    ForecastDay,
    generate_forecast,
    get_constellation,
)
from .report import (
    MoonReport,
    build_moon_report,
    format_report,
    format_forecast,
    report_to_dict,
)

__all__ = [
    "AstronomicalConstants",
    "DEFAULT_CONSTANTS",
    "GeoCoordinate",
    # Phase catalog
    "MoonPhase",
    "MOON_PHASES",
    "get_phase",
    "find_phase",
    # Time conversion
    "date_to_julian_day",
    "day_of_year",
    # Phase & illumination
    "PhaseResult",
    "angular_size",
    "calculate_moon_phase",
    "moon_phase_from_julian_day",
    # Position
    "PositionResult",
    "calculate_lunar_position",
    "lunar_position_from_julian_day",
    # Rise/set/transit
    "TimesResult",
    "calculate_moon_times",
    "format_time",
    # Forecast and report
    "ForecastDay",
    "generate_forecast",
    "get_constellation",
    "MoonReport",
    "build_moon_report",
    "format_report",
    "format_forecast",
    "report_to_dict",
]
