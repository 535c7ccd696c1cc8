"""
LUNAR NEXUS Command Line Interface

Usage:
    lunarnexus report --date 2024-03-25 --lat 51.5 --lng -0.13
    lunarnexus forecast --days 14 --json
    lunarnexus phases
    lunarnexus --debug-service lunar forecast

Observer location and forecast length default to the loaded configuration
(see lunarnexus.config). Dates are calendar dates; the time of day plays no
part in the calculations.
"""

import argparse
import json
import sys
from datetime import date, datetime
from typing import Optional, Sequence

from lunarnexus.config import LunarNexusConfig, load_config
from lunarnexus.constants import DATE_FORMAT, LUNARNEXUS_NAME, LUNARNEXUS_VERSION
from lunarnexus.exceptions import LunarNexusError
from lunarnexus.logging_config import (
    correlation_context,
    get_logger,
    log_exception,
    log_timing,
    set_service_level,
    setup_logging,
)
from services.lunar.forecast import generate_forecast
from services.lunar.models import GeoCoordinate
from services.lunar.phases import MOON_PHASES, find_phase
from services.lunar.report import (
    build_moon_report,
    forecast_to_dict,
    format_forecast,
    format_long_date,
    format_phase_catalog,
    format_report,
    phase_to_dict,
    report_to_dict,
)

logger = get_logger("cli")

EXIT_OK = 0
EXIT_USAGE = 2


def parse_date(value: str) -> date:
    """argparse type for YYYY-MM-DD dates."""
    try:
        return datetime.strptime(value, DATE_FORMAT).date()
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid date '{value}', expected YYYY-MM-DD")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lunarnexus",
        description=f"{LUNARNEXUS_NAME} - moon phase, position and rise/set times",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {LUNARNEXUS_VERSION}"
    )
    parser.add_argument(
        "--config", default=None,
        help="Path to a YAML config file (default: auto-discover)"
    )
    parser.add_argument(
        "--log-level", default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Override the configured log level"
    )
    parser.add_argument(
        "--log-file", default=None,
        help="Also write logs to this file"
    )
    parser.add_argument(
        "--debug-service", action="append", default=[], metavar="SERVICE",
        help="Log one service at DEBUG, e.g. \"lunar\" (repeatable)"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    report = subparsers.add_parser("report", help="Full moon report for one date")
    report.add_argument(
        "--date", type=parse_date, default=None,
        help="Date as YYYY-MM-DD (default: today)"
    )
    report.add_argument("--lat", type=float, default=None, help="Observer latitude")
    report.add_argument("--lng", type=float, default=None, help="Observer longitude")
    report.add_argument("--json", action="store_true", help="Emit JSON")

    forecast = subparsers.add_parser("forecast", help="Phase forecast for the coming days")
    forecast.add_argument(
        "--date", type=parse_date, default=None,
        help="Forecast starts the day after this date (default: today)"
    )
    forecast.add_argument(
        "--days", type=int, default=None,
        help="Number of days (default: from config)"
    )
    forecast.add_argument("--json", action="store_true", help="Emit JSON")

    phases = subparsers.add_parser("phases", help="Describe the eight named phases")
    phases.add_argument(
        "name", nargs="?", default=None,
        help="Only describe this phase, e.g. \"Full Moon\""
    )
    phases.add_argument("--json", action="store_true", help="Emit JSON")

    return parser


def resolve_location(
    config: LunarNexusConfig,
    lat: Optional[float],
    lng: Optional[float],
) -> GeoCoordinate:
    """Command line coordinates over configured ones, validated.

    Raises:
        LocationError: If the resulting coordinates are out of range.
    """
    return GeoCoordinate.validated(
        config.observer.latitude if lat is None else lat,
        config.observer.longitude if lng is None else lng,
    )


def _emit(payload: object) -> None:
    print(json.dumps(payload, indent=2, ensure_ascii=False))


def run_report(args: argparse.Namespace, config: LunarNexusConfig) -> int:
    when = args.date or date.today()
    location = resolve_location(config, args.lat, args.lng)

    # Site labels describe the configured observer only
    if args.lat is None and args.lng is None:
        report = build_moon_report(
            when,
            location,
            site_name=config.observer.name,
            timezone=config.observer.timezone,
        )
    else:
        report = build_moon_report(when, location)
    logger.info(
        f"{when.isoformat()}: {report.phase.phase.name}, "
        f"{report.phase.illumination}% illuminated"
    )

    if args.json:
        _emit(report_to_dict(report))
    else:
        print(format_report(report))
    return EXIT_OK


def run_forecast(args: argparse.Namespace, config: LunarNexusConfig) -> int:
    start = args.date or date.today()
    days = args.days if args.days is not None else config.forecast.days

    with log_timing(logger, "forecast"):
        forecast = generate_forecast(start, days)

    if args.json:
        _emit(forecast_to_dict(forecast))
    else:
        print(f"Forecast after {format_long_date(start)}")
        print(format_forecast(forecast))
    return EXIT_OK


def run_phases(args: argparse.Namespace, config: LunarNexusConfig) -> int:
    if args.name:
        try:
            phases = (find_phase(args.name),)
        except KeyError:
            print(f"error: unknown phase '{args.name}'", file=sys.stderr)
            return EXIT_USAGE
    else:
        phases = MOON_PHASES

    if args.json:
        _emit([phase_to_dict(phase) for phase in phases])
    else:
        print(format_phase_catalog(phases))
    return EXIT_OK


COMMANDS = {
    "report": run_report,
    "forecast": run_forecast,
    "phases": run_phases,
}


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Entry point. Returns the process exit status."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = load_config(args.config)
    except LunarNexusError as e:
        setup_logging()
        log_exception(logger, "Failed to load configuration", e)
        print(f"error: {e}", file=sys.stderr)
        return EXIT_USAGE

    setup_logging(
        log_level=args.log_level or config.log_level,
        log_file=args.log_file or config.log_file,
    )
    for service in args.debug_service:
        set_service_level(service, "DEBUG")

    with correlation_context(prefix=args.command):
        logger.debug(f"Running '{args.command}'")
        try:
            return COMMANDS[args.command](args, config)
        except (LunarNexusError, ValueError) as e:
            log_exception(logger, f"'{args.command}' failed", e)
            print(f"error: {e}", file=sys.stderr)
            return EXIT_USAGE
