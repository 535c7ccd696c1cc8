"""
LUNAR NEXUS Shared Constants

Centralizes default values used by the application layer (configuration,
logging, CLI). Physical and astronomical constants used by the calculation
engine live in services.lunar.models.AstronomicalConstants.
"""

from typing import Final

# =============================================================================
# Version and Identity
# =============================================================================

LUNARNEXUS_VERSION: Final[str] = "0.1.0"
LUNARNEXUS_NAME: Final[str] = "LUNAR NEXUS"

# =============================================================================
# Observer Defaults
# =============================================================================

# New York City
DEFAULT_LATITUDE_DEG: Final[float] = 40.7128
DEFAULT_LONGITUDE_DEG: Final[float] = -74.0060
DEFAULT_TIMEZONE: Final[str] = "America/New_York"
DEFAULT_SITE_NAME: Final[str] = "New York"

LATITUDE_MIN_DEG: Final[float] = -90.0
LATITUDE_MAX_DEG: Final[float] = 90.0
LONGITUDE_MIN_DEG: Final[float] = -180.0
LONGITUDE_MAX_DEG: Final[float] = 180.0

# =============================================================================
# Forecast
# =============================================================================

DEFAULT_FORECAST_DAYS: Final[int] = 7
MAX_FORECAST_DAYS: Final[int] = 30

# =============================================================================
# File Paths and Formats
# =============================================================================

CONFIG_FILENAME: Final[str] = "lunarnexus.yaml"
ENV_PREFIX: Final[str] = "LUNARNEXUS_"

# Input date format accepted by the CLI
DATE_FORMAT: Final[str] = "%Y-%m-%d"

# Log settings
LOG_MAX_BYTES: Final[int] = 5 * 1024 * 1024  # 5 MB
LOG_BACKUP_COUNT: Final[int] = 3
LOG_DATE_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"
