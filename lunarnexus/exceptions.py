"""
LUNAR NEXUS Exceptions

Error types raised at the application boundary. The calculation engine in
services.lunar is total over its input domain and raises none of these.
"""


class LunarNexusError(Exception):
    """Base class for all LUNAR NEXUS errors."""


class ConfigurationError(LunarNexusError):
    """Configuration file missing, unreadable, or invalid."""


class LocationError(LunarNexusError, ValueError):
    """Observer coordinates outside the valid latitude/longitude range."""
