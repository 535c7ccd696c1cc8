"""
LUNAR NEXUS

Moon phase, illumination, distance, rise/set times and sky position for any
date and observer location. The calculation engine lives in services.lunar;
this package holds configuration, logging and the command line front end.
"""

from lunarnexus.constants import LUNARNEXUS_VERSION

__version__ = LUNARNEXUS_VERSION
