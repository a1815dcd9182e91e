"""Global math & physics constants.

This module holds all constants that are used in various places across the
codebase, allowing for a consistent place to store them. Constants specific
to objects and classes remain in those files.

References:
    #. :cite:t:`meeus_1998_algorithms`, Chapter 22
    #. :cite:t:`mccarthy_2003_iau2000b`
"""

from __future__ import annotations

# Third Party Imports
from numpy import pi

# Conversion constants
DEG2RAD = pi / 180.0
ARCSEC2DEG = 1.0 / 3600.0
ARCSEC2RAD = ARCSEC2DEG * DEG2RAD

# Time constants
J2000_JULIAN_DATE: float = 2451545.0
"""``float``: Julian date of the J2000.0 reference epoch, 2000-01-01 12:00:00 TT."""

DAYS_PER_JULIAN_CENTURY: float = 36525.0
"""``float``: number of days in one Julian century."""
