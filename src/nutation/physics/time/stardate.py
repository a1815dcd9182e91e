"""Defines the :class:`.JulianDate` class and supporting functions.

Subclassing the `float` type allows easy type-checking in modules or methods that depend on
utilizing Julian dates. A developer can still pass in a `time` variable that can be used like a
`float`, but calling `type` on the variable will reveal what type of time it was initialized to.

.. code-block:: python

    julian_date = JulianDate.getJulianDate(1987, 4, 10, 0, 0, 0)
    julian_date.julian_centuries  # -0.127296...
"""

from __future__ import annotations

# Standard Library Imports
from datetime import datetime

# Third Party Imports
from numpy import floor

# Local Imports
from .. import constants as const

SECONDS_PER_DAY: float = 86400.0
"""``float``: number of SI seconds in one day."""

CALENDAR_FIELD_LIMITS: tuple[tuple[str, float, float], ...] = (
    ("Month", 1, 12),
    ("Day", 1, 31),
    ("Hour", 0.0, 24.0),
    ("Minute", 0.0, 60.0),
    ("Second", 0.0, 60.0),
)
"""``tuple``: name, lower & upper bound of each calendar field after the year."""


class JulianDate(float):
    """Class representing a Julian date in floating point form."""

    @classmethod
    def getJulianDate(cls, year, month, day, hour, minute, second):
        """From a datetime [ymdhms], return the :class:`.JulianDate`.

        Valid for years 1900 through 2100.

        References:
            :cite:t:`vallado_2013_astro`, Section 3.5.1, Algorithm 14

        Raises:
            ``ValueError``: a calendar field is outside :data:`.CALENDAR_FIELD_LIMITS`.

        Returns:
            :class:`.JulianDate`: corresponding datetime in Julian date format
        """
        for (field, lower, upper), value in zip(
            CALENDAR_FIELD_LIMITS,
            (month, day, hour, minute, second),
        ):
            if not lower <= value <= upper:
                msg = f"JulianDate: {field} must be within [{lower}, {upper}], not {value}."
                raise ValueError(msg)

        # Days up to midnight starting the calendar day
        midnight = (
            367 * year
            - floor(7 * (year + floor((month + 9) / 12)) / 4)
            + floor(275 * month / 9)
            + day
            + 1721013.5
        )
        return cls(midnight + (hour * 3600 + minute * 60 + second) / SECONDS_PER_DAY)

    @property
    def julian_centuries(self) -> float:
        """``float``: Julian centuries elapsed since J2000.0."""
        return (float(self) - const.J2000_JULIAN_DATE) / const.DAYS_PER_JULIAN_CENTURY

    def __repr__(self):
        """Return a string representation of this :class:`.JulianDate`."""
        return f"JulianDate({float(self)})"

    __str__ = __repr__


def datetimeToJulianDate(date_time: datetime) -> JulianDate:
    """Convert a naive ``datetime``, taken as TT, to a :class:`.JulianDate`."""
    return JulianDate.getJulianDate(
        date_time.year,
        date_time.month,
        date_time.day,
        date_time.hour,
        date_time.minute,
        date_time.second + date_time.microsecond / 1e6,
    )
