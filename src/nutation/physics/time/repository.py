"""Defines the :class:`.JulianDateRepository`, the mutable time handle observed by nutation engines."""

from __future__ import annotations

# Standard Library Imports
from numbers import Real
from typing import TYPE_CHECKING

# Third Party Imports
from numpy import isfinite

# Local Imports
from ...common.exceptions import InvalidArgumentError, InvalidEpochError
from ...common.logger import nutationLogError
from ...common.utilities import getTypeString
from .stardate import JulianDate, datetimeToJulianDate

# Type Checking Imports
if TYPE_CHECKING:
    # Standard Library Imports
    from datetime import datetime


class JulianDateRepository:
    """Mutable store of a Julian date, providing the Julian-century time arguments of nutation series.

    The held Julian date can be reassigned at any time. Objects observing this repository, such
    as :class:`.EpochCache`, compare against :attr:`.julian_date` to detect that it changed.

    Args:
        julian_date (``float``): initial Julian date, (TT).

    Raises:
        :class:`.InvalidEpochError`: if `julian_date` is not a finite real number.
    """

    def __init__(self, julian_date: float):
        """Initialize a :class:`.JulianDateRepository`."""
        self._julian_date: JulianDate
        self.julian_date = julian_date

    @classmethod
    def fromDatetime(cls, date_time: datetime) -> JulianDateRepository:
        """Build a repository from a ``datetime`` assumed to already be in TT."""
        return cls(datetimeToJulianDate(date_time))

    @property
    def julian_date(self) -> JulianDate:
        """:class:`.JulianDate`: currently held Julian date."""
        return self._julian_date

    @julian_date.setter
    def julian_date(self, value: float):
        if isinstance(value, bool) or not isinstance(value, Real):
            msg = f"Julian date must be a real number, not {getTypeString(value)}"
            nutationLogError(msg)
            raise InvalidEpochError(msg)

        if not isfinite(value):
            msg = f"Julian date must be finite, not {value!r}"
            nutationLogError(msg)
            raise InvalidEpochError(msg)

        self._julian_date = JulianDate(value)

    @property
    def julian_centuries(self) -> float:
        """``float``: Julian centuries elapsed from J2000.0 to the held Julian date."""
        return self._julian_date.julian_centuries

    def julianCenturiesPower(self, power: int) -> float:
        """Return the Julian centuries since J2000.0 raised to an integer `power`.

        Args:
            power (``int``): positive exponent; the nutation series use 2, 3 and 4.

        Raises:
            :class:`.InvalidArgumentError`: if `power` is not a positive integer.

        Returns:
            ``float``: :attr:`.julian_centuries` to the `power`.
        """
        if isinstance(power, bool) or not isinstance(power, int) or power < 1:
            msg = f"Julian century power must be a positive integer, not {power!r}"
            nutationLogError(msg)
            raise InvalidArgumentError(msg)

        return self.julian_centuries**power

    def __repr__(self):
        """Return a string representation of this :class:`.JulianDateRepository`."""
        return f"JulianDateRepository({float(self._julian_date)})"
