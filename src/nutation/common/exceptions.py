"""Contains all the custom-defined exceptions used in the nutation package."""

from __future__ import annotations


class InvalidArgumentError(ValueError):
    """Exception indicating an argument failed validation and was rejected."""


class InvalidEpochError(InvalidArgumentError):
    """Epoch handle is not a usable :class:`.JulianDateRepository`, or holds a bad Julian date."""


class UnknownModelError(InvalidArgumentError):
    """Nutation model identifier is not one of the recognized series."""


class ShapeError(Exception):
    """Exception indicating an improperly shaped coefficient table was loaded."""


class CacheMissError(KeyError):
    """Error raised by :class:`.EpochCache` if the requested field isn't populated for the current epoch."""

    def __init__(self, field: str, julian_date: float | None):
        """Initialize a :class:`.CacheMissError`.

        Args:
            field: name of the field that was requested.
            julian_date: Julian date the cache is currently scoped to.
        """
        super().__init__(field)
        self.msg = f"Cache does not have a populated value for field '{field}' at JD {julian_date}"

    def __str__(self):
        """Return a string representation of this :class:`.CacheMissError`."""
        return self.msg
