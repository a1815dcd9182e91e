"""Calculate Earth nutation parameters.

This module is for storing coefficients for different nutation series, and the enumeration of
the series models that can be selected.
"""

from __future__ import annotations

# Standard Library Imports
from enum import Enum
from functools import cache
from importlib import resources
from typing import TYPE_CHECKING

# Third Party Imports
from numpy import array

# Local Imports
from ...common.exceptions import ShapeError, UnknownModelError
from ...common.logger import nutationLogDebug, nutationLogError
from ...common.utilities import loadDatFile

# Type Checking Imports
if TYPE_CHECKING:
    # Third Party Imports
    from numpy import ndarray


NUTATION_MODULE: str = "nutation.physics.data.nutation"
"""``str``: defines nutation data module location."""


NUTATION_IAU2000B: str = "iau2000b.dat"
"""``str``: defines nutation data file for the IAU 2000B nutation model."""


NUTATION_LP: str = "lp.dat"
"""``str``: defines nutation data file for the low-precision nutation model."""


IAU2000B_COLUMNS: int = 11
"""``int``: five argument multipliers, three longitude and three obliquity coefficients."""


LP_COLUMNS: int = 9
"""``int``: five argument polynomial coefficients, two longitude and two obliquity amplitudes."""


class NutationModel(str, Enum):
    """Enumerated nutation series models."""

    LP = "lp"
    """str: Low-precision series, leading terms of IAU 1980 with arguments pre-expanded in T."""

    IAU2000B = "iau2000b"
    """str: IAU 2000B luni-solar series, 77 terms, :cite:t:`mccarthy_2003_iau2000b`."""

    @classmethod
    def fromIdentifier(cls, identifier: str | NutationModel) -> NutationModel:
        """Return the model named by `identifier`, case-insensitively.

        Raises:
            :class:`.UnknownModelError`: `identifier` is not a string naming a known model.
        """
        if isinstance(identifier, cls):
            return identifier

        if not isinstance(identifier, str):
            msg = f"Nutation model should be a string, not {type(identifier)}"
            nutationLogError(msg)
            raise UnknownModelError(msg)

        try:
            return cls(identifier.lower())
        except ValueError as err:
            valid = ", ".join(repr(model.value) for model in cls)
            msg = f"Nutation model should be one of {valid}, not {identifier!r}"
            nutationLogError(msg)
            raise UnknownModelError(msg) from err


def _loadSeries(file_name: str, columns: int) -> ndarray:
    """Load a packaged nutation series into a read-only array with `columns` columns."""
    res = resources.files(NUTATION_MODULE).joinpath(file_name)
    with resources.as_file(res) as file_resource:
        series = array(loadDatFile(file_resource), dtype=float)

    if series.ndim != 2 or series.shape[1] != columns:
        msg = f"Nutation series {file_name!r} should have {columns} columns, has shape {series.shape}"
        nutationLogError(msg)
        raise ShapeError(msg)

    # Tables are shared across every engine, so freeze them.
    series.setflags(write=False)
    nutationLogDebug(f"Loaded {series.shape[0]} nutation terms from {file_name!r}")
    return series


@cache
def getIAU2000BNutationSeries() -> ndarray:
    """Return the complete set of IAU 2000B Nutation Theory coefficients.

    Note:
        This function is cached so repeated calls shouldn't need to re-read the file.

    References:
        :cite:t:`mccarthy_2003_iau2000b`, Table 1

    Returns:
        ``ndarray``: 77x11 coefficients. Columns are the multipliers of ``l, l', F, D, Om``,
        then ``A, B, C`` for longitude and ``D, E, F`` for obliquity, in 0.1 microarcseconds.
    """
    return _loadSeries(NUTATION_IAU2000B, IAU2000B_COLUMNS)


@cache
def getLPNutationSeries() -> ndarray:
    """Return the low-precision nutation series coefficients.

    Note:
        This function is cached so repeated calls shouldn't need to re-read the file.

    References:
        :cite:t:`meeus_1998_algorithms`, Table 22.A

    Returns:
        ``ndarray``: 10x9 coefficients. Columns are the order 0-4 polynomial coefficients of the
        argument, (radians), then two longitude and two obliquity amplitudes, (0.0001 arcsec
        and 0.00001 arcsec per century).
    """
    return _loadSeries(NUTATION_LP, LP_COLUMNS)


def getNutationSeries(model: NutationModel) -> ndarray:
    """Return the coefficient table bound to `model`."""
    if model is NutationModel.IAU2000B:
        return getIAU2000BNutationSeries()

    return getLPNutationSeries()
