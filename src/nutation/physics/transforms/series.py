"""Evaluate nutation series for a set of Julian-century time arguments.

Both evaluators are pure functions of a coefficient table and the time arguments. Terms are
accumulated in table row order so results are reproducible against reference values.
"""

from __future__ import annotations

# Standard Library Imports
from typing import TYPE_CHECKING, NamedTuple

# Third Party Imports
from numpy import add, array, cos, sin

# Local Imports
from .. import constants as const

# Type Checking Imports
if TYPE_CHECKING:
    # Third Party Imports
    from numpy import ndarray

    # Local Imports
    from ..time.repository import JulianDateRepository


IAU2000B_UNITS_PER_MAS: float = 10000.0
"""``float``: IAU 2000B amplitudes are tabulated in 0.1 microarcseconds."""


LP_MAS_PER_UNIT: float = 0.1
"""``float``: low-precision amplitudes are tabulated in 0.0001 arcseconds."""


class TimeArguments(NamedTuple):
    """Julian centuries since J2000.0 and their powers used by the series."""

    t: float
    t2: float
    t3: float
    t4: float

    @classmethod
    def fromEpoch(cls, epoch: JulianDateRepository) -> TimeArguments:
        """Pull the time arguments for the Julian date currently held by `epoch`."""
        return cls(
            epoch.julian_centuries,
            epoch.julianCenturiesPower(2),
            epoch.julianCenturiesPower(3),
            epoch.julianCenturiesPower(4),
        )


class NutationAngles(NamedTuple):
    """Nutation in longitude & obliquity, (milliarcseconds)."""

    longitude: float
    obliquity: float


def fundamentalArguments(time_args: TimeArguments) -> ndarray:
    """Calculate the luni-solar fundamental arguments of the IAU 2000 nutation theory.

    References:
        :cite:t:`mccarthy_2003_iau2000b`, Eqn 5.43

    Args:
        time_args (:class:`.TimeArguments`): Julian centuries since J2000.0, (TT).

    Returns:
        ``ndarray``: mean anomaly of the Moon ``l``, mean anomaly of the Sun ``l'``, mean argument
        of latitude of the Moon ``F``, mean elongation of the Moon from the Sun ``D`` and mean
        longitude of the Moon's ascending node ``Om``, (arcseconds).
    """
    t, t2, t3, t4 = time_args
    return array(
        [
            485868.249036 + 1717915923.2178 * t + 31.8792 * t2 + 0.051635 * t3 - 0.00024470 * t4,
            1287104.79305 + 129596581.0481 * t - 0.5532 * t2 - 0.000136 * t3 - 0.00001149 * t4,
            335779.526232 + 1739527262.8478 * t - 12.7512 * t2 - 0.001037 * t3 + 0.00000417 * t4,
            1072260.70369 + 1602961601.2090 * t - 6.3706 * t2 + 0.006593 * t3 - 0.00003169 * t4,
            450160.398036 - 6962890.5431 * t + 7.4722 * t2 + 0.007702 * t3 - 0.00005939 * t4,
        ],
    )


def _sumInRowOrder(terms: ndarray) -> float:
    """Sum `terms` sequentially, first row to last."""
    if terms.size == 0:
        return 0.0
    return float(add.accumulate(terms)[-1])


def evaluateIAU2000B(series: ndarray, time_args: TimeArguments) -> NutationAngles:
    """Evaluate the IAU 2000B nutation series.

    References:
        :cite:t:`mccarthy_2003_iau2000b`

    Args:
        series (``ndarray``): Nx11 coefficients, see :func:`.getIAU2000BNutationSeries`.
        time_args (:class:`.TimeArguments`): Julian centuries since J2000.0, (TT).

    Returns:
        :class:`.NutationAngles`: nutation in longitude & obliquity, (milliarcseconds).
    """
    t = time_args.t
    fund_args = fundamentalArguments(time_args)

    arguments = (
        series[::, 0] * fund_args[0]
        + series[::, 1] * fund_args[1]
        + series[::, 2] * fund_args[2]
        + series[::, 3] * fund_args[3]
        + series[::, 4] * fund_args[4]
    ) * const.ARCSEC2RAD
    sin_arg = sin(arguments)
    cos_arg = cos(arguments)

    longitude = (series[::, 5] + series[::, 6] * t) * sin_arg + series[::, 7] * cos_arg
    obliquity = (series[::, 8] + series[::, 9] * t) * cos_arg + series[::, 10] * sin_arg

    return NutationAngles(
        _sumInRowOrder(longitude) / IAU2000B_UNITS_PER_MAS,
        _sumInRowOrder(obliquity) / IAU2000B_UNITS_PER_MAS,
    )


def evaluateLP(series: ndarray, time_args: TimeArguments) -> NutationAngles:
    """Evaluate the low-precision nutation series.

    Each row's argument is already a polynomial in T, (radians), so no fundamental arguments
    are required.

    Args:
        series (``ndarray``): Nx9 coefficients, see :func:`.getLPNutationSeries`.
        time_args (:class:`.TimeArguments`): Julian centuries since J2000.0, (TT).

    Returns:
        :class:`.NutationAngles`: nutation in longitude & obliquity, (milliarcseconds).
    """
    t, t2, t3, t4 = time_args

    arguments = (
        series[::, 0]
        + series[::, 1] * t
        + series[::, 2] * t2
        + series[::, 3] * t3
        + series[::, 4] * t4
    )

    longitude = (series[::, 5] + series[::, 6] * t / 10) * sin(arguments)
    obliquity = (series[::, 7] + series[::, 8] * t / 10) * cos(arguments)

    return NutationAngles(
        _sumInRowOrder(longitude) * LP_MAS_PER_UNIT,
        _sumInRowOrder(obliquity) * LP_MAS_PER_UNIT,
    )
