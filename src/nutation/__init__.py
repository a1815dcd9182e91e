"""Main Module Documentation.

The top-level module is documented below, which mainly serves as a command line entry point for
calculating Earth nutation at a single Julian date.
"""

from __future__ import annotations

# Standard Library Imports
from typing import TYPE_CHECKING

# Type Checking Imports
if TYPE_CHECKING:
    # Local Imports
    from .physics.transforms.series import NutationAngles

__version__ = "2.0.0"


def runNutation(
    julian_date: float,
    model: str | None = None,
    config_path: str | None = None,
) -> NutationAngles:
    """Calculate and report nutation at a single Julian date.

    Args:
        julian_date (``float``): Julian date (TT) to evaluate nutation at.
        model (``str``, optional): nutation series model. Defaults to ``None``, which uses the
            config value.
        config_path (``str``, optional): path to a custom behavior config file. Defaults to
            ``None``, which uses the packaged defaults.

    Returns:
        :class:`.NutationAngles`: nutation in longitude & obliquity, (milliarcseconds).
    """
    # Local Imports
    from .common.behavioral_config import BehavioralConfig
    from .common.logger import Logger
    from .physics.transforms.engine import Nutation
    from .physics.transforms.series import NutationAngles
    from .physics.time.repository import JulianDateRepository

    if config_path:
        BehavioralConfig(config_file_path=config_path)
    logger = Logger()

    nutation = Nutation(JulianDateRepository(julian_date), model=model)
    angles = NutationAngles(nutation.longitude, nutation.obliquity)
    logger.info(f"Calculated {nutation!r}")

    print(f"model:     {nutation.model}")
    print(f"longitude: {angles.longitude:.6f} mas")
    print(f"obliquity: {angles.obliquity:.6f} mas")

    return angles


def main(args: list[str] | None = None) -> None:
    """Nutation tool main entry point.

    This is the function that the :command:`nutation` command points to. See :mod:`.cli` for
    details on what command line options are available.
    """
    # Local Imports
    from .common.cli import getCommandLineParser

    parser = getCommandLineParser()
    cli_args = parser.parse_args(args)

    runNutation(
        cli_args.julian_date,
        model=cli_args.model,
        config_path=cli_args.config_path,
    )
