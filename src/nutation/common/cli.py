"""Define the command line interface for the nutation tool.

.. code-block:: shell

    nutation 2446895.5 --model lp --config ./my_behavior.config
"""

from __future__ import annotations

# Standard Library Imports
import argparse
from pathlib import Path

# Local Imports
from .exceptions import UnknownModelError
from .logger import nutationLogError


def fileChecker(filepath: str) -> str:
    """Return the resolved, absolute path of an existing config file given on the command line.

    Raises:
        ``argparse.ArgumentTypeError``: `filepath` isn't an existing file.
    """
    resolved = Path(filepath).expanduser().resolve()
    if not resolved.is_file():
        msg = f"Config file doesn't exist: {filepath!r}"
        nutationLogError(msg)
        raise argparse.ArgumentTypeError(msg)

    return str(resolved)


def modelChecker(model: str) -> str:
    """Return the lower-case identifier of a series model given on the command line.

    Raises:
        ``argparse.ArgumentTypeError``: `model` isn't a recognized series model.
    """
    # Local Imports
    from ..physics.transforms.nutation import NutationModel

    try:
        return NutationModel.fromIdentifier(model).value
    except UnknownModelError as err:
        raise argparse.ArgumentTypeError(str(err)) from err


def getCommandLineParser() -> argparse.ArgumentParser:
    """Create the parser for the :command:`nutation` command line arguments."""
    parser = argparse.ArgumentParser(
        prog="nutation",
        description="Earth nutation in longitude & obliquity, (milliarcseconds)",
    )

    parser.add_argument(
        "julian_date",
        metavar="JD",
        type=float,
        help="Julian date (TT) to calculate nutation for",
    )

    parser.add_argument(
        "-m",
        "--model",
        dest="model",
        metavar="MODEL",
        default=None,
        type=modelChecker,
        help="Nutation series model, 'lp' or 'iau2000b', case-insensitive. DEFAULT: config value",
    )

    parser.add_argument(
        "-c",
        "--config",
        dest="config_path",
        metavar="CONFIG_FILE",
        default=None,
        type=fileChecker,
        help="Path to a behavior config file. DEFAULT: packaged config",
    )

    return parser
