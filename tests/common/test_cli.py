from __future__ import annotations

# Standard Library Imports
import argparse
import os

# Third Party Imports
import pytest

# NUTATION Imports
from nutation.common import cli

# Local Imports
from .. import FIXTURE_DATA_DIR, MEEUS_22A_JD


def validateArgs(args):
    """Wrap `parser.parseargs()` to catch `SystemExit` for easier unit testing."""
    try:
        parser = cli.getCommandLineParser()
        parser.parse_args(args)
        return True
    except SystemExit:
        return False


def testJulianDate():
    """Test a valid and a invalid Julian date."""
    assert validateArgs([f"{MEEUS_22A_JD}"]) is True
    assert validateArgs(["2446895"]) is True
    assert validateArgs(["abcde"]) is False
    assert validateArgs([]) is False


def testModel():
    """Test valid and invalid model identifiers."""
    assert validateArgs([f"{MEEUS_22A_JD}", "-m", "lp"]) is True
    assert validateArgs([f"{MEEUS_22A_JD}", "--model", "IAU2000B"]) is True
    assert validateArgs([f"{MEEUS_22A_JD}", "-m", "iau1980"]) is False

    parser = cli.getCommandLineParser()
    args = parser.parse_args([f"{MEEUS_22A_JD}", "-m", "LP"])
    assert args.model == "lp"

    args = parser.parse_args([f"{MEEUS_22A_JD}"])
    assert args.model is None


@pytest.mark.datafiles(FIXTURE_DATA_DIR)
def testConfigFile(datafiles: str):
    """Test a valid and a invalid config file."""
    config_file = os.path.join(datafiles, "custom_behavior.config")
    assert validateArgs([f"{MEEUS_22A_JD}", "-c", config_file]) is True
    assert validateArgs([f"{MEEUS_22A_JD}", "--config", config_file + "bad"]) is False


@pytest.mark.datafiles(FIXTURE_DATA_DIR)
def testCheckers(datafiles: str):
    """Test the argument type checkers return normalized values or argparse errors."""
    config_file = os.path.join(datafiles, "custom_behavior.config")
    assert cli.fileChecker(config_file) == os.path.realpath(config_file)
    with pytest.raises(argparse.ArgumentTypeError, match="doesn't exist"):
        cli.fileChecker(config_file + "bad")

    assert cli.modelChecker("IAU2000B") == "iau2000b"
    with pytest.raises(argparse.ArgumentTypeError, match="iau1980"):
        cli.modelChecker("iau1980")


def testUsageError(capsys: pytest.CaptureFixture):
    """Test a bad model is reported in the usage error instead of a traceback."""
    with pytest.raises(SystemExit):
        cli.getCommandLineParser().parse_args([f"{MEEUS_22A_JD}", "-m", "iau1980"])

    assert "iau1980" in capsys.readouterr().err
