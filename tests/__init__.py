"""Configure importable things that aren't pytest fixtures."""

from __future__ import annotations

# Standard Library Imports
from pathlib import Path

# Common file paths
FIXTURE_DATA_DIR = Path(__file__).parent / "datafiles"


# Common julian dates
MEEUS_22A_JD: float = 2446895.5
"""``float``: 1987 April 10, 0h TD, :cite:t:`meeus_1998_algorithms` Example 22.a."""

MEEUS_22A_LONGITUDE: float = -3788.0
"""``float``: nutation in longitude for :data:`.MEEUS_22A_JD`, (milliarcseconds)."""

MEEUS_22A_OBLIQUITY: float = 9443.0
"""``float``: nutation in obliquity for :data:`.MEEUS_22A_JD`, (milliarcseconds)."""

TEST_START_JD: float = 2446896.0
"""``float``: Julian date most engine tests start at."""

TEST_OTHER_JD: float = 2446816.0
"""``float``: second Julian date, used to check cached values follow the epoch."""
