"""Various helper functions that are used across multiple modules."""

from __future__ import annotations

# Local Imports
from .logger import nutationLogError

DAT_COMMENT: str = "#"
"""``str``: everything after this character on a DAT line is ignored."""


def getTypeString(class_instance) -> str:
    """Return the name of the class of `class_instance`, without its module or base classes."""
    return class_instance.__class__.__name__


def _parseDatLine(line: str, delim: str | None) -> list[float]:
    """Return the values on a single DAT line, or an empty list for blank & comment lines."""
    content = line.split(DAT_COMMENT, 1)[0].strip()
    if not content:
        return []

    return [float(value) for value in content.split(sep=delim)]


def loadDatFile(file_name, delim: str | None = None) -> list[list[float]]:
    """Load the rows of a DAT file of ``float`` values.

    Blank lines are skipped, and anything after a ``#`` is treated as a comment.

    Args:
        file_name (``str`` | ``Path``): path of the DAT file to load.
        delim (``str``, optional): delimiter between values on a line. Defaults to ``None``,
            which splits on any whitespace.

    Raises:
        ``FileNotFoundError``: `file_name` doesn't exist.
        ``ValueError``: a value isn't convertible to ``float``; the message names the line.
        ``OSError``: the file holds no values.

    Returns:
        ``list``: one list of values per data line, in file order.
    """
    rows: list[list[float]] = []
    try:
        with open(file_name, encoding="utf-8") as data_file:
            for line_number, line in enumerate(data_file, start=1):
                try:
                    values = _parseDatLine(line, delim)
                except ValueError as err:
                    msg = f"Parsing error on line {line_number} of DAT file: {file_name}"
                    nutationLogError(msg)
                    raise ValueError(msg) from err

                if values:
                    rows.append(values)

    except FileNotFoundError:
        nutationLogError(f"Could not find DAT file: {file_name}")
        raise

    if not rows:
        msg = f"Empty DAT file: {file_name}"
        nutationLogError(msg)
        raise OSError(msg)

    return rows
