"""Defines the :class:`.Logger` class and the one-line package logging helpers.

Library code never builds handlers itself; it calls the ``nutationLog*`` helpers, which write
to the :data:`.PACKAGE_LOGGER_NAME` logger. Entry points such as :func:`.runNutation` create a
:class:`.Logger` once to attach the configured stdout or rotating file handler.
"""

from __future__ import annotations

# Standard Library Imports
import logging
import os
import sys
from datetime import datetime
from logging.handlers import RotatingFileHandler

# Local Imports
from .behavioral_config import BehavioralConfig

PACKAGE_LOGGER_NAME: str = "nutation"
"""``str``: name of the top-level logger that the module helpers write to."""

LOG_FORMAT: str = "%(asctime)s - %(module)s - %(levelname)s - %(message)s"
"""``str``: record format shared by every handler a :class:`.Logger` attaches."""

STDOUT: str = "stdout"
"""``str``: ``[logging] OutputLocation`` value that selects the console handler."""


def logFileName(name: str, stamp: datetime | None = None) -> str:
    """Return a time-stamped log file name for the logger `name` that is safe on any platform.

    Args:
        name (``str``): logger name, used as the file name prefix.
        stamp (``datetime``, optional): time stamp of the file. Defaults to ``None``, which uses
            the current local time.
    """
    if stamp is None:
        stamp = datetime.now()

    safe_stamp = stamp.isoformat().replace(":", "-").replace(".", "")
    return f"{name}_{safe_stamp}.log"


def _createHandler(name: str, location: str) -> tuple[logging.Handler, str]:
    """Return a handler writing to `location` and the stream or file name it writes to."""
    if location == STDOUT:
        return logging.StreamHandler(sys.stdout), STDOUT

    os.makedirs(location, exist_ok=True)
    filename = os.path.join(location, logFileName(name))
    config = BehavioralConfig.getConfig().logging
    handler = RotatingFileHandler(
        filename,
        maxBytes=config.MaxFileSize,
        backupCount=config.MaxFileCount,
        encoding="utf-8",
    )
    return handler, filename


class Logger:
    """Named logger with one handler configured from the ``[logging]`` config section.

    A handler is only attached the first time a name is used, unless multiple handlers are
    allowed. Every other attribute is forwarded to the wrapped :class:`logging.Logger`.

    Args:
        name (``str``, optional): logger name. Defaults to :data:`.PACKAGE_LOGGER_NAME`.
        level (``int``, optional): logging level. Defaults to the ``Level`` config value.
        path (``str``, optional): ``"stdout"`` or a directory for rotating log files. Defaults
            to the ``OutputLocation`` config value.
        allow_multiple_handlers (``bool``, optional): attach a handler even if the logger
            already has one. Defaults to the ``AllowMultipleHandlers`` config value.
    """

    def __init__(
        self,
        name: str = PACKAGE_LOGGER_NAME,
        level: int | None = None,
        path: str | None = None,
        allow_multiple_handlers: bool | None = None,
    ):
        """Attach the configured handler to the logger called `name`."""
        config = BehavioralConfig.getConfig().logging
        if allow_multiple_handlers is None:
            allow_multiple_handlers = config.AllowMultipleHandlers

        self.logger = logging.getLogger(name)
        self.filename: str | None = None
        if self.logger.handlers and not allow_multiple_handlers:
            return

        handler, self.filename = _createHandler(name, path or config.OutputLocation)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        self.logger.setLevel(level or config.Level)
        self.logger.addHandler(handler)

    def __getattr__(self, name):
        """Forward to the wrapped :class:`logging.Logger`."""
        return getattr(self.logger, name)


def _nutationLog(message: str, level: int):
    """Write `message` to the package logger at `level` without building a :class:`.Logger`."""
    logging.getLogger(PACKAGE_LOGGER_NAME).log(level, message)


def nutationLogCritical(message: str):
    """Log `message` at CRITICAL on the package logger."""
    _nutationLog(message, logging.CRITICAL)


def nutationLogError(message: str):
    """Log `message` at ERROR on the package logger.

    Raised errors are reported through this first, see :mod:`.exceptions`.
    """
    _nutationLog(message, logging.ERROR)


def nutationLogWarning(message: str):
    """Log `message` at WARNING on the package logger."""
    _nutationLog(message, logging.WARNING)


def nutationLogInfo(message: str):
    """Log `message` at INFO on the package logger."""
    _nutationLog(message, logging.INFO)


def nutationLogDebug(message: str):
    """Log `message` at DEBUG on the package logger."""
    _nutationLog(message, logging.DEBUG)
