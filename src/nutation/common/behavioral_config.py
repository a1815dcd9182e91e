"""Defines a global set of configurations that define how the nutation engine operates.

Options are read from the packaged ``default_behavior.config``, or from a user file given
directly or through the :data:`.CONFIG_ENV_VARIABLE` environment variable. Options missing from
a user file keep their default. Each section is exposed as a :class:`.SubConfig`:

.. code-block:: python

    BehavioralConfig.getConfig().nutation.DefaultModel  # "iau2000b"
"""

from __future__ import annotations

# Standard Library Imports
import os
from configparser import ConfigParser
from configparser import Error as ConfigError
from importlib import resources
from logging import CRITICAL, DEBUG, ERROR, INFO, NOTSET, WARNING
from pathlib import Path
from typing import TYPE_CHECKING, Any, NamedTuple

# Type Checking Imports
if TYPE_CHECKING:
    # Standard Library Imports
    from typing import Final


CONFIG_ENV_VARIABLE: str = "NUTATION_BEHAVIOR_CONFIG"
"""``str``: environment variable that may point to a custom behavior config file."""


class ConfigOption(NamedTuple):
    """Name, default value & :class:`.CustomConfigParser` getter of one config option."""

    name: str
    default: Any
    getter: str


class SubConfig:
    """Class that represents a section in the configuration.

    Enforce improved config convention:
        `BehavioralConfig.section.value` rather than something like `BehavioralConfig["section"]["value"]`.
    """

    def __init__(self, section: str):
        """Instantiate a `SubConfig` object.

        Args:
            section (``str``): name of section that this SubConfig object represents
        """
        if not isinstance(section, str):
            raise TypeError("Config section must be a string")
        self.section = section

    def setonce(self, name: str, value: Any):
        """Set the option `name`, raising an ``AttributeError`` if it was already set."""
        if hasattr(self, name):
            already_set = getattr(self, name)
            raise AttributeError(
                f"SubConfig {self.section!r} already has a value set for {name!r}:{already_set!r}",
            )
        setattr(self, name, value)


class CustomConfigParser(ConfigParser):
    """Perform custom parsing operations on our custom config convention."""

    LOGGING_LEVELS: Final[dict[str, int]] = {
        "CRITICAL": CRITICAL,
        "ERROR": ERROR,
        "WARNING": WARNING,
        "INFO": INFO,
        "DEBUG": DEBUG,
        "NOTSET": NOTSET,
    }

    def getlogginglevel(self, section: str, option: str) -> int:
        """Return the :mod:`logging` level named by this option, case-insensitively."""
        return self.LOGGING_LEVELS.get(self.get(section, option).upper(), NOTSET)

    def getlowerstr(self, section: str, option: str) -> str:
        """Return a lower-cased string for this option."""
        return self.get(section, option).strip().lower()


class BehavioralConfig:
    """Singleton, config settings class."""

    DEFAULT_CONFIG_FILE: Final[str] = "default_behavior.config"

    OPTIONS: Final[dict[str, tuple[ConfigOption, ...]]] = {
        "logging": (
            ConfigOption("OutputLocation", "stdout", "get"),
            ConfigOption("Level", INFO, "getlogginglevel"),
            ConfigOption("MaxFileSize", 1048576, "getint"),
            ConfigOption("MaxFileCount", 50, "getint"),
            ConfigOption("AllowMultipleHandlers", False, "getboolean"),
        ),
        "nutation": (ConfigOption("DefaultModel", "iau2000b", "getlowerstr"),),
    }
    """``dict``: typed options of each config section."""

    __shared_inst: BehavioralConfig | None = None

    def __init__(self, config_file_path: str | None = None):
        """Read `config_file_path`, or the packaged defaults, and share the result.

        A `config_file_path` that doesn't exist is ignored, so every option keeps its default.
        """
        self._parser = CustomConfigParser()
        if config_file_path is None:
            res = resources.files("nutation.common").joinpath(self.DEFAULT_CONFIG_FILE)
            self._parser.read_string(res.read_text(encoding="utf-8"))

        elif Path(config_file_path).exists():
            self._parser.read(config_file_path, encoding="utf-8")

        for section, options in self.OPTIONS.items():
            sub = SubConfig(section)
            for option in options:
                sub.setonce(option.name, self._parseOption(section, option))

            setattr(self, section, sub)

        BehavioralConfig.__shared_inst = self

    def _parseOption(self, section: str, option: ConfigOption) -> Any:
        """Return the typed value of `option`, or its default if the file doesn't set it."""
        getter = getattr(self._parser, option.getter)
        try:
            return getter(section, option.name)
        except ConfigError:
            return option.default

    @classmethod
    def getConfig(cls, config_file_path: str | None = None) -> BehavioralConfig:
        """Return a reference to the singleton shared config.

        Note:
            If no path is given, the :data:`.CONFIG_ENV_VARIABLE` environment variable is checked
            before falling back to the packaged defaults.
        """
        if cls.__shared_inst is None:
            cls.__shared_inst = cls(config_file_path or os.environ.get(CONFIG_ENV_VARIABLE) or None)

        return cls.__shared_inst
