from __future__ import annotations

# Standard Library Imports
import os
from collections import OrderedDict
from logging import INFO, WARNING
from typing import TYPE_CHECKING

# Third Party Imports
import pytest

# NUTATION Imports
from nutation.common.behavioral_config import (
    CONFIG_ENV_VARIABLE,
    BehavioralConfig,
    CustomConfigParser,
    SubConfig,
)

# Type Checking Imports
if TYPE_CHECKING:
    # Standard Library Imports
    from logging import Logger
    from pathlib import Path

CONFIG_FILE_VALID: tuple[str] = (
    "[logging]\n",
    "OutputLocation = ./logs/\n",
    "Level = warning\n",
    "MaxFileSize = 2048\n",
    "MaxFileCount = 10\n",
    "[nutation]\n",
    "DefaultModel = LP\n",
)

CORRECT_DEFAULTS = OrderedDict(
    {
        "logging": {
            "OutputLocation": "stdout",
            "Level": INFO,
            "MaxFileSize": 1048576,
            "MaxFileCount": 50,
            "AllowMultipleHandlers": False,
        },
        "nutation": {
            "DefaultModel": "iau2000b",
        },
    },
)


@pytest.fixture(name="config_path")
def writeCustomSettingsFile(tmp_path: Path) -> str:
    """Write a non-default config file & return its path."""
    config_path = os.path.join(tmp_path, "test.config")
    with open(config_path, "w", encoding="utf-8") as config_file:
        config_file.writelines(CONFIG_FILE_VALID)

    return config_path


def testImported():
    """Test that importing :class:`.BehavioralConfig` results in the default values."""
    config = BehavioralConfig.getConfig()
    for section, section_conf in CORRECT_DEFAULTS.items():
        for option, value in section_conf.items():
            conf_section = getattr(config, section)
            conf_option = getattr(conf_section, option)
            assert value == conf_option


def testSinglePattern():
    """Test that :class:`.BehavioralConfig` is a proper Singleton class."""
    config = BehavioralConfig.getConfig()
    # NUTATION Imports
    from nutation.common.behavioral_config import BehavioralConfig as SecondConfig

    assert config is SecondConfig.getConfig()


def testOverwrite():
    """Test overwriting the default :class:`.BehavioralConfig` directly with custom settings."""
    custom_config = BehavioralConfig.getConfig()
    custom_config.logging.Level = WARNING
    custom_config.nutation.DefaultModel = "lp"

    second_config = BehavioralConfig.getConfig()
    assert second_config.logging.Level == WARNING
    assert second_config.nutation.DefaultModel == "lp"

    # Reset the values to the defaults
    second_config.logging.Level = CORRECT_DEFAULTS["logging"]["Level"]
    second_config.nutation.DefaultModel = CORRECT_DEFAULTS["nutation"]["DefaultModel"]

    assert custom_config is second_config


def testNonDefaultFile(test_logger: Logger, config_path: str):
    """Test building a :class:`.BehavioralConfig` from a custom config file."""
    test_logger.debug(f"Custom config file: {config_path}")
    file_config = BehavioralConfig(config_path)

    assert file_config.logging.OutputLocation == "./logs/"
    assert file_config.logging.Level == WARNING
    assert file_config.logging.MaxFileSize == 2048
    assert file_config.logging.MaxFileCount == 10
    # Unspecified options use the defaults
    assert file_config.logging.AllowMultipleHandlers is False
    # Model names are normalized to lower case
    assert file_config.nutation.DefaultModel == "lp"

    # Constructing replaces the shared instance
    assert BehavioralConfig.getConfig() is file_config


def testEnvironmentVariable(monkeypatch: pytest.MonkeyPatch, config_path: str):
    """Test that :meth:`.BehavioralConfig.getConfig` reads the environment variable on first use."""
    monkeypatch.setattr(BehavioralConfig, "_BehavioralConfig__shared_inst", None)
    monkeypatch.setenv(CONFIG_ENV_VARIABLE, config_path)

    config = BehavioralConfig.getConfig()
    assert config.nutation.DefaultModel == "lp"
    assert config.logging.MaxFileCount == 10


def testMissingFile(tmp_path):
    """Test that a config path that doesn't exist falls back to the defaults."""
    config = BehavioralConfig(str(tmp_path / "nonexistant.config"))
    assert config.logging.Level == CORRECT_DEFAULTS["logging"]["Level"]
    assert config.nutation.DefaultModel == CORRECT_DEFAULTS["nutation"]["DefaultModel"]


def testSubConfigSetOnce():
    """Test that :class:`.SubConfig` fields can only be set once."""
    sub = SubConfig("nutation")
    sub.setonce("DefaultModel", "lp")
    with pytest.raises(AttributeError):
        sub.setonce("DefaultModel", "iau2000b")

    with pytest.raises(TypeError):
        SubConfig(12)


def testOptionGetters():
    """Test every config option is read with an existing, typed parser getter."""
    parser = CustomConfigParser()
    for section, options in BehavioralConfig.OPTIONS.items():
        assert section in CORRECT_DEFAULTS
        for option in options:
            assert callable(getattr(parser, option.getter))
            assert option.default == CORRECT_DEFAULTS[section][option.name]


def testSubConfigSetOnceFalsy():
    """Test that falsy values still count as set on a :class:`.SubConfig`."""
    sub = SubConfig("logging")
    sub.setonce("AllowMultipleHandlers", False)
    with pytest.raises(AttributeError):
        sub.setonce("AllowMultipleHandlers", True)

    assert sub.AllowMultipleHandlers is False
