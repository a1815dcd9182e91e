from __future__ import annotations

# Standard Library Imports
import logging
import sys

# Third Party Imports
import pytest

# NUTATION Imports
from nutation.common.behavioral_config import CONFIG_ENV_VARIABLE, BehavioralConfig
from nutation.physics.time.repository import JulianDateRepository

# Local Imports
from . import TEST_START_JD


@pytest.fixture(autouse=True)
def _patchMissingEnvVariables(monkeypatch: pytest.MonkeyPatch) -> None:
    """Automatically delete each environment variable, if set.

    Args:
        monkeypatch (:class:`pytest.MonkeyPatch`): monkeypatch obj to track changes

    Note:
        This is used so tests can assume a "blank" configuration, and it won't
        overwrite a user's custom-set environment variables.
    """
    with monkeypatch.context() as m_patch:
        m_patch.delenv(CONFIG_ENV_VARIABLE, raising=False)
        # Restore the shared config after each test, even if a test built its own
        m_patch.setattr(
            BehavioralConfig,
            "_BehavioralConfig__shared_inst",
            BehavioralConfig.getConfig(),
        )
        yield


@pytest.fixture(scope="session", name="test_logger")
def getTestLoggerObject() -> logging.Logger:
    """Create a custom :class:`logging.Logger` object."""
    logger = logging.getLogger("Unit Test Logger")
    logger.setLevel(logging.DEBUG)
    handler = logging.StreamHandler(stream=sys.stdout)
    handler.setFormatter(logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s"))
    logger.addHandler(handler)
    return logger


@pytest.fixture(name="epoch")
def getEpoch() -> JulianDateRepository:
    """Return a :class:`.JulianDateRepository` at :data:`.TEST_START_JD`."""
    return JulianDateRepository(TEST_START_JD)
