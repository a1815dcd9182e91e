"""Defines the :class:`.Nutation` engine."""

from __future__ import annotations

# Local Imports
from ...common.behavioral_config import BehavioralConfig
from ...common.exceptions import InvalidEpochError
from ...common.logger import nutationLogDebug, nutationLogError
from ...common.utilities import getTypeString
from ..time.repository import JulianDateRepository
from .epoch_cache import EpochCache
from .nutation import NutationModel, getNutationSeries
from .series import NutationAngles, TimeArguments, evaluateIAU2000B, evaluateLP


class Nutation:
    """Nutation in longitude & obliquity for the instant held by a :class:`.JulianDateRepository`.

    Both angles are computed together on first access and cached until either the repository's
    Julian date or the selected model changes.

    .. code-block:: python

        epoch = JulianDateRepository(2446895.5)
        nutation = Nutation(epoch, model="iau2000b")
        nutation.longitude  # ~ -3788 mas
        epoch.julian_date = 2446816.0
        nutation.longitude  # recomputed for the new date

    Args:
        epoch (:class:`.JulianDateRepository`): time handle to evaluate nutation for.
        model (``str`` | :class:`.NutationModel`, optional): series model, case-insensitive.
            Defaults to ``None``, which uses the ``[nutation] DefaultModel`` config value.

    Raises:
        :class:`.InvalidEpochError`: `epoch` is not a :class:`.JulianDateRepository`.
        :class:`.UnknownModelError`: `model` isn't a recognized series model.
    """

    LONGITUDE: str = "longitude"
    """``str``: cache field holding nutation in longitude."""

    OBLIQUITY: str = "obliquity"
    """``str``: cache field holding nutation in obliquity."""

    def __init__(self, epoch: JulianDateRepository, model: str | NutationModel | None = None):
        """Initialize a :class:`.Nutation` engine."""
        self._model: NutationModel | None = None
        self.epoch = epoch

        if model is None:
            model = BehavioralConfig.getConfig().nutation.DefaultModel
        self.model = model

    @property
    def epoch(self) -> JulianDateRepository:
        """:class:`.JulianDateRepository`: time handle nutation is evaluated for.

        Assigning a new handle scopes a fresh, empty cache to it.
        """
        return self._epoch

    @epoch.setter
    def epoch(self, epoch: JulianDateRepository):
        if not isinstance(epoch, JulianDateRepository):
            msg = f"Nutation epoch must be a JulianDateRepository, not {getTypeString(epoch)}"
            nutationLogError(msg)
            raise InvalidEpochError(msg)

        self._epoch = epoch
        self._cache = EpochCache(epoch, model=self._model)

    @property
    def model(self) -> str:
        """``str``: lower-case identifier of the selected series model.

        Assigning a different model rebinds the coefficient table and clears cached angles.
        Assigning the current model, in any case, does nothing.
        """
        return self._model.value

    @model.setter
    def model(self, model: str | NutationModel):
        new_model = NutationModel.fromIdentifier(model)
        if new_model is self._model:
            return

        self._series = getNutationSeries(new_model)
        self._model = new_model
        self._cache.model = new_model
        self._cache.clear()
        nutationLogDebug(f"Nutation model set to {new_model.value!r}")

    @property
    def longitude(self) -> float:
        """``float``: nutation in longitude, (milliarcseconds)."""
        if not self._cache.has(self.LONGITUDE):
            self._populateCache()

        return self._cache.get(self.LONGITUDE)

    @property
    def obliquity(self) -> float:
        """``float``: nutation in obliquity, (milliarcseconds)."""
        if not self._cache.has(self.OBLIQUITY):
            self._populateCache()

        return self._cache.get(self.OBLIQUITY)

    def _populateCache(self) -> None:
        """Evaluate the series and store both angles for the current Julian date."""
        angles = self.calc()
        self._cache.set(self.LONGITUDE, angles.longitude)
        self._cache.set(self.OBLIQUITY, angles.obliquity)

    def calc(self) -> NutationAngles:
        """Evaluate the selected series for the current Julian date, bypassing the cache.

        Returns:
            :class:`.NutationAngles`: nutation in longitude & obliquity, (milliarcseconds).
        """
        time_args = TimeArguments.fromEpoch(self._epoch)
        nutationLogDebug(
            f"Evaluating {self._model.value!r} nutation at JD {float(self._epoch.julian_date)}",
        )

        if self._model is NutationModel.IAU2000B:
            return evaluateIAU2000B(self._series, time_args)

        return evaluateLP(self._series, time_args)

    def __repr__(self):
        """Return a string representation of this :class:`.Nutation`."""
        return f"Nutation(epoch={self._epoch!r}, model={self._model.value!r})"
