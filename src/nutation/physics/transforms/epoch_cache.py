"""Defines the :class:`.EpochCache`, a field store scoped to a :class:`.JulianDateRepository`."""

from __future__ import annotations

# Standard Library Imports
from typing import TYPE_CHECKING, Any

# Local Imports
from ...common.exceptions import CacheMissError

# Type Checking Imports
if TYPE_CHECKING:
    # Standard Library Imports
    from collections.abc import Hashable

    # Local Imports
    from ..time.repository import JulianDateRepository


class EpochCache:
    """Field store that is only valid for the Julian date & model it was populated at.

    Every access compares the repository's current Julian date and the cache's model against
    the key the stored fields were written for. If either differs the fields are dropped before
    the access proceeds, so mutating the repository in place is equivalent to calling
    :meth:`.clear`.

    Args:
        epoch (:class:`.JulianDateRepository`): time handle this cache is scoped to.
        model (``Hashable``, optional): model the stored fields are computed with. Defaults to
            ``None``.
    """

    def __init__(self, epoch: JulianDateRepository, model: Hashable | None = None):
        """Initialize an empty :class:`.EpochCache`."""
        self._epoch = epoch
        self._model = model
        self._key: tuple[float, Hashable | None] | None = None
        self._fields: dict[str, Any] = {}

    @property
    def epoch(self) -> JulianDateRepository:
        """:class:`.JulianDateRepository`: time handle this cache is scoped to."""
        return self._epoch

    @property
    def model(self) -> Hashable | None:
        """``Hashable``: model the stored fields are computed with.

        Assigning a different model invalidates stored fields on the next access.
        """
        return self._model

    @model.setter
    def model(self, model: Hashable | None):
        self._model = model

    @property
    def julian_date(self) -> float | None:
        """``float``: Julian date the stored fields are valid for, ``None`` if never synced."""
        if self._key is None:
            return None

        return self._key[0]

    def _sync(self) -> None:
        """Drop stored fields if the observed Julian date or the model moved."""
        current = (float(self._epoch.julian_date), self._model)
        if current != self._key:
            self._fields.clear()
            self._key = current

    def has(self, field: str) -> bool:
        """Return whether `field` is populated for the current key."""
        self._sync()
        return field in self._fields

    def get(self, field: str) -> Any:
        """Return the value of `field` for the current key.

        Raises:
            :class:`.CacheMissError`: `field` isn't populated for the current key.
        """
        self._sync()
        try:
            return self._fields[field]
        except KeyError as err:
            raise CacheMissError(field, self._key[0]) from err

    def set(self, field: str, value: Any) -> None:
        """Store `value` under `field` for the current key."""
        self._sync()
        self._fields[field] = value

    def clear(self) -> None:
        """Drop every stored field."""
        self._fields.clear()

    def __len__(self) -> int:
        """Return the number of fields populated for the current key."""
        self._sync()
        return len(self._fields)
