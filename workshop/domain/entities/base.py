"""
Base Entity - identity and timestamp contract shared by all aggregates
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime

from ..exceptions import EntityStateError
from ..interfaces.clock import DEFAULT_CLOCK, Clock


class BaseEntity(ABC):
    """
    Common identity and timestamp handling for workshop entities.

    The identifier is assigned by storage and stays empty until the entity is
    persisted. State is held in private attributes and only changes through
    the named operations subclasses expose. Entities compare by identity
    and are unhashable because they are mutable. Only concrete entity types
    can be instantiated.
    """

    def __init__(
        self,
        id: str = "",
        created_at: datetime | None = None,
        updated_at: datetime | None = None,
        clock: Clock | None = None,
    ) -> None:
        self._clock = clock or DEFAULT_CLOCK
        now = self._clock.now()
        self._id = id
        self._created_at = created_at or now
        self._updated_at = updated_at or self._created_at

    @property
    def id(self) -> str:
        return self._id

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    def is_new(self) -> bool:
        """Check if the entity has not been persisted yet."""
        return not self._id

    def assign_id(self, identifier: str) -> None:
        """
        Set the storage-assigned identifier.

        Args:
            identifier: Non-blank identifier chosen by the repository

        Raises:
            EntityStateError: If the entity already has an identifier or the
                identifier is blank
        """
        entity_type = type(self).__name__
        if self._id:
            raise EntityStateError(entity_type, f"identifier already assigned ({self._id})")
        if not identifier or not identifier.strip():
            raise EntityStateError(entity_type, "identifier cannot be blank")
        self._id = identifier

    def _touch(self) -> None:
        """Refresh the update timestamp, never moving it backwards."""
        now = self._clock.now()
        if now > self._updated_at:
            self._updated_at = now

    def __eq__(self, other: object) -> bool:
        """Entities are equal when they share a concrete type and a persisted id."""
        if self is other:
            return True
        if not isinstance(other, BaseEntity) or type(self) is not type(other):
            return False
        if not self._id:
            return False
        return self._id == other._id

    @abstractmethod
    def __repr__(self) -> str:
        """Debug representation including the identifier."""
        pass
