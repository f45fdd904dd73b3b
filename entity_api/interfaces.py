"""Interfaces for entities and the collaborators they delegate to."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping, Sequence
from typing import Any, Generic, TypeVar

from entity_api.types import EntityInfo, Identifier, SaveStatus, Uri

T = TypeVar("T")


class EntityInterface(ABC):
    """Contract implemented by every entity kind."""

    @abstractmethod
    def id(self) -> Identifier | None:
        """Return the identifier, or None if the entity has none yet."""

    @abstractmethod
    def is_new(self) -> bool:
        """Return whether the entity has not been persisted yet."""

    @abstractmethod
    def entity_type(self) -> str:
        """Return the entity type."""

    @abstractmethod
    def bundle(self) -> str:
        """Return the bundle, which is the entity type for types without bundles."""

    @abstractmethod
    def label(self) -> str | None:
        """Return the human readable label, or None if none is defined."""

    @abstractmethod
    def uri(self) -> Uri | None:
        """Return the location of the entity, or None if it has none."""

    @abstractmethod
    def save(self) -> SaveStatus:
        """Persist the entity.

        Raises:
            EntityStorageError: If the storage controller fails.
        """

    @abstractmethod
    def delete(self) -> None:
        """Remove the entity from storage. Does nothing for new entities.

        Raises:
            EntityStorageError: If the storage controller fails.
        """

    @abstractmethod
    def create_duplicate(self) -> EntityInterface:
        """Return an unsaved copy with the identifiers cleared."""

    @abstractmethod
    def get_field_value(
        self, field_name: str, value_key: str = "value", langcode: str | None = None
    ) -> Any | None:
        """Return the first value of a field, or None."""

    @abstractmethod
    def get_field_values(
        self, field_name: str, value_key: str = "value", langcode: str | None = None
    ) -> list[Any]:
        """Return all values of a field."""


class IEntityController(ABC, Generic[T]):
    """Storage controller for the entities of one type."""

    @abstractmethod
    def save(self, entity: T) -> SaveStatus:
        """Insert or update an entity and report which one happened."""

    @abstractmethod
    def delete(self, ids: Sequence[Identifier]) -> None:
        """Delete the entities with the given identifiers."""

    @abstractmethod
    def load(self, ids: Sequence[Identifier]) -> dict[Identifier, T]:
        """Load entities keyed by identifier. Unknown identifiers are left out."""


class IEntityInfoRegistry(ABC):
    """Entity metadata lookup."""

    @abstractmethod
    def get(self, entity_type: str) -> EntityInfo:
        """Return the metadata of an entity type."""


class IFieldProvider(ABC):
    """Field value lookup."""

    @abstractmethod
    def get_items(
        self,
        entity_type: str,
        entity: EntityInterface,
        field_name: str,
        langcode: str | None = None,
    ) -> Sequence[Mapping[str, Any]] | None:
        """Return the items of a field, or None if the field is empty or unknown."""
