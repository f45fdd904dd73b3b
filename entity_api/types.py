"""Shared types for the entity API: metadata records, save status and errors."""

from collections.abc import Callable
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

Identifier = int | str


class SaveStatus(Enum):
    """Outcome reported by a storage controller after a save."""

    SAVED_NEW = 1
    SAVED_UPDATED = 2


class Uri(BaseModel):
    """Location descriptor of an entity."""

    path: str
    options: dict[str, Any] = Field(default_factory=dict)


class EntityInfo(BaseModel):
    """Metadata describing one entity type.

    The keys name properties of the entity class: ``id_key`` holds the
    identifier, ``revision_key`` the revision identifier and ``bundle_key``
    the bundle. A type without ``bundle_key`` has a single bundle named
    after the type itself.
    """

    model_config = ConfigDict(frozen=True)

    entity_type: str = Field(min_length=1)
    label: str = ""
    entity_class: type[Any] | None = None
    id_key: str = Field(min_length=1)
    revision_key: str | None = None
    bundle_key: str | None = None
    label_key: str | None = None
    label_callback: Callable[[Any], str | None] | None = None
    uri_callback: Callable[[Any], Uri | None] | None = None
    fieldable: bool = False


class EntityError(Exception):
    """Base class for entity API errors."""


class EntityStorageError(EntityError):
    """
    Raised when a storage controller cannot complete a save or delete.

    The exception raised by the controller, if any, is kept in
    ``original_error``.
    """

    def __init__(self, message: str, original_error: Exception | None = None):
        super().__init__(message)
        self.original_error = original_error


class EntityMalformedError(EntityError):
    """Raised when an entity does not conform to the shape its metadata expects."""


class EntityContextError(EntityError):
    """Raised when an operation needs collaborators but the entity has no context."""
