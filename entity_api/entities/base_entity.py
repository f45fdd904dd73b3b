"""Base entity class with default behavior for all entity kinds."""

import copy
from collections.abc import Callable, Mapping
from typing import TYPE_CHECKING, Any, ClassVar, Self, TypeVar

from pydantic import BaseModel, ConfigDict, PrivateAttr

from entity_api.interfaces import EntityInterface
from entity_api.logging import get_logger
from entity_api.types import (
    EntityContextError,
    EntityError,
    EntityInfo,
    EntityMalformedError,
    EntityStorageError,
    Identifier,
    SaveStatus,
    Uri,
)

if TYPE_CHECKING:
    from entity_api.context import EntityContext

logger = get_logger(__name__)

R = TypeVar("R")


class Entity(BaseModel, EntityInterface):
    """Default implementation of the entity contract.

    Concrete kinds declare their properties as model fields and set
    ``entity_type_id``. Initial values are only accepted for declared
    properties; unknown keys are rejected unless a kind overrides
    ``model_config`` with ``extra="ignore"``.

    Persistence, metadata and field values are delegated to the
    :class:`~entity_api.context.EntityContext` the entity is bound to.
    """

    model_config = ConfigDict(extra="forbid")

    entity_type_id: ClassVar[str]

    # Forces is_new() even when an identifier is present, e.g. for imports
    # that keep their original identifiers.
    is_new_flag: bool = False

    _context: "EntityContext | None" = PrivateAttr(default=None)

    def __init__(self, **data: Any) -> None:
        """Initialize the entity and bind it to the given ``_context``."""
        context = data.pop("_context", None)
        super().__init__(**data)
        self._context = context

    @classmethod
    def from_values(
        cls, values: Mapping[str, Any], *, context: "EntityContext | None" = None
    ) -> Self:
        """Build an entity from a mapping of property names to values.

        A ``_context`` key in the mapping is ignored in favor of ``context``.
        """
        data = dict(values)
        data.pop("_context", None)
        return cls(**data, _context=context)

    @property
    def context(self) -> "EntityContext | None":
        return self._context

    def bind(self, context: "EntityContext") -> Self:
        """Bind the entity to a context and return it."""
        self._context = context
        return self

    def _bound_context(self) -> "EntityContext":
        if self._context is None:
            raise EntityContextError(
                f"{type(self).__name__} is not bound to an entity context"
            )
        return self._context

    def entity_info(self) -> EntityInfo:
        """Return the metadata of this entity's type."""
        return self._bound_context().entity_info(self.entity_type())

    def entity_type(self) -> str:
        entity_type = getattr(type(self), "entity_type_id", None)
        if not entity_type:
            raise EntityMalformedError(f"{type(self).__name__} does not declare an entity type")
        return entity_type

    def _metadata_property(self, key: str) -> Any:
        """Return the value of a property named by the type's metadata."""
        if key not in type(self).model_fields:
            raise EntityMalformedError(
                f"Entity type '{self.entity_type()}' has no property '{key}'"
            )
        return getattr(self, key)

    def id(self) -> Identifier | None:
        return self._metadata_property(self.entity_info().id_key)

    def revision_id(self) -> Identifier | None:
        """Return the revision identifier, or None if the type has no revisions."""
        revision_key = self.entity_info().revision_key
        if revision_key is None:
            return None
        return self._metadata_property(revision_key)

    def is_new(self) -> bool:
        return bool(self.is_new_flag) or self.id() is None

    def enforce_is_new(self, value: bool = True) -> None:
        """Mark the entity as new regardless of its identifier, or clear the mark."""
        self.is_new_flag = value

    def bundle(self) -> str:
        info = self.entity_info()
        if info.bundle_key is None:
            return self.entity_type()

        bundle = getattr(self, info.bundle_key, None)
        if not bundle:
            raise EntityMalformedError(
                f"Missing bundle property '{info.bundle_key}' "
                f"on entity of type '{self.entity_type()}'"
            )
        return str(bundle)

    def label(self) -> str | None:
        info = self.entity_info()
        if info.label_callback is not None:
            return info.label_callback(self)
        if info.label_key is not None:
            return getattr(self, info.label_key, None)
        return None

    def uri(self) -> Uri | None:
        info = self.entity_info()
        if info.uri_callback is not None:
            return info.uri_callback(self)
        return None

    def save(self) -> SaveStatus:
        controller = self._bound_context().controller(self.entity_type())
        logger.debug(f"Saving {self.entity_type()} {self.id()}")
        return self._call_controller("save", lambda: controller.save(self))

    def delete(self) -> None:
        if self.is_new():
            return
        entity_id = self.id()
        controller = self._bound_context().controller(self.entity_type())
        logger.debug(f"Deleting {self.entity_type()} {entity_id}")
        self._call_controller("delete", lambda: controller.delete([entity_id]))

    def _call_controller(self, operation: str, call: Callable[[], R]) -> R:
        """Run a controller call, re-raising foreign failures as storage errors."""
        try:
            return call()
        except EntityError:
            raise
        except Exception as e:
            if not self._bound_context().config.wrap_storage_errors:
                raise
            logger.warning(f"Failed to {operation} {self.entity_type()} {self.id()}: {e}")
            raise EntityStorageError(
                f"Failed to {operation} {self.entity_type()} {self.id()}: {e}",
                original_error=e,
            ) from e

    def create_duplicate(self) -> Self:
        info = self.entity_info()
        fields = type(self).model_fields

        # Property values are copied deeply; the context binding is shared
        duplicate = self.model_copy(
            update={name: copy.deepcopy(getattr(self, name)) for name in fields}
        )
        for key in (info.id_key, info.revision_key):
            if key is None:
                continue
            if key not in fields:
                raise EntityMalformedError(
                    f"Entity type '{self.entity_type()}' has no property '{key}'"
                )
            setattr(duplicate, key, None)
        return duplicate

    def get_field_value(
        self, field_name: str, value_key: str = "value", langcode: str | None = None
    ) -> Any | None:
        values = self.get_field_values(field_name, value_key, langcode)
        return values[0] if values else None

    def get_field_values(
        self, field_name: str, value_key: str = "value", langcode: str | None = None
    ) -> list[Any]:
        context = self._bound_context()
        if not self.entity_info().fieldable:
            return []
        if langcode is None:
            langcode = context.config.default_langcode

        items = context.fields.get_items(self.entity_type(), self, field_name, langcode)
        if not items:
            return []
        # Items without a value under the key are skipped
        return [item[value_key] for item in items if item.get(value_key) is not None]
