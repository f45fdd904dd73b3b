"""Collaborator bundle bound to entities."""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from entity_api.interfaces import IEntityController, IEntityInfoRegistry, IFieldProvider
from entity_api.logging import get_logger
from entity_api.null_field_provider import NullFieldProvider
from entity_api.types import EntityInfo, EntityMalformedError, Identifier

if TYPE_CHECKING:
    from entity_api.entities.base_entity import Entity

logger = get_logger(__name__)


@dataclass
class ContextConfig:
    """Configuration of an entity context."""

    # Language code handed to the field provider when the caller gives none
    default_langcode: str | None = None
    # Re-raise foreign controller exceptions as EntityStorageError
    wrap_storage_errors: bool = True


class EntityContext:
    """Storage controllers, entity metadata and field values for a set of entities.

    Entities never look these collaborators up globally: every entity is
    bound to the context it was created with and delegates through it.
    """

    def __init__(
        self,
        *,
        registry: IEntityInfoRegistry,
        controllers: Mapping[str, IEntityController[Any]] | None = None,
        fields: IFieldProvider | None = None,
        config: ContextConfig | None = None,
    ) -> None:
        self.registry = registry
        self.fields = fields if fields is not None else NullFieldProvider()
        self.config = config if config is not None else ContextConfig()
        self._controllers: dict[str, IEntityController[Any]] = dict(controllers or {})

    def register_controller(self, entity_type: str, controller: IEntityController[Any]) -> None:
        """Set the storage controller used for an entity type."""
        self._controllers[entity_type] = controller

    def controller(self, entity_type: str) -> IEntityController[Any]:
        """Return the storage controller of an entity type.

        Raises:
            EntityMalformedError: If no controller is registered for the type
        """
        try:
            return self._controllers[entity_type]
        except KeyError as e:
            raise EntityMalformedError(
                f"No storage controller registered for entity type '{entity_type}'"
            ) from e

    def entity_info(self, entity_type: str) -> EntityInfo:
        """Return the metadata of an entity type."""
        return self.registry.get(entity_type)

    def create(self, entity_type: str, values: Mapping[str, Any] | None = None) -> "Entity":
        """Create a new, unsaved entity bound to this context.

        Args:
            entity_type: Type of the entity to create
            values: Initial property values

        Returns:
            An instance of the class registered for the entity type

        Raises:
            EntityMalformedError: If the type has no entity class
        """
        info = self.entity_info(entity_type)
        if info.entity_class is None:
            raise EntityMalformedError(f"Entity type '{entity_type}' has no entity class")
        return info.entity_class.from_values(values or {}, context=self)

    def load(self, entity_type: str, ids: Sequence[Identifier]) -> dict[Identifier, "Entity"]:
        """Load entities by identifier through the type's storage controller.

        The loaded entities are bound to this context.
        """
        if not ids:
            return {}
        logger.debug(f"Loading {entity_type} entities {list(ids)}")
        entities = self.controller(entity_type).load(list(ids))
        for entity in entities.values():
            entity.bind(self)
        return entities

    def load_one(self, entity_type: str, entity_id: Identifier) -> "Entity | None":
        """Load a single entity, or return None if it does not exist."""
        return self.load(entity_type, [entity_id]).get(entity_id)
