from entity_api.context import ContextConfig, EntityContext
from entity_api.entities import (
    Entity,
    Node,
    TaxonomyTerm,
    User,
    core_entity_info,
)
from entity_api.interfaces import (
    EntityInterface,
    IEntityController,
    IEntityInfoRegistry,
    IFieldProvider,
)
from entity_api.null_field_provider import NullFieldProvider
from entity_api.registry import EntityInfoRegistry
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

__all__ = [
    "ContextConfig",
    "Entity",
    "EntityContext",
    "EntityContextError",
    "EntityError",
    "EntityInfo",
    "EntityInfoRegistry",
    "EntityInterface",
    "EntityMalformedError",
    "EntityStorageError",
    "IEntityController",
    "IEntityInfoRegistry",
    "IFieldProvider",
    "Identifier",
    "Node",
    "NullFieldProvider",
    "SaveStatus",
    "TaxonomyTerm",
    "Uri",
    "User",
    "core_entity_info",
]
