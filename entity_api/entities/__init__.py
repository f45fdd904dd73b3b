"""
Entity kinds.

Entities are domain objects that delegate persistence, metadata lookups
and field values to the context they are bound to.
"""

from entity_api.entities.base_entity import Entity
from entity_api.entities.node import NODE_INFO, Node
from entity_api.entities.taxonomy_term import TAXONOMY_TERM_INFO, TaxonomyTerm
from entity_api.entities.user import USER_INFO, User
from entity_api.types import EntityInfo


def core_entity_info() -> list[EntityInfo]:
    """Return the metadata of the entity kinds shipped with this package."""
    return [NODE_INFO, USER_INFO, TAXONOMY_TERM_INFO]


__all__ = [
    "NODE_INFO",
    "TAXONOMY_TERM_INFO",
    "USER_INFO",
    "Entity",
    "Node",
    "TaxonomyTerm",
    "User",
    "core_entity_info",
]
