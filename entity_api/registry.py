"""In-process entity metadata registry."""

from collections.abc import Iterable

from entity_api.interfaces import IEntityInfoRegistry
from entity_api.logging import get_logger
from entity_api.types import EntityInfo, EntityMalformedError

logger = get_logger(__name__)


class EntityInfoRegistry(IEntityInfoRegistry):
    """Registry mapping entity types to their metadata."""

    def __init__(self, infos: Iterable[EntityInfo] = ()) -> None:
        self._infos: dict[str, EntityInfo] = {}
        for info in infos:
            self.register(info)

    def register(self, info: EntityInfo) -> None:
        """Register metadata for an entity type, replacing any previous entry."""
        if info.entity_type in self._infos:
            logger.debug(f"Replacing entity info for '{info.entity_type}'")
        self._infos[info.entity_type] = info

    def get(self, entity_type: str) -> EntityInfo:
        """Return the metadata of an entity type.

        Raises:
            EntityMalformedError: If the entity type is not registered
        """
        try:
            return self._infos[entity_type]
        except KeyError as e:
            raise EntityMalformedError(f"Unknown entity type '{entity_type}'") from e

    def has(self, entity_type: str) -> bool:
        return entity_type in self._infos

    def entity_types(self) -> list[str]:
        return sorted(self._infos)
