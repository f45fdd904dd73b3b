"""Null field provider for entity types without fields, or for testing purposes."""

from collections.abc import Mapping, Sequence
from typing import Any

from entity_api.interfaces import EntityInterface, IFieldProvider


class NullFieldProvider(IFieldProvider):
    """Field provider that knows no fields."""

    def get_items(
        self,
        entity_type: str,  # noqa: ARG002
        entity: EntityInterface,  # noqa: ARG002
        field_name: str,  # noqa: ARG002
        langcode: str | None = None,  # noqa: ARG002
    ) -> Sequence[Mapping[str, Any]] | None:
        """Return None for every field."""
        return None
