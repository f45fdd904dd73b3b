"""Taxonomy term entity."""

from typing import ClassVar

from pydantic import Field

from entity_api.entities.base_entity import Entity
from entity_api.types import EntityInfo, Uri


class TaxonomyTerm(Entity):
    """Domain model representing a term, bundled by its vocabulary."""

    entity_type_id: ClassVar[str] = "taxonomy_term"

    tid: int | None = None
    vocabulary_machine_name: str = Field(min_length=1)
    name: str = ""
    description: str = ""
    weight: int = 0


def taxonomy_term_uri(term: TaxonomyTerm) -> Uri | None:
    if term.tid is None:
        return None
    return Uri(path=f"taxonomy/term/{term.tid}")


TAXONOMY_TERM_INFO = EntityInfo(
    entity_type="taxonomy_term",
    label="Taxonomy term",
    entity_class=TaxonomyTerm,
    id_key="tid",
    bundle_key="vocabulary_machine_name",
    label_key="name",
    uri_callback=taxonomy_term_uri,
    fieldable=True,
)
