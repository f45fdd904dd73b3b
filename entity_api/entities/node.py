"""Node entity: a content item such as an article or a page."""

from typing import ClassVar

from pydantic import Field

from entity_api.entities.base_entity import Entity
from entity_api.types import EntityInfo, Uri


class Node(Entity):
    """Domain model representing a content item.

    Nodes are revisionable and grouped in bundles by their ``type``.
    """

    entity_type_id: ClassVar[str] = "node"

    nid: int | None = None
    vid: int | None = None
    type: str = Field(min_length=1)
    title: str = ""
    uid: int = 0
    status: bool = True
    language: str = "und"


def node_uri(node: Node) -> Uri | None:
    """Return the canonical path of a saved node."""
    if node.nid is None:
        return None
    return Uri(path=f"node/{node.nid}")


NODE_INFO = EntityInfo(
    entity_type="node",
    label="Node",
    entity_class=Node,
    id_key="nid",
    revision_key="vid",
    bundle_key="type",
    label_key="title",
    uri_callback=node_uri,
    fieldable=True,
)
