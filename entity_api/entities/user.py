"""User entity."""

from typing import ClassVar

from entity_api.entities.base_entity import Entity
from entity_api.types import EntityInfo, Uri

ANONYMOUS_UID = 0


class User(Entity):
    """Domain model representing a user account. Users have no bundles."""

    entity_type_id: ClassVar[str] = "user"

    uid: int | None = None
    name: str = ""
    mail: str | None = None
    status: bool = True


def user_uri(user: User) -> Uri | None:
    """Return the profile path of a registered user."""
    if user.uid is None or user.uid == ANONYMOUS_UID:
        return None
    return Uri(path=f"user/{user.uid}")


def user_label(user: User) -> str:
    """Return the display name of a user."""
    if user.uid == ANONYMOUS_UID or not user.name:
        return "Anonymous"
    return user.name


USER_INFO = EntityInfo(
    entity_type="user",
    label="User",
    entity_class=User,
    id_key="uid",
    label_callback=user_label,
    uri_callback=user_uri,
    fieldable=True,
)
