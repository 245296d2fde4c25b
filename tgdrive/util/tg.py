from telethon.tl.types import Channel, Chat, User
from telethon.utils import get_display_name as _get_display_name

CHAT_PRIVATE = "ChatPrivate"
CHAT_GROUP = "ChatGroup"
CHAT_CHANNEL = "ChatChannel"
CHAT_UNKNOWN = "ChatUnknown"


def get_entity_type_str(entity):
    if isinstance(entity, User):
        return CHAT_PRIVATE
    if isinstance(entity, Channel):
        if entity.megagroup or entity.gigagroup:
            return CHAT_GROUP
        return CHAT_CHANNEL
    if isinstance(entity, Chat):
        return CHAT_GROUP

    return CHAT_UNKNOWN


def get_name(first: str | None, last: str | None, username: str | None) -> str:
    name = f"{first or ''} {last or ''}".strip()

    if name != "":
        return name

    return username or ""


def get_display_name(entity):
    if isinstance(entity, User):
        if entity.deleted:
            return "Deleted Account"
        return get_name(entity.first_name, entity.last_name, entity.username)

    return _get_display_name(entity)


def get_username(entity):
    if getattr(entity, "username", None) is not None:
        return f"@{entity.username}"

    return "<no username>"
