from typing import Optional

from telethon.tl import types

from .types import TypeMessagesFilter

FILTERS: dict[str, type[TypeMessagesFilter]] = {
    "InputMessagesFilterEmpty": types.InputMessagesFilterEmpty,
    "InputMessagesFilterPhotos": types.InputMessagesFilterPhotos,
    "InputMessagesFilterVideo": types.InputMessagesFilterVideo,
    "InputMessagesFilterPhotoVideo": types.InputMessagesFilterPhotoVideo,
    "InputMessagesFilterDocument": types.InputMessagesFilterDocument,
    "InputMessagesFilterGif": types.InputMessagesFilterGif,
    "InputMessagesFilterVoice": types.InputMessagesFilterVoice,
    "InputMessagesFilterMusic": types.InputMessagesFilterMusic,
    "InputMessagesFilterRoundVoice": types.InputMessagesFilterRoundVoice,
    "InputMessagesFilterRoundVideo": types.InputMessagesFilterRoundVideo,
}

DEFAULT_FILTER = "InputMessagesFilterDocument"


def get_filter(name: Optional[str]) -> Optional[type[TypeMessagesFilter]]:
    """`None` means no filtering, unknown names raise `KeyError`"""
    if name is None:
        return None

    return FILTERS[name]
