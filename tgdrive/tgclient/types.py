from typing import TypeVar
import telethon

TypeMessagesFilter = telethon.types.TypeMessagesFilter
TypeInputFileLocation = telethon.types.TypeInputFileLocation
TypeInputPeer = telethon.types.TypeInputPeer
InputDocumentFileLocation = telethon.types.InputDocumentFileLocation
InputPhotoFileLocation = telethon.types.InputPhotoFileLocation


TT = TypeVar("TT")


class TotalListTyped(list[TT]):
    total: int
