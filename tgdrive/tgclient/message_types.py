from abc import abstractmethod
from datetime import datetime
from typing import Any, Protocol

import telethon

MessageId = int
ChatId = int


class StickerProto(Protocol):
    pass


class FileProto(Protocol):
    name: str | None
    mime_type: str | None
    ext: str | None
    size: int | None


class PhotoSizeProto(Protocol):
    type: str


class DocumentProto(Protocol):
    id: int
    size: int
    access_hash: int
    file_reference: bytes
    mime_type: str
    attributes: list
    thumbs: list[PhotoSizeProto | Any] | None

class PhotoProto(Protocol):
    id: int
    access_hash: int
    file_reference: bytes
    sizes: list[PhotoSizeProto | Any]

    @staticmethod
    def guard(photo: Any):
        return isinstance(photo, telethon.types.Photo)


class DialogProto(Protocol):
    id: int
    entity: Any
    date: datetime | None


class MessageProto(Protocol):
    id: MessageId
    chat_id: ChatId
    date: datetime
    text: str | None
    file: FileProto | None
    document: DocumentProto | None
    photo: PhotoProto | None
    sticker: StickerProto | None

    @staticmethod
    def guard(msg: Any):
        return (
            hasattr(msg, "id")
            and hasattr(msg, "date")
            and hasattr(msg, "document")
            and hasattr(msg, "file")
        )
