from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from telethon import types

from tgdrive.tgclient.files_source import get_downloadable_item
from tgdrive.tgclient.guards import (
    MessageDownloadable,
    MessageWithCompressedPhoto,
    MessageWithDocument,
)
from tgdrive.tgclient.message_types import MessageProto
from tgdrive.tgclient.types import TypeInputFileLocation
from tgdrive.util.col import max_by


class MediaKind(Enum):
    DOCUMENT = "document"
    PHOTO = "photo"
    NONE = "none"


class ThumbSizeKind(Enum):
    PROGRESSIVE = "progressive"
    SIMPLE = "simple"


@dataclass(frozen=True)
class ThumbSize:
    kind: ThumbSizeKind
    type: str
    size: int


def media_kind(message: MessageProto) -> MediaKind:
    if MessageWithCompressedPhoto.guard(message):
        return MediaKind.PHOTO

    if MessageWithDocument.guard(message):
        return MediaKind.DOCUMENT

    return MediaKind.NONE


def to_thumb_size(size: Any) -> Optional[ThumbSize]:
    """`None` for the sizes that can't be downloaded (stripped, path, empty)"""
    match size:
        case types.PhotoSizeProgressive(sizes=[*_, last]):
            return ThumbSize(ThumbSizeKind.PROGRESSIVE, size.type, last)
        case types.PhotoSize():
            return ThumbSize(ThumbSizeKind.SIMPLE, size.type, size.size)
        case types.PhotoCachedSize():
            return ThumbSize(ThumbSizeKind.SIMPLE, size.type, len(size.bytes))
        case _:
            return None


def thumbnail_sizes(message: MessageProto) -> list[ThumbSize]:
    match media_kind(message):
        case MediaKind.DOCUMENT:
            sizes = message.document.thumbs or []  # type: ignore
        case MediaKind.PHOTO:
            sizes = message.photo.sizes  # type: ignore
        case MediaKind.NONE:
            sizes = []

    return [ts for s in sizes if (ts := to_thumb_size(s)) is not None]


def best_thumbnail(message: MessageProto) -> Optional[ThumbSize]:
    return max_by(lambda ts: ts.size, thumbnail_sizes(message))


def file_size(message: MessageProto) -> int:
    match media_kind(message):
        case MediaKind.DOCUMENT:
            return message.document.size  # type: ignore
        case MediaKind.PHOTO:
            largest = best_thumbnail(message)
            return largest.size if largest is not None else 0
        case MediaKind.NONE:
            return 0


def thumbnail_location(
    message: MessageDownloadable, thumb: ThumbSize
) -> TypeInputFileLocation:
    return get_downloadable_item(message).input_location(thumb_size=thumb.type)
