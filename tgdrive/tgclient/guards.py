from typing import Any, Protocol, TypeGuard

from .message_types import (
    DocumentProto,
    FileProto,
    MessageProto,
    PhotoProto,
)


"""
Message.file
Returns a `File <telethon.tl.custom.file.File>` wrapping the
        `photo` or `document` in this message. If the media type is different
        (polls, games, none, etc.), this property will be `None`.
"""


class TelegramMessage(MessageProto, Protocol):
    @staticmethod
    def guard(msg: Any) -> TypeGuard["TelegramMessage"]:
        return MessageProto.guard(msg)


class MessageDownloadable(
    TelegramMessage,
    Protocol,
):
    """Message that has a document or a compressed photo attached.  `MessageWithDocument` or `MessageWithCompressedPhoto`"""

    file: FileProto

    @staticmethod
    def guard(msg: Any) -> TypeGuard["MessageDownloadable"]:
        return TelegramMessage.guard(msg) and (
            MessageWithDocument.guard(msg) or MessageWithCompressedPhoto.guard(msg)
        )

    @staticmethod
    def filename(message: "MessageDownloadable") -> str:
        if MessageWithFilename.guard(message):
            return MessageWithFilename.filename(message)

        if MessageWithCompressedPhoto.guard(message):
            return MessageWithCompressedPhoto.filename(message)

        return f"{message.id}_document"

    @staticmethod
    def mime_type(message: "MessageDownloadable") -> str:
        if message.file is not None and message.file.mime_type is not None:
            return message.file.mime_type

        if MessageWithCompressedPhoto.guard(message):
            return "image/jpeg"

        return "application/octet-stream"


class MessageWithDocument(
    MessageDownloadable,
    Protocol,
):
    document: DocumentProto
    file: FileProto

    @staticmethod
    def guard(msg: Any) -> TypeGuard["MessageWithDocument"]:
        return TelegramMessage.guard(msg) and msg.document is not None


class FileWithName(FileProto, Protocol):
    name: str


class MessageWithFilename(
    MessageDownloadable,
    Protocol,
):
    """message with document with file name"""

    file: FileWithName
    document: DocumentProto

    @staticmethod
    def guard(msg: Any) -> TypeGuard["MessageWithFilename"]:
        return (
            TelegramMessage.guard(msg)
            and msg.file is not None
            and msg.file.name is not None
        )

    @staticmethod
    def filename(message: "MessageWithFilename"):
        return message.file.name


class MessageWithCompressedPhoto(
    MessageDownloadable,
    Protocol,
):
    """message with compressed image"""

    file: FileProto
    photo: PhotoProto

    @staticmethod
    def guard(msg: Any) -> TypeGuard["MessageWithCompressedPhoto"]:
        return (
            TelegramMessage.guard(msg)
            and PhotoProto.guard(getattr(msg, "photo", None))
            and not MessageWithSticker.guard(msg)
        )

    @staticmethod
    def filename(msg: "MessageWithCompressedPhoto"):
        return f"{msg.id}_photo.jpeg"


class MessageWithSticker(
    MessageDownloadable,
    Protocol,
):
    """stickers"""

    file: FileProto

    @staticmethod
    def guard(msg: Any) -> TypeGuard["MessageWithSticker"]:
        return TelegramMessage.guard(msg) and getattr(msg, "sticker", None) is not None
