import os
import random
from datetime import datetime
from typing import Optional

import telethon
from telethon import types

from tgdrive.tgclient.message_types import (
    DocumentProto,
    FileProto,
    MessageProto,
    PhotoProto,
)
from tgdrive.util import map_none

random_int = lambda max: lambda: int(max * random.random())


class MockedFile(FileProto):
    def __repr__(self) -> str:
        return f"MockedFile(name={self.name}, mime_type={self.mime_type})"

    def __init__(
        self,
        name: str | None,
        mime_type: str | None,
        ext: str | None,
        size: int | None = None,
    ) -> None:
        self.name = name
        self.mime_type = mime_type
        self.ext = ext
        self.size = size

    @staticmethod
    def from_filename(file_name: str | None, size: int | None = None):
        return MockedFile(
            name=file_name,
            mime_type=map_none(
                file_name, lambda n: telethon.utils.mimetypes.guess_type(n)[0]
            ),
            ext=map_none(file_name, lambda n: os.path.splitext(n)[1]),
            size=size,
        )


class MockedMessage(MessageProto):
    def __repr__(self) -> str:
        return f"MockedMessage({self.id}, date={self.date}, file={map_none(self.file, lambda f: f.name)}, chat_id={self.chat_id})"

    def __init__(
        self,
        *,
        message_id: int,
        chat_id: int,
        date: datetime,
        message: Optional[str] = None,
        document: Optional[DocumentProto] = None,
        photo: Optional[PhotoProto] = None,
        file: Optional[FileProto] = None,
        sticker=None,
    ) -> None:
        self.id = message_id
        self.chat_id = chat_id
        self.date = date
        self._text = message
        self.document = document
        self.photo = photo
        self.file = file
        self.sticker = sticker

    @property
    def text(self):
        return self._text

    @property
    def message(self):
        return self._text


def mocked_document(
    file_name: Optional[str],
    size: int,
    date: datetime,
    *,
    mime_type: Optional[str] = None,
    thumbs: Optional[list] = None,
) -> types.Document:
    attributes = []

    if file_name is not None:
        attributes.append(types.DocumentAttributeFilename(file_name))

    return types.Document(
        id=random_int(2**40)(),
        access_hash=random_int(2**40)(),
        file_reference=b"",
        date=date,
        mime_type=mime_type or "application/octet-stream",
        size=size,
        dc_id=2,
        attributes=attributes,
        thumbs=thumbs,
    )


def mocked_photo(date: datetime, sizes: list) -> types.Photo:
    return types.Photo(
        id=random_int(2**40)(),
        access_hash=random_int(2**40)(),
        file_reference=b"",
        date=date,
        sizes=sizes,
        dc_id=2,
    )
