import logging
from typing import AsyncIterator

import telethon

from . import guards
from .client_types import TgdriveTelegramClientIterDownloadProto
from .guards import MessageDownloadable
from .source.document import SourceItemDocument
from .source.item import SourceItem
from .source.photo import SourceItemPhoto
from .source.util import BLOCK_SIZE
from .types import TypeInputFileLocation

logger = logging.getLogger("tgdrive.tgclient")


def item_to_inner_object(input_item) -> SourceItem:
    if isinstance(input_item, telethon.types.Photo):
        item = SourceItemPhoto(input_item)
    else:
        item = SourceItemDocument(input_item)

    return item


def get_downloadable_item(message: MessageDownloadable) -> SourceItem:
    if guards.MessageWithCompressedPhoto.guard(message):
        return item_to_inner_object(message.photo)

    if message.document is not None:
        return item_to_inner_object(message.document)

    raise ValueError(f"message {message} is not downloadable")


class TelegramFilesSource:
    """Downloads documents, photos and thumbnails"""

    def __init__(
        self,
        client: TgdriveTelegramClientIterDownloadProto,
        request_size: int = BLOCK_SIZE,
    ) -> None:
        self.client = client
        self.request_size = request_size

    def iter_content(self, message: MessageDownloadable) -> AsyncIterator[bytes]:
        """Chunks of the whole file attached to `message`"""
        item = get_downloadable_item(message)

        logger.debug(
            f"TelegramFilesSource.iter_content(Message(id={message.id}), item({item.id}, size={item.size}))"
        )

        return self._iter_download(
            item.input_location(),
            file_size=item.size,
        )

    async def _iter_download(
        self,
        input_location: TypeInputFileLocation,
        *,
        file_size: int,
    ) -> AsyncIterator[bytes]:
        async for chunk in self.client.iter_download(
            input_location,
            offset=0,
            request_size=self.request_size,
            file_size=file_size,
        ):
            logger.debug(f"chunk = {len(chunk)} bytes")
            yield chunk

    async def fetch_chunk(
        self,
        input_location: TypeInputFileLocation,
        *,
        limit: int,
    ) -> bytes:
        """A single request starting at offset 0"""
        result = bytes()

        async for chunk in self.client.iter_download(
            input_location,
            offset=0,
            request_size=limit,
            limit=1,
        ):
            result += chunk

        logger.debug(f"TelegramFilesSource.fetch_chunk() = {len(result)} bytes")

        return result
