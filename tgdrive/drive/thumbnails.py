from typing import AsyncIterator, Protocol

from tgdrive import tglog
from tgdrive.errors import ObjectNotFound
from tgdrive.tgclient.client_types import TgdriveTelegramClientGetMessagesProto
from tgdrive.tgclient.files_source import TelegramFilesSource
from tgdrive.tgclient.guards import MessageDownloadable
from tgdrive.tgclient.source.util import MB
from tgdrive.tgclient.types import TypeInputFileLocation

from . import media
from .cache import ExpiringCache
from .locate import locate_message
from .peers import PeerResolver
from .stream import ByteStream
from .types import Link, content_disposition

logger = tglog.getLogger("thumbnails")

THUMBNAIL_TTL = 60 * 60
THUMBNAIL_FETCH_LIMIT = MB
"""thumbnails always fit a single request"""


def thumbnail_cache_key(message_id: int) -> str:
    # channel message ids are only unique within their channel, two channels
    # with the same message id share the cached thumbnail for up to an hour
    return f"thumbnail:{message_id}"


def thumbnail_headers(message_id: int, size: int) -> dict[str, str]:
    return {
        "Content-Length": str(size),
        "Content-Type": "image/jpeg",
        "Content-Disposition": content_disposition(f"{message_id}.jpg"),
    }


class ThumbnailExtractor:
    logger = logger.getChild("ThumbnailExtractor")

    def __init__(
        self,
        client: TgdriveTelegramClientGetMessagesProto,
        resolver: PeerResolver,
        files_source: TelegramFilesSource,
        cache: ExpiringCache,
        *,
        ttl: float = THUMBNAIL_TTL,
    ) -> None:
        self._client = client
        self._resolver = resolver
        self._files_source = files_source
        self._cache = cache
        self._ttl = ttl

    async def fetch_thumbnail(self, peer_token: str, message_id: int) -> Link:
        cache_key = thumbnail_cache_key(message_id)
        cached, found = self._cache.get(cache_key)

        if found:
            self.logger.debug(f"{cache_key} served from cache")
            return Link(
                stream=ByteStream.from_bytes(cached),
                headers=thumbnail_headers(message_id, len(cached)),
            )

        peer = await self._resolver.resolve(peer_token)
        message = await locate_message(self._client, peer, message_id)
        thumb = media.best_thumbnail(message)

        if thumb is None or not MessageDownloadable.guard(message):
            raise ObjectNotFound(f"{peer_token}:{message_id} thumbnail")

        location = media.thumbnail_location(message, thumb)

        return Link(
            stream=ByteStream.from_chunks(
                self._fetch(cache_key, location, thumb.size),
                name=cache_key,
            ),
            headers=thumbnail_headers(message_id, thumb.size),
        )

    async def _fetch(
        self, cache_key: str, location: TypeInputFileLocation, size: int
    ) -> AsyncIterator[bytes]:
        data = await self._files_source.fetch_chunk(
            location, limit=THUMBNAIL_FETCH_LIMIT
        )
        data = data[:size]

        self._cache.add(cache_key, data, self._ttl)

        yield data
