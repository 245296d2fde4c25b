from typing import Any, Optional, Protocol

from telethon import types

from tgdrive import tglog
from tgdrive.errors import MalformedKey, NotImplementedOperation
from tgdrive.tgclient.client_types import (
    TgdriveTelegramClientIterDialogsProto,
    TgdriveTelegramClientIterDownloadProto,
    TgdriveTelegramClientResolveProto,
)
from tgdrive.tgclient.files_source import TelegramFilesSource
from tgdrive.tgclient.types import TypeMessagesFilter

from . import keys
from .cache import ExpiringCache
from .content import ContentStreamer
from .dialogs import DialogLister
from .peers import PeerResolver
from .periods import PeriodLister, PeriodListerClientProto
from .signing import Signer
from .thumbnails import THUMBNAIL_TTL, ThumbnailExtractor
from .types import Link, Listing

logger = tglog.getLogger("drive")

LINK_TYPE_THUMB = "thumb"


class DriveClientProto(
    PeriodListerClientProto,
    TgdriveTelegramClientIterDialogsProto,
    TgdriveTelegramClientResolveProto,
    TgdriveTelegramClientIterDownloadProto,
    Protocol,
):
    pass


class TelegramDrive:
    """Read only file system view of a telegram account.

    / -> chats -> months -> files sent during the month
    """

    logger = logger.getChild("TelegramDrive", suffix_as_tag=True)

    def __init__(
        self,
        client: DriveClientProto,
        *,
        cache: Optional[ExpiringCache] = None,
        signer: Optional[Signer] = None,
        api_url: str = "",
        messages_filter: Optional[type[TypeMessagesFilter]] = types.InputMessagesFilterDocument,
        period_start: Optional[str] = None,
        period_end: Optional[str] = None,
        thumbnail_ttl: float = THUMBNAIL_TTL,
    ) -> None:
        self.client = client
        self.cache = cache if cache is not None else ExpiringCache()
        self.resolver = PeerResolver(client)

        files_source = TelegramFilesSource(client)

        self.dialogs = DialogLister(client, self.cache)
        self.periods = PeriodLister(
            client,
            self.resolver,
            self.cache,
            signer=signer,
            api_url=api_url,
            messages_filter=messages_filter,
            period_start=period_start,
            period_end=period_end,
        )
        self.thumbnails = ThumbnailExtractor(
            client, self.resolver, files_source, self.cache, ttl=thumbnail_ttl
        )
        self.content = ContentStreamer(client, self.resolver, files_source)

    def __repr__(self) -> str:
        return f"TelegramDrive({self.client})"

    async def list(self, dir_id: str, req_path: str = "/") -> Listing:
        self.logger.debug(f"list({dir_id!r})")

        if keys.is_root(dir_id):
            return await self.dialogs.list_root()

        key = keys.decode(dir_id)

        if key.depth == 3:
            raise MalformedKey(dir_id, "not a folder")

        return await self.periods.list(key, req_path)

    async def link(self, file_id: str, link_type: Optional[str] = None) -> Link:
        self.logger.debug(f"link({file_id!r}, {link_type})")

        key = keys.decode(file_id)

        if key.message_id is None:
            raise NotImplementedOperation(f"link to folder {file_id}")

        if link_type == LINK_TYPE_THUMB:
            return await self.thumbnails.fetch_thumbnail(key.peer, key.message_id)

        return await self.content.open_content(key.peer, key.message_id)

    async def make_dir(self, parent_id: str, name: str) -> Any:
        raise NotImplementedOperation("make_dir")

    async def move(self, src_id: str, dst_dir_id: str) -> Any:
        raise NotImplementedOperation("move")

    async def rename(self, src_id: str, new_name: str) -> Any:
        raise NotImplementedOperation("rename")

    async def copy(self, src_id: str, dst_dir_id: str) -> Any:
        raise NotImplementedOperation("copy")

    async def remove(self, obj_id: str) -> Any:
        raise NotImplementedOperation("remove")

    async def put(self, dst_dir_id: str, stream: Any) -> Any:
        raise NotImplementedOperation("put")

    async def __aenter__(self):
        self.cache.start()
        return self

    async def __aexit__(self, type, value, traceback):
        await self.cache.stop()
