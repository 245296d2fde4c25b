from datetime import datetime
from typing import Optional, Protocol

from telethon import types

from tgdrive import tglog
from tgdrive.tgclient.client_types import (
    TgdriveTelegramClientGetMessagesProto,
    TgdriveTelegramClientIterMessagesProto,
)
from tgdrive.tgclient.guards import MessageDownloadable
from tgdrive.tgclient.message_types import MessageProto
from tgdrive.tgclient.types import TypeMessagesFilter

from . import keys, media
from .cache import ExpiringCache
from .keys import CompositeKey
from .peers import Peer, PeerResolver
from .signing import Signer, thumbnail_url
from .types import Listing, VirtualNode

logger = tglog.getLogger("periods")


class PeriodListerClientProto(
    TgdriveTelegramClientGetMessagesProto,
    TgdriveTelegramClientIterMessagesProto,
    Protocol,
):
    pass


def months_between(first: datetime, last: datetime) -> list[datetime]:
    """Starts of the months from `first` to `last` inclusive"""
    result = []
    current = keys.month_start(first)
    last = keys.month_start(last)

    while current <= last:
        result.append(current)
        current = keys.next_period(current)

    return result


class PeriodLister:
    """Month folders of a chat and the files sent during a month"""

    logger = logger.getChild("PeriodLister")

    def __init__(
        self,
        client: PeriodListerClientProto,
        resolver: PeerResolver,
        cache: ExpiringCache,
        *,
        signer: Optional[Signer] = None,
        api_url: str = "",
        messages_filter: Optional[type[TypeMessagesFilter]] = types.InputMessagesFilterDocument,
        period_start: Optional[str] = None,
        period_end: Optional[str] = None,
    ) -> None:
        self._client = client
        self._resolver = resolver
        self._cache = cache
        self._signer = signer
        self._api_url = api_url
        self._filter = messages_filter
        self._fixed_window = (
            (keys.parse_period(period_start), keys.parse_period(period_end))
            if period_start is not None and period_end is not None
            else None
        )

    async def list(self, key: CompositeKey, req_path: str = "/") -> Listing:
        cached, found = self._cache.get(str(key))

        if found:
            return cached

        peer = await self._resolver.resolve(key.peer)

        if key.depth == 1:
            listing = await self._list_periods(key, peer)
        elif key.depth == 2:
            listing = await self._list_files(key, peer, req_path)
        else:
            raise ValueError(f"{key} is not a folder")

        self._cache.set_default(str(key), listing)

        return listing

    async def _message_span(self, peer: Peer) -> Optional[tuple[datetime, datetime]]:
        if self._fixed_window is not None:
            return self._fixed_window

        oldest = await self._client.get_messages(
            peer.input_peer, limit=1, reverse=True, filter=self._filter
        )
        newest = await self._client.get_messages(
            peer.input_peer, limit=1, filter=self._filter
        )

        if len(oldest) == 0 or len(newest) == 0:
            return None

        return oldest[0].date, newest[0].date

    async def _list_periods(self, key: CompositeKey, peer: Peer) -> Listing:
        span = await self._message_span(peer)

        if span is None:
            self.logger.debug(f"{peer.id} has no messages")
            return ()

        return tuple(
            VirtualNode(
                id=keys.encode(key.peer, keys.format_period(month)),
                name=keys.format_period(month),
                is_folder=True,
                modified_at=month,
            )
            for month in months_between(*span)
        )

    async def _list_files(
        self, key: CompositeKey, peer: Peer, req_path: str
    ) -> Listing:
        start = key.period_start
        end = keys.next_period(start)

        nodes: list[VirtualNode] = []

        # newest first, the client pages through the history 100 at a time
        async for message in self._client.iter_messages(
            peer.input_peer,
            offset_date=end,
            filter=self._filter,
        ):
            if message.date < start:
                break

            if message.date >= end or not MessageDownloadable.guard(message):
                continue

            nodes.append(self._message_to_node(key, message, req_path))

        self.logger.debug(f"{key}: {len(nodes)} files")

        return tuple(nodes)

    def _message_to_node(
        self, key: CompositeKey, message: MessageProto, req_path: str
    ) -> VirtualNode:
        name = MessageDownloadable.filename(message)  # type: ignore
        thumb = None

        if self._signer is not None and media.best_thumbnail(message) is not None:
            thumb = thumbnail_url(self._api_url, req_path, name, self._signer)

        return VirtualNode(
            id=keys.encode(key.peer, key.period, message.id),
            name=name,
            is_folder=False,
            modified_at=message.date,
            size=media.file_size(message),
            thumbnail_url=thumb,
        )
