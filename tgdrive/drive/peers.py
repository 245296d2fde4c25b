from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable

from telethon import errors, types, utils

from tgdrive import tglog
from tgdrive.errors import PeerNotFound
from tgdrive.tgclient.client_types import TgdriveTelegramClientResolveProto
from tgdrive.tgclient.types import TypeInputPeer

logger = tglog.getLogger("peers")

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


class PeerKind(Enum):
    USER = "user"
    CHAT = "chat"
    CHANNEL = "channel"


@dataclass(frozen=True)
class Peer:
    id: int
    kind: PeerKind
    input_peer: TypeInputPeer


def parse_peer_id(token: str) -> int | None:
    try:
        peer_id = int(token, 10)
    except ValueError:
        return None

    if not INT64_MIN <= peer_id <= INT64_MAX:
        return None

    return peer_id


def peer_from_input(input_peer: TypeInputPeer) -> Peer:
    match input_peer:
        case types.InputPeerChannel():
            kind = PeerKind.CHANNEL
        case types.InputPeerChat():
            kind = PeerKind.CHAT
        case _:
            kind = PeerKind.USER

    return Peer(utils.get_peer_id(input_peer, add_mark=False), kind, input_peer)


class PeerResolver:
    """Resolves usernames and bare numeric ids.

    A bare id can belong to a channel, a user or a basic chat, there is no
    single lookup telling which one, so the id spaces are tried in this order.
    """

    logger = logger.getChild("PeerResolver")

    ID_SPACES: list[tuple[PeerKind, Callable[[int], Any]]] = [
        (PeerKind.CHANNEL, types.PeerChannel),
        (PeerKind.USER, types.PeerUser),
        (PeerKind.CHAT, types.PeerChat),
    ]

    def __init__(self, client: TgdriveTelegramClientResolveProto) -> None:
        self._client = client

    async def _lookup(self, kind: PeerKind, peer: Any) -> TypeInputPeer:
        if kind == PeerKind.CHAT:
            # get_input_entity turns any PeerChat into InputPeerChat without
            # asking the server, get_entity issues messages.GetChats
            entity = await self._client.get_entity(peer)
            return utils.get_input_peer(entity)

        return await self._client.get_input_entity(peer)

    async def resolve(self, token: str) -> Peer:
        peer_id = parse_peer_id(token)

        if peer_id is None:
            self.logger.debug(f"resolving username {token}")
            return peer_from_input(await self._client.get_input_entity(token))

        last_error: Exception | None = None

        for kind, peer_cls in self.ID_SPACES:
            try:
                input_peer = await self._lookup(kind, peer_cls(peer_id))
            except (ValueError, TypeError, KeyError, errors.RPCError) as e:
                self.logger.debug(f"{peer_id} is not a {kind.value}: {e}")
                last_error = e
                continue

            return Peer(peer_id, kind, input_peer)

        raise PeerNotFound(peer_id, last_error)
