from tgdrive import tglog
from tgdrive.errors import ObjectNotFound
from tgdrive.tgclient.client_types import TgdriveTelegramClientGetMessagesProto
from tgdrive.tgclient.message_types import MessageProto

from .peers import Peer

logger = tglog.getLogger("locate")


async def locate_message(
    client: TgdriveTelegramClientGetMessagesProto,
    peer: Peer,
    message_id: int,
) -> MessageProto:
    """Fetches a single message by id.

    Searches backwards from `message_id + 1` taking the first result, which
    is the only point lookup the search surface offers. A deleted message
    makes the search land on an older one, that is reported as missing.
    """
    messages = await client.get_messages(
        peer.input_peer,
        limit=1,
        offset_id=message_id + 1,
    )

    if len(messages) == 0 or messages[0] is None or messages[0].id != message_id:
        logger.debug(f"message {message_id} not found in {peer.id}")
        raise ObjectNotFound(f"{peer.id}:{message_id}")

    return messages[0]
