from tgdrive import tglog
from tgdrive.errors import ObjectNotFound
from tgdrive.tgclient.client_types import TgdriveTelegramClientGetMessagesProto
from tgdrive.tgclient.files_source import TelegramFilesSource, get_downloadable_item
from tgdrive.tgclient.guards import MessageDownloadable

from .locate import locate_message
from .peers import PeerResolver
from .stream import ByteStream
from .types import Link, content_disposition

logger = tglog.getLogger("content")


class ContentStreamer:
    """Streams the file attached to a message without buffering it"""

    logger = logger.getChild("ContentStreamer")

    def __init__(
        self,
        client: TgdriveTelegramClientGetMessagesProto,
        resolver: PeerResolver,
        files_source: TelegramFilesSource,
    ) -> None:
        self._client = client
        self._resolver = resolver
        self._files_source = files_source

    async def open_content(self, peer_token: str, message_id: int) -> Link:
        peer = await self._resolver.resolve(peer_token)
        message = await locate_message(self._client, peer, message_id)

        if not MessageDownloadable.guard(message):
            raise ObjectNotFound(f"{peer_token}:{message_id} file")

        name = MessageDownloadable.filename(message)
        headers = {
            "Content-Type": MessageDownloadable.mime_type(message),
            "Content-Disposition": content_disposition(name),
        }

        if (size := get_downloadable_item(message).size) > 0:
            headers["Content-Length"] = str(size)

        self.logger.debug(f"streaming {name} from {peer.id}:{message_id}")

        return Link(
            stream=ByteStream.from_chunks(
                self._files_source.iter_content(message),
                name=f"{peer.id}:{message_id}",
            ),
            headers=headers,
        )
