from datetime import datetime, timezone

from tgdrive import tglog
from tgdrive.tgclient.client_types import TgdriveTelegramClientIterDialogsProto
from tgdrive.tgclient.message_types import DialogProto
from tgdrive.util.tg import get_display_name, get_entity_type_str

from . import keys
from .cache import ExpiringCache
from .types import Listing, VirtualNode

logger = tglog.getLogger("dialogs")

EPOCH = datetime.fromtimestamp(0, tz=timezone.utc)


def dialog_to_node(dialog: DialogProto) -> VirtualNode:
    entity = dialog.entity
    name = f"{get_display_name(entity)} {get_entity_type_str(entity)}"

    return VirtualNode(
        id=keys.encode(entity.id),
        name=name,
        is_folder=True,
        modified_at=dialog.date if dialog.date is not None else EPOCH,
    )


class DialogLister:
    """Root folder: a folder per dialog"""

    logger = logger.getChild("DialogLister")

    def __init__(
        self,
        client: TgdriveTelegramClientIterDialogsProto,
        cache: ExpiringCache,
    ) -> None:
        self._client = client
        self._cache = cache

    async def list_root(self) -> Listing:
        cached, found = self._cache.get(keys.ROOT_KEY)

        if found:
            return cached

        nodes: list[VirtualNode] = []

        # the client pages through the dialogs 100 at a time
        async for dialog in self._client.iter_dialogs():
            nodes.append(dialog_to_node(dialog))

        listing = tuple(nodes)

        self.logger.debug(f"fetched {len(listing)} dialogs")
        self._cache.set_default(keys.ROOT_KEY, listing)

        return listing
