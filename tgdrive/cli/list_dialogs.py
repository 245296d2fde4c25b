from tgdrive.tgclient import TgdriveTelegramClient
from tgdrive.util.tg import get_display_name, get_entity_type_str, get_username


async def list_dialogs(
    client: TgdriveTelegramClient,
):
    dialogs = await client.get_dialogs()

    for d in sorted(dialogs, key=lambda d: d.date, reverse=True):
        name = get_display_name(d.entity)

        print(
            f"{get_entity_type_str(d.entity)}\t{d.entity.id}\t{get_username(d.entity)}\t{name}"
        )
