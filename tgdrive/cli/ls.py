from argparse import ArgumentParser

from tgdrive.drive import TelegramDrive, VirtualNode


def format_node(node: VirtualNode) -> str:
    kind = "d" if node.is_folder else "-"
    modified = node.modified_at.strftime("%Y-%m-%d %H:%M")

    return f"{kind}\t{node.id}\t{node.size}\t{modified}\t{node.name}"


async def ls(drive: TelegramDrive, node_id: str, *, print_thumbnails=False):
    for node in await drive.list(node_id):
        print(format_node(node))

        if print_thumbnails and node.thumbnail_url is not None:
            print(f"\t{node.thumbnail_url}")


def add_ls_arguments(command_ls: ArgumentParser):
    command_ls.add_argument("id", type=str, nargs="?", default="")
    command_ls.add_argument(
        "--thumbnails",
        "-t",
        dest="print_thumbnails",
        action="store_true",
        default=False,
        help="Print thumbnail urls",
    )
