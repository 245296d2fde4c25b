import argparse
import logging

from tgdrive import cli
from tgdrive.cli.util import ClientEnv, DriveEnv, get_config
from tgdrive.errors import TgdriveError
from tgdrive.main.util import run_main
from tgdrive.tglog import init_logging

"""
export TGAPP=111111:ac7e6350d04adeadbeedf1af778773d6f0 TGSESSION=tgdrive

tgdrive auth
tgdrive list dialogs
tgdrive ls [id]
tgdrive get <id> [-o path]
tgdrive thumb <id> [-o path]
"""


def get_parser():
    parser = argparse.ArgumentParser()

    parser.add_argument("--session", type=str, required=False)
    parser.add_argument("--tgapp", type=str, required=False)
    parser.add_argument("--config", type=str, required=False)
    parser.add_argument("--debug", default=False, action="store_true")

    commands_subparsers = parser.add_subparsers(dest="command")

    command_auth = commands_subparsers.add_parser("auth")
    command_ls = commands_subparsers.add_parser("ls")
    command_get = commands_subparsers.add_parser("get")
    command_thumb = commands_subparsers.add_parser("thumb")

    command_list = commands_subparsers.add_parser("list")
    command_list_subparsers = command_list.add_subparsers(dest="list_subcommand")
    command_list_subparsers.add_parser("dialogs")

    cli.add_ls_arguments(command_ls)
    cli.add_get_arguments(command_get)
    cli.add_get_arguments(command_thumb)

    return parser


async def main():

    parser = get_parser()
    args = parser.parse_args()

    init_logging(debug_level=logging.DEBUG if args.debug else logging.INFO)

    if args.command is None:
        parser.print_help()
        return

    cfg = get_config(args)

    if args.command == "auth":
        await cli.auth(cfg)

    elif args.command == "list" and args.list_subcommand == "dialogs":
        async with ClientEnv(cfg) as client:
            await cli.list_dialogs(client)

    elif args.command == "ls":
        async with DriveEnv(cfg) as drive:
            await cli.ls(drive, args.id, print_thumbnails=args.print_thumbnails)

    elif args.command in ("get", "thumb"):
        async with DriveEnv(cfg) as drive:
            await cli.get(
                drive,
                args.id,
                output=args.output,
                thumbnail=args.command == "thumb",
            )


if __name__ == "__main__":
    try:
        run_main(main)
    except TgdriveError as e:
        print(f"Error happened: {e}")
