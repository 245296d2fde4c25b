import os
import re
from argparse import ArgumentParser
from typing import Optional

import aiofiles

from tgdrive.drive import LINK_TYPE_THUMB, Link, TelegramDrive
from tgdrive.util import sanitize_string_for_path

from .logger import logger

FILENAME_RE = re.compile(r'filename="(?P<name>.*)"')


def link_filename(link: Link, default: str) -> str:
    disposition = link.headers.get("Content-Disposition", "")

    if (m := FILENAME_RE.search(disposition)) is not None:
        return sanitize_string_for_path(m.group("name"))

    return sanitize_string_for_path(default)


async def save_link(link: Link, path: str) -> int:
    written = 0

    async with link:
        async with aiofiles.open(path, "wb") as f:
            async for chunk in link.stream:
                await f.write(chunk)
                written += len(chunk)

    return written


async def get(
    drive: TelegramDrive,
    file_id: str,
    *,
    output: Optional[str] = None,
    thumbnail=False,
):
    link = await drive.link(file_id, LINK_TYPE_THUMB if thumbnail else None)
    path = output

    if path is None or os.path.isdir(path):
        path = os.path.join(path or ".", link_filename(link, file_id))

    logger.info(f"saving {file_id} to {path}")

    written = await save_link(link, path)

    logger.info(f"{written} bytes written")


def add_get_arguments(command_get: ArgumentParser):
    command_get.add_argument("id", type=str)
    command_get.add_argument("--output", "-o", type=str, dest="output")
