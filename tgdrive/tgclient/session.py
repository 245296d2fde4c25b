import base64
import os
from abc import abstractmethod
from typing import Callable, Optional, Protocol

import aiofiles
from telethon.sessions import StringSession

from tgdrive import tglog

logger = tglog.getLogger("tgclient.session")


class SessionStore(Protocol):
    """Loads and stores the opaque session blob"""

    @abstractmethod
    async def load(self) -> Optional[bytes]:
        """`None` on the first run"""

    @abstractmethod
    async def store(self, data: bytes) -> None:
        ...


class MemorySessionStore(SessionStore):
    def __init__(self, data: Optional[bytes] = None) -> None:
        self.data = data

    async def load(self) -> Optional[bytes]:
        return self.data

    async def store(self, data: bytes) -> None:
        self.data = data


class Base64SessionStore(SessionStore):
    """Keeps the blob as a base64 string, `on_store` is called with the new string after every update"""

    def __init__(
        self,
        session: Optional[str] = None,
        on_store: Optional[Callable[[str], None]] = None,
    ) -> None:
        self.session = session
        self._on_store = on_store

    async def load(self) -> Optional[bytes]:
        if not self.session:
            return None

        return base64.b64decode(self.session)

    async def store(self, data: bytes) -> None:
        self.session = base64.b64encode(data).decode("ascii")

        if self._on_store is not None:
            self._on_store(self.session)


class FileSessionStore(SessionStore):
    def __init__(self, path: str) -> None:
        self.path = path

    async def load(self) -> Optional[bytes]:
        if not os.path.exists(self.path):
            logger.debug(f"{self.path} doesn't exist")
            return None

        async with aiofiles.open(self.path, "r") as f:
            content = (await f.read()).strip()

        if content == "":
            return None

        return base64.b64decode(content)

    async def store(self, data: bytes) -> None:
        async with aiofiles.open(self.path, "w") as f:
            await f.write(base64.b64encode(data).decode("ascii"))

        logger.debug(f"session stored to {self.path}")


async def load_string_session(store: SessionStore) -> StringSession:
    data = await store.load()

    if data is None:
        return StringSession()

    return StringSession(data.decode("utf-8"))


def dump_string_session(session: StringSession) -> bytes:
    return StringSession.save(session).encode("utf-8")
