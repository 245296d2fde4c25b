import asyncio
import logging
import typing
from typing import Optional

import telethon
from telethon import TelegramClient
from telethon.sessions import Session, StringSession

from tgdrive.util import yes

from .auth import TelegramAuthen
from .client_types import TgdriveTelegramClientReaderProto
from .session import SessionStore, dump_string_session, load_string_session

logger = logging.getLogger("tgdrive.tgclient")


class TgdriveTelegramClient(
    TelegramClient,
    TelegramAuthen,
    TgdriveTelegramClientReaderProto,
):
    def __repr__(self):
        return f"TgdriveTelegramClient({getattr(self.session, 'filename', None)})"

    def __init__(
        self,
        session: str | Session,
        api_id: int,
        api_hash: str,
        *,
        session_store: Optional[SessionStore] = None,
        connection: "typing.Type[telethon.network.Connection]" = telethon.network.ConnectionTcpFull,
        use_ipv6: bool = False,
        proxy: Optional[typing.Union[tuple, dict]] = None,
        timeout: int = 10,
        request_retries: int = 5,
        connection_retries: int = 5,
        retry_delay: int = 1,
        auto_reconnect: bool = True,
        flood_sleep_threshold: int = 60,
        device_model: Optional[str] = "tgdrive",
        system_version: Optional[str] = None,
        app_version: Optional[str] = None,
        lang_code: str = "en",
        system_lang_code: str = "en",
        loop: Optional[asyncio.AbstractEventLoop] = None,
        receive_updates: bool = False,
    ):

        super().__init__(
            session,
            api_id,
            api_hash,
            connection=connection,
            use_ipv6=use_ipv6,
            proxy=proxy,
            timeout=timeout,
            request_retries=request_retries,
            connection_retries=connection_retries,
            retry_delay=retry_delay,
            auto_reconnect=auto_reconnect,
            flood_sleep_threshold=flood_sleep_threshold,
            device_model=device_model,
            system_version=system_version,
            app_version=app_version,
            lang_code=lang_code,
            system_lang_code=system_lang_code,
            loop=loop,
            receive_updates=receive_updates,
        )  # type: ignore

        self.session_store = session_store

    @classmethod
    async def from_session_store(
        cls, session_store: SessionStore, api_id: int, api_hash: str, **kwargs
    ) -> "TgdriveTelegramClient":
        session = await load_string_session(session_store)
        return cls(session, api_id, api_hash, session_store=session_store, **kwargs)

    async def save_session(self):
        if not yes(self.session_store):
            return

        if not isinstance(self.session, StringSession):
            # file sessions are persisted by telethon itself
            return

        await self.session_store.store(dump_string_session(self.session))
        logger.debug("session saved")

    async def auth(
        self,
        phone_number: Optional[str] = None,
        auth_code: Optional[str] = None,
    ) -> bool:
        signed_in = await TelegramAuthen.auth(self, phone_number, auth_code)

        if signed_in:
            await self.save_session()

        return signed_in
