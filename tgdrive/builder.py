from typing import Callable, Optional, Type

from tgdrive import config, tglog, tgclient
from tgdrive.drive import ExpiringCache, HmacSigner, TelegramDrive
from tgdrive.tgclient.filters import get_filter
from tgdrive.tgclient.session import SessionStore

logger = tglog.getLogger("builder")


class DriveBuilder:
    """Construct `TelegramDrive` and its client from a config"""

    logger = logger.getChild("DriveBuilder")

    TelegramClient: Type[tgclient.TgdriveTelegramClient] = tgclient.TgdriveTelegramClient
    TelegramDrive = TelegramDrive

    def __init__(self, on_session_string: Optional[Callable[[str], None]] = None):
        self.on_session_string = on_session_string

    def session_store(self, cfg: config.Config) -> Optional[SessionStore]:
        if cfg.client.session_file is not None:
            return tgclient.FileSessionStore(cfg.client.session_file)

        if cfg.client.session_string is not None:
            return tgclient.Base64SessionStore(
                cfg.client.session_string, on_store=self.on_session_string
            )

        return None

    async def create_client(self, cfg: config.Config, **kwargs):
        if (store := self.session_store(cfg)) is not None:
            self.logger.debug(f"using string session from {type(store).__name__}")
            return await self.TelegramClient.from_session_store(
                store, cfg.client.api_id, cfg.client.api_hash, **kwargs
            )

        if cfg.client.session is None:
            raise config.ConfigError(
                "Missing either 'session', 'session_string' or 'session_file'"
            )

        return self.TelegramClient(
            cfg.client.session,
            cfg.client.api_id,
            cfg.client.api_hash,
            **kwargs,
        )

    def create_cache(self, cfg: config.Config) -> ExpiringCache:
        return ExpiringCache(
            default_ttl=cfg.cache.default_ttl,
            sweep_interval=cfg.cache.sweep_interval,
        )

    def create_drive(self, cfg: config.Config, client) -> TelegramDrive:
        signer = (
            HmacSigner(cfg.server.sign_secret, cfg.server.sign_expire)
            if cfg.server.sign_secret is not None
            else None
        )

        return self.TelegramDrive(
            client,
            cache=self.create_cache(cfg),
            signer=signer,
            api_url=cfg.server.api_url,
            messages_filter=get_filter(cfg.listing.filter),
            period_start=cfg.listing.period_start,
            period_end=cfg.listing.period_end,
            thumbnail_ttl=cfg.cache.thumbnail_ttl,
        )
