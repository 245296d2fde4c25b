from tgdrive import config
from tgdrive.builder import DriveBuilder


class ClientEnv:
    """Authorizes client on enter and disconnects on exit"""

    Builder = DriveBuilder

    def __init__(self, cfg: config.Config):
        self.cfg = cfg
        self.builder = self.Builder()
        self.client = None

    async def __aenter__(self):
        self.client = await self.builder.create_client(self.cfg)
        await self.client.auth(
            phone_number=self.cfg.client.phone_number,
            auth_code=self.cfg.client.auth_code,
        )
        return self.client

    async def __aexit__(self, type, value, traceback):
        await self._cleanup()

    async def _cleanup(self):
        if self.client is None:
            return

        if cor := self.client.disconnect():
            await cor


class DriveEnv(ClientEnv):
    """`ClientEnv` yielding a `TelegramDrive` with the cache sweeper running"""

    async def __aenter__(self):
        client = await super().__aenter__()
        self.drive = self.builder.create_drive(self.cfg, client)
        return await self.drive.__aenter__()

    async def __aexit__(self, type, value, traceback):
        await self.drive.__aexit__(type, value, traceback)
        await super().__aexit__(type, value, traceback)
