from tgdrive import config

from .logger import logger
from .util.client import ClientEnv


def print_session_string(session: str):
    print(f"session_string: {session}")


async def auth(cfg: config.Config):
    env = ClientEnv(cfg)
    env.builder.on_session_string = print_session_string

    async with env as client:
        me = await client.get_me()
        logger.info(f"authorized as {me.id}")
