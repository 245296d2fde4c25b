import getpass
import logging
from typing import Optional

from telethon import client
from telethon.errors import SessionPasswordNeededError

logger = logging.getLogger("tgdrive.tgclient.auth")


class TelegramAuthen:
    async def auth(  # type: ignore
        self: client.TelegramClient,
        phone_number: Optional[str] = None,
        auth_code: Optional[str] = None,
    ) -> bool:
        """Connects and signs in when needed. Missing phone number or code are prompted for"""
        logger.debug("Connecting to Telegram servers...")

        try:
            await self.connect()
        except ConnectionError:
            logger.debug("Initial connection failed. Retrying...")
            await self.connect()

        logger.debug("Connected")

        if await self.is_user_authorized():
            return False

        user_phone = (
            phone_number
            if phone_number is not None
            else input("Enter your phone number: ")
        )

        logger.debug("First run. Sending code request...")

        await self.send_code_request(user_phone)

        self_user = None

        while self_user is None:
            code = auth_code if auth_code is not None else input(
                "Enter the code you just received: "
            )
            # a configured code is only good for one attempt
            auth_code = None

            try:
                self_user = await self.sign_in(user_phone, code=code)
            except SessionPasswordNeededError:
                pw = getpass.getpass(
                    "Two step verification is enabled. " "Please enter your password: "
                )

                self_user = await self.sign_in(password=pw)

        return True
