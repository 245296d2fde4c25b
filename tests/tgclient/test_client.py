import pytest
from telethon.errors import SessionPasswordNeededError
from telethon.sessions import StringSession

from tgdrive.tgclient import MemorySessionStore, TgdriveTelegramClient
from tgdrive.tgclient.auth import TelegramAuthen


class FakeTelegram(TelegramAuthen):
    """Records the sign in steps"""

    def __init__(self, authorized=False, password_needed=False) -> None:
        self.authorized = authorized
        self.password_needed = password_needed
        self.requests = []

    async def connect(self):
        self.requests.append("connect")

    async def is_user_authorized(self):
        return self.authorized

    async def send_code_request(self, phone):
        self.requests.append(("send_code_request", phone))

    async def sign_in(self, phone=None, code=None, password=None):
        if password is not None:
            self.requests.append(("password", password))
            return object()

        self.requests.append(("sign_in", phone, code))

        if self.password_needed:
            raise SessionPasswordNeededError(request=None)

        return object()


@pytest.mark.asyncio
async def test_auth_authorized():
    tg = FakeTelegram(authorized=True)

    assert await tg.auth("+100", "12345") is False
    assert tg.requests == ["connect"]


@pytest.mark.asyncio
async def test_auth_configured():
    tg = FakeTelegram()

    assert await tg.auth("+100", "12345") is True
    assert tg.requests == [
        "connect",
        ("send_code_request", "+100"),
        ("sign_in", "+100", "12345"),
    ]


@pytest.mark.asyncio
async def test_auth_prompts(monkeypatch):
    answers = iter(["+100", "54321"])

    monkeypatch.setattr("builtins.input", lambda prompt: next(answers))
    monkeypatch.setattr("getpass.getpass", lambda prompt: "password")

    tg = FakeTelegram(password_needed=True)

    assert await tg.auth() is True
    assert tg.requests == [
        "connect",
        ("send_code_request", "+100"),
        ("sign_in", "+100", "54321"),
        ("password", "password"),
    ]


@pytest.mark.asyncio
async def test_save_session():
    store = MemorySessionStore()
    client = await TgdriveTelegramClient.from_session_store(store, 1, "hash")

    assert isinstance(client.session, StringSession)

    await client.save_session()

    assert await store.load() == StringSession.save(client.session).encode()
