import base64

import pytest
from telethon.sessions import StringSession

from tgdrive.tgclient import Base64SessionStore, FileSessionStore, MemorySessionStore
from tgdrive.tgclient.session import dump_string_session, load_string_session


@pytest.mark.asyncio
async def test_memory_store():
    store = MemorySessionStore()

    assert await store.load() is None

    await store.store(b"session")

    assert await store.load() == b"session"


@pytest.mark.asyncio
async def test_base64_store():
    stored = []
    store = Base64SessionStore(on_store=stored.append)

    assert await store.load() is None

    await store.store(b"session")

    assert stored == [base64.b64encode(b"session").decode()]
    assert await Base64SessionStore(stored[0]).load() == b"session"
    assert await Base64SessionStore("").load() is None


@pytest.mark.asyncio
async def test_file_store(tmp_path):
    path = str(tmp_path / "session.txt")
    store = FileSessionStore(path)

    assert await store.load() is None

    await store.store(b"session")

    assert await FileSessionStore(path).load() == b"session"

    with open(path) as f:
        assert f.read() == base64.b64encode(b"session").decode()


@pytest.mark.asyncio
async def test_string_session():
    store = MemorySessionStore()

    session = await load_string_session(store)

    assert isinstance(session, StringSession)
    assert session.auth_key is None

    await store.store(dump_string_session(session))
    restored = await load_string_session(store)

    assert isinstance(restored, StringSession)
