import asyncio

import pytest

from tgdrive.drive import ByteStream
from tgdrive.errors import StreamClosedError

from ..helpers.streams import chunks_from, failing_chunks


@pytest.mark.asyncio
async def test_from_bytes():
    stream = ByteStream.from_bytes(b"abc")

    assert await stream.read() == b"abc"
    assert await stream.read() == b""
    assert await stream.read() == b""


@pytest.mark.asyncio
async def test_from_chunks():
    stream = ByteStream.from_chunks(chunks_from(b"a", b"b", b"c"), name="abc")

    assert [c async for c in stream] == [b"a", b"b", b"c"]
    assert await stream.read() == b""


@pytest.mark.asyncio
async def test_backpressure():
    produced = []

    async def chunks():
        for c in [b"a", b"b", b"c", b"d"]:
            produced.append(c)
            yield c

    stream = ByteStream.from_chunks(chunks())

    await asyncio.sleep(0.01)

    # one chunk in the queue, one waiting to be put
    assert produced == [b"a", b"b"]

    assert await stream.read() == b"a"
    await asyncio.sleep(0.01)

    assert produced == [b"a", b"b", b"c"]
    assert await stream.read_all() == b"bcd"


@pytest.mark.asyncio
async def test_producer_error():
    stream = ByteStream.from_chunks(failing_chunks(ConnectionError("lost"), b"a"))

    assert await stream.read() == b"a"

    with pytest.raises(ConnectionError):
        await stream.read()

    with pytest.raises(ConnectionError):
        await stream.read()


@pytest.mark.asyncio
async def test_close():
    async with ByteStream.from_chunks(chunks_from(b"a", b"b", b"c")) as stream:
        assert await stream.read() == b"a"

    assert stream.closed
    assert stream.producer.cancelled()

    with pytest.raises(StreamClosedError):
        await stream.read()

    await stream.aclose()


@pytest.mark.asyncio
async def test_close_blocked_reader():
    stream = ByteStream.from_chunks(chunks_from(b"a", delay=10))

    reader = asyncio.create_task(stream.read())
    await asyncio.sleep(0.01)

    await stream.aclose()

    with pytest.raises(StreamClosedError):
        await reader


@pytest.mark.asyncio
async def test_owner_done():
    async def owner():
        return ByteStream.from_chunks(chunks_from(b"a", b"b", delay=0.05))

    stream = await asyncio.create_task(owner())

    with pytest.raises(StreamClosedError):
        await stream.read_all()

    assert stream.producer.cancelled()


@pytest.mark.asyncio
async def test_single_producer():
    stream = ByteStream.from_chunks(chunks_from(b"a"))

    with pytest.raises(RuntimeError):
        stream.start(chunks_from(b"b"))

    assert await stream.read_all() == b"a"
