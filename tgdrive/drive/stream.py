import asyncio
from typing import AsyncIterator, Optional

from typing_extensions import Self

from tgdrive import tglog
from tgdrive.errors import StreamClosedError

logger = tglog.getLogger("stream")


class _Eof:
    pass


class _Failure:
    def __init__(self, error: BaseException) -> None:
        self.error = error


EOF = _Eof()


class ByteStream:
    """Pipe between a producer task writing chunks and a reader.

    The queue holds at most `maxsize` chunks, the producer waits until the
    reader takes them. The producer is cancelled when the reader closes the
    stream or when the task that started it finishes first. After that any
    read raises `StreamClosedError`. Producer errors are raised by `read`.
    """

    logger = logger.getChild("ByteStream", suffix_as_tag=True)

    def __init__(self, maxsize: int = 1) -> None:
        self._queue: asyncio.Queue[bytes | _Eof | _Failure] = asyncio.Queue(maxsize)
        self._producer: Optional[asyncio.Task] = None
        self._owner: Optional[asyncio.Task] = None
        self._eof = False
        self._failure: Optional[BaseException] = None
        self._closed = False

    @staticmethod
    def from_bytes(data: bytes) -> "ByteStream":
        stream = ByteStream(maxsize=0)
        stream._queue.put_nowait(data)
        stream._queue.put_nowait(EOF)
        return stream

    @staticmethod
    def from_chunks(chunks: AsyncIterator[bytes], *, name: str = "") -> "ByteStream":
        stream = ByteStream()
        stream.start(chunks, name=name)
        return stream

    @property
    def producer(self) -> Optional[asyncio.Task]:
        return self._producer

    @property
    def closed(self) -> bool:
        return self._closed

    def start(self, chunks: AsyncIterator[bytes], *, name: str = ""):
        if self._producer is not None:
            raise RuntimeError("the stream already has a producer")

        self._producer = asyncio.create_task(
            self._produce(chunks), name=f"ByteStream.producer {name}"
        )
        self._producer.add_done_callback(self._on_producer_done)

        self._owner = asyncio.current_task()

        if self._owner is not None:
            self._owner.add_done_callback(self._on_owner_done)

    async def _produce(self, chunks: AsyncIterator[bytes]):
        try:
            async for chunk in chunks:
                self.logger.trace(f"chunk of {len(chunk)} bytes")
                await self._queue.put(chunk)
        except Exception as e:
            self.logger.debug(f"producer failed: {e!r}")
            await self._queue.put(_Failure(e))
            return

        self.logger.trace("producer finished")
        await self._queue.put(EOF)

    def _drop_pending(self, error: BaseException):
        while not self._queue.empty():
            self._queue.get_nowait()

        self._queue.put_nowait(_Failure(error))

    def _on_producer_done(self, task: asyncio.Task):
        if self._owner is not None:
            self._owner.remove_done_callback(self._on_owner_done)
            self._owner = None

        if task.cancelled():
            self.logger.debug(f"{task.get_name()} cancelled")
            self._drop_pending(StreamClosedError("transfer cancelled"))

    def _on_owner_done(self, owner: asyncio.Task):
        if self._producer is not None and not self._producer.done():
            self.logger.debug(f"{owner.get_name()} is done, cancelling the transfer")
            self._producer.cancel()

    async def read(self) -> bytes:
        """Next chunk, `b""` at the end of the stream"""
        if self._closed:
            raise StreamClosedError("stream is closed")

        if self._failure is not None:
            raise self._failure

        if self._eof:
            return b""

        item = await self._queue.get()

        if isinstance(item, _Eof):
            self._eof = True
            return b""

        if isinstance(item, _Failure):
            self._failure = item.error
            raise item.error

        return item

    async def read_all(self) -> bytes:
        result = bytes()

        async for chunk in self:
            result += chunk

        return result

    def __aiter__(self):
        return self

    async def __anext__(self) -> bytes:
        chunk = await self.read()

        if chunk == b"":
            raise StopAsyncIteration

        return chunk

    async def aclose(self):
        if self._closed:
            return

        self._closed = True

        if self._producer is not None and not self._producer.done():
            self._producer.cancel()
            await asyncio.wait([self._producer])

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(self, type, value, traceback):
        await self.aclose()
