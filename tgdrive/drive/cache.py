import asyncio
import threading
import time
from dataclasses import dataclass
from typing import Any, Callable, Generic, Optional, TypeVar

from typing_extensions import Self

from tgdrive import tglog

logger = tglog.getLogger("cache")

T = TypeVar("T")

DEFAULT_TTL = 5 * 60
SWEEP_INTERVAL = 10 * 60


@dataclass(frozen=True)
class CacheEntry(Generic[T]):
    value: T
    expires_at: float


class ExpiringCache:
    """Key-value store with per entry expiration.

    Expired entries are invisible to readers right away and are removed from
    memory by `sweep`, which the background task started by `start` calls
    every `sweep_interval` seconds. Entries are always replaced as a whole.
    """

    logger = logger.getChild("ExpiringCache")

    def __init__(
        self,
        default_ttl: float = DEFAULT_TTL,
        sweep_interval: float = SWEEP_INTERVAL,
        *,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.default_ttl = default_ttl
        self.sweep_interval = sweep_interval

        self._clock = clock
        self._entries: dict[str, CacheEntry] = {}
        self._lock = threading.Lock()
        self._sweeper: Optional[asyncio.Task] = None

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def _get_alive(self, key: str) -> Optional[CacheEntry]:
        entry = self._entries.get(key)

        if entry is None or entry.expires_at <= self._clock():
            return None

        return entry

    def get(self, key: str) -> tuple[Any, bool]:
        with self._lock:
            entry = self._get_alive(key)

        if entry is None:
            return None, False

        return entry.value, True

    def set(self, key: str, value: Any, ttl: float):
        with self._lock:
            self._entries[key] = CacheEntry(value, self._clock() + ttl)

    def set_default(self, key: str, value: Any):
        self.set(key, value, self.default_ttl)

    def add(self, key: str, value: Any, ttl: float) -> bool:
        """Stores `value` only if `key` is missing or expired"""
        with self._lock:
            if self._get_alive(key) is not None:
                return False

            self._entries[key] = CacheEntry(value, self._clock() + ttl)
            return True

    def delete(self, key: str):
        with self._lock:
            self._entries.pop(key, None)

    def sweep(self) -> int:
        now = self._clock()

        with self._lock:
            expired = [k for k, e in self._entries.items() if e.expires_at <= now]

            for k in expired:
                del self._entries[k]

        if len(expired) > 0:
            self.logger.debug(f"swept {len(expired)} expired entries")

        return len(expired)

    async def _sweep_forever(self):
        while True:
            await asyncio.sleep(self.sweep_interval)
            self.sweep()

    def start(self):
        if self._sweeper is not None:
            return

        self._sweeper = asyncio.get_running_loop().create_task(
            self._sweep_forever(), name="ExpiringCache.sweeper"
        )

    async def stop(self):
        if self._sweeper is None:
            return

        self._sweeper.cancel()

        try:
            await self._sweeper
        except asyncio.CancelledError:
            pass

        self._sweeper = None

    async def __aenter__(self) -> Self:
        self.start()
        return self

    async def __aexit__(self, type, value, traceback):
        await self.stop()
