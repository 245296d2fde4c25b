import pytest

from tgdrive.drive import ExpiringCache, TelegramDrive

from .mocked import MockedClientReader, MockedTelegramStorage


class FakeClock:
    def __init__(self, now: float = 1000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float):
        self.now += seconds


@pytest.fixture()
def storage() -> MockedTelegramStorage:
    return MockedTelegramStorage()


@pytest.fixture()
def client(storage: MockedTelegramStorage) -> MockedClientReader:
    return MockedClientReader(storage)


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def cache(clock: FakeClock) -> ExpiringCache:
    return ExpiringCache(clock=clock)


@pytest.fixture()
def drive(client: MockedClientReader, cache: ExpiringCache) -> TelegramDrive:
    return TelegramDrive(client, cache=cache)
