from urllib.parse import unquote

import pytest

from tgdrive.drive import (
    ExpiringCache,
    HmacSigner,
    TelegramDrive,
    VirtualNode,
    keys,
)
from tgdrive.drive.periods import months_between
from tgdrive.errors import MalformedKey, PeerNotFound

from ..helpers.fixtures import FakeClock, cache, client, clock, drive, storage
from ..helpers.mocked import MockedClientReader, MockedTelegramStorage, utc


def test_months_between():
    assert [keys.format_period(m) for m in months_between(utc(2022, 11, 20), utc(2023, 2, 3))] == [
        "2022-11",
        "2022-12",
        "2023-01",
        "2023-02",
    ]
    assert months_between(utc(2022, 11, 20), utc(2022, 11, 21)) == [utc(2022, 11)]


@pytest.mark.asyncio
async def test_list_files(storage: MockedTelegramStorage, drive: TelegramDrive):
    news = storage.channel(202, "News")
    news.document("october.pdf", b"1" * 10, utc(2022, 10, 31, 23))
    msg = news.document("report.pdf", b"2" * 2048, utc(2022, 11, 15))
    news.document("december.pdf", b"3" * 10, utc(2022, 12, 1))

    listing = await drive.list("202:2022-11")

    assert listing == (
        VirtualNode(
            id=f"202:2022-11:{msg.id}",
            name="report.pdf",
            is_folder=False,
            modified_at=utc(2022, 11, 15),
            size=2048,
        ),
    )


@pytest.mark.asyncio
async def test_list_files_newest_first(
    storage: MockedTelegramStorage, client: MockedClientReader, drive: TelegramDrive
):
    news = storage.channel(202, "News")

    for day in range(1, 11):
        news.document(f"old{day}.txt", b"old", utc(2022, 9, day))

    news.document("a.txt", b"a", utc(2022, 11, 1))
    news.text("not a file", utc(2022, 11, 2))
    unnamed = news.document(None, b"bb", utc(2022, 11, 3))
    news.photo(utc(2022, 11, 4), {"s": b"s", "m": b"mm", "x": b"xxx"})

    listing = await drive.list("202:2022-11")

    # photos don't pass the default documents filter
    assert [n.name for n in listing] == [f"{unnamed.id}_document", "a.txt"]
    assert listing[0].size == 2

    # the iteration stops at the first message older than the month
    assert client.iterated_messages == 3


@pytest.mark.asyncio
async def test_list_files_without_filter(
    storage: MockedTelegramStorage, client: MockedClientReader, cache: ExpiringCache
):
    drive = TelegramDrive(client, cache=cache, messages_filter=None)

    news = storage.channel(202, "News")
    news.text("not a file", utc(2022, 11, 2))
    photo = news.photo(utc(2022, 11, 4), {"s": b"s", "m": b"mm", "x": b"xxx"})

    listing = await drive.list("202:2022-11")

    assert len(listing) == 1
    assert listing[0].name == f"{photo.id}_photo.jpeg"
    assert listing[0].size == 3


@pytest.mark.asyncio
async def test_list_empty_month(storage: MockedTelegramStorage, drive: TelegramDrive):
    storage.channel(202, "News").document("a.pdf", b"a", utc(2022, 10, 1))

    assert await drive.list("202:2022-11") == ()


@pytest.mark.asyncio
async def test_list_periods(
    storage: MockedTelegramStorage, client: MockedClientReader, drive: TelegramDrive
):
    news = storage.channel(202, "News")
    news.text("before any file", utc(2022, 1, 1))
    news.document("a.pdf", b"a", utc(2022, 10, 30))
    news.document("b.pdf", b"b", utc(2023, 1, 2))
    news.text("after the last file", utc(2023, 5, 1))

    listing = await drive.list("202")

    assert listing == tuple(
        VirtualNode(
            id=f"202:{period}",
            name=period,
            is_folder=True,
            modified_at=keys.parse_period(period),
        )
        for period in ["2022-10", "2022-11", "2022-12", "2023-01"]
    )

    assert client.calls["get_messages"] == 2


@pytest.mark.asyncio
async def test_list_periods_no_messages(
    storage: MockedTelegramStorage, drive: TelegramDrive
):
    storage.channel(202, "News").text("no files here", utc(2022, 1, 1))

    assert await drive.list("202") == ()


@pytest.mark.asyncio
async def test_list_periods_fixed_window(
    storage: MockedTelegramStorage, client: MockedClientReader, cache: ExpiringCache
):
    drive = TelegramDrive(
        client, cache=cache, period_start="2021-11", period_end="2022-02"
    )

    storage.channel(202, "News")

    listing = await drive.list("202")

    assert [n.name for n in listing] == ["2021-11", "2021-12", "2022-01", "2022-02"]
    assert client.calls["get_messages"] == 0


@pytest.mark.asyncio
async def test_list_cached(
    storage: MockedTelegramStorage,
    client: MockedClientReader,
    cache: ExpiringCache,
    clock: FakeClock,
    drive: TelegramDrive,
):
    news = storage.channel(202, "News")
    news.document("a.pdf", b"a", utc(2022, 11, 1))

    listing = await drive.list("202:2022-11")
    news.document("b.pdf", b"b", utc(2022, 11, 2))

    assert await drive.list("202:2022-11") is listing
    assert client.calls["iter_messages"] == 1

    clock.advance(cache.default_ttl)

    assert len(await drive.list("202:2022-11")) == 2
    assert client.calls["iter_messages"] == 2


@pytest.mark.asyncio
async def test_list_username(storage: MockedTelegramStorage, drive: TelegramDrive):
    news = storage.channel(202, "News", username="news")
    msg = news.document("a.pdf", b"a", utc(2022, 11, 1))

    listing = await drive.list("news:2022-11")

    assert listing[0].id == f"news:2022-11:{msg.id}"


@pytest.mark.asyncio
async def test_list_errors(storage: MockedTelegramStorage, drive: TelegramDrive):
    storage.channel(202, "News")

    with pytest.raises(MalformedKey):
        await drive.list("202:2022-11:1")

    with pytest.raises(MalformedKey):
        await drive.list("202:22-11")

    with pytest.raises(PeerNotFound):
        await drive.list("303:2022-11")


@pytest.mark.asyncio
async def test_thumbnail_urls(
    storage: MockedTelegramStorage, client: MockedClientReader, cache: ExpiringCache
):
    signer = HmacSigner("secret")
    drive = TelegramDrive(
        client, cache=cache, signer=signer, api_url="http://localhost:5244/"
    )

    news = storage.channel(202, "News")
    news.document("with thumb.pdf", b"a", utc(2022, 11, 1), thumbs={"m": b"jpeg"})
    news.document("no_thumb.pdf", b"b", utc(2022, 11, 2))

    no_thumb, with_thumb = await drive.list("202:2022-11", "/telegram/News/2022-11")

    assert no_thumb.thumbnail_url is None

    url, sign = with_thumb.thumbnail_url.split("&sign=")

    assert url == (
        "http://localhost:5244/p/telegram/News/2022-11/with%20thumb.pdf?type=thumb"
    )
    assert signer.verify("/telegram/News/2022-11/with thumb.pdf", unquote(sign))
