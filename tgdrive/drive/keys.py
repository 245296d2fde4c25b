"""
Composite keys identify every node of the drive:

    peer                    a chat folder
    peer:YYYY-MM            a month folder inside the chat
    peer:YYYY-MM:message    a file

`peer` is either a numeric peer id or a username.
"""
import re
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

from tgdrive.errors import MalformedKey

SEPARATOR = ":"
PERIOD_FORMAT = "%Y-%m"
MESSAGE_ID_RE = re.compile("[0-9]+")

ROOT_KEY = "root"
"""cache key of the root listing"""

ROOT_IDS = ("", "/", ROOT_KEY)


@dataclass(frozen=True)
class CompositeKey:
    peer: str
    period: Optional[str] = None
    message_id: Optional[int] = None

    @property
    def depth(self) -> int:
        if self.message_id is not None:
            return 3
        if self.period is not None:
            return 2
        return 1

    @property
    def period_start(self) -> datetime:
        if self.period is None:
            raise ValueError(f"{self} has no period")

        return parse_period(self.period)

    def __str__(self) -> str:
        return encode(self.peer, self.period, self.message_id)


def is_root(key: str) -> bool:
    return key in ROOT_IDS


def format_period(date: datetime) -> str:
    return date.strftime(PERIOD_FORMAT)


def parse_period(period: str) -> datetime:
    """First instant of the month in UTC"""
    return datetime.strptime(period, PERIOD_FORMAT).replace(tzinfo=timezone.utc)


def next_period(date: datetime) -> datetime:
    if date.month == 12:
        return date.replace(year=date.year + 1, month=1)

    return date.replace(month=date.month + 1)


def month_start(date: datetime) -> datetime:
    if date.tzinfo is None:
        date = date.replace(tzinfo=timezone.utc)

    return date.astimezone(timezone.utc).replace(
        day=1, hour=0, minute=0, second=0, microsecond=0
    )


def encode(
    peer_id: int | str,
    period: Optional[str] = None,
    message_id: Optional[int] = None,
) -> str:
    if message_id is not None and period is None:
        raise ValueError("message id requires a period")

    parts = [str(peer_id)]

    if period is not None:
        parts.append(period)

    if message_id is not None:
        parts.append(str(message_id))

    return SEPARATOR.join(parts)


def decode(key: str) -> CompositeKey:
    parts = key.split(SEPARATOR)

    if len(parts) not in (1, 2, 3):
        raise MalformedKey(key, f"expected 1 to 3 segments, got {len(parts)}")

    if any(p == "" for p in parts):
        raise MalformedKey(key, "empty segment")

    peer = parts[0]
    period = None
    message_id = None

    if len(parts) > 1:
        period = parts[1]

        try:
            parse_period(period)
        except ValueError:
            raise MalformedKey(key, f"invalid period {period!r}")

        # strptime accepts "2022-1"
        if format_period(parse_period(period)) != period:
            raise MalformedKey(key, f"invalid period {period!r}")

    if len(parts) > 2:
        # int() also takes whitespace, signs, underscores and non ascii digits
        if MESSAGE_ID_RE.fullmatch(parts[2]) is None:
            raise MalformedKey(key, f"invalid message id {parts[2]!r}")

        message_id = int(parts[2])

    return CompositeKey(peer, period, message_id)
