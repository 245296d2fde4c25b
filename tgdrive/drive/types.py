from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from typing_extensions import Self

from .stream import ByteStream


@dataclass(frozen=True)
class VirtualNode:
    id: str
    name: str
    is_folder: bool
    modified_at: datetime
    size: int = 0
    thumbnail_url: Optional[str] = None


Listing = tuple[VirtualNode, ...]


@dataclass
class Link:
    """Headers and the body of a content or a thumbnail response"""

    stream: ByteStream
    headers: dict[str, str] = field(default_factory=dict)

    async def read_all(self) -> bytes:
        return await self.stream.read_all()

    async def aclose(self):
        await self.stream.aclose()

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(self, type, value, traceback):
        await self.aclose()


def content_disposition(filename: str) -> str:
    return f'filename="{filename}"'
