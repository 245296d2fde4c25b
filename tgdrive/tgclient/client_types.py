from abc import abstractmethod
from datetime import datetime
from typing import Any, AsyncIterator, Optional, Protocol

from .message_types import DialogProto, MessageProto
from .types import (
    InputDocumentFileLocation,
    InputPhotoFileLocation,
    TotalListTyped,
    TypeInputPeer,
    TypeMessagesFilter,
)


class TgdriveTelegramClientGetMessagesProto(Protocol):
    @abstractmethod
    async def get_messages(
        self,
        *args,
        **kwargs,
    ) -> TotalListTyped[MessageProto]:
        pass


class TgdriveTelegramClientIterMessagesProto(Protocol):
    @abstractmethod
    def iter_messages(
        self,
        entity: Any,
        limit: Optional[int] = None,
        *,
        offset_date: Optional[datetime] = None,
        filter: Optional[type[TypeMessagesFilter]] = None,
    ) -> AsyncIterator[MessageProto]:
        pass


class TgdriveTelegramClientIterDialogsProto(Protocol):
    @abstractmethod
    def iter_dialogs(self) -> AsyncIterator[DialogProto]:
        pass


class TgdriveTelegramClientResolveProto(Protocol):
    @abstractmethod
    async def get_input_entity(self, peer: Any) -> TypeInputPeer:
        pass

    @abstractmethod
    async def get_entity(self, entity: Any) -> Any:
        pass


class IterDownloadProto(Protocol):
    @abstractmethod
    def __aiter__(self) -> "IterDownloadProto":
        pass

    @abstractmethod
    async def __anext__(self) -> bytes:
        pass


class TgdriveTelegramClientIterDownloadProto(Protocol):
    @abstractmethod
    def iter_download(
        self,
        input_location: InputPhotoFileLocation | InputDocumentFileLocation,
        *,
        offset: int = 0,
        request_size: int = ...,
        limit: Optional[int] = None,
        file_size: Optional[int] = None,
    ) -> IterDownloadProto:
        pass


class TgdriveTelegramClientReaderProto(
    TgdriveTelegramClientGetMessagesProto,
    TgdriveTelegramClientIterMessagesProto,
    TgdriveTelegramClientIterDialogsProto,
    TgdriveTelegramClientResolveProto,
    TgdriveTelegramClientIterDownloadProto,
    Protocol,
):
    """Interface of the client the drive reads through"""
