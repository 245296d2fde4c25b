from . import client_types, guards
from .client import TgdriveTelegramClient
from .files_source import TelegramFilesSource, get_downloadable_item
from .session import (
    Base64SessionStore,
    FileSessionStore,
    MemorySessionStore,
    SessionStore,
)
from .types import (
    InputDocumentFileLocation,
    InputPhotoFileLocation,
    TypeInputFileLocation,
)
