from .mocked_client import MockedClientReader
from .mocked_message import MockedFile, MockedMessage
from .mocked_storage import MockedDialog, MockedTelegramStorage, StorageEntity, utc
