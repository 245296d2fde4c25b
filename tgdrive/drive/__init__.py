from . import keys, media
from .cache import ExpiringCache
from .content import ContentStreamer
from .dialogs import DialogLister
from .driver import LINK_TYPE_THUMB, TelegramDrive
from .keys import CompositeKey
from .locate import locate_message
from .peers import Peer, PeerKind, PeerResolver
from .periods import PeriodLister
from .signing import HmacSigner, Signer, thumbnail_url
from .stream import ByteStream
from .thumbnails import ThumbnailExtractor
from .types import Link, Listing, VirtualNode
