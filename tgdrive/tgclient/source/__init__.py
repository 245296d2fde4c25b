from .document import SourceItemDocument
from .item import SourceItem, SourceItemId
from .photo import SourceItemPhoto
from .util import BLOCK_SIZE, KB, MB
