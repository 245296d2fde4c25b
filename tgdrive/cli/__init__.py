from .auth import auth
from .get import add_get_arguments, get
from .list_dialogs import list_dialogs
from .logger import logger
from .ls import add_ls_arguments, ls
