from .client import ClientEnv, DriveEnv
from .read_env import get_config, parse_tgapp_str, read_os_env
