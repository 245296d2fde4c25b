from .helpers import ConfigError, load_class_from_mapping
from .types import Cache, Client, Config, Listing, Server
