from dataclasses import dataclass
from typing import Mapping, Optional

import yaml

from tgdrive.drive import keys
from tgdrive.tgclient.filters import DEFAULT_FILTER, FILTERS

from .helpers import ConfigError, load_class_from_mapping, load_optional


def _check_period(name: str, value: Optional[str]):
    if value is None:
        return

    try:
        keys.parse_period(value)
    except ValueError:
        raise ConfigError(f"Invalid {name}: {value}. Expected YYYY-MM")


@dataclass
class Client:
    api_id: int
    api_hash: str
    session: Optional[str] = None
    session_string: Optional[str] = None
    session_file: Optional[str] = None
    phone_number: Optional[str] = None
    auth_code: Optional[str] = None

    @staticmethod
    def from_mapping(d: Mapping) -> "Client":
        return load_class_from_mapping(Client, d)


@dataclass
class Cache:
    default_ttl: int = 5 * 60
    sweep_interval: int = 10 * 60
    thumbnail_ttl: int = 60 * 60

    @staticmethod
    def from_mapping(d: Mapping) -> "Cache":
        return load_class_from_mapping(Cache, d)


@dataclass
class Listing:
    filter: Optional[str] = DEFAULT_FILTER
    period_start: Optional[str] = None
    period_end: Optional[str] = None

    @staticmethod
    def from_mapping(d: Mapping) -> "Listing":
        listing: Listing = load_class_from_mapping(Listing, d)

        if listing.filter is not None and listing.filter not in FILTERS:
            raise ConfigError(f"Invalid listing filter: {listing.filter}")

        _check_period("period_start", listing.period_start)
        _check_period("period_end", listing.period_end)

        if (listing.period_start is None) != (listing.period_end is None):
            raise ConfigError("period_start and period_end go together")

        return listing


@dataclass
class Server:
    api_url: str = ""
    sign_secret: Optional[str] = None
    sign_expire: int = 0

    @staticmethod
    def from_mapping(d: Mapping) -> "Server":
        return load_class_from_mapping(Server, d)


@dataclass
class Config:
    client: Client
    cache: Cache
    listing: Listing
    server: Server

    @staticmethod
    def from_mapping(d: Mapping) -> "Config":
        if not isinstance(d, Mapping):
            raise ConfigError(f"{d} is not dictionary")

        client_dict = d.get("client")

        if client_dict is None:
            raise ConfigError("Missing 'client'")

        return Config(
            client=Client.from_mapping(client_dict),
            cache=load_optional(Cache, d, "cache"),
            listing=load_optional(Listing, d, "listing"),
            server=load_optional(Server, d, "server"),
        )

    @staticmethod
    def from_yaml(s):
        return Config.from_mapping(yaml.safe_load(s))
