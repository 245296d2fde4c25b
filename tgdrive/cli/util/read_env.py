import argparse
import os
from typing import Optional, TypedDict

import yaml

from tgdrive.config import Config, ConfigError

_read_os_env = TypedDict(
    "_read_os_env",
    api_id=Optional[int],
    api_hash=Optional[str],
    session=Optional[str],
)


def parse_tgapp_str(TGAPP: str):
    """format: 111111:ac7e6350d04adeadbeedf1af778773d6f0"""
    try:
        api_id, api_hash = TGAPP.split(":")
        api_id = int(api_id)
    except ValueError:
        raise ConfigError(f"Incorrect value for TGAPP env variable: {TGAPP}")

    return api_id, api_hash


def read_os_env(TGAPP="TGAPP", TGSESSION="TGSESSION") -> _read_os_env:
    TGAPP = os.environ.get(TGAPP)
    TGSESSION = os.environ.get(TGSESSION)

    api_id = None
    api_hash = None

    if TGAPP is not None:
        api_id, api_hash = parse_tgapp_str(TGAPP)

    return _read_os_env(
        api_id=api_id,
        api_hash=api_hash,
        session=TGSESSION,
    )


def read_config_file(config_file: str) -> dict:
    if not os.path.exists(config_file):
        raise ConfigError(f"Missing config file: {config_file}")

    try:
        with open(config_file, "r") as f:
            cfg_dict = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Error loading config file:\n\n{e}")

    if cfg_dict is None:
        return {}

    if not isinstance(cfg_dict, dict):
        raise ConfigError(f"Config file {config_file} is not a mapping")

    return cfg_dict


def get_config(args: argparse.Namespace) -> Config:
    """Config file (when given) overridden by the environment and then by the command line"""
    cfg_dict = read_config_file(args.config) if args.config is not None else {}
    client_dict = dict(cfg_dict.get("client") or {})

    os_env = read_os_env()

    if os_env["api_id"] is not None:
        client_dict["api_id"] = os_env["api_id"]
        client_dict["api_hash"] = os_env["api_hash"]

    if os_env["session"] is not None:
        client_dict["session"] = os_env["session"]

    if args.tgapp is not None:
        client_dict["api_id"], client_dict["api_hash"] = parse_tgapp_str(args.tgapp)

    if args.session is not None:
        client_dict["session"] = args.session

    if "api_id" not in client_dict or "api_hash" not in client_dict:
        raise ConfigError("missing either api_id or api_hash")

    return Config.from_mapping({**cfg_dict, "client": client_dict})
