import typing
from collections.abc import Callable, Mapping
from dataclasses import MISSING, fields
from typing import Optional, Type, TypeVar, Union

from tgdrive import tglog
from tgdrive.errors import TgdriveError
from tgdrive.util import col

logger = tglog.getLogger("config")

T = TypeVar("T")


def assert_that(pred, e):
    if not pred:
        raise e


def _typecheck_union(
    value,
    typ,
):
    type_args = typing.get_args(typ)

    if type(value) is list:

        for arg in type_args:
            _type_origin = typing.get_origin(arg)

            if _type_origin is list:
                (_typ,) = typing.get_args(arg)
                for v in value:
                    if type(v) is not _typ:
                        return False

                return True

        return False

    return col.contains(type(value), type_args)


def type_check(value, typ: Type[T], e) -> T:
    type_origin = typing.get_origin(typ)

    if type_origin is Union:
        typechekd = _typecheck_union(value, typ)
    else:
        typechekd = typ is type(value)

    if not typechekd:
        raise e

    return value


class ConfigError(TgdriveError):
    pass


Loader = Callable[[Mapping], T]


def load_class_from_mapping(
    cls,
    d: Mapping,
    *,
    loaders: Optional[dict[str, Loader]] = None,
):
    logger.debug(f"load_class_from_mapping({cls.__name__}, {d})")

    loaders = loaders if loaders is not None else {}

    assert_that(
        isinstance(d, Mapping),
        ConfigError(f"{d} is not dictionary"),
    )

    input_d = {}

    for field in fields(cls):
        if (loader := loaders.get(field.name)) is not None:
            input_d[field.name] = loader(d)
            continue

        if field.name not in d and field.default is MISSING:
            raise ConfigError(f"Missing '{field.name}' for {cls.__name__}")

        value = d.get(field.name, field.default)

        type_check(
            value,
            field.type,
            ConfigError(
                f"Mismatching type for {field.name}. Expected: {field.type} received {type(value)}"
            ),
        )

        input_d[field.name] = value

    try:
        return cls(**input_d)
    except TypeError as e:
        raise ConfigError(f"Error loading {cls}: {e}")


def load_optional(cls, d: Mapping, key: str):
    """Section `key` of `d` loaded with `cls.from_mapping`, defaults when it's missing"""
    value = d.get(key)

    if value is None:
        return cls()

    return cls.from_mapping(value)
