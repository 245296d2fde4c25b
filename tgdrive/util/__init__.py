from typing import Any, Callable, Optional, Type, TypeGuard, TypeVar, overload

import pathvalidate

from .col import contains, find

T = TypeVar("T")
O = TypeVar("O")


@overload
def yes(value: Optional[T]) -> TypeGuard[T]:
    ...


@overload
def yes(value: Optional[Any], typ: Type[O]) -> TypeGuard[O]:
    ...


def yes(value: Optional[T], typ: Optional[Type[O]] = None) -> TypeGuard[O | T]:

    if typ is None:
        return value is not None

    if value is not None and isinstance(value, typ):
        return True
    elif value is None:
        return False
    else:
        raise ValueError(f"'{value}' is not '{typ}'")


def map_none(value: Optional[T], func: Callable[[T], O]) -> O | None:
    return func(value) if value is not None else None


def sanitize_string_for_path(name: str) -> str:
    name = pathvalidate.sanitize_filename(name, replacement_text="_")

    if len(name) > 0 and name[0] == "-":
        name = "_" + name[1:]

    return name
