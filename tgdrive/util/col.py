from typing import (
    Callable,
    Optional,
    Sequence,
    TypeVar,
)

T = TypeVar("T")


def find(pred: Callable[[T], bool], col: Sequence[T]) -> Optional[T]:
    return next(filter(pred, col), None)


def contains(value: T, col: Sequence[T]) -> bool:
    return find(lambda a: a == value, col) is not None


def max_by(key: Callable[[T], int], col: Sequence[T]) -> Optional[T]:
    """Last element with the greatest key, `None` for an empty sequence"""
    res: Optional[T] = None

    for el in col:
        if res is None or key(el) >= key(res):
            res = el

    return res
