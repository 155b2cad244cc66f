from typing import (
    TypeVar, Generic, Callable, Iterator, Iterable, Any, Optional, Union,
    Dict, List, Tuple, NamedTuple
)

T = TypeVar('T')
U = TypeVar('U')
S = TypeVar('S')
A = TypeVar('A')
B = TypeVar('B')
R = TypeVar('R')

Predicate = Callable[[T], bool]
Selector = Callable[[T], U]
Step = Callable[[T], T]
Combiner = Callable[[T, T], T]
Accumulator = Callable[[U, T], U]
Unfolder = Callable[[S], Optional[Tuple[T, S]]]
Handler = Callable[[T], R]


class _Absent:
    """marker for a value that has not been computed yet"""
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "ABSENT"

    def __bool__(self) -> bool:
        return False


ABSENT = _Absent()


class CacheInfo(NamedTuple):
    """snapshot of a memoized function's cache"""
    hits: int
    misses: int
    size: int
