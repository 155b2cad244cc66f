from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from .types import *
from .errors import EmptySequenceError, ForceLimitExceeded
from .config import get_settings

# --- operation mixins ---
from .extensions.core import _CoreOperations
from .extensions.forcing import _ForcingOperations

# --- accessors ---
from .extensions.terminal import TerminalAccessor
from .extensions.stats import StatsAccessor

logger = logging.getLogger(__name__)

_FORCING = object()


class Thunk(Generic[T]):
    """
    a deferred stream computation evaluated at most once.
    the result is stored on first force and the closure is dropped so it can be collected.
    if the computation raises, nothing is stored and a later force tries again.
    """

    __slots__ = ('_compute', '_value')

    def __init__(self, compute: Optional[Callable[[], 'Stream[T]']]):
        self._compute = compute
        self._value = ABSENT

    @classmethod
    def ready(cls, value: 'Stream[T]') -> 'Thunk[T]':
        thunk = cls(None)
        thunk._value = value
        return thunk

    @property
    def is_forced(self) -> bool:
        return self._value is not ABSENT and self._value is not _FORCING

    def force(self) -> 'Stream[T]':
        value = self._value
        if value is _FORCING:
            raise RuntimeError("stream depends on itself: thunk re-entered while being forced")
        if value is not ABSENT:
            return value

        compute = self._compute
        self._value = _FORCING
        try:
            result = compute()
        except BaseException:
            self._value = ABSENT
            raise
        if not isinstance(result, Stream):
            self._value = ABSENT
            raise TypeError(f"a stream thunk must produce a Stream, got {type(result).__name__}")
        # first writer wins
        if self._value is _FORCING:
            self._value = result
            self._compute = None
        return self._value


# --- abstract base class ---

class IStream(ABC, Generic[T]):
    __slots__ = ()

    @abstractmethod
    def is_empty(self) -> bool:
        """true for the terminal node"""
        pass

    @abstractmethod
    def head(self) -> T:
        """first element"""
        pass

    @abstractmethod
    def tail(self) -> 'Stream[T]':
        """the rest of the stream; forces at most one thunk"""
        pass


# --- base stream implementation ---

class _BaseStream(IStream[T]):
    __slots__ = ()

    # static so a running iteration does not pin the first node in memory
    @staticmethod
    def _walk(node: 'Stream[T]') -> Iterator['Stream[T]']:
        """yield every non-empty node, forcing tails on the way. honors settings.force_limit"""
        limit = get_settings().force_limit
        visited = 0
        while not node.is_empty():
            visited += 1
            if limit is not None and visited > limit:
                logger.debug("force_limit of %d tripped", limit)
                raise ForceLimitExceeded(limit)
            yield node
            node = node.tail()

    @staticmethod
    def _values(node: 'Stream[T]') -> Iterator[T]:
        for cell in _BaseStream._walk(node):
            yield cell.head()

    def __iter__(self) -> Iterator[T]:
        return _BaseStream._values(self)

    def __bool__(self) -> bool:
        return not self.is_empty()

    def _realized_prefix(self) -> Tuple[List[T], bool]:
        """collect heads that are already computed, forcing nothing. returns (heads, has_pending_rest)"""
        heads = []
        node = self
        seen = set()
        while True:
            # cyclic streams such as repeat(x) revisit nodes
            if id(node) in seen:
                return heads, True
            seen.add(id(node))
            if isinstance(node, Suspended):
                if not node._thunk.is_forced:
                    return heads, True
                node = node._thunk.force()
                continue
            if node.is_empty():
                return heads, False
            heads.append(node.head())
            if not node._tail.is_forced:
                return heads, True
            node = node._tail.force()

    def __repr__(self) -> str:
        heads, pending = self._realized_prefix()
        parts = [repr(h) for h in heads]
        if pending:
            parts.append('?')
        return f"Stream({', '.join(parts)})"


# --- main stream class ---

class Stream(
    _BaseStream[T],
    _CoreOperations[T],
    _ForcingOperations[T]
):
    """a persistent, lazily evaluated, possibly infinite sequence."""
    __slots__ = ()

    # accessors are built on demand; every cell is a Stream, so per-instance accessors would cost a lot
    @property
    def to(self) -> TerminalAccessor[T]:
        return TerminalAccessor(self)

    @property
    def stats(self) -> StatsAccessor[T]:
        return StatsAccessor(self)


class Cell(Stream[T]):
    """a realized head plus a thunk for the rest"""
    __slots__ = ('_head', '_tail')

    def __init__(self, head: T, tail: Union['Stream[T]', Thunk[T], Callable[[], 'Stream[T]']]):
        self._head = head
        if isinstance(tail, Thunk):
            self._tail = tail
        elif isinstance(tail, Stream):
            self._tail = Thunk.ready(tail)
        else:
            self._tail = Thunk(tail)

    def is_empty(self) -> bool:
        return False

    def head(self) -> T:
        return self._head

    def tail(self) -> 'Stream[T]':
        return self._tail.force()


class Suspended(Stream[T]):
    """
    a stream whose shape (empty or not) is unknown until first asked.
    lazy transformations return one of these so that building a pipeline does no work.
    """
    __slots__ = ('_thunk',)

    def __init__(self, compute: Callable[[], 'Stream[T]']):
        self._thunk = Thunk(compute)

    def _resolve(self) -> 'Stream[T]':
        node = self._thunk.force()
        # flatten chains of suspensions in a loop rather than recursively
        seen = {id(self)}
        while isinstance(node, Suspended):
            if id(node) in seen:
                raise RuntimeError("stream depends on itself: suspension resolves to itself")
            seen.add(id(node))
            node = node._thunk.force()
        return node

    def is_empty(self) -> bool:
        return self._resolve().is_empty()

    def head(self) -> T:
        return self._resolve().head()

    def tail(self) -> 'Stream[T]':
        return self._resolve().tail()


class _Empty(Stream[Any]):
    """the terminal stream. a singleton: use EMPTY or factories.empty()"""
    __slots__ = ()
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def is_empty(self) -> bool:
        return True

    def head(self) -> Any:
        raise EmptySequenceError("head")

    def tail(self) -> 'Stream[Any]':
        raise EmptySequenceError("tail")


EMPTY = _Empty()
