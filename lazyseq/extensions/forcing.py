from __future__ import annotations
import typing
from functools import reduce as fold_left
from ..types import *
from ..errors import EmptySequenceError, IndexOutOfRangeError

if typing.TYPE_CHECKING:
    from ..stream import Stream


class _ForcingOperations(Generic[T]):
    """
    terminal operations. each one drives evaluation of the stream and blocks until done.
    on an infinite stream, anything that needs the whole stream (reduce, sum, count, fold,
    a failing exists) never returns: bound it with take/take_while first, or set force_limit.
    """
    __slots__ = ()

    def get(self: 'Stream[T]', index: int) -> T:
        """element at index, forcing elements 0..index"""
        if index < 0:
            raise IndexOutOfRangeError(index)
        position = -1
        for position, node in enumerate(self._walk(self)):
            if position == index:
                return node.head()
        raise IndexOutOfRangeError(index, length=position + 1)

    def reduce(self: 'Stream[T]', combiner: Combiner[T]) -> T:
        """left fold without a seed"""
        values = iter(self)
        try:
            first = next(values)
        except StopIteration:
            raise EmptySequenceError("reduce") from None
        return fold_left(combiner, values, first)

    def fold(self: 'Stream[T]', seed: U, accumulator: Accumulator[U, T]) -> U:
        """left fold starting from seed; an empty stream gives back the seed"""
        return fold_left(accumulator, self, seed)

    def exists(self: 'Stream[T]', predicate: Predicate[T]) -> bool:
        """short-circuits on the first match"""
        return any(predicate(x) for x in self)

    def for_all(self: 'Stream[T]', predicate: Predicate[T]) -> bool:
        """short-circuits on the first element failing predicate"""
        return all(predicate(x) for x in self)

    def sum(self: 'Stream[T]') -> Any:
        """accumulate with +; 0 for an empty stream"""
        total = 0
        for x in self:
            total = total + x
        return total

    def count(self: 'Stream[T]') -> int:
        return fold_left(lambda n, _: n + 1, self, 0)

    def first(self: 'Stream[T]', predicate: Optional[Predicate[T]] = None) -> T:
        """first element, or first element satisfying predicate"""
        if predicate is None:
            return self.head()
        for x in self:
            if predicate(x): return x
        raise EmptySequenceError("first", "no element satisfies the condition")

    def first_or_default(self: 'Stream[T]', predicate: Optional[Predicate[T]] = None,
                         default: Optional[T] = None) -> Optional[T]:
        try: return self.first(predicate)
        except EmptySequenceError: return default
