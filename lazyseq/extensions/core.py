from __future__ import annotations
import typing
from ..types import *
from ..config import get_settings
from ..errors import ForceLimitExceeded

if typing.TYPE_CHECKING:
    from ..stream import Stream


def _scan_budget() -> Optional[int]:
    """how many nodes a skipping loop (filter, skip_while) may pass over in one force"""
    return get_settings().force_limit


class _CoreOperations(Generic[T]):
    """
    lazy transformations. every method returns a new stream immediately and does no work
    until the result is forced; the source is never modified and unforced tails are shared.
    """
    __slots__ = ()

    def map(self: 'Stream[T]', mapper: Selector[T, U]) -> 'Stream[U]':
        """project each element to a new form"""
        from ..stream import Cell, Suspended, EMPTY

        def mapped(node):
            if node.is_empty(): return EMPTY
            return Cell(mapper(node.head()), lambda: mapped(node.tail()))

        return Suspended(lambda: mapped(self))

    def filter(self: 'Stream[T]', predicate: Predicate[T]) -> 'Stream[T]':
        """
        keep elements satisfying predicate. skipping happens when a node is forced,
        so a predicate that never holds on an infinite source makes that force run forever.
        """
        from ..stream import Cell, Suspended, EMPTY

        def filtered(node):
            budget = _scan_budget()
            skipped = 0
            while not node.is_empty() and not predicate(node.head()):
                skipped += 1
                if budget is not None and skipped > budget:
                    raise ForceLimitExceeded(budget)
                node = node.tail()
            if node.is_empty(): return EMPTY
            return Cell(node.head(), lambda: filtered(node.tail()))

        return Suspended(lambda: filtered(self))

    def take_while(self: 'Stream[T]', predicate: Predicate[T]) -> 'Stream[T]':
        """elements up to, not including, the first one failing predicate"""
        from ..stream import Cell, Suspended, EMPTY

        def taking(node):
            if node.is_empty() or not predicate(node.head()): return EMPTY
            return Cell(node.head(), lambda: taking(node.tail()))

        return Suspended(lambda: taking(self))

    def take(self: 'Stream[T]', count: int) -> 'Stream[T]':
        """at most the first 'count' elements. never forces the source past element count-1"""
        from ..stream import Cell, Suspended, EMPTY

        def taking(node, remaining):
            if remaining <= 0 or node.is_empty(): return EMPTY
            if remaining == 1: return Cell(node.head(), EMPTY)
            return Cell(node.head(), lambda: taking(node.tail(), remaining - 1))

        return Suspended(lambda: taking(self, count))

    def append(self: 'Stream[T]', element: T) -> 'Stream[T]':
        """element after the last one of the source; only reachable when the source is finite"""
        from ..stream import Cell, Suspended, EMPTY

        def appending(node):
            if node.is_empty(): return Cell(element, EMPTY)
            return Cell(node.head(), lambda: appending(node.tail()))

        return Suspended(lambda: appending(self))

    def prepend(self: 'Stream[T]', element: T) -> 'Stream[T]':
        """element in front of the source. the source is shared, not copied"""
        from ..stream import Cell
        return Cell(element, self)

    def concat(self: 'Stream[T]', other: Iterable[T]) -> 'Stream[T]':
        """the source followed by other (a stream or any iterable)"""
        from ..stream import Cell, Suspended
        from ..factories import from_iterable

        def chained(node):
            if node.is_empty(): return from_iterable(other)
            return Cell(node.head(), lambda: chained(node.tail()))

        return Suspended(lambda: chained(self))

    def skip(self: 'Stream[T]', count: int) -> 'Stream[T]':
        """drop the first 'count' elements"""
        from ..stream import Suspended

        def skipping():
            node = self
            for _ in range(count):
                if node.is_empty(): break
                node = node.tail()
            return node

        return Suspended(skipping)

    def skip_while(self: 'Stream[T]', predicate: Predicate[T]) -> 'Stream[T]':
        """drop elements while predicate holds"""
        from ..stream import Suspended

        def skipping():
            budget = _scan_budget()
            skipped = 0
            node = self
            while not node.is_empty() and predicate(node.head()):
                skipped += 1
                if budget is not None and skipped > budget:
                    raise ForceLimitExceeded(budget)
                node = node.tail()
            return node

        return Suspended(skipping)

    def flat_map(self: 'Stream[T]', selector: Selector[T, Iterable[U]]) -> 'Stream[U]':
        """project each element to a stream or iterable and flatten the results in order"""
        from ..stream import Cell, Suspended, EMPTY
        from ..factories import from_iterable

        def emit(inner, outer):
            if inner.is_empty(): return flattened(outer.tail())
            return Cell(inner.head(), lambda: emit(inner.tail(), outer))

        def flattened(node):
            # outer elements that project to nothing are skipped in a loop
            while not node.is_empty():
                inner = from_iterable(selector(node.head()))
                if not inner.is_empty():
                    return emit(inner, node)
                node = node.tail()
            return EMPTY

        return Suspended(lambda: flattened(self))

    def zip(self: 'Stream[T]', other: Iterable[U]) -> 'Stream[Tuple[T, U]]':
        """pairs of elements; ends with the shorter side"""
        from ..stream import Cell, Suspended, EMPTY
        from ..factories import from_iterable

        def zipped(left, right):
            if left.is_empty() or right.is_empty(): return EMPTY
            return Cell((left.head(), right.head()), lambda: zipped(left.tail(), right.tail()))

        return Suspended(lambda: zipped(self, from_iterable(other)))

    def zip_with_index(self: 'Stream[T]', start: int = 0) -> 'Stream[Tuple[T, int]]':
        """pairs each element with its position"""
        from ..stream import Cell, Suspended, EMPTY

        def indexed(node, index):
            if node.is_empty(): return EMPTY
            return Cell((node.head(), index), lambda: indexed(node.tail(), index + 1))

        return Suspended(lambda: indexed(self, start))

    def scan(self: 'Stream[T]', seed: U, accumulator: Accumulator[U, T]) -> 'Stream[U]':
        """running fold: seed, acc(seed, x0), acc(acc(seed, x0), x1), ..."""
        from ..stream import Cell, Suspended, EMPTY

        def scanning(total, node):
            # node is only inspected once the next running total is asked for
            def rest():
                if node.is_empty(): return EMPTY
                return scanning(accumulator(total, node.head()), Suspended(node.tail))
            return Cell(total, rest)

        return Suspended(lambda: scanning(seed, self))
