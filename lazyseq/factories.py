import typing
from .types import *

if typing.TYPE_CHECKING:
    from .stream import Stream


def empty() -> 'Stream[Any]':
    """the empty stream"""
    from .stream import EMPTY
    return EMPTY


def cons(head: T, tail: Union['Stream[T]', Callable[[], 'Stream[T]']]) -> 'Stream[T]':
    """a stream with a known head; tail is a stream or a zero-argument function producing one"""
    from .stream import Cell
    return Cell(head, tail)


def of(*items: T) -> 'Stream[T]':
    """finite stream of the given items"""
    return from_iterable(items)


def from_iterable(data: Iterable[T]) -> 'Stream[T]':
    """
    stream over any iterable. elements are pulled from a single shared iterator,
    one per forced node, so generators are consumed lazily and at most once.
    """
    from .stream import Stream, Cell, Suspended, EMPTY
    if isinstance(data, Stream):
        return data
    iterator = iter(data)
    sentinel = object()

    def pull():
        item = next(iterator, sentinel)
        if item is sentinel: return EMPTY
        return Cell(item, pull)

    return Suspended(pull)


def from_range(start: int, end_exclusive: int) -> 'Stream[int]':
    """start, start+1, ..., end_exclusive-1; empty when start >= end_exclusive"""
    from .stream import Cell, EMPTY

    def counting(current):
        if current >= end_exclusive: return EMPTY
        return Cell(current, lambda: counting(current + 1))

    return counting(start)


def from_scalar(seed: T, step: Step[T]) -> 'Stream[T]':
    """infinite stream seed, step(seed), step(step(seed)), ..."""
    from .stream import Cell

    def stepping(current):
        return Cell(current, lambda: stepping(step(current)))

    return stepping(seed)


def unfold(seed: S, unfolder: Unfolder[S, T]) -> 'Stream[T]':
    """
    corecursive builder. unfolder(state) returns (value, next_state) to emit value and
    continue, or None to stop. the shape of the result can depend on the state.
    """
    from .stream import Cell, Suspended, EMPTY

    def unfolding(state):
        step = unfolder(state)
        if step is None: return EMPTY
        value, next_state = step
        return Cell(value, lambda: unfolding(next_state))

    return Suspended(lambda: unfolding(seed))


def build(seed: T, tail_builder: Callable[[T], 'Stream[T]']) -> 'Stream[T]':
    """
    head is seed, tail is tail_builder(seed), computed on demand.
    tail_builder returns a whole stream, typically empty() to stop or another build(...) to go on.
    """
    from .stream import Cell
    return Cell(seed, lambda: tail_builder(seed))


def repeat(item: T, count: Optional[int] = None) -> 'Stream[T]':
    """item repeated count times, or forever when count is None"""
    from .stream import Cell
    if count is not None:
        return from_range(0, count).map(lambda _: item)
    forever = Cell(item, lambda: forever)
    return forever


# --- aliases ---
gen = from_scalar
seq = from_iterable
