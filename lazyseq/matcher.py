"""
guarded dispatch: an ordered list of (guard, handler) pairs plus a mandatory fallback.
a declarative stand-in for if/elif chains that can live inside recursive function bodies.

    fib = when(0, lambda n: 0).when(1, lambda n: 1).otherwise(lambda n: fib_of(n - 1) + fib_of(n - 2))
    fib.apply(10)
"""
import inspect
import logging
from .types import *
from .errors import MatcherMisconfigured

logger = logging.getLogger(__name__)


class _LiteralGuard(NamedTuple):
    value: Any

    def test(self, candidate: Any) -> bool:
        return candidate == self.value


class _PredicateGuard(NamedTuple):
    predicate: Callable[[Any], bool]

    def test(self, candidate: Any) -> bool:
        return bool(self.predicate(candidate))


Guard = Union[_LiteralGuard, _PredicateGuard]


def literal(value: Any) -> _LiteralGuard:
    """force equality testing for a guard value that happens to be callable"""
    return _LiteralGuard(value)


def _to_guard(guard: Any) -> Guard:
    if isinstance(guard, (_LiteralGuard, _PredicateGuard)):
        return guard
    if callable(guard):
        return _PredicateGuard(guard)
    return _LiteralGuard(guard)


def _fallback_takes_input(fallback: Callable) -> bool:
    """decide once, at build time, whether the fallback wants the input value"""
    try:
        signature = inspect.signature(fallback)
    except (TypeError, ValueError):
        # builtins without introspectable signatures get the input
        return True
    try:
        signature.bind(None)
    except TypeError:
        try:
            signature.bind()
        except TypeError:
            raise MatcherMisconfigured("fallback must accept zero arguments or exactly one")
        return False
    return True


class Matcher(Generic[T, R]):
    """stateless and reusable; apply() runs exactly one handler per input"""

    __slots__ = ('_cases', '_fallback', '_fallback_takes_input')

    def __init__(self, cases: List[Tuple[Guard, Handler[T, R]]], fallback: Callable[..., R]):
        if fallback is None:
            raise MatcherMisconfigured("a matcher needs a fallback handler")
        if not callable(fallback):
            raise MatcherMisconfigured(f"fallback must be callable, got {type(fallback).__name__}")
        self._cases = tuple(cases)
        self._fallback = fallback
        self._fallback_takes_input = _fallback_takes_input(fallback)

    @classmethod
    def build(cls, pairs: Iterable[Tuple[Any, Handler[T, R]]],
              fallback: Callable[..., R]) -> 'Matcher[T, R]':
        """build from (guard, handler) pairs. callable guards are predicates, anything else is compared with =="""
        cases = []
        for position, pair in enumerate(pairs if pairs is not None else ()):
            try:
                guard, handler = pair
            except (TypeError, ValueError):
                raise MatcherMisconfigured(f"case {position} is not a (guard, handler) pair: {pair!r}")
            if not callable(handler):
                raise MatcherMisconfigured(f"handler for case {position} is not callable")
            cases.append((_to_guard(guard), handler))
        return cls(cases, fallback)

    def apply(self, value: T) -> R:
        for guard, handler in self._cases:
            if guard.test(value):
                return handler(value)
        logger.debug("no guard matched %r, using fallback", value)
        if self._fallback_takes_input:
            return self._fallback(value)
        return self._fallback()

    __call__ = apply

    def __len__(self) -> int:
        return len(self._cases)

    def __repr__(self) -> str:
        return f"Matcher(cases={len(self._cases)})"


class MatcherBuilder(Generic[T, R]):
    """fluent construction: when(...).when(...).otherwise(...). each step returns a new builder."""

    __slots__ = ('_pairs',)

    def __init__(self, pairs: Tuple[Tuple[Any, Handler[T, R]], ...] = ()):
        self._pairs = pairs

    def when(self, guard: Any, handler: Handler[T, R]) -> 'MatcherBuilder[T, R]':
        return MatcherBuilder(self._pairs + ((guard, handler),))

    def otherwise(self, fallback: Callable[..., R]) -> Matcher[T, R]:
        return Matcher.build(self._pairs, fallback)


def when(guard: Any, handler: Handler[T, R]) -> MatcherBuilder[T, R]:
    """start a fluent matcher definition with its first case"""
    return MatcherBuilder().when(guard, handler)
