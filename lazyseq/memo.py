import logging
from functools import partial, update_wrapper
from .types import *

logger = logging.getLogger(__name__)


class Memoized(Generic[A, B]):
    """
    single-argument function wrapper with an unbounded, never-evicted cache.
    the wrapped function must be pure: for a given argument it is called at most once,
    and every later call with an equal argument returns the stored result.
    """

    def __init__(self, func: Optional[Callable[[A], B]] = None):
        self._func = func
        self._cache: Dict[A, B] = {}
        self._hits = 0
        self._misses = 0
        if func is not None:
            update_wrapper(self, func)

    def _bind(self, func: Callable[[A], B]) -> None:
        """second phase of two-phase construction: attach the implementation to an existing handle"""
        self._func = func
        inner = func.func if isinstance(func, partial) else func
        update_wrapper(self, inner)

    def __call__(self, arg: A) -> B:
        if self._func is None:
            raise TypeError("memoized function has no implementation bound yet")
        try:
            result = self._cache[arg]
        except KeyError:
            pass
        else:
            self._hits += 1
            return result

        self._misses += 1
        logger.debug("cache miss for %r(%r)", getattr(self, '__name__', self._func), arg)
        result = self._func(arg)
        # a recursive call may already have filled this slot; the first stored value wins
        return self._cache.setdefault(arg, result)

    def __contains__(self, arg: A) -> bool:
        return arg in self._cache

    def cache_info(self) -> CacheInfo:
        return CacheInfo(self._hits, self._misses, len(self._cache))

    def cache_clear(self) -> None:
        """drop every cached result and reset the counters"""
        self._cache.clear()
        self._hits = 0
        self._misses = 0

    def __repr__(self) -> str:
        name = getattr(self, '__name__', None) or repr(self._func)
        return f"Memoized({name}, size={len(self._cache)})"


def memoize(func: Callable[[A], B]) -> Memoized[A, B]:
    """
    wrap a pure single-argument function in a cache.
    works as a decorator; recursion through the decorated name goes through the cache,
    because the name is bound to the wrapper before the first call happens.
    """
    if isinstance(func, Memoized):
        return func
    if not callable(func):
        raise TypeError(f"memoize expects a callable, got {type(func).__name__}")
    return Memoized(func)


def memoize_recursive(func: Callable[[Callable[[A], B], A], B]) -> Memoized[A, B]:
    """
    memoize a function that recurses through its own memoized wrapper without naming it.
    func receives (self_fn, arg); self_fn is the cached wrapper itself.

        fib = memoize_recursive(lambda fib, n: n if n < 2 else fib(n - 1) + fib(n - 2))
    """
    if not callable(func):
        raise TypeError(f"memoize_recursive expects a callable, got {type(func).__name__}")
    handle: Memoized[A, B] = Memoized()
    handle._bind(partial(func, handle))
    return handle
