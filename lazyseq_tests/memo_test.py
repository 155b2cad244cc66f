import time
import suite
from lazyseq import memoize, memoize_recursive, Memoized, CacheInfo, when

test = suite.test
assert_that = suite.assert_that
assert_equal = suite.assert_equal
assert_raises = suite.assert_raises


@memoize
def fibonacci(order: int) -> int:
    """fibonacci through its own memoized name, with base cases chosen by a matcher"""
    return (when(0, lambda _: 0)
            .when(1, lambda _: 1)
            .when(2, lambda _: 1)
            .otherwise(lambda: fibonacci(order - 2) + fibonacci(order - 1))
            .apply(order))


@test("a memoized function runs once per distinct argument")
def test_called_once():
    calls = []

    @memoize
    def square(x):
        calls.append(x)
        return x * x

    assert_equal(square(4), 16)
    assert_equal(square(4), 16)
    assert_equal(square(5), 25)
    assert_equal(calls, [4, 5])
    assert_equal(square.cache_info(), CacheInfo(hits=1, misses=2, size=2))


@test("equal arguments share a cache entry")
def test_equal_arguments():
    calls = []
    length = memoize(lambda t: calls.append(t) or len(t))
    length((1, 2))
    length(tuple([1, 2]))
    assert_equal(len(calls), 1)


@test("recursive memoization through the decorated name is linear")
def test_recursive_fibonacci():
    fibonacci.cache_clear()
    start = time.perf_counter()
    assert_equal(fibonacci(30), 832040)
    elapsed = time.perf_counter() - start
    info = fibonacci.cache_info()
    assert_equal(info.misses, info.size, "every order computed exactly once")
    assert_that(info.size <= 31, f"at most 31 orders should be cached, got {info.size}")
    assert_that(elapsed < 1.0, f"memoized recursion should be fast, took {elapsed:.3f}s")


@test("a deep memoized recursion reuses earlier results")
def test_recursive_reuse():
    fibonacci.cache_clear()
    fibonacci(20)
    misses_before = fibonacci.cache_info().misses
    assert_equal(fibonacci(21), 10946)
    assert_equal(fibonacci.cache_info().misses, misses_before + 1, "only order 21 is new")


@test("memoize_recursive binds the wrapper before the body first runs")
def test_memoize_recursive():
    calls = []

    def body(self_fn, n):
        calls.append(n)
        return n if n < 2 else self_fn(n - 1) + self_fn(n - 2)

    fib = memoize_recursive(body)
    assert_that(isinstance(fib, Memoized), "should return a Memoized wrapper")
    assert_equal(fib(40), 102334155)
    assert_equal(sorted(calls), list(range(41)), "each order runs once")


@test("memoize_recursive works with a lambda and a matcher")
def test_memoize_recursive_lambda():
    factorial = memoize_recursive(
        lambda fact, n: when(0, lambda _: 1).otherwise(lambda: n * fact(n - 1)).apply(n))
    assert_equal(factorial(10), 3628800)
    assert_that(5 in factorial, "intermediate results should be cached")


@test("memoize keeps the wrapped function's name and doc")
def test_wraps():
    assert_equal(fibonacci.__name__, 'fibonacci')
    assert_that('fibonacci' in fibonacci.__doc__, "docstring should be kept")
    assert_that(repr(fibonacci).startswith('Memoized(fibonacci'), repr(fibonacci))


@test("memoizing a memoized function returns it unchanged")
def test_memoize_idempotent():
    assert_that(memoize(fibonacci) is fibonacci, "should not double-wrap")


@test("memoize rejects non-callables and unhashable arguments")
def test_memoize_errors():
    assert_raises(TypeError, memoize, 42)
    assert_raises(TypeError, memoize_recursive, 'nope')
    assert_raises(TypeError, memoize(len), [1, 2])


@test("cache_clear resets entries and counters")
def test_cache_clear():
    double = memoize(lambda x: x * 2)
    double(1)
    double(1)
    double.cache_clear()
    assert_equal(double.cache_info(), CacheInfo(0, 0, 0))


if __name__ == "__main__":
    suite.main("lazyseq memoization test suite")
