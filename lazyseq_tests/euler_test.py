"""
high-level scenarios built only from the public api: small number puzzles
(project euler 1, 2, 3 and 7) whose solutions lean on infinite self-referential
streams, memoized recursion and matcher-driven termination.
"""
import suite
from lazyseq import from_range, from_scalar, unfold, build, empty, memoize, when

test = suite.test
assert_that = suite.assert_that
assert_equal = suite.assert_equal
assert_raises = suite.assert_raises


# --- problem 1: multiples of 3 and 5 ---

def is_multiple_of_3_or_5(n):
    return n != 0 and (n % 3 == 0 or n % 5 == 0)


def sum_of_multiples_of_3_and_5_below(limit):
    return from_range(0, limit).filter(is_multiple_of_3_or_5).sum()


# --- problem 2: even fibonacci numbers ---

@memoize
def fibonacci(order):
    return (when(0, lambda _: 0)
            .when(1, lambda _: 1)
            .when(2, lambda _: 1)
            .otherwise(lambda: fibonacci(order - 2) + fibonacci(order - 1))
            .apply(order))


def sum_of_even_fibonacci_values_not_exceeding(limit):
    return (from_scalar(2, lambda order: order + 1)
            .map(fibonacci)
            .take_while(lambda f: f <= limit)
            .filter(lambda f: f % 2 == 0)
            .sum())


# --- primes: a stream that consults itself while producing its next element ---

def divisible_by_known_primes(previous_prime, value):
    return (known_primes.take_while(lambda p: p < previous_prime)
            .append(previous_prime)
            .exists(lambda p: value % p == 0))


def next_prime(previous_prime):
    return (when(2, lambda _: 3)
            .otherwise(lambda: from_scalar(previous_prime + 2, lambda v: v + 2)
                       .filter(lambda candidate: not divisible_by_known_primes(previous_prime, candidate))
                       .take(1)
                       .head())
            .apply(previous_prime))


known_primes = from_scalar(2, next_prime)


def prime_no(index):
    if index < 1:
        raise ValueError("index < 1")
    return known_primes.get(index - 1)


# --- problem 3: largest prime factor ---

def smallest_prime_factor(value):
    return known_primes.filter(lambda p: value % p == 0).take(1).head()


def next_factor_step(rest):
    factor = smallest_prime_factor(rest)
    return build((factor, rest // factor), prime_factors_tail)


def prime_factors_tail(factor_and_rest):
    _, rest = factor_and_rest
    return (when(1, lambda _: empty())
            .otherwise(lambda: next_factor_step(rest))
            .apply(rest))


def largest_prime_factor_of(value):
    return build((1, value), prime_factors_tail).map(lambda pair: pair[0]).reduce(max)


def prime_factors_of(value):
    """ascending prime factors, peeled off one per step"""
    def peel(rest):
        if rest == 1:
            return None
        factor = smallest_prime_factor(rest)
        return factor, rest // factor

    return unfold(value, peel)


@test("problem 1: multiples of 3 or 5 below 10 and 1000")
def test_problem_1():
    assert_equal(sum_of_multiples_of_3_and_5_below(10), 23)
    assert_equal(sum_of_multiples_of_3_and_5_below(1000), 233168)


@test("problem 2: even fibonacci values not exceeding 90 and four million")
def test_problem_2():
    assert_equal(sum_of_even_fibonacci_values_not_exceeding(90), 2 + 8 + 34)
    assert_equal(sum_of_even_fibonacci_values_not_exceeding(4_000_000), 4_613_732)


@test("problem 3: largest prime factor")
def test_problem_3():
    assert_equal(largest_prime_factor_of(24), 3)
    assert_equal(largest_prime_factor_of(29), 29)
    assert_equal(largest_prime_factor_of(13195), 29)
    assert_equal(largest_prime_factor_of(600_851_475_143), 6857)


@test("unfold peels the prime factors of 13195 in ascending order")
def test_prime_factors_unfold():
    assert_equal(prime_factors_of(13195).to.list(), [5, 7, 13, 29])
    assert_equal(prime_factors_of(24).to.list(), [2, 2, 2, 3])
    assert_that(prime_factors_of(1).is_empty(), "1 has no prime factors")


@test("problem 7: the n-th prime from a self-referential stream")
def test_problem_7():
    assert_equal([prime_no(i) for i in range(1, 7)], [2, 3, 5, 7, 11, 13])
    assert_equal(prime_no(100), 541)
    assert_raises(ValueError, prime_no, 0)


@test("the known primes stream computes each prime once")
def test_known_primes_cached():
    prime_no(50)
    assert_equal(known_primes.take_while(lambda p: p < 30).to.list(), [2, 3, 5, 7, 11, 13, 17, 19, 23, 29])
    assert_that(repr(known_primes).startswith("Stream(2, 3, 5, 7"), "realized primes show in repr")


if __name__ == "__main__":
    suite.main("lazyseq number puzzles test suite")
