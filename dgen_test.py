import suite
from dgen import Generator, from_schema, int_lists
from lazyseq import Stream

test = suite.test
assert_that = suite.assert_that
assert_equal = suite.assert_equal
assert_raises = suite.assert_raises


@test("the same seed produces the same samples")
def test_seed_reproducible():
    assert_equal(int_lists(5, seed=1), int_lists(5, seed=1))


@test("fixed counts produce lists of exactly that length")
def test_fixed_count():
    lists = from_schema({'count': 4, 'min': 0, 'max': 9}, seed=2).take(6).to.list()
    assert_equal([len(x) for x in lists], [4] * 6)
    assert_that(all(0 <= v <= 9 for x in lists for v in x), "values should respect min/max")


@test("ranged counts stay within their bounds")
def test_ranged_count():
    for sample in int_lists(30, seed=3, length=(2, 5)):
        assert_that(2 <= len(sample) <= 5, f"bad length {len(sample)}")


@test("take returns a stream")
def test_take_is_stream():
    assert_that(isinstance(from_schema({'count': 1}, seed=4).take(2), Stream), "should be a stream")


@test("pairs give a valid index into each sample")
def test_pairs():
    for sample, index in from_schema({'count': (1, 8)}, seed=5).pairs(20):
        assert_that(0 <= index < len(sample), f"index {index} out of range for {sample}")


@test("a malformed count is rejected")
def test_bad_count():
    assert_raises(ValueError, Generator(seed=6).create, {'count': 'many'})


if __name__ == "__main__":
    suite.main("dgen test suite")
