import operator
import numpy as np
import suite
from iterfold import P, LazyIterable, empty, from_iterable, by_key, reverse
from iterfold import configure, get_settings, Settings, InvalidArgumentError
from iterfold.samples import SAMPLE_PEOPLE

test = suite.test
assert_that = suite.assert_that
assert_raises = suite.assert_raises

numbers = P([4, 1, 3, 2, 5])
people = P(SAMPLE_PEOPLE)


# construction tests

@test("empty and None sources produce empty sequences")
def test_empty():
    assert_that(list(empty()) == [], "empty() should be empty")
    assert_that(from_iterable(None).to.list() == [], "from_iterable(None) should be empty")
    assert_that(isinstance(empty(), LazyIterable), "empty() should be a LazyIterable")


@test("a lazy iterable can be traversed more than once")
def test_restartable():
    assert_that(numbers.to.list() == [4, 1, 3, 2, 5], "first traversal")
    assert_that(numbers.to.list() == [4, 1, 3, 2, 5], "second traversal")


@test("a lazy iterable re-runs its pipeline on every traversal")
def test_not_memoized():
    calls = []
    source = [1, 2]
    doubled = P(source).select(lambda x: calls.append(x) or x * 2)
    doubled.to.list()
    source.append(3)
    assert_that(doubled.to.list() == [2, 4, 6], "should see the new element")
    assert_that(calls == [1, 2, 1, 2, 3], f"nothing should be cached: {calls}")


@test("a one-shot generator source is only traversed once")
def test_one_shot_source():
    once = from_iterable(x for x in [1, 2])
    assert_that(once.to.list() == [1, 2], "first traversal yields everything")
    assert_that(once.to.list() == [], "second traversal finds the generator exhausted")


@test("repr names the type")
def test_repr():
    assert_that('LazyIterable' in repr(numbers), f"unexpected repr: {numbers!r}")


# fluent operation tests

@test("fluent pipeline filters, projects and sorts")
def test_fluent_pipeline():
    names = (people
             .where(lambda p: p.department_id == 0)
             .select(lambda p: p.name)
             .sort()
             .to.list())
    assert_that(names == ['Bob Engineer', 'Joe Engineer'], f"unexpected names: {names}")


@test("fluent sort accepts a comparator")
def test_fluent_sort_comparator():
    result = numbers.sort(reverse(by_key(abs))).to.list()
    assert_that(result == [5, 4, 3, 2, 1], f"should sort descending: {result}")
    assert_raises(InvalidArgumentError, numbers.sort, None)


@test("fluent zip_with takes the other sequence first")
def test_fluent_zip_with():
    result = P([1, 2, 3]).zip_with(['a', 'b'], lambda n, s: f"{n}{s}").to.list()
    assert_that(result == ['1a', '2b'], f"unexpected zip: {result}")
    assert_that(P([1]).zip_with(None, operator.add).to.list() == [], "None other is empty")


@test("fluent skip drops leading elements")
def test_fluent_skip():
    assert_that(numbers.skip(3).to.list() == [2, 5], "should keep the last two")


@test("fluent where and skip defer work and see source changes")
def test_fluent_where_skip_lazy():
    seen = []
    source = [5, 12, 7, 20]
    chain = P(source).where(lambda x: seen.append(x) or x > 6).skip(1)
    assert_that(seen == [], "predicate should not run before iteration")
    assert_that(chain.to.list() == [7, 20], "first pass drops the first match")
    source.insert(0, 30)
    assert_that(chain.to.list() == [12, 7, 20], "second pass should see the new leading match")
    assert_that(seen == [5, 12, 7, 20, 30, 5, 12, 7, 20], f"nothing should be cached: {seen}")


# terminal accessor tests

@test("terminal conversions materialize the sequence")
def test_terminal_conversions():
    assert_that(numbers.to.tuple() == (4, 1, 3, 2, 5), "tuple conversion")
    array = numbers.to.array()
    assert_that(isinstance(array, np.ndarray), f"should return ndarray: {type(array)}")
    assert_that(np.array_equal(array, np.array([4, 1, 3, 2, 5])), "array contents")


@test("terminal count with and without predicate")
def test_terminal_count():
    assert_that(people.to.count() == 5, "five people")
    assert_that(people.to.count(lambda p: p.years_at_company >= 15) == 3, "three with 15+ years")
    assert_that(empty().to.count() == 0, "empty count is zero")


@test("terminal element access")
def test_terminal_element_access():
    assert_that(numbers.to.first_or_none() == 4, "first is 4")
    assert_that(empty().to.first_or_none() is None, "empty first is None")
    assert_that(numbers.to.element_at_or_default(2) == 3, "third is 3")
    assert_that(numbers.to.element_at_or_default(9, -1) == -1, "past the end gives default")
    assert_that(people.to.find(lambda p: p.name.startswith('M')).name == 'Mohammed', "finds Mohammed")


@test("terminal reduce with and without seed")
def test_terminal_reduce():
    assert_that(numbers.to.reduce(operator.add) == 15, "sum is 15")
    assert_that(numbers.to.reduce(operator.add, 10) == 25, "seeded sum is 25")
    assert_that(empty().to.reduce(operator.add) is None, "empty without seed is None")
    assert_that(empty().to.reduce(operator.add, 'seed') == 'seed', "empty with seed is the seed")


@test("terminal min and max")
def test_terminal_min_max():
    assert_that(numbers.to.min() == 1, "min is 1")
    assert_that(numbers.to.max() == 5, "max is 5")
    by_tenure = by_key(lambda p: p.years_at_company)
    assert_that(people.to.max(by_tenure).name == 'Mohammed', "longest tenure")
    assert_that(people.to.min(by_tenure).name == 'Intern Jane', "shortest tenure")


# configuration tests

@test("configure replaces settings and rejects unknown names")
def test_configure():
    previous = get_settings()
    try:
        updated = configure(numpy_sort_threshold=8)
        assert_that(isinstance(updated, Settings), "should return settings")
        assert_that(get_settings().numpy_sort_threshold == 8, "threshold should be updated")
        assert_that(get_settings().numpy_sort == previous.numpy_sort, "other settings unchanged")
        error = assert_raises(InvalidArgumentError, configure, no_such_setting=1)
        assert_that('no_such_setting' in str(error), f"error should name the setting: {error}")
    finally:
        configure(numpy_sort_threshold=previous.numpy_sort_threshold)


@test("configure rejects values of the wrong type at call time")
def test_configure_types():
    previous = get_settings()
    assert_raises(InvalidArgumentError, configure, numpy_sort_threshold='x')
    assert_raises(InvalidArgumentError, configure, numpy_sort_threshold=True)
    error = assert_raises(InvalidArgumentError, configure, numpy_sort=1)
    assert_that('numpy_sort' in str(error), f"error should name the setting: {error}")
    assert_that(get_settings() == previous, "rejected changes should leave settings untouched")


if __name__ == "__main__":
    raise SystemExit(suite.run(title="iterfold lazy sequence test suite"))
