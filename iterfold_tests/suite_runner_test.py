import suite

test = suite.test
assert_that = suite.assert_that
assert_raises = suite.assert_raises


def _passing():
    pass


def _failing_assertion():
    assert_that(1 == 2, "one is not two")


def _crashing():
    raise KeyError('missing')


# _run_one() tests

@test("a passing test is reported as passed with a timing")
def test_run_one_passing():
    result = suite._run_one({'func': _passing, 'description': 'passes'}, verbose=False)
    assert_that(result['passed'] and result['error'] is None, f"unexpected result: {result}")
    assert_that(result['description'] == 'passes', "description is carried through")
    assert_that(result['ms'] >= 0, "timing should be recorded")


@test("assertion failures and crashes are told apart")
def test_run_one_failures():
    failed = suite._run_one({'func': _failing_assertion, 'description': 'fails'}, verbose=False)
    assert_that(not failed['passed'], "assertion failure should not pass")
    assert_that(failed['error'] == "assertion failed: one is not two", f"unexpected error: {failed['error']}")
    crashed = suite._run_one({'func': _crashing, 'description': 'crashes'}, verbose=False)
    assert_that(crashed['error'].startswith('KeyError'), f"unexpected error: {crashed['error']}")


# assert_raises() tests

@test("assert_raises returns the raised error and fails when nothing is raised")
def test_assert_raises():
    error = assert_raises(KeyError, _crashing)
    assert_that(isinstance(error, KeyError), "should return the caught error")
    try:
        assert_raises(KeyError, _passing)
        assert_that(False, "assert_raises should fail when nothing is raised")
    except suite.SuiteAssertionError as e:
        assert_that('_passing' in str(e), f"error should name the function: {e}")


if __name__ == "__main__":
    raise SystemExit(suite.run(title="suite runner test suite"))
