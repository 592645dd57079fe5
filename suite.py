import time
import traceback
from functools import wraps
from typing import List, Dict, Any, Callable, Optional, Type

_suite_state: Dict[str, List[Dict[str, Any]]] = {
    'tests': [],
    'results': []
}


class _c:
    """a tiny, silent class for holding color codes."""
    ok = '\033[92m'
    fail = '\033[91m'
    warn = '\033[93m'
    info = '\033[94m'
    grey = '\033[90m'
    reset = '\033[0m'


# --- custom exception for assertions ---

class SuiteAssertionError(AssertionError):
    """custom error to distinguish assertion failures from other exceptions."""
    pass

# --- public api ---

def test(description: str) -> Callable:
    """decorator to register a function as a test case."""

    def decorator(func: Callable) -> Callable:
        _suite_state['tests'].append({'func': func, 'description': description})

        @wraps(func)
        def wrapper(*args, **kwargs):
            return func(*args, **kwargs)

        return wrapper

    return decorator


def assert_that(condition: Any, message: str = "assertion failed") -> None:
    """custom assertion that raises a specific, catchable error type."""
    if not condition:
        raise SuiteAssertionError(message)


def assert_raises(error_type: Type[BaseException], func: Callable, *args, **kwargs) -> BaseException:
    """calls func and asserts it raises error_type; returns the caught error."""
    try:
        func(*args, **kwargs)
    except error_type as e:
        return e
    raise SuiteAssertionError(f"{getattr(func, '__name__', func)} should raise {error_type.__name__}")


SLOW_MS = 50.0


def _run_one(test_item: Dict[str, Any], verbose: bool) -> Dict[str, Any]:
    """runs a single registered test, timing it and classifying any failure."""
    started = time.perf_counter()
    error = None
    try:
        test_item['func']()
    except SuiteAssertionError as e:
        error = f"assertion failed: {e}"
    except Exception as e:
        error = f"{type(e).__name__}: {e}"
        if verbose:
            traceback.print_exc()
    return {
        'description': test_item['description'],
        'passed': error is None,
        'error': error,
        'ms': (time.perf_counter() - started) * 1000,
    }


def _print_result(result: Dict[str, Any]) -> None:
    timing = ''
    if result['ms'] >= SLOW_MS:
        timing = f"  {_c.warn}({result['ms']:.0f}ms){_c.reset}"
    if result['passed']:
        print(f"    {_c.ok}✔ pass{_c.reset}  {result['description']}{timing}")
    else:
        print(f"    {_c.fail}✖ fail{_c.reset}  {result['description']}{timing}")
        print(f"      {_c.grey}└─> {result['error']}{_c.reset}")


def run(title: str = "test run", verbose: bool = False, only: Optional[str] = None) -> int:
    """
    runs the registered tests grouped by the module that registered them.
    `only` keeps the tests whose description contains that text.
    returns the failure count so scripts can use it as an exit status.
    """
    print(f"\n{_c.info}--- starting: {title} ---{_c.reset}")
    start_time = time.perf_counter()

    registered = _suite_state['tests']
    selected = [t for t in registered if only is None or only in t['description']]

    results = []
    current_module = None
    for test_item in selected:
        module = test_item['func'].__module__
        if module != current_module:
            print(f"  {_c.grey}{module}{_c.reset}")
            current_module = module
        result = _run_one(test_item, verbose)
        results.append(result)
        _print_result(result)

    _suite_state['results'] = results
    failed_count = _print_summary(start_time, skipped=len(registered) - len(selected))

    # clear tests after run to allow for multiple, separate suite runs in a single script
    _suite_state['tests'] = []
    return failed_count


def _print_summary(start_time: float, skipped: int = 0) -> int:
    """prints totals, the slowest test and returns the failure count."""
    duration = (time.perf_counter() - start_time) * 1000
    results = _suite_state['results']

    failed_count = sum(1 for r in results if not r['passed'])
    summary_color = _c.ok if failed_count == 0 else _c.fail

    print(f"\n{summary_color}--- summary ---{_c.reset}")
    print(f"  ran {_c.info}{len(results)}{_c.reset} tests in {_c.warn}{duration:.2f}ms{_c.reset}"
          + (f", {skipped} filtered out" if skipped else ""))
    print(f"  {_c.ok}passed: {len(results) - failed_count}{_c.reset}, {_c.fail}failed: {failed_count}{_c.reset}")
    if results:
        slowest = max(results, key=lambda r: r['ms'])
        print(f"  {_c.grey}slowest: {slowest['description']} ({slowest['ms']:.2f}ms){_c.reset}")
    print(f"{summary_color}---------------{_c.reset}\n")
    return failed_count
