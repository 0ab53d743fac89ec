import time
import traceback
from functools import wraps
from typing import List, Dict, Any, Callable, Type

_registry: Dict[str, List[Dict[str, Any]]] = {
    'tests': [],
    'results': []
}


class _c:
    """terminal colour codes."""
    ok = '\033[92m'
    fail = '\033[91m'
    warn = '\033[93m'
    info = '\033[94m'
    grey = '\033[90m'
    reset = '\033[0m'


class TestAssertionError(AssertionError):
    """an assert_that() failure, kept apart from unexpected errors in the report."""
    pass

# --- public api ---

def test(description: str) -> Callable:
    """decorator to register a function as a test case."""

    def decorator(func: Callable) -> Callable:
        _registry['tests'].append({'func': func, 'description': description})

        @wraps(func)
        def wrapper(*args, **kwargs):
            return func(*args, **kwargs)

        return wrapper

    return decorator


def assert_that(condition: Any, message: str = "assertion failed") -> None:
    if not condition:
        raise TestAssertionError(message)


def assert_raises(expected: Type[BaseException], func: Callable[[], Any], message: str = "") -> BaseException:
    """call func and require it to raise `expected`; returns the caught exception for further checks."""
    try:
        func()
    except expected as e:
        return e
    raise TestAssertionError(message or f"expected {expected.__name__} to be raised")


def run(title: str = "test run", verbose: bool = False) -> int:
    """runs every registered test, prints a report and returns the failure count."""
    print(f"\n{_c.info}=== {title} ==={_c.reset}")
    started = time.perf_counter()
    _registry['results'] = []

    for entry in _registry['tests']:
        error = None
        try:
            entry['func']()
        except TestAssertionError as e:
            error = f"assertion failed: {e}"
        except Exception as e:
            error = f"{type(e).__name__}: {e}"
            if verbose:
                traceback.print_exc()

        _registry['results'].append({'passed': error is None, 'description': entry['description'], 'error': error})

        if error is None:
            print(f"  {_c.ok}ok  {_c.reset} {entry['description']}")
        else:
            print(f"  {_c.fail}FAIL{_c.reset} {entry['description']}")
            print(f"       {_c.grey}{error}{_c.reset}")

    failed = _report(started)
    # registered tests are consumed so several files can run in one process
    _registry['tests'] = []
    return failed


def _report(started: float) -> int:
    elapsed = (time.perf_counter() - started) * 1000
    results = _registry['results']
    failed = sum(1 for r in results if not r['passed'])
    colour = _c.ok if failed == 0 else _c.fail

    print(f"\n{colour}{len(results) - failed}/{len(results)} passed{_c.reset}"
          f" in {_c.warn}{elapsed:.2f}ms{_c.reset}\n")
    return failed
