"""
lazy, None-tolerant functional operations over plain iterables.

the function argument comes first (select(selector, source)) so calls compose
the way curried functions do. a source of None behaves exactly like an empty
sequence; a missing function or comparator raises InvalidArgumentError when the
operation is declared, never later during iteration.

min and max share the fold below but break ties differently: min keeps the
first of several equal minima, max keeps the last of several equal maxima.
"""
import functools
import logging
from itertools import islice

import numpy as np

from .types import *
from .comparators import natural_order
from .config import get_settings
from .errors import InvalidArgumentError, check_not_none
from .lazy import LazyIterable, empty

logger = logging.getLogger(__name__)

_NO_SEED = object()


def zip_with(combine: Function2[A, B, R], a: Optional[Iterable[A]],
             b: Optional[Iterable[B]]) -> LazyIterable[R]:
    """
    lazy zip applying combine to (a[i], b[i]); stops when either runs out.
    inspired by haskell's zipWith.
    """
    check_not_none(combine, 'combine')
    if a is None or b is None:
        return empty()
    return LazyIterable(lambda: map(combine, a, b))


def select(selector: Selector[T, U], source: Optional[Iterable[T]]) -> LazyIterable[U]:
    """lazy map. a None source returns empty."""
    check_not_none(selector, 'selector')
    if source is None:
        return empty()
    return LazyIterable(lambda: map(selector, source))


def where(predicate: Predicate[T], source: Optional[Iterable[T]]) -> LazyIterable[T]:
    """lazy filter. a None source returns empty."""
    check_not_none(predicate, 'predicate')
    if source is None:
        return empty()
    return LazyIterable(lambda: filter(predicate, source))


def all_of(*predicates: Predicate[T]) -> Predicate[T]:
    """conjunction of predicates, evaluated left to right with short-circuit"""
    for i, predicate in enumerate(predicates):
        check_not_none(predicate, f'predicates[{i}]')
    return lambda item: all(predicate(item) for predicate in predicates)


def sort(source: Optional[Iterable[T]], comparator: Comparer[T] = natural_order) -> LazyIterable[T]:
    """
    lazy stable sort; every iteration sorts a fresh copy of source.
    a None source returns empty without ever calling the comparator.
    """
    # sorted() would only complain on first iteration, fail here instead
    check_not_none(comparator, 'comparator')
    if source is None:
        return empty()

    def sorted_data():
        data = list(source)
        if comparator is natural_order:
            optimized = _try_numpy_sort(data)
            if optimized is not None: return optimized
        return sorted(data, key=functools.cmp_to_key(comparator))

    return LazyIterable(sorted_data)


def _try_numpy_sort(data: List[T]) -> Optional[List[T]]:
    """stable argsort for homogeneous int or float data, None if not applicable"""
    settings = get_settings()
    if not data or not settings.numpy_sort or len(data) < settings.numpy_sort_threshold:
        return None
    # exact types only: bool, numpy scalars, nan and None stay on the python path
    kind = type(data[0])
    if kind not in (int, float):
        return None
    if not all(type(x) is kind and x == x for x in data):
        return None
    try:
        order = np.argsort(np.asarray(data), kind='stable')
    except (TypeError, ValueError, OverflowError) as e:
        logger.debug(f"numpy sort skipped for {len(data)} items: {e}")
        return None
    return [data[i] for i in order]


def reduce(accumulator: Accumulator[Any, T], source: Optional[Iterable[T]],
           initial: Any = _NO_SEED) -> Any:
    """
    higher-order reduce (left fold, a.k.a. accumulate or inject).

    without a seed: (a, b, c, d) -> f(f(f(a, b), c), d). sources of zero or one
    element return first_or_none(source) and f is never called; a None source
    returns None.

    with a seed: (a, b, c, d), initial -> f(f(f(f(initial, a), b), c), d).
    a None or empty source returns initial unchanged.
    """
    check_not_none(accumulator, 'accumulator')
    if source is None:
        return None if initial is _NO_SEED else initial

    iterator = iter(source)
    if initial is _NO_SEED:
        initial = next(iterator, None)
    return functools.reduce(accumulator, iterator, initial)


def first_or_none(source: Optional[Iterable[T]]) -> Optional[T]:
    """the first item of source, or None if source is None or empty"""
    if source is None:
        return None
    return next(iter(source), None)


def element_at_or_default(source: Optional[Iterable[T]], index: int,
                          default: Optional[T] = None) -> Optional[T]:
    """the item at index, or default if source is shorter or None"""
    if index < 0:
        raise InvalidArgumentError(f"index must be non-negative, got {index}")
    if source is None:
        return default
    return next(islice(source, index, None), default)


def skip(source: Optional[Iterable[T]], count: int) -> LazyIterable[T]:
    """lazily drop the first 'count' items"""
    if count < 0:
        raise InvalidArgumentError(f"count must be non-negative, got {count}")
    if source is None:
        return empty()
    return LazyIterable(lambda: islice(source, count, None))


def find(predicate: Predicate[T], source: Optional[Iterable[T]],
         default: Optional[T] = None) -> Optional[T]:
    """the first item matching predicate, or default"""
    check_not_none(predicate, 'predicate')
    if source is None:
        return default
    return next(filter(predicate, source), default)


def min(source: Optional[Iterable[T]], comparator: Comparer[T] = natural_order) -> Optional[T]:
    """
    smallest item, None for a None or empty source.
    ties keep the earliest item; the default order treats None as smallest.
    """
    check_not_none(comparator, 'comparator')
    if source is None:
        return None
    return reduce(lambda a, b: a if comparator(a, b) <= 0 else b, source)


def max(source: Optional[Iterable[T]], comparator: Comparer[T] = natural_order) -> Optional[T]:
    """
    largest item, None for a None or empty source.
    ties keep the latest item; the default order treats None as smallest.
    """
    check_not_none(comparator, 'comparator')
    if source is None:
        return None
    return reduce(lambda a, b: a if comparator(a, b) > 0 else b, source)
