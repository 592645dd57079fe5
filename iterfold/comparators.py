"""
comparators for python values.

these order data for the library's own operations; None always sorts first,
which is not necessarily what a report shown to a user wants.
"""
from .types import *
from .errors import check_not_none


def natural_order(a: Optional[T], b: Optional[T]) -> int:
    """
    three-way comparison using the values' own ordering.
    None is smaller than any present value, and two Nones are equal.
    """
    if a is b:
        return 0
    if a is None:
        return -1
    if b is None:
        return 1
    # rich comparisons only; works for anything defining < and >
    return (a > b) - (a < b)


def from_comparable() -> Comparer[T]:
    """the natural-order comparator, the default wherever none is supplied"""
    return natural_order


def by_key(key_selector: KeySelector[T], comparator: Comparer[Any] = natural_order) -> Comparer[T]:
    """compare items by a derived key"""
    check_not_none(key_selector, 'key_selector')
    check_not_none(comparator, 'comparator')

    def compare(a: T, b: T) -> int:
        return comparator(key_selector(a), key_selector(b))
    return compare


def reverse(comparator: Comparer[T]) -> Comparer[T]:
    """invert a comparator"""
    check_not_none(comparator, 'comparator')
    return lambda a, b: comparator(b, a)
