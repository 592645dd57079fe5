from __future__ import annotations
import typing
from ..types import *
from ..comparators import natural_order

if typing.TYPE_CHECKING:
    from ..lazy import LazyIterable


class _CoreOperations(Generic[T]):
    # each of these is a thin method form of the function in iterfold.functions,
    # with self as the source

    def select(self: 'LazyIterable[T]', selector: Selector[T, U]) -> 'LazyIterable[U]':
        """project each element to a new form"""
        from .. import functions
        return functions.select(selector, self)

    def where(self: 'LazyIterable[T]', predicate: Predicate[T]) -> 'LazyIterable[T]':
        """filter elements based on a predicate"""
        from .. import functions
        return functions.where(predicate, self)

    def sort(self: 'LazyIterable[T]', comparator: Comparer[T] = natural_order) -> 'LazyIterable[T]':
        """stable sort by comparator, natural order by default"""
        from .. import functions
        return functions.sort(self, comparator)

    def zip_with(self: 'LazyIterable[T]', other: Optional[Iterable[U]],
                 combine: Callable[[T, U], V]) -> 'LazyIterable[V]':
        """zip with another sequence through combine, stopping at the shorter"""
        from .. import functions
        return functions.zip_with(combine, self, other)

    def skip(self: 'LazyIterable[T]', count: int) -> 'LazyIterable[T]':
        """skip the first 'count' elements"""
        from .. import functions
        return functions.skip(self, count)
