from __future__ import annotations
import typing
import numpy as np
from ..types import *
from ..comparators import natural_order

if typing.TYPE_CHECKING:
    from ..lazy import LazyIterable


class TerminalAccessor(Generic[T]):
    """eager operations; each call traverses the sequence once"""

    def __init__(self, lazy_instance: 'LazyIterable[T]'):
        self._lazy = lazy_instance

    def list(self) -> List[T]:
        """convert to list"""
        return list(self._lazy)

    def tuple(self) -> Tuple[T, ...]:
        """convert to tuple"""
        return tuple(self._lazy)

    def array(self) -> np.ndarray:
        """convert to numpy array"""
        return np.array(list(self._lazy))

    def count(self, predicate: Optional[Predicate[T]] = None) -> int:
        """count elements"""
        if predicate is None: return sum(1 for _ in self._lazy)
        return sum(1 for x in self._lazy if predicate(x))

    def first_or_none(self) -> Optional[T]:
        from .. import functions
        return functions.first_or_none(self._lazy)

    def element_at_or_default(self, index: int, default: Optional[T] = None) -> Optional[T]:
        from .. import functions
        return functions.element_at_or_default(self._lazy, index, default)

    def find(self, predicate: Predicate[T], default: Optional[T] = None) -> Optional[T]:
        from .. import functions
        return functions.find(predicate, self._lazy, default)

    def reduce(self, accumulator: Accumulator[Any, T], *initial: Any) -> Any:
        """left fold; pass a seed as the second argument for the seeded form"""
        from .. import functions
        return functions.reduce(accumulator, self._lazy, *initial)

    def min(self, comparator: Comparer[T] = natural_order) -> Optional[T]:
        from .. import functions
        return functions.min(self._lazy, comparator)

    def max(self, comparator: Comparer[T] = natural_order) -> Optional[T]:
        from .. import functions
        return functions.max(self._lazy, comparator)
