from __future__ import annotations

from .types import *

# --- fluent operations ---
from .extensions.core import _CoreOperations

# --- accessors ---
from .extensions.terminal import TerminalAccessor


class LazyIterable(_CoreOperations[T]):
    """
    a restartable, non-memoizing lazy sequence.

    wraps a zero-argument function that produces a fresh iterable. every call to
    __iter__ invokes it again, so each traversal re-runs the whole pipeline
    against the current state of its sources. materialize with .to.list() when
    a stable snapshot is needed.
    """

    def __init__(self, iter_func: Callable[[], Iterable[T]]):
        self._iter_func = iter_func
        self.to = TerminalAccessor(self)

    def __iter__(self) -> Iterator[T]:
        return iter(self._iter_func())

    def __repr__(self) -> str:
        return f"LazyIterable({self._iter_func!r})"


_EMPTY = ()


def empty() -> LazyIterable[Any]:
    """the canonical empty result"""
    return LazyIterable(lambda: _EMPTY)


def from_iterable(data: Optional[Iterable[T]]) -> LazyIterable[T]:
    """wrap an iterable without copying it; None becomes empty"""
    if data is None:
        return empty()
    return LazyIterable(lambda: data)


# --- aliases ---
P = from_iterable
