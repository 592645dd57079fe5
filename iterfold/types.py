from typing import (
    TypeVar, Generic, Callable, Iterator, Iterable, Any, Optional, List, Tuple
)

T = TypeVar('T')
U = TypeVar('U')
A = TypeVar('A')
B = TypeVar('B')
R = TypeVar('R')
V = TypeVar('V')

Predicate = Callable[[T], bool]
Selector = Callable[[T], U]
KeySelector = Callable[[T], Any]
Comparer = Callable[[T, T], int]
Accumulator = Callable[[U, T], U]

# a two-argument function; any plain callable or closure will do
Function2 = Callable[[A, B], R]
