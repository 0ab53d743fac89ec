from typing import (
    TypeVar, Generic, Callable, Iterator, Iterable, Any, Optional,
    Dict, List, Set
)

T = TypeVar('T')
U = TypeVar('U')
K = TypeVar('K')
V = TypeVar('V')

Predicate = Callable[[T], bool]
Selector = Callable[[T], U]
KeySelector = Callable[[T], K]
