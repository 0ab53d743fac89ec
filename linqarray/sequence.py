from __future__ import annotations

import logging

import numpy as np
from .types import *

# --- operation mixins ---
from .extensions.core import _CoreOperations
from .extensions.set import _SetOperations
from .extensions.grouping import _GroupingOperations
from .extensions.terminal import _TerminalOperations

# --- accessors ---
from .extensions.terminal import TerminalAccessor

logger = logging.getLogger(__name__)

# sequences shorter than this never take the numpy path
NUMPY_MIN_SIZE = 1000

# --- base container ---

class _BaseSequence(Generic[T]):
    """list-backed storage plus the container protocol. holds a list rather than being one."""

    def __init__(self, items: Optional[Iterable[T]] = None):
        self._items: List[T] = list(items) if items is not None else []

    @classmethod
    def _adopt(cls, items: List[T]):
        """wrap a freshly built list without copying it again"""
        seq = cls()
        seq._items = items
        return seq

    def add(self, item: T) -> None:
        """append an item at the end"""
        self._items.append(item)

    def add_range(self, items: Iterable[T]) -> None:
        """append every item, in order, at the end"""
        # snapshot first so seq.add_range(seq) terminates
        self._items.extend(list(items))

    def _try_numpy_optimization(self, data: List[T], operation: str) -> Optional[List[T]]:
        """try to answer an operation with numpy for large homogeneous numeric data."""
        if operation != 'distinct' or len(data) < NUMPY_MIN_SIZE:
            return None
        # exact type check: bools are ints but must not be folded into 1/0
        kind = type(data[0])
        if kind not in (int, float) or not all(type(x) is kind for x in data):
            return None
        try:
            arr = np.array(data)
            if arr.dtype.kind not in 'if':
                return None
            if arr.dtype.kind == 'f' and np.isnan(arr).any():
                return None
            _, first_index = np.unique(arr, return_index=True)
            first_index.sort()
            return [data[i] for i in first_index]
        except (TypeError, ValueError, OverflowError) as e:
            logger.debug("numpy %s skipped, falling back: %s", operation, e)
            return None

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, item: Any) -> bool:
        return item in self._items

    def __getitem__(self, index):
        if isinstance(index, slice):
            return type(self)._adopt(self._items[index])
        return self._items[index]

    def __setitem__(self, index: int, value: T) -> None:
        self._items[index] = value

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, _BaseSequence):
            return self._items == other._items
        if isinstance(other, list):
            return self._items == other
        return NotImplemented

    __hash__ = None

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r})"

# --- main sequence class ---

class QueryableSequence(
    _BaseSequence[T],
    _CoreOperations[T],
    _SetOperations[T],
    _GroupingOperations[T],
    _TerminalOperations[T]
):
    """an ordered, mutable sequence with linq-style query operations."""

    def __init__(self, items: Optional[Iterable[T]] = None):
        super().__init__(items)
        # --- initialize accessors ---
        self.to = TerminalAccessor(self)

    def log(self, level: int = logging.DEBUG, label: Optional[str] = None) -> 'QueryableSequence[T]':
        """log the current contents and return self, for inspecting a chain midway"""
        if label:
            logger.log(level, "%s: %r", label, self)
        else:
            logger.log(level, "%r", self)
        return self
