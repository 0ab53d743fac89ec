from __future__ import annotations
import typing
import numpy as np
import pandas as pd
from ..types import *
from ..errors import NotFoundError

if typing.TYPE_CHECKING:
    from ..sequence import QueryableSequence

# returned by _find when nothing qualifies; None is a legitimate element
_MISSING = object()

class _TerminalOperations(Generic[T]):
    def _find(self: 'QueryableSequence[T]', predicate: Optional[Predicate[T]]) -> Any:
        """first qualifying element, or _MISSING"""
        data = self._items
        if predicate is None:
            return data[0] if data else _MISSING
        for item in data:
            if predicate(item): return item
        return _MISSING

    def first(self: 'QueryableSequence[T]', predicate: Optional[Predicate[T]] = None) -> T:
        """get first element, or first element matching predicate"""
        found = self._find(predicate)
        if found is _MISSING:
            if predicate is None: raise NotFoundError("sequence contains no elements")
            raise NotFoundError("no element satisfies the condition in predicate")
        return found

    def first_or_default(self: 'QueryableSequence[T]', predicate: Optional[Predicate[T]] = None,
                         default: Optional[T] = None) -> Optional[T]:
        """get first element or default. errors raised by the predicate propagate."""
        found = self._find(predicate)
        return default if found is _MISSING else found

    def any(self: 'QueryableSequence[T]', predicate: Optional[Predicate[T]] = None) -> bool:
        """check if any element satisfies condition"""
        data = self._items
        if predicate is None: return len(data) > 0
        return any(predicate(x) for x in data)

    def count(self: 'QueryableSequence[T]') -> int:
        """number of elements currently held"""
        return len(self._items)

    def to_array(self: 'QueryableSequence[T]') -> List[T]:
        """snapshot copy of the elements as a plain list"""
        return list(self._items)


class TerminalAccessor(Generic[T]):
    """conversions out of a sequence, reached through `seq.to`"""

    def __init__(self, sequence_instance: 'QueryableSequence[T]'):
        self._sequence = sequence_instance

    def list(self) -> List[T]:
        """convert to list"""
        return self._sequence.to_array()

    def set(self) -> Set[T]:
        """convert to set"""
        return set(self._sequence._items)

    def dict(self, key_selector: KeySelector[T, K],
             value_selector: Optional[Selector[T, V]] = None) -> Dict[K, V]:
        """convert to dictionary"""
        val_sel = value_selector if value_selector else lambda item: item
        return {key_selector(item): val_sel(item) for item in self._sequence._items}

    def array(self) -> np.ndarray:
        """convert to numpy array"""
        return np.array(self._sequence._items)

    def pandas(self) -> pd.Series:
        """convert to pandas series"""
        return pd.Series(self._sequence._items)

    def df(self) -> pd.DataFrame:
        """convert to pandas dataframe"""
        return pd.DataFrame(self._sequence._items)
