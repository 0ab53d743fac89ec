from __future__ import annotations
import typing
from ..types import *

if typing.TYPE_CHECKING:
    from ..sequence import QueryableSequence

class _CoreOperations(Generic[T]):
    def select(self: 'QueryableSequence[T]', selector: Selector[T, U]) -> 'QueryableSequence[U]':
        """project each element to a new form"""
        from ..sequence import QueryableSequence
        return QueryableSequence._adopt([selector(x) for x in self._items])

    def where(self: 'QueryableSequence[T]', predicate: Predicate[T]) -> 'QueryableSequence[T]':
        """filter elements based on a predicate"""
        from ..sequence import QueryableSequence
        return QueryableSequence._adopt([x for x in self._items if predicate(x)])

    def select_many(self: 'QueryableSequence[T]', selector: Selector[T, Iterable[U]]) -> 'QueryableSequence[U]':
        """project each element to a sequence and flatten one level"""
        from ..sequence import QueryableSequence
        return QueryableSequence._adopt([item for x in self._items for item in selector(x)])

    def order_by(self: 'QueryableSequence[T]', key_selector: KeySelector[T, K]) -> 'QueryableSequence[T]':
        """
        sort the receiver in place by a key, ascending, and return it.
        list.sort is stable, so equal keys keep their relative order.
        """
        self._items.sort(key=key_selector)
        return self

    def order_by_descending(self: 'QueryableSequence[T]', key_selector: KeySelector[T, K]) -> 'QueryableSequence[T]':
        """sort the receiver in place by a key, descending, and return it"""
        # reverse=True keeps the sort stable, unlike sorting then reversing
        self._items.sort(key=key_selector, reverse=True)
        return self

    def take(self: 'QueryableSequence[T]', count: int) -> 'QueryableSequence[T]':
        """take the first 'count' elements"""
        from ..sequence import QueryableSequence
        # a negative stop would slice from the end
        return QueryableSequence._adopt(self._items[:max(count, 0)])

    def skip(self: 'QueryableSequence[T]', count: int) -> 'QueryableSequence[T]':
        """skip the first 'count' elements"""
        from ..sequence import QueryableSequence
        return QueryableSequence._adopt(self._items[max(count, 0):])
