from __future__ import annotations
import typing
from ..types import *

if typing.TYPE_CHECKING:
    from ..sequence import QueryableSequence

class _SetOperations(Generic[T]):
    """
    deduplication over a sequence.
    distinct() compares elements by value; distinct_by() compares derived keys.
    """

    def distinct(self: 'QueryableSequence[T]') -> 'QueryableSequence[T]':
        """return distinct elements. preserves order of first appearance."""
        from ..sequence import QueryableSequence
        data = self._items
        optimized = self._try_numpy_optimization(data, 'distinct')
        if optimized is not None: return QueryableSequence._adopt(optimized)
        try:
            # ordered dicts make fromkeys an order-preserving unique filter
            return QueryableSequence._adopt(list(dict.fromkeys(data)))
        except TypeError:
            # unhashable elements (dicts, lists) fall back to a linear equality scan
            unique = []
            for item in data:
                if item not in unique:
                    unique.append(item)
            return QueryableSequence._adopt(unique)

    def distinct_by(self: 'QueryableSequence[T]', key_selector: KeySelector[T, K]) -> 'QueryableSequence[T]':
        """
        return one element per distinct key.
        the last element seen for a key wins, but it sits where that key first appeared.
        ex: [a1, b1, a2] by letter -> [a2, b1]
        """
        from ..sequence import QueryableSequence
        return QueryableSequence._adopt(list({key_selector(item): item for item in self._items}.values()))
