from __future__ import annotations
import typing
from collections import defaultdict
from ..types import *

if typing.TYPE_CHECKING:
    from ..sequence import QueryableSequence

class _GroupingOperations(Generic[T]):
    def group_by(self: 'QueryableSequence[T]', key_selector: KeySelector[T, K]) -> Dict[K, List[T]]:
        """group elements by a key. keys appear in order of first occurrence."""
        groups = defaultdict(list)
        for item in self._items:
            groups[key_selector(item)].append(item)
        return dict(groups)
