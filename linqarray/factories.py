from .types import *
from .sequence import QueryableSequence

def wrap(items: Iterable[T]) -> QueryableSequence[T]:
    """copy an iterable into a new sequence. the source is left untouched."""
    return QueryableSequence(items)

def empty() -> QueryableSequence[Any]:
    """create empty sequence"""
    return QueryableSequence()

def from_range(start: int, count: int) -> QueryableSequence[int]:
    """create sequence of 'count' consecutive ints starting at 'start'"""
    return QueryableSequence(range(start, start + count))

# --- aliases ---
as_linq = wrap
Q = wrap
