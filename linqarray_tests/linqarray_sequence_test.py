import logging
import suite
from linqarray import QueryableSequence, wrap, as_linq, Q, empty, from_range

test = suite.test
assert_that = suite.assert_that
assert_raises = suite.assert_raises

fruits = [
    {'id': 1, 'icon': 'lemon', 'color': 'yellow'},
    {'id': 2, 'icon': 'apple', 'color': 'red'},
    {'id': 3, 'icon': 'banana', 'color': 'yellow'},
    {'id': 4, 'icon': 'peach', 'color': 'orange'},
    {'id': 5, 'icon': 'tangerine', 'color': 'orange'},
]


class _Capture(logging.Handler):
    def __init__(self):
        super().__init__(level=logging.DEBUG)
        self.records = []

    def emit(self, record):
        self.records.append(record)


# --- construction ---

@test("a new sequence starts empty")
def test_new_sequence_is_empty():
    seq = QueryableSequence()
    assert_that(isinstance(seq, QueryableSequence), "should be a QueryableSequence")
    assert_that(seq.count() == 0, "count of a new sequence should be 0")
    assert_that(len(seq) == 0, "len of a new sequence should be 0")
    assert_that(not seq, "an empty sequence should be falsy")


@test("wrap copies the source without aliasing it")
def test_wrap_copies_source():
    source = list(fruits)
    seq = wrap(source)
    assert_that(isinstance(seq, QueryableSequence), "wrap should return a QueryableSequence")
    assert_that(seq == source, "wrapped sequence should equal its source")

    seq.add({'id': 6, 'icon': 'grape', 'color': 'purple'})
    assert_that(len(source) == 5, "adding to the wrapped sequence must not touch the source")

    source.append({'id': 7, 'icon': 'kiwi', 'color': 'green'})
    assert_that(seq.count() == 6, "appending to the source must not touch the wrapped sequence")


@test("wrap accepts any iterable")
def test_wrap_iterables():
    assert_that(wrap(x * 2 for x in range(3)) == [0, 2, 4], "generators should be materialized")
    assert_that(wrap((1, 2)) == [1, 2], "tuples should be accepted")
    assert_that(wrap('ab') == ['a', 'b'], "strings iterate per character")


@test("factory aliases and helpers")
def test_factory_aliases():
    assert_that(as_linq is wrap and Q is wrap, "as_linq and Q should alias wrap")
    assert_that(empty() == [], "empty() should be empty")
    assert_that(from_range(3, 4) == [3, 4, 5, 6], "from_range should count up from start")
    assert_that(from_range(0, 0) == [], "from_range with count 0 should be empty")


# --- mutation ---

@test("add appends a single item at the end")
def test_add():
    seq = QueryableSequence()
    seq.add(fruits[0])
    seq.add(fruits[1])
    assert_that(seq == [fruits[0], fruits[1]], "items should be appended in order")
    assert_that(fruits[0] in seq, "added item should be contained")


@test("add_range appends all items in order")
def test_add_range():
    seq = wrap([fruits[0]])
    result = seq.add_range(fruits[1:3])
    assert_that(result is None, "add_range should not return a value")
    assert_that(seq == fruits[:3], "items should follow the existing ones in order")

    seq.add_range([])
    assert_that(seq.count() == 3, "adding an empty range should change nothing")


@test("add_range of itself appends a snapshot")
def test_add_range_self():
    seq = wrap([1, 2])
    seq.add_range(seq)
    assert_that(seq == [1, 2, 1, 2], "self add_range should double the contents once")


# --- container protocol ---

@test("indexing reads and writes elements")
def test_indexing():
    seq = wrap([10, 20, 30])
    assert_that(seq[0] == 10 and seq[-1] == 30, "positive and negative indices should work")
    seq[1] = 25
    assert_that(seq == [10, 25, 30], "assignment should replace the element")
    assert_raises(IndexError, lambda: seq[3], "out of range index should raise IndexError")


@test("slicing returns a new independent sequence")
def test_slicing():
    seq = wrap([1, 2, 3, 4])
    part = seq[1:3]
    assert_that(isinstance(part, QueryableSequence), "a slice should be a QueryableSequence")
    assert_that(part == [2, 3], "slice contents should match list slicing")
    part.add(99)
    assert_that(seq == [1, 2, 3, 4], "mutating the slice must not touch the receiver")


@test("equality compares element-wise")
def test_equality():
    assert_that(wrap([1, 2]) == wrap([1, 2]), "equal sequences should compare equal")
    assert_that(wrap([1, 2]) != wrap([2, 1]), "order should matter")
    assert_that(wrap([1, 2]) == [1, 2], "a sequence should equal a list with the same items")
    assert_that(wrap([1, 2]) != (1, 2), "tuples are not compared")
    assert_raises(TypeError, lambda: hash(wrap([1])), "sequences are mutable and unhashable")


@test("iteration and repr")
def test_iteration_and_repr():
    seq = wrap(['a', 'b'])
    assert_that(list(seq) == ['a', 'b'], "iteration should yield items in order")
    assert_that(repr(seq) == "QueryableSequence(['a', 'b'])", f"unexpected repr: {seq!r}")


# --- log ---

@test("log emits the contents and returns the receiver")
def test_log():
    capture = _Capture()
    logger = logging.getLogger('linqarray.sequence')
    previous = logger.level
    logger.addHandler(capture)
    logger.setLevel(logging.DEBUG)
    try:
        seq = wrap([1, 2, 3])
        returned = seq.log()
        seq.where(lambda x: x > 1).log(logging.INFO, label="filtered")
    finally:
        logger.removeHandler(capture)
        logger.setLevel(previous)

    assert_that(returned is seq, "log should return the same instance")
    assert_that(len(capture.records) == 2, f"expected 2 records, got {len(capture.records)}")
    assert_that(capture.records[0].getMessage() == "QueryableSequence([1, 2, 3])", "first record should be the repr")
    assert_that(capture.records[1].levelno == logging.INFO, "level should be honoured")
    assert_that(capture.records[1].getMessage() == "filtered: QueryableSequence([2, 3])", "label should prefix the repr")


if __name__ == "__main__":
    suite.run(title="linqarray sequence test")
