"""Unit tests for the reference sequence cursors."""

import pytest
from sortedcontainers import SortedDict, SortedKeyList, SortedList

from sorted_cursors.components.comparator import DefaultComparator, KeyComparator
from sorted_cursors.components.sequence_cursor import (
    SequenceCursor,
    SortedDictCursor,
    SortedListCursor,
    lower_bound,
    upper_bound,
)
from sorted_cursors.core.errors import InvalidPositionError, UnsortedInputError
from sorted_cursors.core.types import Position, SeekBias


CMP = DefaultComparator()


@pytest.fixture
def cursor():
    """Create a cursor over five sorted integers."""
    return SequenceCursor([10, 20, 30, 40, 50])


def test_cursor_starts_before_first(cursor):
    """Test the initial position is the BEFORE_FIRST sentinel."""
    assert cursor.position is Position.BEFORE_FIRST
    assert not cursor.valid()


def test_current_on_sentinel_raises(cursor):
    """Test that current() fails on both sentinels."""
    with pytest.raises(InvalidPositionError):
        cursor.current()
    with pytest.raises(InvalidPositionError):
        cursor.current_key()

    cursor.seek_to_last()
    cursor.move_next()
    assert cursor.position is Position.AFTER_LAST
    with pytest.raises(InvalidPositionError):
        cursor.current()


def test_forward_circularity(cursor):
    """Test n+1 steps reach AFTER_LAST and one more wraps to the first element."""
    seen = []
    for _ in range(5):
        cursor.move_next()
        seen.append(cursor.current().get())

    assert seen == [10, 20, 30, 40, 50]

    cursor.move_next()
    assert cursor.position is Position.AFTER_LAST

    cursor.move_next()
    assert cursor.position is Position.AT
    assert cursor.current().get() == 10


def test_backward_circularity(cursor):
    """Test the mirror of forward circularity."""
    seen = []
    for _ in range(5):
        cursor.move_prev()
        seen.append(cursor.current().get())

    assert seen == [50, 40, 30, 20, 10]

    cursor.move_prev()
    assert cursor.position is Position.BEFORE_FIRST

    cursor.move_prev()
    assert cursor.current().get() == 50


def test_forward_backward_symmetry(cursor):
    """Test that k steps forwards then k back return to the start."""
    cursor.seek(CMP, 20, SeekBias.GREATER_EQUAL)

    for steps in range(0, 4):
        for _ in range(steps):
            cursor.move_next()
        for _ in range(steps):
            cursor.move_prev()
        assert cursor.current().get() == 20

    cursor.seek_to_last()
    cursor.move_next()
    cursor.move_prev()
    assert cursor.current().get() == 50


def test_empty_cursor_stays_on_sentinels():
    """Test that an empty collection never yields an element."""
    cursor = SequenceCursor([])

    cursor.move_next()
    assert cursor.position is Position.AFTER_LAST
    cursor.move_next()
    assert cursor.position is Position.AFTER_LAST
    cursor.move_prev()
    assert cursor.position is Position.BEFORE_FIRST

    cursor.seek_to_first()
    assert not cursor.valid()
    cursor.seek_to_last()
    assert not cursor.valid()


@pytest.mark.parametrize(
    "target,bias,expected",
    [
        (30, SeekBias.GREATER_EQUAL, 30),
        (30, SeekBias.GREATER, 40),
        (30, SeekBias.LESS_EQUAL, 30),
        (30, SeekBias.LESS, 20),
        (25, SeekBias.GREATER_EQUAL, 30),
        (25, SeekBias.GREATER, 30),
        (25, SeekBias.LESS_EQUAL, 20),
        (25, SeekBias.LESS, 20),
        (5, SeekBias.GREATER_EQUAL, 10),
        (55, SeekBias.LESS, 50),
    ],
)
def test_seek_bias_table(cursor, target, bias, expected):
    """Test each seek bias against hits and misses inside the range."""
    cursor.seek(CMP, target, bias)

    assert cursor.valid()
    assert cursor.current().get() == expected


@pytest.mark.parametrize(
    "target,bias,expected",
    [
        (50, SeekBias.GREATER, Position.AFTER_LAST),
        (60, SeekBias.GREATER_EQUAL, Position.AFTER_LAST),
        (10, SeekBias.LESS, Position.BEFORE_FIRST),
        (5, SeekBias.LESS_EQUAL, Position.BEFORE_FIRST),
    ],
)
def test_seek_miss_lands_on_sentinel(cursor, target, bias, expected):
    """Test that unsatisfiable seeks land on the bias's sentinel."""
    cursor.seek(CMP, target, bias)

    assert cursor.position is expected


@pytest.mark.parametrize("bias", list(SeekBias))
def test_seek_on_empty_collection(bias):
    """Test that seeking an empty collection always yields a sentinel."""
    cursor = SequenceCursor([])

    cursor.seek(CMP, 1, bias)

    assert cursor.position is bias.miss_position


def test_seek_matches_linear_scan():
    """Test seek against a brute-force scan over every target and bias."""
    data = [1, 3, 3, 3, 7, 9, 9, 12]
    cursor = SequenceCursor(data)

    for target in range(0, 14):
        expected = {
            SeekBias.GREATER_EQUAL: next((i for i, v in enumerate(data) if v >= target), None),
            SeekBias.GREATER: next((i for i, v in enumerate(data) if v > target), None),
            SeekBias.LESS_EQUAL: max((i for i, v in enumerate(data) if v <= target), default=None),
            SeekBias.LESS: max((i for i, v in enumerate(data) if v < target), default=None),
        }
        for bias, index in expected.items():
            cursor.seek(CMP, target, bias)
            if index is None:
                assert cursor.position is bias.miss_position
            else:
                assert cursor._index == index


def test_seek_with_order_compatible_probe():
    """Test seeking records by a bare key with a mixed-type comparator."""
    records = [(1, "a"), (4, "b"), (9, "c")]
    cursor = SequenceCursor(records, key=lambda rec: rec[0])

    cursor.seek(CMP, 5, SeekBias.GREATER_EQUAL)

    assert cursor.current().get() == (9, "c")
    assert cursor.current_key() == 9


def test_validate_rejects_unsorted_input():
    """Test sortedness validation on construction."""
    with pytest.raises(UnsortedInputError):
        SequenceCursor([1, 3, 2], validate=True)

    SequenceCursor([1, 2, 2, 3], validate=True)
    SequenceCursor([3, 2, 1], comparator=KeyComparator(lambda x: -x), validate=True)


def test_bounds_helpers():
    """Test the binary-search helpers directly."""
    data = [1, 2, 2, 2, 5]
    ident = lambda x: x  # noqa: E731

    assert lower_bound(data, ident, CMP, 2) == 1
    assert upper_bound(data, ident, CMP, 2) == 4
    assert lower_bound(data, ident, CMP, 6) == 5
    assert upper_bound(data, ident, CMP, 0) == 0


def test_close_drops_collection(cursor):
    """Test that close parks the cursor on an empty view."""
    cursor.seek_to_first()
    cursor.close()

    assert len(cursor) == 0
    assert cursor.position is Position.BEFORE_FIRST
    cursor.move_next()
    assert not cursor.valid()


def test_sorted_list_cursor():
    """Test a cursor over a sortedcontainers SortedList."""
    cursor = SortedListCursor(SortedList([5, 1, 3]))

    cursor.seek(CMP, 2, SeekBias.GREATER_EQUAL)
    assert cursor.current().get() == 3

    cursor.move_next()
    assert cursor.current().get() == 5


def test_sorted_key_list_cursor_uses_list_key():
    """Test that a SortedKeyList's key function orders the cursor."""
    words = SortedKeyList(["ccc", "a", "bb"], key=len)
    cursor = SortedListCursor(words)

    cursor.seek(CMP, 2, SeekBias.LESS_EQUAL)

    assert cursor.current().get() == "bb"
    assert cursor.current_key() == 2


def test_sorted_dict_cursor_lends_pairs():
    """Test a cursor over a SortedDict lends (key, value) pairs."""
    data = SortedDict({b'key2': b'value2', b'key1': b'value1', b'key3': b'value3'})
    cursor = SortedDictCursor(data)

    cursor.seek(CMP, b'key2', SeekBias.GREATER)

    assert cursor.current().get() == (b'key3', b'value3')
    assert cursor.current_key() == b'key3'


def test_seek_with_int_returning_comparator():
    """Test seeking with a comparator that returns plain ints."""

    class Plain:
        def compare(self, a, b):
            return (a > b) - (a < b)

    cursor = SequenceCursor([10, 20, 30])

    cursor.seek(Plain(), 20, SeekBias.GREATER)
    assert cursor.current_key() == 30
    cursor.seek(Plain(), 20, SeekBias.LESS)
    assert cursor.current_key() == 10
    cursor.seek(Plain(), 25, SeekBias.LESS_EQUAL)
    assert cursor.current_key() == 20
