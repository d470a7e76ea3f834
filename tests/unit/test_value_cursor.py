"""Unit tests for the by-value cursor adapter."""

import pytest

from sorted_cursors.components.comparator import DefaultComparator
from sorted_cursors.components.merging import MergingIter
from sorted_cursors.components.sequence_cursor import SequenceCursor
from sorted_cursors.components.value_cursor import ValueCursor
from sorted_cursors.core.errors import InvalidPositionError
from sorted_cursors.core.types import Position, SeekBias


def test_value_cursor_is_python_iterator():
    """Test iterating a cursor with a for-loop."""
    cursor = ValueCursor(SequenceCursor([1, 2, 3]))

    assert list(cursor) == [1, 2, 3]
    assert cursor.position is Position.AFTER_LAST


def test_value_cursor_is_not_fused():
    """Test that iterating again after exhaustion wraps around."""
    cursor = ValueCursor(SequenceCursor([1, 2]))
    list(cursor)

    assert next(cursor) == 1
    assert list(cursor) == [2]


def test_prev_and_current():
    """Test backward steps returning values or None."""
    cursor = ValueCursor(SequenceCursor(["a", "b"]))

    assert cursor.prev() == "b"
    assert cursor.current() == "b"
    assert cursor.prev() == "a"
    assert cursor.prev() is None

    with pytest.raises(InvalidPositionError):
        cursor.current()


def test_values_stay_usable_after_moving():
    """Test that returned values are not loans."""
    cursor = ValueCursor(SequenceCursor([b'x', b'y']))

    first = next(cursor)
    second = next(cursor)

    assert (first, second) == (b'x', b'y')


def test_seek_through_value_cursor():
    """Test seek delegation over a merged source."""
    merged = MergingIter([SequenceCursor([1, 4]), SequenceCursor([2, 3])])
    cursor = ValueCursor(merged)

    cursor.seek(DefaultComparator(), 2, SeekBias.GREATER)

    assert cursor.valid()
    assert cursor.current() == 3
    assert cursor.current_key() == 3
    assert list(cursor) == [4]
