"""Python generators over cursors: full traversals and range scans."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ..core.types import SeekBias
from .lending import unwrap

if TYPE_CHECKING:
    from collections.abc import Iterator

    from ..interfaces.comparator import Comparator
    from ..interfaces.seekable import SeekableLendingIterator


def iter_items(cursor: SeekableLendingIterator, reverse: bool = False) -> Iterator[Any]:
    """Yield every element of cursor from one end to the other.

    The cursor is repositioned first and finishes on the sentinel past the
    last element yielded.
    """
    if reverse:
        cursor.seek_to_last()
        while cursor.valid():
            yield unwrap(cursor.current())
            cursor.move_prev()
    else:
        cursor.seek_to_first()
        while cursor.valid():
            yield unwrap(cursor.current())
            cursor.move_next()


def iter_range(
    cursor: SeekableLendingIterator,
    comparator: Comparator,
    start: Any | None = None,
    end: Any | None = None,
    reverse: bool = False,
) -> Iterator[Any]:
    """Yield elements whose keys lie in [start, end).

    Args:
        cursor: Seekable cursor to scan
        comparator: Order of the cursor's keys
        start: Start key (inclusive), or None for beginning
        end: End key (exclusive), or None for end
        reverse: If True, yield from the high end down
    """
    if reverse:
        if end is None:
            cursor.seek_to_last()
        else:
            cursor.seek(comparator, end, SeekBias.LESS)
        while cursor.valid():
            if start is not None and comparator.compare(cursor.current_key(), start) < 0:
                break
            yield unwrap(cursor.current())
            cursor.move_prev()
    else:
        if start is None:
            cursor.seek_to_first()
        else:
            cursor.seek(comparator, start, SeekBias.GREATER_EQUAL)
        while cursor.valid():
            if end is not None and comparator.compare(cursor.current_key(), end) >= 0:
                break
            yield unwrap(cursor.current())
            cursor.move_next()
