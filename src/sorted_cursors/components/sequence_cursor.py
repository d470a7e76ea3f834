"""Reference cursors over already-sorted in-memory collections.

SequenceCursor works over any random-access sequence sorted under a
comparator. SortedListCursor and SortedDictCursor wrap the sortedcontainers
collections.
"""

from __future__ import annotations

from operator import itemgetter
from typing import TYPE_CHECKING, Any

from ..core.errors import InvalidPositionError, UnsortedInputError
from ..core.types import Position, SeekBias
from .comparator import DefaultComparator
from .lending import Lender, Loan

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from sortedcontainers import SortedDict, SortedList

    from ..interfaces.comparator import Comparator


def _identity(item: Any) -> Any:
    return item


def lower_bound(
    data: Sequence[Any], key: Callable[[Any], Any], comparator: Comparator, target: Any
) -> int:
    """Return the index of the first element whose key is >= target.

    Returns len(data) if every key is < target.
    """
    left, right = 0, len(data)
    while left < right:
        mid = (left + right) // 2
        if comparator.compare(key(data[mid]), target) < 0:
            left = mid + 1
        else:
            right = mid
    return left


def upper_bound(
    data: Sequence[Any], key: Callable[[Any], Any], comparator: Comparator, target: Any
) -> int:
    """Return the index of the first element whose key is > target.

    Returns len(data) if every key is <= target.
    """
    left, right = 0, len(data)
    while left < right:
        mid = (left + right) // 2
        if comparator.compare(key(data[mid]), target) > 0:
            right = mid
        else:
            left = mid + 1
    return left


class SequenceCursor(Lender):
    """Seekable lending cursor over a sorted sequence.

    The sequence is read in place; nothing is copied. It must not be mutated
    while the cursor is in use.

    Args:
        data: Random-access sequence, sorted under comparator by key
        key: Extracts the ordering key from an element (identity by default)
        comparator: Order of the sequence, used for validation only
        validate: If True, check the sequence is sorted on construction

    Raises:
        UnsortedInputError: If validate is set and the sequence is out of order
    """

    def __init__(
        self,
        data: Sequence[Any],
        key: Callable[[Any], Any] | None = None,
        comparator: Comparator | None = None,
        validate: bool = False,
    ):
        super().__init__()
        self._data = data
        self._key = key if key is not None else _identity
        self._position = Position.BEFORE_FIRST
        self._index = -1

        if validate:
            self._check_sorted(comparator if comparator is not None else DefaultComparator())

    def _check_sorted(self, comparator: Comparator) -> None:
        for i in range(1, len(self._data)):
            prev_key = self._key(self._data[i - 1])
            curr_key = self._key(self._data[i])
            if comparator.compare(prev_key, curr_key) > 0:
                raise UnsortedInputError(  # noqa: TRY003
                    f"Elements {i - 1} and {i} are out of order: {prev_key!r} > {curr_key!r}"
                )

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        where = self._position.name if self._position.is_sentinel else f"AT {self._index}"
        return f"<{type(self).__name__} len={len(self._data)} {where}>"

    @property
    def position(self) -> Position:
        return self._position

    def valid(self) -> bool:
        return self._position is Position.AT

    def _go_to(self, index: int) -> None:
        """Move to index, or the matching sentinel if index is out of range."""
        if index < 0:
            self._position = Position.BEFORE_FIRST
            self._index = -1
        elif index >= len(self._data):
            self._position = Position.AFTER_LAST
            self._index = -1
        else:
            self._position = Position.AT
            self._index = index

    def move_next(self) -> None:
        self._invalidate_loans()
        if not self._data:
            self._go_to(len(self._data))
        elif self._position is Position.AT:
            self._go_to(self._index + 1)
        else:
            # Both sentinels step forwards onto the first element
            self._go_to(0)

    def move_prev(self) -> None:
        self._invalidate_loans()
        if not self._data:
            self._go_to(-1)
        elif self._position is Position.AT:
            self._go_to(self._index - 1)
        else:
            self._go_to(len(self._data) - 1)

    def _current_item(self) -> Any:
        if self._position is not Position.AT:
            raise InvalidPositionError(  # noqa: TRY003
                f"No current element at {self._position.name}"
            )
        return self._data[self._index]

    def current(self) -> Loan[Any]:
        return self._lend(self._current_item())

    def current_key(self) -> Any:
        return self._key(self._current_item())

    def reset(self) -> None:
        self._invalidate_loans()
        self._go_to(-1)

    def seek(self, comparator: Comparator, target: Any, bias: SeekBias) -> None:
        self._invalidate_loans()
        if bias is SeekBias.GREATER_EQUAL:
            self._go_to(lower_bound(self._data, self._key, comparator, target))
        elif bias is SeekBias.GREATER:
            self._go_to(upper_bound(self._data, self._key, comparator, target))
        elif bias is SeekBias.LESS_EQUAL:
            self._go_to(upper_bound(self._data, self._key, comparator, target) - 1)
        else:
            self._go_to(lower_bound(self._data, self._key, comparator, target) - 1)

    def seek_to_first(self) -> None:
        self._invalidate_loans()
        self._go_to(0)

    def seek_to_last(self) -> None:
        self._invalidate_loans()
        self._go_to(len(self._data) - 1)

    def close(self) -> None:
        """Drop the reference to the underlying sequence."""
        self._invalidate_loans()
        self._data = ()
        self._go_to(-1)


class SortedListCursor(SequenceCursor):
    """Cursor over a sortedcontainers SortedList or SortedKeyList.

    The list's own key function (if any) is the ordering key.
    """

    def __init__(self, sorted_list: SortedList):
        super().__init__(sorted_list, key=getattr(sorted_list, "key", None))


class SortedDictCursor(SequenceCursor):
    """Cursor over a sortedcontainers SortedDict, lending (key, value) pairs."""

    def __init__(self, sorted_dict: SortedDict):
        super().__init__(sorted_dict.items(), key=itemgetter(0))
