"""K-way merging iterator over seekable lending cursors.

Merges several sorted, circular sources into one sorted, circular stream
without copying or materializing any of them.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import TYPE_CHECKING, Any

from ..core.errors import InvalidPositionError
from ..core.types import Position, SeekBias
from .comparator import DefaultComparator
from .lending import Lender, Loan, unwrap

if TYPE_CHECKING:
    from collections.abc import Iterable

    from ..interfaces.comparator import Comparator
    from ..interfaces.seekable import SeekableLendingIterator

logger = logging.getLogger(__name__)


class Direction(Enum):
    """Direction the merge last iterated in."""

    FORWARDS = "forwards"
    BACKWARDS = "backwards"


class MergingIter(Lender):
    """Sorted union of several seekable lending cursors.

    The union is not de-duplicated: every element of every source appears.
    Among equal keys, forward iteration visits the lowest source index first
    and backward iteration visits the highest first, so a full backward pass
    is the exact reverse of a full forward pass.

    The merge owns its sources. close() closes every source that has a
    close method.

    Switching between move_next and move_prev re-seeks the other sources
    past (or before) the current element in (key, source index) order, so
    elements with equal keys are never skipped and k steps one way followed
    by k steps back return to the same element. The methods that set the
    direction are:

    - forwards: move_next, seek with GREATER_EQUAL or GREATER, seek_to_first, reset
    - backwards: move_prev, seek with LESS_EQUAL or LESS, seek_to_last

    Args:
        iterators: Sources, each sorted under comparator
        comparator: Order shared by all sources (natural order by default)

    Invariants:
        - Either no source is current and no source is valid, or the current
          source is valid
        - Moving forwards, every other source is at the first element after
          the current one in (key, source index) order, or past its end;
          moving backwards, at the last element before it or before its start
    """

    def __init__(
        self,
        iterators: Iterable[SeekableLendingIterator],
        comparator: Comparator | None = None,
    ):
        super().__init__()
        self._iterators: list[SeekableLendingIterator] = list(iterators)
        self._cmp: Comparator = comparator if comparator is not None else DefaultComparator()
        self._current: int | None = None
        self._direction = Direction.FORWARDS
        self._sentinel = Position.BEFORE_FIRST

        logger.debug(f"Created MergingIter over {len(self._iterators)} sources")

    def __enter__(self) -> MergingIter:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def __repr__(self) -> str:
        return (
            f"<MergingIter sources={len(self._iterators)} "
            f"current={self._current} {self._direction.value}>"
        )

    @property
    def comparator(self) -> Comparator:
        return self._cmp

    @property
    def sources(self) -> tuple[SeekableLendingIterator, ...]:
        return tuple(self._iterators)

    @property
    def current_source(self) -> int | None:
        """Index of the source holding the current element, if any."""
        return self._current

    @property
    def direction(self) -> Direction:
        return self._direction

    @property
    def position(self) -> Position:
        if self._current is not None:
            return Position.AT

        positions = {it.position for it in self._iterators}
        if len(positions) == 1:
            return positions.pop()
        if positions:
            # Sources disagree on their sentinel; correct circular sources never do
            logger.debug(f"MergingIter sources on mixed sentinels {positions}")
        return self._sentinel

    def valid(self) -> bool:
        return self._current is not None

    def current(self) -> Loan[Any]:
        if self._current is None:
            raise InvalidPositionError(  # noqa: TRY003
                f"No current element at {self.position.name}"
            )
        return self._lend(unwrap(self._iterators[self._current].current()))

    def current_key(self) -> Any:
        if self._current is None:
            raise InvalidPositionError(  # noqa: TRY003
                f"No current element at {self.position.name}"
            )
        return self._iterators[self._current].current_key()

    def _find_smallest(self) -> None:
        """Make the valid source with the smallest key current.

        Ties go to the lowest index.
        """
        smallest: int | None = None
        smallest_key: Any = None

        for idx, it in enumerate(self._iterators):
            if not it.valid():
                continue
            key = it.current_key()
            if smallest is None or self._cmp.compare(key, smallest_key) < 0:
                smallest, smallest_key = idx, key

        self._current = smallest

    def _find_largest(self) -> None:
        """Make the valid source with the largest key current.

        Ties go to the highest index.
        """
        largest: int | None = None
        largest_key: Any = None

        for idx in range(len(self._iterators) - 1, -1, -1):
            it = self._iterators[idx]
            if not it.valid():
                continue
            key = it.current_key()
            if largest is None or self._cmp.compare(key, largest_key) > 0:
                largest, largest_key = idx, key

        self._current = largest

    def _reseek_others(self, current: int, lower: SeekBias, higher: SeekBias) -> None:
        """Seek every non-current source relative to the current key.

        Sources before the current one seek with lower, sources after it with
        higher. Equal keys order by source index, so the two sides need
        different strictness.
        """
        key = self._iterators[current].current_key()
        for idx, it in enumerate(self._iterators):
            if idx < current:
                it.seek(self._cmp, key, lower)
            elif idx > current:
                it.seek(self._cmp, key, higher)

    def _settle(self, miss: Position) -> None:
        if self._current is None:
            self._sentinel = miss

    def move_next(self) -> None:
        self._invalidate_loans()

        if self._current is not None:
            if self._direction is Direction.BACKWARDS:
                self._reseek_others(self._current, SeekBias.GREATER, SeekBias.GREATER_EQUAL)
                self._direction = Direction.FORWARDS
            self._iterators[self._current].move_next()
        else:
            # No source is valid: step all of them onto their first element
            for it in self._iterators:
                it.move_next()
            self._direction = Direction.FORWARDS

        self._find_smallest()
        self._settle(Position.AFTER_LAST)

    def move_prev(self) -> None:
        self._invalidate_loans()

        if self._current is not None:
            if self._direction is Direction.FORWARDS:
                self._reseek_others(self._current, SeekBias.LESS_EQUAL, SeekBias.LESS)
                self._direction = Direction.BACKWARDS
            self._iterators[self._current].move_prev()
        else:
            for it in self._iterators:
                it.move_prev()
            self._direction = Direction.BACKWARDS

        self._find_largest()
        self._settle(Position.BEFORE_FIRST)

    def reset(self) -> None:
        self._invalidate_loans()
        for it in self._iterators:
            it.reset()
        self._current = None
        self._direction = Direction.FORWARDS
        self._sentinel = Position.BEFORE_FIRST

    def seek(self, comparator: Comparator, target: Any, bias: SeekBias) -> None:
        """Seek every source, then pick the extreme element for bias.

        comparator must agree with the merge's own comparator.
        """
        self._invalidate_loans()
        for it in self._iterators:
            it.seek(comparator, target, bias)

        if bias.forwards:
            self._find_smallest()
            self._direction = Direction.FORWARDS
        else:
            self._find_largest()
            self._direction = Direction.BACKWARDS
        self._settle(bias.miss_position)

    def seek_to_first(self) -> None:
        self._invalidate_loans()
        for it in self._iterators:
            it.seek_to_first()
        self._find_smallest()
        self._direction = Direction.FORWARDS
        self._settle(Position.AFTER_LAST)

    def seek_to_last(self) -> None:
        self._invalidate_loans()
        for it in self._iterators:
            it.seek_to_last()
        self._find_largest()
        self._direction = Direction.BACKWARDS
        self._settle(Position.BEFORE_FIRST)

    def close(self) -> None:
        """Close and drop every source."""
        self._invalidate_loans()
        for it in self._iterators:
            close = getattr(it, "close", None)
            if close is not None:
                close()
        self._iterators = []
        self._current = None
        self._sentinel = Position.BEFORE_FIRST
