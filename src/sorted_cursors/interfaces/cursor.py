"""Protocol definitions for the three cursor flavours.

A cursor is circular: it starts on a phantom position before the first
element, stepping past the last element lands on a phantom position after it,
and one more step wraps back to the first element. On an empty collection the
cursor never leaves the phantom positions.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from ..core.types import Position
    from .pooled import PoolHandle


@runtime_checkable
class CursorIterator(Protocol):
    """By-value cursor; also a Python iterator over the elements."""

    @property
    def position(self) -> Position:
        """Return the current logical position."""
        ...

    def valid(self) -> bool:
        """Return True if positioned on a real element."""
        ...

    def current(self) -> Any:
        """Return the current element.

        Raises:
            InvalidPositionError: If positioned on a sentinel
        """
        ...

    def __next__(self) -> Any:
        """Step forwards and return the element, or raise StopIteration."""
        ...

    def prev(self) -> Any | None:
        """Step backwards and return the element, or None on a sentinel."""
        ...


@runtime_checkable
class CursorLendingIterator(Protocol):
    """Cursor that lends out one element at a time.

    The lent item is valid only until the next mutating call on the cursor.
    """

    @property
    def position(self) -> Position:
        """Return the current logical position."""
        ...

    def valid(self) -> bool:
        """Return True if positioned on a real element."""
        ...

    def move_next(self) -> None:
        """Move one step forwards, wrapping after AFTER_LAST."""
        ...

    def move_prev(self) -> None:
        """Move one step backwards, wrapping after BEFORE_FIRST."""
        ...

    def current(self) -> Any:
        """Return a loan on the current element.

        Raises:
            InvalidPositionError: If positioned on a sentinel
        """
        ...

    def current_key(self) -> Any:
        """Return the ordering key of the current element.

        Raises:
            InvalidPositionError: If positioned on a sentinel
        """
        ...


@runtime_checkable
class CursorPooledIterator(Protocol):
    """Cursor that hands out pool-backed handles instead of loans.

    Several handles from the same cursor may be alive at once; each stays
    valid until released, independent of further movement.
    """

    @property
    def position(self) -> Position:
        """Return the current logical position."""
        ...

    def valid(self) -> bool:
        """Return True if positioned on a real element."""
        ...

    def next_pooled(self) -> PoolHandle | None:
        """Step forwards and return a handle, or None on a sentinel.

        Raises:
            PoolExhaustedError: If no buffer is free; the cursor does not move
        """
        ...

    def prev_pooled(self) -> PoolHandle | None:
        """Step backwards and return a handle, or None on a sentinel.

        Raises:
            PoolExhaustedError: If no buffer is free; the cursor does not move
        """
        ...

    def current_pooled(self) -> PoolHandle:
        """Return a handle on the current element.

        Raises:
            InvalidPositionError: If positioned on a sentinel
            PoolExhaustedError: If no buffer is free
        """
        ...

    def buffer_pool_size(self) -> int:
        """Return the total number of buffers in the pool."""
        ...

    def available_buffers(self) -> int:
        """Return the number of buffers not currently checked out."""
        ...
