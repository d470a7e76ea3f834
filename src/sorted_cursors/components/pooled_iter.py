"""Pool-backed adapters from lending cursors to pooled cursors.

A lending cursor can only lend one element at a time. Wrapping it in a
PooledIter copies each element it lends into a pool buffer, so several
elements from the same iteration can be held at once. The price is one copy
per step and the memory of the buffers; the pool's capacity bounds how many
copies can be outstanding.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from ..core.errors import InvalidPositionError
from .delegate import CursorDelegate
from .lending import unwrap
from .pool import BufferPool, LockedBufferPool, PoolItem, clone_into

if TYPE_CHECKING:
    from collections.abc import Callable

    from ..core.config import PoolConfig
    from ..core.types import Position
    from ..interfaces.cursor import CursorLendingIterator

logger = logging.getLogger(__name__)


class PooledIter(CursorDelegate):
    """Convert a lending cursor into a pooled cursor for a single thread.

    Each pooled step checks out a buffer before it moves the inner cursor.
    If the pool is exhausted PoolExhaustedError is raised and the cursor
    stays where it was. A step that lands on a sentinel gives the buffer
    straight back and returns None. If copy_into raises, the buffer is given
    back and the inner cursor is stepped back to where it was.

    Seek and plain movement are forwarded to the inner cursor and never touch
    the pool.

    Args:
        iterator: Lending cursor to wrap (its seek methods are used if present)
        num_buffers: Number of items that can be held at once
        buffer_factory: Creates the initial content of each buffer
        copy_into: Copies a lent item into a buffer, returning the filled buffer
    """

    pool_class: type[BufferPool] = BufferPool

    def __init__(
        self,
        iterator: CursorLendingIterator,
        num_buffers: int,
        buffer_factory: Callable[[], Any] | None = None,
        copy_into: Callable[[Any, Any], Any] = clone_into,
    ):
        self._inner = iterator
        self._pool = self.pool_class(num_buffers, buffer_factory)
        self._copy_into = copy_into
        logger.debug(f"Created {type(self).__name__} with {num_buffers} buffers")

    @property
    def pool(self) -> BufferPool:
        return self._pool

    def buffer_pool_size(self) -> int:
        return self._pool.capacity

    def available_buffers(self) -> int:
        return self._pool.available()

    def would_exhaust(self) -> bool:
        return self._pool.available() == 0

    def move_next(self) -> None:
        self._inner.move_next()

    def move_prev(self) -> None:
        self._inner.move_prev()

    def _step_back(self, step: Callable[[], None], undo: Callable[[], None], prior: Position) -> None:
        """Return the inner cursor to prior after step landed on an element."""
        undo()
        if self._inner.position is not prior:
            # Stepping off the far sentinel lands on the other one; go round
            undo()
            step()

    def _step_pooled(self, step: Callable[[], None], undo: Callable[[], None]) -> PoolItem | None:
        slot, buffer = self._pool.checkout()
        prior = self._inner.position
        try:
            step()
        except BaseException:
            self._pool.release(slot, buffer)
            raise

        if not self._inner.valid():
            self._pool.release(slot, buffer)
            return None

        try:
            buffer = self._copy_into(unwrap(self._inner.current()), buffer)
        except BaseException:
            self._pool.release(slot, buffer)
            logger.debug(f"Copy into slot {slot} failed, stepping back to {prior.name}")
            self._step_back(step, undo, prior)
            raise
        return PoolItem(self._pool, slot, buffer)

    def next_pooled(self) -> PoolItem | None:
        """Move forwards and return a handle on the new element.

        Returns None, holding no buffer, if the step lands on a sentinel.

        Raises:
            PoolExhaustedError: If no buffer is free; the cursor does not move
        """
        return self._step_pooled(self._inner.move_next, self._inner.move_prev)

    def prev_pooled(self) -> PoolItem | None:
        """Move backwards and return a handle on the new element.

        Raises:
            PoolExhaustedError: If no buffer is free; the cursor does not move
        """
        return self._step_pooled(self._inner.move_prev, self._inner.move_next)

    def current_pooled(self) -> PoolItem:
        """Return a handle on the current element.

        Raises:
            InvalidPositionError: If positioned on a sentinel
            PoolExhaustedError: If no buffer is free
        """
        if not self._inner.valid():
            raise InvalidPositionError(  # noqa: TRY003
                f"No current element at {self._inner.position.name}"
            )
        return self._pool.fill(unwrap(self._inner.current()), self._copy_into)


class ThreadSafePooledIter(PooledIter):
    """PooledIter whose handles may be released from any thread.

    The cursor itself is still driven by one thread at a time; only the
    pool's free set is shared, guarded by a lock. Items placed in the pool
    must be safe to read from the threads that hold their handles.
    """

    pool_class = LockedBufferPool


def build_pooled_iter(
    iterator: CursorLendingIterator,
    config: PoolConfig,
    buffer_factory: Callable[[], Any] | None = None,
    copy_into: Callable[[Any, Any], Any] = clone_into,
) -> PooledIter:
    """Wrap iterator in the pooled adapter selected by config."""
    cls = ThreadSafePooledIter if config.thread_safe else PooledIter
    return cls(iterator, config.num_buffers, buffer_factory, copy_into)
