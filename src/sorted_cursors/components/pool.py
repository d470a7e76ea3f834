"""Fixed-capacity buffer pools and the handles they hand out.

Buffers are allocated once when the pool is built and recycled for the pool's
lifetime. A checkout ties one slot to exactly one PoolItem until that handle
is released. Checkout never waits: an empty free set raises
PoolExhaustedError and the caller must release handles to make progress.
"""

from __future__ import annotations

import copy
import logging
import threading
from contextlib import nullcontext
from typing import TYPE_CHECKING, Any

from ..core.errors import HandleReleasedError, PoolExhaustedError

if TYPE_CHECKING:
    from collections.abc import Callable

logger = logging.getLogger(__name__)


def clone_into(item: Any, buffer: Any) -> Any:
    """Copy item into buffer and return the buffer holding the copy.

    Bytes-like items are written into a bytearray buffer in place so its
    allocation is reused. Anything else is shallow-copied and replaces the
    buffer.
    """
    if isinstance(buffer, bytearray) and isinstance(item, (bytes, bytearray, memoryview)):
        buffer[:] = item
        return buffer
    return copy.copy(item)


class BufferPool:
    """Pool of reusable buffers for a single owner.

    Performs no synchronization; use LockedBufferPool when handles are
    released from other threads.

    Args:
        capacity: Number of buffers
        factory: Creates the initial content of each buffer (None by default)

    Raises:
        ValueError: If capacity is negative
    """

    def __init__(self, capacity: int, factory: Callable[[], Any] | None = None):
        if capacity < 0:
            raise ValueError(f"Pool capacity must be >= 0, got {capacity}")  # noqa: TRY003

        self._buffers: list[Any] = [factory() if factory else None for _ in range(capacity)]
        self._in_use: list[bool] = [False] * capacity
        self._lock = self._make_lock()

    def _make_lock(self) -> Any:
        return nullcontext()

    @property
    def capacity(self) -> int:
        return len(self._buffers)

    def __len__(self) -> int:
        return len(self._buffers)

    def available(self) -> int:
        """Return the number of free buffers."""
        with self._lock:
            return self._in_use.count(False)

    def outstanding(self) -> int:
        """Return the number of checked-out buffers."""
        with self._lock:
            return self._in_use.count(True)

    def checkout(self) -> tuple[int, Any]:
        """Claim the lowest free slot.

        Returns:
            (slot, buffer) for the claimed slot

        Raises:
            PoolExhaustedError: If every buffer is checked out
        """
        with self._lock:
            for slot, busy in enumerate(self._in_use):
                if not busy:
                    self._in_use[slot] = True
                    return slot, self._buffers[slot]

        logger.debug(f"Buffer pool exhausted ({len(self._buffers)} buffers checked out)")
        raise PoolExhaustedError(  # noqa: TRY003
            f"All {len(self._buffers)} buffers are checked out"
        )

    def release(self, slot: int, buffer: Any) -> None:
        """Return slot to the free set, storing buffer for reuse."""
        with self._lock:
            self._free(slot, buffer)

    def _free(self, slot: int, buffer: Any) -> None:
        # Caller holds the lock
        if not self._in_use[slot]:
            raise HandleReleasedError(f"Slot {slot} is not checked out")  # noqa: TRY003
        self._buffers[slot] = buffer
        self._in_use[slot] = False

    def fill(self, item: Any, copy_into: Callable[[Any, Any], Any] = clone_into) -> PoolItem:
        """Check out a buffer, copy item into it and return its handle.

        Raises:
            PoolExhaustedError: If every buffer is checked out
        """
        slot, buffer = self.checkout()
        try:
            buffer = copy_into(item, buffer)
        except BaseException:
            self.release(slot, buffer)
            raise
        return PoolItem(self, slot, buffer)


class LockedBufferPool(BufferPool):
    """BufferPool whose free set is guarded by a threading.Lock.

    Checkout and release are mutually exclusive, so handles may be released
    from any thread while the owner keeps checking out.
    """

    def _make_lock(self) -> Any:
        return threading.Lock()


class PoolItem:
    """Handle on a checked-out pool buffer.

    Stays valid until released, independent of any iterator movement. Can be
    used as a context manager that releases on exit.
    """

    __slots__ = ("_pool", "_slot", "_buffer", "_released")

    def __init__(self, pool: BufferPool, slot: int, buffer: Any):
        self._pool = pool
        self._slot = slot
        self._buffer = buffer
        self._released = False

    @property
    def slot(self) -> int:
        return self._slot

    @property
    def released(self) -> bool:
        return self._released

    @property
    def value(self) -> Any:
        if self._released:
            raise HandleReleasedError("Pool handle used after release")  # noqa: TRY003
        return self._buffer

    def release(self) -> None:
        """Return the buffer to its pool.

        Raises:
            HandleReleasedError: If the handle was already released
        """
        with self._pool._lock:
            if self._released:
                raise HandleReleasedError("Pool handle released twice")  # noqa: TRY003
            self._released = True
            self._pool._free(self._slot, self._buffer)
        self._buffer = None

    def __enter__(self) -> PoolItem:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        if not self._released:
            self.release()

    def __repr__(self) -> str:
        if self._released:
            return f"PoolItem(slot={self._slot}, released)"
        return f"PoolItem(slot={self._slot}, {self._buffer!r})"
