"""Protocol definitions for pooled iteration."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class PoolHandle(Protocol):
    """Owned reference to a checked-out pool buffer."""

    @property
    def value(self) -> Any:
        """Return the buffered item.

        Raises:
            HandleReleasedError: If the handle was already released
        """
        ...

    @property
    def released(self) -> bool:
        """Return True once the buffer went back to the pool."""
        ...

    def release(self) -> None:
        """Return the buffer to the pool's free set."""
        ...


@runtime_checkable
class PooledIterator(Protocol):
    """Forward iterator whose items are pool-backed handles."""

    def next_pooled(self) -> PoolHandle | None:
        """Step forwards and return a handle, or None at the end.

        Raises:
            PoolExhaustedError: If no buffer is free
        """
        ...

    def would_exhaust(self) -> bool:
        """Return True if the next checkout would raise PoolExhaustedError."""
        ...

    def buffer_pool_size(self) -> int:
        """Return the total number of buffers in the pool."""
        ...

    def available_buffers(self) -> int:
        """Return the number of buffers not currently checked out."""
        ...
