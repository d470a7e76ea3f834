"""Exception hierarchy for sorted cursors.

Defines all custom exceptions raised by cursors, pools and merging iterators.
"""

from __future__ import annotations


class CursorError(Exception):
    """Base exception for all cursor errors."""
    pass


class InvalidPositionError(CursorError):
    """Raised when an element is requested while positioned on a sentinel."""
    pass


class PoolExhaustedError(CursorError):
    """Raised when a pooled checkout finds no free buffer."""
    pass


class StaleLoanError(CursorError):
    """Raised when a lent item is read after its lender has moved."""
    pass


class HandleReleasedError(CursorError):
    """Raised when a pool handle is used after it was released."""
    pass


class UnsortedInputError(CursorError):
    """Raised when a collection is not sorted under its comparator."""
    pass
