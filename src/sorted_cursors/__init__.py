"""Sorted cursors - seekable, lending and pooled iteration over sorted collections."""

from .components.comparator import (
    ComparatorRef,
    DefaultComparator,
    FunctionComparator,
    KeyComparator,
    ReverseComparator,
    sort_key,
)
from .components.lending import Lender, Loan
from .components.merging import Direction, MergingIter
from .components.pool import BufferPool, LockedBufferPool, PoolItem, clone_into
from .components.pooled_iter import PooledIter, ThreadSafePooledIter, build_pooled_iter
from .components.scan import iter_items, iter_range
from .components.sequence_cursor import SequenceCursor, SortedDictCursor, SortedListCursor
from .components.value_cursor import ValueCursor
from .core.config import PoolConfig
from .core.errors import (
    CursorError,
    HandleReleasedError,
    InvalidPositionError,
    PoolExhaustedError,
    StaleLoanError,
    UnsortedInputError,
)
from .core.types import Ordering, Position, SeekBias

__version__ = "0.1.0"

__all__ = [
    "ComparatorRef",
    "DefaultComparator",
    "FunctionComparator",
    "KeyComparator",
    "ReverseComparator",
    "sort_key",
    "Lender",
    "Loan",
    "Direction",
    "MergingIter",
    "BufferPool",
    "LockedBufferPool",
    "PoolItem",
    "clone_into",
    "PooledIter",
    "ThreadSafePooledIter",
    "build_pooled_iter",
    "iter_items",
    "iter_range",
    "SequenceCursor",
    "SortedDictCursor",
    "SortedListCursor",
    "ValueCursor",
    "PoolConfig",
    "CursorError",
    "HandleReleasedError",
    "InvalidPositionError",
    "PoolExhaustedError",
    "StaleLoanError",
    "UnsortedInputError",
    "Ordering",
    "Position",
    "SeekBias",
]
