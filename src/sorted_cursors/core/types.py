"""Common type definitions for sorted cursors.

Defines the ordering, position and seek-direction types shared by all
components.
"""

from __future__ import annotations

from enum import Enum, IntEnum


class Ordering(IntEnum):
    """Result of comparing two keys."""

    LESS = -1
    EQUAL = 0
    GREATER = 1

    @classmethod
    def from_int(cls, value: int) -> Ordering:
        """Normalize a cmp-style integer (any sign) to an Ordering."""
        if value < 0:
            return cls.LESS
        if value > 0:
            return cls.GREATER
        return cls.EQUAL

    def reverse(self) -> Ordering:
        return Ordering(-self.value)


class Position(Enum):
    """Logical location of a cursor.

    BEFORE_FIRST and AFTER_LAST are phantom sentinels bracketing the real
    elements. They never expose a value.
    """

    BEFORE_FIRST = "before_first"
    AT = "at"
    AFTER_LAST = "after_last"

    @property
    def is_sentinel(self) -> bool:
        return self is not Position.AT


class SeekBias(Enum):
    """Where a seek lands relative to its target key."""

    GREATER_EQUAL = "ge"  # first element >= target
    GREATER = "gt"  # first element > target
    LESS_EQUAL = "le"  # last element <= target
    LESS = "lt"  # last element < target

    @property
    def forwards(self) -> bool:
        """True for the two "first element" biases."""
        return self in (SeekBias.GREATER_EQUAL, SeekBias.GREATER)

    @property
    def miss_position(self) -> Position:
        """Sentinel a seek lands on when no element satisfies the bias."""
        return Position.AFTER_LAST if self.forwards else Position.BEFORE_FIRST
