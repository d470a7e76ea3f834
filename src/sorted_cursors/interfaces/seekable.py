"""Protocol definitions for seekable cursors."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

from .cursor import CursorIterator, CursorLendingIterator, CursorPooledIterator

if TYPE_CHECKING:
    from ..core.types import SeekBias
    from .comparator import Comparator


@runtime_checkable
class Seekable(Protocol):
    """Seek capability layered over one of the cursor flavours."""

    def reset(self) -> None:
        """Move to BEFORE_FIRST."""
        ...

    def seek(self, comparator: Comparator, target: Any, bias: SeekBias) -> None:
        """Move to the element selected by bias relative to target.

        Behaves as a binary search over the order induced by comparator. If
        no element satisfies the bias the cursor lands on AFTER_LAST for the
        forwards biases and BEFORE_FIRST for the backwards ones.
        """
        ...

    def seek_to_first(self) -> None:
        """Move to the smallest element, or a sentinel if empty."""
        ...

    def seek_to_last(self) -> None:
        """Move to the greatest element, or a sentinel if empty."""
        ...


@runtime_checkable
class SeekableIterator(CursorIterator, Seekable, Protocol):
    """By-value cursor with seek."""


@runtime_checkable
class SeekableLendingIterator(CursorLendingIterator, Seekable, Protocol):
    """Lending cursor with seek."""


@runtime_checkable
class SeekablePooledIterator(CursorPooledIterator, Seekable, Protocol):
    """Pooled cursor with seek."""
