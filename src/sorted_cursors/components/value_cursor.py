"""By-value cursor built on a lending cursor.

ValueCursor hands out the elements themselves rather than loans, and plugs
into Python's iterator protocol. It is not fused: after __next__ raises
StopIteration at the end of the collection, calling it again wraps around to
the first element.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from .delegate import CursorDelegate
from .lending import unwrap

if TYPE_CHECKING:
    from ..interfaces.cursor import CursorLendingIterator


class ValueCursor(CursorDelegate):
    """Adapts a (seekable) lending cursor to the by-value cursor flavour.

    Elements are returned as stored; callers that need a private copy should
    copy them or use PooledIter instead.
    """

    def __init__(self, cursor: CursorLendingIterator):
        self._inner = cursor

    def __iter__(self) -> ValueCursor:
        return self

    def __next__(self) -> Any:
        self._inner.move_next()
        if not self._inner.valid():
            raise StopIteration
        return unwrap(self._inner.current())

    def current(self) -> Any:
        return unwrap(self._inner.current())

    def prev(self) -> Any | None:
        self._inner.move_prev()
        if not self._inner.valid():
            return None
        return unwrap(self._inner.current())
