"""Shared forwarding of position and seek calls to a wrapped cursor."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from ..core.types import Position, SeekBias
    from ..interfaces.comparator import Comparator


class CursorDelegate:
    """Mixin for adapters whose position is that of self._inner."""

    _inner: Any

    @property
    def inner(self) -> Any:
        return self._inner

    @property
    def position(self) -> Position:
        return self._inner.position

    def valid(self) -> bool:
        return self._inner.valid()

    def current_key(self) -> Any:
        return self._inner.current_key()

    def reset(self) -> None:
        self._inner.reset()

    def seek(self, comparator: Comparator, target: Any, bias: SeekBias) -> None:
        self._inner.seek(comparator, target, bias)

    def seek_to_first(self) -> None:
        self._inner.seek_to_first()

    def seek_to_last(self) -> None:
        self._inner.seek_to_last()

    def close(self) -> None:
        close = getattr(self._inner, "close", None)
        if close is not None:
            close()
