"""Comparator implementations.

Provides the natural-order default plus a few combinators for building
comparators out of key functions, cmp-style functions and other comparators.
"""

from __future__ import annotations

from functools import cmp_to_key
from typing import TYPE_CHECKING, Any

from ..core.types import Ordering

if TYPE_CHECKING:
    from collections.abc import Callable

    from ..interfaces.comparator import Comparator


class DefaultComparator:
    """Compares keys by their natural (built-in) order.

    Stateless; every instance behaves identically.
    """

    __slots__ = ()

    def compare(self, lhs: Any, rhs: Any) -> Ordering:
        if lhs < rhs:
            return Ordering.LESS
        if rhs < lhs:
            return Ordering.GREATER
        return Ordering.EQUAL

    def __eq__(self, other: object) -> bool:
        return isinstance(other, DefaultComparator)

    def __hash__(self) -> int:
        return hash(DefaultComparator)

    def __repr__(self) -> str:
        return "DefaultComparator()"


class KeyComparator:
    """Compares key(lhs) with key(rhs) using an inner comparator.

    Args:
        key: Projection applied to both sides
        inner: Comparator for the projected values (natural order by default)
    """

    __slots__ = ("key", "inner")

    def __init__(self, key: Callable[[Any], Any], inner: Comparator | None = None):
        self.key = key
        self.inner: Comparator = inner if inner is not None else DefaultComparator()

    def compare(self, lhs: Any, rhs: Any) -> Ordering:
        return self.inner.compare(self.key(lhs), self.key(rhs))

    def __repr__(self) -> str:
        return f"KeyComparator({self.key!r}, {self.inner!r})"


class ReverseComparator:
    """Inverts the order of another comparator."""

    __slots__ = ("inner",)

    def __init__(self, inner: Comparator | None = None):
        self.inner: Comparator = inner if inner is not None else DefaultComparator()

    def compare(self, lhs: Any, rhs: Any) -> Ordering:
        return Ordering.from_int(self.inner.compare(lhs, rhs)).reverse()

    def __repr__(self) -> str:
        return f"ReverseComparator({self.inner!r})"


class FunctionComparator:
    """Adapts a cmp-style function (negative, zero, positive) to a Comparator."""

    __slots__ = ("func",)

    def __init__(self, func: Callable[[Any, Any], int]):
        self.func = func

    def compare(self, lhs: Any, rhs: Any) -> Ordering:
        return Ordering.from_int(self.func(lhs, rhs))

    def __repr__(self) -> str:
        return f"FunctionComparator({self.func!r})"


class ComparatorRef:
    """Indirection around another comparator.

    Lets heterogeneous comparators be stored in one container while every
    entry keeps the compare contract of the comparator it wraps.
    """

    __slots__ = ("_inner",)

    def __init__(self, inner: Comparator):
        self._inner = inner

    @property
    def inner(self) -> Comparator:
        return self._inner

    def compare(self, lhs: Any, rhs: Any) -> Ordering:
        return self._inner.compare(lhs, rhs)

    def __repr__(self) -> str:
        return f"ComparatorRef({self._inner!r})"


def sort_key(comparator: Comparator) -> Callable[[Any], Any]:
    """Return a key= callable ordering values the way comparator does.

    Useful for building sortedcontainers collections (or plain sorted lists)
    in a custom order before wrapping them in a cursor.
    """
    return cmp_to_key(lambda a, b: int(comparator.compare(a, b)))
