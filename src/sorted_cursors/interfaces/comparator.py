"""Protocol definition for Comparator."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from ..core.types import Ordering


@runtime_checkable
class Comparator(Protocol):
    """Total order over the keys of a sorted collection.

    Implementations must be transitive and antisymmetric; seek and merge
    results are undefined otherwise. Keys that compare EQUAL need not be
    equal in any other sense. Comparators are immutable and may be shared
    freely between iterators and threads.
    """

    def compare(self, lhs: Any, rhs: Any) -> Ordering:
        """Compare two keys.

        When seeking, lhs is the key stored in the collection and rhs is the
        probe, which may be of a different but order-compatible type.
        """
        ...
