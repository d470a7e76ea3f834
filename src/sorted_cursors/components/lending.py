"""Lending discipline for cursors.

A lending cursor hands out at most one live reference to its current element.
The reference is invalidated by the cursor's next mutating call; this is
enforced with a generation counter that every mutating call bumps and every
read of a Loan checks.
"""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from ..core.errors import StaleLoanError

T = TypeVar("T")


class Lender:
    """Base class for cursors that lend out their current element."""

    def __init__(self) -> None:
        self._generation: int = 0

    def _invalidate_loans(self) -> None:
        """Expire every outstanding Loan. Called by each mutating method."""
        self._generation += 1

    def _lend(self, item: T) -> Loan[T]:
        return Loan(self, item)


class Loan(Generic[T]):
    """Reference to a lender's current element.

    Valid until the lender's next move, seek, reset or close.
    """

    __slots__ = ("_lender", "_generation", "_item")

    def __init__(self, lender: Lender, item: T):
        self._lender = lender
        self._generation = lender._generation
        self._item = item

    @property
    def alive(self) -> bool:
        return self._generation == self._lender._generation

    def get(self) -> T:
        """Return the lent element.

        Raises:
            StaleLoanError: If the lender has moved since the loan was made
        """
        if not self.alive:
            raise StaleLoanError("Lent item read after its cursor moved")  # noqa: TRY003
        return self._item

    @property
    def value(self) -> T:
        return self.get()

    def __repr__(self) -> str:
        state = "alive" if self.alive else "stale"
        return f"Loan({self._item!r}, {state})"


def unwrap(item: Any) -> Any:
    """Return the element behind a Loan, or item itself if it is not one."""
    return item.get() if isinstance(item, Loan) else item
