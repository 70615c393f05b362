"""Transaction source protocol."""

from typing import Callable, Protocol

from current_prices.core.observable import Subscription
from current_prices.domain.models import Transaction


class TransactionSource(Protocol):
    """Interface for an observable transaction list."""

    def current(self) -> list[Transaction]:
        """Return the current transaction list."""
        ...

    def subscribe(self, handler: Callable[[list[Transaction]], None]) -> Subscription:
        """
        Observe the transaction list.

        The handler receives the current list immediately, then once per change.
        """
        ...
