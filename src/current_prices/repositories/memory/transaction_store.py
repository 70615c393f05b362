"""In-memory observable transaction store."""

from typing import Callable, Iterable, Optional

from current_prices.core.exceptions import AppError
from current_prices.core.observable import ObservableValue, Subscription
from current_prices.domain.models import Transaction


class InMemoryTransactionStore:
    """
    Holds the transaction list and publishes it on every change.

    Each mutation replaces the list with a new one, so subscribers never see
    a list that is later modified in place.
    """

    def __init__(self, transactions: Optional[Iterable[Transaction]] = None):
        self._transactions: ObservableValue[list[Transaction]] = ObservableValue(
            list(transactions or [])
        )

    def current(self) -> list[Transaction]:
        return list(self._transactions.value)

    def subscribe(self, handler: Callable[[list[Transaction]], None]) -> Subscription:
        return self._transactions.subscribe(handler)

    def add(self, transaction: Transaction) -> None:
        """Append a transaction."""
        if any(t.txn_id == transaction.txn_id for t in self._transactions.value):
            raise AppError(f"Transaction already exists: {transaction.txn_id}", code="DUPLICATE")
        self._transactions.set(self._transactions.value + [transaction])

    def remove(self, txn_id: str) -> None:
        """Remove a transaction by ID."""
        remaining = [t for t in self._transactions.value if t.txn_id != txn_id]
        if len(remaining) == len(self._transactions.value):
            raise AppError(f"Transaction not found: {txn_id}", code="NOT_FOUND")
        self._transactions.set(remaining)

    def replace(self, transaction: Transaction) -> None:
        """Replace the transaction with the same ID."""
        current = self._transactions.value
        if not any(t.txn_id == transaction.txn_id for t in current):
            raise AppError(f"Transaction not found: {transaction.txn_id}", code="NOT_FOUND")
        self._transactions.set(
            [transaction if t.txn_id == transaction.txn_id else t for t in current]
        )

    def replace_all(self, transactions: Iterable[Transaction]) -> None:
        """Swap in a whole new transaction list."""
        self._transactions.set(list(transactions))
