"""Domain models package."""

from current_prices.domain.models.enums import TransactionType, LoadStatus
from current_prices.domain.models.transaction import Transaction

__all__ = [
    "TransactionType",
    "LoadStatus",
    "Transaction",
]
