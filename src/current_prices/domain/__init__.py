"""Domain layer - pure business models with no external dependencies."""

from current_prices.domain.models import Transaction, TransactionType
from current_prices.domain.views import CurrentPrice

__all__ = [
    "Transaction",
    "TransactionType",
    "CurrentPrice",
]
