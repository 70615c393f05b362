"""Repository layer - data access abstractions and implementations."""

from current_prices.repositories.protocols import TransactionSource, PriceCache
from current_prices.repositories.memory import InMemoryTransactionStore, InMemoryPriceCache

__all__ = [
    "TransactionSource",
    "PriceCache",
    "InMemoryTransactionStore",
    "InMemoryPriceCache",
]
