"""In-memory repository implementations."""

from current_prices.repositories.memory.transaction_store import InMemoryTransactionStore
from current_prices.repositories.memory.price_cache import InMemoryPriceCache

__all__ = [
    "InMemoryTransactionStore",
    "InMemoryPriceCache",
]
