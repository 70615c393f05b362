"""Repository protocol definitions (interfaces)."""

from current_prices.repositories.protocols.transaction_source import TransactionSource
from current_prices.repositories.protocols.price_cache import PriceCache

__all__ = [
    "TransactionSource",
    "PriceCache",
]
