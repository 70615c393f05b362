"""Service layer - price loading orchestration."""

from current_prices.services.missing_prices import detect_missing_prices, transaction_symbols
from current_prices.services.price_load_coordinator import PriceLoadCoordinator
from current_prices.services.price_update_flow import PriceUpdateFlow

__all__ = [
    "detect_missing_prices",
    "transaction_symbols",
    "PriceLoadCoordinator",
    "PriceUpdateFlow",
]
