"""Price loader providers module."""

from current_prices.providers.price_loader import PriceLoader
from current_prices.providers.stub_provider import StubPriceLoader
from current_prices.providers.yfinance_provider import YFinancePriceLoader

__all__ = [
    "PriceLoader",
    "StubPriceLoader",
    "YFinancePriceLoader",
]
