"""Price loader protocol."""

from concurrent.futures import Future
from typing import Protocol

from current_prices.domain.views import CurrentPrice


class PriceLoader(Protocol):
    """
    Protocol for current price loaders.

    Implementations start loading and return immediately. The returned future
    resolves with a CurrentPrice or fails with an exception (typically
    PriceLoadError). No batching contract: one call per symbol.
    """

    def load(self, symbol: str) -> "Future[CurrentPrice]":
        """Start loading the current price for one symbol."""
        ...
