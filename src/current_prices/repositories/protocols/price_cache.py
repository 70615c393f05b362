"""Price cache protocol."""

from typing import Callable, Optional, Protocol

from current_prices.core.observable import Subscription
from current_prices.domain.views import CurrentPrice


class PriceCache(Protocol):
    """Interface for the symbol -> CurrentPrice store."""

    def snapshot(self) -> dict[str, CurrentPrice]:
        """Return a copy of all cached prices keyed by symbol."""
        ...

    def get(self, symbol: str) -> Optional[CurrentPrice]:
        """Get the cached price for a symbol."""
        ...

    def put(self, price: CurrentPrice) -> None:
        """Insert or replace the price for `price.symbol`."""
        ...

    def subscribe(self, handler: Callable[[dict[str, CurrentPrice]], None]) -> Subscription:
        """Observe the cache contents (current snapshot first, then per change)."""
        ...
