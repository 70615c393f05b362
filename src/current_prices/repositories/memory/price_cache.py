"""In-memory observable price cache."""

from typing import Callable, Optional

from current_prices.core.observable import ObservableValue, Subscription
from current_prices.domain.views import CurrentPrice


class InMemoryPriceCache:
    """Symbol -> CurrentPrice map. Safe to write from loader worker threads."""

    def __init__(self):
        self._prices: ObservableValue[dict[str, CurrentPrice]] = ObservableValue({})

    def snapshot(self) -> dict[str, CurrentPrice]:
        return dict(self._prices.value)

    def get(self, symbol: str) -> Optional[CurrentPrice]:
        return self._prices.value.get(symbol)

    def put(self, price: CurrentPrice) -> None:
        self._prices.update(lambda prices: {**prices, price.symbol: price})

    def clear(self) -> None:
        self._prices.set({})

    def subscribe(self, handler: Callable[[dict[str, CurrentPrice]], None]) -> Subscription:
        return self._prices.subscribe(handler)

    def __contains__(self, symbol: str) -> bool:
        return symbol in self._prices.value

    def __len__(self) -> int:
        return len(self._prices.value)
