"""Stub price loader for offline/testing use."""

import random
from concurrent.futures import Future
from decimal import Decimal
from typing import Iterable, Optional

from current_prices.core.exceptions import PriceLoadError
from current_prices.core.timezone import now_eastern
from current_prices.domain.views import CurrentPrice


# Deterministic fake prices for common symbols
_STUB_PRICES: dict[str, Decimal] = {
    "AAPL": Decimal("185.50"),
    "GOOGL": Decimal("142.75"),
    "MSFT": Decimal("378.25"),
    "AMZN": Decimal("178.50"),
    "TSLA": Decimal("248.75"),
    "NVDA": Decimal("485.25"),
    "META": Decimal("505.50"),
    "SPY": Decimal("485.25"),
    "QQQ": Decimal("418.75"),
    "VTI": Decimal("252.30"),
}


class StubPriceLoader:
    """
    Stub loader with deterministic fake data for offline operation.

    Uses predefined prices for common symbols and seeded random prices for
    unknown ones. Futures resolve before `load` returns. Symbols listed in
    `failing_symbols` fail with PriceLoadError.
    """

    def __init__(self, seed: int = 42, failing_symbols: Optional[Iterable[str]] = None):
        self._rng = random.Random(seed)
        self._failing = frozenset(failing_symbols or ())
        self.requested: list[str] = []

    def load(self, symbol: str) -> "Future[CurrentPrice]":
        """Return an already-completed future for the symbol."""
        self.requested.append(symbol)
        future: Future[CurrentPrice] = Future()

        if symbol in self._failing:
            future.set_exception(PriceLoadError(symbol, "stub configured to fail"))
            return future

        price = _STUB_PRICES.get(symbol.upper())
        if price is None:
            price = Decimal(str(50 + self._rng.random() * 200)).quantize(Decimal("0.01"))

        future.set_result(CurrentPrice(symbol=symbol, price=price, as_of=now_eastern()))
        return future
