"""
Pytest configuration and fixtures for current price tests.

This module provides:
- A loader spy whose futures are completed by the test
- A recording alert sink
- Factory helpers for transactions and prices
- Store, coordinator and flow fixtures
"""

from concurrent.futures import Future
from datetime import datetime
from decimal import Decimal
from typing import Callable, Optional

import pytest

from current_prices.config.settings import reset_settings
from current_prices.core.exceptions import PriceLoadError
from current_prices.core.timezone import EASTERN_TZ
from current_prices.domain.models import Transaction, TransactionType
from current_prices.domain.views import CurrentPrice
from current_prices.repositories.memory import InMemoryPriceCache, InMemoryTransactionStore
from current_prices.services import PriceLoadCoordinator, PriceUpdateFlow


# =============================================================================
# TIME HELPERS
# =============================================================================


def eastern_datetime(
    year: int,
    month: int,
    day: int,
    hour: int = 10,
    minute: int = 0,
) -> datetime:
    """Create a localized datetime in US/Eastern timezone."""
    return EASTERN_TZ.localize(datetime(year, month, day, hour, minute))


FIXED_AS_OF = eastern_datetime(2024, 6, 15, 16, 0)


def make_price(symbol: str, price: str = "100.00") -> CurrentPrice:
    """Build a CurrentPrice with a fixed timestamp."""
    return CurrentPrice(symbol=symbol, price=Decimal(price), as_of=FIXED_AS_OF)


# =============================================================================
# TEST DOUBLES
# =============================================================================


class LoaderSpy:
    """
    Price loader that records requests and leaves futures pending.

    Tests complete requests by index, in any order.
    """

    def __init__(self):
        self.requests: list[tuple[str, Future]] = []

    @property
    def requested_symbols(self) -> list[str]:
        return [symbol for symbol, _ in self.requests]

    def load(self, symbol: str) -> Future:
        future: Future = Future()
        self.requests.append((symbol, future))
        return future

    def complete(self, index: int = 0, price: str = "100.00") -> None:
        symbol, future = self.requests[index]
        future.set_result(make_price(symbol, price))

    def fail(self, index: int = 0, reason: str = "network unavailable") -> None:
        symbol, future = self.requests[index]
        future.set_exception(PriceLoadError(symbol, reason))


class RecordingAlertSink:
    """Alert sink that keeps every notification."""

    def __init__(self):
        self.alerts: list[tuple[str, str]] = []

    def notify(self, title: str, message: str) -> None:
        self.alerts.append((title, message))


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture(autouse=True)
def clean_settings():
    """Make every test start from freshly loaded settings."""
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def loader() -> LoaderSpy:
    return LoaderSpy()


@pytest.fixture
def alert_sink() -> RecordingAlertSink:
    return RecordingAlertSink()


@pytest.fixture
def price_cache() -> InMemoryPriceCache:
    return InMemoryPriceCache()


@pytest.fixture
def transaction_store() -> InMemoryTransactionStore:
    return InMemoryTransactionStore()


@pytest.fixture
def coordinator(loader, price_cache) -> PriceLoadCoordinator:
    """Provide a coordinator over the loader spy that writes into the cache."""
    return PriceLoadCoordinator(loader=loader, cache=price_cache)


@pytest.fixture
def flow(transaction_store, price_cache, coordinator, alert_sink):
    """Provide a started PriceUpdateFlow; closed after the test."""
    flow = PriceUpdateFlow(
        transactions=transaction_store,
        prices=price_cache,
        coordinator=coordinator,
        alerts=alert_sink,
    )
    flow.start()
    yield flow
    flow.close()


@pytest.fixture
def transaction_factory() -> Callable[..., Transaction]:
    """Factory for transactions with sequential IDs."""
    counter = {"next": 1}

    def _create_transaction(
        symbol: Optional[str] = None,
        txn_type: TransactionType = TransactionType.BUY,
        quantity: Decimal = Decimal("10"),
        price: Decimal = Decimal("100.00"),
    ) -> Transaction:
        txn_id = f"txn-{counter['next']}"
        counter["next"] += 1
        is_cash = txn_type in (TransactionType.CASH_DEPOSIT, TransactionType.CASH_WITHDRAW)
        return Transaction(
            txn_id=txn_id,
            txn_type=txn_type,
            symbol=None if is_cash else symbol,
            quantity=None if is_cash else quantity,
            price=None if is_cash else price,
            txn_time_est=FIXED_AS_OF,
        )

    return _create_transaction
