"""Reactive wiring between transactions, price loading and user alerts."""

import logging
from typing import Optional

from current_prices.core.exceptions import AppError
from current_prices.core.observable import CompositeSubscription, drop_first
from current_prices.domain.models import Transaction
from current_prices.repositories.protocols import PriceCache, TransactionSource
from current_prices.services.missing_prices import detect_missing_prices, transaction_symbols
from current_prices.services.price_load_coordinator import PriceLoadCoordinator
from current_prices.ui.alerts import AlertSink

logger = logging.getLogger(__name__)

DEFAULT_ALERT_TITLE = "Error"
DEFAULT_ALERT_MESSAGE = "Error loading current prices"


class PriceUpdateFlow:
    """
    Keeps the price cache populated as the transaction list changes.

    Two subscriptions live between `start()` and `close()`:
    - every transaction list (the current one included) is checked against
      the cache, and missing symbols are handed to the coordinator; nothing
      is called when no symbol is missing
    - every change of the coordinator's error flag after the initial value
      that enters the error state triggers one generic alert
    """

    def __init__(
        self,
        transactions: TransactionSource,
        prices: PriceCache,
        coordinator: PriceLoadCoordinator,
        alerts: AlertSink,
        alert_title: str = DEFAULT_ALERT_TITLE,
        alert_message: str = DEFAULT_ALERT_MESSAGE,
    ):
        self._transactions = transactions
        self._prices = prices
        self._coordinator = coordinator
        self._alerts = alerts
        self._alert_title = alert_title
        self._alert_message = alert_message
        self._subscriptions: Optional[CompositeSubscription] = None

    @property
    def is_active(self) -> bool:
        return self._subscriptions is not None and not self._subscriptions.is_disposed

    def start(self) -> None:
        """Subscribe to transactions and to the coordinator's error flag."""
        if self._subscriptions is not None:
            raise AppError("Price update flow already started", code="FLOW_STARTED")

        subscriptions = CompositeSubscription()
        self._subscriptions = subscriptions
        # Error subscription first so a failure during the initial load is reported
        subscriptions.add(
            self._coordinator.error.subscribe(drop_first(self._on_error_changed))
        )
        subscriptions.add(self._transactions.subscribe(self._on_transactions_changed))

    def close(self) -> None:
        """Release both subscriptions. Safe to call more than once."""
        if self._subscriptions is not None:
            self._subscriptions.dispose()

    def __enter__(self) -> "PriceUpdateFlow":
        self.start()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def _on_transactions_changed(self, transactions: list[Transaction]) -> None:
        missing = detect_missing_prices(
            transaction_symbols(transactions),
            self._prices.snapshot().keys(),
        )
        if not missing:
            return
        logger.info("Missing current prices for: %s", ", ".join(missing))
        self._coordinator.load_prices(missing)

    def _on_error_changed(self, error: Optional[str]) -> None:
        show_error = error is not None
        if not show_error:
            return
        self._alerts.notify(self._alert_title, self._alert_message)
