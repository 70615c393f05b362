"""Application context wiring the current price flow.

Builds the stores, loader, coordinator and flow from settings and owns their
lifetime. The desktop UI or a headless runner creates one context, calls
`start()`, mutates `transactions`, and calls `close()` on shutdown.
"""

import logging
from typing import Optional

from current_prices.config.settings import Settings, get_settings, set_settings
from current_prices.providers import PriceLoader, StubPriceLoader, YFinancePriceLoader
from current_prices.repositories.memory import InMemoryPriceCache, InMemoryTransactionStore
from current_prices.services import PriceLoadCoordinator, PriceUpdateFlow
from current_prices.ui.alerts import AlertSink, LoggingAlertSink

logger = logging.getLogger(__name__)


class AppContext:
    """
    Application context providing in-process access to the price flow.

    Collaborators are created lazily on first access. Anything passed to the
    constructor is used as-is instead.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        loader: Optional[PriceLoader] = None,
        alerts: Optional[AlertSink] = None,
    ):
        if settings is not None:
            set_settings(settings)
        self._loader = loader
        self._alerts = alerts
        self._owns_loader = loader is None

        self._transactions: Optional[InMemoryTransactionStore] = None
        self._prices: Optional[InMemoryPriceCache] = None
        self._coordinator: Optional[PriceLoadCoordinator] = None
        self._flow: Optional[PriceUpdateFlow] = None

    @property
    def settings(self) -> Settings:
        return get_settings()

    @property
    def transactions(self) -> InMemoryTransactionStore:
        """Get the transaction store."""
        if self._transactions is None:
            self._transactions = InMemoryTransactionStore()
        return self._transactions

    @property
    def prices(self) -> InMemoryPriceCache:
        """Get the price cache."""
        if self._prices is None:
            self._prices = InMemoryPriceCache()
        return self._prices

    @property
    def loader(self) -> PriceLoader:
        """Get the price loader selected by `price_provider`."""
        if self._loader is None:
            settings = self.settings
            if settings.price_provider == "yfinance":
                self._loader = YFinancePriceLoader(
                    max_workers=settings.price_load_max_workers,
                    fetch_timeout_seconds=settings.price_load_timeout_seconds,
                )
            else:
                self._loader = StubPriceLoader()
            logger.info("Using %s price provider", settings.price_provider)
        return self._loader

    @property
    def alerts(self) -> AlertSink:
        if self._alerts is None:
            self._alerts = LoggingAlertSink()
        return self._alerts

    @property
    def coordinator(self) -> PriceLoadCoordinator:
        """Get the PriceLoadCoordinator instance."""
        if self._coordinator is None:
            self._coordinator = PriceLoadCoordinator(
                loader=self.loader,
                cache=self.prices,
                ignore_stale_failures=self.settings.ignore_stale_price_failures,
            )
        return self._coordinator

    @property
    def flow(self) -> PriceUpdateFlow:
        """Get the PriceUpdateFlow instance."""
        if self._flow is None:
            settings = self.settings
            self._flow = PriceUpdateFlow(
                transactions=self.transactions,
                prices=self.prices,
                coordinator=self.coordinator,
                alerts=self.alerts,
                alert_title=settings.price_alert_title,
                alert_message=settings.price_alert_message,
            )
        return self._flow

    def start(self) -> None:
        """Start reacting to transaction changes."""
        self.flow.start()

    def close(self) -> None:
        """Tear down subscriptions and release the loader's workers."""
        if self._flow is not None:
            self._flow.close()
        if self._owns_loader and isinstance(self._loader, YFinancePriceLoader):
            self._loader.close()

    def __enter__(self) -> "AppContext":
        self.start()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
