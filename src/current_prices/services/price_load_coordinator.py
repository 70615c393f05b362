"""Fan-out loading of current prices with an aggregate error flag."""

import itertools
import logging
import threading
from concurrent.futures import Future
from functools import partial
from typing import Optional

from current_prices.core.observable import ObservableValue
from current_prices.domain.models import LoadStatus
from current_prices.domain.views import CurrentPrice
from current_prices.providers.price_loader import PriceLoader
from current_prices.repositories.protocols import PriceCache

logger = logging.getLogger(__name__)


class PriceLoadCoordinator:
    """
    Issues one independent load per symbol and reports failure as one flag.

    `error` holds None or the reason of the first failure since the last
    `load_prices` call. It is reset only by `load_prices`, never by a later
    success. Loaded prices go to `cache` when one is given, so successes are
    kept even when sibling loads fail.

    Earlier batches are never cancelled. By default a late failure from an
    older batch still sets `error` after a newer batch has reset it; pass
    `ignore_stale_failures=True` to drop failures from superseded batches.
    """

    def __init__(
        self,
        loader: PriceLoader,
        cache: Optional[PriceCache] = None,
        ignore_stale_failures: bool = False,
    ):
        self._loader = loader
        self._cache = cache
        self._ignore_stale_failures = ignore_stale_failures
        self._lock = threading.RLock()
        self._batch_ids = itertools.count(1)
        self._current_batch = 0
        self._status: dict[str, LoadStatus] = {}
        self._status_batch: dict[str, int] = {}
        self.error: ObservableValue[Optional[str]] = ObservableValue(None)

    @property
    def has_error(self) -> bool:
        return self.error.value is not None

    @property
    def current_batch(self) -> int:
        """ID of the most recent batch (0 before the first call)."""
        with self._lock:
            return self._current_batch

    @property
    def pending_symbols(self) -> list[str]:
        """Symbols whose most recent load has not completed yet."""
        with self._lock:
            return sorted(s for s, st in self._status.items() if st == LoadStatus.PENDING)

    def status(self, symbol: str) -> Optional[LoadStatus]:
        """Outcome of the most recent load issued for a symbol, or None if never requested."""
        with self._lock:
            return self._status.get(symbol)

    def load_prices(self, symbols: list[str]) -> None:
        """
        Reset the error flag and start one load per symbol.

        Returns as soon as every load has been issued; an empty list only
        resets the error flag.
        """
        with self._lock:
            batch_id = next(self._batch_ids)
            self._current_batch = batch_id
            self.error.set(None)

        if symbols:
            logger.info("Loading current prices (batch %d): %s", batch_id, ", ".join(symbols))

        for symbol in symbols:
            with self._lock:
                self._status[symbol] = LoadStatus.PENDING
                self._status_batch[symbol] = batch_id
            try:
                future = self._loader.load(symbol)
            except Exception as e:
                self._on_failure(batch_id, symbol, e)
                continue
            future.add_done_callback(partial(self._on_load_done, batch_id, symbol))

    def _on_load_done(self, batch_id: int, symbol: str, future: "Future[CurrentPrice]") -> None:
        try:
            price = future.result()
        except Exception as e:
            self._on_failure(batch_id, symbol, e)
            return

        self._set_status(batch_id, symbol, LoadStatus.LOADED)
        logger.debug("Loaded price for %s: %s", symbol, price.price)
        if self._cache is not None:
            self._cache.put(price)

    def _on_failure(self, batch_id: int, symbol: str, exc: BaseException) -> None:
        self._set_status(batch_id, symbol, LoadStatus.FAILED)
        reason = str(exc) or f"{type(exc).__name__} loading {symbol}"
        logger.warning("Price load failed for %s (batch %d): %s", symbol, batch_id, reason)
        self._record_failure(batch_id, reason)

    def _set_status(self, batch_id: int, symbol: str, status: LoadStatus) -> None:
        with self._lock:
            # A newer load for the same symbol owns the slot
            if self._status_batch.get(symbol) == batch_id:
                self._status[symbol] = status

    def _record_failure(self, batch_id: int, reason: str) -> None:
        """Single mutation point for the error flag outside of `load_prices`."""
        with self._lock:
            if self._ignore_stale_failures and batch_id != self._current_batch:
                logger.debug("Ignoring failure from superseded batch %d", batch_id)
                return
            self.error.update(lambda current: current if current is not None else reason)
