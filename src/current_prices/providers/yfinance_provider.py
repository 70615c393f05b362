"""
Price loader backed by Yahoo Finance via yfinance.

Each symbol is fetched on its own worker of a shared thread pool, so the
returned futures complete on worker threads.
"""

import logging
from concurrent.futures import Future, ThreadPoolExecutor
from decimal import Decimal, InvalidOperation

from current_prices.core.exceptions import PriceLoadError
from current_prices.core.timezone import EASTERN_TZ, now_eastern
from current_prices.domain.views import CurrentPrice

logger = logging.getLogger(__name__)


DEFAULT_MAX_WORKERS = 8
DEFAULT_FETCH_TIMEOUT_SECONDS = 10.0


# Lazy import so tests can patch before import
def _get_yf():
    import yfinance as yf
    return yf


def _fetch_price(symbol: str, timeout: float) -> CurrentPrice:
    """Fetch the latest close for one symbol. Raises PriceLoadError on any failure."""
    yf = _get_yf()
    try:
        history = yf.Ticker(symbol).history(period="1d", timeout=timeout)
    except Exception as e:
        raise PriceLoadError(symbol, str(e) or type(e).__name__) from e

    if history is None or history.empty:
        raise PriceLoadError(symbol, "no price data")

    try:
        price = Decimal(str(float(history["Close"].iloc[-1]))).quantize(Decimal("0.01"))
    except (TypeError, ValueError, InvalidOperation) as e:
        raise PriceLoadError(symbol, f"invalid price: {e}") from e

    as_of = now_eastern()
    stamp = history.index[-1]
    if hasattr(stamp, "to_pydatetime"):
        stamp = stamp.to_pydatetime()
        if stamp.tzinfo is not None:
            as_of = stamp.astimezone(EASTERN_TZ)

    return CurrentPrice(symbol=symbol, price=price, as_of=as_of)


class YFinancePriceLoader:
    """
    Loads current prices from Yahoo Finance.

    One task per symbol on a ThreadPoolExecutor. The per-request timeout is
    passed through to yfinance. Call `close()` to shut the pool down.
    """

    def __init__(
        self,
        max_workers: int = DEFAULT_MAX_WORKERS,
        fetch_timeout_seconds: float = DEFAULT_FETCH_TIMEOUT_SECONDS,
    ):
        self._fetch_timeout = fetch_timeout_seconds
        self._executor = ThreadPoolExecutor(
            max_workers=max_workers,
            thread_name_prefix="price-loader",
        )

    def load(self, symbol: str) -> "Future[CurrentPrice]":
        """Submit a fetch for the symbol and return its future."""
        logger.debug("Submitting price fetch for %s", symbol)
        return self._executor.submit(_fetch_price, symbol, self._fetch_timeout)

    def close(self) -> None:
        """Shut down the worker pool without waiting for in-flight fetches."""
        self._executor.shutdown(wait=False, cancel_futures=True)
