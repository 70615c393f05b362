"""Detection of symbols whose current price still needs loading."""

from typing import Iterable

from current_prices.domain.models import Transaction


def transaction_symbols(transactions: Iterable[Transaction]) -> set[str]:
    """Return the distinct symbols referenced by transactions, skipping cash entries."""
    return {t.symbol for t in transactions if t.symbol}


def detect_missing_prices(
    transaction_symbols: Iterable[str],
    cached_symbols: Iterable[str],
) -> list[str]:
    """
    Return symbols referenced by transactions but absent from the price cache.

    Pure set difference, sorted so the result is deterministic.
    """
    return sorted(set(transaction_symbols) - set(cached_symbols))
