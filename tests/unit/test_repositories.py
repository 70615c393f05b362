"""
Unit tests for the in-memory transaction store and price cache.

Tests cover:
- Emission of the current list on subscribe and once per change
- Add / remove / replace semantics and errors
- Price cache snapshot isolation
"""

from decimal import Decimal

import pytest

from current_prices.core.exceptions import AppError
from current_prices.domain.models import Transaction, TransactionType
from current_prices.repositories.memory import InMemoryPriceCache, InMemoryTransactionStore

from tests.conftest import make_price


class TestInMemoryTransactionStore:
    """Tests for InMemoryTransactionStore."""

    def test_subscribe_emits_current_list(self, transaction_factory):
        txn = transaction_factory("AAA")
        store = InMemoryTransactionStore([txn])
        seen = []

        store.subscribe(seen.append)

        assert seen == [[txn]]

    def test_emits_once_per_change(self, transaction_store, transaction_factory):
        """
        GIVEN a subscriber
        WHEN a transaction is added, replaced and removed
        THEN the subscriber receives one list per change
        """
        seen = []
        transaction_store.subscribe(seen.append)
        txn = transaction_factory("AAA")

        transaction_store.add(txn)
        transaction_store.replace(
            Transaction(txn_id=txn.txn_id, txn_type=TransactionType.BUY, symbol="BBB")
        )
        transaction_store.remove(txn.txn_id)

        assert [[t.symbol for t in txns] for txns in seen] == [[], ["AAA"], ["BBB"], []]

    def test_add_duplicate_id_raises(self, transaction_store, transaction_factory):
        txn = transaction_factory("AAA")
        transaction_store.add(txn)

        with pytest.raises(AppError) as exc_info:
            transaction_store.add(txn)
        assert exc_info.value.code == "DUPLICATE"

    def test_remove_unknown_raises(self, transaction_store):
        with pytest.raises(AppError) as exc_info:
            transaction_store.remove("missing")
        assert exc_info.value.code == "NOT_FOUND"

    def test_current_returns_copy(self, transaction_store, transaction_factory):
        transaction_store.add(transaction_factory("AAA"))

        current = transaction_store.current()
        current.clear()

        assert len(transaction_store.current()) == 1

    def test_transaction_type_coerced_from_string(self):
        txn = Transaction(txn_id="t", txn_type="SELL", symbol="AAA")

        assert txn.txn_type == TransactionType.SELL
        assert txn.is_stock_transaction


class TestInMemoryPriceCache:
    """Tests for InMemoryPriceCache."""

    def test_put_and_get(self, price_cache):
        price_cache.put(make_price("AAA", "12.50"))

        assert price_cache.get("AAA").price == Decimal("12.50")
        assert price_cache.get("BBB") is None
        assert "AAA" in price_cache
        assert len(price_cache) == 1

    def test_snapshot_is_a_copy(self, price_cache):
        price_cache.put(make_price("AAA"))

        snapshot = price_cache.snapshot()
        snapshot.clear()

        assert "AAA" in price_cache

    def test_put_replaces_existing(self, price_cache):
        price_cache.put(make_price("AAA", "1.00"))
        price_cache.put(make_price("AAA", "2.00"))

        assert price_cache.get("AAA").price == Decimal("2.00")

    def test_subscribers_see_updates(self, price_cache):
        seen = []
        price_cache.subscribe(lambda prices: seen.append(sorted(prices)))

        price_cache.put(make_price("AAA"))
        price_cache.put(make_price("BBB"))
        price_cache.clear()

        assert seen == [[], ["AAA"], ["AAA", "BBB"], []]

    def test_fresh_cache_is_empty(self):
        assert InMemoryPriceCache().snapshot() == {}
