"""Transaction domain model."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Optional

from current_prices.domain.models.enums import TransactionType


@dataclass(frozen=True)
class Transaction:
    """
    Ledger transaction entry.

    Only `symbol` matters for price loading. BUY/SELL carry a symbol;
    CASH_DEPOSIT/CASH_WITHDRAW usually do not and reference no instrument.
    """

    txn_id: str
    txn_type: TransactionType
    symbol: Optional[str] = None
    quantity: Optional[Decimal] = None
    price: Optional[Decimal] = None
    txn_time_est: Optional[datetime] = None
    note: Optional[str] = None

    def __post_init__(self) -> None:
        if isinstance(self.txn_type, str):
            object.__setattr__(self, "txn_type", TransactionType(self.txn_type))

    @property
    def is_stock_transaction(self) -> bool:
        """Return True if this is a BUY or SELL transaction."""
        return self.txn_type in (TransactionType.BUY, TransactionType.SELL)
