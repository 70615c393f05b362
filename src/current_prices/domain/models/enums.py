"""Enumerations for domain models."""

from enum import Enum


class TransactionType(str, Enum):
    """Types of ledger transactions."""

    BUY = "BUY"
    SELL = "SELL"
    CASH_DEPOSIT = "CASH_DEPOSIT"
    CASH_WITHDRAW = "CASH_WITHDRAW"


class LoadStatus(str, Enum):
    """Outcome of the most recent price load issued for a symbol."""

    PENDING = "PENDING"
    LOADED = "LOADED"
    FAILED = "FAILED"
