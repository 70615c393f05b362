"""View models for loaded market prices."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal


@dataclass(frozen=True)
class CurrentPrice:
    """Current market price for a symbol."""

    symbol: str
    price: Decimal
    as_of: datetime
