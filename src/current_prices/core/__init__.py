"""Core utilities and shared functionality."""

from current_prices.core.timezone import now_eastern, EASTERN_TZ
from current_prices.core.exceptions import AppError, PriceLoadError
from current_prices.core.observable import (
    ObservableValue,
    Subscription,
    CompositeSubscription,
    drop_first,
)

__all__ = [
    "now_eastern",
    "EASTERN_TZ",
    "AppError",
    "PriceLoadError",
    "ObservableValue",
    "Subscription",
    "CompositeSubscription",
    "drop_first",
]
