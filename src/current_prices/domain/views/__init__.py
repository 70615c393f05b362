"""View models for service outputs."""

from current_prices.domain.views.prices import CurrentPrice

__all__ = [
    "CurrentPrice",
]
