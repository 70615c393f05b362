"""Current price loading for transaction ledgers."""

__version__ = "0.1.0"
