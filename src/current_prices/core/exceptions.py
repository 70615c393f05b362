"""Application-level exceptions."""


class AppError(Exception):
    """Base exception for application errors."""

    def __init__(self, message: str, code: str = "APP_ERROR"):
        self.message = message
        self.code = code
        super().__init__(message)


class PriceLoadError(AppError):
    """Raised when the current price for a symbol cannot be loaded."""

    def __init__(self, symbol: str, reason: str):
        self.symbol = symbol
        self.reason = reason
        super().__init__(
            f"Failed to load price for {symbol}: {reason}",
            code="PRICE_LOAD_ERROR",
        )
