"""User-facing alert sinks."""

from current_prices.ui.alerts import AlertSink, LoggingAlertSink, TkAlertSink

__all__ = [
    "AlertSink",
    "LoggingAlertSink",
    "TkAlertSink",
]
