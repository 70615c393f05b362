"""Alert sinks that surface price loading errors to the user."""

import logging
from typing import Protocol

logger = logging.getLogger(__name__)


class AlertSink(Protocol):
    """Fire-and-forget user notification. Must tolerate repeated calls."""

    def notify(self, title: str, message: str) -> None:
        ...


class LoggingAlertSink:
    """Alert sink for headless runs: writes alerts to the log."""

    def __init__(self, level: int = logging.WARNING):
        self._level = level

    def notify(self, title: str, message: str) -> None:
        logger.log(self._level, "%s: %s", title, message)


class TkAlertSink:
    """
    Shows alerts as a Tk error dialog.

    Price loads may complete on worker threads, so the dialog is scheduled on
    the Tk event loop with `after` instead of being opened directly.
    """

    def __init__(self, root):
        self._root = root

    def notify(self, title: str, message: str) -> None:
        self._root.after(0, self._show, title, message)

    def _show(self, title: str, message: str) -> None:
        from tkinter import messagebox

        messagebox.showerror(title, message, parent=self._root)
