"""
Observable values and subscription handles.

An ObservableValue holds a current value and notifies subscribers whenever it
changes. Subscribers receive the current value immediately on subscribe, then
one call per change. Every subscribe returns a Subscription handle; disposing
it stops delivery.
"""

import threading
from typing import Callable, Generic, Optional, TypeVar

T = TypeVar("T")

Handler = Callable[[T], None]


class Subscription:
    """Handle for a single subscriber. Dispose to stop receiving values."""

    def __init__(self, on_dispose: Optional[Callable[[], None]] = None):
        self._on_dispose = on_dispose
        self._disposed = False

    @property
    def is_disposed(self) -> bool:
        return self._disposed

    def dispose(self) -> None:
        """Release the subscription. Safe to call more than once."""
        if self._disposed:
            return
        self._disposed = True
        if self._on_dispose is not None:
            self._on_dispose()
            self._on_dispose = None

    def __enter__(self) -> "Subscription":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.dispose()


class CompositeSubscription(Subscription):
    """Owns several subscriptions and disposes them together."""

    def __init__(self):
        super().__init__()
        self._children: list[Subscription] = []

    def add(self, subscription: Subscription) -> None:
        """Track a subscription; disposes it at once if already disposed."""
        if self.is_disposed:
            subscription.dispose()
            return
        self._children.append(subscription)

    def __len__(self) -> int:
        return len(self._children)

    def dispose(self) -> None:
        if self.is_disposed:
            return
        super().dispose()
        children, self._children = self._children, []
        for child in children:
            child.dispose()


class ObservableValue(Generic[T]):
    """
    Thread-safe current value with change notification.

    Setting a value equal to the current one emits nothing. Handlers are
    called outside the lock, in subscription order.
    """

    def __init__(self, initial: T):
        self._value = initial
        self._lock = threading.RLock()
        self._handlers: dict[int, Handler] = {}
        self._next_id = 0

    @property
    def value(self) -> T:
        with self._lock:
            return self._value

    def set(self, value: T) -> bool:
        """Replace the current value. Returns True if subscribers were notified."""
        return self.update(lambda _: value)

    def update(self, func: Callable[[T], T]) -> bool:
        """Atomically replace the value with `func(current)`. Notifies like `set`."""
        with self._lock:
            value = func(self._value)
            if value == self._value:
                return False
            self._value = value
            handlers = list(self._handlers.values())
        for handler in handlers:
            handler(value)
        return True

    def subscribe(self, handler: Handler) -> Subscription:
        """Register a handler; it receives the current value right away."""
        # Initial delivery happens under the lock so no change can overtake it
        with self._lock:
            handler_id = self._next_id
            self._next_id += 1
            self._handlers[handler_id] = handler
            handler(self._value)
        return Subscription(lambda: self._unsubscribe(handler_id))

    @property
    def subscriber_count(self) -> int:
        with self._lock:
            return len(self._handlers)

    def _unsubscribe(self, handler_id: int) -> None:
        with self._lock:
            self._handlers.pop(handler_id, None)


def drop_first(handler: Handler, count: int = 1) -> Handler:
    """Wrap a handler so the first `count` values it would receive are ignored."""
    remaining = count
    lock = threading.Lock()

    def _wrapped(value):
        nonlocal remaining
        with lock:
            if remaining > 0:
                remaining -= 1
                return
        handler(value)

    return _wrapped
