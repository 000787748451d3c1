"""
Observable Store - Single-Value Reactive State

Holds exactly one immutable snapshot of application state and notifies the
registered subscribers synchronously whenever that snapshot is replaced.
Replacing the snapshot is the only mutation the store supports.
"""

import logging
import threading
from typing import Any, Callable, Generic, List, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")
Listener = Callable[..., Any]


class StoreError(Exception):
    """Base exception for store errors"""
    pass


class ReentrantReplaceError(StoreError):
    """Raised when replace() is called while the store is notifying subscribers"""
    pass


class Subscription:
    """Handle returned by ObservableStore.subscribe()"""

    def __init__(self, store: "ObservableStore", callback: Listener, pass_value: bool = False):
        self._store = store
        self.callback = callback
        self.pass_value = pass_value
        self.active = True

    def notify(self, value: Any) -> None:
        if self.pass_value:
            self.callback(value)
        else:
            self.callback()

    def unsubscribe(self) -> None:
        """Stop receiving notifications. Safe to call more than once."""
        self._store.unsubscribe(self)

    def __enter__(self) -> "Subscription":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.unsubscribe()

    def __repr__(self):
        state = "active" if self.active else "inactive"
        return f"Subscription({self.callback!r}, {state})"


class ObservableStore(Generic[T]):
    """
    Single source of truth for one immutable snapshot.

    Subscribers are invoked in registration order, synchronously, before
    replace() returns. A subscriber that raises aborts the notification
    round: the error propagates to the caller of replace() and the
    remaining subscribers are not invoked for that round.

    The store lock is held while subscribers run. A subscriber must not
    block waiting on another thread that uses this store.
    """

    def __init__(self, initial: T):
        self._value = initial
        self._subscriptions: List[Subscription] = []
        self._lock = threading.RLock()
        self._notifying = False

    @property
    def value(self) -> T:
        return self._value

    def current(self) -> T:
        """Return the currently held snapshot."""
        return self._value

    def replace(self, next_value: T) -> None:
        """Swap the held snapshot and notify every current subscriber."""
        with self._lock:
            if self._notifying:
                raise ReentrantReplaceError(
                    "replace() called from inside a subscriber of the same store"
                )
            self._value = next_value
            subscribers = list(self._subscriptions)
            self._notifying = True
            try:
                for subscription in subscribers:
                    # Unsubscribed earlier in this round
                    if not subscription.active:
                        continue
                    try:
                        subscription.notify(next_value)
                    except Exception:
                        logger.exception("Subscriber %r failed, notification aborted", subscription.callback)
                        raise
            finally:
                self._notifying = False

    def subscribe(self, callback: Listener, pass_value: bool = False) -> Subscription:
        """
        Register a callback for every future replace().

        Args:
            callback: Called with no arguments, or with the new snapshot
                when pass_value is True
            pass_value: Whether to pass the new snapshot to the callback

        Returns:
            Subscription handle used to unsubscribe
        """
        subscription = Subscription(self, callback, pass_value)
        with self._lock:
            self._subscriptions.append(subscription)
        return subscription

    def unsubscribe(self, subscription: Subscription) -> None:
        """Remove a subscription. Unsubscribing twice is a no-op."""
        if subscription._store is not self:
            raise StoreError("Subscription belongs to a different store")
        with self._lock:
            if not subscription.active:
                return
            subscription.active = False
            self._subscriptions.remove(subscription)

    @property
    def subscriber_count(self) -> int:
        """Get the number of active subscriptions."""
        return len(self._subscriptions)

    def __repr__(self):
        return f"ObservableStore({self._value!r}, subscribers={self.subscriber_count})"
