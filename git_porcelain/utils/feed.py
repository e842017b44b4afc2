"""Minimal observer list used by the state models to announce changes."""

from threading import Lock
from typing import Callable, Generic, List, TypeVar

from git_porcelain.logging_config import get_logger

logger = get_logger(__name__)

T = TypeVar("T")


class ChangeFeed(Generic[T]):
    """Holds subscriber callbacks and calls them with a published value.

    A failing subscriber is logged and skipped so it cannot stop the others
    or the model that publishes.
    """

    def __init__(self):
        self._subscribers: List[Callable[[T], None]] = []
        self._lock = Lock()

    def subscribe(self, callback: Callable[[T], None]) -> Callable[[], None]:
        """Register a callback. Returns a function that unsubscribes it."""
        with self._lock:
            self._subscribers.append(callback)

        def unsubscribe():
            self.unsubscribe(callback)

        return unsubscribe

    def unsubscribe(self, callback: Callable[[T], None]) -> None:
        with self._lock:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

    def publish(self, value: T) -> None:
        with self._lock:
            subscribers = list(self._subscribers)

        for callback in subscribers:
            try:
                callback(value)
            except Exception as e:
                logger.warning(f"Subscriber {callback!r} failed: {e}")

    def __len__(self) -> int:
        with self._lock:
            return len(self._subscribers)
