"""Generic observer list with isolated notification.

A picker session hands every accepted color to its observers through an
ObserverManager. One observer failing must never stop the others, nor
surface as an exception from the session operation that caused it.
"""

import logging
from threading import Lock
from typing import Any, Generic, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=object)


class ObserverManager(Generic[T]):
    """
    Ordered, duplicate-free list of observers.

    Type Parameters:
        T: The observer protocol type (e.g., ColorObserver)

    Observers are called in registration order. The list is copied under
    the lock and the callbacks run without it, so an observer may register
    or unregister others while being notified.

    Example:
        ```python
        observers = ObserverManager[ColorObserver](observer_type_name="color")
        observers.register(field)
        observers.notify("on_color_event", ColorEvent.HEX_EDITED, "#3B82F6")
        ```
    """

    def __init__(self, observer_type_name: str = "observer"):
        """
        Args:
            observer_type_name: Label used in log lines (e.g., "color")
        """
        self._observers: list[T] = []
        self._lock = Lock()
        self._observer_type_name = observer_type_name

    def register(self, observer: T) -> None:
        """Add ``observer``; registering it twice has no effect."""
        with self._lock:
            if observer in self._observers:
                logger.debug(f"{self._observer_type_name} observer already registered: {observer}")
                return
            self._observers.append(observer)
        logger.info(f"Registered {self._observer_type_name} observer: {observer}")

    def unregister(self, observer: T) -> None:
        """Remove ``observer``; unknown observers are ignored with a warning."""
        with self._lock:
            try:
                self._observers.remove(observer)
            except ValueError:
                logger.warning(
                    f"Attempted to unregister unknown {self._observer_type_name} observer: {observer}"
                )
                return
        logger.debug(f"Unregistered {self._observer_type_name} observer: {observer}")

    def notify(self, callback_name: str, *args: Any, **kwargs: Any) -> None:
        """
        Call ``callback_name(*args, **kwargs)`` on every observer.

        An observer without the callback, or whose callback raises, is
        logged and skipped.
        """
        with self._lock:
            observers = list(self._observers)

        for observer in observers:
            callback = getattr(observer, callback_name, None)
            if callback is None:
                logger.error(
                    f"{self._observer_type_name} observer {observer} has no method '{callback_name}'"
                )
                continue
            try:
                callback(*args, **kwargs)
            except Exception as e:
                logger.error(
                    f"Error notifying {self._observer_type_name} observer {observer} via {callback_name}: {e}",
                    exc_info=True,
                )
