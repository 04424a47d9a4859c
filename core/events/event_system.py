"""
Publish/subscribe bus connecting the settings store, the dialog and the
toast notifier without importing one another.

Events carried in this app (see ``EventType``):

- ``settings.changed``: published by ``AppSettingsDialog`` for every field
  the store reports, data ``{'bundle_identifier', 'key', 'value'}``;
  ``key`` is ``'*'`` after a reset, reload or snapshot import.
- ``settings.reset``: published by the dialog after Reset, data is the
  bundle identifier.
- ``resolution.changed``: published by ``GraphicsTab`` after a window size
  was committed, data ``{'width', 'height', 'tier'}``.
- ``toast.requested``: published by ``ToastNotifier.show_toast`` with a
  ``Toast`` payload; ``ToastPresenter`` is the only subscriber and shows it.

Everything runs on the Qt GUI thread, so handlers may touch widgets. The
lock only protects the subscription tables and history.
"""
from typing import Any, Callable, Dict, List, Optional
import threading
from collections import defaultdict
from core.logging.logger import get_logger
from core.events.event_types import Event, Subscription

logger = get_logger(__name__)


class EventSystem:
    """
    Event bus shared by one settings dialog session.

    ``main.py`` creates a single instance and hands it to the notifier, the
    presenter and the dialog. Subscribers are called synchronously, inside
    ``publish``, in priority order (higher first). A subscriber may stop
    propagation with ``event.mark_handled()``. The last ``max_history``
    events are kept for inspection.
    """

    def __init__(self, max_history: int = 200):
        self._subscriptions: Dict[str, List[Subscription]] = defaultdict(list)
        self._subscription_map: Dict[str, Subscription] = {}
        self._event_history: List[Event] = []
        self._max_history = max_history
        self._lock = threading.RLock()

        logger.debug("EventSystem initialized")

    def subscribe(
        self,
        event_type: str,
        callback: Callable[[Event], None],
        priority: int = 50,
        filter_fn: Optional[Callable[[Event], bool]] = None,
    ) -> str:
        """
        Subscribe to events of a specific type.

        Args:
            event_type: Type of event to subscribe to
            callback: Function to call when event is published
            priority: Priority (higher = called earlier), default 50
            filter_fn: Optional filter function

        Returns:
            str: Subscription ID for unsubscribing

        Raises:
            ValueError: If callback is not callable or event_type is empty
        """
        if not callable(callback):
            raise ValueError("Callback must be callable")

        if not isinstance(event_type, str) or not event_type.strip():
            raise ValueError("event_type must be a non-empty string")

        subscription = Subscription(callback, event_type, priority, filter_fn)

        with self._lock:
            self._subscriptions[event_type].append(subscription)
            self._subscription_map[subscription.id] = subscription
            self._subscriptions[event_type].sort()

        logger.debug("New subscription: %s for %s (priority=%s)", subscription.id, event_type, priority)
        return subscription.id

    def unsubscribe(self, subscription_id: str) -> None:
        """Remove a subscription created by subscribe()."""
        with self._lock:
            subscription = self._subscription_map.pop(subscription_id, None)
            if subscription is None:
                logger.warning("Unsubscribe called with unknown id: %s", subscription_id)
                return

            subscription.active = False

            remaining = [
                s for s in self._subscriptions.get(subscription.event_type, [])
                if s.id != subscription_id
            ]
            if remaining:
                self._subscriptions[subscription.event_type] = remaining
            else:
                self._subscriptions.pop(subscription.event_type, None)

        logger.debug("Unsubscribed: %s", subscription_id)

    def publish(self, event_type: str, data: Any = None, source: Any = None) -> Event:
        """
        Publish an event to all subscribers.

        Handler exceptions are logged and do not stop delivery to the
        remaining subscribers.

        Returns:
            Event: The published event object
        """
        if not isinstance(event_type, str) or not event_type.strip():
            raise ValueError("event_type must be a non-empty string")

        event = Event(event_type, data, source)

        with self._lock:
            matching_subs = list(self._subscriptions.get(event_type, []))

        if not matching_subs:
            logger.debug("No subscribers for event: %s", event_type)
        else:
            logger.debug("Publishing event: %s, subscribers=%d", event_type, len(matching_subs))

        for subscription in matching_subs:
            if event.is_handled:
                break
            try:
                subscription(event)
            except Exception as e:
                logger.error("Error in event handler %s for %s: %s", subscription.id, event_type, e, exc_info=True)

        self._add_to_history(event)
        return event

    def _add_to_history(self, event: Event) -> None:
        with self._lock:
            self._event_history.append(event)
            if len(self._event_history) > self._max_history:
                self._event_history = self._event_history[-self._max_history:]

    def get_event_history(self, limit: int = 100) -> List[Event]:
        """Return up to ``limit`` most recent events, oldest first."""
        with self._lock:
            return self._event_history[-limit:]

    def clear(self) -> None:
        """Clear all subscriptions and history."""
        with self._lock:
            self._subscriptions.clear()
            self._subscription_map.clear()
            self._event_history.clear()

        logger.debug("EventSystem cleared")

    def get_subscription_count(self) -> int:
        """Get total number of active subscriptions."""
        with self._lock:
            return len(self._subscription_map)

    def get_subscriptions_for_type(self, event_type: str) -> int:
        """Get number of subscriptions for a specific event type."""
        with self._lock:
            return len(self._subscriptions.get(event_type, []))
