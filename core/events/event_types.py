"""
Event type definitions for PlayCover Settings.
"""
import time
import uuid
from dataclasses import dataclass, field
from typing import Any, Callable, Optional


@dataclass
class Event:
    """Base event class."""
    event_type: str
    data: Any = None
    source: Any = None
    id: str = field(default_factory=lambda: uuid.uuid4().hex[:8])
    timestamp: float = field(default_factory=time.time)
    is_handled: bool = False

    def mark_handled(self):
        """Mark this event as handled."""
        self.is_handled = True


@dataclass
class Subscription:
    """Subscription to an event type."""
    callback: Callable[[Event], None]
    event_type: str
    priority: int = 0
    filter_fn: Optional[Callable[[Event], bool]] = None
    id: str = field(default_factory=lambda: uuid.uuid4().hex[:8])
    active: bool = True

    def __call__(self, event: Event) -> None:
        """Call the subscription callback if filter passes."""
        if self.filter_fn is None or self.filter_fn(event):
            self.callback(event)

    def __lt__(self, other: 'Subscription') -> bool:
        """Sort by priority (higher first)."""
        return self.priority > other.priority


class EventType:
    """Event type constants."""
    # Settings events
    SETTINGS_CHANGED = "settings.changed"
    SETTINGS_RESET = "settings.reset"

    # Graphics events
    RESOLUTION_CHANGED = "resolution.changed"

    # Notification events
    TOAST_REQUESTED = "toast.requested"
