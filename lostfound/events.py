"""
Render hooks for the UI boundary.

The UI subscribes listeners that re-render a view; the pipelines fire the
matching event after each mutating operation. Delivery is fire-and-forget:
a failing listener is logged and never affects the operation or the other
listeners.
"""

import logging
from enum import Enum
from typing import Callable, Dict, List

logger = logging.getLogger(__name__)

Listener = Callable[[], None]


class RenderEvent(str, Enum):
    BROWSE_CHANGED = "browse_changed"
    MY_REPORTS_CHANGED = "my_reports_changed"
    NOTIFICATIONS_CHANGED = "notifications_changed"
    BADGE_CHANGED = "badge_changed"


class RenderHooks:
    """
    Listener registry keyed by render event.
    """

    def __init__(self):
        self._listeners: Dict[RenderEvent, List[Listener]] = {event: [] for event in RenderEvent}

    def subscribe(self, event: RenderEvent, listener: Listener) -> Callable[[], None]:
        """
        Register a listener.

        Returns:
            A function that removes the listener again
        """
        event = RenderEvent(event)
        self._listeners[event].append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners[event]:
                self._listeners[event].remove(listener)

        return unsubscribe

    def fire(self, *events: RenderEvent) -> None:
        for event in events:
            for listener in list(self._listeners[RenderEvent(event)]):
                try:
                    listener()
                except Exception:
                    logger.exception(f"Render listener failed for {RenderEvent(event).value}")
