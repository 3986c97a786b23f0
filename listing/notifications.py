"""Live event notifications.

When a rendered list contains an event that is happening right now, the
renderer hands a LiveEventUpdate to whatever sink it was given. A
LiveEventBus fans updates out to any number of listeners.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from labeling.models import Event

logger = logging.getLogger(__name__)

LIVE_EVENT_UPDATE = "live_event_update"


@dataclass(frozen=True)
class LiveEventUpdate:
    """An event that is live, found while rendering a list."""
    event: Event
    kind: str = field(default=LIVE_EVENT_UPDATE)


class LiveEventBus:
    """Synchronous publish/subscribe for live event updates.

    Listeners are called in subscription order. Delivery is best-effort:
    a listener that raises is logged and skipped.
    """

    def __init__(self):
        self._listeners = []

    def subscribe(self, listener) -> None:
        if listener not in self._listeners:
            self._listeners.append(listener)

    def unsubscribe(self, listener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    @property
    def listeners(self) -> list:
        return list(self._listeners)

    def publish(self, update: LiveEventUpdate) -> None:
        for listener in list(self._listeners):
            try:
                listener(update)
            except Exception:
                logger.warning(
                    "Live event listener %r failed for %s",
                    listener, update.event.key, exc_info=True,
                )


_default_bus: LiveEventBus | None = None


def default_bus() -> LiveEventBus:
    """Return the process-wide bus, creating it on first use."""
    global _default_bus
    if _default_bus is None:
        _default_bus = LiveEventBus()
    return _default_bus
