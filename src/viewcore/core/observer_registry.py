from __future__ import annotations

import logging
from typing import Any, Dict, List

from .interfaces import INotification, IObserver

logger = logging.getLogger("viewcore.observers")


class ObserverRegistry:
    """Maps notification names to ordered observer lists and broadcasts to them.

    A name is only present while it has at least one observer. Broadcasting
    iterates over a copy of the list, so observers added or removed by a
    callback only take effect from the next broadcast.
    """

    def __init__(self, trace_dispatch: bool = False):
        self._observer_map: Dict[str, List[IObserver]] = {}
        self.trace_dispatch = trace_dispatch

    def register_observer(self, notification_name: str, observer: IObserver) -> None:
        # No duplicate check: registering twice means two deliveries per broadcast
        observers = self._observer_map.get(notification_name)
        if observers is None:
            self._observer_map[notification_name] = [observer]
        else:
            observers.append(observer)
        logger.debug("[observer] registered name=%s count=%d", notification_name, len(self._observer_map[notification_name]))

    def notify_observers(self, notification: INotification) -> None:
        name = notification.get_name()
        observers_ref = self._observer_map.get(name)
        if observers_ref is None:
            return

        observers = list(observers_ref)
        if self.trace_dispatch:
            logger.debug("[dispatch] name=%s observers=%d", name, len(observers))
        for observer in observers:
            observer.notify_observer(notification)

    def remove_observer(self, notification_name: str, notify_context: Any) -> None:
        observers = self._observer_map.get(notification_name)
        if observers is None:
            return

        for i, observer in enumerate(observers):
            if observer.compare_notify_context(notify_context):
                del observers[i]
                logger.debug("[observer] removed name=%s remaining=%d", notification_name, len(observers))
                break

        if not observers:
            del self._observer_map[notification_name]

    # ------------------------------------------------------------------
    # Read-only introspection
    # ------------------------------------------------------------------

    def has_observers(self, notification_name: str) -> bool:
        return notification_name in self._observer_map

    def get_observers(self, notification_name: str) -> List[IObserver]:
        """Return a copy of the observer list for ``notification_name``."""
        return list(self._observer_map.get(notification_name, []))

    def notification_names(self) -> List[str]:
        return list(self._observer_map.keys())
