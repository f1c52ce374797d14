from __future__ import annotations

import logging
from typing import Dict, List, Optional

from .interfaces import IMediator
from .observer_registry import ObserverRegistry
from ..patterns.observer import Observer

logger = logging.getLogger("viewcore.mediators")


class MediatorRegistry:
    """Keeps mediators by name and wires their interests into an ObserverRegistry."""

    def __init__(self, observers: ObserverRegistry):
        self.observers = observers
        self._mediator_map: Dict[str, IMediator] = {}

    def register_mediator(self, mediator: IMediator) -> None:
        """Register ``mediator`` and subscribe it to its notification interests.

        Re-registering a name that is already taken does nothing; the
        existing mediator must be removed first. One Observer is created per
        mediator and the same instance is added under every interest.
        """
        name = mediator.get_mediator_name()
        if name in self._mediator_map:
            logger.debug("[mediator] already registered name=%s", name)
            return

        self._mediator_map[name] = mediator

        interests = mediator.list_notification_interests()
        if len(interests) > 0:
            observer = Observer(mediator.handle_notification, mediator)
            for interest in interests:
                self.observers.register_observer(interest, observer)

        logger.debug("[mediator] registered name=%s interests=%s", name, list(interests))
        mediator.on_register()

    def retrieve_mediator(self, mediator_name: str) -> Optional[IMediator]:
        return self._mediator_map.get(mediator_name)

    def remove_mediator(self, mediator_name: str) -> Optional[IMediator]:
        mediator = self._mediator_map.get(mediator_name)
        if mediator is None:
            return None

        for interest in mediator.list_notification_interests():
            self.observers.remove_observer(interest, mediator)

        del self._mediator_map[mediator_name]
        logger.debug("[mediator] removed name=%s", mediator_name)
        mediator.on_remove()
        return mediator

    def has_mediator(self, mediator_name: str) -> bool:
        return mediator_name in self._mediator_map

    def mediator_names(self) -> List[str]:
        return list(self._mediator_map.keys())
