from __future__ import annotations

from typing import Any, List, Optional

from ..core.interfaces import IMediator, INotification


class Mediator(IMediator):
    """Default mediator: no interests, no-op hooks.

    Subclasses usually override ``NAME``, ``list_notification_interests`` and
    ``handle_notification``.
    """

    NAME = "Mediator"

    def __init__(self, mediator_name: Optional[str] = None, view_component: Any = None):
        self.mediator_name = mediator_name if mediator_name is not None else self.NAME
        self.view_component = view_component

    def get_mediator_name(self) -> str:
        return self.mediator_name

    def get_view_component(self) -> Any:
        return self.view_component

    def set_view_component(self, view_component: Any) -> None:
        self.view_component = view_component

    def list_notification_interests(self) -> List[str]:
        return []

    def handle_notification(self, notification: INotification) -> None:
        pass

    def on_register(self) -> None:
        pass

    def on_remove(self) -> None:
        pass
