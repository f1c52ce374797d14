from __future__ import annotations

"""Contracts for the collaborators the view core talks to.

The registries only rely on the methods declared here, so any object that
provides them can be registered; the concrete classes in
``viewcore.patterns`` derive from these bases.
"""

from abc import ABC, abstractmethod
from typing import Any, List, Optional


class INotification(ABC):
    """A named message carrying an application-defined body."""

    @abstractmethod
    def get_name(self) -> str:
        ...

    @abstractmethod
    def get_body(self) -> Any:
        ...

    @abstractmethod
    def get_type(self) -> Optional[str]:
        ...


class IObserver(ABC):
    """A callback paired with the context it was registered for."""

    @abstractmethod
    def notify_observer(self, notification: INotification) -> None:
        """Deliver ``notification`` to the callback."""
        ...

    @abstractmethod
    def compare_notify_context(self, obj: Any) -> bool:
        """Return True if ``obj`` equals this observer's notify context."""
        ...


class IMediator(ABC):
    """A named component reacting to notifications on behalf of a view component."""

    @abstractmethod
    def get_mediator_name(self) -> str:
        ...

    @abstractmethod
    def get_view_component(self) -> Any:
        ...

    @abstractmethod
    def set_view_component(self, view_component: Any) -> None:
        ...

    @abstractmethod
    def list_notification_interests(self) -> List[str]:
        ...

    @abstractmethod
    def handle_notification(self, notification: INotification) -> None:
        ...

    @abstractmethod
    def on_register(self) -> None:
        ...

    @abstractmethod
    def on_remove(self) -> None:
        ...
