from __future__ import annotations

from typing import Any, List, Optional

from .interfaces import IMediator, INotification, IObserver
from .mediator_registry import MediatorRegistry
from .observer_registry import ObserverRegistry
from ..errors import AlreadyConstructedError
from ..settings import ViewSettings
from ..utils.logger import setup_logger


class View:
    """The process-wide registry of mediators and notification observers.

    Only one View may exist per process. Use ``View.get_instance()`` (or
    ``create_view()`` during setup) instead of calling the constructor; a
    second construction raises ``AlreadyConstructedError``. There is no way
    to tear the instance down.
    """

    _instance: Optional["View"] = None

    def __init__(self, settings: Optional[ViewSettings] = None):
        if View._instance is not None:
            raise AlreadyConstructedError()
        View._instance = self

        try:
            self.settings = settings or ViewSettings()
            self.logger = setup_logger(level=self.settings.log_level)
            self.observers = ObserverRegistry(trace_dispatch=self.settings.trace_dispatch)
            self.mediators = MediatorRegistry(self.observers)
            self.initialize_view()
        except Exception:
            # a half-built View must not occupy the slot
            View._instance = None
            raise

    def initialize_view(self) -> None:
        """Hook for subclasses; called once at the end of construction."""

    @classmethod
    def get_instance(cls) -> "View":
        if View._instance is None:
            cls()
        return View._instance  # type: ignore[return-value]

    # ------------------------------------------------------------------
    # Observers
    # ------------------------------------------------------------------

    def register_observer(self, notification_name: str, observer: IObserver) -> None:
        self.observers.register_observer(notification_name, observer)

    def notify_observers(self, notification: INotification) -> None:
        self.observers.notify_observers(notification)

    def remove_observer(self, notification_name: str, notify_context: Any) -> None:
        self.observers.remove_observer(notification_name, notify_context)

    # ------------------------------------------------------------------
    # Mediators
    # ------------------------------------------------------------------

    def register_mediator(self, mediator: IMediator) -> None:
        self.mediators.register_mediator(mediator)

    def retrieve_mediator(self, mediator_name: str) -> Optional[IMediator]:
        return self.mediators.retrieve_mediator(mediator_name)

    def remove_mediator(self, mediator_name: str) -> Optional[IMediator]:
        return self.mediators.remove_mediator(mediator_name)

    def has_mediator(self, mediator_name: str) -> bool:
        return self.mediators.has_mediator(mediator_name)

    def mediator_names(self) -> List[str]:
        return self.mediators.mediator_names()


def create_view(settings: Optional[ViewSettings] = None) -> View:
    """Construct the View explicitly during process setup.

    Fails fast with ``AlreadyConstructedError`` if a View already exists, so
    setup code cannot silently pick up an instance created elsewhere.
    Without explicit settings, they are read from the environment and
    ``.env``.
    """
    if View._instance is not None:
        raise AlreadyConstructedError()
    view = View(settings or ViewSettings.from_env())
    view.logger.debug("[view] created settings=%s", view.settings.to_dict())
    return view


def get_view() -> View:
    return View.get_instance()
