from __future__ import annotations

"""In-process notification registry for mediators and observers."""

from .errors import AlreadyConstructed, AlreadyConstructedError, ViewError
from .settings import ViewSettings
from .core.interfaces import IMediator, INotification, IObserver
from .core.observer_registry import ObserverRegistry
from .core.mediator_registry import MediatorRegistry
from .core.view import View, create_view, get_view
from .patterns.mediator import Mediator
from .patterns.notification import Notification
from .patterns.observer import Observer

__all__ = [
    "AlreadyConstructed",
    "AlreadyConstructedError",
    "ViewError",
    "ViewSettings",
    "IMediator",
    "INotification",
    "IObserver",
    "ObserverRegistry",
    "MediatorRegistry",
    "View",
    "create_view",
    "get_view",
    "Mediator",
    "Notification",
    "Observer",
]
