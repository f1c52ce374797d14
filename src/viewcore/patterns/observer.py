from __future__ import annotations

from typing import Any, Callable

from pydantic import BaseModel, ConfigDict

from ..core.interfaces import INotification, IObserver


class Observer(BaseModel, IObserver):
    """Pairs a notification callback with an opaque notify context.

    The context is only used to find the observer again on removal: two
    observers match when their contexts compare equal.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    notify_method: Callable[[Any], Any]
    notify_context: Any = None

    def __init__(self, notify_method: Callable[[Any], Any], notify_context: Any = None, **data: Any):
        super().__init__(notify_method=notify_method, notify_context=notify_context, **data)

    def get_notify_method(self) -> Callable[[Any], Any]:
        return self.notify_method

    def set_notify_method(self, notify_method: Callable[[Any], Any]) -> None:
        self.notify_method = notify_method

    def get_notify_context(self) -> Any:
        return self.notify_context

    def set_notify_context(self, notify_context: Any) -> None:
        self.notify_context = notify_context

    def notify_observer(self, notification: INotification) -> None:
        self.notify_method(notification)

    def compare_notify_context(self, obj: Any) -> bool:
        return obj == self.notify_context
