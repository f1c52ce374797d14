from __future__ import annotations

SINGLETON_MSG = "View Singleton already constructed!"


class ViewError(RuntimeError):
    """Base class for errors raised by the view core."""


class AlreadyConstructedError(ViewError):
    """Raised when the View singleton is constructed a second time."""

    def __init__(self, message: str = SINGLETON_MSG):
        super().__init__(message)


AlreadyConstructed = AlreadyConstructedError
