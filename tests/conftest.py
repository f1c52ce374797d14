import pytest

from viewcore import Mediator, View, ViewSettings


class RecordingMediator(Mediator):
    """Mediator that records every hook call into a shared log."""

    def __init__(self, name, interests=(), log=None):
        super().__init__(name)
        self.interests = list(interests)
        self.log = log if log is not None else []
        self.received = []
        self.registered = 0
        self.removed = 0

    def list_notification_interests(self):
        return self.interests

    def handle_notification(self, notification):
        self.received.append(notification)
        self.log.append((self.get_mediator_name(), notification.get_name()))

    def on_register(self):
        self.registered += 1

    def on_remove(self):
        self.removed += 1


@pytest.fixture(autouse=True)
def _reset_view_singleton(monkeypatch):
    # The library has no teardown; tests get a clean slot and restore it afterwards
    monkeypatch.setattr(View, "_instance", None)


@pytest.fixture
def view():
    return View(ViewSettings())
