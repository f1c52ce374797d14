from viewcore import MediatorRegistry, Notification, ObserverRegistry

from conftest import RecordingMediator


def _registry():
    observers = ObserverRegistry()
    return observers, MediatorRegistry(observers)


def test_register_mediator_receives_interesting_notification():
    observers, mediators = _registry()
    a = RecordingMediator("A", ["X"])

    mediators.register_mediator(a)
    observers.notify_observers(Notification(name="X", body="payload"))

    assert a.registered == 1
    assert len(a.received) == 1
    assert a.received[0].get_name() == "X"
    assert a.received[0].get_body() == "payload"


def test_mediators_notified_in_registration_order():
    observers, mediators = _registry()
    log = []
    mediators.register_mediator(RecordingMediator("A", ["X"], log))
    mediators.register_mediator(RecordingMediator("B", ["X"], log))

    observers.notify_observers(Notification(name="X"))

    assert log == [("A", "X"), ("B", "X")]


def test_one_observer_shared_across_interests():
    observers, mediators = _registry()
    a = RecordingMediator("A", ["X", "Y", "Z"])

    mediators.register_mediator(a)

    shared = observers.get_observers("X")[0]
    assert observers.get_observers("Y")[0] is shared
    assert observers.get_observers("Z")[0] is shared
    assert shared.get_notify_context() is a


def test_mediator_without_interests_registers_no_observer():
    observers, mediators = _registry()
    quiet = RecordingMediator("Quiet")

    mediators.register_mediator(quiet)

    assert mediators.has_mediator("Quiet")
    assert quiet.registered == 1
    assert observers.notification_names() == []


def test_register_existing_name_is_noop():
    observers, mediators = _registry()
    original = RecordingMediator("A", ["X"])
    impostor = RecordingMediator("A", ["X", "Y"])

    mediators.register_mediator(original)
    mediators.register_mediator(impostor)

    assert mediators.retrieve_mediator("A") is original
    assert impostor.registered == 0
    assert original.registered == 1
    assert len(observers.get_observers("X")) == 1
    assert not observers.has_observers("Y")


def test_retrieve_unknown_mediator_returns_none():
    _, mediators = _registry()
    assert mediators.retrieve_mediator("Ghost") is None
    assert not mediators.has_mediator("Ghost")


def test_remove_unknown_mediator_returns_none():
    _, mediators = _registry()
    assert mediators.remove_mediator("Ghost") is None


def test_remove_mediator_strips_all_interests():
    observers, mediators = _registry()
    a = RecordingMediator("A", ["X", "Y"])
    mediators.register_mediator(a)

    removed = mediators.remove_mediator("A")

    assert removed is a
    assert a.removed == 1
    assert mediators.retrieve_mediator("A") is None
    assert not mediators.has_mediator("A")
    assert observers.notification_names() == []

    observers.notify_observers(Notification(name="X"))
    observers.notify_observers(Notification(name="Y"))
    assert a.received == []


def test_remove_mediator_leaves_other_listeners():
    observers, mediators = _registry()
    log = []
    mediators.register_mediator(RecordingMediator("A", ["X"], log))
    b = RecordingMediator("B", ["X"], log)
    mediators.register_mediator(b)

    mediators.remove_mediator("A")
    observers.notify_observers(Notification(name="X"))

    assert log == [("B", "X")]
    assert observers.get_observers("X")[0].get_notify_context() is b


def test_remove_then_register_again():
    observers, mediators = _registry()
    a = RecordingMediator("A", ["X"])
    mediators.register_mediator(a)
    mediators.remove_mediator("A")

    mediators.register_mediator(a)
    observers.notify_observers(Notification(name="X"))

    assert a.registered == 2
    assert len(a.received) == 1


def test_mediator_removing_itself_during_broadcast():
    observers, mediators = _registry()
    log = []

    class SelfRemoving(RecordingMediator):
        def handle_notification(self, notification):
            super().handle_notification(notification)
            mediators.remove_mediator(self.get_mediator_name())

    mediators.register_mediator(SelfRemoving("A", ["X"], log))
    mediators.register_mediator(RecordingMediator("B", ["X"], log))

    observers.notify_observers(Notification(name="X"))
    observers.notify_observers(Notification(name="X"))

    assert log == [("A", "X"), ("B", "X"), ("B", "X")]
    assert mediators.mediator_names() == ["B"]
