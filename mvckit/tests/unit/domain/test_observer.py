from mvckit.domain.notification import Notification
from mvckit.domain.observer import Observer


class _Handler:
    def __init__(self) -> None:
        self.received = []

    def handle(self, notification):
        self.received.append(notification)

    def __eq__(self, other):
        return isinstance(other, _Handler)

    def __hash__(self):
        return 0


def test_notify_observer_calls_method_with_notification():
    handler = _Handler()
    observer = Observer(handler.handle, handler)
    note = Notification("PING", body="x")

    observer.notify_observer(note)

    assert handler.received == [note]


def test_compare_notify_context_uses_identity_not_equality():
    first, second = _Handler(), _Handler()
    assert first == second

    observer = Observer(first.handle, first)

    assert observer.compare_notify_context(first) is True
    assert observer.compare_notify_context(second) is False


def test_observer_fields_can_be_rebound():
    old, new = _Handler(), _Handler()
    observer = Observer(old.handle, old)

    observer.notify_method = new.handle
    observer.notify_context = new
    observer.notify_observer(Notification("PING"))

    assert old.received == []
    assert len(new.received) == 1
    assert observer.compare_notify_context(new)
