from __future__ import annotations

from typing import List

from mvckit.core.controller import Controller
from mvckit.core.view import View
from mvckit.domain.notification import Notification
from mvckit.domain.observer import Observer

EXECUTED: List[tuple] = []


class _CmdA:
    def __init__(self) -> None:
        self.ident = id(self)

    def execute(self, notification: Notification) -> None:
        EXECUTED.append(("A", self.ident, notification))


class _CmdB:
    def execute(self, notification: Notification) -> None:
        EXECUTED.append(("B", id(self), notification))


def setup_function() -> None:
    EXECUTED.clear()


def test_registered_command_runs_fresh_instance_per_notification():
    view = View()
    controller = Controller(view=view)
    controller.register_command("DO", _CmdA)

    first = Notification("DO", 42)
    second = Notification("DO", 43)
    view.notify_observers(first)
    view.notify_observers(second)

    assert [(kind, note.body) for kind, _, note in EXECUTED] == [("A", 42), ("A", 43)]
    assert EXECUTED[0][2] is first


def test_controller_falls_back_to_view_singleton():
    controller = Controller()
    assert controller.view is View.get_instance()


def test_reregistering_command_swaps_class_without_duplicate_observer():
    view = View()
    controller = Controller(view=view)

    controller.register_command("DO", _CmdA)
    controller.register_command("DO", _CmdB)
    view.notify_observers(Notification("DO"))

    assert len(view.observer_map["DO"]) == 1
    assert [kind for kind, _, _ in EXECUTED] == ["B"]


def test_remove_command_removes_mapping_and_observer():
    view = View()
    controller = Controller(view=view)
    controller.register_command("DO", _CmdA)

    controller.remove_command("DO")
    view.notify_observers(Notification("DO"))

    assert controller.has_command("DO") is False
    assert "DO" not in view.observer_map
    assert EXECUTED == []


def test_execute_and_remove_unknown_command_are_no_ops():
    controller = Controller(view=View())

    controller.execute_command(Notification("UNKNOWN"))
    controller.remove_command("UNKNOWN")

    assert EXECUTED == []
    assert controller.command_map == {}


def test_command_observer_coexists_with_other_observers_for_same_name():
    view = View()
    controller = Controller(view=view)
    seen: List[str] = []

    class _Listener:
        def handle(self, notification: Notification) -> None:
            seen.append("listener")

    listener = _Listener()
    view.register_observer("DO", Observer(listener.handle, listener))
    controller.register_command("DO", _CmdA)

    controller.remove_command("DO")
    view.notify_observers(Notification("DO"))

    assert seen == ["listener"]
    assert EXECUTED == []
