from __future__ import annotations

from typing import List

from mvckit.core.facade import Facade
from mvckit.domain.notification import Notification
from mvckit.patterns.command import MacroCommand, SimpleCommand

TRACE: List[str] = []


class LoadPrefs(SimpleCommand):
    def execute(self, notification: Notification) -> None:
        TRACE.append(f"prefs:{notification.body}")


class LoadLayout(SimpleCommand):
    def execute(self, notification: Notification) -> None:
        TRACE.append(f"layout:{notification.body}")
        self.send_notification("LAYOUT_READY", notification.body)


class StartupCommand(MacroCommand):
    def initialize_macro_command(self) -> None:
        self.add_sub_command(LoadPrefs)
        self.add_sub_command(LoadLayout)


class CaptureCmd(SimpleCommand):
    instances: List["CaptureCmd"] = []

    def execute(self, notification: Notification) -> None:
        CaptureCmd.instances.append(self)
        TRACE.append(f"capture:{notification.body}")


def setup_function() -> None:
    TRACE.clear()
    CaptureCmd.instances.clear()


def test_simple_command_default_execute_returns_none():
    assert SimpleCommand().execute(Notification("X")) is None


def test_registered_simple_command_gets_fresh_instance_with_body():
    facade = Facade.get_instance()
    facade.register_command("DO", CaptureCmd)

    facade.send_notification("DO", 42)
    facade.send_notification("DO", 43)

    assert TRACE == ["capture:42", "capture:43"]
    assert CaptureCmd.instances[0] is not CaptureCmd.instances[1]
    assert all(cmd.facade is facade for cmd in CaptureCmd.instances)


def test_macro_command_runs_sub_commands_in_order():
    facade = Facade.get_instance()
    facade.register_command("STARTUP", StartupCommand)
    facade.register_command("LAYOUT_READY", CaptureCmd)

    facade.send_notification("STARTUP", "main")

    assert TRACE == ["prefs:main", "layout:main", "capture:main"]


def test_macro_command_consumes_its_sub_commands():
    macro = StartupCommand()
    macro.execute(Notification("STARTUP", "once"))
    macro.execute(Notification("STARTUP", "twice"))

    assert TRACE == ["prefs:once", "layout:once"]


def test_empty_macro_command_is_a_no_op():
    MacroCommand().execute(Notification("NOTHING"))
    assert TRACE == []


class _RecordingFacade:
    def __init__(self) -> None:
        self.sent = []

    def send_notification(self, name, body=None, type=None):
        self.sent.append((name, body, type))


class Announce(SimpleCommand):
    def execute(self, notification: Notification) -> None:
        self.send_notification("ANNOUNCED", notification.body)


class PlainStep:
    def execute(self, notification: Notification) -> None:
        TRACE.append(f"plain:{notification.body}")


class AnnounceMacro(MacroCommand):
    def initialize_macro_command(self) -> None:
        self.add_sub_command(Announce)
        self.add_sub_command(PlainStep)


def test_macro_command_shares_its_facade_with_sub_commands():
    singleton = Facade.get_instance()
    singleton.register_command("ANNOUNCED", CaptureCmd)
    injected = _RecordingFacade()

    AnnounceMacro(facade=injected).execute(Notification("GO", "x"))  # type: ignore[arg-type]

    assert injected.sent == [("ANNOUNCED", "x", None)]
    assert CaptureCmd.instances == []
    assert TRACE == ["plain:x"]
