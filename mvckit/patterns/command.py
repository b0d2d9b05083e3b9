"""Command base classes executed by the Controller."""

from __future__ import annotations

from typing import List, Optional

from ..core.facade import Facade
from ..domain.notification import Notification
from ..domain.ports import CommandFactory
from .notifier import Notifier


class SimpleCommand(Notifier):
    """One-shot handler; the Controller builds a new instance per notification."""

    def execute(self, notification: Notification) -> None:
        pass


class MacroCommand(Notifier):
    """Run a fixed sequence of sub-commands with the same notification.

    Subclasses add their sub-command classes in
    :meth:`initialize_macro_command`. Each one is instantiated and executed
    in the order it was added; the list is consumed by :meth:`execute`.
    Sub-commands derived from :class:`Notifier` share the macro's facade;
    other factories are called with no arguments.
    """

    def __init__(self, *, facade: Optional[Facade] = None) -> None:
        super().__init__(facade=facade)
        self._sub_commands: List[CommandFactory] = []
        self.initialize_macro_command()

    def initialize_macro_command(self) -> None:
        pass

    def add_sub_command(self, command_class: CommandFactory) -> None:
        self._sub_commands.append(command_class)

    def execute(self, notification: Notification) -> None:
        while self._sub_commands:
            command_class = self._sub_commands.pop(0)
            if isinstance(command_class, type) and issubclass(command_class, Notifier):
                command = command_class(facade=self.facade)
            else:
                command = command_class()
            command.execute(notification)


__all__ = ["MacroCommand", "SimpleCommand"]
