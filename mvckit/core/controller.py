"""Controller registry mapping notification names to command classes."""

from __future__ import annotations

import logging
from typing import Dict, Optional

from ..domain.errors import SingletonError
from ..domain.notification import Notification
from ..domain.observer import Observer
from ..domain.ports import CommandFactory, ViewPort
from .view import View


class Controller:
    """Execute a fresh command instance for every matching notification.

    Call chain:
        ``register_command`` subscribes :meth:`execute_command` to the View
        for the command's notification name. The View then calls it like any
        other observer; the Controller looks up the class and runs it.
    """

    SINGLETON_MSG = "Controller singleton already constructed!"
    _instance: Optional["Controller"] = None

    @classmethod
    def get_instance(cls) -> "Controller":
        if Controller._instance is None:
            cls()
        return Controller._instance  # type: ignore[return-value]

    @classmethod
    def reset_instance(cls) -> None:
        Controller._instance = None

    def __init__(self, view: Optional[ViewPort] = None) -> None:
        """Claim the singleton slot.

        Args:
            view: View to subscribe command observers to. Falls back to
                ``View.get_instance()`` in :meth:`initialize_controller`.

        Raises:
            SingletonError: A Controller already occupies the slot.
        """
        if Controller._instance is not None:
            raise SingletonError(self.SINGLETON_MSG)
        Controller._instance = self
        self._log = logging.getLogger(__name__)
        self.view: Optional[ViewPort] = view
        self.command_map: Dict[str, CommandFactory] = {}
        self.initialize_controller()

    def initialize_controller(self) -> None:
        if self.view is None:
            self.view = View.get_instance()

    def execute_command(self, notification: Notification) -> None:
        command_class = self.command_map.get(notification.name)
        if command_class is None:
            return
        command = command_class()
        command.execute(notification)

    def register_command(self, name: str, command_class: CommandFactory) -> None:
        """Map ``name`` to ``command_class``.

        The View observer is installed only for the first mapping of a name;
        re-registering swaps the class in place.
        """
        if name not in self.command_map:
            self.view.register_observer(name, Observer(self.execute_command, self))
        else:
            self._log.debug("Replacing command for '%s'", name)
        self.command_map[name] = command_class

    def has_command(self, name: str) -> bool:
        return name in self.command_map

    def remove_command(self, name: str) -> None:
        if name not in self.command_map:
            return
        self.view.remove_observer(name, self)
        del self.command_map[name]
        self._log.debug("Removed command for '%s'", name)


__all__ = ["Controller"]
