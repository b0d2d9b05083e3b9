"""Facade: one API surface over the Model, View and Controller registries.

Applications usually subclass :class:`Facade`, override
:meth:`Facade.initialize_controller` to map their startup commands, and then
talk only to the facade.
"""

from __future__ import annotations

from typing import Any, Optional

from ..domain.errors import SingletonError
from ..domain.notification import Notification
from ..domain.ports import (
    CommandFactory,
    ControllerPort,
    MediatorPort,
    ModelPort,
    ProxyPort,
    ViewPort,
)
from .controller import Controller
from .model import Model
from .view import View


class Facade:
    """Delegate registration, lookup and notification to the core registries.

    Collaborators passed to the constructor are used as-is; missing ones are
    fetched from the registries' ``get_instance`` during
    :meth:`initialize_facade`, so every delegate below can rely on all three
    being present.
    """

    SINGLETON_MSG = "Facade singleton already constructed!"
    _instance: Optional["Facade"] = None

    @classmethod
    def get_instance(cls) -> "Facade":
        if Facade._instance is None:
            cls()
        return Facade._instance  # type: ignore[return-value]

    @classmethod
    def reset_instance(cls) -> None:
        Facade._instance = None

    def __init__(
        self,
        *,
        model: Optional[ModelPort] = None,
        view: Optional[ViewPort] = None,
        controller: Optional[ControllerPort] = None,
    ) -> None:
        if Facade._instance is not None:
            raise SingletonError(self.SINGLETON_MSG)
        Facade._instance = self
        self.model: ModelPort = model  # type: ignore[assignment]
        self.view: ViewPort = view  # type: ignore[assignment]
        self.controller: ControllerPort = controller  # type: ignore[assignment]
        self.initialize_facade()

    # ------------------------------------------------------------------ #
    # Initialization hooks
    # ------------------------------------------------------------------ #
    def initialize_facade(self) -> None:
        self.initialize_model()
        self.initialize_controller()
        self.initialize_view()

    def initialize_model(self) -> None:
        if self.model is None:
            self.model = Model.get_instance()

    def initialize_controller(self) -> None:
        if self.controller is not None:
            return
        if self.view is not None and Controller._instance is None:
            # bind command observers to the view this facade notifies
            self.controller = Controller(view=self.view)
        else:
            self.controller = Controller.get_instance()

    def initialize_view(self) -> None:
        if self.view is None:
            self.view = View.get_instance()

    # ------------------------------------------------------------------ #
    # Commands
    # ------------------------------------------------------------------ #
    def register_command(self, name: str, command_class: CommandFactory) -> None:
        self.controller.register_command(name, command_class)

    def remove_command(self, name: str) -> None:
        self.controller.remove_command(name)

    def has_command(self, name: str) -> bool:
        return self.controller.has_command(name)

    # ------------------------------------------------------------------ #
    # Proxies
    # ------------------------------------------------------------------ #
    def register_proxy(self, proxy: ProxyPort) -> None:
        self.model.register_proxy(proxy)

    def retrieve_proxy(self, name: str) -> Optional[ProxyPort]:
        return self.model.retrieve_proxy(name)

    def remove_proxy(self, name: str) -> Optional[ProxyPort]:
        return self.model.remove_proxy(name)

    def has_proxy(self, name: str) -> bool:
        return self.model.has_proxy(name)

    # ------------------------------------------------------------------ #
    # Mediators
    # ------------------------------------------------------------------ #
    def register_mediator(self, mediator: MediatorPort) -> None:
        self.view.register_mediator(mediator)

    def retrieve_mediator(self, name: str) -> Optional[MediatorPort]:
        return self.view.retrieve_mediator(name)

    def remove_mediator(self, name: str) -> Optional[MediatorPort]:
        return self.view.remove_mediator(name)

    def has_mediator(self, name: str) -> bool:
        return self.view.has_mediator(name)

    # ------------------------------------------------------------------ #
    # Notifications
    # ------------------------------------------------------------------ #
    def notify_observers(self, notification: Notification) -> None:
        self.view.notify_observers(notification)

    def send_notification(self, name: str, body: Any = None, type: Optional[str] = None) -> None:
        """Build a :class:`Notification` and dispatch it synchronously."""
        self.notify_observers(Notification(name, body, type))


__all__ = ["Facade"]
