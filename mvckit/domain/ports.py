from __future__ import annotations

"""Structural interfaces shared by the core registries and extension classes.

The registries in ``mvckit.core`` only depend on these protocols, so any
object with the right methods can be registered; the base classes in
``mvckit.patterns`` are the usual way to satisfy them.
"""

from typing import Any, Callable, List, Optional, Protocol

from .notification import Notification
from .observer import Observer


# ---- Extension points ----
class NotifierPort(Protocol):
    def send_notification(self, name: str, body: Any = None, type: Optional[str] = None) -> None: ...


class MediatorPort(NotifierPort, Protocol):
    """Component bridging a view element and the notification system."""

    @property
    def mediator_name(self) -> str: ...
    def list_notification_interests(self) -> List[str]: ...
    def handle_notification(self, notification: Notification) -> None: ...
    def on_register(self) -> None: ...
    def on_remove(self) -> None: ...


class ProxyPort(NotifierPort, Protocol):
    """Component guarding access to one data resource."""

    @property
    def proxy_name(self) -> str: ...
    def on_register(self) -> None: ...
    def on_remove(self) -> None: ...


class CommandPort(NotifierPort, Protocol):
    def execute(self, notification: Notification) -> None: ...


# Command classes are instantiated with no arguments, once per notification.
CommandFactory = Callable[[], CommandPort]


# ---- Registries ----
class ViewPort(Protocol):
    def register_observer(self, name: str, observer: Observer) -> None: ...
    def remove_observer(self, name: str, notify_context: Any) -> None: ...
    def notify_observers(self, notification: Notification) -> None: ...
    def register_mediator(self, mediator: MediatorPort) -> None: ...
    def retrieve_mediator(self, name: str) -> Optional[MediatorPort]: ...
    def remove_mediator(self, name: str) -> Optional[MediatorPort]: ...
    def has_mediator(self, name: str) -> bool: ...


class ModelPort(Protocol):
    def register_proxy(self, proxy: ProxyPort) -> None: ...
    def retrieve_proxy(self, name: str) -> Optional[ProxyPort]: ...
    def remove_proxy(self, name: str) -> Optional[ProxyPort]: ...
    def has_proxy(self, name: str) -> bool: ...


class ControllerPort(Protocol):
    def execute_command(self, notification: Notification) -> None: ...
    def register_command(self, name: str, command_class: CommandFactory) -> None: ...
    def has_command(self, name: str) -> bool: ...
    def remove_command(self, name: str) -> None: ...


__all__ = [
    "CommandFactory",
    "CommandPort",
    "ControllerPort",
    "MediatorPort",
    "ModelPort",
    "NotifierPort",
    "ProxyPort",
    "ViewPort",
]
