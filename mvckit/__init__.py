"""mvckit: notification-driven Model-View-Controller registries.

Typical wiring::

    from mvckit import CoreContainer, Mediator, Proxy, SimpleCommand

    container = CoreContainer()
    facade = container.build()
    facade.register_proxy(Proxy("user", {"id": 1}))
    facade.register_command("STARTUP", StartupCommand)
    facade.send_notification("STARTUP", body=app_window)
"""

from .app.container import CoreContainer, reset_core
from .core import Controller, CoreSettings, Facade, Model, View
from .domain import DispatchDepthError, MvcError, Notification, Observer, SingletonError
from .patterns import MacroCommand, Mediator, Notifier, Proxy, SimpleCommand

__version__ = "0.1.0"

__all__ = [
    "Controller",
    "CoreContainer",
    "CoreSettings",
    "DispatchDepthError",
    "Facade",
    "MacroCommand",
    "Mediator",
    "Model",
    "MvcError",
    "Notification",
    "Notifier",
    "Observer",
    "Proxy",
    "SimpleCommand",
    "SingletonError",
    "View",
    "reset_core",
]
