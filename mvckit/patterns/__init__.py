"""Extension base classes application code subclasses."""

from .command import MacroCommand, SimpleCommand
from .mediator import Mediator
from .notifier import Notifier
from .proxy import Proxy

__all__ = ["MacroCommand", "Mediator", "Notifier", "Proxy", "SimpleCommand"]
