from __future__ import annotations

from typing import Any, Callable

from .notification import Notification

NotifyMethod = Callable[[Notification], None]


class Observer:
    """Pair a notify callback with the context that owns it.

    The context doubles as the removal handle: ``View.remove_observer`` drops
    the observer whose context is the very same object (identity, not
    equality), so two mediators that compare equal never evict each other.
    """

    def __init__(self, notify_method: NotifyMethod, notify_context: Any) -> None:
        self.notify_method = notify_method
        self.notify_context = notify_context

    def notify_observer(self, notification: Notification) -> None:
        """Invoke the callback with ``notification``."""
        self.notify_method(notification)

    def compare_notify_context(self, other: Any) -> bool:
        return other is self.notify_context

    def __repr__(self) -> str:
        method = getattr(self.notify_method, "__qualname__", repr(self.notify_method))
        return f"Observer(method={method}, context={type(self.notify_context).__name__})"


__all__ = ["NotifyMethod", "Observer"]
