"""View registry: observer fan-out and mediator bookkeeping.

The View owns two insertion-ordered maps. ``observer_map`` routes a
notification name to the observers interested in it, ``mediator_map`` holds
registered mediators by name. Every notification in the system, including
the ones that end up executing commands, is dispatched from here.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from ..domain.errors import DispatchDepthError, SingletonError
from ..domain.notification import Notification
from ..domain.observer import Observer
from ..domain.ports import MediatorPort
from .settings import CoreSettings


class View:
    """Process-wide registry of observers and mediators.

    Call chain:
        ``Facade.send_notification`` builds a :class:`Notification` and calls
        :meth:`notify_observers`. Mediators are registered through
        ``Facade.register_mediator``; the Controller registers one observer per
        command-mapped name through :meth:`register_observer`.
    """

    SINGLETON_MSG = "View singleton already constructed!"
    _instance: Optional["View"] = None

    @classmethod
    def get_instance(cls) -> "View":
        if View._instance is None:
            cls()
        return View._instance  # type: ignore[return-value]

    @classmethod
    def reset_instance(cls) -> None:
        """Free the singleton slot so a new View can be constructed."""
        View._instance = None

    def __init__(self, settings: Optional[CoreSettings] = None) -> None:
        """Claim the singleton slot and set up empty maps.

        Args:
            settings: Dispatch tracing/depth knobs. Defaults to
                :class:`CoreSettings` with no limit.

        Raises:
            SingletonError: A View already occupies the slot.
        """
        if View._instance is not None:
            raise SingletonError(self.SINGLETON_MSG)
        View._instance = self
        self._log = logging.getLogger(__name__)
        self.settings = settings or CoreSettings()
        self.mediator_map: Dict[str, MediatorPort] = {}
        self.observer_map: Dict[str, List[Observer]] = {}
        self._depth = 0
        self.initialize_view()

    def initialize_view(self) -> None:
        """Hook for subclasses; runs once at the end of construction."""

    # ------------------------------------------------------------------ #
    # Observers
    # ------------------------------------------------------------------ #
    def register_observer(self, name: str, observer: Observer) -> None:
        observers = self.observer_map.get(name)
        if observers is None:
            self.observer_map[name] = [observer]
        else:
            observers.append(observer)

    def remove_observer(self, name: str, notify_context: Any) -> None:
        """Drop the last-registered observer for ``name`` owned by ``notify_context``.

        Unknown names are ignored. The name's entry disappears once its list
        is empty.
        """
        observers = self.observer_map.get(name)
        if observers is None:
            return
        for index in range(len(observers) - 1, -1, -1):
            if observers[index].compare_notify_context(notify_context):
                del observers[index]
                break
        if not observers:
            del self.observer_map[name]

    def notify_observers(self, notification: Notification) -> None:
        """Invoke every observer of ``notification.name`` in registration order.

        The observer list is copied first, so handlers may register or remove
        observers (themselves included) without disturbing this dispatch.
        Exceptions raised by handlers propagate to the caller.

        Raises:
            DispatchDepthError: Nested dispatch exceeded
                ``settings.max_dispatch_depth``.
        """
        observers = self.observer_map.get(notification.name)
        if not observers:
            if self.settings.trace_notifications:
                self._log.debug("Notification '%s' has no observers", notification.name)
            return

        snapshot = list(observers)
        limit = self.settings.max_dispatch_depth
        if limit is not None and self._depth >= limit:
            raise DispatchDepthError(notification.name, limit)

        if self.settings.trace_notifications:
            self._log.debug(
                "Dispatch '%s' (type=%s) to %d observer(s) at depth %d",
                notification.name,
                notification.type,
                len(snapshot),
                self._depth,
            )

        self._depth += 1
        try:
            for observer in snapshot:
                observer.notify_observer(notification)
        finally:
            self._depth -= 1

    # ------------------------------------------------------------------ #
    # Mediators
    # ------------------------------------------------------------------ #
    def register_mediator(self, mediator: MediatorPort) -> None:
        """Store ``mediator`` and subscribe it to its notification interests.

        A name that is already registered is left untouched: the original
        mediator stays and no observer is added.
        """
        name = mediator.mediator_name
        if name in self.mediator_map:
            self._log.debug("Mediator '%s' already registered; ignoring", name)
            return

        self.mediator_map[name] = mediator
        interests = list(mediator.list_notification_interests())
        if interests:
            observer = Observer(mediator.handle_notification, mediator)
            for interest in interests:
                self.register_observer(interest, observer)
        self._log.debug("Registered mediator '%s' for %s", name, interests)
        mediator.on_register()

    def retrieve_mediator(self, name: str) -> Optional[MediatorPort]:
        return self.mediator_map.get(name)

    def remove_mediator(self, name: str) -> Optional[MediatorPort]:
        """Unsubscribe and drop a mediator.

        Returns:
            The removed mediator, or ``None`` when nothing was registered
            under ``name``.
        """
        mediator = self.mediator_map.get(name)
        if mediator is None:
            return None

        for interest in reversed(list(mediator.list_notification_interests())):
            self.remove_observer(interest, mediator)
        del self.mediator_map[name]
        self._log.debug("Removed mediator '%s'", name)
        mediator.on_remove()
        return mediator

    def has_mediator(self, name: str) -> bool:
        return name in self.mediator_map


__all__ = ["View"]
