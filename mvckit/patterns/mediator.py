from __future__ import annotations

from typing import Generic, List, Optional, TypeVar

from ..core.facade import Facade
from ..domain.notification import Notification
from .notifier import Notifier

ViewT = TypeVar("ViewT")


class Mediator(Notifier, Generic[ViewT]):
    """Bridge between one view component and the notification system.

    Subclasses override :meth:`list_notification_interests` to declare the
    names they care about and :meth:`handle_notification` to react. The
    interest list is read at registration and again at removal, so it should
    not change in between.
    """

    NAME = "Mediator"

    def __init__(
        self,
        mediator_name: Optional[str] = None,
        view_component: Optional[ViewT] = None,
        *,
        facade: Optional[Facade] = None,
    ) -> None:
        super().__init__(facade=facade)
        self._mediator_name = mediator_name if mediator_name is not None else self.NAME
        self._view_component = view_component

    @property
    def mediator_name(self) -> str:
        return self._mediator_name

    @property
    def view_component(self) -> Optional[ViewT]:
        return self._view_component

    @view_component.setter
    def view_component(self, value: Optional[ViewT]) -> None:
        self._view_component = value

    def list_notification_interests(self) -> List[str]:
        return []

    def handle_notification(self, notification: Notification) -> None:
        pass

    def on_register(self) -> None:
        pass

    def on_remove(self) -> None:
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self._mediator_name!r})"


__all__ = ["Mediator"]
