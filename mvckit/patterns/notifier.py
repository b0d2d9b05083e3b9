from __future__ import annotations

from typing import Any, Optional

from ..core.facade import Facade


class Notifier:
    """Base giving mediators, proxies and commands ``send_notification``.

    The facade is resolved once, at construction. Pass ``facade`` explicitly
    when wiring by hand; otherwise the process-wide facade is used (and
    created if needed).
    """

    def __init__(self, *, facade: Optional[Facade] = None) -> None:
        self.facade: Facade = facade if facade is not None else Facade.get_instance()

    def send_notification(self, name: str, body: Any = None, type: Optional[str] = None) -> None:
        self.facade.send_notification(name, body, type)


__all__ = ["Notifier"]
