from __future__ import annotations

"""Notification value object routed through the View's observer map."""

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

BodyT = TypeVar("BodyT")


@dataclass
class Notification(Generic[BodyT]):
    """Named message with an optional payload and type tag.

    A fresh instance is built per ``send_notification`` call and handed to
    every observer of ``name`` in turn. ``body`` and ``type`` may be
    reassigned by handlers; ``name`` is the routing key.
    """

    name: str
    body: Optional[BodyT] = None
    type: Optional[str] = None

    def __post_init__(self) -> None:
        if not isinstance(self.name, str):
            raise TypeError("Notification name must be a string.")

    def __str__(self) -> str:
        body = "None" if self.body is None else str(self.body)
        kind = "None" if self.type is None else self.type
        return f"Notification Name: {self.name}\nBody:{body}\nType:{kind}"


__all__ = ["Notification"]
