"""Domain package exports: notifications, observers, errors, ports."""

from .errors import DispatchDepthError, MvcError, SingletonError
from .notification import Notification
from .observer import Observer

__all__ = [
    "DispatchDepthError",
    "MvcError",
    "Notification",
    "Observer",
    "SingletonError",
]
