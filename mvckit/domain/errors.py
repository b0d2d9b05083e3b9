"""Framework error types.

Two failure classes exist. Constructing a second core singleton is a
programming error and raises :class:`SingletonError`. Exceeding a configured
dispatch depth raises :class:`DispatchDepthError`. Everything else that
addresses an unknown name is a silent no-op and raises nothing.
"""

from __future__ import annotations


class MvcError(RuntimeError):
    """Base class for framework errors, carrying a stable code."""

    def __init__(self, code: str, message: str) -> None:
        super().__init__(message)
        self.code = code
        self.message = message


class SingletonError(MvcError):
    """Raised when a second View/Model/Controller/Facade is constructed."""

    def __init__(self, message: str) -> None:
        super().__init__("SINGLETON_VIOLATION", message)


class DispatchDepthError(MvcError):
    """Raised when nested notification dispatch exceeds the configured limit."""

    def __init__(self, name: str, limit: int) -> None:
        super().__init__(
            "DISPATCH_DEPTH_EXCEEDED",
            f"Dispatch of '{name}' exceeded max depth {limit}.",
        )
        self.name = name
        self.limit = limit


__all__ = ["DispatchDepthError", "MvcError", "SingletonError"]
