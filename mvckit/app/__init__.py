"""Application composition layer.

Owns construction and teardown of the core registries so application code
receives its facade explicitly instead of reaching for process globals.
"""

from .container import CoreContainer, reset_core

__all__ = ["CoreContainer", "reset_core"]
