"""Root logger setup for applications built on mvckit.

Library modules only ever call ``logging.getLogger(__name__)``; handlers and
levels are the application's business, applied once via
:func:`configure_root`.
"""

from __future__ import annotations

import logging
import os
from typing import Mapping, Optional

_DEFAULT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
_DEFAULT_DATEFMT = "%H:%M:%S"
_ENV_LEVEL = "MVCKIT_LOG_LEVEL"
_ENV_DEBUG = "MVCKIT_DEBUG"
_TRUTHY = {"1", "true", "yes", "on"}


def env_truthy(value: Optional[str]) -> bool:
    """Return True for the usual on/yes/1/true spellings."""
    if value is None:
        return False
    return value.strip().lower() in _TRUTHY


def _parse_level(value: Optional[str], fallback: int) -> int:
    text = (value or "").strip()
    if not text:
        return fallback
    if text.isdigit():
        # isdigit() accepts characters like "²" that int() rejects
        try:
            return int(text)
        except ValueError:
            return fallback
    candidate = getattr(logging, text.upper(), None)
    return candidate if isinstance(candidate, int) else fallback


def _env_level(environ: Mapping[str, str]) -> Optional[int]:
    explicit = environ.get(_ENV_LEVEL)
    if explicit and explicit.strip():
        return _parse_level(explicit, logging.INFO)
    if env_truthy(environ.get(_ENV_DEBUG)):
        return logging.DEBUG
    return None


def configure_root(
    default_level: int | str = logging.WARNING,
    *,
    environ: Optional[Mapping[str, str]] = None,
) -> int:
    """Configure the root logger with a compact format and return the level.

    ``MVCKIT_LOG_LEVEL`` (level name or number) wins over ``MVCKIT_DEBUG``
    (truthy -> DEBUG), which wins over ``default_level``. Unparseable values
    fall back instead of raising.

    Args:
        default_level: Level used when the environment sets nothing.
        environ: Mapping to read instead of ``os.environ`` (tests).
    """
    env = os.environ if environ is None else environ
    if isinstance(default_level, str):
        fallback = _parse_level(default_level, logging.WARNING)
    else:
        fallback = int(default_level)
    effective = _env_level(env) or fallback

    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(level=effective, format=_DEFAULT_FORMAT, datefmt=_DEFAULT_DATEFMT)
    root.setLevel(effective)
    return effective


__all__ = ["configure_root", "env_truthy"]
