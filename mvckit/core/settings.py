from __future__ import annotations

import os
from dataclasses import asdict, dataclass, replace
from typing import Any, Dict, Mapping, Optional

from ..utils.logging import env_truthy

_ENV_TRACE = "MVCKIT_TRACE_NOTIFICATIONS"
_ENV_MAX_DEPTH = "MVCKIT_MAX_DISPATCH_DEPTH"


@dataclass(frozen=True)
class CoreSettings:
    """Typed runtime knobs for the View's dispatch loop.

    Attributes:
        trace_notifications: Emit a DEBUG record for every dispatched
            notification (name, type, observer count).
        max_dispatch_depth: Upper bound on nested ``notify_observers`` calls.
            ``None`` leaves recursion unbounded.
    """

    trace_notifications: bool = False
    max_dispatch_depth: Optional[int] = None

    def __post_init__(self) -> None:
        if self.max_dispatch_depth is not None:
            object.__setattr__(
                self,
                "max_dispatch_depth",
                _coerce_depth("max_dispatch_depth", self.max_dispatch_depth),
            )

    # ------------------------------------------------------------------
    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "CoreSettings":
        """Build settings from ``MVCKIT_*`` environment variables.

        Args:
            environ: Mapping to read instead of ``os.environ`` (tests).

        Raises:
            ValueError: ``MVCKIT_MAX_DISPATCH_DEPTH`` is not a positive integer.
        """
        env = os.environ if environ is None else environ
        depth_raw = (env.get(_ENV_MAX_DEPTH) or "").strip()
        return cls(
            trace_notifications=env_truthy(env.get(_ENV_TRACE)),
            max_dispatch_depth=_coerce_depth(_ENV_MAX_DEPTH, depth_raw) if depth_raw else None,
        )

    def apply_dict(self, payload: Mapping[str, Any]) -> "CoreSettings":
        """Return a copy with flat ``payload`` keys applied."""

        if not isinstance(payload, Mapping):
            raise ValueError("Settings payload must be a mapping of flat keys.")

        allowed = set(CoreSettings.__dataclass_fields__)
        unknown = sorted(set(payload) - allowed)
        if unknown:
            raise ValueError(f"Unknown settings keys: {', '.join(unknown)}")

        changes: Dict[str, Any] = {}
        if "trace_notifications" in payload:
            changes["trace_notifications"] = _coerce_bool(payload["trace_notifications"])
        if "max_dispatch_depth" in payload:
            value = payload["max_dispatch_depth"]
            changes["max_dispatch_depth"] = (
                None if value in (None, "") else _coerce_depth("max_dispatch_depth", value)
            )
        return replace(self, **changes)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def _coerce_bool(value: Any) -> bool:
    if isinstance(value, str):
        return env_truthy(value)
    return bool(value)


def _coerce_depth(field_name: str, value: Any) -> int:
    if isinstance(value, bool):
        raise ValueError(f"{field_name} must be a positive integer.")
    try:
        coerced = int(value)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"{field_name} must be a positive integer.") from exc
    if coerced < 1:
        raise ValueError(f"{field_name} must be a positive integer.")
    return coerced


__all__ = ["CoreSettings"]
